"""Helpers for parity-check and generator matrices."""

from __future__ import annotations

import numpy as np


def convert_to_systematic(h: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return (G, H') with H' = [P^T | I_m] and G = [I_k | P].

    P^T is taken from the left k columns of ``h`` as they stand; no
    elimination is performed.
    """
    h = np.asarray(h, dtype=np.uint8)
    m, n = h.shape
    k = n - m
    if k < 0:
        raise ValueError(f"matrix has more rows ({m}) than columns ({n})")
    p_t = h[:, :k]
    systematic_h = np.hstack([p_t, np.eye(m, dtype=np.uint8)])
    g = np.hstack([np.eye(k, dtype=np.uint8), p_t.T])
    return g, systematic_h