"""Construction of the codes attacked by the decoders."""

from __future__ import annotations

import random
from typing import Optional

import numpy as np

from pqcat.codes.code_utils import convert_to_systematic
from pqcat.codes.goppa import generate_goppa_parity_matrix, generate_valid_goppa_params
from pqcat.types import GoppaParams


class CodeGenerationError(ValueError):
    """Raised when a code cannot be built from the requested parameters."""


def generate_code(
    n: int, k: int, w: int, code_type: str
) -> tuple[np.ndarray, np.ndarray, Optional[GoppaParams]]:
    """Build (G, H, goppa_params) for a code family; goppa_params only for Goppa codes."""
    builders = {
        "random": lambda: (*generate_random_code(n, k), None),
        "hamming": lambda: (*generate_hamming_code(n, k), None),
        "goppa": lambda: generate_goppa_code(n, k, w),
        "qc": lambda: (*generate_qc_code(n, k), None),
    }
    builder = builders.get(code_type)
    if builder is None:
        raise CodeGenerationError(f"Unsupported code type '{code_type}'")
    try:
        return builder()
    except CodeGenerationError as exc:
        raise CodeGenerationError(f"Error generating {code_type} code: {exc}") from exc


def generate_random_code(n: int, k: int) -> tuple[np.ndarray, np.ndarray]:
    """A random systematic code: G = [I_k | P], H = [P^T | I_m]."""
    if k >= n:
        raise CodeGenerationError("k must be less than n")
    m = n - k
    p = np.array(
        [[random.randint(0, 1) for _ in range(m)] for _ in range(k)], dtype=np.uint8
    ).reshape(k, m)
    g = np.hstack([np.eye(k, dtype=np.uint8), p])
    h = np.hstack([p.T, np.eye(m, dtype=np.uint8)])
    return g, h


def generate_hamming_code(n: int, k: int) -> tuple[np.ndarray, np.ndarray]:
    """Columns 1..n written in binary, then put in systematic form."""
    if k > n:
        raise CodeGenerationError(f"k ({k}) must not exceed n ({n})")
    m = n - k
    h = np.zeros((m, n), dtype=np.uint8)
    for col in range(n):
        bits = format(col + 1, f"0{m}b")[:m]
        h[:, col] = [int(bit) for bit in bits]
    return convert_to_systematic(h)


def generate_goppa_code(
    n: int, k: int, t: int
) -> tuple[np.ndarray, np.ndarray, GoppaParams]:
    """A binary Goppa code correcting t errors, with the parameters that define it."""
    if n <= 0:
        raise CodeGenerationError(f"code length must be positive, got {n}")
    m = (n - 1).bit_length()
    if m * t > n or k > n - m * t:
        raise CodeGenerationError(
            f"Invalid Goppa code parameters: k ({k}) must be ≤ n - m*t "
            f"({n} - {m}*{t} = {n - m * t})"
        )
    goppa_poly, support, field = generate_valid_goppa_params(n, t)
    h = generate_goppa_parity_matrix(n, t, goppa_poly, support, field)
    g, h_systematic = convert_to_systematic(h)
    params = GoppaParams(field=field, goppa_poly=goppa_poly, support=support, t=t)
    return g, h_systematic, params


def generate_qc_code(n: int, k: int) -> tuple[np.ndarray, np.ndarray]:
    """A quasi-cyclic code made of sparse circulant blocks of size r = n - k."""
    r = n - k
    if r <= 0:
        raise CodeGenerationError(f"Invalid QC code parameters: n ({n}) must exceed k ({k})")
    if n % r != 0 or k % r != 0:
        raise CodeGenerationError(
            f"Invalid QC code parameters: both n ({n}) and k ({k}) "
            f"should be multiples of r ({r})"
        )
    p = r
    num_block_cols = n // p
    ones_per_row = min(2, p // 2)

    h = np.zeros((r, n), dtype=np.uint8)
    for block in range(num_block_cols):
        first_row = [0] * p
        for idx in random.sample(range(p), ones_per_row):
            first_row[idx] = 1
        for row in range(p):
            for col in range(p):
                h[row, block * p + col] = first_row[(col + row) % p]

    h[:, (num_block_cols - 1) * p :] = np.eye(p, dtype=np.uint8)
    return convert_to_systematic(h)