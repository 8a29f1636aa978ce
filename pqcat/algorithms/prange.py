"""Prange's information-set style search by random guessing of error supports."""

from __future__ import annotations

import random
import time
from typing import Optional, Sequence

import numpy as np

from pqcat.algorithms.algorithm_utils import MAX_ITERATIONS, calculate_syndrome
from pqcat.algorithms.metrics import (
    AlgorithmMetrics,
    start_memory_tracking,
    update_peak_memory,
)


def _finish(start_time: int, start_memory: int, peak: int) -> AlgorithmMetrics:
    peak = update_peak_memory(start_memory, peak)
    elapsed = (time.perf_counter_ns() - start_time) // 1000
    return AlgorithmMetrics(time=elapsed, peak_memory=peak)


def run_prange_algorithm(
    received_vector: Sequence[int], h: np.ndarray, weight: int
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Try random weight-``weight`` vectors until one has the received syndrome."""
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()

    target = calculate_syndrome(received_vector, h)
    peak = update_peak_memory(start_memory, 0)
    n = np.asarray(h).shape[1]
    if weight > n:
        raise ValueError(f"weight {weight} exceeds code length {n}")
    indices = list(range(n))

    for _ in range(MAX_ITERATIONS):
        random.shuffle(indices)
        candidate = [0] * n
        for i in indices[:weight]:
            candidate[i] = 1
        if calculate_syndrome(candidate, h) == target:
            return candidate, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)