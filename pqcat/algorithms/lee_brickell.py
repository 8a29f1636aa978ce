"""Lee-Brickell style split search over all subsets of each half."""

from __future__ import annotations

import random
import time
from typing import Optional, Sequence

import numpy as np

from pqcat.algorithms.algorithm_utils import (
    calculate_partial_syndrome,
    calculate_syndrome,
    generate_subsets,
)
from pqcat.algorithms.metrics import (
    AlgorithmMetrics,
    start_memory_tracking,
    update_peak_memory,
)


def _finish(start_time: int, start_memory: int, peak: int) -> AlgorithmMetrics:
    peak = update_peak_memory(start_memory, peak)
    elapsed = (time.perf_counter_ns() - start_time) // 1000
    return AlgorithmMetrics(time=elapsed, peak_memory=peak)


def _syndrome_table(
    indices: Sequence[int], size: int, h: np.ndarray, r: int
) -> dict[tuple[int, ...], list[int]]:
    return {
        tuple(calculate_partial_syndrome(h, subset, r)): subset
        for subset in generate_subsets(indices, size)
    }


def run_lee_brickell_algorithm(
    received_vector: Sequence[int], h: np.ndarray, n: int, weight: int
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Split the first n positions in two and match half-weight subset syndromes.

    The method is meant for even weights; odd weights are accepted and split
    as weight // 2 on the left and the rest on the right.
    """
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()

    target = calculate_syndrome(received_vector, h)
    peak = update_peak_memory(start_memory, 0)
    r = np.asarray(h).shape[0]
    m = n // 2 + n % 2

    left_indices = list(range(m))
    right_indices = list(range(m, n))
    random.shuffle(left_indices)
    random.shuffle(right_indices)

    left_weight = weight // 2
    right_weight = weight - left_weight
    left_map = _syndrome_table(left_indices, left_weight, h, r)
    right_map = _syndrome_table(right_indices, right_weight, h, r)

    for left_syndrome, left_subset in left_map.items():
        complement = tuple(t ^ s for t, s in zip(target, left_syndrome))
        right_subset = right_map.get(complement)
        if right_subset is not None:
            candidate = [0] * n
            for i in (*left_subset, *right_subset):
                candidate[i] = 1
            return candidate, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)