"""Ball-collision style search with randomly sampled half-weight lists."""

from __future__ import annotations

import random
import time
from typing import Optional, Sequence

import numpy as np

from pqcat.algorithms.algorithm_utils import (
    LIST_SIZE,
    MAX_ITERATIONS,
    calculate_partial_syndrome,
    calculate_syndrome,
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


def _samples(part: Sequence[int], size: int):
    """LIST_SIZE random subsets of ``part``, skipping empty ones."""
    size = min(size, len(part))
    for _ in range(LIST_SIZE):
        selected = random.sample(part, size)
        if selected:
            yield selected


def run_ball_collision_algorithm(
    received_vector: Sequence[int], h: np.ndarray, n: int, weight: int
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Collide syndromes of random subsets from two random halves of the positions."""
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()

    target = tuple(calculate_syndrome(received_vector, h))
    peak = update_peak_memory(start_memory, 0)
    r = np.asarray(h).shape[0]

    p1 = weight // 2
    p2 = weight - p1

    for _ in range(MAX_ITERATIONS):
        indices = list(range(n))
        random.shuffle(indices)
        half = n // 2
        part1, part2 = indices[:half], indices[half:]

        list1 = {
            tuple(calculate_partial_syndrome(h, selected, r)): selected
            for selected in _samples(part1, p1)
        }

        for selected in _samples(part2, p2):
            partial = calculate_partial_syndrome(h, selected, r)
            needed = tuple(t ^ s for t, s in zip(target, partial))
            match = list1.get(needed)
            if match is None:
                continue
            candidate = [0] * n
            for i in (*match, *selected):
                candidate[i] = 1
            if tuple(calculate_syndrome(candidate, h)) == target:
                return candidate, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)