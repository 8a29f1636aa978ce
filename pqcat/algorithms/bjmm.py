"""BJMM-style search: four random lists of partial syndromes merged towards the target."""

from __future__ import annotations

import functools
import itertools
import operator
import random
import time
from collections import defaultdict
from typing import Optional, Sequence

import numpy as np

from pqcat.algorithms.algorithm_utils import (
    LIST_SIZE,
    MAX_ITERATIONS,
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


def _pack(bits: Sequence[int]) -> int:
    """Pack a 0/1 sequence into an int, first entry in the lowest bit."""
    return sum(int(bit) << i for i, bit in enumerate(bits))


def _column_masks(h: np.ndarray) -> list[int]:
    return [_pack(column) for column in h.T]


def _build_list(
    part: Sequence[int], size: int, masks: Sequence[int]
) -> dict[int, list[list[int]]]:
    """LIST_SIZE random subsets of ``part`` grouped by their partial syndrome."""
    size = min(size, len(part))
    table: dict[int, list[list[int]]] = defaultdict(list)
    for _ in range(LIST_SIZE):
        selected = random.sample(part, size)
        key = functools.reduce(operator.xor, (masks[i] for i in selected), 0)
        table[key].append(selected)
    return dict(table)


def run_bjmm_algorithm(
    received_vector: Sequence[int], h: np.ndarray, n: int, weight: int
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Split the positions into four random parts and merge sampled subset lists."""
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()

    h = np.asarray(h, dtype=np.uint8)
    target = calculate_syndrome(received_vector, h)
    target_mask = _pack(target)
    peak = update_peak_memory(start_memory, 0)
    if n > h.shape[1]:
        raise ValueError(f"code length {n} exceeds matrix width {h.shape[1]}")
    masks = _column_masks(h)

    w1 = w2 = w3 = weight // 4
    w4 = weight - w1 - w2 - w3

    for _ in range(MAX_ITERATIONS):
        indices = list(range(n))
        random.shuffle(indices)
        quarter = n // 4
        part1 = indices[:quarter]
        part2 = indices[quarter : 2 * quarter]
        part3 = indices[2 * quarter : 3 * quarter]
        part4 = indices[3 * quarter :]

        list_a = _build_list(part1, w1, masks)
        list_b = _build_list(part2, w2, masks)
        list_c = _build_list(part3, w3, masks)
        list_d = _build_list(part4, w4, masks)

        for rep_a, subsets_a in list_a.items():
            for rep_b, subsets_b in list_b.items():
                needed_cd = target_mask ^ rep_a ^ rep_b
                for rep_c, subsets_c in list_c.items():
                    subsets_d = list_d.get(needed_cd ^ rep_c)
                    if subsets_d is None:
                        continue
                    for combo in itertools.product(
                        subsets_a, subsets_b, subsets_c, subsets_d
                    ):
                        candidate = [0] * n
                        for idx in itertools.chain.from_iterable(combo):
                            candidate[idx] = 1
                        if calculate_syndrome(candidate, h) == target:
                            return candidate, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)