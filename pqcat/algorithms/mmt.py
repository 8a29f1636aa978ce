"""MMT-style search in syndrome space over fixed partitions of the positions."""

from __future__ import annotations

import functools
import itertools
import operator
import random
import time
from collections import defaultdict
from typing import Optional, Sequence

import numpy as np

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


def _partition_weights(weight: int, p: int) -> list[int]:
    if p == 2:
        return [weight // 2, weight - weight // 2]
    base, remainder = divmod(weight, p)
    return [base + 1 if i < remainder else base for i in range(p)]


def _partitions(n: int, p: int) -> list[list[int]]:
    size = n // p
    bounds = [i * size for i in range(p)] + [n]
    return [list(range(start, end)) for start, end in zip(bounds, bounds[1:])]


def _build_list(
    count: int,
    parts: Sequence[tuple[list[int], int]],
    masks: Sequence[int],
) -> dict[int, list[list[int]]]:
    """``count`` random subsets drawn from the given (partition, weight) pairs."""
    table: dict[int, list[list[int]]] = defaultdict(list)
    for _ in range(count):
        subset: list[int] = []
        for partition, part_weight in parts:
            if part_weight > 0 and partition:
                subset.extend(
                    random.sample(partition, min(part_weight, len(partition)))
                )
        key = functools.reduce(operator.xor, (masks[i] for i in subset), 0)
        table[key].append(subset)
    return dict(table)


def run_mmt_algorithm(
    h: np.ndarray,
    syndrome: Sequence[int],
    n: int,
    weight: int,
    p: int = 2,
    l1: int = 256,
    l2: int = 256,
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Find a weight-``weight`` vector e with H e^T equal to ``syndrome``.

    The first n positions are cut into p contiguous partitions (p is at least 2);
    l1 subsets are sampled from the first half of them and l2 from the rest.
    """
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()
    peak = update_peak_memory(start_memory, 0)

    h = np.asarray(h, dtype=np.uint8)
    if n > h.shape[1]:
        raise ValueError(f"code length {n} exceeds matrix width {h.shape[1]}")
    p = max(p, 2)
    masks = [_pack(column) for column in h.T]
    target = _pack(np.asarray(syndrome, dtype=np.uint8).tolist())

    weights = _partition_weights(weight, p)
    partitions = _partitions(n, p)
    pairs = list(zip(partitions, weights))
    half = p // 2

    l1_map = _build_list(l1, pairs[:half], masks)
    l2_map = _build_list(l2, pairs[half:], masks)

    for s1, subsets1 in l1_map.items():
        subsets2 = l2_map.get(target ^ s1)
        if subsets2 is None:
            continue
        for subset1, subset2 in itertools.product(subsets1, subsets2):
            candidate = [0] * n
            for idx in itertools.chain(subset1, subset2):
                candidate[idx] = 1
            if sum(candidate) != weight:
                continue
            check = functools.reduce(
                operator.xor, (masks[i] for i, bit in enumerate(candidate) if bit), 0
            )
            if check == target:
                return candidate, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)