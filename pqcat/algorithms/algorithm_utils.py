"""Shared helpers for the decoding attacks."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Iterator, Sequence

import numpy as np

MAX_ITERATIONS = 100
LIST_SIZE = 512


def generate_random_error_vector(n: int, weight: int) -> list[int]:
    """A length-n 0/1 vector with exactly ``weight`` ones at random positions."""
    if weight > n:
        raise ValueError("Weight must be less than or equal to the length of the vector")
    error_vector = [0] * n
    for i in random.sample(range(n), weight):
        error_vector[i] = 1
    return error_vector


def apply_errors(codeword: Sequence[int], error_vector: Sequence[int]) -> list[int]:
    """XOR an error vector onto a codeword."""
    return [c ^ e for c, e in zip(codeword, error_vector)]


def calculate_syndrome(error_vector: Sequence[int], h: np.ndarray) -> list[int]:
    """H * e^T over GF(2)."""
    h = np.asarray(h, dtype=np.uint8)
    e = np.asarray(error_vector, dtype=np.uint8)
    width = min(h.shape[1], e.shape[0])
    products = h[:, :width] & e[:width]
    return np.bitwise_xor.reduce(products, axis=1).tolist()


def generate_subsets(indices: Iterable[int], size: int) -> Iterator[list[int]]:
    """All size-element subsets of ``indices`` in lexicographic position order."""
    for combo in itertools.combinations(indices, size):
        yield list(combo)


def calculate_partial_syndrome(
    h: np.ndarray, indices: Iterable[int], r: int
) -> list[int]:
    """XOR of the first r entries of the selected columns of h."""
    h = np.asarray(h, dtype=np.uint8)
    if r > h.shape[0]:
        raise IndexError(f"matrix has {h.shape[0]} rows, {r} requested")
    columns = h[:r, list(indices)]
    return np.bitwise_xor.reduce(columns, axis=1).tolist()