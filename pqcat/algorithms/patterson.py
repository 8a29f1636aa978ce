"""Algebraic decoding of binary Goppa codes with brute-force fallbacks."""

from __future__ import annotations

import itertools
import time
from typing import Iterable, Optional, Sequence

import numpy as np

from pqcat.algorithms.algorithm_utils import apply_errors, calculate_syndrome
from pqcat.algorithms.metrics import (
    AlgorithmMetrics,
    start_memory_tracking,
    update_peak_memory,
)
from pqcat.codes.field import FiniteField, evaluate_poly, trim_polynomial
from pqcat.types import GoppaParams

_MAX_PATTERNS = 10000


def _finish(start_time: int, start_memory: int, peak: int) -> AlgorithmMetrics:
    peak = update_peak_memory(start_memory, peak)
    elapsed = (time.perf_counter_ns() - start_time) // 1000
    return AlgorithmMetrics(time=elapsed, peak_memory=peak)


def _error_vector(n: int, positions: Iterable[int]) -> list[int]:
    vector = [0] * n
    for pos in positions:
        vector[pos] = 1
    return vector


def _corrects(received: Sequence[int], trial: Sequence[int], h: np.ndarray) -> bool:
    """True when received XOR trial lies in the kernel of h."""
    return not any(calculate_syndrome(apply_errors(received, trial), h))


def compute_syndrome_polynomial(
    received: Sequence[int],
    support: Sequence[int],
    goppa_poly: Sequence[int],
    field: FiniteField,
    n: int,
) -> list[int]:
    """Coefficients of S(z) = sum over set positions of 1/(z - L_i) mod g(z), as powers of L_i."""
    if n > len(received) or n > len(support):
        raise IndexError(
            f"need {n} positions, got {len(received)} received bits "
            f"and {len(support)} support elements"
        )
    t = len(goppa_poly) - 1
    syndrome = [0] * t
    for bit, x in zip(received[:n], support[:n]):
        if bit != 1 or x == 0:
            continue
        g_x = evaluate_poly(goppa_poly, x, field)
        if g_x == 0:
            continue
        g_x_inv = field.inverse(g_x)
        x_pow = 1
        for j in range(t):
            syndrome[j] ^= field.field_multiply(g_x_inv, x_pow)
            x_pow = field.field_multiply(x_pow, x)
    return syndrome


def berlekamp_massey(syndrome: Sequence[int], field: FiniteField, t: int) -> list[int]:
    """Error locator polynomial (lowest coefficient first, degree at most t)."""
    sequence = list(syndrome)
    if len(sequence) < 2 * t:
        sequence.extend([0] * (2 * t - len(sequence)))

    connection = [1]
    previous = [1]
    lfsr_length = 0
    last_discrepancy = 1
    since_change = 1

    for step in range(2 * t):
        discrepancy = sequence[step]
        for i in range(1, lfsr_length + 1):
            if i < len(connection):
                discrepancy ^= field.field_multiply(connection[i], sequence[step - i])

        if discrepancy == 0:
            since_change += 1
            continue

        saved = list(connection)
        factor = field.field_multiply(discrepancy, field.inverse(last_discrepancy))
        shifted = [0] * since_change + [
            field.field_multiply(c, factor) for c in previous
        ]
        if len(shifted) > len(connection):
            connection.extend([0] * (len(shifted) - len(connection)))
        for i, value in enumerate(shifted):
            connection[i] ^= value
        connection = trim_polynomial(connection)

        if 2 * lfsr_length <= step:
            lfsr_length = step + 1 - lfsr_length
            previous = saved
            last_discrepancy = discrepancy
            since_change = 1
        else:
            since_change += 1

    connection.reverse()
    return connection[: t + 1]


def evaluate_poly_horner(poly: Sequence[int], x: int, field: FiniteField) -> int:
    """Evaluate a polynomial, lowest coefficient first, by Horner's rule."""
    result = 0
    for coefficient in reversed(poly):
        result = field.field_add(field.field_multiply(result, x), coefficient)
    return result


def find_roots(
    sigma: Sequence[int], support: Sequence[int], field: FiniteField, n: int
) -> list[int]:
    """Positions among the first n support elements at which sigma vanishes."""
    if len(sigma) <= 1 or not any(sigma):
        return []
    positions = []
    for i, x in enumerate(support[:n]):
        if evaluate_poly(sigma, x, field) == 0 or evaluate_poly_horner(sigma, x, field) == 0:
            print(f"Confirmed error at position {i}, x={x:#x}")
            positions.append(i)
    return positions


def _extend_syndrome(syndrome: list[int], field: FiniteField, t: int) -> list[int]:
    extended = list(syndrome)
    if len(extended) >= 2 * t:
        return extended
    original_length = len(extended)
    extended.extend([0] * (2 * t - original_length))
    if t > 2:
        for i in range(original_length, 2 * t):
            value = 0
            for j in range(1, i // 2 + 1):
                if j < original_length and i - j < original_length:
                    value ^= field.field_multiply(extended[j], extended[i - j])
            extended[i] = value
    return extended


def _brute_force_candidates(n: int, t: int, w: int) -> Iterable[tuple[int, ...]]:
    if w == 1:
        return ((i,) for i in range(n))
    if t == 2:
        return itertools.islice(itertools.combinations(range(n), 2), _MAX_PATTERNS)
    if t in (3, 4):
        return itertools.islice(itertools.combinations(range(n), t), _MAX_PATTERNS - 1)
    return ()


def run_patterson_algorithm(
    received_vector: Sequence[int],
    h: np.ndarray,
    goppa_params: GoppaParams,
    w: int,
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    """Locate errors via the syndrome polynomial, falling back to small searches."""
    start_time = time.perf_counter_ns()
    start_memory = start_memory_tracking()
    peak = update_peak_memory(start_memory, 0)

    support = goppa_params.support
    goppa_poly = goppa_params.goppa_poly
    field = goppa_params.field
    t = goppa_params.t
    n = len(received_vector)

    syndrome = compute_syndrome_polynomial(received_vector, support, goppa_poly, field, n)
    if not any(syndrome):
        return [0] * n, _finish(start_time, start_memory, peak)

    extended = _extend_syndrome(syndrome, field, t)
    sigma = berlekamp_massey(extended, field, t)
    error_positions = find_roots(sigma, support, field, n)
    error_vector = _error_vector(n, error_positions)

    if error_positions and _corrects(received_vector, error_vector, h):
        return error_vector, _finish(start_time, start_memory, peak)

    if t > 2 and error_positions and len(error_positions) < t:
        known = set(error_positions)
        remaining_t = t - len(error_positions)
        tried = 0
        for combo in itertools.combinations(range(n), remaining_t):
            if tried >= _MAX_PATTERNS:
                break
            if known.intersection(combo):
                continue
            trial = list(error_vector)
            for pos in combo:
                trial[pos] = 1
            if _corrects(received_vector, trial, h):
                return trial, _finish(start_time, start_memory, peak)
            tried += 1

    if t <= 4:
        for combo in _brute_force_candidates(n, t, w):
            trial = _error_vector(n, combo)
            if _corrects(received_vector, trial, h):
                return trial, _finish(start_time, start_memory, peak)

    return None, _finish(start_time, start_memory, peak)