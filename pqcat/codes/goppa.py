"""Parameter selection and parity-check matrices for binary Goppa codes."""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from pqcat.codes.field import FiniteField, evaluate_poly, random_irreducible_poly


def _field_degree(n: int) -> int:
    """Smallest m with 2^m >= n."""
    if n <= 0:
        raise ValueError(f"code length must be positive, got {n}")
    return (n - 1).bit_length()


def _count_roots(poly: Sequence[int], field: FiniteField) -> int:
    return sum(1 for x in range(1, field.order) if evaluate_poly(poly, x, field) == 0)


def generate_valid_goppa_params(
    n: int, t: int
) -> tuple[list[int], list[int], FiniteField]:
    """Choose a Goppa polynomial of degree t and a support of up to n field elements.

    Returns (goppa_poly, support, field). The support may be shorter than n
    when the field does not have enough non-roots of the chosen polynomial.
    """
    m = _field_degree(n)
    field = FiniteField(m)
    max_support_size = field.order - 1

    if t == 1 and n == max_support_size:
        return generate_valid_goppa_params(max_support_size - 1, t)
    if n > max_support_size:
        return generate_valid_goppa_params(max_support_size, t)

    nearly_full = max_support_size >= 10 and n > max_support_size - 10
    attempts = 20 if nearly_full else 10

    best_poly: list[int] = []
    min_roots = max_support_size
    for _ in range(attempts):
        poly = random_irreducible_poly(t, field)
        root_count = _count_roots(poly, field)
        if root_count < min_roots:
            min_roots = root_count
            best_poly = poly
            if root_count <= max_support_size - n:
                break

    if min_roots > max_support_size - n:
        adjusted_n = max_support_size - min_roots
        if adjusted_n < n // 2 and t > 1:
            return generate_valid_goppa_params(n, t - 1)
        return generate_valid_goppa_params(adjusted_n, t)

    non_roots = [
        x for x in range(1, field.order) if evaluate_poly(best_poly, x, field) != 0
    ]
    if len(non_roots) < n:
        return generate_valid_goppa_params(len(non_roots), t)

    random.shuffle(non_roots)
    return best_poly, non_roots[:n], field


def generate_goppa_parity_matrix(
    n: int,
    t: int,
    goppa_poly: Sequence[int],
    support: Sequence[int],
    field: FiniteField,
) -> np.ndarray:
    """Binary (t*m x n) parity-check matrix with columns L_j^i / g(L_j)."""
    if len(support) < n:
        raise ValueError(
            f"Support vector too small: has {len(support)} elements but need {n}"
        )
    m = field.m
    h = np.zeros((t * m, n), dtype=np.uint8)
    for j, element in enumerate(support[:n]):
        g_value = evaluate_poly(goppa_poly, element, field)
        if g_value == 0:
            raise ValueError(f"Invalid support: g(L[{j}])=0")
        inv_g = field.inverse(g_value)
        power = 1
        for i in range(t):
            value = field.field_multiply(power, inv_g)
            for bit in range(m):
                h[i * m + bit, j] = (value >> bit) & 1
            power = field.field_multiply(power, element)
    return h