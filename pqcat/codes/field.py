"""Arithmetic in GF(2^m) and polynomials with coefficients in it."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

_WORD_MASK = 0xFFFFFFFF

# Reduction polynomials used for each supported extension degree.
_REDUCTION_POLYNOMIALS = {
    2: 0b111,
    3: 0b1011,
    4: 0b10011,
    5: 0b100101,
    6: 0b1000011,
    7: 0b10001001,
    8: 0b100011101,
    9: 0x100000B,
    10: 0x100003,
    11: 0x105,
    12: 0x1053,
    13: 0x201B,
    14: 0x100B,
    15: 0x100D,
    16: 0x1002D,
}


def _degree(value: int) -> int:
    return value.bit_length() - 1


def _carryless_multiply(a: int, b: int) -> int:
    result = 0
    shift = 0
    while b:
        if b & 1:
            result ^= (a << shift) & _WORD_MASK
        b >>= 1
        shift += 1
    return result


def _carryless_divide(a: int, b: int) -> int:
    if a == 0:
        return 0
    b_deg = _degree(b)
    a_deg = _degree(a)
    if a_deg < b_deg:
        return 0
    quotient = 0
    remainder = a
    for i in range(a_deg - b_deg, -1, -1):
        if remainder & (1 << (b_deg + i)):
            quotient |= 1 << i
            remainder ^= b << i
    return quotient


def _carryless_mod(a: int, b: int) -> int:
    b_deg = _degree(b)
    if b_deg == 0:
        return 0
    remainder = a
    while remainder >= b:
        rem_deg = _degree(remainder)
        if rem_deg < b_deg:
            break
        remainder ^= b << (rem_deg - b_deg)
    return remainder


@dataclass(frozen=True)
class FiniteField:
    """The field GF(2^m), elements held as bit patterns in ints."""

    m: int
    poly: Optional[int] = None

    def __post_init__(self) -> None:
        if not 2 <= self.m <= 16:
            raise ValueError("Field degree must be between 2 and 16")
        if self.poly is None:
            object.__setattr__(self, "poly", _REDUCTION_POLYNOMIALS[self.m])

    @property
    def order(self) -> int:
        """Number of elements in the field."""
        return 1 << self.m

    def field_add(self, a: int, b: int) -> int:
        """Addition in characteristic two is XOR."""
        return a ^ b

    def field_multiply(self, a: int, b: int) -> int:
        """Shift-and-add multiplication with reduction by the field polynomial."""
        if a == 0 or b == 0:
            return 0
        keep = (1 << (self.m + 1)) - 1
        top_bit = 1 << self.m
        result = 0
        a_acc = a
        while b:
            if b & 1:
                result ^= a_acc
            carry = a_acc & top_bit
            a_acc = (a_acc << 1) & _WORD_MASK
            if carry:
                a_acc ^= self.poly
            a_acc &= keep
            b >>= 1
        return result

    def inverse(self, a: int) -> int:
        """Multiplicative inverse found with the extended Euclidean algorithm."""
        if a == 0:
            raise ValueError("Cannot invert zero")
        r0, r1 = self.poly, a
        s0, s1 = 1, 0
        t0, t1 = 0, 1
        while r1 != 0:
            q = _carryless_divide(r0, r1)
            r2 = _carryless_mod(r0, r1)
            s0, s1 = s1, s0 ^ _carryless_multiply(q, s1)
            t0, t1 = t1, t0 ^ _carryless_multiply(q, t1)
            r0, r1 = r1, r2
        return t0


def trim_polynomial(poly: Sequence[int]) -> list[int]:
    """Return the polynomial without zero high-order coefficients (keeps at least one)."""
    trimmed = list(poly)
    while len(trimmed) > 1 and trimmed[-1] == 0:
        trimmed.pop()
    return trimmed


def evaluate_poly(poly: Sequence[int], x: int, field: FiniteField) -> int:
    """Evaluate a polynomial, lowest coefficient first, at x with Horner's rule."""
    if x == 0:
        return poly[0] if poly else 0
    if not poly:
        return 0
    result = poly[-1]
    for coefficient in reversed(poly[:-1]):
        result = field.field_add(field.field_multiply(result, x), coefficient)
    return result


def random_irreducible_poly(t: int, field: FiniteField) -> list[int]:
    """A random monic polynomial of degree t with a non-zero constant term."""
    poly = [random.randrange(field.order) for _ in range(t)]
    poly.append(1)
    if poly[0] == 0:
        poly[0] = 1
    return poly