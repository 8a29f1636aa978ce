import random

import pytest

from pqcat.algorithms.algorithm_utils import (
    apply_errors,
    calculate_syndrome,
    generate_random_error_vector,
)
from pqcat.algorithms.patterson import (
    berlekamp_massey,
    compute_syndrome_polynomial,
    evaluate_poly_horner,
    find_roots,
    run_patterson_algorithm,
)
from pqcat.codes.field import FiniteField, evaluate_poly, random_irreducible_poly
from pqcat.codes.goppa import generate_goppa_parity_matrix, generate_valid_goppa_params
from pqcat.types import GoppaParams


def _goppa(n, t, seed):
    random.seed(seed)
    poly, support, field = generate_valid_goppa_params(n, t)
    real_t = len(poly) - 1
    h = generate_goppa_parity_matrix(len(support), real_t, poly, support, field)
    params = GoppaParams(field=field, goppa_poly=poly, support=support, t=real_t)
    return params, h


@pytest.mark.parametrize("seed", range(5))
def test_horner_matches_evaluate_poly(seed):
    random.seed(seed)
    field = FiniteField(5)
    poly = random_irreducible_poly(4, field)
    for x in range(field.order):
        assert evaluate_poly_horner(poly, x, field) == evaluate_poly(poly, x, field)


def test_horner_empty_polynomial_is_zero():
    field = FiniteField(3)
    assert evaluate_poly_horner([], 5, field) == 0


@pytest.mark.parametrize("seed", range(4))
def test_syndrome_of_zero_vector_is_zero(seed):
    params, _ = _goppa(15, 2, seed)
    n = len(params.support)
    syndrome = compute_syndrome_polynomial(
        [0] * n, params.support, params.goppa_poly, params.field, n
    )
    assert syndrome == [0] * params.t


@pytest.mark.parametrize("seed", range(4))
def test_syndrome_is_linear(seed):
    params, _ = _goppa(15, 2, seed)
    n = len(params.support)
    e1 = generate_random_error_vector(n, 2)
    e2 = generate_random_error_vector(n, 3)
    args = (params.support, params.goppa_poly, params.field, n)
    s1 = compute_syndrome_polynomial(e1, *args)
    s2 = compute_syndrome_polynomial(e2, *args)
    s12 = compute_syndrome_polynomial(apply_errors(e1, e2), *args)
    assert s12 == [a ^ b for a, b in zip(s1, s2)]


@pytest.mark.parametrize("seed", range(4))
def test_syndrome_matches_parity_matrix(seed):
    params, h = _goppa(15, 2, seed)
    n = len(params.support)
    m = params.field.m
    e = generate_random_error_vector(n, 2)
    syndrome = compute_syndrome_polynomial(
        e, params.support, params.goppa_poly, params.field, n
    )
    binary = calculate_syndrome(e, h)
    for i, coefficient in enumerate(syndrome):
        bits = [(coefficient >> bit) & 1 for bit in range(m)]
        assert bits == binary[i * m : (i + 1) * m]


def test_syndrome_skips_zero_support_element():
    field = FiniteField(4)
    syndrome = compute_syndrome_polynomial([1, 0], [0, 3], [1, 1, 1], field, 2)
    assert syndrome == [0, 0]


def test_syndrome_rejects_short_support():
    field = FiniteField(4)
    with pytest.raises(IndexError):
        compute_syndrome_polynomial([1, 1, 1], [2, 3], [1, 1, 1], field, 3)


def test_berlekamp_massey_zero_syndrome_gives_one():
    field = FiniteField(4)
    assert berlekamp_massey([0, 0, 0, 0], field, 2) == [1]


@pytest.mark.parametrize("seed", range(5))
def test_berlekamp_massey_degree_bounded(seed):
    random.seed(seed)
    field = FiniteField(5)
    t = 3
    syndrome = [random.randrange(field.order) for _ in range(2 * t)]
    sigma = berlekamp_massey(syndrome, field, t)
    assert 1 <= len(sigma) <= t + 1


def test_find_roots_trivial_polynomials():
    field = FiniteField(4)
    support = [1, 2, 3, 4]
    assert find_roots([5], support, field, 4) == []
    assert find_roots([0, 0, 0], support, field, 4) == []


def test_find_roots_linear(capsys):
    field = FiniteField(4)
    support = [1, 2, 7, 9]
    assert find_roots([7, 1], support, field, 4) == [2]
    assert "Confirmed error at position 2" in capsys.readouterr().out


def test_find_roots_respects_n():
    field = FiniteField(4)
    support = [1, 2, 7, 9]
    assert find_roots([7, 1], support, field, 2) == []


@pytest.mark.parametrize("seed", range(3))
def test_zero_received_vector_decodes_to_zero(seed):
    params, h = _goppa(15, 2, seed)
    n = len(params.support)
    decoded, metrics = run_patterson_algorithm([0] * n, h, params, 2)
    assert decoded == [0] * n
    assert metrics.time >= 0


@pytest.mark.parametrize("n,t", [(15, 2), (31, 3)])
@pytest.mark.parametrize("seed", range(3))
def test_single_error_is_corrected(n, t, seed):
    params, h = _goppa(n, t, seed)
    length = len(params.support)
    error = generate_random_error_vector(length, 1)
    decoded, _ = run_patterson_algorithm(error, h, params, 1)
    assert decoded is not None
    assert len(decoded) == length
    assert not any(calculate_syndrome(apply_errors(error, decoded), h))


@pytest.mark.parametrize("seed", range(3))
def test_two_errors_with_t_two_are_corrected(seed):
    params, h = _goppa(15, 2, seed)
    length = len(params.support)
    error = generate_random_error_vector(length, min(2, params.t))
    decoded, _ = run_patterson_algorithm(error, h, params, 2)
    assert decoded is not None
    assert len(decoded) == length
    assert set(decoded) <= {0, 1}
    assert not any(calculate_syndrome(apply_errors(error, decoded), h))