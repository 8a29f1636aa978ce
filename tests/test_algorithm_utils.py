from math import comb

import numpy as np
import pytest

from pqcat.algorithms.algorithm_utils import (
    apply_errors,
    calculate_partial_syndrome,
    calculate_syndrome,
    generate_random_error_vector,
    generate_subsets,
)


@pytest.fixture
def h():
    rng = np.random.default_rng(3)
    return rng.integers(0, 2, size=(5, 12), dtype=np.uint8)


@pytest.mark.parametrize("n,weight", [(10, 0), (10, 3), (7, 7)])
def test_random_error_vector_weight(n, weight):
    vector = generate_random_error_vector(n, weight)
    assert len(vector) == n
    assert sum(vector) == weight
    assert set(vector) <= {0, 1}


def test_random_error_vector_weight_too_large():
    with pytest.raises(ValueError):
        generate_random_error_vector(4, 5)


def test_apply_errors_round_trip():
    codeword = [1, 0, 1, 1, 0, 0, 1]
    error = [0, 1, 0, 0, 0, 1, 1]
    received = apply_errors(codeword, error)
    assert received != codeword
    assert apply_errors(received, error) == codeword


def test_syndrome_of_zero_vector(h):
    assert calculate_syndrome([0] * 12, h) == [0] * 5


def test_syndrome_is_linear(h):
    a = generate_random_error_vector(12, 4)
    b = generate_random_error_vector(12, 3)
    combined = calculate_syndrome(apply_errors(a, b), h)
    separate = apply_errors(calculate_syndrome(a, h), calculate_syndrome(b, h))
    assert combined == separate


def test_syndrome_of_unit_vector_is_column(h):
    vector = [0] * 12
    vector[4] = 1
    assert calculate_syndrome(vector, h) == h[:, 4].tolist()


def test_syndrome_of_codeword_is_zero():
    h = np.array([[1, 1, 0, 1, 0, 0], [0, 1, 1, 0, 1, 0], [1, 0, 1, 0, 0, 1]], dtype=np.uint8)
    codeword = [1, 0, 0, 1, 0, 1]
    assert calculate_syndrome(codeword, h) == [0, 0, 0]


def test_partial_syndrome_matches_full(h):
    indices = [0, 3, 7, 11]
    vector = [0] * 12
    for i in indices:
        vector[i] = 1
    assert calculate_partial_syndrome(h, indices, 5) == calculate_syndrome(vector, h)


def test_partial_syndrome_empty_indices(h):
    assert calculate_partial_syndrome(h, [], 5) == [0] * 5


def test_partial_syndrome_too_many_rows(h):
    with pytest.raises(IndexError):
        calculate_partial_syndrome(h, [0], 6)


def test_generate_subsets_count_and_order():
    subsets = list(generate_subsets([4, 1, 9, 2], 2))
    assert len(subsets) == comb(4, 2)
    assert subsets[0] == [4, 1]
    assert subsets[-1] == [9, 2]
    assert all(len(s) == 2 for s in subsets)


def test_generate_subsets_edge_sizes():
    assert list(generate_subsets([1, 2, 3], 0)) == [[]]
    assert list(generate_subsets([1, 2], 3)) == []