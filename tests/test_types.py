import dataclasses

from pqcat.codes.field import FiniteField
from pqcat.types import (
    BenchmarkResult,
    BenchmarkStats,
    CodeParams,
    GoppaParams,
    PartitionParams,
)


def test_partition_params_defaults():
    params = PartitionParams()
    assert (params.p, params.l1, params.l2) == (2, 1, 1)


def test_partition_params_accepts_none():
    params = PartitionParams(p=None, l1=256, l2=None)
    assert params.p is None
    assert params.l1 == 256
    assert params.l2 is None


def test_code_params_replace_is_independent():
    original = CodeParams(n=15, k=11, w=1, code_type="hamming")
    changed = dataclasses.replace(original, code_type="random", w=3)
    assert original.code_type == "hamming"
    assert original.w == 1
    assert changed == CodeParams(15, 11, 3, "random")


def test_goppa_params_holds_field():
    field = FiniteField(5)
    params = GoppaParams(field=field, goppa_poly=[1, 0, 1], support=[1, 2, 3], t=2)
    assert params.field.m == 5
    assert params.support == [1, 2, 3]
    assert params.t == len(params.goppa_poly) - 1


def test_benchmark_result_equality():
    assert BenchmarkResult(10, 20, True) == BenchmarkResult(
        duration=10, memory=20, success=True
    )
    assert BenchmarkResult(10, 20, True) != BenchmarkResult(10, 20, False)


def test_benchmark_stats_defaults_are_zero():
    stats = BenchmarkStats()
    assert stats.completed_runs == 0
    assert stats.successful_runs == 0
    assert stats.median_time == 0.0
    assert stats.memory_ci_upper == 0.0