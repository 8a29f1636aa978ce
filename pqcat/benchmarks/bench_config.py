"""Benchmark configurations and the standard parameter sets."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

_T = TypeVar("_T")


def _pick(table: Sequence[_T], index: int) -> _T:
    if not 0 <= index < len(table):
        raise IndexError(f"index {index} out of range 0..{len(table) - 1}")
    return table[index]


_HAMMING_SIZES = ((7, 4), (15, 11), (31, 26), (63, 57))
_HAMMING_WEIGHTS = (1, 3, 5, 7)
_GOPPA_SIZES = ((15, 7, 2), (31, 21, 2), (63, 51, 2), (127, 113, 2))
_GOPPA_WEIGHTS = ((62, 56, 1), (63, 51, 2), (63, 45, 3), (63, 39, 4))
_QC_SIZES = ((30, 20, 2), (60, 40, 2), (90, 60, 2), (120, 80, 2))
_QC_WEIGHTS = (1, 2, 3, 4)
_REAL_WORLD_GOPPA = (
    (2047, 1695, 27),
    (3487, 2719, 64),
    (4095, 3359, 96),
    (6939, 5412, 119),
)
_REAL_WORLD_QC = (
    (8190, 4095, 142),
    (16382, 8191, 159),
    (24573, 8191, 199),
)


@dataclass
class BenchmarkConfig:
    """What to benchmark and how often; p, l1 and l2 apply only to MMT."""

    runs: int = 100
    algorithm_name: str = "prange"
    n: int = 15
    k: int = 11
    w: int = 1
    code_type: str = "hamming"
    p: Optional[int] = None
    l1: Optional[int] = None
    l2: Optional[int] = None

    @classmethod
    def hamming_scaling_size(cls, size_index: int) -> "BenchmarkConfig":
        """Hamming codes of growing length with a single error."""
        n, k = _pick(_HAMMING_SIZES, size_index)
        return cls(n=n, k=k, w=1, code_type="hamming")

    @classmethod
    def hamming_scaling_weight(cls, weight_index: int) -> "BenchmarkConfig":
        """The (31, 26) Hamming code with growing error weight."""
        return cls(n=31, k=26, w=_pick(_HAMMING_WEIGHTS, weight_index), code_type="hamming")

    @classmethod
    def goppa_scaling_size(cls, size_index: int) -> "BenchmarkConfig":
        """Goppa codes of growing length correcting two errors."""
        n, k, w = _pick(_GOPPA_SIZES, size_index)
        return cls(n=n, k=k, w=w, code_type="goppa")

    @classmethod
    def goppa_scaling_weight(cls, weight_index: int) -> "BenchmarkConfig":
        """Goppa codes over GF(2^6) with growing correction capability."""
        n, k, w = _pick(_GOPPA_WEIGHTS, weight_index)
        return cls(n=n, k=k, w=w, code_type="goppa")

    @classmethod
    def qc_scaling_size(cls, size_index: int) -> "BenchmarkConfig":
        """Quasi-cyclic codes of growing length."""
        n, k, w = _pick(_QC_SIZES, size_index)
        return cls(n=n, k=k, w=w, code_type="qc")

    @classmethod
    def qc_scaling_weight(cls, weight_index: int) -> "BenchmarkConfig":
        """The (60, 40) quasi-cyclic code with growing error weight."""
        return cls(n=60, k=40, w=_pick(_QC_WEIGHTS, weight_index), code_type="qc")

    @classmethod
    def mmt_config(cls, n: int, k: int, w: int, code_type: str) -> "BenchmarkConfig":
        """An MMT benchmark with the default partition parameters."""
        return cls(
            runs=100,
            algorithm_name="mmt",
            n=n,
            k=k,
            w=w,
            code_type=code_type,
            p=2,
            l1=256,
            l2=256,
        )

    @classmethod
    def real_world_goppa(cls, security_level: int) -> "BenchmarkConfig":
        """Reduced Goppa parameters modelled on deployed security levels."""
        n, k, w = _pick(_REAL_WORLD_GOPPA, security_level)
        return cls(n=n, k=k, w=w, code_type="goppa")

    @classmethod
    def real_world_qc(cls, security_level: int) -> "BenchmarkConfig":
        """Quasi-cyclic parameters modelled on deployed security levels."""
        n, k, w = _pick(_REAL_WORLD_QC, security_level)
        return cls(n=n, k=k, w=w, code_type="qc")

    def with_algorithm(self, alg: str) -> "BenchmarkConfig":
        """A copy benchmarking the given algorithm."""
        return dataclasses.replace(self, algorithm_name=alg)

    def with_runs(self, runs: int) -> "BenchmarkConfig":
        """A copy with the given number of runs."""
        return dataclasses.replace(self, runs=runs)

    def with_mmt_params(self, p: int, l1: int, l2: int) -> "BenchmarkConfig":
        """A copy with the given MMT partition parameters."""
        return dataclasses.replace(self, p=p, l1=l1, l2=l2)