"""Plain records shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pqcat.codes.field import FiniteField


@dataclass
class GoppaParams:
    """The field, Goppa polynomial and support defining a binary Goppa code."""

    field: FiniteField
    goppa_poly: list[int]
    support: list[int]
    t: int


@dataclass
class CodeParams:
    """Length, dimension, error weight and family of a code."""

    n: int
    k: int
    w: int
    code_type: str


@dataclass
class PartitionParams:
    """Partition settings for the MMT attack."""

    p: Optional[int] = 2
    l1: Optional[int] = 1
    l2: Optional[int] = 1


@dataclass
class BenchmarkResult:
    """Outcome of one benchmark run: time in microseconds, memory in KiB."""

    duration: int
    memory: int
    success: bool


@dataclass
class BenchmarkStats:
    """Aggregated statistics over benchmark runs."""

    median_time: float = 0.0
    median_memory: float = 0.0
    success_rate: float = 0.0
    successful_runs: int = 0
    completed_runs: int = 0
    time_ci_lower: float = 0.0
    time_ci_upper: float = 0.0
    memory_ci_lower: float = 0.0
    memory_ci_upper: float = 0.0