"""Timing and memory figures for a single attack run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import psutil


@dataclass
class AlgorithmMetrics:
    """Elapsed time in microseconds and peak memory growth in bytes."""

    time: int = 0
    peak_memory: int = 0


def _resident_memory() -> Optional[int]:
    try:
        return psutil.Process().memory_info().rss
    except (psutil.Error, OSError):
        return None


def start_memory_tracking() -> int:
    """Current resident memory in bytes, or 0 when it cannot be read."""
    usage = _resident_memory()
    if usage is None:
        print("Warning: Couldn't get memory stats")
        return 0
    return usage


def update_peak_memory(start_memory: int, current_peak: int) -> int:
    """Return the larger of ``current_peak`` and the growth since ``start_memory``."""
    current = _resident_memory()
    if current is not None and current > start_memory:
        return max(current_peak, current - start_memory)
    return current_peak


def print_metrics(metrics: AlgorithmMetrics) -> None:
    """Print time and peak memory in the report format."""
    print(f"Time: {metrics.time} μs")
    print(f"Peak memory: {metrics.peak_memory // 1024} KiB")