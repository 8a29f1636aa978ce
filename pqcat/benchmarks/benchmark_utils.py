"""Running the attack command repeatedly and summarising what it reports."""

from __future__ import annotations

import csv
import math
import os
import re
import subprocess
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from pqcat.benchmarks.bench_config import BenchmarkConfig
from pqcat.types import BenchmarkResult, BenchmarkStats

_TIME_PATTERN = re.compile(r"Time:\s*(\d+)\s*μs")
_MEMORY_PATTERN = re.compile(r"Peak memory:\s*(\d+)\s*KiB")
_CSV_HEADER = ("Run", "Time (μs)", "Memory (KiB)", "Result")

PathLike = Union[str, "os.PathLike[str]"]


def _first_int(pattern: re.Pattern, output: str) -> Optional[int]:
    match = pattern.search(output)
    return int(match.group(1)) if match else None


def extract_time(output: str) -> Optional[int]:
    """The reported run time in microseconds, or None when absent."""
    return _first_int(_TIME_PATTERN, output)


def extract_memory(output: str) -> Optional[int]:
    """The reported peak memory in KiB, or None when absent."""
    return _first_int(_MEMORY_PATTERN, output)


def ensure_results_directory(results_dir: PathLike = "results") -> Path:
    """Create the results directory with its txt and csv subdirectories."""
    root = Path(results_dir)
    for sub in (root / "txt", root / "csv"):
        sub.mkdir(parents=True, exist_ok=True)
    return root


def _stem(config: BenchmarkConfig) -> str:
    return (
        f"{config.algorithm_name}_{config.code_type}"
        f"_n{config.n}_k{config.k}_w{config.w}"
    )


def create_output_files(
    config: BenchmarkConfig, results_dir: PathLike = "results"
) -> tuple[Path, Path]:
    """Write the CSV header file and return (csv_path, txt_path) for this config."""
    root = Path(results_dir)
    stem = _stem(config)
    csv_path = root / "csv" / f"{stem}.csv"
    txt_path = root / "txt" / f"{stem}.txt"
    with csv_path.open("w", newline="", encoding="utf-8") as handle:
        csv.writer(handle).writerow(_CSV_HEADER)
    return csv_path, txt_path


def build_command(config: BenchmarkConfig) -> list[str]:
    """The command line that runs one attack for this configuration."""
    cmd = [
        sys.executable,
        "-m",
        "pqcat.cli",
        config.algorithm_name,
        "--n",
        str(config.n),
        "--k",
        str(config.k),
        "--w",
        str(config.w),
    ]
    if config.algorithm_name != "patterson":
        cmd += ["--code-type", config.code_type]
    if config.algorithm_name == "mmt":
        for flag, value in (("--p", config.p), ("--l1", config.l1), ("--l2", config.l2)):
            if value is not None:
                cmd += [flag, str(value)]
    return cmd


def _decode(data: Union[bytes, str, None]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def execute_single_run(config: BenchmarkConfig, run: int) -> Optional[BenchmarkResult]:
    """Run the attack once; None when the process fails to start or exits non-zero."""
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    try:
        completed = subprocess.run(build_command(config), capture_output=True, env=env)
    except OSError as exc:
        print(f"Run {run} failed: {exc}", file=sys.stderr)
        return None

    if completed.returncode != 0:
        print(f"Run {run} failed: {_decode(completed.stderr)}", file=sys.stderr)
        return None

    stdout = _decode(completed.stdout)
    return BenchmarkResult(
        duration=extract_time(stdout) or 0,
        memory=extract_memory(stdout) or 0,
        success="success" in stdout,
    )


def execute_benchmark_runs(config: BenchmarkConfig) -> list[BenchmarkResult]:
    """Run the attack config.runs times, keeping the runs that completed."""
    results = []
    for run in range(1, config.runs + 1):
        result = execute_single_run(config, run)
        if result is None:
            continue
        outcome = "success" if result.success else "fail"
        print(
            f"Run {run}/{config.runs}: Time = {result.duration} μs, "
            f"Memory = {result.memory} KiB, Result = {outcome}"
        )
        results.append(result)
    return results


def _median(values: Sequence[int]) -> float:
    count = len(values)
    mid = count // 2
    if count % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2.0
    return float(values[mid])


def calculate_statistics(results: Sequence[BenchmarkResult]) -> BenchmarkStats:
    """Medians, success rate and distances from the median to a rank-based 95% interval."""
    completed = len(results)
    if completed == 0:
        return BenchmarkStats()

    durations = sorted(r.duration for r in results)
    memories = sorted(r.memory for r in results)
    median_time = _median(durations)
    median_memory = _median(memories)

    spread = math.floor(1.96 * math.sqrt(completed) / 2.0 + 0.5)
    lower_idx = max(0, completed // 2 - spread)
    upper_idx = min(completed // 2 + spread, completed - 1)

    successful = sum(1 for r in results if r.success)
    return BenchmarkStats(
        median_time=median_time,
        median_memory=median_memory,
        success_rate=successful / completed * 100.0,
        successful_runs=successful,
        completed_runs=completed,
        time_ci_lower=median_time - durations[lower_idx],
        time_ci_upper=durations[upper_idx] - median_time,
        memory_ci_lower=median_memory - memories[lower_idx],
        memory_ci_upper=memories[upper_idx] - median_memory,
    )


def write_results_to_file(
    txt_path: PathLike, config: BenchmarkConfig, stats: BenchmarkStats
) -> None:
    """Write the text summary of one benchmark."""
    lines = [
        f"Algorithm: {config.algorithm_name}",
        f"Code Type: {config.code_type}",
        f"Parameters: n={config.n}, k={config.k}, w={config.w}",
        f"Runs Completed: {stats.completed_runs}/{config.runs}",
        f"Median Time: {stats.median_time:.2f} μs "
        f"(95% CI: {stats.time_ci_lower:.2f} - {stats.time_ci_upper:.2f})",
        f"Median Memory: {stats.median_memory:.2f} KiB "
        f"(95% CI: {stats.memory_ci_lower:.2f} - {stats.memory_ci_upper:.2f})",
        f"Success Rate: {stats.success_rate:.2f}% "
        f"({stats.successful_runs} of {stats.completed_runs} runs)",
    ]
    Path(txt_path).write_text("\n".join(lines) + "\n", encoding="utf-8")


def print_summary(config: BenchmarkConfig, stats: BenchmarkStats) -> None:
    """Print the benchmark summary to standard output."""
    print("\nBENCHMARK SUMMARY")
    print(f"Algorithm: {config.algorithm_name}")
    print(f"Code: {config.code_type} (n={config.n}, k={config.k}, w={config.w})")
    print(
        f"Median Time: {stats.median_time:.2f} μs "
        f"(95% CI: {stats.time_ci_lower:.2f} - {stats.time_ci_upper:.2f})"
    )
    print(
        f"Median Memory: {stats.median_memory:.2f} KiB "
        f"(95% CI: {stats.memory_ci_lower:.2f} - {stats.memory_ci_upper:.2f})"
    )
    print(
        f"Success Rate: {stats.success_rate:.2f}% "
        f"({stats.successful_runs}/{stats.completed_runs})\n\n"
    )