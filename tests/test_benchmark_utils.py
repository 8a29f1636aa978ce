import csv
import random
import subprocess
import sys
from unittest.mock import patch

import pytest

from pqcat.benchmarks.bench_config import BenchmarkConfig
from pqcat.benchmarks.benchmark_utils import (
    build_command,
    calculate_statistics,
    create_output_files,
    ensure_results_directory,
    execute_benchmark_runs,
    execute_single_run,
    extract_memory,
    extract_time,
    print_summary,
    write_results_to_file,
)
from pqcat.types import BenchmarkResult, BenchmarkStats

SAMPLE_OUTPUT = (
    "Original Error Vector: [0, 1]\n"
    "Time: 1234 μs\n"
    "Peak memory: 56 KiB\n"
    "Result: success (valid error vector found)\n"
)


def _completed(stdout, returncode=0, stderr=b""):
    def fake(cmd, *args, **kwargs):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return fake


def test_extract_time_and_memory():
    assert extract_time(SAMPLE_OUTPUT) == 1234
    assert extract_memory(SAMPLE_OUTPUT) == 56


def test_extract_missing_values():
    assert extract_time("nothing here") is None
    assert extract_memory("Time: 5 μs") is None


def test_ensure_results_directory_creates_subdirectories(tmp_path):
    root = ensure_results_directory(tmp_path / "results")
    assert (root / "txt").is_dir()
    assert (root / "csv").is_dir()
    ensure_results_directory(tmp_path / "results")
    assert (root / "csv").is_dir()


def test_create_output_files_writes_header(tmp_path):
    root = ensure_results_directory(tmp_path / "results")
    config = BenchmarkConfig()
    csv_path, txt_path = create_output_files(config, root)
    assert csv_path.name == "prange_hamming_n15_k11_w1.csv"
    assert txt_path.name == "prange_hamming_n15_k11_w1.txt"
    with csv_path.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows == [["Run", "Time (μs)", "Memory (KiB)", "Result"]]


def test_build_command_common_arguments():
    cmd = build_command(BenchmarkConfig())
    assert cmd[:3] == [sys.executable, "-m", "pqcat.cli"]
    assert cmd[3:] == [
        "prange", "--n", "15", "--k", "11", "--w", "1", "--code-type", "hamming",
    ]


def test_build_command_patterson_has_no_code_type():
    cmd = build_command(BenchmarkConfig.goppa_scaling_size(0).with_algorithm("patterson"))
    assert "--code-type" not in cmd
    assert cmd[3] == "patterson"


def test_build_command_mmt_parameters():
    config = BenchmarkConfig.mmt_config(31, 15, 4, "random")
    cmd = build_command(config)
    assert cmd[-6:] == ["--p", "2", "--l1", "256", "--l2", "256"]


def test_build_command_non_mmt_ignores_partition_parameters():
    config = BenchmarkConfig().with_mmt_params(2, 256, 256)
    assert "--l1" not in build_command(config)


def test_execute_single_run_parses_output():
    with patch("subprocess.run", side_effect=_completed(SAMPLE_OUTPUT.encode("utf-8"))):
        result = execute_single_run(BenchmarkConfig(), 1)
    assert result == BenchmarkResult(duration=1234, memory=56, success=True)


def test_execute_single_run_failure_outcome():
    output = "Time: 7 μs\nPeak memory: 0 KiB\nResult: failure (invalid)\n"
    with patch("subprocess.run", side_effect=_completed(output.encode("utf-8"))):
        result = execute_single_run(BenchmarkConfig(), 1)
    assert result.success is False
    assert result.duration == 7


def test_execute_single_run_nonzero_exit_is_none(capsys):
    with patch("subprocess.run", side_effect=_completed(b"", 1, b"boom")):
        result = execute_single_run(BenchmarkConfig(), 3)
    assert result is None
    assert "Run 3 failed: boom" in capsys.readouterr().err


def test_execute_single_run_start_error_is_none():
    with patch("subprocess.run", side_effect=OSError("missing")):
        assert execute_single_run(BenchmarkConfig(), 1) is None


def test_execute_benchmark_runs_collects_each_run():
    config = BenchmarkConfig().with_runs(3)
    with patch("subprocess.run", side_effect=_completed(SAMPLE_OUTPUT.encode("utf-8"))) as run:
        results = execute_benchmark_runs(config)
    assert run.call_count == 3
    assert len(results) == 3
    assert all(r.success for r in results)


def test_execute_benchmark_runs_skips_failed_runs():
    config = BenchmarkConfig().with_runs(2)
    with patch("subprocess.run", side_effect=_completed(b"", 2)):
        assert execute_benchmark_runs(config) == []


def test_statistics_empty():
    assert calculate_statistics([]) == BenchmarkStats()


def test_statistics_hundred_runs_use_indices_40_and_60():
    results = [BenchmarkResult(duration=d, memory=d, success=True) for d in range(100)]
    stats = calculate_statistics(results)
    assert stats.median_time - stats.time_ci_lower == 40
    assert stats.median_time + stats.time_ci_upper == 60
    assert stats.median_memory - stats.memory_ci_lower == 40
    assert stats.completed_runs == 100
    assert stats.success_rate == 100.0


def test_statistics_single_run():
    stats = calculate_statistics([BenchmarkResult(duration=42, memory=8, success=False)])
    assert stats.median_time == 42
    assert stats.median_memory == 8
    assert stats.time_ci_lower == stats.time_ci_upper == 0
    assert stats.success_rate == 0.0


def test_statistics_median_of_odd_count_is_middle_value():
    durations = [5, 1, 3]
    results = [BenchmarkResult(duration=d, memory=0, success=True) for d in durations]
    stats = calculate_statistics(results)
    assert stats.median_time == sorted(durations)[1]


def test_statistics_independent_of_order_and_counts_successes():
    results = [
        BenchmarkResult(duration=d, memory=d * 2, success=d % 4 == 0)
        for d in range(1, 21)
    ]
    shuffled = list(results)
    random.Random(7).shuffle(shuffled)
    stats = calculate_statistics(results)
    assert calculate_statistics(shuffled) == stats
    assert stats.successful_runs == sum(r.success for r in results)
    assert stats.success_rate * stats.completed_runs / 100 == pytest.approx(
        stats.successful_runs
    )
    assert stats.time_ci_lower >= 0 and stats.time_ci_upper >= 0


def test_write_results_to_file(tmp_path):
    config = BenchmarkConfig()
    stats = BenchmarkStats(
        median_time=10.0, median_memory=2.0, success_rate=50.0,
        successful_runs=1, completed_runs=2,
    )
    path = tmp_path / "out.txt"
    write_results_to_file(path, config, stats)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Algorithm: prange"
    assert lines[1] == "Code Type: hamming"
    assert lines[2] == "Parameters: n=15, k=11, w=1"
    assert lines[3] == "Runs Completed: 2/100"
    assert lines[6] == "Success Rate: 50.00% (1 of 2 runs)"


def test_print_summary(capsys):
    stats = BenchmarkStats(
        median_time=10.0, median_memory=2.0, success_rate=50.0,
        successful_runs=1, completed_runs=2,
    )
    print_summary(BenchmarkConfig(), stats)
    out = capsys.readouterr().out
    assert "BENCHMARK SUMMARY" in out
    assert "Code: hamming (n=15, k=11, w=1)" in out
    assert "Success Rate: 50.00% (1/2)" in out