# pqcat

Run classical attacks on code-based cryptosystems.

pqcat builds small linear codes (random, Hamming, binary Goppa and
quasi-cyclic). It hides a random error vector of a chosen weight in a
codeword and then tries to recover that vector with one of several decoding
attacks:

- Prange (`pqcat.algorithms.prange`)
- Stern (`pqcat.algorithms.stern`)
- Lee–Brickell (`pqcat.algorithms.lee_brickell`)
- Ball-collision (`pqcat.algorithms.ball_collision`)
- BJMM (`pqcat.algorithms.bjmm`)
- MMT, which works directly on a syndrome (`pqcat.algorithms.mmt`)
- Patterson-style decoding of binary Goppa codes (`pqcat.algorithms.patterson`)

Each run reports the time taken in microseconds and an estimate of peak
memory growth. It also reports whether the recovered error vector is valid:
the vector must have weight at most `w` and must give a zero syndrome when
applied.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

There is one subcommand per attack:

```
pqcat prange --n 15 --k 11 --w 1 --code-type hamming
pqcat stern --n 15 --k 11 --w 1 --code-type hamming
pqcat lee-brickell --n 23 --k 12 --w 3 --code-type random
pqcat ball-collision --n 23 --k 12 --w 3 --code-type random
pqcat bjmm --n 23 --k 12 --w 3 --code-type random
pqcat mmt --n 31 --k 15 --w 4 --code-type random --p 2 --l1 256 --l2 256
pqcat patterson --n 31 --k 16 --w 3
```

`lee_brickell` and `ball_collision` are also accepted as subcommand names.

Options:

- `-n`, `--n`: codeword length in bits
- `-k`, `--k`: message length in bits
- `-w`, `--w`: weight of the error vector (number of errors)
- `-c`, `--code-type`: `random`, `hamming`, `goppa` or `qc`. The
  `patterson` command has no such option and always uses a Goppa code.
- `-p`, `--p`, `--l1`, `--l2`: MMT only. `--p` is the number of partitions;
  `--l1` and `--l2` are the sizes of the two sampled lists.

Every option has a default, so `pqcat prange` on its own runs a Hamming
(15, 11) example. The defaults are the values shown above.

A typical run prints:

```
Original Error Vector: [...]
Received Vector:       [...]
Time: 412 μs
Peak memory: 0 KiB
Decoded Error Vector:  [...]
Result: success (valid error vector found)
```

If the code parameters are invalid, the command prints an error to standard
error and exits with status 1. Examples of invalid parameters are an
unsupported code type and `k > n - m*t` for a Goppa code.

## Library use

```python
from pqcat.code_generator import generate_code
from pqcat.algorithms.algorithm_utils import (
    apply_errors,
    calculate_syndrome,
    generate_random_error_vector,
)
from pqcat.algorithms.prange import run_prange_algorithm
from pqcat.algorithms.metrics import print_metrics

g, h, _ = generate_code(15, 11, 1, "hamming")
error = generate_random_error_vector(15, 1)
received = apply_errors(list(g[0]), error)

decoded, metrics = run_prange_algorithm(received, h, 1)
print_metrics(metrics)
if decoded is not None:
    corrected = apply_errors(received, decoded)
    print(all(bit == 0 for bit in calculate_syndrome(corrected, h)))
```

`pqcat.algorithm_runner.run_algorithm(name, CodeParams(...), PartitionParams(...))`
performs a whole run:

1. Generate the code.
2. Add a random error.
3. Decode.
4. Print the report.

It returns `True` on success. `generate_code` raises `CodeGenerationError`
when it cannot build the code.

## Benchmarking

`pqcat.benchmarks.bench_config.BenchmarkConfig` describes a benchmark. It
holds:

- the algorithm and the number of runs
- `n`, `k`, `w` and the code type
- `p`, `l1` and `l2` for MMT

Ready-made parameter sets are available as class methods:

- `hamming_scaling_size`, `hamming_scaling_weight`
- `goppa_scaling_size`, `goppa_scaling_weight`
- `qc_scaling_size`, `qc_scaling_weight`
- `mmt_config`
- `real_world_goppa`, `real_world_qc`

The builders `with_algorithm`, `with_runs` and `with_mmt_params` return
modified copies.

`pqcat.benchmarks.benchmark_utils` runs the attack repeatedly. Each run
starts `python -m pqcat.cli` as a separate process and parses the time,
memory and outcome that the process reports:

```python
from pqcat.benchmarks.bench_config import BenchmarkConfig
from pqcat.benchmarks.benchmark_utils import (
    calculate_statistics,
    create_output_files,
    ensure_results_directory,
    execute_benchmark_runs,
    print_summary,
    write_results_to_file,
)

config = BenchmarkConfig.hamming_scaling_size(1).with_algorithm("prange").with_runs(10)
ensure_results_directory("results")
csv_path, txt_path = create_output_files(config, "results")
results = execute_benchmark_runs(config)
stats = calculate_statistics(results)
write_results_to_file(txt_path, config, stats)
print_summary(config, stats)
```

`calculate_statistics` gives:

- the median time and the median memory
- a rank-based 95% interval, expressed as distances from the median
- the success rate

## What it does not do

- There is no command that runs a whole benchmark suite. To sweep several
  configurations, combine the functions above yourself.
- The CSV file from `create_output_files` contains only its header row.
  Per-run results are printed to standard output and are not written to the
  file.
- The codes are small experimental constructions. Matrices are put in
  systematic form without Gaussian elimination. The attacks are bounded by
  fixed iteration and list sizes, so they can fail on larger parameters.