"""Command line entry point running one classical attack on a generated code."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pqcat.algorithm_runner import run_algorithm
from pqcat.code_generator import CodeGenerationError
from pqcat.types import CodeParams, PartitionParams

# (subcommand, algorithm key, aliases, default n, k, w, default code type)
_COMMANDS = (
    ("prange", "prange", (), 15, 11, 1, "hamming"),
    ("stern", "stern", (), 15, 11, 1, "hamming"),
    ("lee-brickell", "lee_brickell", ("lee_brickell",), 23, 12, 3, "random"),
    ("ball-collision", "ball_collision", ("ball_collision",), 23, 12, 3, "random"),
    ("mmt", "mmt", (), 31, 15, 4, "random"),
    ("bjmm", "bjmm", (), 23, 12, 3, "random"),
    ("patterson", "patterson", (), 31, 16, 3, None),
)


def _add_code_arguments(
    parser: argparse.ArgumentParser, n: int, k: int, w: int, code_type: Optional[str]
) -> None:
    parser.add_argument("-n", "--n", type=int, default=n, help="codeword length")
    parser.add_argument("-k", "--k", type=int, default=k, help="message length")
    parser.add_argument("-w", "--w", type=int, default=w, help="error weight")
    if code_type is not None:
        parser.add_argument(
            "-c",
            "--code-type",
            dest="code_type",
            default=code_type,
            help="code family: random, hamming, goppa or qc",
        )


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with one subcommand per attack."""
    parser = argparse.ArgumentParser(
        prog="pqcat",
        description="Run classical attacks on code-based cryptosystems",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, algorithm, aliases, n, k, w, code_type in _COMMANDS:
        sub = subparsers.add_parser(name, aliases=list(aliases))
        _add_code_arguments(sub, n, k, w, code_type)
        if algorithm == "mmt":
            sub.add_argument("-p", "--p", type=int, default=2)
            sub.add_argument("--l1", type=int, default=256)
            sub.add_argument("--l2", type=int, default=256)
        if code_type is None:
            sub.set_defaults(code_type="goppa")
        sub.set_defaults(algorithm=algorithm)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the chosen attack and return the exit status."""
    args = build_parser().parse_args(argv)
    code_params = CodeParams(n=args.n, k=args.k, w=args.w, code_type=args.code_type)
    partition_params = None
    if args.algorithm == "mmt":
        partition_params = PartitionParams(p=args.p, l1=args.l1, l2=args.l2)
    try:
        run_algorithm(args.algorithm, code_params, partition_params)
    except CodeGenerationError as exc:
        message = str(exc)
        if not message.startswith("Error"):
            message = f"Error: {message}"
        print(message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())