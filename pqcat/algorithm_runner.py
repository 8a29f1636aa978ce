"""Build a code, corrupt a codeword and run one decoding attack on it."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import numpy as np

from pqcat.algorithms import (
    ball_collision,
    bjmm,
    lee_brickell,
    mmt,
    patterson,
    prange,
    stern,
)
from pqcat.algorithms.algorithm_utils import (
    apply_errors,
    calculate_syndrome,
    generate_random_error_vector,
)
from pqcat.algorithms.metrics import AlgorithmMetrics, print_metrics
from pqcat.code_generator import generate_code
from pqcat.types import CodeParams, GoppaParams, PartitionParams

_DEFAULT_P = 2
_DEFAULT_L1 = 256
_DEFAULT_L2 = 256


def _run_mmt(
    h: np.ndarray,
    code_params: CodeParams,
    original_error: Sequence[int],
    partition_params: Optional[PartitionParams],
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    # MMT works in syndrome space, so it is handed the syndrome of the error directly.
    if partition_params is None:
        print("MMT algorithm requires partition parameters", file=sys.stderr)
        return None, AlgorithmMetrics()
    p = partition_params.p if partition_params.p is not None else _DEFAULT_P
    l1 = partition_params.l1 if partition_params.l1 is not None else _DEFAULT_L1
    l2 = partition_params.l2 if partition_params.l2 is not None else _DEFAULT_L2
    syndrome = calculate_syndrome(original_error, h)
    return mmt.run_mmt_algorithm(h, syndrome, code_params.n, code_params.w, p, l1, l2)


def _run_decoder(
    algorithm_name: str,
    received: Sequence[int],
    h: np.ndarray,
    code_params: CodeParams,
    goppa_params: Optional[GoppaParams],
) -> tuple[Optional[list[int]], AlgorithmMetrics]:
    n, w = code_params.n, code_params.w
    if algorithm_name == "prange":
        return prange.run_prange_algorithm(received, h, w)
    if algorithm_name == "stern":
        return stern.run_stern_algorithm(received, h, w)
    if algorithm_name == "lee_brickell":
        return lee_brickell.run_lee_brickell_algorithm(received, h, n, w)
    if algorithm_name == "ball_collision":
        return ball_collision.run_ball_collision_algorithm(received, h, n, w)
    if algorithm_name == "bjmm":
        return bjmm.run_bjmm_algorithm(received, h, n, w)
    if algorithm_name == "patterson":
        if goppa_params is None:
            raise ValueError("Patterson decoding requires a Goppa code")
        return patterson.run_patterson_algorithm(received, h, goppa_params, w)
    return None, AlgorithmMetrics()


def run_algorithm(
    algorithm_name: str,
    code_params: CodeParams,
    partition_params: Optional[PartitionParams] = None,
) -> bool:
    """Run one attack end to end, print a report and return whether it succeeded.

    Success means the decoded vector has weight at most w and turns the
    received vector into a word with zero syndrome.
    """
    g, h, goppa_params = generate_code(
        code_params.n, code_params.k, code_params.w, code_params.code_type
    )

    original_error = generate_random_error_vector(code_params.n, code_params.w)
    print(f"Original Error Vector: {original_error}")

    if algorithm_name == "mmt":
        received: list[int] = []
        decoded, metrics = _run_mmt(h, code_params, original_error, partition_params)
    else:
        codeword = np.asarray(g)[0].tolist()
        received = apply_errors(codeword, original_error)
        print(f"Received Vector:       {received}")
        decoded, metrics = _run_decoder(
            algorithm_name, received, h, code_params, goppa_params
        )

    print_metrics(metrics)

    if decoded is None:
        print("Result: failure (algorithm did not find an error vector)")
        return False

    print(f"Decoded Error Vector:  {decoded}")
    corrected = apply_errors(received, decoded)
    corrected_syndrome = calculate_syndrome(corrected, h)
    decoded_weight = sum(1 for bit in decoded if bit == 1)

    if not any(corrected_syndrome) and decoded_weight <= code_params.w:
        print("Result: success (valid error vector found)")
        if list(decoded) == original_error:
            print("[Note: Found the exact original error vector]")
        else:
            print("[Note: Found an alternative valid error vector]")
        return True

    print("Result: failure (invalid error vector)")
    return False