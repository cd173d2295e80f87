"""
Benchmark driver: time every kernel variant on an n x n SPD problem.

Builds A = L @ L^T from a random lower-triangular L, then times the naive,
blocked and parallel multiplies, the sequential, blocked and parallel
Cholesky factorizations, and both inverses. Variants are checked for
agreement before the timing table is printed.

Usage:
    pymatrix-bench --size 200 --block-size 32 --workers 4
    python -m pymatrix.benchmark -n 120 -v
"""

import argparse
import logging
import sys

import numpy as np

from pymatrix.algorithms import (
    cholesky_blocked,
    cholesky_seq_inplace,
    inverse,
    mat_mul,
    mat_mul_blocked,
    par,
)
from pymatrix.core.config import resolve_block_size, resolve_num_workers
from pymatrix.core.timing import Timer
from pymatrix.core.tolerances import FP64, FP64_FACTORIZATION, agrees
from pymatrix.matrix import identity, rand_L1, to_numpy, transpose_view

logger = logging.getLogger('pymatrix.benchmark')


def configure_logging(verbose: bool) -> None:
    """Send pymatrix log records to stderr with a timestamped format."""
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger('pymatrix')
    root.setLevel(level)

    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    if not stream_handlers:  # Avoid duplicate handlers
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root.addHandler(handler)
        stream_handlers = [handler]
    for handler in stream_handlers:
        handler.setLevel(level)


def run_benchmark(n: int, block_size: int, num_workers: int, seed: int) -> tuple[Timer, dict[str, bool]]:
    """
    Time every kernel on one n x n problem.

    Returns:
        (timer, checks) where checks maps a description to whether the
        compared variants agreed within tolerance
    """
    L = rand_L1(n, rng=seed)
    Lt = transpose_view(L)

    timer = Timer()
    timer.start()

    with timer.section('Matrix Multiply'):
        A = mat_mul(L, Lt)
    with timer.section('Matrix Multiply (parallel)'):
        Ap = par.mat_mul(L, Lt, block_size=block_size, num_workers=num_workers)
    with timer.section('Matrix Multiply (blocked)'):
        Ab = mat_mul_blocked(L, Lt, block_size=block_size)

    with timer.section('Matrix Inverse'):
        Ai = inverse(A)
    with timer.section('Matrix Inverse (parallel)'):
        Aip = par.inverse(A, block_size=block_size, num_workers=num_workers)

    A2 = A.copy()
    with timer.section('Cholesky (sequential)'):
        cholesky_seq_inplace(A2)
    with timer.section('Cholesky (blocked)'):
        Lb = cholesky_blocked(A, block_size=block_size)
    with timer.section('Cholesky (parallel)'):
        Lp = par.cholesky_blocked(A, block_size=block_size, num_workers=num_workers)

    timer.stop()

    A_np = to_numpy(A)
    L_np = to_numpy(L)
    checks = {
        'multiply: parallel vs naive': agrees(to_numpy(Ap), A_np, FP64),
        'multiply: blocked vs naive': agrees(to_numpy(Ab), A_np, FP64),
        'inverse: parallel vs sequential': agrees(to_numpy(Aip), to_numpy(Ai), FP64_FACTORIZATION),
        'inverse: A^-1 A vs I': agrees(to_numpy(Ai) @ A_np, to_numpy(identity(n)), FP64_FACTORIZATION),
        'cholesky: sequential vs L': agrees(np.tril(to_numpy(A2)), L_np, FP64_FACTORIZATION),
        'cholesky: blocked vs L': agrees(to_numpy(Lb), L_np, FP64_FACTORIZATION),
        'cholesky: parallel vs L': agrees(to_numpy(Lp), L_np, FP64_FACTORIZATION),
    }
    return timer, checks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymatrix-bench',
        description='Benchmark naive, blocked and parallel dense-matrix kernels.',
    )
    parser.add_argument('-n', '--size', type=int, default=120, help='matrix dimension (default: 120)')
    parser.add_argument('-b', '--block-size', type=int, default=None, help='tile edge length')
    parser.add_argument('-w', '--workers', type=int, default=None, help='worker threads')
    parser.add_argument('--seed', type=int, default=42, help='random seed (default: 42)')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    block_size = resolve_block_size(args.block_size)
    num_workers = resolve_num_workers(args.workers)
    n = args.size

    print(f"Benchmarking {n} x {n} matrices (block={block_size}, workers={num_workers}).")
    print("=" * 60)
    timer, checks = run_benchmark(n, block_size, num_workers, args.seed)

    for name, seconds in timer.sections():
        print(f"  {name:<32} {seconds:>10.4f}s")
    print("-" * 60)
    print(f"  {'Total':<32} {timer.result()['total_seconds']:>10.4f}s")
    print()

    failed = [name for name, ok in checks.items() if not ok]
    for name, ok in checks.items():
        print(f"  [{'PASS' if ok else 'FAIL'}] {name}")
    if failed:
        logger.error("%d agreement check(s) failed", len(failed))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
