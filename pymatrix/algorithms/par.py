"""
Parallel (fork/join) kernels.

Each kernel partitions its write set into disjoint regions, runs one task
per region on a thread pool, and joins all tasks before returning:

    mat_mul:          output row bands, each a blocked multiply
    cholesky_blocked: lower-triangle tiles of each Schur update
    inverse:          column bands of the inverse, sharing one factor

Operands are read-only for the whole call. A failure in any task fails the
whole call.

Usage:
    >>> from pymatrix.algorithms import par
    >>> C = par.mat_mul(A, B, num_workers=4)
"""

import logging
from functools import partial

from pymatrix.algorithms._common import fork_join, lower_copy, lower_tiles, split_range
from pymatrix.algorithms.blocked import (
    cholesky_blocked_inplace,
    mat_mul_blocked_into,
    schur_update_tile,
)
from pymatrix.algorithms.sequential import solve_columns
from pymatrix.core.config import resolve_block_size, resolve_num_workers
from pymatrix.core.protocols import BasicMatrix
from pymatrix.core.validation import (
    check_multipliable,
    check_same_ring,
    check_square,
    check_sqrt_ring,
)
from pymatrix.matrix.storage import Matrix, zeros
from pymatrix.matrix.views import SubMatrix

logger = logging.getLogger(__name__)


def mat_mul(
    A: BasicMatrix,
    B: BasicMatrix,
    *,
    block_size: int | None = None,
    num_workers: int | None = None,
) -> Matrix:
    """
    Parallel matrix product C = A @ B.

    The rows of C are split into one band per worker; band
    [r0, r0+rows) is computed as A[r0:r0+rows, :] @ B with the blocked
    kernel and written only into the same rows of C.

    Raises:
        DimensionError: If A.num_cols() != B.num_rows()
        ValidationError: If element types differ or tuning values are invalid
    """
    check_multipliable(A, B, ('A', 'B'))
    check_same_ring(A.ring, B.ring, ('A', 'B'))
    block = resolve_block_size(block_size)
    workers = resolve_num_workers(num_workers)

    m, k, n = A.num_rows(), A.num_cols(), B.num_cols()
    C = zeros(m, n, A.ring)
    bands = split_range(m, workers)
    logger.debug("par.mat_mul: %d row bands, block=%d", len(bands), block)

    tasks = [
        partial(
            mat_mul_blocked_into,
            SubMatrix(A, r0, 0, rows, k),
            B,
            SubMatrix(C, r0, 0, rows, n),
            block,
        )
        for r0, rows in bands
    ]
    fork_join(tasks, workers)
    return C


def _parallel_schur_update(L21: BasicMatrix, A22: BasicMatrix, block: int, workers: int) -> None:
    tiles = lower_tiles(A22.num_rows(), block)
    fork_join([partial(schur_update_tile, L21, A22, *tile) for tile in tiles], workers)


def cholesky_blocked(
    A: BasicMatrix,
    *,
    block_size: int | None = None,
    num_workers: int | None = None,
) -> Matrix:
    """
    Blocked Cholesky with a parallel Schur-complement update.

    The leading-block factorization and the panel solve stay sequential,
    since each depends on the step before. The trailing update
    A22 -= L21 @ L21^T is split into lower-triangle tiles; tile (i, j)
    reads rows i and j of L21 and writes only itself.

    Returns:
        New lower-triangular L with A = L @ L^T

    Raises:
        DimensionError: If A is not square
        ValidationError: If A's element type has no sqrt or tuning values are invalid
        NotPositiveDefiniteError: If the factorization breaks down
    """
    check_square(A, 'A')
    check_sqrt_ring(A.ring, 'A')
    block = resolve_block_size(block_size)
    workers = resolve_num_workers(num_workers)

    L = lower_copy(A)
    cholesky_blocked_inplace(
        L, block, partial(_parallel_schur_update, block=block, workers=workers)
    )
    return L


def inverse(
    A: BasicMatrix,
    *,
    block_size: int | None = None,
    num_workers: int | None = None,
) -> Matrix:
    """
    Parallel inverse of a symmetric positive-definite matrix.

    Factors A once with the parallel blocked Cholesky, then solves column
    bands of the inverse concurrently against the shared, read-only factor.

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: If the factorization breaks down
        SingularMatrixError: If a triangular solve meets a zero pivot
    """
    check_square(A, 'A')
    workers = resolve_num_workers(num_workers)
    L = cholesky_blocked(A, block_size=block_size, num_workers=workers)

    n = A.num_rows()
    X = zeros(n, n, A.ring)
    bands = split_range(n, workers)
    logger.debug("par.inverse: %d column bands", len(bands))
    fork_join([partial(solve_columns, L, X, j0, ncols) for j0, ncols in bands], workers)
    return X
