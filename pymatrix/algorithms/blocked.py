"""
Cache-blocked kernels.

Both kernels tile their operands with SubMatrix views and reuse the
sequential kernels on each tile. Block sizes need not divide the matrix
dimensions; boundary tiles are simply smaller.
"""

import logging
from typing import Callable

from pymatrix.algorithms._common import lower_copy, lower_tiles, tile_ranges
from pymatrix.algorithms.sequential import (
    cholesky_seq_inplace,
    dot,
    forward_substitute,
    mat_mul_accumulate,
)
from pymatrix.core.config import resolve_block_size
from pymatrix.core.exceptions import NotPositiveDefiniteError
from pymatrix.core.protocols import BasicMatrix
from pymatrix.core.validation import (
    check_multipliable,
    check_same_ring,
    check_square,
    check_sqrt_ring,
)
from pymatrix.matrix.storage import Matrix, zeros
from pymatrix.matrix.views import SubMatrix, row

logger = logging.getLogger(__name__)

SchurUpdate = Callable[[BasicMatrix, BasicMatrix], None]


def mat_mul_blocked_into(A: BasicMatrix, B: BasicMatrix, C: BasicMatrix, block: int) -> None:
    """
    Accumulate C += A @ B tile by tile.

    For every output tile (ib, jb):
        C[ib, jb] += sum over kb of A[ib, kb] @ B[kb, jb]
    """
    m, k, n = A.num_rows(), A.num_cols(), B.num_cols()
    k_tiles = tile_ranges(k, block)
    for ib, rows in tile_ranges(m, block):
        for jb, cols in tile_ranges(n, block):
            C_tile = SubMatrix(C, ib, jb, rows, cols)
            for kb, inner in k_tiles:
                mat_mul_accumulate(
                    SubMatrix(A, ib, kb, rows, inner),
                    SubMatrix(B, kb, jb, inner, cols),
                    C_tile,
                )


def mat_mul_blocked(
    A: BasicMatrix,
    B: BasicMatrix,
    *,
    block_size: int | None = None,
) -> Matrix:
    """
    Cache-blocked matrix product C = A @ B.

    Agrees with mat_mul() up to floating-point rounding; the summation
    order differs.

    Args:
        A: Left operand (m x k)
        B: Right operand (k x n)
        block_size: Tile edge length, defaults to the configured value

    Raises:
        DimensionError: If A.num_cols() != B.num_rows()
        ValidationError: If the element types differ or block_size < 1
    """
    check_multipliable(A, B, ('A', 'B'))
    check_same_ring(A.ring, B.ring, ('A', 'B'))
    block = resolve_block_size(block_size)
    logger.debug(
        "mat_mul_blocked: %dx%d @ %dx%d, block=%d",
        A.num_rows(), A.num_cols(), B.num_rows(), B.num_cols(), block,
    )
    C = zeros(A.num_rows(), B.num_cols(), A.ring)
    mat_mul_blocked_into(A, B, C, block)
    return C


def solve_panel(L11: BasicMatrix, A21: BasicMatrix) -> None:
    """
    Overwrite A21 with L21 solving L21 @ L11^T = A21.

    Row r of L21 satisfies L11 @ L21[r]^T = A21[r]^T, one forward
    substitution per row, done in place.
    """
    for r in range(A21.num_rows()):
        a_r = row(A21, r)
        forward_substitute(L11, a_r, out=a_r)


def schur_update_tile(
    L21: BasicMatrix,
    A22: BasicMatrix,
    i0: int,
    rows: int,
    j0: int,
    cols: int,
) -> None:
    """
    A22 -= L21 @ L21^T restricted to one tile, lower triangle only.

    Reads rows of L21 and writes only entries (i, j) of A22 with
    i0 <= i < i0+rows, j0 <= j < j0+cols and j <= i.
    """
    for i in range(i0, i0 + rows):
        l_i = row(L21, i)
        for j in range(j0, min(j0 + cols, i + 1)):
            A22.set(i, j, A22.get(i, j) - dot(l_i, row(L21, j)))


def schur_update(L21: BasicMatrix, A22: BasicMatrix, block: int) -> None:
    """Sequential symmetric rank-k update of the lower triangle of A22."""
    for tile in lower_tiles(A22.num_rows(), block):
        schur_update_tile(L21, A22, *tile)


def _offset(A: BasicMatrix) -> int:
    return getattr(A, 'i0', 0)


def cholesky_blocked_inplace(A: BasicMatrix, block: int, update: SchurUpdate) -> None:
    """
    Recursive block Cholesky on the lower triangle of A.

    Splits A into
        [A11   .  ]
        [A21  A22 ]
    with A11 of size block, then:
        L11 = chol(A11)
        L21 = A21 @ L11^{-T}
        A22 <- A22 - L21 @ L21^T     (via `update`)
        recurse on A22
    """
    n = A.num_rows()
    if n <= block:
        _factor_diagonal_block(A)
        return

    logger.debug("cholesky_blocked: panel at column %d, trailing size %d", _offset(A), n - block)
    A11 = SubMatrix(A, 0, 0, block, block)
    A21 = SubMatrix(A, block, 0, n - block, block)
    A22 = SubMatrix(A, block, block, n - block, n - block)

    _factor_diagonal_block(A11)
    solve_panel(A11, A21)
    update(A21, A22)
    cholesky_blocked_inplace(A22, block, update)


def _factor_diagonal_block(A: BasicMatrix) -> None:
    try:
        cholesky_seq_inplace(A)
    except NotPositiveDefiniteError as e:
        column = _offset(A) + e.column
        raise NotPositiveDefiniteError(
            f"A: not positive definite, radicand {e.radicand!r} at column {column}",
            matrix_name='A',
            column=column,
            radicand=e.radicand,
        ) from e


def cholesky_blocked(A: BasicMatrix, *, block_size: int | None = None) -> Matrix:
    """
    Blocked Cholesky factorization, non-destructive.

    Args:
        A: Symmetric positive-definite matrix (only the lower triangle is read)
        block_size: Leading-block size, defaults to the configured value

    Returns:
        New lower-triangular L with A = L @ L^T and zeros above the diagonal

    Raises:
        DimensionError: If A is not square
        ValidationError: If A's element type has no sqrt or block_size < 1
        NotPositiveDefiniteError: If the factorization breaks down
    """
    check_square(A, 'A')
    check_sqrt_ring(A.ring, 'A')
    block = resolve_block_size(block_size)
    L = lower_copy(A)
    cholesky_blocked_inplace(L, block, lambda L21, A22: schur_update(L21, A22, block))
    return L
