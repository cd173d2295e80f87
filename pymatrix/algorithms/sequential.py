"""
Sequential reference kernels.

Every kernel is written against the BasicMatrix / Vector protocols, so
storage matrices and views (transpose, sub-block, row, column) can be
passed interchangeably. Arithmetic stays in the operands' ring: sums
start from ring.zero() and no widening takes place.

Kernels:
    dot: inner product of two vectors
    mat_mul / mat_mul_accumulate: naive O(n^3) multiply
    transpose: materialized transpose
    cholesky_seq_inplace / cholesky: column Cholesky factorization
    forward_substitute / back_substitute / cholesky_solve: triangular solves
    inverse: SPD inverse via Cholesky
"""

import logging
from typing import Any

from pymatrix.algorithms._common import lower_copy
from pymatrix.core.exceptions import (
    DimensionError,
    NotPositiveDefiniteError,
    SingularMatrixError,
)
from pymatrix.core.protocols import BasicMatrix, Vector
from pymatrix.core.validation import (
    check_multipliable,
    check_same_length,
    check_same_ring,
    check_square,
    check_sqrt_ring,
)
from pymatrix.matrix.storage import DenseVector, Matrix, create, zeros
from pymatrix.matrix.views import col, row, transpose_view

logger = logging.getLogger(__name__)


def dot(u: Vector, v: Vector) -> Any:
    """
    Inner product sum(u[k] * v[k]).

    Raises:
        DimensionError: If len(u) != len(v)
        ValidationError: If u and v have different element types
    """
    check_same_length(u, v, ('u', 'v'))
    check_same_ring(u.ring, v.ring, ('u', 'v'))
    acc = u.ring.zero()
    for k in range(len(u)):
        acc = acc + u.get(k) * v.get(k)
    return acc


def mat_mul(A: BasicMatrix, B: BasicMatrix) -> Matrix:
    """
    Naive matrix product C = A @ B with C[i, j] = dot(row(A, i), col(B, j)).

    Raises:
        DimensionError: If A.num_cols() != B.num_rows()
        ValidationError: If A and B have different element types
    """
    check_multipliable(A, B, ('A', 'B'))
    check_same_ring(A.ring, B.ring, ('A', 'B'))
    C = zeros(A.num_rows(), B.num_cols(), A.ring)
    for i in range(A.num_rows()):
        a_i = row(A, i)
        for j in range(B.num_cols()):
            C.set(i, j, dot(a_i, col(B, j)))
    return C


def mat_mul_accumulate(A: BasicMatrix, B: BasicMatrix, C: BasicMatrix) -> None:
    """
    In-place C += A @ B.

    This is the tile kernel of the blocked multiply: A, B and C are
    usually sub-block views.

    Raises:
        DimensionError: If shapes are incompatible
    """
    check_multipliable(A, B, ('A', 'B'))
    if (C.num_rows(), C.num_cols()) != (A.num_rows(), B.num_cols()):
        raise DimensionError(
            f"C: expected {A.num_rows()}x{B.num_cols()}, got {C.num_rows()}x{C.num_cols()}",
            expected=(A.num_rows(), B.num_cols()),
            actual=(C.num_rows(), C.num_cols()),
        )
    for i in range(A.num_rows()):
        a_i = row(A, i)
        for j in range(B.num_cols()):
            C.set(i, j, C.get(i, j) + dot(a_i, col(B, j)))


def transpose(A: BasicMatrix) -> Matrix:
    """
    Materialized transpose T[i, j] = A[j, i].

    Unlike transpose_view() this copies into fresh row-major storage.
    """
    return create(A.num_cols(), A.num_rows(), lambda i, j: A.get(j, i), A.ring)


def cholesky_seq_inplace(A: BasicMatrix) -> None:
    """
    Overwrite the lower triangle of A with its Cholesky factor L (A = L L^T).

    Column k is computed as:
        L[k, k] = sqrt(A[k, k] - sum_{p<k} L[k, p]^2)
        L[i, k] = (A[i, k] - sum_{p<k} L[i, p] L[k, p]) / L[k, k],  i > k

    Only the lower triangle is read or written; the upper triangle is left
    as it was and carries no meaning afterwards. Symmetry and definiteness
    are not checked upfront.

    Raises:
        DimensionError: If A is not square
        ValidationError: If A's element type has no sqrt
        NotPositiveDefiniteError: If a diagonal radicand is <= 0
    """
    check_square(A, 'A')
    check_sqrt_ring(A.ring, 'A')
    ring = A.ring
    zero = ring.zero()
    n = A.num_rows()

    for k in range(n):
        s = A.get(k, k)
        for p in range(k):
            l_kp = A.get(k, p)
            s = s - l_kp * l_kp
        if not s > zero:
            raise NotPositiveDefiniteError(
                f"A: not positive definite, radicand {float(s)!r} at column {k}",
                matrix_name='A',
                column=k,
                radicand=float(s),
            )
        d = ring.sqrt(s)
        A.set(k, k, d)

        for i in range(k + 1, n):
            s = A.get(i, k)
            for p in range(k):
                s = s - A.get(i, p) * A.get(k, p)
            A.set(i, k, s / d)


def cholesky(A: BasicMatrix) -> Matrix:
    """
    Non-destructive sequential Cholesky.

    Returns:
        New lower-triangular L with zeros above the diagonal
    """
    check_square(A, 'A')
    check_sqrt_ring(A.ring, 'A')
    L = lower_copy(A)
    cholesky_seq_inplace(L)
    return L


def forward_substitute(L: BasicMatrix, b: Vector, out: Vector | None = None) -> Vector:
    """
    Solve L y = b for lower-triangular L.

    Only the lower triangle and diagonal of L are read. `out` may be the
    same vector as `b`; each b[i] is read before y[i] is written.

    Raises:
        DimensionError: If L is not square or len(b) mismatches
        SingularMatrixError: If a diagonal entry is zero
    """
    check_square(L, 'L')
    n = L.num_rows()
    if len(b) != n:
        raise DimensionError(f"b: expected length {n}, got {len(b)}", expected=n, actual=len(b))
    y = out if out is not None else DenseVector(n, L.ring)
    zero = L.ring.zero()

    for i in range(n):
        s = b.get(i)
        for p in range(i):
            s = s - L.get(i, p) * y.get(p)
        d = L.get(i, i)
        if d == zero:
            raise SingularMatrixError(
                f"L: zero pivot at row {i} in forward substitution",
                matrix_name='L',
                pivot_index=i,
            )
        y.set(i, s / d)
    return y


def back_substitute(U: BasicMatrix, b: Vector, out: Vector | None = None) -> Vector:
    """
    Solve U x = b for upper-triangular U.

    Pass transpose_view(L) to solve L^T x = b without copying. `out` may
    be the same vector as `b`.

    Raises:
        DimensionError: If U is not square or len(b) mismatches
        SingularMatrixError: If a diagonal entry is zero
    """
    check_square(U, 'U')
    n = U.num_rows()
    if len(b) != n:
        raise DimensionError(f"b: expected length {n}, got {len(b)}", expected=n, actual=len(b))
    x = out if out is not None else DenseVector(n, U.ring)
    zero = U.ring.zero()

    for i in reversed(range(n)):
        s = b.get(i)
        for p in range(i + 1, n):
            s = s - U.get(i, p) * x.get(p)
        d = U.get(i, i)
        if d == zero:
            raise SingularMatrixError(
                f"U: zero pivot at row {i} in back substitution",
                matrix_name='U',
                pivot_index=i,
            )
        x.set(i, s / d)
    return x


def cholesky_solve(L: BasicMatrix, b: Vector, out: Vector | None = None) -> Vector:
    """Solve (L L^T) x = b given the Cholesky factor L."""
    y = forward_substitute(L, b)
    return back_substitute(transpose_view(L), y, out=out)


def solve_columns(L: BasicMatrix, X: BasicMatrix, j0: int, ncols: int) -> None:
    """
    Write columns j0 .. j0+ncols-1 of (L L^T)^{-1} into X.

    Each column j solves L y = e_j then L^T x = y. Only those columns of
    X are written, so disjoint column ranges can be solved concurrently
    against the same read-only L.
    """
    n = L.num_rows()
    ring = L.ring
    Lt = transpose_view(L)
    for j in range(j0, j0 + ncols):
        e = DenseVector(n, ring)
        e.set(j, ring.one())
        y = forward_substitute(L, e, out=e)
        back_substitute(Lt, y, out=col(X, j))


def inverse(A: BasicMatrix) -> Matrix:
    """
    Inverse of a symmetric positive-definite matrix.

    Factors A = L L^T, then solves one pair of triangular systems per
    standard basis column.

    Raises:
        DimensionError: If A is not square
        NotPositiveDefiniteError: If the factorization breaks down
        SingularMatrixError: If a triangular solve meets a zero pivot
    """
    check_square(A, 'A')
    L = cholesky(A)
    n = A.num_rows()
    X = zeros(n, n, A.ring)
    solve_columns(L, X, 0, n)
    return X
