"""
Matrix generators for test inputs and benchmarks.

Random generators draw every value up front from a NumPy Generator so the
per-cell init passed to create() stays a pure function of (i, j).
"""

import numpy as np

from pymatrix.core.ring import FLOAT64, NumpyRing
from pymatrix.matrix.storage import Matrix, create
from pymatrix.matrix.views import transpose_view


def _rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def identity(n: int, ring: NumpyRing = FLOAT64) -> Matrix:
    """The n x n identity matrix."""
    zero, one = ring.zero(), ring.one()
    return create(n, n, lambda i, j: one if i == j else zero, ring)


def rand_matrix(
    rows: int,
    cols: int,
    rng: np.random.Generator | int | None = None,
) -> Matrix:
    """A rows x cols float64 matrix with entries uniform in [0, 1)."""
    values = _rng(rng).random((rows, cols))
    return create(rows, cols, lambda i, j: values[i, j])


def rand_L1(n: int, rng: np.random.Generator | int | None = None) -> Matrix:
    """
    Random lower-triangular matrix with positive diagonal.

    Diagonal entries are uniform in [n, n+1), entries below the diagonal
    uniform in [0, 1), entries above the diagonal zero. The dominant
    diagonal keeps L well conditioned at any n, and L @ L.T is symmetric
    positive-definite.
    """
    values = _rng(rng).random((n, n))

    def init(i, j):
        if i == j:
            return n + values[i, j]
        if i > j:
            return values[i, j]
        return 0.0

    return create(n, n, init)


def rand_spd(n: int, rng: np.random.Generator | int | None = None) -> tuple[Matrix, Matrix]:
    """
    Random symmetric positive-definite matrix with its known factor.

    Returns:
        (A, L) with A = L @ L.T and L from rand_L1
    """
    from pymatrix.algorithms.sequential import mat_mul

    L = rand_L1(n, rng)
    return mat_mul(L, transpose_view(L)), L
