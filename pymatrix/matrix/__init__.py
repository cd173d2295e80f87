"""
Matrix storage and zero-copy views.

Everything here satisfies the BasicMatrix (or Vector) protocol, so any
algorithm accepts owned storage and views interchangeably.

Example:
    >>> from pymatrix.matrix import create, transpose_view, subblock
    >>> A = create(4, 4, lambda i, j: i * 4 + j)
    >>> At = transpose_view(A)          # no copy
    >>> At.get(1, 0) == A.get(0, 1)
    True
    >>> S = subblock(A, 1, 1, 2, 2)     # writes go to A
    >>> S.set(0, 0, -1.0)
    >>> A.get(1, 1)
    -1.0
"""

from pymatrix.matrix.storage import Matrix, DenseVector, create, zeros
from pymatrix.matrix.views import (
    TransposeMatrix,
    SubMatrix,
    RowVector,
    ColumnVector,
    transpose_view,
    subblock,
    row,
    col,
)
from pymatrix.matrix.generate import identity, rand_matrix, rand_L1, rand_spd
from pymatrix.matrix.util import to_str, to_numpy, from_numpy

__all__ = [
    # Storage
    "Matrix",
    "DenseVector",
    "create",
    "zeros",
    # Views
    "TransposeMatrix",
    "SubMatrix",
    "RowVector",
    "ColumnVector",
    "transpose_view",
    "subblock",
    "row",
    "col",
    # Generators
    "identity",
    "rand_matrix",
    "rand_L1",
    "rand_spd",
    # Utilities
    "to_str",
    "to_numpy",
    "from_numpy",
]
