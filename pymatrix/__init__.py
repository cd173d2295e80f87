"""
PyMatrix: dense matrices, zero-copy views, and blocked/parallel kernels.

A small dense linear-algebra library. One capability protocol (get/set
plus dimensions) is shared by owned storage and by transpose, sub-block,
row and column views, and every kernel is written against it.

Submodules:
    core: protocols, element types, exceptions, configuration
    matrix: storage, views, generators, formatting
    algorithms: sequential, blocked and parallel (par) kernels

Example:
    >>> from pymatrix import rand_L1, transpose_view, mat_mul, cholesky_blocked
    >>> L = rand_L1(100, rng=0)
    >>> A = mat_mul(L, transpose_view(L))
    >>> L2 = cholesky_blocked(A, block_size=32)
"""

import logging

__version__ = "0.1.0"

from pymatrix.core import (
    PyMatrixError,
    ValidationError,
    IndexOutOfBoundsError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    FLOAT64,
    FLOAT32,
    INT64,
    get_config,
    set_config,
)
from pymatrix.matrix import (
    Matrix,
    DenseVector,
    create,
    zeros,
    transpose_view,
    subblock,
    row,
    col,
    identity,
    rand_L1,
    rand_matrix,
    rand_spd,
    to_str,
)
from pymatrix.algorithms import (
    dot,
    mat_mul,
    transpose,
    cholesky_seq_inplace,
    cholesky,
    inverse,
    mat_mul_blocked,
    cholesky_blocked,
    par,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "PyMatrixError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    # Element types and configuration
    "FLOAT64",
    "FLOAT32",
    "INT64",
    "get_config",
    "set_config",
    # Matrices and views
    "Matrix",
    "DenseVector",
    "create",
    "zeros",
    "transpose_view",
    "subblock",
    "row",
    "col",
    "identity",
    "rand_L1",
    "rand_matrix",
    "rand_spd",
    "to_str",
    # Kernels
    "dot",
    "mat_mul",
    "transpose",
    "cholesky_seq_inplace",
    "cholesky",
    "inverse",
    "mat_mul_blocked",
    "cholesky_blocked",
    "par",
]
