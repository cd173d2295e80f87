"""
Linear algebra kernels in sequential, blocked and parallel forms.

All kernels accept any object satisfying the BasicMatrix protocol, including
views, and either return a newly allocated Matrix or (for *_inplace kernels)
mutate their argument.

Sequential:
    dot, mat_mul, transpose, cholesky_seq_inplace, cholesky,
    forward_substitute, back_substitute, cholesky_solve, inverse
Blocked:
    mat_mul_blocked, cholesky_blocked
Parallel (module `par`):
    par.mat_mul, par.cholesky_blocked, par.inverse
"""

from pymatrix.algorithms.sequential import (
    dot,
    mat_mul,
    mat_mul_accumulate,
    transpose,
    cholesky_seq_inplace,
    cholesky,
    forward_substitute,
    back_substitute,
    cholesky_solve,
    inverse,
)
from pymatrix.algorithms.blocked import mat_mul_blocked, cholesky_blocked
from pymatrix.algorithms import par

__all__ = [
    # Sequential
    "dot",
    "mat_mul",
    "mat_mul_accumulate",
    "transpose",
    "cholesky_seq_inplace",
    "cholesky",
    "forward_substitute",
    "back_substitute",
    "cholesky_solve",
    "inverse",
    # Blocked
    "mat_mul_blocked",
    "cholesky_blocked",
    # Parallel
    "par",
]
