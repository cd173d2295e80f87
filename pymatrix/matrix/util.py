"""
Formatting and NumPy conversion helpers.

None of these sit on a performance path; they exist for diagnostics,
the benchmark driver, and test assertions.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.protocols import BasicMatrix
from pymatrix.core.ring import ring_of
from pymatrix.matrix.storage import Matrix, create


def to_str(m: BasicMatrix, precision: int = 4) -> str:
    """
    Human-readable rendering, one bracketed row per line.

    Example:
        >>> print(to_str(identity(2), precision=1))
        [[1.0, 0.0],
         [0.0, 1.0]]
    """
    rows = []
    for i in range(m.num_rows()):
        cells = []
        for j in range(m.num_cols()):
            x = m.get(i, j)
            if np.issubdtype(type(x), np.integer):
                cells.append(str(int(x)))
            else:
                cells.append(f"{float(x):.{precision}f}")
        rows.append("[" + ", ".join(cells) + "]")
    if not rows:
        return "[]"
    return "[" + ",\n ".join(rows) + "]"


def to_numpy(m: BasicMatrix) -> NDArray:
    """Materialize any matrix-like object as a 2-D ndarray (copy)."""
    out = np.empty((m.num_rows(), m.num_cols()), dtype=m.ring.dtype)
    for i in range(m.num_rows()):
        for j in range(m.num_cols()):
            out[i, j] = m.get(i, j)
    return out


def from_numpy(a: ArrayLike) -> Matrix:
    """
    Copy a 2-D array into a new Matrix with the array's element type.

    Raises:
        DimensionError: If a is not 2-D
    """
    a = np.asarray(a)
    if a.ndim != 2:
        raise DimensionError(
            f"a: expected 2D array, got {a.ndim}D with shape {a.shape}",
            expected=2,
            actual=a.ndim,
        )
    return create(a.shape[0], a.shape[1], lambda i, j: a[i, j], ring_of(a.dtype))
