"""
Owned storage: row-major matrices and dense vectors.

Matrix owns one contiguous NumPy buffer of rows*cols elements. Every
element access is bounds-checked; views (see views.py) remap indices onto
this storage without copying.
"""

from typing import Any, Callable, Iterable, Sequence

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.ring import FLOAT64, NumpyRing
from pymatrix.core.validation import check_index, check_vector_index


def _check_extent(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise ValidationError(f"{name}: expected non-negative integer, got {value!r}")


class Matrix:
    """
    A dense matrix in row-major order.

    Element (i, j) lives at offset i * cols + j of the buffer. The buffer
    length always equals rows * cols; there is no resizing.

    Attributes:
        ring: Element type of every entry
    """

    __slots__ = ('_rows', '_cols', '_data', '_ring')

    def __init__(self, rows: int, cols: int, ring: NumpyRing = FLOAT64):
        _check_extent(rows, 'rows')
        _check_extent(cols, 'cols')
        self._rows = int(rows)
        self._cols = int(cols)
        self._ring = ring
        self._data = np.zeros(self._rows * self._cols, dtype=ring.dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], ring: NumpyRing = FLOAT64) -> 'Matrix':
        """
        Build a matrix from nested row sequences.

        Raises:
            ValidationError: If the rows are ragged
        """
        rows = [list(r) for r in rows]
        n_cols = len(rows[0]) if rows else 0
        for i, r in enumerate(rows):
            if len(r) != n_cols:
                raise ValidationError(
                    f"rows: ragged input, row 0 has {n_cols} entries but row {i} has {len(r)}"
                )
        return create(len(rows), n_cols, lambda i, j: rows[i][j], ring)

    @property
    def ring(self) -> NumpyRing:
        return self._ring

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def num_rows(self) -> int:
        return self._rows

    def num_cols(self) -> int:
        return self._cols

    def get(self, i: int, j: int) -> Any:
        check_index(i, j, self._rows, self._cols, 'Matrix')
        return self._data[i * self._cols + j]

    def set(self, i: int, j: int, x: Any) -> None:
        check_index(i, j, self._rows, self._cols, 'Matrix')
        self._data[i * self._cols + j] = x

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        return self.get(*ij)

    def __setitem__(self, ij: tuple[int, int], x: Any) -> None:
        self.set(ij[0], ij[1], x)

    def copy(self) -> 'Matrix':
        """Deep copy with an independent buffer."""
        out = Matrix(self._rows, self._cols, self._ring)
        out._data[:] = self._data
        return out

    def __repr__(self) -> str:
        return f"Matrix({self._rows}x{self._cols}, {self._ring})"


class DenseVector:
    """
    An owned 1-D buffer satisfying the Vector protocol.

    Used for right-hand sides and intermediate solutions of the
    triangular solves.
    """

    __slots__ = ('_data', '_ring')

    def __init__(self, length: int, ring: NumpyRing = FLOAT64):
        _check_extent(length, 'length')
        self._ring = ring
        self._data = np.zeros(int(length), dtype=ring.dtype)

    @classmethod
    def from_values(cls, values: Iterable[Any], ring: NumpyRing = FLOAT64) -> 'DenseVector':
        values = list(values)
        out = cls(len(values), ring)
        for k, x in enumerate(values):
            out._data[k] = x
        return out

    @property
    def ring(self) -> NumpyRing:
        return self._ring

    def __len__(self) -> int:
        return len(self._data)

    def get(self, i: int) -> Any:
        check_vector_index(i, len(self._data), 'DenseVector')
        return self._data[i]

    def set(self, i: int, x: Any) -> None:
        check_vector_index(i, len(self._data), 'DenseVector')
        self._data[i] = x

    def __getitem__(self, i: int) -> Any:
        return self.get(i)

    def __setitem__(self, i: int, x: Any) -> None:
        self.set(i, x)

    def to_list(self) -> list:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"DenseVector({len(self._data)}, {self._ring})"


def create(
    rows: int,
    cols: int,
    init: Callable[[int, int], Any],
    ring: NumpyRing = FLOAT64,
) -> Matrix:
    """
    Allocate a rows x cols matrix, calling init(i, j) once per cell.

    The call order is an implementation detail; init must be a pure
    function of its coordinates.

    Example:
        >>> eye = create(3, 3, lambda i, j: 1.0 if i == j else 0.0)
    """
    m = Matrix(rows, cols, ring)
    data = m._data
    for k in range(m.num_rows() * m.num_cols()):
        i, j = divmod(k, m.num_cols())
        data[k] = init(i, j)
    return m


def zeros(rows: int, cols: int, ring: NumpyRing = FLOAT64) -> Matrix:
    """A rows x cols matrix filled with the ring's zero."""
    return Matrix(rows, cols, ring)
