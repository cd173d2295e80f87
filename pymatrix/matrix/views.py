"""
Zero-copy views over matrices.

Each view holds a reference to its base and remaps indices; nothing is
copied. Writes through a view mutate the base in place. This is how the
blocked kernels address tiles and how a transpose can be fed straight
into a multiply without materializing it.

Views:
    TransposeMatrix: (i, j) -> base(j, i)
    SubMatrix: (i, j) -> base(i + i0, j + j0), window validated eagerly
    RowVector: k -> base(i, k)
    ColumnVector: k -> base(k, j)
"""

from typing import Any

from pymatrix.core.protocols import BasicMatrix
from pymatrix.core.validation import (
    check_index,
    check_subblock,
    check_vector_index,
)


class TransposeMatrix:
    """Transposed view of a base matrix with swapped dimensions."""

    __slots__ = ('base',)

    def __init__(self, base: BasicMatrix):
        self.base = base

    @property
    def ring(self):
        return self.base.ring

    @property
    def shape(self) -> tuple[int, int]:
        return (self.num_rows(), self.num_cols())

    def num_rows(self) -> int:
        return self.base.num_cols()

    def num_cols(self) -> int:
        return self.base.num_rows()

    def get(self, i: int, j: int) -> Any:
        check_index(i, j, self.num_rows(), self.num_cols(), 'TransposeMatrix')
        return self.base.get(j, i)

    def set(self, i: int, j: int, x: Any) -> None:
        check_index(i, j, self.num_rows(), self.num_cols(), 'TransposeMatrix')
        self.base.set(j, i, x)

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        return self.get(*ij)

    def __setitem__(self, ij: tuple[int, int], x: Any) -> None:
        self.set(ij[0], ij[1], x)

    def __repr__(self) -> str:
        return f"TransposeMatrix({self.base!r})"


class SubMatrix:
    """
    Rectangular window into a base matrix.

    The window (i0, j0, rows, cols) is validated against the base at
    construction. A SubMatrix of a SubMatrix re-targets the outer window
    onto the innermost base, so nesting depth never grows.

    Attributes:
        base: Matrix the window indexes into
        i0, j0: Offset of the window's (0, 0) within base
    """

    __slots__ = ('base', 'i0', 'j0', '_rows', '_cols')

    def __init__(self, base: BasicMatrix, i0: int, j0: int, rows: int, cols: int):
        check_subblock(base, i0, j0, rows, cols, 'SubMatrix')
        if isinstance(base, SubMatrix):
            i0 += base.i0
            j0 += base.j0
            base = base.base
        self.base = base
        self.i0 = i0
        self.j0 = j0
        self._rows = rows
        self._cols = cols

    @property
    def ring(self):
        return self.base.ring

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    def num_rows(self) -> int:
        return self._rows

    def num_cols(self) -> int:
        return self._cols

    def get(self, i: int, j: int) -> Any:
        check_index(i, j, self._rows, self._cols, 'SubMatrix')
        return self.base.get(i + self.i0, j + self.j0)

    def set(self, i: int, j: int, x: Any) -> None:
        check_index(i, j, self._rows, self._cols, 'SubMatrix')
        self.base.set(i + self.i0, j + self.j0, x)

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        return self.get(*ij)

    def __setitem__(self, ij: tuple[int, int], x: Any) -> None:
        self.set(ij[0], ij[1], x)

    def __repr__(self) -> str:
        return (
            f"SubMatrix({self.base!r}, offset={(self.i0, self.j0)}, "
            f"extent={(self._rows, self._cols)})"
        )


class RowVector:
    """Row i of a base matrix as a Vector."""

    __slots__ = ('base', 'i')

    def __init__(self, base: BasicMatrix, i: int):
        check_vector_index(i, base.num_rows(), 'RowVector')
        self.base = base
        self.i = i

    @property
    def ring(self):
        return self.base.ring

    def __len__(self) -> int:
        return self.base.num_cols()

    def get(self, j: int) -> Any:
        check_vector_index(j, len(self), 'RowVector')
        return self.base.get(self.i, j)

    def set(self, j: int, x: Any) -> None:
        check_vector_index(j, len(self), 'RowVector')
        self.base.set(self.i, j, x)

    def __getitem__(self, j: int) -> Any:
        return self.get(j)

    def __setitem__(self, j: int, x: Any) -> None:
        self.set(j, x)


class ColumnVector:
    """Column j of a base matrix as a Vector."""

    __slots__ = ('base', 'j')

    def __init__(self, base: BasicMatrix, j: int):
        check_vector_index(j, base.num_cols(), 'ColumnVector')
        self.base = base
        self.j = j

    @property
    def ring(self):
        return self.base.ring

    def __len__(self) -> int:
        return self.base.num_rows()

    def get(self, i: int) -> Any:
        check_vector_index(i, len(self), 'ColumnVector')
        return self.base.get(i, self.j)

    def set(self, i: int, x: Any) -> None:
        check_vector_index(i, len(self), 'ColumnVector')
        self.base.set(i, self.j, x)

    def __getitem__(self, i: int) -> Any:
        return self.get(i)

    def __setitem__(self, i: int, x: Any) -> None:
        self.set(i, x)


def transpose_view(m: BasicMatrix) -> TransposeMatrix:
    """Zero-copy transpose of m."""
    return TransposeMatrix(m)


def subblock(m: BasicMatrix, i0: int, j0: int, rows: int, cols: int) -> SubMatrix:
    """Zero-copy rows x cols window of m starting at (i0, j0)."""
    return SubMatrix(m, i0, j0, rows, cols)


def row(m: BasicMatrix, i: int) -> RowVector:
    return RowVector(m, i)


def col(m: BasicMatrix, j: int) -> ColumnVector:
    return ColumnVector(m, j)
