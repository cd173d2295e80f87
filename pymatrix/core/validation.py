"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently clamping
indices or reshaping operands.

Design principles:
    - No silent coercion between element types
    - No Python-style negative index wrap-around
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

from pymatrix.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pymatrix.core.protocols import BasicMatrix, Ring, Vector


def check_index(i: int, j: int, rows: int, cols: int, name: str) -> None:
    """
    Verify (i, j) lies inside a rows x cols matrix.

    Raises:
        IndexOutOfBoundsError: If either coordinate is out of range
    """
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexOutOfBoundsError(
            f"{name}: index {(i, j)} out of bounds for dimension {(rows, cols)}",
            index=(i, j),
            shape=(rows, cols),
        )


def check_vector_index(i: int, length: int, name: str) -> None:
    """
    Verify i lies inside a vector of the given length.

    Raises:
        IndexOutOfBoundsError: If i is out of range
    """
    if not 0 <= i < length:
        raise IndexOutOfBoundsError(
            f"{name}: index {i} out of bounds for length {length}",
            index=i,
            shape=length,
        )


def check_subblock(
    base: BasicMatrix,
    i0: int,
    j0: int,
    rows: int,
    cols: int,
    name: str,
) -> None:
    """
    Verify an (i0, j0) offset with (rows, cols) extent fits inside base.

    Raises:
        IndexOutOfBoundsError: If the window is negative or overruns base
    """
    base_rows, base_cols = base.num_rows(), base.num_cols()
    if min(i0, j0, rows, cols) < 0:
        raise IndexOutOfBoundsError(
            f"{name}: negative offset or extent (offset={(i0, j0)}, extent={(rows, cols)})",
            index=(i0, j0),
            shape=(base_rows, base_cols),
        )
    if i0 + rows > base_rows or j0 + cols > base_cols:
        raise IndexOutOfBoundsError(
            f"{name}: sub-block at offset {(i0, j0)} with extent {(rows, cols)} "
            f"exceeds base dimension {(base_rows, base_cols)}",
            index=(i0 + rows, j0 + cols),
            shape=(base_rows, base_cols),
        )


def check_same_length(u: Vector, v: Vector, names: tuple[str, str]) -> None:
    """
    Verify two vectors have equal length.

    Raises:
        DimensionError: If lengths differ
    """
    if len(u) != len(v):
        raise DimensionError(
            f"Inconsistent lengths: {names[0]}={len(u)}, {names[1]}={len(v)}",
            expected=len(u),
            actual=len(v),
        )


def check_multipliable(A: BasicMatrix, B: BasicMatrix, names: tuple[str, str]) -> None:
    """
    Verify A.num_cols() == B.num_rows().

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if A.num_cols() != B.num_rows():
        raise DimensionError(
            f"Cannot multiply {names[0]} ({A.num_rows()}x{A.num_cols()}) by "
            f"{names[1]} ({B.num_rows()}x{B.num_cols()}): inner dimensions differ",
            expected=A.num_cols(),
            actual=B.num_rows(),
        )


def check_same_shape(A: BasicMatrix, B: BasicMatrix, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionError: If shapes differ
    """
    shape_a = (A.num_rows(), A.num_cols())
    shape_b = (B.num_rows(), B.num_cols())
    if shape_a != shape_b:
        raise DimensionError(
            f"Inconsistent shapes: {names[0]}={shape_a}, {names[1]}={shape_b}",
            expected=shape_a,
            actual=shape_b,
        )


def check_square(A: BasicMatrix, name: str) -> None:
    """
    Verify A is square.

    Raises:
        DimensionError: If A is not square
    """
    if A.num_rows() != A.num_cols():
        raise DimensionError(
            f"{name}: expected square matrix, got {A.num_rows()}x{A.num_cols()}",
            expected=(A.num_rows(), A.num_rows()),
            actual=(A.num_rows(), A.num_cols()),
        )


def check_same_ring(a: Ring, b: Ring, names: tuple[str, str]) -> None:
    """
    Verify two operands share one element type.

    Raises:
        ValidationError: If the rings differ
    """
    if a != b:
        raise ValidationError(
            f"Element types differ: {names[0]}={a}, {names[1]}={b} "
            f"(no implicit widening)"
        )


def check_sqrt_ring(ring: Ring, name: str) -> None:
    """
    Verify the ring provides a square root.

    Raises:
        ValidationError: If the element type has no sqrt
    """
    if not getattr(ring, 'supports_sqrt', False):
        raise ValidationError(
            f"{name}: element type {ring} does not support sqrt, "
            f"required for Cholesky factorization"
        )


def check_positive_int(value: int, name: str) -> None:
    """
    Verify value is an integer >= 1.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValidationError(f"{name}: expected positive integer, got {value!r}")
