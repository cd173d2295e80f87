"""
Core protocols for PyMatrix.

These define the structural interfaces every matrix-like object satisfies.
We use Protocol (structural typing) rather than ABC (nominal typing) so
owned storage and the zero-copy views are interchangeable in every kernel
without sharing a base class.

Design Principles:
    - Minimal contracts: get/set plus dimensions, nothing else
    - Kernels are written against these protocols, never a concrete type
    - Type-safe: the element type travels with the matrix as a Ring
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Ring(Protocol):
    """
    Numeric element type with additive and multiplicative identities.

    Corresponds loosely to the abstract-algebra notion of a ring: elements
    support addition and multiplication, and the ring knows its zero and one.
    """

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype for elements of this ring."""
        ...

    def zero(self) -> Any:
        """Additive identity."""
        ...

    def one(self) -> Any:
        """Multiplicative identity."""
        ...


@runtime_checkable
class SqrtRing(Ring, Protocol):
    """A Ring that also provides a square root (required by Cholesky)."""

    @property
    def supports_sqrt(self) -> bool:
        ...

    def sqrt(self, x: Any) -> Any:
        ...


@runtime_checkable
class BasicMatrix(Protocol):
    """
    Capability contract shared by storage matrices and matrix views.

    get/set raise IndexOutOfBoundsError for coordinates outside
    (num_rows(), num_cols()). num_rows/num_cols are O(1).
    """

    @property
    def ring(self) -> Ring:
        ...

    def get(self, i: int, j: int) -> Any:
        ...

    def set(self, i: int, j: int, x: Any) -> None:
        ...

    def num_rows(self) -> int:
        ...

    def num_cols(self) -> int:
        ...


@runtime_checkable
class Vector(Protocol):
    """
    Capability contract for 1-D indexed access.

    Implemented by owned DenseVector storage and by the row/column views
    into a matrix.
    """

    @property
    def ring(self) -> Ring:
        ...

    def __len__(self) -> int:
        ...

    def get(self, i: int) -> Any:
        ...

    def set(self, i: int, x: Any) -> None:
        ...
