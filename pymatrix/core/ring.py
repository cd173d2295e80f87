"""
Concrete element types backed by NumPy dtypes.

A Ring binds a matrix to exactly one dtype. There is no coercion or
widening between rings: kernels accumulate in the operand's own type and
refuse operands of different rings.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class NumpyRing:
    """
    Ring over a single NumPy numeric dtype.

    Attributes:
        dtype: The element dtype. Floating dtypes support sqrt; integer
            dtypes do not.
    """
    dtype: np.dtype

    def __post_init__(self):
        dtype = np.dtype(self.dtype)
        if not np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.complexfloating):
            raise ValidationError(f"dtype: expected real numeric dtype, got {dtype}")
        object.__setattr__(self, 'dtype', dtype)

    def __str__(self) -> str:
        return str(self.dtype)

    def zero(self) -> Any:
        return self.dtype.type(0)

    def one(self) -> Any:
        return self.dtype.type(1)

    @property
    def supports_sqrt(self) -> bool:
        return bool(np.issubdtype(self.dtype, np.floating))

    def sqrt(self, x: Any) -> Any:
        """
        Square root in this ring.

        Raises:
            ValidationError: If the ring has no square root (integer dtypes)
        """
        if not self.supports_sqrt:
            raise ValidationError(f"element type {self.dtype} does not support sqrt")
        return self.dtype.type(np.sqrt(x))


FLOAT64 = NumpyRing(np.float64)
FLOAT32 = NumpyRing(np.float32)
INT64 = NumpyRing(np.int64)


def ring_of(dtype: DTypeLike) -> NumpyRing:
    """Return the ring for a dtype, reusing the module-level instances."""
    dtype = np.dtype(dtype)
    for ring in (FLOAT64, FLOAT32, INT64):
        if ring.dtype == dtype:
            return ring
    return NumpyRing(dtype)
