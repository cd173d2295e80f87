"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
storage, the views, and every algorithm family (sequential, blocked,
parallel).

Key components:
    protocols: BasicMatrix, Vector, Ring protocols
    ring: NumPy-backed element types
    exceptions: Exception hierarchy
    validation: Input validators
    config: Block size / worker count configuration
    tolerances: Numerical agreement tiers
    timing: Timer for the benchmark driver
"""

from pymatrix.core.protocols import BasicMatrix, Vector, Ring, SqrtRing
from pymatrix.core.ring import NumpyRing, FLOAT64, FLOAT32, INT64, ring_of
from pymatrix.core.config import ComputeConfig, get_config, set_config, reset_config
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    IndexOutOfBoundsError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "BasicMatrix",
    "Vector",
    "Ring",
    "SqrtRing",
    # Rings
    "NumpyRing",
    "FLOAT64",
    "FLOAT32",
    "INT64",
    "ring_of",
    # Configuration
    "ComputeConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
