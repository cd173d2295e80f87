"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Kernel-specific failures should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided parameters (block size, worker count,
    element type) fail validation checks.
    """
    pass


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Coordinate lies outside a matrix, vector or view.

    Raised by get/set on any matrix-like object and by view construction
    when the requested window does not fit inside its base.

    Attributes:
        index: The offending index (int or (i, j) tuple)
        shape: Dimensions the index was checked against
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | int | None = None,
        shape: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when vector lengths or matrix shapes don't match what an
    operation requires (dot, multiply, square-only factorizations).

    Attributes:
        expected: Expected dimension(s), if known
        actual: Actual dimension(s), if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a triangular solve meets a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column of the zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when Cholesky factorization meets a non-positive radicand
    on the diagonal.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column at which the factorization broke down
        radicand: The non-positive value under the square root
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        radicand: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.radicand = radicand
