"""
Exception hierarchy for qreigen.

All exceptions inherit from QREigenError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Note that the default numerical path never raises: division by zero and
non-convergence surface as non-finite or inaccurate output. NumericalError
and SingularMatrixError are only raised when the caller asks for it
(strict=True).
"""


class QREigenError(Exception):
    """Base exception for all qreigen errors."""
    pass


class ValidationError(QREigenError):
    """
    Input validation failed.

    Raised when user-provided inputs (matrices, iteration counts, options)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square, when an array has the wrong number
    of dimensions, or when two operands of a primitive have different sizes.
    """
    pass


class NumericalError(QREigenError):
    """
    Numerical computation produced unusable values.

    Raised in strict mode when the iterated matrix contains NaN or Inf,
    typically after a zero-magnitude column was normalized.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        n_nonfinite: Number of non-finite entries, if counted
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        n_nonfinite: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.n_nonfinite = n_nonfinite


class SingularMatrixError(NumericalError):
    """
    Matrix is singular: elimination hit a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column index of the zero pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message, matrix_name=matrix_name)
        self.pivot_index = pivot_index
