"""
Core infrastructure for qreigen.

Shared abstractions used by the linear-algebra library and the eigenvalue
solver.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Precision, timing and tolerance helpers
"""

from qreigen.core.protocols import Backend
from qreigen.core.result import Result
from qreigen.core.exceptions import (
    QREigenError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "QREigenError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
