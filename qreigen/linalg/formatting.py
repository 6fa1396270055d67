"""
Brace-delimited text formatting for vectors and matrices.

Format:
    vector  {1,2,3}
    matrix  {1,2},{3,4}     (each row braced, rows comma-joined)

Numbers use the shortest digits that round-trip in their own dtype, with no
trailing ".0", so float32 values print as they would in single precision
(0.1f -> "0.1", not "0.10000000149011612").

Positional text is used while the decimal exponent e satisfies
-5 < e < 15 (float64) or -5 < e < 7 (float32), the same cut-over .NET
applies for its default number text. Outside that range the number is
written in scientific form with an upper-case E and a signed exponent of
at least two digits: 1e30 -> "1E+30", 1.5e-7 -> "1.5E-07".
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from qreigen.core.exceptions import DimensionError
from qreigen.core.validation import check_1d, check_array, check_square


# Largest decimal exponent still written positionally, per dtype
_POSITIONAL_MAX_EXPONENT = {
    np.dtype(np.float32): 6,
    np.dtype(np.float64): 14,
}
_POSITIONAL_MIN_EXPONENT = -4


def _format_number(x: np.floating[Any]) -> str:
    if np.isnan(x):
        return "nan"
    if np.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = np.format_float_scientific(x, trim='-', exp_digits=2)
    mantissa, exponent = text.split('e')
    e = int(exponent)
    max_exponent = _POSITIONAL_MAX_EXPONENT.get(np.asarray(x).dtype, 14)
    if _POSITIONAL_MIN_EXPONENT <= e <= max_exponent:
        return np.format_float_positional(x, trim='-')
    return f"{mantissa}E{exponent}"


def _format_row(row) -> str:
    return "{" + ",".join(_format_number(x) for x in row) + "}"


def format_vector(a: ArrayLike) -> str:
    """Format a vector as {v0,v1,...}."""
    a = check_array(a, "a")
    check_1d(a, "a")
    return _format_row(a)


def format_matrix(A: ArrayLike) -> str:
    """Format a square matrix as {row0},{row1},..."""
    A = check_array(A, "A")
    check_square(A, "A")
    return ",".join(_format_row(row) for row in A)


def format_array(x: ArrayLike) -> str:
    """Format a vector or a matrix, dispatching on dimensionality."""
    x = check_array(x, "x")
    if x.ndim == 1:
        return format_vector(x)
    if x.ndim == 2:
        return format_matrix(x)
    raise DimensionError(f"x: expected 1D or 2D array, got {x.ndim}D with shape {x.shape}")
