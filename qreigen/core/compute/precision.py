"""
Working dtype resolution.

Double precision is the default; single precision is supported throughout
for callers that want float32 results.
"""

import numpy as np
from numpy.typing import DTypeLike

from qreigen.core.exceptions import ValidationError


SUPPORTED_DTYPES: tuple[np.dtype, ...] = (np.dtype(np.float32), np.dtype(np.float64))


def resolve_dtype(requested: DTypeLike | None, inferred: np.dtype) -> np.dtype:
    """
    Pick the working dtype for a computation.

    Args:
        requested: dtype asked for by the caller, or None to infer
        inferred: dtype of the input array

    Returns:
        float32 or float64

    Raises:
        ValidationError: If the requested dtype is not float32/float64
    """
    if requested is None:
        if inferred in SUPPORTED_DTYPES:
            return inferred
        return np.dtype(np.float64)

    try:
        dtype = np.dtype(requested)
    except TypeError as e:
        raise ValidationError(f"dtype: not a valid dtype: {requested!r}") from e

    if dtype not in SUPPORTED_DTYPES:
        raise ValidationError(
            f"dtype: expected float32 or float64, got {dtype}"
        )
    return dtype
