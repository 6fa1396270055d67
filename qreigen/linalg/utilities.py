"""
Supporting matrix utilities: identity, Gauss-Jordan inverse, diagonal sqrt.

These sit outside the eigenvalue iteration but are part of the public
linear-algebra surface.
"""

from __future__ import annotations

from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from qreigen.core.exceptions import SingularMatrixError, ValidationError
from qreigen.core.validation import check_array, check_non_negative_int, check_square


PivotStrategy = Literal['first_column', 'partial']


def identity(n: int, dtype: DTypeLike = np.float64) -> NDArray[np.floating[Any]]:
    """n x n identity matrix."""
    n = check_non_negative_int(n, "n")
    return np.eye(n, dtype=dtype)


def inverse(
    A: ArrayLike,
    *,
    pivoting: PivotStrategy = 'first_column',
    strict: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Invert a square matrix by Gauss-Jordan elimination on [A | I].

    Parameters
    ----------
    A : array-like
        Square matrix (n x n).
    pivoting : str
        'first_column' (default): one upward pass before elimination that
        swaps adjacent rows whenever the lower row has the larger value in
        column 0. No pivoting happens after that, so a zero on the diagonal
        later in the elimination is not avoided.
        'partial': standard partial pivoting, swapping in the row with the
        largest absolute value in the active column at every step.
    strict : bool
        If True, raise SingularMatrixError on a zero (or non-finite) pivot.
        If False, the division goes ahead and NaN/Inf end up in the result.

    Returns
    -------
    New n x n matrix.
    """
    if pivoting not in ('first_column', 'partial'):
        raise ValidationError(
            f"pivoting: expected 'first_column' or 'partial', got {pivoting!r}"
        )

    A = check_array(A, "A")
    check_square(A, "A")
    n = A.shape[0]

    aug = np.hstack([A, identity(n, dtype=A.dtype)])

    if pivoting == 'first_column':
        for i in range(n - 1, 0, -1):
            if aug[i - 1, 0] < aug[i, 0]:
                aug[[i - 1, i]] = aug[[i, i - 1]]

    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            if pivoting == 'partial':
                p = i + int(np.argmax(np.abs(aug[i:, i])))
                if p != i:
                    aug[[i, p]] = aug[[p, i]]

            pivot = aug[i, i]
            if strict and (pivot == 0 or not np.isfinite(pivot)):
                raise SingularMatrixError(
                    f"A: zero pivot at row {i}, matrix is singular "
                    f"(pivoting={pivoting!r})",
                    matrix_name='A',
                    pivot_index=i,
                )

            for j in range(n):
                if j != i:
                    aug[j] -= aug[i] * (aug[j, i] / pivot)

        for i in range(n):
            aug[i] /= aug[i, i]

    return aug[:, n:].copy()


def sqrt_diagonal(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Square root of a diagonal matrix.

    Only the diagonal is transformed; off-diagonal entries are copied as
    they are, so the result is only a matrix square root when A is
    diagonal. Negative diagonal entries become NaN.
    """
    A = check_array(A, "A")
    check_square(A, "A")
    B = np.array(A, copy=True)
    idx = np.diag_indices(A.shape[0])
    with np.errstate(invalid='ignore'):
        B[idx] = np.sqrt(B[idx])
    return B
