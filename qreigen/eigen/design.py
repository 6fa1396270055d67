"""
EigenDesign: validated square-matrix input for the QR eigenvalue solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from qreigen.core.compute.precision import resolve_dtype
from qreigen.core.exceptions import ValidationError
from qreigen.core.validation import check_array, check_finite, check_square


@dataclass(frozen=True)
class EigenDesign:
    """
    Design for the eigenvalue solver.

    Holds a private copy of a finite, real, square matrix in the working
    dtype. The caller's array is never referenced after construction, so
    nothing downstream can modify it.

    Construction:
        EigenDesign.from_array(matrix)
        EigenDesign.from_array(matrix, dtype=np.float32)
    """
    _matrix: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, matrix: ArrayLike, *, dtype: DTypeLike | None = None) -> EigenDesign:
        """
        Build EigenDesign from array-like data.

        Parameters
        ----------
        matrix : array-like
            Square matrix (n x n), n >= 1.
        dtype : dtype, optional
            float32 or float64. None keeps a floating input dtype and
            promotes integer input to float64.
        """
        array = check_array(matrix, "matrix")
        check_square(array, "matrix")

        n = array.shape[0]
        if n < 1:
            raise ValidationError(f"matrix: need at least a 1x1 matrix, got shape {array.shape}")

        check_finite(array, "matrix")

        working = resolve_dtype(dtype, array.dtype)
        return cls(_matrix=np.array(array, dtype=working, copy=True), _n=n)

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Working copy of the input matrix (n x n)."""
        return self._matrix

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Working precision."""
        return self._matrix.dtype

    def __repr__(self) -> str:
        return f"EigenDesign(n={self._n}, dtype={self.dtype})"
