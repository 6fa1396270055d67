"""
QR decomposition by classical Gram-Schmidt.

Each column j >= 1 is orthogonalized against the already-orthogonalized
columns k < j, with every projection taken of the ORIGINAL column j
(classical, not modified, Gram-Schmidt). All columns are then normalized,
column 0 included even though it had nothing to be orthogonalized against.

Known limitation: classical Gram-Schmidt loses orthogonality on
ill-conditioned or large matrices much faster than modified Gram-Schmidt
or Householder reflections. A zero (or linearly dependent) column gives a
zero-magnitude vector and the normalization fills Q, and therefore R, with
NaN. Neither case is detected here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray

from qreigen.linalg.primitives import (
    duplicate,
    get_column,
    normalize,
    product,
    project,
    subtract,
    transpose,
)


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Unpacks as a pair: ``Q, R = qr_decompose(A)``.

    Attributes:
        Q: Matrix with orthonormal columns (n x n)
        R: Q' A, upper triangular up to rounding (n x n)
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.Q, self.R))


def gram_schmidt_qr(A: NDArray[np.floating[Any]]) -> QRResult:
    """
    Decompose square matrix A into Q R.

    Expects an already-validated floating square matrix; A is not modified.
    """
    n = A.shape[0]
    U = duplicate(A)

    for j in range(1, n):
        u = get_column(U, j)
        v = get_column(U, j)

        for k in range(j - 1, -1, -1):
            # uk is a fresh copy; project() overwrites it
            uk = get_column(U, k)
            u = subtract(u, project(uk, v))

        U[:, j] = u

    for j in range(n):
        U[:, j] = normalize(get_column(U, j))

    Q = U
    R = product(transpose(Q), A)
    return QRResult(Q=Q, R=R)
