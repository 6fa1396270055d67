"""
Dense vector/matrix primitives used by the Gram-Schmidt QR decomposition.

Ownership contract:
    scale(), project() and subtract() update their FIRST argument in place
    and return that same array. Passing an array to one of them hands it
    over: the caller must not rely on its previous contents afterwards.
    Take a fresh copy with get_column() or duplicate() first if the old
    values are still needed.

    Every other function allocates its result and leaves inputs untouched.

Division by zero is not trapped. A zero vector passed to project() or
normalize() produces NaN/Inf, which propagates to the caller silently.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from qreigen.core.validation import (
    check_1d,
    check_2d,
    check_floating_array,
    check_index,
    check_same_shape,
    check_square,
)


def get_column(A: NDArray[np.floating[Any]], j: int) -> NDArray[np.floating[Any]]:
    """
    Copy column j of A into a new vector.

    Args:
        A: Matrix (n x n)
        j: Column index, 0 <= j < n

    Returns:
        New vector of length n; A is not modified
    """
    A = np.asarray(A)
    check_2d(A, "A")
    check_index(j, A.shape[1], "j")
    return A[:, j].copy()


def duplicate(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Deep copy of A with the same dtype; shares no memory with A."""
    return np.array(A, copy=True)


def scale(a: NDArray[np.floating[Any]], s: float) -> NDArray[np.floating[Any]]:
    """
    Multiply every element of a by s, in place.

    Returns:
        a itself (mutated)
    """
    check_floating_array(a, "a")
    a *= s
    return a


def inner_product(a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]) -> np.floating[Any]:
    """
    Inner product sum(a_i * b_i).

    Raises:
        DimensionError: If a and b are not vectors of equal length
    """
    a = np.asarray(a)
    b = np.asarray(b)
    check_1d(a, "a")
    check_1d(b, "b")
    check_same_shape(a, b, ("a", "b"))
    return np.dot(a, b)


def project(a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Scale a in place by (a.b)/(a.a) and return it.

    The result is the orthogonal projection of b onto the line spanned by a.
    Note the mutation target is a, not b: the Gram-Schmidt loop passes a
    throwaway copy of an earlier column here.

    Args:
        a: Direction vector, overwritten with the projection
        b: Vector being projected

    Returns:
        a itself (mutated)
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        factor = inner_product(a, b) / inner_product(a, a)
    return scale(a, factor)


def subtract(a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Element-wise a - b, written into a.

    Returns:
        a itself (mutated)

    Raises:
        DimensionError: If shapes differ
    """
    check_floating_array(a, "a")
    b = np.asarray(b)
    check_same_shape(a, b, ("a", "b"))
    a -= b
    return a


def product(A: NDArray[np.floating[Any]], B: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Matrix product A.B as a newly allocated matrix.

    Raises:
        DimensionError: If A and B are not square matrices of the same size
    """
    A = np.asarray(A)
    B = np.asarray(B)
    check_square(A, "A")
    check_square(B, "B")
    check_same_shape(A, B, ("A", "B"))
    return A @ B


def transpose(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """New matrix B with B[i, j] = A[j, i]. Exact; no arithmetic involved."""
    A = np.asarray(A)
    check_2d(A, "A")
    return A.T.copy()


def magnitude(a: NDArray[np.floating[Any]]) -> np.floating[Any]:
    """Euclidean norm sqrt(sum a_i^2), in the dtype of a."""
    a = np.asarray(a)
    return np.sqrt(inner_product(a, a))


def normalize(a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """New vector a / magnitude(a). A zero vector gives NaN entries."""
    a = np.asarray(a)
    with np.errstate(divide='ignore', invalid='ignore'):
        return a / magnitude(a)
