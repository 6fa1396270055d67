"""
Solver dispatch for the QR eigenvalue iteration.

Provides qr_eigen() as the full entry point, run_eigenvalues() for the
bare estimate vector, and qr_decompose() for a single decomposition.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from qreigen.core.compute.precision import resolve_dtype
from qreigen.core.exceptions import ValidationError
from qreigen.core.protocols import Backend
from qreigen.core.validation import check_non_negative_int
from qreigen.eigen.design import EigenDesign
from qreigen.eigen.solution import EigenParams, EigenSolution
from qreigen.eigen._gram_schmidt import QRResult, gram_schmidt_qr
from qreigen.eigen.backends.cpu import CPUQREigenBackend


BackendChoice = Literal['cpu']


def _ensure_design(matrix: ArrayLike | EigenDesign, dtype: DTypeLike | None) -> EigenDesign:
    """Convert raw array to EigenDesign if needed."""
    if isinstance(matrix, EigenDesign):
        if dtype is not None and resolve_dtype(dtype, matrix.dtype) != matrix.dtype:
            return EigenDesign.from_array(matrix.matrix, dtype=dtype)
        return matrix
    return EigenDesign.from_array(matrix, dtype=dtype)


def _get_backend(backend: BackendChoice) -> Backend[EigenParams]:
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUQREigenBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


def _solve(
    matrix: ArrayLike | EigenDesign,
    iterations: int,
    *,
    dtype: DTypeLike | None = None,
    strict: bool = False,
    record_history: bool = False,
    backend: BackendChoice = 'cpu',
    stacklevel: int,
) -> EigenSolution:
    # stacklevel counts from the backend's warnings.warn call: backend,
    # _solve, public entry point, caller.
    iterations = check_non_negative_int(iterations, "iterations")
    design = _ensure_design(matrix, dtype)
    be = _get_backend(backend)

    result = be.solve(
        design,
        iterations=iterations,
        strict=strict,
        record_history=record_history,
        stacklevel=stacklevel,
    )

    return EigenSolution(_result=result, _design=design)


def qr_eigen(
    matrix: ArrayLike | EigenDesign,
    iterations: int,
    *,
    dtype: DTypeLike | None = None,
    strict: bool = False,
    record_history: bool = False,
    backend: BackendChoice = 'cpu',
) -> EigenSolution:
    """
    Approximate eigenvalues with the unshifted QR algorithm.

    Repeats B <- R Q, where B = Q R by classical Gram-Schmidt, exactly
    `iterations` times, then reads the estimates off the diagonal of B.

    The estimates are accurate only when the eigenvalues are real with
    distinct magnitudes and enough iterations have been run. Repeated or
    complex-conjugate eigenvalues do not converge, and nothing reports that.

    Parameters
    ----------
    matrix : array-like or EigenDesign
        Real square matrix (n x n). Never modified.
    iterations : int
        Number of QR steps (>= 0). 0 returns the input diagonal.
    dtype : dtype, optional
        float32 or float64 working precision.
    strict : bool
        Raise NumericalError if the result contains NaN/Inf. Otherwise a
        RuntimeWarning is emitted and the values are returned as they are.
    record_history : bool
        Keep the diagonal after every iteration in ``solution.history``.
    backend : str
        'cpu'.

    Returns
    -------
    EigenSolution
    """
    return _solve(
        matrix,
        iterations,
        dtype=dtype,
        strict=strict,
        record_history=record_history,
        backend=backend,
        stacklevel=4,
    )


def run_eigenvalues(matrix: ArrayLike, iterations: int) -> NDArray[np.floating[Any]]:
    """
    Eigenvalue estimates of `matrix` after `iterations` QR steps.

    Shorthand for ``qr_eigen(matrix, iterations).eigenvalues``.
    """
    return _solve(matrix, iterations, stacklevel=4).eigenvalues


def qr_decompose(matrix: ArrayLike, *, dtype: DTypeLike | None = None) -> QRResult:
    """
    QR decomposition of a square matrix by classical Gram-Schmidt.

    Parameters
    ----------
    matrix : array-like
        Real square matrix (n x n). Never modified.
    dtype : dtype, optional
        float32 or float64 working precision.

    Returns
    -------
    QRResult with Q (orthonormal columns) and R = Q' A.
    """
    design = EigenDesign.from_array(matrix, dtype=dtype)
    return gram_schmidt_qr(design.matrix)
