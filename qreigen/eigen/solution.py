"""
Eigenvalue solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from qreigen.core.result import Result
from qreigen.linalg.formatting import format_vector

if TYPE_CHECKING:
    from qreigen.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for the QR eigenvalue iteration.

    eigenvalues are read off the diagonal of the final iterated matrix.
    They approximate the true eigenvalues only when those are real and
    distinct in magnitude and enough iterations were run.
    """
    eigenvalues: NDArray[np.floating[Any]]
    matrix: NDArray[np.floating[Any]]
    # Diagonal after each iteration, shape (iterations, n); None unless recorded
    history: NDArray[np.floating[Any]] | None = None


@dataclass
class EigenSolution:
    """
    User-facing eigenvalue results.

    Wraps Result[EigenParams] and provides convenient accessors.
    """
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]]:
        """Eigenvalue estimates, shape (n,), in diagonal order."""
        return self._result.params.eigenvalues

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        """Final iterated matrix (R Q of the last step), shape (n, n)."""
        return self._result.params.matrix

    @property
    def history(self) -> NDArray[np.floating[Any]] | None:
        """Diagonal after every iteration, shape (iterations, n), if recorded."""
        return self._result.params.history

    @property
    def iterations(self) -> int:
        return self._result.info['iterations']

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def dtype(self) -> np.dtype:
        return self._design.dtype

    @property
    def is_finite(self) -> bool:
        """False if the iteration produced NaN or Inf anywhere."""
        return self._result.info['finite']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of the run."""
        lines = [
            "QR Eigenvalue Iteration (classical Gram-Schmidt, unshifted)",
            f"  Matrix size: {self.n} x {self.n} ({self.dtype})",
            f"  Iterations: {self.iterations}",
            f"  Backend: {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"  Time: {self.timing['total_seconds']:.6f}s")
        lines.append("")
        lines.append("Eigenvalue estimates (diagonal order):")
        for i, value in enumerate(self.eigenvalues):
            lines.append(f"  [{i}] {value:.6g}")
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            for w in self.warnings:
                lines.append(f"  {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EigenSolution(n={self.n}, iterations={self.iterations}, "
            f"eigenvalues={format_vector(self.eigenvalues)})"
        )
