"""
CPU backend for the unshifted QR eigenvalue iteration.

Runs exactly the requested number of QR steps. There is no convergence
test and no early exit.
"""

from __future__ import annotations

import warnings

import numpy as np

from qreigen.core.exceptions import NumericalError
from qreigen.core.result import Result
from qreigen.core.compute.timing import Timer
from qreigen.eigen.design import EigenDesign
from qreigen.eigen.solution import EigenParams
from qreigen.eigen._gram_schmidt import gram_schmidt_qr
from qreigen.linalg.primitives import duplicate, product


class CPUQREigenBackend:
    """CPU backend: Gram-Schmidt QR followed by R Q recombination."""

    @property
    def name(self) -> str:
        return 'cpu_qr_gram_schmidt'

    def solve(
        self,
        design: EigenDesign,
        *,
        iterations: int,
        strict: bool = False,
        record_history: bool = False,
        stacklevel: int = 2,
    ) -> Result[EigenParams]:
        """
        Iterate B <- R Q starting from a copy of the design matrix.

        Parameters
        ----------
        design : EigenDesign
        iterations : int
            Number of QR steps, already validated as >= 0.
        strict : bool
            Raise NumericalError instead of warning when the final matrix
            holds NaN/Inf.
        record_history : bool
            Keep the diagonal after every step.
        stacklevel : int
            Passed to warnings.warn so the RuntimeWarning names the
            public caller rather than a frame inside this package.
        """
        n = design.n
        B = duplicate(design.matrix)
        history = np.empty((iterations, n), dtype=B.dtype) if record_history else None

        with Timer() as timer:
            for step in range(iterations):
                with timer.section('qr_decomposition'):
                    qr = gram_schmidt_qr(B)
                with timer.section('recombination'):
                    B = product(qr.R, qr.Q)
                if history is not None:
                    history[step] = np.diag(B)

        eigenvalues = np.diag(B).copy()

        warnings_list: list[str] = []
        n_nonfinite = int(np.sum(~np.isfinite(B)))
        finite = n_nonfinite == 0

        if not finite:
            message = (
                f"Iterated matrix contains {n_nonfinite} non-finite values after "
                f"{iterations} iterations; a column likely had zero magnitude "
                f"during normalization."
            )
            if strict:
                raise NumericalError(message, matrix_name='B', n_nonfinite=n_nonfinite)
            warnings.warn(message, RuntimeWarning, stacklevel=stacklevel)
            warnings_list.append(message)

        return Result(
            params=EigenParams(eigenvalues=eigenvalues, matrix=B, history=history),
            info={
                'method': 'qr_gram_schmidt',
                'iterations': iterations,
                'n': n,
                'dtype': str(B.dtype),
                'finite': finite,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
