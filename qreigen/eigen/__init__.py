"""
QR eigenvalue module.

Approximates the eigenvalues of a real square matrix with the unshifted
QR algorithm, using classical Gram-Schmidt for each decomposition.

Public API:
    qr_eigen(matrix, iterations)         - Full solution with diagnostics
    run_eigenvalues(matrix, iterations)  - Eigenvalue estimates only
    qr_decompose(matrix)                 - Single Q R factorization
"""

from qreigen.eigen.design import EigenDesign
from qreigen.eigen.solution import EigenParams, EigenSolution
from qreigen.eigen._gram_schmidt import QRResult
from qreigen.eigen.solvers import qr_eigen, run_eigenvalues, qr_decompose

__all__ = [
    "qr_eigen",
    "run_eigenvalues",
    "qr_decompose",
    "EigenDesign",
    "EigenParams",
    "EigenSolution",
    "QRResult",
]
