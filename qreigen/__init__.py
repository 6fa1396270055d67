"""
qreigen: eigenvalues of small dense matrices by the unshifted QR algorithm.

The QR decompositions use classical Gram-Schmidt, built on a small set of
dense vector/matrix primitives that are also usable on their own.

Submodules:
    eigen: QR eigenvalue iteration and QR decomposition
    linalg: Dense primitives, utilities and text formatting
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from qreigen import linalg
from qreigen import eigen
from qreigen.eigen import (
    qr_eigen,
    run_eigenvalues,
    qr_decompose,
    EigenSolution,
    QRResult,
)

__all__ = [
    "__version__",
    "linalg",
    "eigen",
    "qr_eigen",
    "run_eigenvalues",
    "qr_decompose",
    "EigenSolution",
    "QRResult",
]
