"""
Dense linear algebra for qreigen.

Small, dependency-light building blocks operating on numpy arrays of
fixed size n. The Gram-Schmidt QR decomposition is written entirely in
terms of these primitives.

Submodules:
    primitives: column access, copies, inner products, projections, products
    utilities: identity, Gauss-Jordan inverse, diagonal square root
    formatting: {..}-delimited text output
"""

from qreigen.linalg.primitives import (
    get_column,
    duplicate,
    scale,
    inner_product,
    project,
    subtract,
    product,
    transpose,
    magnitude,
    normalize,
)
from qreigen.linalg.utilities import identity, inverse, sqrt_diagonal
from qreigen.linalg.formatting import format_vector, format_matrix, format_array

__all__ = [
    # Primitives
    "get_column",
    "duplicate",
    "scale",
    "inner_product",
    "project",
    "subtract",
    "product",
    "transpose",
    "magnitude",
    "normalize",
    # Utilities
    "identity",
    "inverse",
    "sqrt_diagonal",
    # Formatting
    "format_vector",
    "format_matrix",
    "format_array",
]
