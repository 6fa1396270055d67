"""
Shared compute infrastructure for qreigen.

Submodules:
    precision: working dtype resolution
    timing: Execution timing utilities
    tolerances: Comparison tolerances per working precision
"""

from qreigen.core.compute.precision import SUPPORTED_DTYPES, resolve_dtype
from qreigen.core.compute.timing import Timer
from qreigen.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Precision
    "SUPPORTED_DTYPES",
    "resolve_dtype",
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
