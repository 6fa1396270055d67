"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two supported working precisions:
- CPU FP64: near machine precision for well-conditioned problems
- CPU FP32: relaxed for single-precision arithmetic

Used by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64',
    description='CPU double precision',
)

CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='CPU single precision',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select appropriate tolerance tier for a working dtype."""
    if np.dtype(dtype) == np.float32:
        return CPU_FP32
    return CPU_FP64
