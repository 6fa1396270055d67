"""
Generic result container for qreigen computations.

The Result class is the envelope every backend returns. The domain payload
(eigenvalue estimates, iterated matrix, history) lives in params; shared
metadata such as timing, the backend identifier and non-fatal warnings
travels alongside it.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (iterations, dtype, finiteness)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload
        info: Structured metadata (method, iterations, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EigenParams(eigenvalues=d, matrix=B),
        ...     info={'method': 'qr_gram_schmidt', 'iterations': 100},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_qr_gram_schmidt'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

