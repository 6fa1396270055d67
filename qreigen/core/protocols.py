"""
Core protocols for qreigen.

Structural interfaces that solver backends must satisfy. Protocol
(structural typing) rather than ABC keeps backends free of a common base
class while still letting the dispatcher type-check them.
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[P]):
    """
    Protocol for eigenvalue backends.

    A backend takes a validated design and produces a Result envelope.
    Backends are stateless: all configuration is passed to solve(), which
    makes them safe to share between calls and threads.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_qr_gram_schmidt'.
        """
        ...

    def solve(self, design, **options) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If strict checking is requested and the
                computation produced non-finite values
            ValidationError: If options are invalid for this backend
        """
        ...
