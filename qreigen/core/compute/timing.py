"""
Wall-clock timing for solver backends.

A backend wraps its whole run in a Timer and marks the repeated phases of
each QR step with named sections, so the reported breakdown shows how the
time splits between decomposition and recombination.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Run timer with accumulating named sections.

    Usage:
        with Timer() as timer:
            for _ in range(iterations):
                with timer.section('qr_decomposition'):
                    qr = gram_schmidt_qr(B)
                with timer.section('recombination'):
                    B = product(qr.R, qr.Q)

        timer.result()
        # {'total_seconds': 0.05, 'qr_decomposition': 0.04, 'recombination': 0.01}

    start()/stop() may be called directly instead of using ``with``.
    """

    def __init__(self):
        self._began: float | None = None
        self._elapsed: float | None = None
        self._sections: dict[str, float] = {}

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        self._began = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Total run time plus accumulated section times, in seconds.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}
