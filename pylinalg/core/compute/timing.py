"""
Timing for host calls.

A host call runs in phases (decode the argument buffers, compute, encode
the result). Timer records wall-clock time per phase plus the total, and
reports them as one flat dict stored on Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with per-phase totals.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('decode'):
            matrix = decode_matrix(buffer)
        with timer.section('compute'):
            inverse = matrix.inverse()
        timer.stop()
        timer.result()
        # {'total_seconds': 0.0004, 'decode': 0.0001, 'compute': 0.0003}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        """
        Freeze the total elapsed time.

        Raises:
            RuntimeError: If start() was never called
        """
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time one phase. Repeated phases with the same name are summed.

        The phase is recorded even when its body raises, so a failed
        call still reports how far it got.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - began)

    @property
    def phases(self) -> dict[str, float]:
        """Copy of the per-phase totals recorded so far."""
        return dict(self._phases)

    def result(self) -> dict[str, float]:
        """
        Total and per-phase timings.

        Raises:
            RuntimeError: If stop() has not been called
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Start a Timer on entry and stop it on exit, even on error.

    Usage:
        with timed() as timer:
            payload = call('exp', buffer, timer=timer)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
