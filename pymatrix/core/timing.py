"""
Execution timing utilities for the benchmark driver.

Kernels themselves are never timed; the driver wraps each call in a
named section and reports the accumulated wall-clock seconds.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating wall-clock timer with named sections.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('mat_mul'):
            C = mat_mul(A, B)

        with timer.section('cholesky_blocked'):
            L = cholesky_blocked(A)

        timer.stop()
        timer.result()
        # {'total_seconds': 1.2, 'mat_mul': 0.9, 'cholesky_blocked': 0.3}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._order: list[str] = []
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Repeated sections with the same name accumulate.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            if name not in self._sections:
                self._order.append(name)
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def sections(self) -> list[tuple[str, float]]:
        """Section timings in first-seen order."""
        return [(name, self._sections[name]) for name in self._order]

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            L = cholesky_blocked(A)
        print(f"Took {timer.result()['total_seconds']:.3f}s")
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
