"""A simple start/stop stopwatch."""

from __future__ import annotations

import time
from typing import Optional


class Timer:
    """Stopwatch that starts running when created."""

    def __init__(self) -> None:
        self._begin = time.perf_counter()
        self._stop: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._stop is None

    def start(self) -> None:
        """Restart timing from now."""
        self._begin = time.perf_counter()
        self._stop = None

    def stop(self) -> None:
        """Freeze the elapsed time; has no effect if already stopped."""
        if self.running:
            self._stop = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since start, up to the stop time if stopped."""
        end = time.perf_counter() if self._stop is None else self._stop
        return end - self._begin