"""Monotonic stopwatch."""

from __future__ import annotations

import time


class Clock:
    """Measures time elapsed since creation or the last restart."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def _elapsed_ns(self) -> int:
        return time.perf_counter_ns() - self._start

    def seconds(self) -> float:
        """Elapsed time in seconds."""
        return self._elapsed_ns() / 1_000_000_000

    def milliseconds(self) -> int:
        """Elapsed time in whole milliseconds, truncated."""
        return self._elapsed_ns() // 1_000_000

    def restart(self) -> None:
        """Start measuring from now."""
        self._start = time.perf_counter_ns()