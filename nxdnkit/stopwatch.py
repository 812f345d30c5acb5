"""Millisecond stopwatch."""

from __future__ import annotations

import time as _time


class StopWatch:
    """Measures elapsed milliseconds on the monotonic clock."""

    def __init__(self) -> None:
        self._start_ms = 0

    def time(self) -> int:
        """Wall-clock time in milliseconds since the epoch."""
        return _time.time_ns() // 1_000_000

    def start(self) -> int:
        """Restart the stopwatch and return the monotonic start time in ms."""
        self._start_ms = _time.monotonic_ns() // 1_000_000
        return self._start_ms

    def elapsed(self) -> int:
        """Milliseconds since the last :meth:`start`."""
        return _time.monotonic_ns() // 1_000_000 - self._start_ms