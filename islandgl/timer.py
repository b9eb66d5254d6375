"""Frame timer measuring the time between ticks."""

from __future__ import annotations

import time


class GameTimer:
    """Tracks total elapsed time and the time between successive ticks."""

    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._first = clock()
        self._now = self._first
        self.time_delta = 0.0
        self.tick()

    def tick(self) -> None:
        """Record a new frame and update `time_delta` in seconds."""
        latest = self._clock()
        self.time_delta = latest - self._now
        self._now = latest

    def total_time_seconds(self) -> float:
        return self._clock() - self._first

    def total_time_msec(self) -> float:
        return (self._clock() - self._first) * 1000.0

    def time_delta_msec(self) -> float:
        return self.time_delta * 1000.0