"""Frame timer measuring the time between updates."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Tracks elapsed time per frame and the frame rate over the last second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last_time = clock()
        self._elapsed = 0.0
        self._frame_count = 0
        self._frame_rate = 0
        self._one_second = 0.0

    def update(self) -> None:
        current = self._clock()
        self._elapsed = current - self._last_time
        self._last_time = current

        self._frame_count += 1
        self._one_second += self._elapsed

        if self._one_second >= 1.0:
            self._frame_rate = self._frame_count
            self._frame_count = 0
            self._one_second = 0.0

    @property
    def elapsed_time(self) -> float:
        """Seconds between the last two updates."""
        return self._elapsed

    @property
    def frame_rate(self) -> int:
        """Frames counted in the most recently completed second."""
        return self._frame_rate