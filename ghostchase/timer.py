"""Frame timer measured in whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable


def _milliseconds() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Tracks the time between frames and how long to sleep to hold a frame rate."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock if clock is not None else _milliseconds
        self.prev_ticks = 0
        self.curr_ticks = 0

    def start(self) -> None:
        """Reset both tick marks to now."""
        now = self._clock()
        self.prev_ticks = now
        self.curr_ticks = now

    def update_frame_ticks(self) -> None:
        """Mark the start of a new frame."""
        self.prev_ticks = self.curr_ticks
        self.curr_ticks = self._clock()

    def delta_time(self) -> float:
        """Seconds between the last two frame marks."""
        return (self.curr_ticks - self.prev_ticks) / 1000.0

    def sleep_time(self, fps: int) -> int:
        """Milliseconds left in the current frame at the given frame rate.

        When the frame has already overrun, a whole frame's time is returned.
        """
        if fps <= 0:
            raise ValueError("fps must be positive")
        ms_per_frame = 1000 // fps
        if ms_per_frame == 0:
            return 0
        elapsed = self._clock() - self.curr_ticks
        if elapsed > ms_per_frame or elapsed < 0:
            return ms_per_frame
        return ms_per_frame - elapsed