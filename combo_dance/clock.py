"""Frame clock measuring real elapsed time between frames."""

import time
from typing import Callable


class FrameClock:
    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._last: float | None = None
        self._frame_number = 0
        self._elapsed_ms = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed_ms(self) -> float:
        """Total milliseconds measured since the first frame."""
        return self._elapsed_ms

    def advance(self) -> float:
        """Mark a frame and return milliseconds since the previous one.

        The first frame after construction or reset returns 0.
        """
        now = self._now()
        dt_ms = 0.0 if self._last is None else max(0.0, (now - self._last) * 1000.0)
        self._last = now
        self._frame_number += 1
        self._elapsed_ms += dt_ms
        return dt_ms

    def reset(self) -> None:
        self._last = None
        self._frame_number = 0
        self._elapsed_ms = 0.0
