"""Survival countdown arithmetic."""
from __future__ import annotations

from typing import NamedTuple


class TimerTick(NamedTuple):
    remaining_ms: float
    expired: bool


def tick(remaining_ms: float, elapsed_ms: float) -> TimerTick:
    """Consume one frame's real elapsed time.

    ``expired`` is True only on the tick that takes a positive budget to 0.
    """
    if elapsed_ms < 0:
        raise ValueError(f"elapsed_ms must not be negative, got {elapsed_ms}")
    left = max(0.0, remaining_ms - elapsed_ms)
    return TimerTick(left, remaining_ms > 0 and left <= 0)


def add_bonus(remaining_ms: float, amount_ms: float) -> float:
    return remaining_ms + amount_ms
