"""Tests for FrameClock elapsed-time measurement."""

from combo_dance.clock import FrameClock


class FakeTime:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def test_first_frame_is_zero():
    """First advance() has no previous frame to measure against."""
    t = FakeTime()
    clock = FrameClock(now=t)
    assert clock.advance() == 0.0
    assert clock.frame_number == 1


def test_advance_returns_real_delta_ms():
    """Delta follows the time source, not a fixed frame length."""
    t = FakeTime()
    clock = FrameClock(now=t)
    clock.advance()

    t.now += 0.016
    assert abs(clock.advance() - 16.0) < 1e-6

    t.now += 0.050
    assert abs(clock.advance() - 50.0) < 1e-6


def test_elapsed_accumulates():
    """elapsed_ms is the sum of all deltas."""
    t = FakeTime()
    clock = FrameClock(now=t)
    clock.advance()
    for _ in range(10):
        t.now += 0.1
        clock.advance()
    assert abs(clock.elapsed_ms - 1000.0) < 1e-6
    assert clock.frame_number == 11


def test_backwards_time_clamps_to_zero():
    """A time source stepping backwards never yields a negative delta."""
    t = FakeTime()
    clock = FrameClock(now=t)
    clock.advance()
    t.now -= 1.0
    assert clock.advance() == 0.0


def test_reset():
    """reset() forgets the previous frame and counters."""
    t = FakeTime()
    clock = FrameClock(now=t)
    clock.advance()
    t.now += 1.0
    clock.advance()

    clock.reset()
    assert clock.frame_number == 0
    assert clock.elapsed_ms == 0.0
    t.now += 5.0
    assert clock.advance() == 0.0
