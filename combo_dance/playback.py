"""Interfaces to the playback engine and audio, plus headless stand-ins."""
from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from combo_dance.types import ClipIndex, LoopMode

logger = logging.getLogger(__name__)


class PlaybackEngine(Protocol):
    def play(self, clip: ClipIndex, loop: LoopMode) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...


class AudioCue(Protocol):
    def play_from_start(self) -> None: ...

    def stop(self) -> None: ...


class TimedPlayback:
    """Playback engine that only keeps time.

    Each clip has a duration; ``advance`` moves the play head by real frame
    time. A ONCE clip reports ``on_finished`` exactly once when it reaches its
    end and then holds its last frame. A REPEAT clip wraps around forever.
    """

    def __init__(
        self,
        durations_ms: Sequence[float] = (),
        default_ms: float = 2000.0,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        if default_ms <= 0:
            raise ValueError("default_ms must be positive")
        self._durations = list(durations_ms)
        self._default_ms = default_ms
        self.on_finished = on_finished
        self._clip: ClipIndex | None = None
        self._loop = LoopMode.REPEAT
        self._position_ms = 0.0
        self._finished = False
        self._paused = False
        self.plays: list[tuple[ClipIndex, LoopMode]] = []

    @property
    def clip(self) -> ClipIndex | None:
        return self._clip

    @property
    def loop(self) -> LoopMode:
        return self._loop

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def finished(self) -> bool:
        return self._finished

    def duration(self, clip: ClipIndex) -> float:
        if 0 <= clip < len(self._durations) and self._durations[clip] > 0:
            return self._durations[clip]
        return self._default_ms

    @property
    def progress(self) -> float:
        if self._clip is None:
            return 0.0
        return min(1.0, self._position_ms / self.duration(self._clip))

    def set_durations(self, durations_ms: Sequence[float]) -> None:
        self._durations = list(durations_ms)

    def play(self, clip: ClipIndex, loop: LoopMode) -> None:
        self._clip = clip
        self._loop = loop
        self._position_ms = 0.0
        self._finished = False
        self.plays.append((clip, loop))

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def advance(self, elapsed_ms: float) -> None:
        if self._clip is None or self._paused or self._finished:
            return
        length = self.duration(self._clip)
        self._position_ms += elapsed_ms
        if self._loop is LoopMode.REPEAT:
            self._position_ms %= length
            return
        if self._position_ms >= length:
            self._position_ms = length
            self._finished = True
            if self.on_finished is not None:
                # May re-enter play(); nothing below may touch clip state.
                self.on_finished()


class SilentAudio:
    """AudioCue that only records and logs the cues it receives."""

    def __init__(self) -> None:
        self.playing = False
        self.starts = 0
        self.stops = 0

    def play_from_start(self) -> None:
        self.playing = True
        self.starts += 1
        logger.info("music: play from start")

    def stop(self) -> None:
        self.playing = False
        self.stops += 1
        logger.info("music: stop")
