"""Engine - input serialization, reducer driving, and effect dispatch."""

import logging
import os
import random
from typing import Any, Callable, Sequence

from combo_dance.bus import EffectBus
from combo_dance.clock import FrameClock
from combo_dance.config import GameConfig
from combo_dance.effects import (
    Cancel,
    ComboCompleted,
    PhaseChanged,
    PlayClip,
    Schedule,
    StartMusic,
    StopMusic,
)
from combo_dance.events import (
    CatalogLoaded,
    ClipFinished,
    FrameTick,
    KeyPressed,
    NewGame,
    StartGame,
)
from combo_dance.game import GameState, initial_state, step
from combo_dance.playback import AudioCue, PlaybackEngine
from combo_dance.queue import EventQueue
from combo_dance.schedule import DelayScheduler
from combo_dance.types import StepContext
from combo_dance.view import GameView, build_view

logger = logging.getLogger(__name__)


class Engine:
    """Owns the single GameState and is its only writer.

    Every input (keys, frames, finish notifications, fired delays) becomes an
    event on one FIFO queue and is reduced to completion, effects included,
    before the next one is looked at.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        playback: PlaybackEngine | None = None,
        audio: AudioCue | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._config.validate()

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._ctx = StepContext(self._config, self._rng)
        self._state = initial_state(self._ctx)

        self._clock = clock if clock is not None else FrameClock()
        self._events = EventQueue()
        self._scheduler = DelayScheduler()
        self._bus = EffectBus()
        self._frame_hooks: list[Callable[[float], None]] = []
        self._playback = playback
        self._audio = audio
        self._paused = False

        self._bus.subscribe(Schedule, self._on_schedule)
        self._bus.subscribe(Cancel, self._on_cancel)
        self._bus.subscribe(PlayClip, self._on_play_clip)
        self._bus.subscribe(StartMusic, self._on_start_music)
        self._bus.subscribe(StopMusic, self._on_stop_music)
        self._bus.subscribe(PhaseChanged, self._on_phase_changed)
        self._bus.subscribe(ComboCompleted, self._on_combo_completed)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def view(self) -> GameView:
        return build_view(self._state, self._config)

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def scheduler(self) -> DelayScheduler:
        return self._scheduler

    @property
    def paused(self) -> bool:
        return self._paused

    def on(self, effect_type: type[Any], handler: Callable[[Any], None]) -> None:
        """Subscribe a host callback to an effect type."""
        self._bus.subscribe(effect_type, handler)

    def on_frame(self, hook: Callable[[float], None]) -> None:
        """Call ``hook(elapsed_ms)`` after every frame has been reduced."""
        self._frame_hooks.append(hook)

    # --- Inputs ---

    def submit(self, event: Any) -> None:
        self._events.enqueue(event)
        self._process()

    def start(self) -> None:
        self.submit(StartGame())

    def new_game(self) -> None:
        self.submit(NewGame())

    def press(self, key: str) -> None:
        self.submit(KeyPressed(key))

    def clip_finished(self) -> None:
        self.submit(ClipFinished())

    def load_catalog(self, names: Sequence[str]) -> None:
        self.submit(CatalogLoaded(tuple(names)))

    def set_paused(self, paused: bool) -> None:
        """Pause or resume clip playback without touching the selected clip."""
        if paused == self._paused:
            return
        self._paused = paused
        if self._playback is not None:
            if paused:
                self._playback.pause()
            else:
                self._playback.resume()

    def frame(self, elapsed_ms: float | None = None) -> float:
        """Run one display frame and return the elapsed time used.

        Without ``elapsed_ms`` the real time since the previous frame is
        measured by the clock.
        """
        dt = self._clock.advance() if elapsed_ms is None else elapsed_ms
        if dt < 0:
            raise ValueError(f"elapsed_ms must not be negative, got {dt}")
        for event in self._scheduler.advance(dt):
            self._events.enqueue(event)
        self._events.enqueue(FrameTick(dt))
        self._process()
        for hook in self._frame_hooks:
            hook(dt)
        return dt

    def run(self, n: int, frame_ms: float) -> None:
        for _ in range(n):
            self.frame(frame_ms)

    # --- Reduction ---

    def _process(self) -> None:
        self._events.drain(self._reduce)

    def _reduce(self, event: Any) -> bool:
        transition = step(self._state, event, self._ctx)
        self._state = transition.state
        if not transition.accepted and not isinstance(event, FrameTick):
            logger.debug("ignored %r in phase %s", event, self._state.phase.value)
        for effect in transition.effects:
            self._bus.publish(effect)
        self._bus.flush()
        return transition.accepted

    # --- Effects ---

    def _on_schedule(self, effect: Schedule) -> None:
        self._scheduler.schedule(effect.token, effect.delay_ms, effect.event)

    def _on_cancel(self, effect: Cancel) -> None:
        self._scheduler.cancel(effect.token)

    def _on_play_clip(self, effect: PlayClip) -> None:
        logger.debug("play clip %d (%s)", effect.clip, effect.loop.value)
        if self._playback is not None:
            self._playback.play(effect.clip, effect.loop)

    def _on_start_music(self, effect: StartMusic) -> None:
        if self._audio is not None:
            self._audio.play_from_start()

    def _on_stop_music(self, effect: StopMusic) -> None:
        if self._audio is not None:
            self._audio.stop()

    def _on_phase_changed(self, effect: PhaseChanged) -> None:
        logger.info("phase %s -> %s", effect.old.value, effect.new.value)

    def _on_combo_completed(self, effect: ComboCompleted) -> None:
        if effect.clip is None:
            logger.info("combo completed (+%gms), no clip eligible", effect.bonus_ms)
        else:
            logger.info("combo completed (+%gms), queued clip %d", effect.bonus_ms, effect.clip)
