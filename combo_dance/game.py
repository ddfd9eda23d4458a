"""Game orchestration as a pure reducer.

``step(state, event, ctx)`` returns the next state and the effects the host
must carry out (clip playback, music cues, delayed events). It never touches
the outside world itself, so every transition can be replayed in tests.

Delayed follow-ups (combo reset, combo timeout, bonus indicator) are keyed by
tokens stored in the state. Superseding a follow-up cancels its token first,
and an event carrying a token that is no longer live is rejected, so a stale
callback can never act on a newer combo or session.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, NamedTuple

from combo_dance import combo as combos
from combo_dance import timer
from combo_dance.catalog import AnimationCatalog, resolve_catalog
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
    BonusExpired,
    CatalogLoaded,
    ClipFinished,
    ComboReset,
    ComboTimeout,
    FrameTick,
    KeyPressed,
    NewGame,
    StartGame,
)
from combo_dance.playlist import Playlist
from combo_dance.selector import select_next
from combo_dance.types import (
    ClipIndex,
    Combo,
    Direction,
    KeyOutcome,
    LoopMode,
    Phase,
    StepContext,
    Token,
)

_TOKENS = ("reset_token", "timeout_token", "bonus_token")


@dataclass(frozen=True)
class GameState:
    """Everything one running game owns."""

    catalog: AnimationCatalog = field(default_factory=AnimationCatalog)
    phase: Phase = Phase.READY
    game_over: bool = False
    combo: Combo = ()
    combo_cursor: int = 0
    playlist: Playlist = field(default_factory=Playlist)
    time_left_ms: float = 0.0
    playback_started: bool = False
    music_playing: bool = False
    bonus_visible: bool = False
    reset_token: Token | None = None
    timeout_token: Token | None = None
    bonus_token: Token | None = None
    next_token: Token = 1

    @property
    def can_start(self) -> bool:
        return self.phase is Phase.READY and not self.game_over

    @property
    def can_new_game(self) -> bool:
        return self.phase is Phase.READY and self.game_over

    @property
    def clip_to_play(self) -> ClipIndex:
        return self.playlist.clip_to_play(self.catalog)

    @property
    def loop_mode(self) -> LoopMode:
        return self.playlist.loop_mode(self.phase)

    @property
    def queue_cursor(self) -> int:
        return self.playlist.queue_cursor(self.catalog)


class Transition(NamedTuple):
    state: GameState
    effects: tuple[Any, ...]
    accepted: bool


def initial_state(ctx: StepContext, catalog: AnimationCatalog | None = None) -> GameState:
    return GameState(
        catalog=catalog if catalog is not None else AnimationCatalog(),
        combo=combos.generate(ctx.config.combo_length, ctx.random),
        time_left_ms=ctx.config.start_time_ms,
    )


class _Builder:
    """Accumulates state changes and effects for a single step."""

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.effects: list[Any] = []

    def update(self, **changes: Any) -> None:
        self.state = replace(self.state, **changes)

    def emit(self, effect: Any) -> None:
        self.effects.append(effect)

    def cancel(self, slot: str) -> None:
        token = getattr(self.state, slot)
        if token is not None:
            self.emit(Cancel(token))
            self.update(**{slot: None})

    def schedule(self, slot: str, delay_ms: float, make_event: Callable[[Token], Any]) -> None:
        self.cancel(slot)
        token = self.state.next_token
        self.update(next_token=token + 1, **{slot: token})
        self.emit(Schedule(token, delay_ms, make_event(token)))


def _playback_position(state: GameState) -> tuple[Any, ...]:
    pl = state.playlist
    return (state.clip_to_play, state.loop_mode, pl.cursor, pl.on_end_move)


def step(state: GameState, event: Any, ctx: StepContext) -> Transition:
    """Reduce one event. Rejected events return the input state unchanged."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"No handler registered for {type(event).__qualname__}")

    b = _Builder(state)
    if not handler(b, event, ctx):
        return Transition(state, (), False)

    new = b.state
    if new.phase is not state.phase:
        b.emit(PhaseChanged(state.phase, new.phase))
    if new.catalog.loaded and (
        new.catalog is not state.catalog
        or _playback_position(new) != _playback_position(state)
    ):
        b.emit(PlayClip(new.clip_to_play, new.loop_mode))
    return Transition(new, tuple(b.effects), True)


# --- Shared transitions ---


def _reset_session(b: _Builder, ctx: StepContext, game_over: bool = False) -> None:
    for slot in _TOKENS:
        b.cancel(slot)
    if b.state.music_playing:
        b.emit(StopMusic())
    b.update(
        phase=Phase.READY,
        game_over=game_over,
        combo=combos.generate(ctx.config.combo_length, ctx.random),
        combo_cursor=0,
        playlist=Playlist(),
        time_left_ms=ctx.config.start_time_ms,
        playback_started=False,
        music_playing=False,
        bonus_visible=False,
    )


def _arm_timeout(b: _Builder, ctx: StepContext) -> None:
    b.schedule("timeout_token", ctx.config.combo_timeout_ms, ComboTimeout)


def _new_combo(b: _Builder, ctx: StepContext) -> None:
    b.cancel("reset_token")
    b.cancel("timeout_token")
    b.update(
        combo=combos.generate(ctx.config.combo_length, ctx.random),
        combo_cursor=0,
    )
    if b.state.phase is Phase.PLAYING:
        _arm_timeout(b, ctx)


def _kick_playlist(b: _Builder) -> None:
    if b.state.phase is not Phase.PLAYING:
        return
    kicked = b.state.playlist.kick()
    if kicked is b.state.playlist:
        return
    b.update(playlist=kicked)
    if not b.state.playback_started:
        b.update(playback_started=True, music_playing=True)
        b.emit(StartMusic())


def _reward(b: _Builder, ctx: StepContext) -> None:
    cfg = ctx.config
    b.update(
        time_left_ms=timer.add_bonus(b.state.time_left_ms, cfg.combo_reward_ms),
        bonus_visible=True,
    )
    b.schedule("bonus_token", cfg.bonus_display_ms, BonusExpired)

    playlist = b.state.playlist
    clip = select_next(b.state.catalog, playlist.queue, playlist.cursor, ctx.random)
    if clip is not None:
        b.update(playlist=playlist.push(clip))
        _kick_playlist(b)
    b.emit(ComboCompleted(cfg.combo_reward_ms, clip))


def _begin_wind_down(b: _Builder, ctx: StepContext) -> None:
    b.cancel("reset_token")
    b.cancel("timeout_token")
    b.update(phase=Phase.ENDING)
    if b.state.playlist.idle:
        _finish_wind_down(b, ctx)


def _finish_wind_down(b: _Builder, ctx: StepContext) -> None:
    for slot in _TOKENS:
        b.cancel(slot)
    if b.state.music_playing:
        b.emit(StopMusic())
    b.update(
        phase=Phase.READY,
        game_over=True,
        playlist=Playlist(),
        time_left_ms=ctx.config.start_time_ms,
        music_playing=False,
        bonus_visible=False,
    )


# --- Handlers: (builder, event, ctx) -> accepted ---


def _on_start(b: _Builder, event: StartGame, ctx: StepContext) -> bool:
    if not b.state.can_start:
        return False
    _reset_session(b, ctx)
    b.update(phase=Phase.PLAYING)
    _arm_timeout(b, ctx)
    return True


def _on_new_game(b: _Builder, event: NewGame, ctx: StepContext) -> bool:
    if not b.state.can_new_game:
        return False
    _reset_session(b, ctx)
    return True


def _on_catalog_loaded(b: _Builder, event: CatalogLoaded, ctx: StepContext) -> bool:
    cfg = ctx.config
    catalog = resolve_catalog(
        event.names,
        cfg.excluded_clips,
        idle_marker=cfg.idle_marker,
        end_move_marker=cfg.end_move_marker,
    )
    _reset_session(b, ctx)
    b.update(catalog=catalog)
    return True


def _on_key(b: _Builder, event: KeyPressed, ctx: StepContext) -> bool:
    state = b.state
    if state.phase is not Phase.PLAYING:
        return False

    result = combos.apply_key(state.combo, state.combo_cursor, Direction.from_key(event.key))
    if result.outcome is KeyOutcome.IGNORED:
        return False

    b.update(combo=result.combo, combo_cursor=result.cursor)
    if result.outcome is KeyOutcome.FAILED:
        # The timeout keeps running; whichever fires first replaces the combo.
        b.schedule("reset_token", ctx.config.combo_reset_delay_ms, ComboReset)
    elif result.outcome is KeyOutcome.COMPLETED:
        b.cancel("timeout_token")
        _reward(b, ctx)
        b.schedule("reset_token", ctx.config.combo_reset_delay_ms, ComboReset)
    else:
        _arm_timeout(b, ctx)
    return True


def _on_frame_tick(b: _Builder, event: FrameTick, ctx: StepContext) -> bool:
    if event.elapsed_ms < 0:
        raise ValueError(f"elapsed_ms must not be negative, got {event.elapsed_ms}")
    state = b.state
    if state.phase is not Phase.PLAYING or not state.playback_started:
        return False

    remaining, expired = timer.tick(state.time_left_ms, event.elapsed_ms)
    b.update(time_left_ms=remaining)
    if expired:
        _begin_wind_down(b, ctx)
    return True


def _on_clip_finished(b: _Builder, event: ClipFinished, ctx: StepContext) -> bool:
    state = b.state
    if state.phase is Phase.READY or (state.playlist.idle and not state.playlist.queue):
        return False

    ending = state.phase is Phase.ENDING
    b.update(playlist=state.playlist.on_clip_finished(ending))
    if ending and b.state.playlist.idle:
        _finish_wind_down(b, ctx)
    else:
        _kick_playlist(b)
    return True


def _on_combo_reset(b: _Builder, event: ComboReset, ctx: StepContext) -> bool:
    if event.token != b.state.reset_token:
        return False
    b.update(reset_token=None)
    _new_combo(b, ctx)
    return True


def _on_combo_timeout(b: _Builder, event: ComboTimeout, ctx: StepContext) -> bool:
    if event.token != b.state.timeout_token:
        return False
    b.update(timeout_token=None)
    _new_combo(b, ctx)
    return True


def _on_bonus_expired(b: _Builder, event: BonusExpired, ctx: StepContext) -> bool:
    if event.token != b.state.bonus_token:
        return False
    b.update(bonus_token=None, bonus_visible=False)
    return True


_HANDLERS: dict[type[Any], Callable[[_Builder, Any, StepContext], bool]] = {
    StartGame: _on_start,
    NewGame: _on_new_game,
    CatalogLoaded: _on_catalog_loaded,
    KeyPressed: _on_key,
    FrameTick: _on_frame_tick,
    ClipFinished: _on_clip_finished,
    ComboReset: _on_combo_reset,
    ComboTimeout: _on_combo_timeout,
    BonusExpired: _on_bonus_expired,
}
