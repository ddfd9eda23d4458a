"""Read-only display model derived from a GameState."""
from __future__ import annotations

import math
from dataclasses import dataclass

from combo_dance.config import GameConfig
from combo_dance.game import GameState
from combo_dance.types import ClipIndex, Direction, LoopMode, Phase, StepStatus


def format_countdown(ms: float) -> str:
    """Format milliseconds as ``m:ss``, rounding up to whole seconds.

    >>> format_countdown(10001)
    '0:11'
    """
    total = max(0, math.ceil(ms / 1000))
    minutes, seconds = divmod(total, 60)
    return f"{minutes}:{seconds:02d}"


def format_bonus(seconds: float) -> str:
    return f"+{seconds:g}s"


@dataclass(frozen=True)
class StepView:
    direction: Direction
    status: StepStatus
    current: bool


@dataclass(frozen=True)
class GameView:
    phase: Phase
    countdown: str | None
    warning: bool
    steps: tuple[StepView, ...]
    remaining: int
    finishing: bool
    bonus: str | None
    can_start: bool
    can_new_game: bool
    clip: ClipIndex
    clip_name: str | None
    loop: LoopMode


def build_view(state: GameState, config: GameConfig) -> GameView:
    playing = state.phase is Phase.PLAYING
    cursor = state.combo_cursor
    steps = tuple(
        StepView(
            direction=step.direction,
            status=step.status,
            current=i == cursor and step.status is StepStatus.PENDING,
        )
        for i, step in enumerate(state.combo)
    )
    clip = state.clip_to_play
    catalog = state.catalog
    return GameView(
        phase=state.phase,
        countdown=format_countdown(state.time_left_ms) if playing else None,
        warning=playing and state.time_left_ms <= config.warning_threshold_ms,
        steps=steps,
        remaining=state.playlist.remaining(),
        finishing=state.phase is Phase.ENDING,
        bonus=format_bonus(config.bonus_seconds) if state.bonus_visible and playing else None,
        can_start=state.can_start,
        can_new_game=state.can_new_game,
        clip=clip,
        clip_name=catalog.name(clip) if 0 <= clip < len(catalog) else None,
        loop=state.loop_mode,
    )
