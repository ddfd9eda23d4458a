"""combo_dance - state core for a timed directional-combo dance game."""

from combo_dance.catalog import AnimationCatalog, resolve_catalog
from combo_dance.clock import FrameClock
from combo_dance.config import GameConfig
from combo_dance.engine import Engine
from combo_dance.game import GameState, Transition, initial_state, step
from combo_dance.playlist import Playlist
from combo_dance.types import (
    ComboDanceError,
    ComboStep,
    ConfigError,
    Direction,
    KeyOutcome,
    LoopMode,
    Phase,
    StepContext,
    StepStatus,
)
from combo_dance.view import GameView, build_view, format_countdown

__all__ = [
    "Engine",
    "GameConfig",
    "GameState",
    "Transition",
    "initial_state",
    "step",
    "AnimationCatalog",
    "resolve_catalog",
    "Playlist",
    "FrameClock",
    "GameView",
    "build_view",
    "format_countdown",
    "Direction",
    "ComboStep",
    "StepStatus",
    "KeyOutcome",
    "Phase",
    "LoopMode",
    "StepContext",
    "ComboDanceError",
    "ConfigError",
]
