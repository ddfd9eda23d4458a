"""Shared types, enums and errors for the combo game."""

from __future__ import annotations

import enum
import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from combo_dance.config import GameConfig

ClipIndex = int
Token = int

IDLE_CURSOR = -1


class Direction(enum.Enum):
    LEFT = "ArrowLeft"
    UP = "ArrowUp"
    RIGHT = "ArrowRight"
    DOWN = "ArrowDown"

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Map a key identifier to a direction. None for any other key."""
        try:
            return cls(key)
        except ValueError:
            return None


class StepStatus(enum.Enum):
    PENDING = "pending"
    CORRECT = "correct"
    WRONG = "wrong"


class KeyOutcome(enum.Enum):
    IGNORED = "ignored"
    ADVANCED = "advanced"
    COMPLETED = "completed"
    FAILED = "failed"


class Phase(enum.Enum):
    READY = "ready"
    PLAYING = "playing"
    ENDING = "ending"


class LoopMode(enum.Enum):
    ONCE = "once"
    REPEAT = "repeat"


@dataclass(frozen=True, slots=True)
class ComboStep:
    direction: Direction
    status: StepStatus = StepStatus.PENDING


Combo = tuple[ComboStep, ...]


@dataclass(frozen=True, slots=True)
class StepContext:
    """Read-only inputs a reducer step may consult besides the state."""

    config: GameConfig
    random: _random.Random


class ComboDanceError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(ComboDanceError, ValueError):
    """Raised when a GameConfig holds values the game cannot run with."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")
