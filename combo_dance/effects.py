"""Effect dataclasses returned by the reducer for the host to carry out."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from combo_dance.types import ClipIndex, LoopMode, Phase, Token


@dataclass(frozen=True)
class PlayClip:
    clip: ClipIndex
    loop: LoopMode


@dataclass(frozen=True)
class StartMusic:
    """Play the session track from the beginning."""


@dataclass(frozen=True)
class StopMusic:
    pass


@dataclass(frozen=True)
class Schedule:
    """Deliver ``event`` back to the reducer after ``delay_ms``."""
    token: Token
    delay_ms: float
    event: Any


@dataclass(frozen=True)
class Cancel:
    token: Token


@dataclass(frozen=True)
class PhaseChanged:
    old: Phase
    new: Phase


@dataclass(frozen=True)
class ComboCompleted:
    bonus_ms: float
    clip: ClipIndex | None
