"""Event dataclasses fed to the game reducer."""
from __future__ import annotations

from dataclasses import dataclass

from combo_dance.types import Token


@dataclass(frozen=True)
class StartGame:
    """Player pressed Start."""


@dataclass(frozen=True)
class NewGame:
    """Player asked for a fresh game after the last one wound down."""


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class FrameTick:
    """One display frame; ``elapsed_ms`` is the real time since the last one."""
    elapsed_ms: float


@dataclass(frozen=True)
class ClipFinished:
    """Playback engine finished a ONCE clip."""


@dataclass(frozen=True)
class CatalogLoaded:
    names: tuple[str, ...]


@dataclass(frozen=True)
class ComboReset:
    """Delay after a wrong key or completed combo has passed."""
    token: Token


@dataclass(frozen=True)
class ComboTimeout:
    """No key advanced the combo in time."""
    token: Token


@dataclass(frozen=True)
class BonusExpired:
    token: Token
