"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields

from combo_dance.types import ConfigError

DEFAULT_EXCLUDED_CLIP = "Armature.009|mixamo.com|Layer0"


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning constants for one game.

    Attributes:
        combo_length: Steps per combo.
        start_time_ms: Countdown budget at the start of a session.
        combo_reward_ms: Time added for every completed combo.
        combo_timeout_ms: A combo is replaced if no key advances it for this long.
        combo_reset_delay_ms: Pause after a wrong key or a completed combo
            before the next combo appears.
        bonus_display_ms: How long the "+Ns" indicator stays visible.
        warning_threshold_ms: Countdown at or below this is shown as a warning.
        catalog_url: Where the playback engine loads the clip catalog from.
        music_url: Track played while a session is running.
        excluded_clips: Clip names that are never scheduled.
        idle_marker: Case-insensitive substring identifying the idle clip.
        end_move_marker: Case-insensitive substring identifying the end move.
    """

    combo_length: int = 5
    start_time_ms: float = 10000.0
    combo_reward_ms: float = 10000.0
    combo_timeout_ms: float = 5000.0
    combo_reset_delay_ms: float = 500.0
    bonus_display_ms: float = 1200.0
    warning_threshold_ms: float = 5000.0
    catalog_url: str = "/assets/models/character.glb"
    music_url: str = "/assets/audio/Music.mp3"
    excluded_clips: tuple[str, ...] = (DEFAULT_EXCLUDED_CLIP,)
    idle_marker: str = "idle"
    end_move_marker: str = "end move"

    @property
    def bonus_seconds(self) -> float:
        return self.combo_reward_ms / 1000.0

    def validate(self) -> None:
        """Raise ConfigError for values the game cannot run with."""
        if self.combo_length <= 0:
            raise ConfigError("combo_length", f"must be positive, got {self.combo_length}")

        for f in fields(self):
            if not f.name.endswith("_ms"):
                continue
            value = getattr(self, f.name)
            if value < 0:
                raise ConfigError(f.name, f"must not be negative, got {value}")

        if self.start_time_ms <= 0:
            raise ConfigError("start_time_ms", "must be positive")
        if self.combo_timeout_ms <= 0:
            raise ConfigError("combo_timeout_ms", "must be positive")
        if not self.idle_marker or not self.end_move_marker:
            raise ConfigError("idle_marker", "clip markers must be non-empty")
