"""Tests for GameConfig."""
import dataclasses

import pytest

from combo_dance.config import DEFAULT_EXCLUDED_CLIP, GameConfig
from combo_dance.types import ComboDanceError, ConfigError


class TestDefaults:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.combo_length == 5
        assert cfg.start_time_ms == 10000
        assert cfg.combo_reward_ms == 10000
        assert cfg.combo_timeout_ms == 5000
        assert cfg.combo_reset_delay_ms == 500
        assert cfg.excluded_clips == (DEFAULT_EXCLUDED_CLIP,)
        assert cfg.bonus_seconds == 10

    def test_defaults_validate(self):
        GameConfig().validate()

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.combo_length = 3  # type: ignore[misc]


class TestValidate:
    @pytest.mark.parametrize(
        "changes, field",
        [
            ({"combo_length": 0}, "combo_length"),
            ({"combo_reward_ms": -1}, "combo_reward_ms"),
            ({"combo_reset_delay_ms": -0.5}, "combo_reset_delay_ms"),
            ({"start_time_ms": 0}, "start_time_ms"),
            ({"combo_timeout_ms": 0}, "combo_timeout_ms"),
            ({"idle_marker": ""}, "idle_marker"),
            ({"end_move_marker": ""}, "idle_marker"),
        ],
    )
    def test_rejects(self, changes, field):
        with pytest.raises(ConfigError) as exc:
            GameConfig(**changes).validate()
        assert exc.value.field == field

    def test_error_hierarchy(self):
        err = ConfigError("combo_length", "bad")
        assert isinstance(err, ComboDanceError)
        assert isinstance(err, ValueError)
        assert str(err) == "combo_length: bad"

    def test_zero_reset_delay_allowed(self):
        GameConfig(combo_reset_delay_ms=0).validate()
