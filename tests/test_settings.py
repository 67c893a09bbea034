from __future__ import annotations

import pytest

from rallypong.main import build_parser, main, settings_from_args
from rallypong.settings import (
    DIFFICULTY_PROFILES,
    SPEED_PROFILES,
    BallSpeed,
    Difficulty,
    GameSettings,
    parse_ball_speed,
    parse_difficulty,
)


def test_profiles_are_consistent() -> None:
    for profile in DIFFICULTY_PROFILES.values():
        assert 0 < profile.base_speed <= profile.max_speed
        assert profile.noise_amplitude > 0
    for profile in SPEED_PROFILES.values():
        assert 0 < profile.start_speed_x <= profile.max_speed_x
        assert profile.accel_step > 0 and profile.spin_factor > 0


def test_parse_names() -> None:
    assert parse_difficulty("easy") == Difficulty.EASY
    assert parse_difficulty(Difficulty.HARD) == Difficulty.HARD
    assert parse_difficulty("medium") is None
    assert parse_ball_speed("fast") == BallSpeed.FAST
    assert parse_ball_speed("") is None


def test_settings_coerce_strings() -> None:
    settings = GameSettings(difficulty="hard", ball_speed="slow")
    assert settings.difficulty == Difficulty.HARD
    assert settings.ball_speed == BallSpeed.SLOW


def test_settings_reject_tiny_field() -> None:
    with pytest.raises(ValueError):
        GameSettings(field_height=40)
    with pytest.raises(ValueError):
        GameSettings(field_width=50)


def test_cli_builds_settings() -> None:
    args = build_parser().parse_args(["--difficulty", "easy", "--speed", "fast", "--scale-motion", "--mute"])
    settings = settings_from_args(args)
    assert settings.difficulty == Difficulty.EASY
    assert settings.ball_speed == BallSpeed.FAST
    assert settings.scale_motion
    assert not settings.sound_enabled


def test_cli_rejects_unknown_profile() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "insane"])


def test_cli_reports_invalid_field(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["--height", "40"])
    assert "too small" in capsys.readouterr().err
