from __future__ import annotations

import pytest

from rallypong.ai import OpponentAI
from rallypong.entities import Ball, Paddle
from rallypong.settings import DIFFICULTY_PROFILES, Difficulty


def test_speed_grows_with_ball_speed_until_cap(seq_rng) -> None:
    ai = OpponentAI(DIFFICULTY_PROFILES[Difficulty.NORMAL], seq_rng())
    assert ai.speed_for(0) == pytest.approx(4.2)
    assert ai.speed_for(-5) == pytest.approx(6.2)
    assert ai.speed_for(20) == pytest.approx(7.0)


def test_easy_speed_caps_at_five(seq_rng) -> None:
    ai = OpponentAI(DIFFICULTY_PROFILES[Difficulty.EASY], seq_rng())
    assert ai.speed_for(6) == pytest.approx(5.0)


def test_deadzone_holds_position(seq_rng) -> None:
    ai = OpponentAI(DIFFICULTY_PROFILES[Difficulty.HARD], seq_rng())
    paddle = Paddle(x=760, y=200)
    ball = Ball(x=400, y=paddle.center_y + 5, vx=4)
    assert ai.step(paddle, ball) == 0.0


def test_moves_toward_ball(seq_rng) -> None:
    ai = OpponentAI(DIFFICULTY_PROFILES[Difficulty.HARD], seq_rng())
    paddle = Paddle(x=760, y=200)
    assert ai.step(paddle, Ball(x=400, y=500, vx=0)) == pytest.approx(5.6)
    assert ai.step(paddle, Ball(x=400, y=50, vx=0)) == pytest.approx(-5.6)


def test_noise_spans_half_amplitude_each_way(seq_rng) -> None:
    profile = DIFFICULTY_PROFILES[Difficulty.EASY]
    ai = OpponentAI(profile, seq_rng([0.0, 1.0]))
    assert ai.noise() == pytest.approx(-profile.noise_amplitude / 2)
    assert ai.noise() == pytest.approx(profile.noise_amplitude / 2)


def test_noise_can_push_target_out_of_deadzone(seq_rng) -> None:
    ai = OpponentAI(DIFFICULTY_PROFILES[Difficulty.EASY], seq_rng([1.0]))
    paddle = Paddle(x=760, y=200)
    ball = Ball(x=400, y=paddle.center_y, vx=0)
    assert ai.step(paddle, ball) == pytest.approx(3.1)
