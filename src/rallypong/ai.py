"""Scripted opponent paddle logic."""

from __future__ import annotations

import random

from .entities import Ball, Paddle
from .settings import DifficultyProfile
from .utils import AI_BALL_REACTION, AI_DEADZONE


class OpponentAI:
    """Chases the ball with difficulty-scaled speed and tracking noise."""

    def __init__(self, profile: DifficultyProfile, rng: random.Random) -> None:
        self.profile = profile
        self.rng = rng

    def speed_for(self, ball_vx: float) -> float:
        """Faster balls get a faster response, capped at the profile max speed."""
        headroom = self.profile.max_speed - self.profile.base_speed
        return self.profile.base_speed + min(abs(ball_vx) * AI_BALL_REACTION, headroom)

    def noise(self) -> float:
        return (self.rng.random() - 0.5) * self.profile.noise_amplitude

    def step(self, paddle: Paddle, ball: Ball, scale: float = 1.0) -> float:
        """Return the vertical displacement for this frame."""
        speed = self.speed_for(ball.vx) * scale
        desired_y = ball.y - paddle.height / 2 + self.noise()

        if desired_y > paddle.y + AI_DEADZONE:
            return speed
        if desired_y < paddle.y - AI_DEADZONE:
            return -speed
        return 0.0
