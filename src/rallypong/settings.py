"""Difficulty and ball speed profiles plus runtime configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import pygame

from .utils import BALL_RADIUS, FIELD_HEIGHT, FIELD_WIDTH, PADDLE_HEIGHT, PADDLE_MARGIN, PADDLE_WIDTH


class Difficulty(str, Enum):
    """Opponent difficulty presets."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class BallSpeed(str, Enum):
    """Ball speed presets."""

    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    """Opponent paddle tuning."""

    base_speed: float
    max_speed: float
    noise_amplitude: float


@dataclass(frozen=True, slots=True)
class SpeedProfile:
    """Ball serve speed, acceleration cap and paddle spin."""

    start_speed_x: float
    max_speed_x: float
    accel_step: float
    spin_factor: float


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.EASY: DifficultyProfile(base_speed=3.1, max_speed=5.0, noise_amplitude=28),
    Difficulty.NORMAL: DifficultyProfile(base_speed=4.2, max_speed=7.0, noise_amplitude=18),
    Difficulty.HARD: DifficultyProfile(base_speed=5.6, max_speed=8.5, noise_amplitude=8),
}

SPEED_PROFILES: dict[BallSpeed, SpeedProfile] = {
    BallSpeed.SLOW: SpeedProfile(start_speed_x=4.0, max_speed_x=7.0, accel_step=0.35, spin_factor=5),
    BallSpeed.NORMAL: SpeedProfile(start_speed_x=5.5, max_speed_x=9.0, accel_step=0.45, spin_factor=6),
    BallSpeed.FAST: SpeedProfile(start_speed_x=7.0, max_speed_x=11.0, accel_step=0.6, spin_factor=7),
}


def parse_difficulty(name: str | Difficulty) -> Difficulty | None:
    """Return the difficulty matching name, or None when unknown."""
    try:
        return Difficulty(name)
    except ValueError:
        return None


def parse_ball_speed(name: str | BallSpeed) -> BallSpeed | None:
    """Return the ball speed matching name, or None when unknown."""
    try:
        return BallSpeed(name)
    except ValueError:
        return None


@dataclass(slots=True)
class ControlScheme:
    """Key bindings for the human paddle. Either key of a pair moves it."""

    up: tuple[int, ...] = (pygame.K_UP, pygame.K_w)
    down: tuple[int, ...] = (pygame.K_DOWN, pygame.K_s)


@dataclass(slots=True)
class GameSettings:
    """Runtime settings for a single session."""

    field_width: int = FIELD_WIDTH
    field_height: int = FIELD_HEIGHT
    difficulty: Difficulty = Difficulty.NORMAL
    ball_speed: BallSpeed = BallSpeed.NORMAL
    scale_motion: bool = False
    sound_enabled: bool = True
    controls: ControlScheme = field(default_factory=ControlScheme)

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        self.ball_speed = BallSpeed(self.ball_speed)
        if self.field_height < PADDLE_HEIGHT or self.field_height < 2 * BALL_RADIUS:
            raise ValueError(f"field height {self.field_height} is too small for the paddles")
        if self.field_width < 2 * (PADDLE_MARGIN + PADDLE_WIDTH):
            raise ValueError(f"field width {self.field_width} is too small for the paddles")
