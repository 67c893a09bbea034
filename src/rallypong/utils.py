"""Shared constants and utility helpers for Rally Pong."""

from __future__ import annotations

from typing import Tuple

FIELD_WIDTH = 800
FIELD_HEIGHT = 600
FPS = 60
NOMINAL_FRAME_MS = 16.67
MAX_TIME_SCALE = 4.0

PADDLE_WIDTH = 14
PADDLE_HEIGHT = 90
BALL_RADIUS = 8
PADDLE_MARGIN = 26

PLAYER_SPEED = 7
AI_DEADZONE = 6
AI_BALL_REACTION = 0.4
INITIAL_BALL_SPEED_Y = 3.0

BG_COLOR = (15, 23, 42)
MIDLINE_COLOR = (148, 163, 184, 115)
TEXT_COLOR = (226, 232, 240)
SHADOW_COLOR = (8, 12, 24)

GREEN = (34, 197, 94)
ORANGE = (249, 115, 22)
YELLOW = (251, 191, 36)
PALE_YELLOW = (254, 249, 195)
EMBER = (234, 88, 12)

Color = Tuple[int, int, int]


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value into a closed interval."""
    return max(minimum, min(maximum, value))

