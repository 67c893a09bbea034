"""Paddle and ball entities."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import BALL_RADIUS, PADDLE_HEIGHT, PADDLE_WIDTH, clamp


@dataclass(slots=True)
class Paddle:
    """A vertical paddle at a fixed horizontal position."""

    x: float
    y: float
    width: float = PADDLE_WIDTH
    height: float = PADDLE_HEIGHT

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def move(self, dy: float) -> None:
        self.y += dy

    def clamp_to(self, field_height: float) -> None:
        """Keep the paddle fully inside the field."""
        self.y = clamp(self.y, 0, field_height - self.height)

    def recenter(self, field_height: float) -> None:
        self.y = (field_height - self.height) / 2

    def spans(self, y: float) -> bool:
        """Return whether y falls within the paddle's vertical span."""
        return self.y <= y <= self.y + self.height


@dataclass(slots=True)
class Ball:
    """Ball position and per-call velocity."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = BALL_RADIUS

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    def step(self, scale: float = 1.0) -> None:
        """Integrate position by velocity."""
        self.x += self.vx * scale
        self.y += self.vy * scale

    def bounce_off_walls(self, field_height: float) -> bool:
        """Reflect off the top or bottom wall. Returns True on a bounce."""
        if self.y - self.radius <= 0 or self.y + self.radius >= field_height:
            self.vy = -self.vy
            self.y = clamp(self.y, self.radius, field_height - self.radius)
            return True
        return False

    def center_in(self, field_width: float, field_height: float) -> None:
        self.x = field_width / 2
        self.y = field_height / 2
