"""Paints a frame snapshot onto a pygame surface."""

from __future__ import annotations

import pygame

from .simulation import FrameSnapshot
from .utils import (
    BG_COLOR,
    EMBER,
    GREEN,
    MIDLINE_COLOR,
    ORANGE,
    PALE_YELLOW,
    SHADOW_COLOR,
    TEXT_COLOR,
    YELLOW,
    Color,
)

DASH_LENGTH = 10
DASH_GAP = 12
PADDLE_CORNER_RADIUS = 6


class Renderer:
    """Draws background, midline, paddles, ball and the score HUD in that order."""

    def __init__(self, score_font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        self.score_font = score_font
        self.small_font = small_font

    def draw(self, surface: pygame.Surface, snapshot: FrameSnapshot, flash_message: str = "") -> None:
        surface.fill(BG_COLOR)
        self._draw_midline(surface, snapshot)
        self._draw_paddle(surface, snapshot.player_x, snapshot.player_y, snapshot, GREEN)
        self._draw_paddle(surface, snapshot.opponent_x, snapshot.opponent_y, snapshot, ORANGE)
        self._draw_ball(surface, snapshot)
        self._draw_hud(surface, snapshot, flash_message)

    @staticmethod
    def _draw_midline(surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        layer = pygame.Surface((snapshot.field_width, snapshot.field_height), pygame.SRCALPHA)
        x = snapshot.field_width // 2
        y = 10
        while y < snapshot.field_height - 10:
            end = min(y + DASH_LENGTH, snapshot.field_height - 10)
            pygame.draw.line(layer, MIDLINE_COLOR, (x, y), (x, end), 2)
            y += DASH_LENGTH + DASH_GAP
        surface.blit(layer, (0, 0))

    @staticmethod
    def _draw_paddle(surface: pygame.Surface, x: float, y: float, snapshot: FrameSnapshot, color: Color) -> None:
        rect = pygame.Rect(round(x), round(y), round(snapshot.paddle_width), round(snapshot.paddle_height))
        pygame.draw.rect(surface, color, rect, border_radius=PADDLE_CORNER_RADIUS)

    @staticmethod
    def _draw_ball(surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        # Stacked circles standing in for a radial gradient with an off-center highlight.
        cx, cy = snapshot.ball_x, snapshot.ball_y
        radius = snapshot.ball_radius
        pygame.draw.circle(surface, EMBER, (cx, cy), radius)
        pygame.draw.circle(surface, YELLOW, (cx - 1.5, cy - 1.5), radius * 0.7)
        pygame.draw.circle(surface, PALE_YELLOW, (cx - 3, cy - 3), max(1.0, radius * 0.3))

    def _draw_hud(self, surface: pygame.Surface, snapshot: FrameSnapshot, flash_message: str) -> None:
        center = snapshot.field_width // 2
        left = self.score_font.render(str(snapshot.player_score), True, GREEN)
        right = self.score_font.render(str(snapshot.opponent_score), True, ORANGE)
        surface.blit(left, (center - 40 - left.get_width(), 18))
        surface.blit(right, (center + 40, 18))

        status = "RUNNING" if snapshot.is_running else "PAUSED"
        info = (
            f"{status} | AI: {snapshot.difficulty.value.title()} | "
            f"Ball: {snapshot.ball_speed.value.title()}"
        )
        text = self.small_font.render(info, True, TEXT_COLOR)
        surface.blit(text, (12, snapshot.field_height - 26))

        if flash_message:
            shadow = self.small_font.render(flash_message, True, SHADOW_COLOR)
            msg = self.small_font.render(flash_message, True, YELLOW)
            x = center - msg.get_width() // 2
            surface.blit(shadow, (x + 2, 82))
            surface.blit(msg, (x, 80))
