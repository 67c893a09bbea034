"""Pause panel listing the control surface actions."""

from __future__ import annotations

from dataclasses import dataclass
import pygame

from .utils import BG_COLOR, MIDLINE_COLOR, SHADOW_COLOR, TEXT_COLOR, YELLOW

PANEL_WIDTH = 420
ROW_HEIGHT = 40
PANEL_PADDING = 24


@dataclass(slots=True)
class MenuItem:
    """A panel row bound to an action, with the gameplay key that does the same."""

    label: str
    action: str
    hint: str = ""


class Menu:
    """Boxed, keyboard-driven panel drawn over the paused playfield."""

    def __init__(self, title: str, items: list[MenuItem]) -> None:
        self.title = title
        self.items = items
        self.selected_index = 0

    def move(self, delta: int) -> None:
        self.selected_index = (self.selected_index + delta) % len(self.items)

    def current_action(self) -> str:
        return self.items[self.selected_index].action

    def set_label(self, action: str, label: str) -> None:
        """Relabel the row bound to action, e.g. to show the active profile."""
        for item in self.items:
            if item.action == action:
                item.label = label

    def panel_rect(self, surface: pygame.Surface, title_height: int) -> pygame.Rect:
        height = PANEL_PADDING * 3 + title_height + ROW_HEIGHT * len(self.items)
        rect = pygame.Rect(0, 0, PANEL_WIDTH, height)
        rect.center = surface.get_rect().center
        return rect

    def render(self, surface: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font) -> None:
        """Dim the playfield and draw the panel with one row per action."""
        dim = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 150))
        surface.blit(dim, (0, 0))

        title = title_font.render(self.title, True, YELLOW)
        panel = self.panel_rect(surface, title.get_height())
        pygame.draw.rect(surface, BG_COLOR, panel, border_radius=12)
        pygame.draw.rect(surface, MIDLINE_COLOR[:3], panel, width=2, border_radius=12)
        surface.blit(title, (panel.centerx - title.get_width() // 2, panel.top + PANEL_PADDING))

        top = panel.top + PANEL_PADDING * 2 + title.get_height()
        for idx, item in enumerate(self.items):
            row = pygame.Rect(panel.left + 12, top + idx * ROW_HEIGHT, panel.width - 24, ROW_HEIGHT - 6)
            selected = idx == self.selected_index
            if selected:
                pygame.draw.rect(surface, SHADOW_COLOR, row, border_radius=6)
            color = YELLOW if selected else TEXT_COLOR
            label = body_font.render(item.label, True, color)
            surface.blit(label, (row.left + 12, row.centery - label.get_height() // 2))
            if item.hint:
                hint = body_font.render(item.hint, True, MIDLINE_COLOR[:3])
                surface.blit(hint, (row.right - 12 - hint.get_width(), row.centery - hint.get_height() // 2))
