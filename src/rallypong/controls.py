"""Input-state providers polled by the simulation each frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
import pygame

from .settings import ControlScheme


class InputProvider(Protocol):
    """Anything exposing the current directional intent."""

    @property
    def move_up(self) -> bool: ...

    @property
    def move_down(self) -> bool: ...


@dataclass(slots=True)
class InputState:
    """Fixed directional intent, used when idle and in tests."""

    move_up: bool = False
    move_down: bool = False


class KeyboardInput:
    """Reads held keys from pygame on every poll."""

    def __init__(self, scheme: ControlScheme) -> None:
        self.scheme = scheme

    @staticmethod
    def _any_pressed(keys: tuple[int, ...]) -> bool:
        pressed = pygame.key.get_pressed()
        return any(pressed[key] for key in keys)

    @property
    def move_up(self) -> bool:
        return self._any_pressed(self.scheme.up)

    @property
    def move_down(self) -> bool:
        return self._any_pressed(self.scheme.down)
