"""Frame driver and control surface wiring around the simulation core."""

from __future__ import annotations

from pathlib import Path
import logging
import random
import pygame

from .audio import AudioManager
from .controls import KeyboardInput
from .menu import Menu, MenuItem
from .renderer import Renderer
from .settings import GameSettings
from .simulation import FrameEvents, Side, SimulationState
from .utils import FPS

logger = logging.getLogger(__name__)

FLASH_FRAMES = FPS


class PongGame:
    """Owns the window, polls events and drives the simulation every frame."""

    def __init__(self, root: Path, settings: GameSettings | None = None, rng: random.Random | None = None) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        self.settings = settings or GameSettings()
        self.screen = pygame.display.set_mode((self.settings.field_width, self.settings.field_height))
        pygame.display.set_caption("Rally Pong")
        self.clock = pygame.time.Clock()

        self.title_font = pygame.font.SysFont("consolas", 52, bold=True)
        self.body_font = pygame.font.SysFont("consolas", 27, bold=True)
        self.small_font = pygame.font.SysFont("consolas", 18)

        self.input = KeyboardInput(self.settings.controls)
        self.simulation = SimulationState(self.settings, rng=rng, input_provider=self.input)
        self.renderer = Renderer(self.title_font, self.small_font)

        self.audio = AudioManager(self.root, enabled=self.settings.sound_enabled)
        self.audio.load_assets()

        self.menu = Menu(
            title="RALLY PONG",
            items=[
                MenuItem("Start", "toggle", hint="Space"),
                MenuItem("Reset Match", "reset", hint="R"),
                MenuItem("", "difficulty", hint="D"),
                MenuItem("", "speed", hint="B"),
                MenuItem("Quit", "quit"),
            ],
        )
        self.menu_open = False
        self._refresh_menu_labels()

        self.flash_message = ""
        self.flash_timer = 0

    def run(self) -> None:
        """Main event/update/render loop."""
        running = True
        while running:
            self.clock.tick(FPS)
            running = self._handle_events()
            if not running:
                break
            self.tick(pygame.time.get_ticks())
            self._render()

        logger.info("Exiting with score %d-%d", self.simulation.player_score, self.simulation.opponent_score)
        pygame.quit()

    def tick(self, now_ms: float) -> FrameEvents | None:
        """Advance one frame if the match is running."""
        if self.flash_timer > 0:
            self.flash_timer -= 1
        if self.menu_open or not self.simulation.is_running:
            return None
        dt = self.simulation.time_scale(now_ms)
        events = self.simulation.advance(dt)
        self._react(events)
        return events

    # --- Control surface -------------------------------------------------

    def toggle_pause(self) -> bool:
        running = self.simulation.toggle_pause(pygame.time.get_ticks())
        self._refresh_menu_labels()
        return running

    def reset_match(self) -> None:
        self.simulation.reset_match()
        self._flash("Match reset")

    def cycle_difficulty(self) -> None:
        difficulty = self.simulation.cycle_difficulty()
        self._refresh_menu_labels()
        self._flash(f"AI difficulty: {difficulty.value.title()}")

    def cycle_speed(self) -> None:
        speed = self.simulation.cycle_speed_profile()
        self._refresh_menu_labels()
        self._flash(f"Ball speed: {speed.value.title()} (next serve)")

    def open_menu(self) -> None:
        if self.simulation.is_running:
            self.toggle_pause()
        self.menu_open = True

    def close_menu(self) -> None:
        self.menu_open = False

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if self.menu_open:
                if not self._handle_menu_input(event.key):
                    return False
            else:
                self._handle_gameplay_key(event.key)
        return True

    def _handle_gameplay_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.toggle_pause()
        elif key == pygame.K_r:
            self.reset_match()
        elif key == pygame.K_d:
            self.cycle_difficulty()
        elif key == pygame.K_b:
            self.cycle_speed()
        elif key == pygame.K_ESCAPE:
            self.open_menu()

    def _handle_menu_input(self, key: int) -> bool:
        """Apply a key press to the open menu. Returns False to quit."""
        if key == pygame.K_ESCAPE:
            self.close_menu()
            return True
        if key == pygame.K_UP:
            self.menu.move(-1)
            self.audio.play("menu")
            return True
        if key == pygame.K_DOWN:
            self.menu.move(1)
            self.audio.play("menu")
            return True
        if key not in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_LEFT, pygame.K_RIGHT):
            return True

        action = self.menu.current_action()
        self.audio.play("menu")
        if action == "toggle":
            self.close_menu()
            self.toggle_pause()
        elif action == "reset":
            self.reset_match()
        elif action == "difficulty":
            self.cycle_difficulty()
        elif action == "speed":
            self.cycle_speed()
        elif action == "quit":
            return False
        return True

    def _refresh_menu_labels(self) -> None:
        self.menu.set_label("toggle", "Pause" if self.simulation.is_running else "Start")
        self.menu.set_label("difficulty", f"AI Difficulty: {self.simulation.current_difficulty.value.title()}")
        self.menu.set_label("speed", f"Ball Speed: {self.simulation.current_speed_profile.value.title()}")

    # --- Feedback ----------------------------------------------------------

    def _react(self, events: FrameEvents) -> None:
        if events.player_hit or events.opponent_hit:
            self.audio.play("paddle")
        elif events.wall_bounce:
            self.audio.play("wall")
        if events.scorer is not None:
            self.audio.play("score")
            who = "Player" if events.scorer == Side.PLAYER else "AI"
            self._flash(
                f"{who} scores! {self.simulation.player_score} : {self.simulation.opponent_score}"
            )

    def _flash(self, message: str) -> None:
        self.flash_message = message
        self.flash_timer = FLASH_FRAMES

    def _render(self) -> None:
        message = self.flash_message if self.flash_timer > 0 else ""
        self.renderer.draw(self.screen, self.simulation.snapshot(), message)
        if self.menu_open:
            self.menu.render(self.screen, self.title_font, self.body_font)
        pygame.display.flip()
