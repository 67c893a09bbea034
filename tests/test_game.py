from __future__ import annotations

import random
from pathlib import Path

import pygame
import pytest

from rallypong.game import PongGame
from rallypong.settings import BallSpeed, Difficulty, GameSettings
from rallypong.simulation import FrameEvents, Side


@pytest.fixture
def game():
    game = PongGame(root=Path.cwd(), settings=GameSettings(sound_enabled=False), rng=random.Random(3))
    yield game
    pygame.quit()


def test_tick_is_noop_while_paused(game: PongGame) -> None:
    ball_x = game.simulation.ball.x
    assert game.tick(1000.0) is None
    assert game.simulation.ball.x == ball_x


def test_tick_advances_after_start(game: PongGame) -> None:
    game.toggle_pause()
    start = game.simulation.match.last_timestamp
    ball_x = game.simulation.ball.x
    events = game.tick(start + 16.67)
    assert isinstance(events, FrameEvents)
    assert game.simulation.ball.x == pytest.approx(ball_x + game.simulation.ball.vx)
    assert game.simulation.match.last_timestamp == start + 16.67


def test_gameplay_keys_drive_control_surface(game: PongGame) -> None:
    game._handle_gameplay_key(pygame.K_d)
    assert game.simulation.current_difficulty == Difficulty.HARD
    game._handle_gameplay_key(pygame.K_b)
    assert game.simulation.current_speed_profile == BallSpeed.FAST
    game._handle_gameplay_key(pygame.K_SPACE)
    assert game.simulation.is_running

    game.simulation.match.player_score = 2
    game._handle_gameplay_key(pygame.K_r)
    assert game.simulation.player_score == 0
    assert game.flash_message == "Match reset"


def test_menu_pauses_and_resumes(game: PongGame) -> None:
    game.toggle_pause()
    game._handle_gameplay_key(pygame.K_ESCAPE)
    assert game.menu_open
    assert not game.simulation.is_running
    assert game.menu.current_action() == "toggle"
    assert game.menu.items[0].label == "Start"

    assert game._handle_menu_input(pygame.K_RETURN)
    assert not game.menu_open
    assert game.simulation.is_running


def test_menu_cycles_profiles_and_quits(game: PongGame) -> None:
    game.open_menu()
    game._handle_menu_input(pygame.K_DOWN)
    game._handle_menu_input(pygame.K_DOWN)
    game._handle_menu_input(pygame.K_RIGHT)
    assert game.simulation.current_difficulty == Difficulty.HARD
    assert game.menu.items[2].label == "AI Difficulty: Hard"

    game._handle_menu_input(pygame.K_DOWN)
    game._handle_menu_input(pygame.K_DOWN)
    assert game.menu.current_action() == "quit"
    assert game._handle_menu_input(pygame.K_RETURN) is False


def test_goal_flashes_score(game: PongGame) -> None:
    game._react(FrameEvents(scorer=Side.OPPONENT))
    assert game.flash_message.startswith("AI scores!")
    assert game.flash_timer > 0


def test_render_does_not_fail_with_menu(game: PongGame) -> None:
    game.open_menu()
    game._render()
    game.close_menu()
    game._render()


def test_menu_panel_is_centered_and_fits_every_row(game: PongGame) -> None:
    panel = game.menu.panel_rect(game.screen, title_height=40)
    assert panel.center == game.screen.get_rect().center
    assert panel.height >= 40 * len(game.menu.items)
    assert [item.hint for item in game.menu.items[:4]] == ["Space", "R", "D", "B"]
