"""Simulation core: paddles, ball, scoring and profile selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math
import random

from .ai import OpponentAI
from .controls import InputProvider, InputState
from .entities import Ball, Paddle
from .settings import (
    DIFFICULTY_PROFILES,
    SPEED_PROFILES,
    BallSpeed,
    Difficulty,
    DifficultyProfile,
    GameSettings,
    SpeedProfile,
    parse_ball_speed,
    parse_difficulty,
)
from .utils import (
    BALL_RADIUS,
    INITIAL_BALL_SPEED_Y,
    MAX_TIME_SCALE,
    NOMINAL_FRAME_MS,
    PADDLE_HEIGHT,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    PLAYER_SPEED,
)

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """Which paddle a goal is credited to."""

    PLAYER = "player"
    OPPONENT = "opponent"


@dataclass(slots=True)
class MatchState:
    """Scores, run flag and the frame timestamp baseline."""

    player_score: int = 0
    opponent_score: int = 0
    is_running: bool = False
    last_timestamp: float | None = None


@dataclass(slots=True)
class FrameEvents:
    """What happened during a single advance call."""

    player_hit: bool = False
    opponent_hit: bool = False
    wall_bounce: bool = False
    scorer: Side | None = None


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Read-only view of the state for renderers and control surfaces."""

    field_width: int
    field_height: int
    player_x: float
    player_y: float
    opponent_x: float
    opponent_y: float
    paddle_width: float
    paddle_height: float
    ball_x: float
    ball_y: float
    ball_radius: float
    player_score: int
    opponent_score: int
    is_running: bool
    difficulty: Difficulty
    ball_speed: BallSpeed


class SimulationState:
    """Owns all mutable game state and advances it one frame at a time."""

    def __init__(
        self,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
        input_provider: InputProvider | None = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()
        self.input_provider: InputProvider = input_provider or InputState()

        self.width = self.settings.field_width
        self.height = self.settings.field_height

        self.current_difficulty = self.settings.difficulty
        self.current_speed_profile = self.settings.ball_speed
        self.ai = OpponentAI(DIFFICULTY_PROFILES[self.current_difficulty], self.rng)

        self.player = Paddle(x=PADDLE_MARGIN, y=0.0)
        self.opponent = Paddle(x=self.width - PADDLE_MARGIN - PADDLE_WIDTH, y=0.0)
        self.player.recenter(self.height)
        self.opponent.recenter(self.height)

        self.ball = Ball(x=self.width / 2, y=self.height / 2)
        self.ball.vx = self.ball_profile.start_speed_x
        self.ball.vy = INITIAL_BALL_SPEED_Y

        self.match = MatchState()

    @property
    def difficulty_profile(self) -> DifficultyProfile:
        return DIFFICULTY_PROFILES[self.current_difficulty]

    @property
    def ball_profile(self) -> SpeedProfile:
        return SPEED_PROFILES[self.current_speed_profile]

    @property
    def player_score(self) -> int:
        return self.match.player_score

    @property
    def opponent_score(self) -> int:
        return self.match.opponent_score

    @property
    def is_running(self) -> bool:
        return self.match.is_running

    # --- Control surface -------------------------------------------------

    def toggle_pause(self, now_ms: float | None = None) -> bool:
        """Flip between paused and running. Returns the new running flag.

        Resuming resets the frame baseline to now_ms, or clears it so the
        next time_scale call starts a fresh one. Either way the first delta
        after a pause is not the whole paused duration.
        """
        self.match.is_running = not self.match.is_running
        if self.match.is_running:
            self.match.last_timestamp = now_ms
        logger.debug("Simulation %s", "running" if self.match.is_running else "paused")
        return self.match.is_running

    def time_scale(self, now_ms: float) -> float:
        """Convert elapsed time since the last frame into a frame-count factor.

        Without a baseline the frame counts as one nominal frame.
        """
        if self.match.last_timestamp is None:
            self.match.last_timestamp = now_ms
            return 1.0
        dt = (now_ms - self.match.last_timestamp) / NOMINAL_FRAME_MS
        self.match.last_timestamp = now_ms
        return dt

    def set_difficulty(self, name: str | Difficulty) -> bool:
        """Switch opponent difficulty. Unknown names are ignored."""
        difficulty = parse_difficulty(name)
        if difficulty is None:
            logger.debug("Ignoring unknown difficulty %r", name)
            return False
        self.current_difficulty = difficulty
        self.ai.profile = self.difficulty_profile
        self.opponent.recenter(self.height)
        logger.info("Difficulty set to %s", difficulty.value)
        return True

    def set_speed_profile(self, name: str | BallSpeed) -> bool:
        """Switch ball speed profile for future serves. Unknown names are ignored."""
        speed = parse_ball_speed(name)
        if speed is None:
            logger.debug("Ignoring unknown speed profile %r", name)
            return False
        self.current_speed_profile = speed
        logger.info("Ball speed set to %s", speed.value)
        return True

    def cycle_difficulty(self) -> Difficulty:
        order = list(Difficulty)
        idx = order.index(self.current_difficulty)
        self.set_difficulty(order[(idx + 1) % len(order)])
        return self.current_difficulty

    def cycle_speed_profile(self) -> BallSpeed:
        order = list(BallSpeed)
        idx = order.index(self.current_speed_profile)
        self.set_speed_profile(order[(idx + 1) % len(order)])
        return self.current_speed_profile

    def reset_match(self) -> None:
        """Zero both scores and serve in a random direction."""
        self.match.player_score = 0
        self.match.opponent_score = 0
        self.reset_ball(0)
        logger.info("Match reset")

    def reset_ball(self, direction: int = 0) -> None:
        """Serve from center. direction 0 picks left or right at random."""
        profile = self.ball_profile
        self.ball.center_in(self.width, self.height)
        if direction == 0:
            direction = -1 if self.rng.random() < 0.5 else 1
        self.ball.vx = direction * profile.start_speed_x
        self.ball.vy = (self.rng.random() - 0.5) * profile.spin_factor

    # --- Frame update ----------------------------------------------------

    def advance(self, dt: float = 1.0) -> FrameEvents:
        """Run one frame: player input, opponent, ball, then scoring.

        The frame driver only calls this while running. Unless
        ``scale_motion`` is enabled, dt does not scale any displacement:
        paddles and ball move a fixed step per call. When it is enabled, dt is
        capped at MAX_TIME_SCALE.
        """
        scale = min(max(0.0, dt), MAX_TIME_SCALE) if self.settings.scale_motion else 1.0
        events = FrameEvents()
        self._handle_player_input(scale)
        self._update_opponent(scale)
        self._update_ball(scale, events)
        return events

    def _clamp_paddles(self) -> None:
        self.player.clamp_to(self.height)
        self.opponent.clamp_to(self.height)

    def _handle_player_input(self, scale: float) -> None:
        dy = 0.0
        if self.input_provider.move_up:
            dy -= PLAYER_SPEED
        if self.input_provider.move_down:
            dy += PLAYER_SPEED
        self.player.move(dy * scale)
        self._clamp_paddles()

    def _update_opponent(self, scale: float) -> None:
        self.opponent.move(self.ai.step(self.opponent, self.ball, scale))
        self._clamp_paddles()

    def _substeps(self, scale: float) -> int:
        """Split a scaled move so no piece is wider than a paddle's hit band."""
        fastest = max(abs(self.ball.vx), self.ball_profile.max_speed_x)
        return max(1, math.ceil(fastest * scale / PADDLE_WIDTH))

    def _update_ball(self, scale: float, events: FrameEvents) -> None:
        ball = self.ball
        player = self.player
        opponent = self.opponent
        steps = self._substeps(scale)

        for _ in range(steps):
            ball.step(scale / steps)
            if ball.bounce_off_walls(self.height):
                events.wall_bounce = True

            # At most one hit per paddle per frame.
            if (
                not events.player_hit
                and player.x <= ball.left <= player.x + player.width
                and player.spans(ball.y)
            ):
                ball.vx = abs(ball.vx)
                self._apply_spin(player)
                events.player_hit = True

            if (
                not events.opponent_hit
                and opponent.x <= ball.right <= opponent.x + opponent.width
                and opponent.spans(ball.y)
            ):
                ball.vx = -abs(ball.vx)
                self._apply_spin(opponent)
                events.opponent_hit = True

            if ball.x < 0:
                self._score(Side.OPPONENT, events)
                break
            if ball.x > self.width:
                self._score(Side.PLAYER, events)
                break

    def _apply_spin(self, paddle: Paddle) -> None:
        """Set vy from the hit offset and speed the ball up along x."""
        profile = self.ball_profile
        norm = (self.ball.y - paddle.center_y) / (paddle.height / 2)
        self.ball.vy = norm * profile.spin_factor
        speed = min(abs(self.ball.vx) + profile.accel_step, profile.max_speed_x)
        self.ball.vx = math.copysign(speed, self.ball.vx)

    def _score(self, side: Side, events: FrameEvents) -> None:
        if side == Side.PLAYER:
            self.match.player_score += 1
            self.reset_ball(1)
        else:
            self.match.opponent_score += 1
            self.reset_ball(-1)
        events.scorer = side
        logger.debug(
            "%s scored (%d-%d)", side.value, self.match.player_score, self.match.opponent_score
        )

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            field_width=self.width,
            field_height=self.height,
            player_x=self.player.x,
            player_y=self.player.y,
            opponent_x=self.opponent.x,
            opponent_y=self.opponent.y,
            paddle_width=PADDLE_WIDTH,
            paddle_height=PADDLE_HEIGHT,
            ball_x=self.ball.x,
            ball_y=self.ball.y,
            ball_radius=BALL_RADIUS,
            player_score=self.match.player_score,
            opponent_score=self.match.opponent_score,
            is_running=self.match.is_running,
            difficulty=self.current_difficulty,
            ball_speed=self.current_speed_profile,
        )
