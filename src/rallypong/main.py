"""Executable entrypoint for Rally Pong."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging
import random

from .settings import BallSpeed, Difficulty, GameSettings
from .utils import FIELD_HEIGHT, FIELD_WIDTH

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rallypong", description="Two-paddle ball game against a scripted opponent")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.NORMAL.value,
        help="Opponent difficulty (default: normal)",
    )
    parser.add_argument(
        "--speed",
        choices=[s.value for s in BallSpeed],
        default=BallSpeed.NORMAL.value,
        help="Ball speed profile (default: normal)",
    )
    parser.add_argument("--width", type=int, default=FIELD_WIDTH, help=f"Field width (default: {FIELD_WIDTH})")
    parser.add_argument("--height", type=int, default=FIELD_HEIGHT, help=f"Field height (default: {FIELD_HEIGHT})")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for opponent noise and serves")
    parser.add_argument(
        "--scale-motion",
        action="store_true",
        help="Scale paddle and ball movement by frame time instead of moving a fixed step per frame",
    )
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        field_width=args.width,
        field_height=args.height,
        difficulty=Difficulty(args.difficulty),
        ball_speed=BallSpeed(args.speed),
        scale_motion=args.scale_motion,
        sound_enabled=not args.mute,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse options and launch the game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s:%(name)s:%(message)s")

    try:
        settings = settings_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.info(
        "Starting %dx%d field, difficulty=%s, speed=%s",
        settings.field_width,
        settings.field_height,
        settings.difficulty.value,
        settings.ball_speed.value,
    )

    from .game import PongGame

    root = Path(__file__).resolve().parents[2]
    PongGame(root=root, settings=settings, rng=rng).run()


if __name__ == "__main__":
    main()
