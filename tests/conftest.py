"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class SequenceRandom:
    """Returns queued values from random(), then 0.5 (zero noise) once drained."""

    def __init__(self, values: list[float] | None = None) -> None:
        self.values = list(values or [])

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return 0.5


@pytest.fixture
def seq_rng():
    return SequenceRandom
