"""Optional sound cues for paddle hits, wall bounces and goals."""

from __future__ import annotations

from pathlib import Path
import logging
import pygame

logger = logging.getLogger(__name__)

SOUND_FILES = {
    "paddle": "paddle.wav",
    "wall": "wall.wav",
    "score": "score.wav",
    "menu": "menu.wav",
}


class AudioManager:
    """Plays short effects, staying silent when the mixer or assets are missing."""

    def __init__(self, root: Path, enabled: bool = True) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        if not enabled:
            return
        try:
            pygame.mixer.init()
            self.sound_enabled = True
        except pygame.error as exc:
            logger.info("Audio disabled: %s", exc)

    def load_assets(self) -> None:
        """Load whichever effect files exist under assets/sounds."""
        if not self.sound_enabled:
            return
        sound_dir = self.root / "assets" / "sounds"
        for key, filename in SOUND_FILES.items():
            path = sound_dir / filename
            if not path.exists():
                continue
            try:
                self.sounds[key] = pygame.mixer.Sound(str(path))
            except pygame.error:
                logger.debug("Could not load %s", path)

    def play(self, key: str) -> None:
        """Play a named sound effect."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()
