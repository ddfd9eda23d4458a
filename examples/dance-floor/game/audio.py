"""Background music through pygame.mixer."""
from __future__ import annotations

import logging
import os

import pygame

logger = logging.getLogger(__name__)


class MixerMusic:
    """AudioCue backed by ``pygame.mixer.music``.

    A missing file or an unavailable audio device leaves the game silent.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self.available = False
        if not os.path.exists(path):
            logger.warning("music file %s not found, playing silently", path)
            return
        try:
            pygame.mixer.init()
            pygame.mixer.music.load(path)
        except pygame.error as exc:
            logger.warning("music disabled: %s", exc)
            return
        self.available = True

    def play_from_start(self) -> None:
        if self.available:
            pygame.mixer.music.play(loops=-1, start=0.0)

    def stop(self) -> None:
        if self.available:
            pygame.mixer.music.stop()
