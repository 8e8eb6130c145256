"""Loading sprites and sounds from the asset tree, and drawing the crosshair."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

CROSSHAIR_SIZE = 15
CROSSHAIR_GAP = 5
CROSSHAIR_WIDTH = 2
CROSSHAIR_COLOR = (255, 0, 0)


class Media:
    """Caches images and sounds found below an asset root directory."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._textures: dict[str, pygame.Surface] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def texture(self, path: str) -> pygame.Surface:
        """Return the image at ``path``, loading it on first use.

        Raises FileNotFoundError when the image does not exist.
        """
        cached = self._textures.get(path)
        if cached is not None:
            return cached
        file = self.root / path
        if not file.is_file():
            raise FileNotFoundError(f"image not found: {file}")
        image = pygame.image.load(str(file))
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self._textures[path] = image
        return image

    def play_sound(self, path: str) -> bool:
        """Play the sound at ``path`` once; return whether it could be played.

        A missing file or an unavailable audio device is silently ignored.
        """
        file = self.root / path
        if not file.is_file():
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = self._sounds.get(path)
            if sound is None:
                sound = pygame.mixer.Sound(str(file))
                self._sounds[path] = sound
            sound.play()
        except pygame.error:
            return False
        return True


def draw_crosshair(surface: pygame.Surface, pos: tuple[float, float]) -> None:
    """Draw a red four-armed crosshair centred on ``pos``, leaving a gap at its centre."""
    x, y = pos
    reach = CROSSHAIR_SIZE + CROSSHAIR_GAP
    gap = CROSSHAIR_GAP
    arms = (
        ((x - reach, y), (x - gap, y)),
        ((x + gap, y), (x + reach, y)),
        ((x, y - reach), (x, y - gap)),
        ((x, y + gap), (x, y + reach)),
    )
    for start, end in arms:
        pygame.draw.line(surface, CROSSHAIR_COLOR, start, end, CROSSHAIR_WIDTH)