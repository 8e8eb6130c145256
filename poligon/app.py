"""The application: switches between the menu and the game modes, and the window loop."""

from __future__ import annotations

import argparse
import random
import time
from enum import Enum

import pygame

from .media import Media
from .screens import AdvancedScreen, ClassicScreen, MenuScreen, WipScreen

WINDOW_SIZE = (800, 600)
TITLE = "Poligon"
ICON_PATH = "assets/sprite/icon.png"
FPS = 60
WIP_BONUS_MESSAGE = "Bonus mod çok yakında..."


class Mode(Enum):
    MENU = "menu"
    CLASSIC = "classic"
    ADVANCED = "advanced"
    WIP = "wip"


class PoligonApp:
    """Holds the current screen and moves between screens on the player's choices."""

    def __init__(self, media: Media, now: float | None = None) -> None:
        self.media = media
        self.rng = random.Random()
        self.mode = Mode.MENU
        self.menu = MenuScreen(now)
        self.classic: ClassicScreen | None = None
        self.advanced: AdvancedScreen | None = None
        self.wip: WipScreen | None = None

    def _choose(self, result: str, now: float) -> None:
        if result == "classic":
            self.mode = Mode.CLASSIC
            self.classic = ClassicScreen(self.media, now, self.rng)
        elif result == "advanced":
            self.mode = Mode.ADVANCED
            self.advanced = AdvancedScreen(self.media, now, self.rng)
        elif result == "wip_bonus":
            self.mode = Mode.WIP
            self.wip = WipScreen(WIP_BONUS_MESSAGE)

    def update(self, surface: pygame.Surface, events, now: float) -> Mode:
        """Run one frame of the current screen and return the mode afterwards."""
        events = list(events)
        if self.mode is Mode.MENU:
            result = self.menu.update(surface, events, now)
            if result is not None:
                self._choose(result, now)
        elif self.mode is Mode.CLASSIC and self.classic is not None:
            signal = self.classic.update(surface, events, now)
            if signal == "menu":
                self.mode = Mode.MENU
                self.classic = None
            elif signal == "restart":
                self.classic = ClassicScreen(self.media, now, self.rng)
        elif self.mode is Mode.ADVANCED and self.advanced is not None:
            signal = self.advanced.update(surface, events, now)
            if signal == "menu":
                self.mode = Mode.MENU
                self.advanced = None
            elif signal == "restart":
                self.advanced = AdvancedScreen(self.media, now, self.rng)
        elif self.mode is Mode.WIP and self.wip is not None:
            if self.wip.update(surface, events):
                self.mode = Mode.MENU
                self.wip = None
        return self.mode


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="poligon", description="A shooting-range arcade game.")
    parser.add_argument(
        "--assets", default=".", help="directory that holds the assets/ folder (default: .)"
    )
    args = parser.parse_args(argv)

    media = Media(args.assets)
    icon_path = media.root / ICON_PATH
    if not icon_path.is_file():
        raise SystemExit(f"Simge dosyası açılamadı: {icon_path}")

    pygame.init()
    try:
        try:
            icon = pygame.image.load(str(icon_path))
        except pygame.error as exc:
            raise SystemExit(f"Decode işlemi başarısız: {exc}") from exc
        pygame.display.set_icon(icon)
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        app = PoligonApp(media, time.monotonic())
        clock = pygame.time.Clock()
        while True:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            app.update(surface, events, time.monotonic())
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0