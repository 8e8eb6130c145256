"""Drawing and input handling for the menu, the placeholder page and both game modes."""

from __future__ import annotations

import random
from typing import Iterable, Iterator

import pygame

from . import advanced, classic
from .advanced import AdvancedGame
from .classic import ClassicGame
from .media import Media, draw_crosshair
from .menu import WELCOME_TEXT, intro_alpha, intro_message, welcome_finished

WIDTH = 800
BACKGROUND = (240, 240, 240)
TEXT_COLOR = (20, 20, 20)
GRAY = (128, 128, 128)
BUTTON_COLOR = (200, 200, 200)
BUTTON_BORDER = (120, 120, 120)
FONT_SCALE = 1.4

BUTTON_SIZE = (200, 40)
RESTART_LABEL = "Tekrar Oyna"
MENU_LABEL = "Menüye Dön"

_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def _font(size: int, italic: bool = False) -> pygame.font.Font:
    key = (size, italic)
    font = _fonts.get(key)
    if font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        font = pygame.font.Font(None, round(size * FONT_SCALE))
        font.set_italic(italic)
        _fonts[key] = font
    return font


def _render(text: str, size: int, color, italic: bool = False, alpha: int | None = None):
    image = _font(size, italic).render(text, True, color)
    if alpha is not None:
        image.set_alpha(alpha)
    return image


def _blit_centered(surface, text, size, y, color=TEXT_COLOR, italic=False, alpha=None) -> None:
    image = _render(text, size, color, italic, alpha)
    surface.blit(image, image.get_rect(midtop=(surface.get_width() // 2, y)))


def _blit_at(surface, text, size, x, y, color=TEXT_COLOR) -> None:
    surface.blit(_render(text, size, color), (x, y))


def _clicks(events: Iterable[pygame.event.Event]) -> Iterator[tuple[int, int]]:
    for event in events:
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 0) == 1:
            yield event.pos


def _set_cursor_visible(visible: bool) -> None:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        pygame.mouse.set_visible(visible)


def _draw_cursor(surface: pygame.Surface) -> None:
    _set_cursor_visible(False)
    if pygame.display.get_init() and pygame.mouse.get_focused():
        draw_crosshair(surface, pygame.mouse.get_pos())


class Button:
    """A clickable rectangle with a centred label."""

    def __init__(self, label: str, center, size=BUTTON_SIZE, font_size: int = 20) -> None:
        self.label = label
        self.font_size = font_size
        self.rect = pygame.Rect(0, 0, int(size[0]), int(size[1]))
        self.rect.center = (round(center[0]), round(center[1]))

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, BUTTON_COLOR, self.rect)
        pygame.draw.rect(surface, BUTTON_BORDER, self.rect, 1)
        text = _render(self.label, self.font_size, TEXT_COLOR)
        surface.blit(text, text.get_rect(center=self.rect.center))

    def hit(self, pos) -> bool:
        """Whether ``pos`` lies on the button."""
        return bool(self.rect.collidepoint(pos))


class MenuScreen:
    """The welcome fade followed by the mode selection menu."""

    def __init__(self, start: float | None = None) -> None:
        self.start = start
        self.classic_button = Button("Klasik", (WIDTH // 2, 250), BUTTON_SIZE, 20)
        self.advanced_button = Button("Gelişmiş", (WIDTH // 2, 370), BUTTON_SIZE, 20)

    def update(self, surface: pygame.Surface, events, now: float) -> str | None:
        """Draw the menu; return "classic" or "advanced" when a mode is chosen."""
        if self.start is None:
            self.start = now
        elapsed = now - self.start
        surface.fill(BACKGROUND)
        _set_cursor_visible(True)

        if not welcome_finished(elapsed):
            _blit_centered(surface, WELCOME_TEXT, 32, 200, alpha=intro_alpha(elapsed))
            return None

        _blit_centered(surface, "Poligon", 36, 100)
        _blit_centered(surface, "Geleneksel Poligon Deneyimi", 20, 180)
        _blit_centered(surface, "Old but gold", 16, 205, GRAY, italic=True)
        self.classic_button.draw(surface)
        _blit_centered(surface, "Geliştirilmiş Dinamik Poligon Mücadelesi", 20, 300)
        _blit_centered(surface, "Upgrades, people. Upgrades.", 16, 325, GRAY, italic=True)
        self.advanced_button.draw(surface)

        for pos in _clicks(events):
            if self.classic_button.hit(pos):
                return "classic"
            if self.advanced_button.hit(pos):
                return "advanced"
        return None


class WipScreen:
    """A page announcing a mode that is not available yet."""

    def __init__(self, message: str) -> None:
        self.message = message
        self.back_button = Button(MENU_LABEL, (WIDTH // 2, 240), (220, 44), 24)

    def update(self, surface: pygame.Surface, events) -> bool:
        """Draw the page; return True when the player asks to go back to the menu."""
        surface.fill(BACKGROUND)
        _set_cursor_visible(True)
        _blit_centered(surface, self.message, 32, 150)
        self.back_button.draw(surface)
        return any(self.back_button.hit(pos) for pos in _clicks(events))


class _GameScreen:
    heading = ""
    sprites: tuple[str, ...] = ()

    def __init__(self, media: Media) -> None:
        self.media = media
        self.restart_button = Button(RESTART_LABEL, (WIDTH // 2, 270), BUTTON_SIZE, 20)
        self.menu_button = Button(MENU_LABEL, (WIDTH // 2, 320), BUTTON_SIZE, 20)
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}

    def _load_sprites(self) -> None:
        for name in self.sprites:
            self.media.texture(name)

    def _draw_sprite(self, surface, key: str, x: float, y: float, width: float, height: float):
        size = (round(width), round(height))
        cache_key = (key, *size)
        image = self._scaled.get(cache_key)
        if image is None:
            image = pygame.transform.scale(self.media.texture(key), size)
            self._scaled[cache_key] = image
        surface.blit(image, (round(x), round(y)))

    @staticmethod
    def _draw_intro(surface, elapsed: float) -> None:
        _set_cursor_visible(True)
        message = intro_message(elapsed)
        if message is not None:
            _blit_centered(surface, message, 36, 200)

    def _game_over(self, surface, score: int, events) -> str | None:
        _set_cursor_visible(True)
        _blit_centered(surface, self.heading, 32, 150)
        _blit_centered(surface, f"Toplam Puan: {score}", 24, 205)
        self.restart_button.draw(surface)
        self.menu_button.draw(surface)
        for pos in _clicks(events):
            if self.restart_button.hit(pos):
                return "restart"
            if self.menu_button.hit(pos):
                return "menu"
        return None


class ClassicScreen(_GameScreen):
    """Runs and draws one classic round."""

    heading = "Oyun Bitti!"
    sprites = classic.SPRITES

    def __init__(self, media: Media, now: float, rng: random.Random | None = None) -> None:
        super().__init__(media)
        self.game = ClassicGame(rng, now, media.play_sound)

    def update(self, surface: pygame.Surface, events, now: float) -> str | None:
        """Advance and draw the round; return "restart" or "menu" when chosen after it ends."""
        events = list(events)
        self._load_sprites()
        game = self.game
        game.tick(now)
        surface.fill(BACKGROUND)

        if game.show_intro:
            self._draw_intro(surface, now - game.intro_start)
            return None
        if game.game_over:
            return self._game_over(surface, game.score, events)

        for x, y in _clicks(events):
            game.shoot(x, y, now)

        for enemy in game.enemies:
            self._draw_sprite(
                surface,
                game.enemy_sprite(enemy, now),
                enemy.x,
                enemy.y,
                classic.DISPLAY_WIDTH,
                classic.DISPLAY_HEIGHT,
            )
        _blit_at(surface, f"Süre: {game.remaining_seconds(now)}", 20, 8, 8)
        _blit_at(surface, f"Puan: {game.score}", 20, 8, 34)
        _draw_cursor(surface)
        return None


class AdvancedScreen(_GameScreen):
    """Runs and draws one advanced round."""

    heading = "Gelişmiş - Oyun Bitti!"
    sprites = advanced.SPRITES

    def __init__(self, media: Media, now: float, rng: random.Random | None = None) -> None:
        super().__init__(media)
        self.game = AdvancedGame(rng, now, media.play_sound)

    def update(self, surface: pygame.Surface, events, now: float) -> str | None:
        """Advance and draw the round; return "restart" or "menu" when chosen after it ends."""
        events = list(events)
        self._load_sprites()
        game = self.game
        game.tick(now)
        surface.fill(BACKGROUND)

        if game.show_intro:
            self._draw_intro(surface, now - game.intro_start)
            return None
        if game.game_over:
            return self._game_over(surface, game.score, events)

        for x, y in _clicks(events):
            game.shoot(x, y, now)

        for enemy in game.enemies:
            self._draw_sprite(
                surface,
                game.enemy_sprite(enemy, now),
                enemy.x,
                enemy.y,
                advanced.ENEMY_DISPLAY_WIDTH,
                advanced.ENEMY_DISPLAY_HEIGHT,
            )
        for box in game.supply_boxes:
            self._draw_sprite(
                surface,
                game.box_sprite(box, now),
                box.x,
                box.y,
                advanced.BOX_DISPLAY_WIDTH,
                advanced.BOX_DISPLAY_HEIGHT,
            )
        _blit_at(surface, f"Süre: {game.visible_time}", 20, 8, 8)
        _blit_at(surface, f"Skor: {game.score}", 20, 8, 34)
        _draw_cursor(surface)
        return None