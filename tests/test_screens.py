import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from poligon import advanced, classic  # noqa: E402
from poligon.media import Media  # noqa: E402
from poligon.screens import (  # noqa: E402
    BUTTON_COLOR,
    AdvancedScreen,
    Button,
    ClassicScreen,
    MenuScreen,
    WipScreen,
)

SPRITE_COLOR = (10, 120, 10)


@pytest.fixture
def media(tmp_path):
    pygame.display.init()
    pygame.font.init()
    for name in {*classic.SPRITES, *advanced.SPRITES}:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        image = pygame.Surface((35, 55))
        image.fill(SPRITE_COLOR)
        pygame.image.save(image, str(path))
    yield Media(tmp_path)


@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((800, 600))


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_button_hit_inside_and_outside():
    button = Button("Klasik", (400, 250), (200, 40), 20)
    assert button.hit((400, 250)) is True
    assert button.hit((300, 250)) is True
    assert button.hit((299, 250)) is False
    assert button.hit((400, 300)) is False


def test_button_draw_fills_rect(surface):
    button = Button("Klasik", (400, 250), (200, 40), 20)
    button.draw(surface)
    corner = (button.rect.left + 3, button.rect.top + 3)
    assert tuple(surface.get_at(corner))[:3] == BUTTON_COLOR


def test_menu_ignores_clicks_during_welcome(surface):
    menu = MenuScreen(10.0)
    pos = menu.classic_button.rect.center
    assert menu.update(surface, [click(pos)], 11.0) is None


def test_menu_selects_modes_after_welcome(surface):
    menu = MenuScreen(10.0)
    assert menu.update(surface, [click(menu.classic_button.rect.center)], 15.0) == "classic"
    assert menu.update(surface, [click(menu.advanced_button.rect.center)], 15.5) == "advanced"
    assert menu.update(surface, [click((5, 590))], 16.0) is None


def test_menu_starts_clock_on_first_update(surface):
    menu = MenuScreen()
    menu.update(surface, [], 42.0)
    assert menu.start == 42.0
    assert menu.update(surface, [click(menu.classic_button.rect.center)], 44.0) is None


def test_wip_back_button(surface):
    wip = WipScreen("Bonus mod çok yakında...")
    assert wip.update(surface, []) is False
    assert wip.update(surface, [click(wip.back_button.rect.center)]) is True


def test_classic_intro_ignores_clicks(media, surface):
    screen = ClassicScreen(media, 100.0, random.Random(1))
    assert screen.update(surface, [click((400, 300))], 101.0) is None
    assert screen.game.show_intro is True
    assert screen.game.score == 0


def test_classic_shoot_and_draw(media, surface):
    screen = ClassicScreen(media, 100.0, random.Random(1))
    screen.update(surface, [], 104.0)
    assert screen.game.show_intro is False
    enemy = screen.game.spawn_enemy(104.0)
    enemy.x, enemy.y = 400.0, 300.0
    screen.update(surface, [click((430, 350))], 104.1)
    assert screen.game.score == 1
    assert enemy.dying_since == 104.1
    assert tuple(surface.get_at((430, 350)))[:3] == SPRITE_COLOR


def test_classic_game_over_buttons(media, surface):
    screen = ClassicScreen(media, 100.0, random.Random(2))
    screen.update(surface, [], 104.0)
    screen.update(surface, [], 124.5)
    assert screen.game.game_over is True
    assert screen.update(surface, [click(screen.restart_button.rect.center)], 125.0) == "restart"
    assert screen.update(surface, [click(screen.menu_button.rect.center)], 125.5) == "menu"


def test_advanced_shoot_and_draw(media, surface):
    screen = AdvancedScreen(media, 100.0, random.Random(3))
    screen.update(surface, [], 104.0)
    enemy = screen.game.spawn_enemy(104.0)
    enemy.x, enemy.y = 400.0, 300.0
    screen.update(surface, [click((430, 350))], 104.1)
    assert screen.game.score == 1
    assert enemy.phase is advanced.EnemyPhase.DYING
    assert tuple(surface.get_at((430, 350)))[:3] == SPRITE_COLOR


def test_advanced_game_over_buttons(media, surface):
    screen = AdvancedScreen(media, 100.0, random.Random(4))
    screen.update(surface, [], 104.0)
    screen.game.visible_time = 0
    screen.update(surface, [], 104.1)
    assert screen.game.game_over is True
    assert screen.update(surface, [click(screen.menu_button.rect.center)], 104.2) == "menu"
    assert screen.update(surface, [click(screen.restart_button.rect.center)], 104.3) == "restart"


def test_missing_sprite_raises(tmp_path, surface):
    screen = ClassicScreen(Media(tmp_path), 0.0, random.Random(5))
    with pytest.raises(FileNotFoundError):
        screen.update(surface, [], 0.0)