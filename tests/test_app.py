import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from poligon import advanced, classic  # noqa: E402
from poligon.app import Mode, PoligonApp, main  # noqa: E402
from poligon.media import Media  # noqa: E402
from poligon.screens import WipScreen  # noqa: E402


@pytest.fixture
def media(tmp_path):
    pygame.display.init()
    pygame.font.init()
    for name in {*classic.SPRITES, *advanced.SPRITES}:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        image = pygame.Surface((35, 55))
        image.fill((10, 120, 10))
        pygame.image.save(image, str(path))
    yield Media(tmp_path)


@pytest.fixture
def surface():
    pygame.font.init()
    return pygame.Surface((800, 600))


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def make_app(media):
    app = PoligonApp(media, 0.0)
    app.rng = random.Random(7)
    return app


def test_starts_in_menu(media, surface):
    app = make_app(media)
    assert app.update(surface, [], 0.0) is Mode.MENU
    assert app.classic is None and app.advanced is None


def test_classic_round_and_back_to_menu(media, surface):
    app = make_app(media)
    app.update(surface, [], 0.0)
    mode = app.update(surface, [click(app.menu.classic_button.rect.center)], 5.0)
    assert mode is Mode.CLASSIC
    assert app.classic.game.show_intro is True
    app.update(surface, [], 9.0)
    app.update(surface, [], 29.5)
    assert app.classic.game.game_over is True
    mode = app.update(surface, [click(app.classic.menu_button.rect.center)], 30.0)
    assert mode is Mode.MENU
    assert app.classic is None


def test_classic_restart_creates_fresh_round(media, surface):
    app = make_app(media)
    app.update(surface, [click(app.menu.classic_button.rect.center)], 5.0)
    app.update(surface, [], 9.0)
    app.update(surface, [], 29.5)
    old = app.classic
    mode = app.update(surface, [click(old.restart_button.rect.center)], 30.0)
    assert mode is Mode.CLASSIC
    assert app.classic is not old
    assert app.classic.game.show_intro is True
    assert app.classic.game.intro_start == 30.0


def test_advanced_round_and_back_to_menu(media, surface):
    app = make_app(media)
    mode = app.update(surface, [click(app.menu.advanced_button.rect.center)], 5.0)
    assert mode is Mode.ADVANCED
    app.update(surface, [], 9.0)
    app.advanced.game.visible_time = 0
    app.update(surface, [], 9.1)
    assert app.advanced.game.game_over is True
    mode = app.update(surface, [click(app.advanced.menu_button.rect.center)], 9.2)
    assert mode is Mode.MENU
    assert app.advanced is None


def test_advanced_restart(media, surface):
    app = make_app(media)
    app.update(surface, [click(app.menu.advanced_button.rect.center)], 5.0)
    app.update(surface, [], 9.0)
    app.advanced.game.visible_time = 0
    app.update(surface, [], 9.1)
    mode = app.update(surface, [click(app.advanced.restart_button.rect.center)], 9.2)
    assert mode is Mode.ADVANCED
    assert app.advanced.game.show_intro is True
    assert app.advanced.game.score == 0


def test_wip_returns_to_menu(media, surface):
    app = make_app(media)
    app.mode = Mode.WIP
    app.wip = WipScreen("Bonus mod çok yakında...")
    assert app.update(surface, [], 1.0) is Mode.WIP
    assert app.update(surface, [click(app.wip.back_button.rect.center)], 2.0) is Mode.MENU
    assert app.wip is None


def test_main_without_icon_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--assets", str(tmp_path)])
    assert "Simge dosyası açılamadı" in str(excinfo.value)