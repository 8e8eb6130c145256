"""The classic mode: shoot as many short-lived targets as possible in twenty seconds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from .menu import INTRO_DURATION

DISPLAY_WIDTH = 75.0
DISPLAY_HEIGHT = DISPLAY_WIDTH * (55.0 / 35.0)

ROUND_LENGTH = 20.0
SHOWN_TIME = 30
ENEMY_LIFETIME = 3.0
DEATH_DURATION = 0.5
DEATH_FRAME = 0.25
SPECIAL_DEATH_CHANCE = 0.05

GUNSHOT_SOUND = "assets/sound/gunshot.mp3"
SPECIAL_DEATH_SOUND = "assets/sound/enemy_death-special.mp3"
DEATH_SPRITE_1 = "assets/sprite/enemy_death-1.png"
DEATH_SPRITE_2 = "assets/sprite/enemy_death-2.png"

SPRITES = (
    "assets/sprite/enemy-1.png",
    "assets/sprite/enemy-2.png",
    DEATH_SPRITE_1,
    DEATH_SPRITE_2,
)


@dataclass
class Enemy:
    """A target on the field; ``dying_since`` is set once it has been shot."""

    x: float
    y: float
    texture_key: str
    spawn_time: float
    dying_since: float | None = None


def _contains(enemy: Enemy, x: float, y: float) -> bool:
    return (
        enemy.x <= x <= enemy.x + DISPLAY_WIDTH
        and enemy.y <= y <= enemy.y + DISPLAY_HEIGHT
    )


class ClassicGame:
    """State and rules of one classic round; times are seconds on a monotonic clock."""

    def __init__(
        self,
        rng: random.Random | None = None,
        now: float = 0.0,
        play_sound: Callable[[str], object] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.play_sound = play_sound if play_sound is not None else (lambda path: None)
        self.score = 0
        self.enemies: list[Enemy] = []
        self.next_spawn_time = now + self.rng.uniform(0.5, 1.0)
        self.start_time = now
        self.intro_start = now
        self.show_intro = True
        self.game_over = False

    def tick(self, now: float) -> None:
        """Advance the round: finish the intro, end the game, spawn and expire targets."""
        if self.show_intro:
            if now - self.intro_start >= INTRO_DURATION:
                self.start_time = now
                self.show_intro = False
            return

        if now - self.start_time >= ROUND_LENGTH:
            self.game_over = True
        if self.game_over:
            return

        if now >= self.next_spawn_time:
            self.spawn_enemy(now)
            self.next_spawn_time = now + self.rng.uniform(0.5, 1.0)

        self.enemies = [enemy for enemy in self.enemies if self._still_shown(enemy, now)]

    @staticmethod
    def _still_shown(enemy: Enemy, now: float) -> bool:
        if enemy.dying_since is None:
            return now - enemy.spawn_time < ENEMY_LIFETIME
        return now - enemy.dying_since < DEATH_DURATION

    def shoot(self, x: float, y: float, now: float) -> bool:
        """Fire at ``(x, y)``; return whether a target was hit."""
        if self.show_intro or self.game_over:
            return False
        self.play_sound(GUNSHOT_SOUND)
        target = next((enemy for enemy in self.enemies if _contains(enemy, x, y)), None)
        if target is None:
            return False
        if target.dying_since is None:
            target.dying_since = now
        self.score += 1
        if self.rng.random() < SPECIAL_DEATH_CHANCE:
            self.play_sound(SPECIAL_DEATH_SOUND)
        else:
            self.play_sound(f"assets/sound/enemy_death-{self.rng.randint(1, 3)}.wav")
        return True

    def spawn_enemy(self, now: float) -> Enemy:
        """Place a new target at a random spot and return it."""
        enemy = Enemy(
            x=self.rng.uniform(0.0, 750.0),
            y=self.rng.uniform(0.0, 500.0),
            texture_key=f"assets/sprite/enemy-{self.rng.randint(1, 2)}.png",
            spawn_time=now,
        )
        self.enemies.append(enemy)
        return enemy

    def enemy_sprite(self, enemy: Enemy, now: float) -> str:
        """The image to draw for ``enemy`` at time ``now``."""
        if enemy.dying_since is None:
            return enemy.texture_key
        if now - enemy.dying_since < DEATH_FRAME:
            return DEATH_SPRITE_1
        return DEATH_SPRITE_2

    def remaining_seconds(self, now: float) -> int:
        """The time shown on screen during the round."""
        elapsed = max(int(now - self.start_time), 0)
        return SHOWN_TIME - min(elapsed, SHOWN_TIME)