"""The advanced mode: targets fire back, elites take several hits, and supply boxes appear."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .menu import INTRO_DURATION

ENEMY_DISPLAY_WIDTH = 75.0
ENEMY_DISPLAY_HEIGHT = ENEMY_DISPLAY_WIDTH * (55.0 / 35.0)
ENEMY_HIT_WIDTH = 75.0
ENEMY_HIT_HEIGHT = 117.85
BOX_DISPLAY_WIDTH = 60.0
BOX_DISPLAY_HEIGHT = BOX_DISPLAY_WIDTH * (35.0 / 35.0)

START_TIME = 30
MAX_TIME = 60
ELITE_UNLOCK = 30.0
FIRST_ELITE_DELAY = 30.0
SUPPLY_UNLOCK = 10.0
BOX_LIFETIME = 3.0
ANIMATION_DURATION = 0.5
ANIMATION_FRAME = 0.25
FIRE_DURATION = 0.5
FIRST_FIRE_DELAY = 1.0
HEALTH_CHANCE = 0.65
HEALTH_BONUS = 20
TNT_PENALTY = 5
SPECIAL_DEATH_CHANCE = 0.05
SPECIAL_EXPLOSION_CHANCE = 0.01

GUNSHOT_SOUND = "assets/sound/gunshot.mp3"
ENEMY_FIRE_SOUND = "assets/sound/enemy_fire.mp3"
ELITE_FIRE_SOUND = "assets/sound/elite_fire.wav"
ENEMY_SPECIAL_DEATH_SOUND = "assets/sound/enemy_death-special.mp3"
ELITE_SPECIAL_DEATH_SOUND = "assets/sound/elite_death-special.mp3"
EXPLOSION_SOUND = "assets/sound/supplybox_explosion.mp3"
SPECIAL_EXPLOSION_SOUND = "assets/sound/supplybox_explosion-special.mp3"

ENEMY_FIRE_SPRITE = "assets/sprite/enemy_fire.png"
ENEMY_DEATH_SPRITE_1 = "assets/sprite/enemy_death-1.png"
ENEMY_DEATH_SPRITE_2 = "assets/sprite/enemy_death-2.png"
ELITE_FIRE_SPRITE = "assets/sprite/elite_fire.png"
ELITE_DEATH_SPRITE_1 = "assets/sprite/elite_death-1.png"
ELITE_DEATH_SPRITE_2 = "assets/sprite/elite_death-2.png"
HEALTH_BOX_SPRITE = "assets/sprite/supplybox_health.png"
TNT_BOX_SPRITE = "assets/sprite/supplybox_tnt.png"
DAMAGED_BOX_SPRITE = "assets/sprite/supplybox_damaged.png"
EXPLOSION_BOX_SPRITE = "assets/sprite/supplybox_explosion.png"
DESTROYED_BOX_SPRITE = "assets/sprite/supplybox_destroyed.png"

SPRITES = (
    "assets/sprite/enemy-1.png",
    "assets/sprite/enemy-2.png",
    ENEMY_DEATH_SPRITE_1,
    ENEMY_DEATH_SPRITE_2,
    ENEMY_FIRE_SPRITE,
    HEALTH_BOX_SPRITE,
    TNT_BOX_SPRITE,
    DAMAGED_BOX_SPRITE,
    EXPLOSION_BOX_SPRITE,
    DESTROYED_BOX_SPRITE,
    "assets/sprite/elite-1.png",
    "assets/sprite/elite-2.png",
    ELITE_FIRE_SPRITE,
    ELITE_DEATH_SPRITE_1,
    ELITE_DEATH_SPRITE_2,
)


class EnemyKind(Enum):
    NORMAL = "normal"
    ELITE = "elite"

    @property
    def damage(self) -> int:
        """Seconds taken from the clock when this kind of enemy fires."""
        return 1 if self is EnemyKind.NORMAL else 3

    @property
    def kill_bonus(self) -> int:
        """Points for shooting this kind of enemy down."""
        return 1 if self is EnemyKind.NORMAL else 5

    @property
    def blast_bonus(self) -> int:
        """Points for this kind of enemy caught in a TNT blast."""
        return 3 if self is EnemyKind.NORMAL else 15


class EnemyPhase(Enum):
    ALIVE = "alive"
    FIRING = "firing"
    DYING = "dying"


class BoxKind(Enum):
    HEALTH = "health"
    TNT = "tnt"


class BoxPhase(Enum):
    ACTIVE = "active"
    DAMAGED = "damaged"
    EXPLODING = "exploding"
    DESTROYED = "destroyed"


@dataclass
class Enemy:
    """A target that fires back; ``phase_start`` is when firing or dying began."""

    x: float
    y: float
    texture_key: str
    kind: EnemyKind
    hitpoints: int
    spawn_time: float
    next_fire: float
    phase: EnemyPhase = EnemyPhase.ALIVE
    phase_start: float | None = None
    last_fired: float | None = None

    @classmethod
    def elite(cls, rng: random.Random, now: float) -> Enemy:
        """A fresh elite at a random spot, firing for the first time a second from now."""
        return cls(
            x=rng.uniform(0.0, 750.0),
            y=rng.uniform(0.0, 500.0),
            texture_key=f"assets/sprite/elite-{rng.randint(1, 2)}.png",
            kind=EnemyKind.ELITE,
            hitpoints=3,
            spawn_time=now,
            next_fire=now + FIRST_FIRE_DELAY,
        )

    @property
    def targetable(self) -> bool:
        return self.phase is not EnemyPhase.DYING

    def take_hit(self, now: float) -> bool:
        """Take one hit; return whether the enemy died from it."""
        if self.hitpoints > 1:
            self.hitpoints -= 1
            return False
        self.die(now)
        return True

    def die(self, now: float) -> None:
        self.phase = EnemyPhase.DYING
        self.phase_start = now

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x <= self.x + ENEMY_HIT_WIDTH
            and self.y <= y <= self.y + ENEMY_HIT_HEIGHT
        )


@dataclass
class SupplyBox:
    """A box that helps (health) or blows up (TNT) when shot."""

    x: float
    y: float
    kind: BoxKind
    spawn_time: float
    phase: BoxPhase = BoxPhase.ACTIVE
    phase_start: float | None = None

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x <= self.x + BOX_DISPLAY_WIDTH
            and self.y <= y <= self.y + BOX_DISPLAY_HEIGHT
        )


def _clamp_time(value: int) -> int:
    return min(max(value, 0), MAX_TIME)


class AdvancedGame:
    """State and rules of one advanced round; times are seconds on a monotonic clock."""

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
        self.supply_boxes: list[SupplyBox] = []
        self.next_enemy_spawn_time = now + self.rng.uniform(0.5, 1.0)
        self.next_elite_spawn_time = now + FIRST_ELITE_DELAY
        self.next_supply_time = now + self.rng.uniform(5.0, 8.0)
        self.game_time = 0.0
        self.last_update = now
        self.visible_time = START_TIME
        self.start_time = now
        self.intro_start = now
        self.show_intro = True
        self.game_over = False

    def tick(self, now: float) -> None:
        """Advance the round by one frame at time ``now``."""
        delta = max(now - self.last_update, 0.0)
        if not self.show_intro and not self.game_over:
            self.game_time += delta
        self.last_update = now

        self._advance(now)

        if int(self.game_time) > int(max(self.game_time - delta, 0.0)):
            self.visible_time = _clamp_time(self.visible_time - 1)

    def _advance(self, now: float) -> None:
        if self.show_intro:
            if now - self.intro_start >= INTRO_DURATION:
                self.start_time = now
                self.show_intro = False
            return

        if self.visible_time <= 0:
            self.game_over = True
        if self.game_over:
            return

        if now >= self.next_enemy_spawn_time:
            self.spawn_enemy(now)
            self.next_enemy_spawn_time = now + self.rng.uniform(0.5, 1.0)

        if now >= self.next_elite_spawn_time and self.game_time >= ELITE_UNLOCK:
            self.spawn_elite(now)

        if now >= self.next_supply_time and now - self.start_time >= SUPPLY_UNLOCK:
            self._spawn_supply(now)

        fire_events = [enemy.kind for enemy in self.enemies if self._update_enemy(enemy, now)]
        self.enemies = [enemy for enemy in self.enemies if self._enemy_shown(enemy, now)]
        self.supply_boxes = [box for box in self.supply_boxes if self._box_shown(box, now)]

        for kind in fire_events:
            self.play_sound(ELITE_FIRE_SOUND if kind is EnemyKind.ELITE else ENEMY_FIRE_SOUND)
            self.visible_time = _clamp_time(self.visible_time - kind.damage)

    def _spawn_supply(self, now: float) -> SupplyBox:
        kind = BoxKind.HEALTH if self.rng.random() < HEALTH_CHANCE else BoxKind.TNT
        box = SupplyBox(
            x=self.rng.uniform(0.0, 700.0),
            y=self.rng.uniform(0.0, 450.0),
            kind=kind,
            spawn_time=now,
        )
        self.supply_boxes.append(box)
        self.next_supply_time = now + self.rng.uniform(5.0, 8.0)
        return box

    def _update_enemy(self, enemy: Enemy, now: float) -> bool:
        """Move an enemy between aiming and firing; return whether it fired now."""
        if enemy.phase is EnemyPhase.ALIVE and now >= enemy.next_fire:
            enemy.phase = EnemyPhase.FIRING
            enemy.phase_start = now
            return True
        if enemy.phase is EnemyPhase.FIRING and now - enemy.phase_start >= FIRE_DURATION:
            enemy.last_fired = enemy.phase_start
            enemy.phase = EnemyPhase.ALIVE
            enemy.phase_start = None
            enemy.next_fire = now + self.rng.uniform(0.7, 1.2)
        return False

    @staticmethod
    def _enemy_shown(enemy: Enemy, now: float) -> bool:
        if enemy.phase is EnemyPhase.DYING:
            return now - enemy.phase_start < ANIMATION_DURATION
        return True

    @staticmethod
    def _box_shown(box: SupplyBox, now: float) -> bool:
        if box.phase is BoxPhase.ACTIVE:
            return now - box.spawn_time < BOX_LIFETIME
        return now - box.phase_start < ANIMATION_DURATION

    def shoot(self, x: float, y: float, now: float) -> bool:
        """Fire at ``(x, y)``; return whether an enemy or a box was hit."""
        if self.show_intro or self.game_over:
            return False
        self.play_sound(GUNSHOT_SOUND)
        hit_enemy = self._shoot_enemy(x, y, now)
        hit_box = self._shoot_box(x, y, now)
        return hit_enemy or hit_box

    def _shoot_enemy(self, x: float, y: float, now: float) -> bool:
        target = next(
            (enemy for enemy in self.enemies if enemy.contains(x, y) and enemy.targetable),
            None,
        )
        if target is None:
            return False
        if target.take_hit(now):
            self.score += target.kind.kill_bonus
            self._play_death_sound(target.kind)
        return True

    def _play_death_sound(self, kind: EnemyKind) -> None:
        chance = self.rng.random()
        if kind is EnemyKind.NORMAL:
            if chance < SPECIAL_DEATH_CHANCE:
                self.play_sound(ENEMY_SPECIAL_DEATH_SOUND)
            else:
                self.play_sound(f"assets/sound/enemy_death-{self.rng.randint(1, 3)}.wav")
        elif chance < SPECIAL_DEATH_CHANCE:
            self.play_sound(ELITE_SPECIAL_DEATH_SOUND)
        else:
            self.play_sound(f"assets/sound/elite_death-{self.rng.randint(1, 2)}.mp3")

    def _shoot_box(self, x: float, y: float, now: float) -> bool:
        box = next(
            (
                box
                for box in self.supply_boxes
                if box.phase is BoxPhase.ACTIVE and box.contains(x, y)
            ),
            None,
        )
        if box is None:
            return False
        box.phase_start = now
        if box.kind is BoxKind.HEALTH:
            box.phase = BoxPhase.DAMAGED
            self.visible_time = _clamp_time(self.visible_time + HEALTH_BONUS)
            self.play_sound(f"assets/sound/supplybox_damage-{self.rng.randint(1, 3)}.mp3")
        else:
            box.phase = BoxPhase.EXPLODING
            self.visible_time = _clamp_time(self.visible_time - TNT_PENALTY)
            special = self.rng.random() < SPECIAL_EXPLOSION_CHANCE
            self.play_sound(SPECIAL_EXPLOSION_SOUND if special else EXPLOSION_SOUND)
            self.explode_tnt(now)
        return True

    def spawn_enemy(self, now: float) -> Enemy:
        """Place a new normal enemy at a random spot and return it."""
        enemy = Enemy(
            x=self.rng.uniform(0.0, 750.0),
            y=self.rng.uniform(0.0, 500.0),
            texture_key=f"assets/sprite/enemy-{self.rng.randint(1, 2)}.png",
            kind=EnemyKind.NORMAL,
            hitpoints=1,
            spawn_time=now,
            next_fire=now + FIRST_FIRE_DELAY,
        )
        self.enemies.append(enemy)
        return enemy

    def spawn_elite(self, now: float) -> Enemy:
        """Place a new elite and schedule the next one four to eight seconds later."""
        elite = Enemy.elite(self.rng, now)
        self.enemies.append(elite)
        self.next_elite_spawn_time = now + self.rng.uniform(4.0, 8.0)
        return elite

    def explode_tnt(self, now: float) -> int:
        """Kill every enemy still standing; return the points gained."""
        gained = 0
        for enemy in self.enemies:
            if enemy.targetable:
                enemy.die(now)
                gained += enemy.kind.blast_bonus
        self.score += gained
        return gained

    def enemy_sprite(self, enemy: Enemy, now: float) -> str:
        """The image to draw for ``enemy`` at time ``now``."""
        elite = enemy.kind is EnemyKind.ELITE
        if enemy.phase is EnemyPhase.ALIVE:
            return enemy.texture_key
        if enemy.phase is EnemyPhase.FIRING:
            return ELITE_FIRE_SPRITE if elite else ENEMY_FIRE_SPRITE
        if now - enemy.phase_start < ANIMATION_FRAME:
            return ELITE_DEATH_SPRITE_1 if elite else ENEMY_DEATH_SPRITE_1
        return ELITE_DEATH_SPRITE_2 if elite else ENEMY_DEATH_SPRITE_2

    def box_sprite(self, supply: SupplyBox, now: float) -> str:
        """The image to draw for ``supply`` at time ``now``."""
        if supply.phase is BoxPhase.ACTIVE:
            return HEALTH_BOX_SPRITE if supply.kind is BoxKind.HEALTH else TNT_BOX_SPRITE
        early = supply.phase_start is not None and now - supply.phase_start < ANIMATION_FRAME
        if supply.kind is BoxKind.HEALTH and supply.phase is BoxPhase.DAMAGED and early:
            return DAMAGED_BOX_SPRITE
        if supply.kind is BoxKind.TNT and supply.phase is BoxPhase.EXPLODING and early:
            return EXPLOSION_BOX_SPRITE
        return DESTROYED_BOX_SPRITE