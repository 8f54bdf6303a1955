"""Enemy ships: spawning, movement and firing."""

import math
import random
from dataclasses import dataclass

from afterburn.collision import collide
from afterburn.settings import (
    EXPLOSION_MUL,
    MOTION_HORIZONTAL,
    MOTION_LOOP,
    MOTION_SINE,
    MOTION_TYPES,
    NUM_ENEMIES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TABLE_SIZE,
)


def build_tables():
    """Return (sine, cosine) step tables: each entry is the change from the last."""
    sines = [0.0] + [math.sin(i * 2 * math.pi / TABLE_SIZE) for i in range(1, TABLE_SIZE)]
    cosines = [1.0] + [math.cos(i * 2 * math.pi / TABLE_SIZE) for i in range(1, TABLE_SIZE)]
    sin_steps = [sines[0]] + [b - a for a, b in zip(sines, sines[1:])]
    cos_steps = [cosines[0]] + [b - a for a, b in zip(cosines, cosines[1:])]
    return sin_steps, cos_steps


@dataclass
class Enemy:
    """One enemy ship slot; *active* holds its remaining lives."""

    x: int = 0
    y: float = 0.0
    active: float = 0
    type: int = 0
    expl_frame: int = -1
    motion: int = MOTION_HORIZONTAL
    spec: int = 0
    frame: int = 0
    w: int = 32
    h: int = 32

    @property
    def exploding(self):
        return 0 <= self.expl_frame < EXPLOSION_MUL * 10


class EnemyFleet:
    """The wave of enemies currently flying."""

    def __init__(self, settings, guns=None, rng=None, frame_size=None):
        self.settings = settings
        self.guns = guns
        self.rng = rng or random.Random()
        self.frame_size = frame_size or (lambda kind, frame: (32, 32))
        self.sin, self.cos = build_tables()
        self.enemies = [Enemy() for _ in range(NUM_ENEMIES)]
        self.level = 0

    def clear(self):
        """Deactivate every enemy."""
        for enemy in self.enemies:
            enemy.spec = 0
            enemy.active = 0
            enemy.expl_frame = -1

    def _animate(self, enemy, gen):
        kind = self.settings.enemies[enemy.type]
        span = kind.frame_mul * kind.frames
        enemy.frame = (gen % span) // kind.frame_mul if span > 0 else 0
        enemy.w, enemy.h = self.frame_size(enemy.type, enemy.frame)

    def spawn(self, gen, level):
        """Create a new wave for *level* just off the right edge."""
        self.level = level
        kinds = self.settings.enemies
        for index, enemy in enumerate(self.enemies):
            enemy.type = self.rng.randrange(len(kinds))
            kind = kinds[enemy.type]
            enemy.active = kind.lives
            enemy.motion = MOTION_HORIZONTAL
            enemy.spec = self.rng.randrange(TABLE_SIZE)
            if kind.moves:
                enemy.motion = (self.rng.randrange(MOTION_TYPES) + gen) % MOTION_TYPES
            self._animate(enemy, gen)
            enemy.x = SCREEN_WIDTH + self.rng.randrange(SCREEN_WIDTH)
            enemy.y = float(self.rng.randrange(max(SCREEN_HEIGHT - 1 - enemy.h, 1)))
            enemy.expl_frame = -1
            for other in self.enemies[:index]:
                if other.active and collide(
                    enemy.x, enemy.y, enemy.w, enemy.h, other.x, other.y, other.w, other.h
                ):
                    other.active = 0
                if other.active and not self.settings.enemy_allowed(level, other.type):
                    other.active = 0

    def _forward(self, enemy):
        enemy.x = int(enemy.x - self.settings.enemies[enemy.type].x_speed)

    def displace(self, enemy, gen):
        """Move *enemy* one step along its motion pattern."""
        kind = self.settings.enemies[enemy.type]
        phase = (gen + enemy.spec) % TABLE_SIZE
        self._forward(enemy)
        if enemy.motion == MOTION_LOOP:
            enemy.x = int(enemy.x - kind.x_speed * self.cos[phase])
            enemy.y -= self.sin[phase] * kind.y_speed
        elif enemy.motion == MOTION_SINE:
            enemy.y -= self.sin[phase] * kind.y_speed

    def update(self, gen):
        """Move the wave, replace it when gone, and fire; return the shots fired."""
        idle = 0
        for enemy in self.enemies:
            self._animate(enemy, gen)
            if enemy.active:
                self.displace(enemy, gen)
            else:
                idle += 1
                if enemy.exploding:
                    self._forward(enemy)
            if enemy.x < 0:
                enemy.active = 0
                enemy.expl_frame = -1
        if idle == len(self.enemies):
            self.spawn(gen, self.level)
        shots = 0
        if self.guns is not None:
            for enemy in self.enemies:
                if enemy.active and self.guns.fire(
                    gen, enemy.x, int(enemy.y), enemy.h,
                    self.settings.enemies[enemy.type].bullet_type,
                ):
                    shots += 1
        return shots