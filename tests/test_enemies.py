import math
import random

import pytest

from afterburn.arsenal import EnemyGuns
from afterburn.enemies import Enemy, EnemyFleet, build_tables
from afterburn.settings import MOTION_HORIZONTAL, SCREEN_WIDTH, TABLE_SIZE, default_settings


def test_tables_accumulate_to_sine():
    sines, cosines = build_tables()
    assert len(sines) == TABLE_SIZE
    for k in (10, 90, 200):
        assert sum(sines[: k + 1]) == pytest.approx(math.sin(2 * math.pi * k / TABLE_SIZE))
        assert sum(cosines[: k + 1]) == pytest.approx(math.cos(2 * math.pi * k / TABLE_SIZE))


def test_spawn_places_enemies_offscreen():
    fleet = EnemyFleet(default_settings(), rng=random.Random(4))
    fleet.spawn(1, 0)
    assert all(e.x >= SCREEN_WIDTH for e in fleet.enemies)
    assert any(e.active for e in fleet.enemies)


def test_clear():
    fleet = EnemyFleet(default_settings(), rng=random.Random(4))
    fleet.spawn(1, 4)
    fleet.clear()
    assert all(not e.active and e.expl_frame == -1 for e in fleet.enemies)


def test_horizontal_displace():
    settings = default_settings()
    fleet = EnemyFleet(settings)
    enemy = Enemy(x=300, y=100.0, active=1, type=0, motion=MOTION_HORIZONTAL)
    fleet.displace(enemy, 5)
    assert enemy.x == int(300 - settings.enemies[0].x_speed)
    assert enemy.y == 100.0


def test_update_respawns_empty_wave():
    fleet = EnemyFleet(default_settings(), EnemyGuns(default_settings()), random.Random(2))
    fleet.clear()
    fleet.update(1)
    assert any(e.active for e in fleet.enemies)


def test_enemy_leaving_left_is_removed():
    fleet = EnemyFleet(default_settings(), rng=random.Random(2))
    fleet.spawn(1, 4)
    target = fleet.enemies[0]
    target.active = 1
    target.x = 1
    fleet.update(1)
    assert target.active == 0