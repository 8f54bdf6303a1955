from afterburn.enemies import Enemy, EnemyFleet
from afterburn.hero import Hero, next_level
from afterburn.settings import SHIP_SPEED, default_settings


def test_reset_and_lives():
    settings = default_settings()
    hero = Hero(settings)
    assert hero.life == settings.max_life
    assert hero.lives == settings.max_lives
    assert hero.x == 0


def test_move_inside_and_at_edge():
    hero = Hero(default_settings())
    start = hero.y
    assert hero.move(0, 1) == (0, 0)
    assert hero.y == start + SHIP_SPEED
    hero.y = 0
    tx, ty = hero.move(0, -1)
    assert ty > 0 and hero.y == 0
    tx, ty = hero.move(-1, 0)
    assert tx > 0 and hero.x == 0


def test_hit_by_enemies():
    settings = default_settings()
    hero = Hero(settings)
    fleet = EnemyFleet(settings)
    fleet.clear()
    fleet.enemies[0] = Enemy(x=hero.x, y=hero.y, active=1, type=1)
    assert hero.hit_by_enemies(fleet) == 1
    assert hero.life == settings.max_life - settings.enemies[1].damage
    assert fleet.enemies[0].expl_frame == 0 and hero.blank == 1


def test_lose_life_and_death():
    hero = Hero(default_settings())
    assert not hero.lose_life()
    hero.life = 0
    hero.lives = 1
    assert hero.lose_life()
    assert hero.is_dead()


def test_frames_stay_in_range():
    settings = default_settings()
    hero = Hero(settings)
    for gen in range(100):
        kind, index = hero.next_frame(gen)
        limit = settings.blink_frames if kind == "blink" else settings.ship_frames
        assert 0 <= index < limit


def test_next_level():
    assert next_level(0, 5) == (1, True, False)
    assert next_level(4, 5) == (4, False, True)