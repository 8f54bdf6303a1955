from afterburn.settings import (
    MAX_BULLET_TYPES,
    MAX_LEVELS,
    Settings,
    default_settings,
)


def test_level_kills_default():
    assert default_settings().level_kills == [50, 75, 100, 125, 150]


def test_table_sizes_match_each_other():
    settings = default_settings()
    assert len(settings.bullets) == len(settings.ammo_drops)
    assert len(settings.enemy_map) == len(settings.level_kills)
    assert all(len(row) == len(settings.enemies) for row in settings.enemy_map)
    assert len(settings.bullets) <= MAX_BULLET_TYPES
    assert len(settings.level_kills) <= MAX_LEVELS


def test_enemy_bullet_types_are_in_range():
    settings = default_settings()
    for enemy in settings.enemies:
        assert -1 <= enemy.bullet_type < len(settings.enemy_bullets)


def test_first_bullet_is_unlimited():
    bullet = default_settings().bullets[0]
    assert bullet.name == "Fire Fury"
    assert bullet.default_ammo == -1


def test_enemy_allowed_follows_map():
    settings = default_settings()
    assert settings.enemy_allowed(0, 0) is True
    assert settings.enemy_allowed(0, 1) is False
    assert all(settings.enemy_allowed(4, t) for t in range(len(settings.enemies)))


def test_enemy_allowed_out_of_range_is_false():
    settings = default_settings()
    assert settings.enemy_allowed(99, 0) is False
    assert settings.enemy_allowed(0, 99) is False
    assert settings.enemy_allowed(-1, 0) is False


def test_defaults_are_independent():
    first = default_settings()
    second = default_settings()
    first.level_kills.append(1)
    first.bullets[0].count = 0
    first.texts.menu[0] = "changed"
    assert second.level_kills == Settings().level_kills
    assert second.bullets[0].count == Settings().bullets[0].count
    assert second.texts.menu == Settings().texts.menu


def test_option_strings_format():
    texts = default_settings().texts
    assert texts.options[0] % texts.states[1] == "SFX : On"
    assert texts.options[3] % 255 == "Master Volume : 255"