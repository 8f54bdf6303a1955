import dataclasses

import pytest

from afterburn.inifile import IniError, format_ini, parse_ini, read_ini, write_ini
from afterburn.settings import BulletType, default_settings


def test_round_trip_of_defaults():
    text = format_ini(default_settings(), "AfterBurn")
    assert parse_ini(text) == default_settings()


def test_colour_lines_follow_source_values():
    lines = format_ini(default_settings(), "AfterBurn").splitlines()
    assert lines[2] == "255 255 210"
    assert lines[3] == "128 64 0"


def test_last_line_names_title():
    lines = format_ini(default_settings(), "My Game").splitlines()
    assert lines[-1] == "My Game INI"


def test_random_colour_params_written_as_minus_one():
    lines = format_ini(default_settings(), "T").splitlines()
    assert lines[-3] == "-1.000000 -1.000000 -1.000000"
    assert lines[-4] == "0.400000 0.600000 0.550000"


def test_negative_component_is_normalised():
    settings = default_settings()
    settings.base_color = (-0.25, 0.5, 0.5)
    parsed = parse_ini(format_ini(settings, "T"))
    assert parsed.base_color == (-1.0, 0.5, 0.5)


def test_spaces_in_texts_are_marked():
    lines = format_ini(default_settings(), "T").splitlines()
    assert "Fire|Fury" in lines
    assert "Game|Over" in lines
    assert not any(line == "Fire Fury" for line in lines)


def test_custom_settings_round_trip():
    settings = default_settings()
    settings.level_kills = [10, 20]
    settings.enemy_map = [[1, 0], [0, 1]]
    settings.enemies = settings.enemies[:2]
    settings.bullets = [
        BulletType("Big Gun", 1, 1, 5, 10, 0, 1, 0, -1, -1, 2.5, 30.0)
    ]
    settings.ammo_drops = settings.ammo_drops[:1]
    settings.play_music = False
    settings.texts.won = "All done here"
    parsed = parse_ini(format_ini(settings, "T"))
    assert parsed == settings


def test_truncated_text_raises():
    tokens = format_ini(default_settings(), "T").split()
    with pytest.raises(IniError):
        parse_ini(" ".join(tokens[: len(tokens) // 2]))


def test_empty_text_raises():
    with pytest.raises(IniError):
        parse_ini("")


def test_non_integer_raises():
    lines = format_ini(default_settings(), "T").splitlines()
    lines[2] = "a b c"
    with pytest.raises(IniError, match="integer"):
        parse_ini("\n".join(lines))


def test_too_many_levels_raises():
    lines = format_ini(default_settings(), "T").splitlines()
    assert lines[10] == str(len(default_settings().level_kills))
    lines[10] = "21"
    with pytest.raises(IniError, match="levels"):
        parse_ini("\n".join(lines))


def test_empty_text_field_cannot_be_written():
    settings = default_settings()
    settings.texts.paused = ""
    with pytest.raises(IniError):
        format_ini(settings, "T")


def test_missing_ammo_drops_cannot_be_written():
    settings = default_settings()
    settings.ammo_drops = []
    with pytest.raises(IniError):
        format_ini(settings, "T")


def test_write_and_read_file(tmp_path):
    path = tmp_path / "game.ini"
    settings = default_settings()
    settings.num_stars = 100
    write_ini(settings, path, "T")
    loaded = read_ini(path)
    assert loaded.paths.ini == str(path)
    expected = dataclasses.replace(
        settings, paths=dataclasses.replace(settings.paths, ini=str(path))
    )
    assert loaded == expected


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_ini(tmp_path / "absent.ini")