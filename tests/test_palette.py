import random

import pygame
import pytest

from afterburn.palette import (
    ColorParams,
    game_over_color,
    grayscale,
    random_channel,
    star_colors,
)


class _FixedRng:
    def __init__(self, pick_last):
        self.pick_last = pick_last

    def randrange(self, n):
        return n - 1 if self.pick_last else 0


def test_random_channel_bounds():
    assert random_channel(_FixedRng(False)) == 0.5
    assert random_channel(_FixedRng(True)) == 1.0


@pytest.mark.parametrize("seed", range(20))
def test_random_channel_range(seed):
    value = random_channel(random.Random(seed))
    assert 0.5 <= value <= 1.0


def test_resolve_keeps_configured_values():
    params = ColorParams(0.4, -1.0, 0.55)
    red, green, blue = params.resolve(random.Random(1))
    assert red == 0.4
    assert blue == 0.55
    assert 0.5 <= green <= 1.0


def test_resolve_all_random_uses_rng():
    params = ColorParams(-1.0, -1.0, -1.0)
    assert params.resolve(_FixedRng(True)) == (1.0, 1.0, 1.0)


def test_grayscale_neutral_grey_unchanged():
    surface = pygame.Surface((2, 1), 0, 32)
    surface.fill((90, 90, 90))
    grayscale(surface, (1.0, 1.0, 1.0))
    assert tuple(surface.get_at((1, 0)))[:3] == (90, 90, 90)


def test_grayscale_tint_keeps_only_red():
    plain = pygame.Surface((1, 1), 0, 32)
    tinted = pygame.Surface((1, 1), 0, 32)
    plain.fill((30, 60, 90))
    tinted.fill((30, 60, 90))
    grayscale(plain, (1.0, 1.0, 1.0))
    grayscale(tinted, (1.0, 0.0, 0.0))
    r, g, b = tuple(plain.get_at((0, 0)))[:3]
    assert r == g == b
    assert tuple(tinted.get_at((0, 0)))[:3] == (r, 0, 0)


def test_star_colors_increase_with_layer():
    colors = star_colors((1.0, 0.5, 0.75), 8)
    assert len(colors) == 8
    reds = [c[0] for c in colors]
    assert reds == sorted(reds)
    assert reds[-1] == 255
    assert all(0 <= channel <= 255 for c in colors for channel in c)


def test_game_over_color_pulse():
    params = (1.0, 0.0, 0.0)
    assert game_over_color(256, params) == (0, 0, 0)
    assert game_over_color(0, params) == (255, 0, 0)
    for k in (1, 40, 200):
        assert game_over_color(256 + k, params) == game_over_color(256 - k, params)
        assert game_over_color(k, params) == game_over_color(k + 512, params)