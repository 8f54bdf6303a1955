"""Colour parameters, the grey-tint screen effect and derived colours."""

import random
from dataclasses import dataclass

from afterburn.settings import COLOR_DIVISOR, LAYERS, NUM_COLORS


def _channel(value):
    return max(0, min(255, int(value)))


def random_channel(rng):
    """Return a random channel factor between 0.5 and 1.0."""
    half = COLOR_DIVISOR // 2
    return (rng.randrange(half + 1) + half) / COLOR_DIVISOR


@dataclass
class ColorParams:
    """Configured red, green and blue factors; a negative one means random."""

    red: float
    green: float
    blue: float

    def resolve(self, rng=None):
        """Return the three factors with every negative one replaced at random."""
        rng = rng or random.Random()
        return tuple(
            value if value >= 0 else random_channel(rng)
            for value in (self.red, self.green, self.blue)
        )


def grayscale(surface, params):
    """Turn *surface* to grey in place, tinted by the factors in *params*."""
    red, green, blue = params
    width, height = surface.get_size()
    surface.lock()
    try:
        for y in range(height):
            for x in range(width):
                r, g, b, a = surface.get_at((x, y))
                gray = (r + g + b) // 3
                surface.set_at(
                    (x, y),
                    (_channel(gray * red), _channel(gray * green), _channel(gray * blue), a),
                )
    finally:
        surface.unlock()
    return surface


def star_colors(params, layers=LAYERS):
    """Return one colour per star layer, brighter for nearer layers."""
    red, green, blue = params
    step = NUM_COLORS // layers
    return [
        (
            _channel((layer + 1) * step * red),
            _channel((layer + 1) * step * green),
            _channel((layer + 1) * step * blue),
        )
        for layer in range(layers)
    ]


def game_over_color(gen, params):
    """Return the pulsing colour of the end-of-game text for frame *gen*."""
    red, green, blue = params
    level = abs(gen % (NUM_COLORS * 2) - NUM_COLORS)
    return (_channel(level * red), _channel(level * green), _channel(level * blue))