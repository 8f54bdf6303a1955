"""The scrolling background of stars."""

import random
from dataclasses import dataclass

from afterburn.settings import LAYERS, SCREEN_HEIGHT, SCREEN_WIDTH, STAR_SPEED


@dataclass
class Star:
    """One star; nearer layers move faster."""

    x: int
    y: int
    layer: int


class Starfield:
    """A parallax field of stars that scrolls left."""

    def __init__(self, count, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, rng=None):
        rng = rng or random.Random()
        self.width = width
        self.height = height
        self.stars = [
            Star(rng.randrange(width), rng.randrange(height), rng.randrange(LAYERS))
            for _ in range(count)
        ]

    def scroll(self):
        """Move every star left by its layer speed, wrapping round."""
        for star in self.stars:
            star.x = (star.x + self.width - STAR_SPEED * (star.layer + 1)) % self.width

    def thrash(self, dx, dy):
        """Shift every star by (dx, dy), wrapping round."""
        for star in self.stars:
            star.x = int(star.x + self.width + STAR_SPEED * dx) % self.width
            star.y = int(star.y + self.height + STAR_SPEED * dy) % self.height