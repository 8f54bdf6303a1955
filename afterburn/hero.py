"""The player's ship and level progression."""

from afterburn.collision import collide
from afterburn.settings import (
    BLINK_FREQUENCY,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHIP_SPEED,
)

_THRASH_Y = 6
_THRASH_X = 0.75


class Hero:
    """Position, health, lives and animation state of the ship."""

    def __init__(self, settings, width=SCREEN_WIDTH, height=SCREEN_HEIGHT, size=(32, 32)):
        self.settings = settings
        self.width = width
        self.height = height
        self.w, self.h = size
        self.lives = settings.max_lives
        self.reset()

    def reset(self):
        """Start a new life at the left edge with full health."""
        self.life = self.settings.max_life
        self.x = 0
        self.y = self.height // 2
        self.frame = 0
        self.blink_frame = 0
        self.blank = 0

    @property
    def rect(self):
        return (self.x, self.y, self.w, self.h)

    def move(self, dx, dy):
        """Move by one step in each given direction (-1, 0 or 1).

        Returns the (x, y) push to give the starfield when the ship is at an edge.
        """
        tx = ty = 0
        if dy < 0:
            if self.y > 0:
                self.y -= SHIP_SPEED
            else:
                ty += _THRASH_Y
        if dy > 0:
            if self.y < self.height - 1 - SHIP_SPEED - self.h:
                self.y += SHIP_SPEED
            else:
                ty -= _THRASH_Y
        if dx < 0:
            if self.x > 0:
                self.x -= SHIP_SPEED
            else:
                tx += _THRASH_X
        if dx > 0:
            if self.x < self.width - 1 - SHIP_SPEED - self.w:
                self.x += SHIP_SPEED
            else:
                tx -= _THRASH_X
        self.x %= self.width
        self.y %= self.height
        return (tx, ty)

    def hit_by_enemies(self, fleet):
        """Crash into touching enemies; return how many were hit."""
        hits = 0
        for enemy in fleet.enemies:
            if enemy.active and collide(enemy.x, enemy.y, enemy.w, enemy.h, *self.rect):
                self.blank = 1
                enemy.active = 0
                enemy.expl_frame = 0
                self.life = max(self.life - self.settings.enemies[enemy.type].damage, 0)
                hits += 1
        return hits

    def lose_life(self):
        """Spend a life if health is gone; return True if one was spent."""
        if self.life <= 0:
            self.life = 0
            self.lives -= 1
            return True
        return False

    def is_dead(self):
        """Return True when neither health nor lives remain."""
        return not self.life and not self.lives

    def next_frame(self, gen):
        """Return the sprite to show: ("blank", 0), ("blink", i) or ("ship", i)."""
        s = self.settings
        if self.blank > 0 and self.life > 0:
            self.blank += 1
            if self.blank == s.max_blank:
                self.blank = 0
            return ("blank", 0)
        if self.blank <= 0 and gen % BLINK_FREQUENCY < s.blink_frames * s.blink_param:
            index = self.blink_frame // s.blink_param
            self.blink_frame = (self.blink_frame + 1) % (s.blink_frames * s.blink_param)
            return ("blink", index)
        index = self.frame
        self.frame = (self.frame + 1) % s.ship_frames
        return ("ship", index)


def next_level(level, num_levels):
    """Return (new level, advanced, won) after the kills for *level* are reached."""
    if level < num_levels - 1:
        return level + 1, True, False
    if level == num_levels - 1:
        return level, False, True
    return level, False, False