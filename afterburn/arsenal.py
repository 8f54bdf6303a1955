"""Hero and enemy bullets, collectibles and the score they earn."""

import random
from dataclasses import dataclass

from afterburn.collision import collide
from afterburn.settings import (
    BULLET_POWER_INCREMENT,
    COLLECTIBLE_KINDS,
    DOWN,
    DROP_PARAM1,
    DROP_PARAM2,
    DROP_PARAM3,
    GEN_MULT,
    HORIZONTAL,
    JAGGED,
    KIND_AMMO,
    LIFE_GIVING_SCORE,
    MAX_BULLETS,
    MAX_COLLECTIBLES,
    MAX_ENEMY_BULLETS,
    MAX_SCORE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPREAD,
    UP,
    V_SHAPED,
    VERTICAL,
)


def _default_size(*_):
    return (8, 8)


def _frame(gen, frames, mul):
    span = frames * mul
    if span <= 0 or mul <= 0:
        return 0
    return (gen % span) // mul


def _on_screen(x, y, w, h, width, height):
    return collide(x, y, w, h, 0, 0, width - 1, height - 1)


@dataclass
class Bullet:
    """One hero bullet slot."""

    x: int = 0
    y: int = 0
    active: bool = False
    type: int = 0
    spec1: int = 0
    spec2: int = 0
    frame: int = 0
    w: int = 8
    h: int = 8


class HeroGuns:
    """The hero's bullets, ammunition and bullet power."""

    def __init__(self, settings, rng=None, frame_size=None):
        self.settings = settings
        self.rng = rng or random.Random()
        self.frame_size = frame_size or _default_size
        self.bullets = [Bullet() for _ in range(MAX_BULLETS)]
        self.current = 0
        self.ammo = []
        self.damage = []
        self.reset()

    def reset(self):
        """Restore default ammunition and damage and select the first gun."""
        self.current = 0
        self.ammo = [b.default_ammo for b in self.settings.bullets]
        self.damage = [b.damage for b in self.settings.bullets]

    def clear(self):
        """Deactivate every bullet."""
        for bullet in self.bullets:
            bullet.active = False
            bullet.type = 0

    def clip(self):
        """Cap ammunition and damage at their maxima."""
        for index, kind in enumerate(self.settings.bullets):
            if index and self.ammo[index] > kind.max_ammo:
                self.ammo[index] = kind.max_ammo
            if self.damage[index] > kind.max_damage:
                self.damage[index] = kind.max_damage

    def _check_current(self):
        if not 0 <= self.current < len(self.settings.bullets):
            self.current = 0

    def select(self, number):
        """Choose gun *number* directly; an unknown one selects the first."""
        self.current = number
        self._check_current()

    def cycle(self, step):
        """Move the selection *step* guns forward or back, wrapping round."""
        count = len(self.settings.bullets)
        self.current = (self.current + step) % count if count else 0
        self._check_current()

    def _slots(self):
        count = min(self.settings.bullets[self.current].count, MAX_BULLETS)
        return self.bullets[:count]

    def _set_size(self, bullet):
        bullet.w, bullet.h = self.frame_size(bullet.type, bullet.frame)

    def fire(self, gen, x, y):
        """Launch one bullet from (x, y) if a slot is ready; return True if fired."""
        kinds = self.settings.bullets
        for bullet in self._slots():
            if bullet.active or (gen + 1) % kinds[bullet.type].limit:
                continue
            if bullet.type and not self.ammo[bullet.type]:
                continue
            if bullet.type:
                self.ammo[bullet.type] -= 1
                if self.ammo[bullet.type] < 0:
                    self.ammo[bullet.type] = 0
                    bullet.type = 0
                    self.current = 0
            bullet.x, bullet.y = int(x), int(y)
            bullet.type = 0
            if self.ammo[self.current]:
                bullet.type = self.current
            else:
                self.current = 0
            bullet.active = True
            kind = kinds[bullet.type]
            bullet.spec1 = kind.direction
            if bullet.spec1:
                bullet.spec2 = (gen % (SPREAD * kind.limit)) // kind.limit
            span = kind.frames * kind.frame_mul
            offset = self.rng.randrange(span) if span > 0 else 0
            bullet.frame = ((gen + offset) // max(kind.frame_mul, 1)) % max(kind.frames, 1)
            self._set_size(bullet)
            return True
        return False

    def animate(self, gen, width, height):
        """Advance animation frames and drop bullets that left the screen."""
        kinds = self.settings.bullets
        for bullet in self._slots():
            if bullet.active:
                kind = kinds[bullet.type]
                bullet.frame = _frame(gen, kind.frames, kind.frame_mul)
                self._set_size(bullet)
                if not _on_screen(bullet.x, bullet.y, bullet.w, bullet.h, width, height):
                    bullet.active = False
        self.clip()
        if not self.ammo[self.current]:
            self.current = 0

    def move(self, gen):
        """Move every active bullet along its pattern."""
        kinds = self.settings.bullets
        sign = 2 * (gen % 2) - 1
        for bullet in self._slots():
            if not bullet.active:
                continue
            kind = kinds[bullet.type]
            vertical = 0
            if bullet.spec2 == DOWN:
                vertical = kind.y_speed
            elif bullet.spec2 == UP:
                vertical = -kind.y_speed
            if bullet.spec1 == HORIZONTAL:
                bullet.x += kind.x_speed
            elif bullet.spec1 == V_SHAPED:
                bullet.x += kind.x_speed
                bullet.y += vertical
            elif bullet.spec1 == VERTICAL:
                bullet.y += vertical
            elif bullet.spec1 == JAGGED:
                bullet.x += kind.x_speed
                bullet.y += sign * vertical


@dataclass
class EnemyBullet:
    """One enemy bullet slot."""

    x: int = 0
    y: int = 0
    type: int = 0
    active: bool = False
    frame: int = 0
    w: int = 8
    h: int = 8


class EnemyGuns:
    """Every bullet fired by enemies."""

    def __init__(self, settings, frame_size=None):
        self.settings = settings
        self.frame_size = frame_size or _default_size
        self.bullets = [EnemyBullet() for _ in range(MAX_ENEMY_BULLETS)]
        self.current = -1

    def clear(self):
        """Deactivate every bullet."""
        for bullet in self.bullets:
            bullet.active = False
            bullet.type = 0
        self.current = -1

    def fire(self, gen, x, y, height, bullet_type):
        """Fire from an enemy at (x, y) of *height*; return True if a shot left."""
        self.current = -1
        if bullet_type < 0:
            return False
        kind = self.settings.enemy_bullets[bullet_type]
        if (gen + 1) % kind.limit:
            return False
        for bullet in self.bullets:
            if bullet.active:
                continue
            self.current = bullet.type = bullet_type
            bullet.frame = _frame(gen, kind.frames, kind.frame_mul)
            bullet.w, bullet.h = self.frame_size(bullet.type, bullet.frame)
            bullet.x = int(x) - bullet.w
            bullet.y = int(y + height // 2)
            if _on_screen(bullet.x, bullet.y, bullet.w, bullet.h, SCREEN_WIDTH, SCREEN_HEIGHT):
                bullet.active = True
                return True
        return False

    def animate(self, gen, width, height):
        """Advance animation frames and drop bullets that left the screen."""
        for bullet in self.bullets:
            if bullet.active:
                kind = self.settings.enemy_bullets[bullet.type]
                bullet.frame = _frame(gen, kind.frames, kind.frame_mul)
                bullet.w, bullet.h = self.frame_size(bullet.type, bullet.frame)
                if not _on_screen(bullet.x, bullet.y, bullet.w, bullet.h, width, height):
                    bullet.active = False

    def move(self):
        """Move every active bullet left by its speed."""
        for bullet in self.bullets:
            if bullet.active:
                bullet.x -= self.settings.enemy_bullets[bullet.type].speed

    def hits(self, x, y, w, h):
        """Remove bullets striking the rectangle and return their total damage."""
        total = 0.0
        for bullet in self.bullets:
            if bullet.active and collide(bullet.x, bullet.y, bullet.w, bullet.h, x, y, w, h):
                bullet.active = False
                total += self.settings.enemy_bullets[bullet.type].damage
        return total


class Scoreboard:
    """Score keeping; life and lives bonuses go to *hero*."""

    def __init__(self, settings, hero):
        self.settings = settings
        self.hero = hero
        self.score = 0
        self.scored = False

    def add_enemy(self, damage):
        """Score a destroyed enemy that deals *damage*."""
        self.score = min(self.score + GEN_MULT * damage, MAX_SCORE)
        self.scored = True
        self.check_extra_life()

    def check_extra_life(self):
        """Trade a large score for an extra life; return True if one was given."""
        if self.hero.lives < self.settings.max_pos_lives and self.score > LIFE_GIVING_SCORE:
            self.hero.lives += 1
            self.score = 0
            return True
        return False

    def collect(self, item, guns):
        """Apply collectible *item*; return True if it was still there to take."""
        if not item.active:
            return False
        if item.kind == KIND_AMMO:
            if item.spec:
                guns.ammo[item.spec] += self.settings.ammo_drops[item.spec].ammo
            else:
                guns.damage[item.spec] += BULLET_POWER_INCREMENT
            self.score += self.settings.ammo_drops[item.spec].score
        else:
            bonus = self.settings.bonus_drops[item.spec]
            self.hero.life = min(self.hero.life + bonus.life_bonus, self.settings.max_life)
            self.hero.lives = min(self.hero.lives + bonus.lives_bonus, self.settings.max_pos_lives)
            self.score += bonus.score
        item.active = 0
        self.scored = True
        return True


@dataclass
class Collectible:
    """A floating pick-up; *active* counts the frames it has left."""

    x: int = 0
    y: int = 0
    active: int = 0
    kind: int = 0
    spec: int = 0
    frame: int = 0
    w: int = 8
    h: int = 8


class Collectibles:
    """Every collectible on screen."""

    def __init__(self, settings, scoreboard, guns, rng=None, frame_size=None):
        self.settings = settings
        self.scoreboard = scoreboard
        self.guns = guns
        self.rng = rng or random.Random()
        self.frame_size = frame_size or _default_size
        self.items = [Collectible() for _ in range(MAX_COLLECTIBLES)]

    def clear(self):
        """Remove every collectible."""
        for item in self.items:
            item.active = 0

    def _animate(self, item, gen):
        if item.kind == KIND_AMMO:
            drop = self.settings.ammo_drops[item.spec]
        else:
            drop = self.settings.bonus_drops[item.spec]
        item.frame = _frame(gen, drop.frames, drop.frame_mul)
        item.w, item.h = self.frame_size(item.kind, item.spec, item.frame)

    def spawn(self, gen, x, y, hero_rect):
        """Place a random collectible at (x, y) if it overlaps nothing; return it."""
        for item in self.items:
            if item.active:
                continue
            item.x, item.y = int(x), int(y)
            item.kind = self.rng.randrange(COLLECTIBLE_KINDS)
            if item.kind == KIND_AMMO:
                item.spec = self.rng.randrange(len(self.settings.bullets))
                item.active = self.settings.ammo_drops[item.spec].life
            else:
                item.spec = self.rng.randrange(len(self.settings.bonus_drops))
                item.active = self.settings.bonus_drops[item.spec].life
            self._animate(item, gen)
            placed = True
            for other in self.items:
                if other is not item and other.active and collide(
                    item.x, item.y, item.w, item.h, other.x, other.y, other.w, other.h
                ):
                    item.active = 0
                    placed = False
            if collide(item.x, item.y, item.w, item.h, *hero_rect):
                item.active = 0
                placed = False
            if placed:
                return item
        return None

    def maybe_drop(self, gen, enemy_lives, x, y, hero_rect):
        """Perhaps leave a collectible where an enemy of *enemy_lives* died."""
        if gen % DROP_PARAM1 + enemy_lives > DROP_PARAM2:
            return self.spawn(gen, x, y, hero_rect)
        return None

    def update(self, gen, hero_rect, width, height):
        """Age, animate and collect items; return the items the hero picked up."""
        if gen % DROP_PARAM1 + self.rng.randrange(DROP_PARAM1) > DROP_PARAM3:
            self.spawn(gen, self.rng.randrange(width), self.rng.randrange(height), hero_rect)
        taken = []
        for item in self.items:
            if item.active:
                self._animate(item, gen)
                if not _on_screen(item.x, item.y, item.w, item.h, width, height):
                    item.active = 0
                elif collide(item.x, item.y, item.w, item.h, *hero_rect):
                    if self.scoreboard.collect(item, self.guns):
                        taken.append(item)
            item.active = max(item.active - 1, 0)
        return taken