"""The playing field: sound control, screenshots, the status line and the game loop."""

import itertools
import os
import random
from dataclasses import dataclass

import pygame

from afterburn.arsenal import Collectibles, EnemyGuns, HeroGuns, Scoreboard
from afterburn.collision import collide
from afterburn.enemies import EnemyFleet
from afterburn.hero import Hero, next_level
from afterburn.palette import ColorParams, game_over_color, grayscale, star_colors
from afterburn.paths import file_exists
from afterburn.settings import (
    DEAD_LIFE,
    EXPLOSION_MUL,
    FONT_SIZE,
    FRAME_DELAY_MS,
    HORIZ_SPACING,
    MAX_BULLETS,
    PAUSE_MS,
    SCORE_FORMAT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SCREENSHOT_DELAY_MS,
    VERT_SPACING,
)
from afterburn.starfield import Starfield

_SAVE_FORMATS = {".bmp", ".tga", ".png", ".jpg", ".jpeg"}


class SoundBoard:
    """Sound effects and music, honouring the on/off switches."""

    def __init__(self, samples=None, enabled=True, music_ok=True,
                 play_sounds=True, play_music=True, log=None):
        self.samples = dict(samples or {})
        self.enabled = enabled
        self.music_ok = music_ok
        self.play_sounds = play_sounds
        self.play_music_enabled = play_music
        self.log = log
        self.track = None
        self.modified = False

    def _log(self, message):
        if self.log is not None:
            self.log.write(message)

    def toggle_sounds(self):
        """Switch effects on or off; return the new state."""
        if not self.enabled:
            return self.play_sounds
        self.play_sounds = not self.play_sounds
        if self.play_sounds:
            self._log("Switched Sounds On ")
        else:
            self._log("Switched Sounds Off ")
            for name in self.samples:
                self.stop(name)
        self.modified = True
        return self.play_sounds

    def toggle_music(self):
        """Switch music on or off; return the new state."""
        if not self.enabled or not self.music_ok:
            return self.play_music_enabled
        self.play_music_enabled = not self.play_music_enabled
        if self.play_music_enabled:
            self._log("Switched Music On ")
            self.play_music(self.track)
        else:
            self._log("Switched Music Off ")
            self.stop_music()
        self.modified = True
        return self.play_music_enabled

    def play(self, name):
        """Restart the effect *name*; return True if it was played."""
        if not self.enabled:
            return False
        self.stop(name)
        sample = self.samples.get(name)
        if self.play_sounds and sample is not None:
            sample.play()
            return True
        return False

    def stop(self, name):
        """Stop the effect *name* if it is known."""
        if not self.enabled:
            return
        sample = self.samples.get(name)
        if sample is not None:
            sample.stop()

    def play_music(self, track):
        """Make *track* current and play it if music is on; return True if started."""
        if not self.enabled or not self.music_ok:
            return False
        self.stop_music()
        self.track = track
        if self.play_music_enabled and track is not None:
            track.play()
            return True
        return False

    def stop_music(self):
        """Stop the current track."""
        if not self.enabled or not self.music_ok:
            return
        if self.track is not None:
            self.track.stop()


def next_screenshot_name(pattern, exists=file_exists):
    """Return the first name from *pattern* numbered from 1 that does not exist."""
    for number in itertools.count(1):
        name = pattern % number
        if not exists(name):
            return name


def save_screenshot(surface, pattern):
    """Save *surface* under the next free screenshot name and return that name."""
    root, ext = os.path.splitext(pattern)
    if ext.lower() not in _SAVE_FORMATS:
        pattern = root + ".bmp"
    name = next_screenshot_name(pattern)
    pygame.image.save(surface, name)
    return name


def ammo_label(name, ammo, infinite_text, bullet_type):
    """Return the status-line text describing the selected gun."""
    if not bullet_type:
        return f"{name} ({infinite_text})"
    return "%s (%3d)" % (name, ammo)


@dataclass
class GameResult:
    """How a game ended, for the high-score table."""

    win: bool
    level: int
    lives: int
    score: int
    life: int
    scored: bool


class Game:
    """One game from the first level until the end."""

    def __init__(self, settings, screen, assets=None, sounds=None, log=None,
                 rng=None, interactive=True, on_options=None):
        self.settings = settings
        self.screen = screen
        self.assets = assets
        self.sounds = sounds or SoundBoard(enabled=False)
        self.log = log
        self.rng = rng or random.Random()
        self.interactive = interactive
        self.on_options = on_options
        self.width, self.height = SCREEN_WIDTH, SCREEN_HEIGHT

        a = assets
        bullet_size = (lambda k, f: a.bullets[k][f].get_size()) if a else None
        ebullet_size = (lambda k, f: a.enemy_bullets[k][f].get_size()) if a else None
        enemy_size = (lambda k, f: a.enemies[k][f].get_size()) if a else None

        def item_size(kind, spec, frame):
            table = a.ammo if kind == 0 else a.others
            return table[spec][frame].get_size()

        hero_size = a.ship[0].get_size() if a and a.ship else (32, 32)
        self.hero = Hero(settings, self.width, self.height, hero_size)
        self.guns = HeroGuns(settings, self.rng, bullet_size)
        self.eguns = EnemyGuns(settings, ebullet_size)
        self.fleet = EnemyFleet(settings, self.eguns, self.rng, enemy_size)
        self.scoreboard = Scoreboard(settings, self.hero)
        self.collectibles = Collectibles(
            settings, self.scoreboard, self.guns, self.rng, item_size if a else None
        )
        self.starfield = Starfield(settings.num_stars, self.width, self.height, self.rng)
        self.base_params = ColorParams(*settings.base_color).resolve(self.rng)
        self.star_params = ColorParams(*settings.star_color).resolve(self.rng)
        self.over_params = ColorParams(*settings.game_over_color).resolve(self.rng)
        self.star_palette = star_colors(self.star_params)
        self.gen = 1
        self.kills = 0
        self.level = 0
        self.win = False
        self.done = False
        self.quit_requested = False
        self._new_game()
        self._new_round()

    # -- setup -----------------------------------------------------------

    def _level_track(self):
        if self.assets and self.level < len(self.assets.music):
            return self.assets.music[self.level]
        return None

    def _new_game(self):
        self.scoreboard.score = 0
        self.scoreboard.scored = False
        self.level = 0
        self.win = False
        self.hero.lives = self.settings.max_lives
        self.guns.reset()
        self.sounds.play_music(self._level_track())

    def _new_round(self):
        self.gen = 1
        self.hero.reset()
        self.done = False
        self.quit_requested = False
        self.kills = 0
        self.collectibles.clear()
        self.guns.clear()
        self.eguns.clear()
        self.fleet.clear()
        self.fleet.spawn(self.gen, self.level)

    # -- rules -----------------------------------------------------------

    def _bullets_vs_enemies(self):
        count = min(self.settings.bullets[self.guns.current].count, MAX_BULLETS)
        for bullet in self.guns.bullets[:count]:
            if not bullet.active:
                continue
            for enemy in self.fleet.enemies:
                if not enemy.active or not collide(
                    bullet.x, bullet.y, bullet.w, bullet.h, enemy.x, enemy.y, enemy.w, enemy.h
                ):
                    continue
                bullet.active = False
                enemy.active -= self.guns.damage[bullet.type]
                if enemy.active <= 0:
                    kind = self.settings.enemies[enemy.type]
                    self.kills += kind.lives
                    enemy.active = 0
                    enemy.expl_frame = 0
                    self.scoreboard.add_enemy(kind.damage)
                    self.collectibles.maybe_drop(
                        self.gen, kind.lives, enemy.x + enemy.w // 2,
                        int(enemy.y) + enemy.h // 2, self.hero.rect,
                    )

    def _enemy_bullets_vs_hero(self):
        damage = self.eguns.hits(*self.hero.rect)
        if damage:
            self.hero.blank = 1
            self.sounds.play("explode")
            self.hero.life = int(self.hero.life - damage)
            if self.hero.life <= 0:
                self.hero.life = DEAD_LIFE

    def _check_new(self):
        if self.quit_requested or self.win:
            self.done = True
        if not self.hero.life and self.hero.lives:
            self._restart_message()
            self._new_round()

    def _check_level(self):
        kills = self.settings.level_kills
        if self.level >= len(kills) or self.kills <= kills[self.level]:
            return
        level, advanced, won = next_level(self.level, len(kills))
        if won:
            self.win = True
            self.done = True
        if advanced:
            self.level = level
            self._message(self.settings.texts.level_clear)
            self.sounds.stop_music()
            self.kills = 0
            self._new_round()
            self.sounds.play_music(self._level_track())

    def update(self):
        """Advance the world by one frame and apply the rules between frames."""
        if not self.done:
            self.starfield.scroll()
            self.guns.animate(self.gen, self.width, self.height)
            if self.fleet.update(self.gen):
                self.sounds.play(f"eshoot{self.eguns.current}")
            self.eguns.animate(self.gen, self.width, self.height)
            if self.collectibles.update(self.gen, self.hero.rect, self.width, self.height):
                self.sounds.play("collect")
            self._bullets_vs_enemies()
            self.hero.hit_by_enemies(self.fleet)
            self._enemy_bullets_vs_hero()
        self.hero.lose_life()
        self._check_new()
        self._check_level()
        self.gen += 1
        if self.hero.is_dead():
            self.done = True

    # -- drawing ---------------------------------------------------------

    def _blit(self, image, x, y, w, h, color):
        if image is not None:
            self.screen.blit(image, (int(x), int(y)))
        else:
            pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), w, h))

    def _text(self, text, x, y, color, centre=False):
        if not self.assets or self.assets.font is None:
            return
        image = self.assets.font.render(text, True, color)
        if centre:
            x -= image.get_width() // 2
        self.screen.blit(image, (int(x), int(y)))

    def _draw_stats(self):
        if not self.settings.show_stats or not self.assets:
            return
        icons = self.assets.icons
        color = self.settings.active_color
        medi, life_icon, sco, lev = icons[0], icons[1], icons[2], icons[3]
        score_y = self.height - 1 - FONT_SIZE
        self.screen.blit(medi, (0, 0))
        self.screen.blit(sco, (0, score_y))
        self.screen.blit(lev, (self.width // 2, 0))
        lives_y = medi.get_width() + VERT_SPACING
        for index in range(max(self.hero.lives, 0)):
            self.screen.blit(life_icon, (index * life_icon.get_width(), lives_y))
        life = "%3u" % self.hero.life if self.hero.life > 0 else self.settings.texts.none
        self._text(life, medi.get_width() + HORIZ_SPACING, 0, color)
        self._text(SCORE_FORMAT % self.scoreboard.score,
                   sco.get_width() + HORIZ_SPACING, score_y, color)
        self._text(str(self.level), lev.get_width() + self.width // 2 + HORIZ_SPACING, 0, color)
        current = self.guns.current
        self._text(
            ammo_label(self.settings.bullets[current].name, self.guns.ammo[current],
                       self.settings.texts.infinite, current),
            self.width // 2, score_y, color,
        )

    def draw(self):
        """Render the frame and move the bullets that were drawn."""
        a = self.assets
        self.screen.fill((0, 0, 0))
        for star in self.starfield.stars:
            self.screen.set_at((star.x, star.y), self.rng.choice(self.star_palette))

        count = min(self.settings.bullets[self.guns.current].count, MAX_BULLETS)
        for bullet in self.guns.bullets[:count]:
            if bullet.active:
                image = a.bullets[bullet.type][bullet.frame] if a else None
                self._blit(image, bullet.x, bullet.y, bullet.w, bullet.h, (255, 255, 0))
        self.guns.move(self.gen)

        explode_span = EXPLOSION_MUL * self.settings.num_explode
        for enemy in self.fleet.enemies:
            if enemy.active:
                image = a.enemies[enemy.type][enemy.frame] if a else None
                self._blit(image, enemy.x, enemy.y, enemy.w, enemy.h, (200, 0, 0))
                continue
            if 0 <= enemy.expl_frame < explode_span:
                if enemy.expl_frame == 0:
                    self.sounds.play("explode")
                index = (enemy.expl_frame // EXPLOSION_MUL) % self.settings.num_explode
                image = a.explosions[index] if a else None
                self._blit(image, enemy.x, enemy.y, enemy.w, enemy.h, (255, 128, 0))
            if enemy.expl_frame >= 0:
                enemy.expl_frame += 1

        for bullet in self.eguns.bullets:
            if bullet.active:
                image = a.enemy_bullets[bullet.type][bullet.frame] if a else None
                self._blit(image, bullet.x, bullet.y, bullet.w, bullet.h, (255, 0, 255))
        self.eguns.move()

        kind, index = self.hero.next_frame(self.gen)
        image = None
        if a:
            image = {"blank": lambda: a.blank, "blink": lambda: a.blink[index],
                     "ship": lambda: a.ship[index]}[kind]()
        if kind != "blank" or a:
            self._blit(image, self.hero.x, self.hero.y, self.hero.w, self.hero.h, (0, 200, 255))

        for item in self.collectibles.items:
            if item.active:
                image = None
                if a:
                    image = (a.ammo if item.kind == 0 else a.others)[item.spec][item.frame]
                self._blit(image, item.x, item.y, item.w, item.h, (0, 255, 0))

        self._draw_stats()

    # -- interaction -----------------------------------------------------

    def _present(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()
        pygame.time.wait(FRAME_DELAY_MS)

    def _screenshot_or_delay(self, key):
        if key == pygame.K_PRINT:
            pygame.time.wait(SCREENSHOT_DELAY_MS)
        elif key == pygame.K_F12:
            name = save_screenshot(self.screen, self.settings.paths.shot)
            if self.log is not None:
                self.log.write(f"Screenshot written to : {name}")

    def _wait_key(self, accept=None):
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN:
                self._screenshot_or_delay(event.key)
                if accept is None or event.key in accept:
                    return event.key

    def _message(self, text, color=None):
        if not self.interactive:
            return
        self._text(text, self.width // 2, self.height // 2 - FONT_SIZE,
                   color or self.settings.active_color, centre=True)
        self._present()
        self._wait_key()
        pygame.time.wait(PAUSE_MS)

    def _restart_message(self):
        if not self.interactive:
            return
        grayscale(self.screen, self.base_params)
        self.sounds.play("died")
        self._message(self.settings.texts.press_key)
        self.sounds.stop("died")

    def _pause(self, ask_quit):
        if not self.interactive:
            return
        texts = self.settings.texts
        self._text(texts.quit if ask_quit else texts.paused, self.width // 2,
                   self.height // 2 - FONT_SIZE, self.settings.active_color, centre=True)
        self._present()
        if ask_quit:
            key = self._wait_key({pygame.K_y, pygame.K_n, pygame.K_ESCAPE})
            if key in (pygame.K_y, None):
                self.quit_requested = True
                return
        else:
            self._wait_key({pygame.K_p})
        pygame.time.wait(PAUSE_MS)

    def _fire(self):
        if self.guns.fire(self.gen, self.hero.x + self.hero.w, self.hero.y + self.hero.h // 2):
            self.sounds.play(f"shoot{self.guns.current}")

    def _handle_input(self):
        digits = {getattr(pygame, f"K_{n}"): (n - 1) % 10 for n in range(10)}
        digits.update({getattr(pygame, f"K_KP{n}"): (n - 1) % 10 for n in range(10)})
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                key = event.key
                if key == pygame.K_ESCAPE:
                    self._pause(True)
                elif key == pygame.K_m:
                    self.sounds.toggle_music()
                elif key == pygame.K_s:
                    self.sounds.toggle_sounds()
                elif key == pygame.K_p:
                    self._pause(False)
                elif key == pygame.K_o and self.on_options is not None:
                    self.on_options()
                elif key == pygame.K_t:
                    self.settings.show_stats = not self.settings.show_stats
                elif key in digits:
                    self.guns.select(digits[key])
                elif key == pygame.K_q:
                    self.guns.cycle(-1)
                elif key == pygame.K_w:
                    self.guns.cycle(1)
                else:
                    self._screenshot_or_delay(key)
        pressed = pygame.key.get_pressed()
        if pressed[pygame.K_SPACE]:
            self._fire()
        dx = int(pressed[pygame.K_RIGHT]) - int(pressed[pygame.K_LEFT])
        dy = int(pressed[pygame.K_DOWN]) - int(pressed[pygame.K_UP])
        if dx or dy:
            push = self.hero.move(dx, dy)
            if push != (0, 0):
                self.starfield.thrash(*push)
        if self.hero.is_dead():
            self.done = True

    def _game_over(self):
        grayscale(self.screen, self.base_params)
        self.sounds.stop_music()
        name = "won" if self.win else "died"
        text = self.settings.texts.won if self.win else self.settings.texts.game_over
        self.sounds.play(name)
        if self.interactive:
            pygame.event.clear()
            gen = self.gen
            while True:
                self._text(text, self.width // 2, self.height // 2 - FONT_SIZE,
                           game_over_color(gen, self.over_params), centre=True)
                self._present()
                gen += 1
                if any(e.type in (pygame.KEYDOWN, pygame.QUIT) for e in pygame.event.get()):
                    break
            pygame.time.wait(PAUSE_MS)
        self.sounds.stop(name)
        if self.assets:
            self.sounds.play_music(self.assets.menu_music)

    def run(self):
        """Play a whole game and return how it ended."""
        self._new_game()
        self._new_round()
        while not self.done:
            self.update()
            self.draw()
            self._present()
            self._handle_input()
        self._game_over()
        return GameResult(
            win=self.win,
            level=self.level,
            lives=self.hero.lives,
            score=self.scoreboard.score,
            life=max(int(self.hero.life), 0),
            scored=self.scoreboard.scored,
        )