"""Menus and screens around the game, and the program's entry point."""

import random
import sys

import pygame

from afterburn.assets import AssetError, load_assets
from afterburn.enemies import build_tables
from afterburn.game import Game, SoundBoard, save_screenshot
from afterburn.highscores import HighScoreTable, Player, load_highscores, save_highscores
from afterburn.inifile import IniError, read_ini, write_ini
from afterburn.logfile import GameLog
from afterburn.palette import ColorParams, star_colors
from afterburn.paths import to_local
from afterburn.settings import (
    FONT_SIZE,
    FRAME_DELAY_MS,
    NUM_MENU_ITEMS,
    NUM_OPTION_ITEMS,
    PAUSE_MS,
    SCORE_FORMAT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SCREENSHOT_DELAY_MS,
    TABLE_SIZE,
    VERT_SPACING,
    default_settings,
)
from afterburn.starfield import Starfield

TITLE = "AfterBurn"
PROGRAM = "afterburn"
LOG_FILE = "gamelog.txt"
EXIT_OK = 0
EXIT_ERROR = 1

MAX_VOLUME = 255
NAME_LENGTH = 30
END = "\n"
BACKSPACE = "\b"

MENU_PLAY, MENU_OPTIONS, MENU_SCORES, MENU_CREDITS, MENU_EXIT = range(5)
OPT_SOUND, OPT_MUSIC, OPT_STATS, OPT_VOLUME = range(4)

_MAX_CREDIT_VALUE = 256
_CREDIT_SPACING = FONT_SIZE // 4
_CREDIT_SPEED = 1
_CREDIT_SWAY = SCREEN_WIDTH // 4
_SCORE_NAME_X = 10

CREDITS = (
    ("",) * 10
    + (
        "Game Design, Programming,..",
        "",
        "",
        "",
        "Support and Libraries",
        "",
        "Allegro, JGMOD, DUMB, Ogg Vorbis, AllegroFont",
        "",
        "",
        "Our Dear Friends",
        "",
        "",
        "The Rest",
        "",
        "MOD Archives",
        "XMMS/Winamp",
        "Action Arcade Adventure Set",
        "GCC and Dev-C++",
        "and, of course, Cut-Copy-Paste ;)",
        "",
        "",
        "We Thank You For Playing ...",
    )
    + ("",) * 6
)
_CREDIT_TICKS = (len(CREDITS) * (FONT_SIZE + _CREDIT_SPACING)) // _CREDIT_SPEED


def wrap_selection(selection, step, count):
    """Move a menu cursor by *step* among *count* items, wrapping round."""
    return (selection + step) % count


def step_volume(volume, step):
    """Raise or lower a volume by *step*, kept within 0..255."""
    return max(0, min(MAX_VOLUME, volume + step))


def edit_name(name, key, limit):
    """Apply one typed character to *name*; return (new name, finished)."""
    if key == END:
        return name[:limit], True
    if key == BACKSPACE:
        return name[:-1], False
    if key and len(name) < limit:
        return name + key, False
    return name, False


def credit_gray(rng):
    """Return a random light gray level for a credits line."""
    half = _MAX_CREDIT_VALUE // 2
    return min(rng.randrange(half + 1) + half, 255)


def _entry_char(key, char):
    if key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE):
        return END
    if key in (pygame.K_SPACE, pygame.K_TAB):
        return " "
    if key == pygame.K_BACKSPACE:
        return BACKSPACE
    if char and char.isprintable():
        return char
    return None


def _format_option(template, value):
    try:
        return template % value
    except (TypeError, ValueError):
        return template


class App:
    """The title menu and the screens reached from it."""

    def __init__(self, settings, screen, assets, log, scores, sounds=None, rng=None):
        self.settings = settings
        self.screen = screen
        self.assets = assets
        self.log = log
        self.scores = scores
        self.sounds = sounds or SoundBoard(enabled=False)
        self.rng = rng or random.Random()
        self.starfield = Starfield(settings.num_stars, SCREEN_WIDTH, SCREEN_HEIGHT, self.rng)
        self.star_palette = star_colors(ColorParams(*settings.star_color).resolve(self.rng))
        self.sin_steps, _ = build_tables()
        self.selection = 0
        self.option = 0
        self.done = False
        self.settings_modified = False
        self.scores_modified = False

    # -- drawing helpers -------------------------------------------------

    @property
    def _top(self):
        logo = self.assets.logo if self.assets else None
        height = logo.get_height() if logo is not None else 0
        return height * 2 + VERT_SPACING

    def _text(self, text, x, y, color, centre=False):
        font = self.assets.font if self.assets else None
        if font is None or not text:
            return
        image = font.render(text, True, color)
        if centre:
            x -= image.get_width() // 2
        self.screen.blit(image, (int(x), int(y)))

    def _background(self):
        self.screen.fill((0, 0, 0))
        self.starfield.scroll()
        for star in self.starfield.stars:
            self.screen.set_at((star.x, star.y), self.rng.choice(self.star_palette))
        logo = self.assets.logo if self.assets else None
        if logo is not None:
            self.screen.blit(
                logo, (SCREEN_WIDTH // 2 - logo.get_width() // 2, logo.get_height() // 4)
            )

    def _heading(self, text):
        self._text(text, SCREEN_WIDTH // 2, self._top - (FONT_SIZE + VERT_SPACING),
                   self.settings.active_color, centre=True)

    def _present(self):
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()
        pygame.time.wait(FRAME_DELAY_MS)

    # -- input -----------------------------------------------------------

    def _keys(self):
        keys = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keys.append((pygame.K_ESCAPE, ""))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_PRINT:
                    pygame.time.wait(SCREENSHOT_DELAY_MS)
                elif event.key == pygame.K_F12:
                    name = save_screenshot(self.screen, self.settings.paths.shot)
                    self.settings_modified = True
                    self.log.write(f"Screenshot written to : {name}")
                keys.append((event.key, event.unicode))
        return keys

    def _sync_sound_flags(self):
        self.settings.play_sounds = bool(self.sounds.play_sounds)
        self.settings.play_music = bool(self.sounds.play_music_enabled)
        if self.sounds.modified:
            self.settings_modified = True

    def _sound_keys(self, key):
        if key == pygame.K_m:
            self.sounds.toggle_music()
        elif key == pygame.K_s:
            self.sounds.toggle_sounds()
        self._sync_sound_flags()

    # -- main menu -------------------------------------------------------

    def _draw_menu(self):
        self._background()
        menu = self.settings.texts.menu
        for index, item in enumerate(menu):
            color = self.settings.active_color if index == self.selection \
                else self.settings.passive_color
            self._text(item, SCREEN_WIDTH // 2,
                       self._top + index * (FONT_SIZE + VERT_SPACING), color, centre=True)
        self._present()

    def run(self):
        """Show the title menu until the player chooses to leave."""
        self.log.write("-- Menu Initialising --")
        pygame.event.clear()
        self.sounds.play_music(self.assets.menu_music if self.assets else None)
        self.log.write("-- Menu Loop --")
        while not self.done:
            self._draw_menu()
            for key, _ in self._keys():
                if key == pygame.K_ESCAPE:
                    self.done = True
                self._sound_keys(key)
                if key == pygame.K_UP:
                    self.selection = wrap_selection(self.selection, -1, NUM_MENU_ITEMS)
                elif key == pygame.K_DOWN:
                    self.selection = wrap_selection(self.selection, 1, NUM_MENU_ITEMS)
                elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self._choose()
        self.sounds.stop_music()
        self.log.write("-- Menu Loop Done --")

    def _choose(self):
        if self.selection == MENU_PLAY:
            self._play()
        elif self.selection == MENU_OPTIONS:
            self._options()
        elif self.selection == MENU_SCORES:
            self._high_scores()
        elif self.selection == MENU_CREDITS:
            self._credits()
        elif self.selection == MENU_EXIT:
            self.done = True

    def _play(self):
        stats = self.settings.show_stats
        game = Game(self.settings, self.screen, self.assets, self.sounds, self.log,
                    self.rng, on_options=self._options)
        result = game.run()
        if self.settings.show_stats != stats:
            self.settings_modified = True
        self._sync_sound_flags()
        self._enter_high_score(result)

    # -- options ---------------------------------------------------------

    def _set_volume(self, step):
        volume = step_volume(self.settings.digi_volume, step)
        self.settings.digi_volume = volume
        if self.assets:
            for sample in self.assets.samples.values():
                sample.set_volume(volume / MAX_VOLUME)
        self.settings_modified = True

    def _draw_options(self):
        self._background()
        texts = self.settings.texts
        rows = [(OPT_STATS, _format_option(texts.options[OPT_STATS],
                                           texts.states[int(self.settings.show_stats)]))]
        if self.sounds.enabled:
            rows.append((OPT_SOUND, _format_option(
                texts.options[OPT_SOUND], texts.states[int(bool(self.sounds.play_sounds))])))
            rows.append((OPT_MUSIC, _format_option(
                texts.options[OPT_MUSIC],
                texts.states[int(bool(self.sounds.play_music_enabled))])))
            rows.append((OPT_VOLUME, _format_option(
                texts.options[OPT_VOLUME], self.settings.digi_volume)))
        for index, text in rows:
            color = self.settings.active_color if index == self.option \
                else self.settings.passive_color
            self._text(text, SCREEN_WIDTH // 2,
                       self._top + index * (FONT_SIZE + VERT_SPACING), color, centre=True)
        self._present()

    def _options(self):
        finished = False
        while not finished:
            self._draw_options()
            for key, _ in self._keys():
                if key == pygame.K_ESCAPE:
                    finished = True
                self._sound_keys(key)
                if key == pygame.K_UP:
                    self.option = wrap_selection(self.option, -1, NUM_OPTION_ITEMS)
                elif key == pygame.K_DOWN:
                    self.option = wrap_selection(self.option, 1, NUM_OPTION_ITEMS)
                elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if self.option == OPT_SOUND:
                        self.sounds.toggle_sounds()
                    elif self.option == OPT_MUSIC:
                        self.sounds.toggle_music()
                    elif self.option == OPT_STATS:
                        self.settings.show_stats = not self.settings.show_stats
                        self.settings_modified = True
                    self._sync_sound_flags()
                elif key == pygame.K_RIGHT and self.option == OPT_VOLUME and self.sounds.enabled:
                    self._set_volume(1)
                elif key == pygame.K_LEFT and self.option == OPT_VOLUME and self.sounds.enabled:
                    self._set_volume(-1)
        pygame.time.wait(PAUSE_MS)
        pygame.event.clear()

    # -- high scores -----------------------------------------------------

    def _draw_scores(self):
        self._background()
        texts = self.settings.texts
        active, passive = self.settings.active_color, self.settings.passive_color
        level_x = int(SCREEN_WIDTH // 2 * 1.2)
        score_x = int(SCREEN_WIDTH // 2 * 1.6)
        top = self._top
        self._heading(texts.menu[MENU_SCORES])
        self._text(texts.hs_name, _SCORE_NAME_X, top, active)
        self._text(texts.hs_level, level_x, top, active, centre=True)
        self._text(texts.hs_score, score_x, top, active)
        for row, player in reversed(list(enumerate(self.scores.players))):
            y = top + (row + 1) * (FONT_SIZE + VERT_SPACING)
            self._text(player.name, _SCORE_NAME_X, y, passive)
            self._text(str(player.level), level_x, y, passive)
            self._text(SCORE_FORMAT % player.score, score_x, y, passive)
        self._present()

    def _high_scores(self):
        if not self.scores.players:
            return
        self.scores.sort()
        pygame.event.clear()
        while True:
            self._draw_scores()
            keys = self._keys()
            for key, _ in keys:
                self._sound_keys(key)
            if any(key == pygame.K_ESCAPE for key, _ in keys):
                break
        pygame.event.clear()

    def _enter_high_score(self, result):
        pygame.time.wait(PAUSE_MS)
        if not self.scores.qualifies(int(result.win), result.level, result.lives,
                                     result.score, result.life, result.scored):
            return
        texts = self.settings.texts
        name = texts.anonymous[:NAME_LENGTH]
        finished = False
        pygame.event.clear()
        while not finished:
            self._background()
            self._heading(texts.hs_prompt)
            self._text(name, SCREEN_WIDTH // 2, self._top, self.settings.passive_color,
                       centre=True)
            self._present()
            for key, char in self._keys():
                typed = _entry_char(key, char)
                if typed is None:
                    continue
                name, finished = edit_name(name, typed, NAME_LENGTH)
                if finished:
                    break
        pygame.event.clear()
        if not name:
            name = texts.anonymous
        self.scores.add(Player(name=name, win=int(result.win), level=result.level,
                               lives=result.lives, score=result.score, life=result.life))
        self.scores_modified = True
        self._high_scores()

    # -- credits ---------------------------------------------------------

    def _credit_rows(self, tick):
        sway = self.sin_steps[tick % TABLE_SIZE] * _CREDIT_SWAY
        for line_no, line in enumerate(CREDITS):
            y = SCREEN_HEIGHT // 2 - tick * _CREDIT_SPEED + line_no * (FONT_SIZE + _CREDIT_SPACING)
            if 0 <= y <= SCREEN_HEIGHT - 1:
                yield line, SCREEN_WIDTH // 2 - int(sway), y
                sway += self.sin_steps[(line_no + tick) % TABLE_SIZE] * _CREDIT_SWAY
            elif y > SCREEN_HEIGHT - 1:
                break

    def _credits(self):
        tick = 0
        pygame.event.clear()
        while True:
            self._background()
            self._heading(self.settings.texts.menu[MENU_CREDITS])
            tick = tick + 1 if tick <= _CREDIT_TICKS else 0
            for line, x, y in self._credit_rows(tick):
                gray = credit_gray(self.rng)
                self._text(line, x, self._top - VERT_SPACING + y, (gray, gray, gray),
                           centre=True)
            keys = self._keys()
            for key, _ in keys:
                self._sound_keys(key)
            if any(key == pygame.K_ESCAPE for key, _ in keys):
                break
            self._present()
        pygame.event.clear()


def _load_settings(settings, path, log):
    try:
        loaded = read_ini(path)
    except OSError:
        log.write(f"Couldn't Read INI file : {path}")
        settings.paths.ini = path
        return settings, True
    except IniError as error:
        log.write(f"Couldn't Read INI file : {path} ({error})")
        settings.paths.ini = path
        return settings, False
    log.write(f"Reading INI file : {path}")
    log.write(f"Read INI file : {path}")
    return loaded, False


def _save_settings(settings, path, log, modified):
    if not modified:
        log.write(f"Needn't Write INI file : {path}")
        return
    log.write(f"Writing INI file : {path}")
    try:
        write_ini(settings, path, TITLE)
    except (OSError, IniError):
        log.write(f"Couldn't Write INI file : {path}")
        return
    log.write(f"Wrote INI file : {path}")


def _load_scores(settings, log, rng):
    table = HighScoreTable()
    table.randomize(len(settings.level_kills), settings.max_pos_lives, settings.max_life, rng)
    path = settings.paths.highscores
    try:
        loaded = load_highscores(path)
    except (OSError, ValueError):
        log.write(f"Couldn't Read Scores file : {path}")
        return table, True
    log.write(f"Reading Scores file : {path}")
    log.write(f"Read Scores file : {path}")
    loaded.sort()
    return loaded, False


def _save_scores(table, path, log, modified):
    if not modified or not table.players:
        log.write(f"Needn't Write Scores file : {path}")
        return
    log.write(f"Writing Scores file : {path}")
    try:
        save_highscores(table, path)
    except OSError:
        log.write(f"Couldn't Write Scores file : {path}")
        return
    log.write(f"Wrote Scores file : {path}")


def _run(args, settings, log):
    log.write(f"{TITLE} Log")
    if len(args) > 1:
        log.write(f"Argument Error : Format is {PROGRAM} <File> !")
        return EXIT_ERROR
    ini_path = to_local(args[0]) if args else settings.paths.ini
    settings, ini_modified = _load_settings(settings, ini_path, log)

    pygame.init()
    sound_ok = True
    try:
        pygame.mixer.init()
    except pygame.error:
        sound_ok = False
        log.write("Sound Initialisation Error !")
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error:
        log.write("Graphics Initialisation Error !")
        _save_settings(settings, ini_path, log, ini_modified)
        pygame.quit()
        return EXIT_ERROR
    pygame.display.set_caption(TITLE)

    rng = random.Random()
    scores, scores_modified = _load_scores(settings, log, rng)
    try:
        assets = load_assets(settings, log, sound_ok)
    except AssetError:
        _save_scores(scores, settings.paths.highscores, log, scores_modified)
        _save_settings(settings, ini_path, log, ini_modified)
        log.write("Quitting Prematurely ....")
        pygame.quit()
        return EXIT_ERROR

    sounds = SoundBoard(samples=assets.samples, enabled=sound_ok, music_ok=sound_ok,
                        play_sounds=settings.play_sounds, play_music=settings.play_music,
                        log=log)
    app = App(settings, screen, assets, log, scores, sounds, rng)
    app.run()

    log.write("Unloading : ")
    _save_scores(scores, settings.paths.highscores, log,
                 scores_modified or app.scores_modified)
    log.write("Unloading Done !")
    _save_settings(settings, ini_path, log, ini_modified or app.settings_modified)
    pygame.quit()
    log.write("Quitting Gracefully ....")
    return EXIT_OK


def main(argv=None):
    """Start the game; an optional single argument names the INI file."""
    args = sys.argv[1:] if argv is None else list(argv)
    settings = default_settings()
    settings.paths = settings.paths.localized()
    log = GameLog(LOG_FILE)
    try:
        return _run(args, settings, log)
    finally:
        log.close()


if __name__ == "__main__":
    sys.exit(main())