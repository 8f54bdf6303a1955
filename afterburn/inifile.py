"""Reading and writing the game's INI file.

The file is a fixed sequence of whitespace-separated tokens. Paths are stored
in portable form, and texts have their spaces replaced by ``|``.
"""

import dataclasses

from afterburn.paths import SPACE, SPACE_MARK, FilePaths, to_local, to_portable
from afterburn.settings import (
    MAX_BONUS_TYPES,
    MAX_BULLET_TYPES,
    MAX_ENEMY_BULLET_TYPES,
    MAX_ENEMY_TYPES,
    MAX_EXPLODE,
    MAX_LEVELS,
    MAX_STARS,
    MAX_VIDEOS,
    NUM_MENU_ITEMS,
    NUM_OPTION_ITEMS,
    STATES,
    AmmoDrop,
    BonusDrop,
    BulletType,
    EnemyBulletType,
    EnemyType,
    Settings,
    Texts,
    Video,
)

_SOUND_PATHS = (
    "music",
    "menu_music",
    "shoot",
    "enemy_shoot",
    "explode_sound",
    "died_sound",
    "collect_sound",
    "won_sound",
)

_TEXT_FIELDS = (
    "game_over",
    "paused",
    "quit",
    "press_key",
    "infinite",
    "none",
    "hs_name",
    "hs_level",
    "hs_score",
    "hs_prompt",
    "anonymous",
    "unimplemented",
    "level_clear",
    "won",
)


class IniError(ValueError):
    """The INI data is truncated, malformed or cannot be represented."""


class _Tokens:
    """Sequential reader over the whitespace-separated tokens of a text."""

    def __init__(self, text):
        self._words = iter(text.split())
        self.position = 0

    def word(self):
        try:
            token = next(self._words)
        except StopIteration:
            raise IniError(
                f"unexpected end of data after {self.position} tokens"
            ) from None
        self.position += 1
        return token

    def text(self):
        return self.word().replace(SPACE_MARK, SPACE)

    def path(self):
        return to_local(self.word())

    def integer(self):
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise IniError(
                f"token {self.position}: expected an integer, got {token!r}"
            ) from None

    def number(self):
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise IniError(
                f"token {self.position}: expected a number, got {token!r}"
            ) from None

    def integers(self, count):
        return [self.integer() for _ in range(count)]

    def numbers(self, count):
        return tuple(self.number() for _ in range(count))

    def count(self, limit, what):
        value = self.integer()
        if not 0 <= value <= limit:
            raise IniError(f"number of {what} must be 0..{limit}, got {value}")
        return value


def parse_ini(text):
    """Build a Settings object from the text of an INI file."""
    tokens = _Tokens(text)
    paths = {}

    paths["logo"] = tokens.path()
    paths["font"] = tokens.path()
    active_color = tuple(tokens.integers(3))
    passive_color = tuple(tokens.integers(3))

    paths["ship"] = tokens.path()
    ship_frames, blink_param, max_life, max_lives, max_pos_lives = tokens.integers(5)
    paths["ship_blink"] = tokens.path()
    blink_frames = tokens.integer()
    paths["blank"] = tokens.path()
    max_blank = tokens.integer()

    num_levels = tokens.count(MAX_LEVELS, "levels")
    level_kills = tokens.integers(num_levels)

    paths["bullets"] = tokens.path()
    num_bullets = tokens.count(MAX_BULLET_TYPES, "bullet types")
    bullets = [
        BulletType(tokens.text(), *tokens.integers(9), tokens.number(), tokens.number())
        for _ in range(num_bullets)
    ]

    paths["enemy_bullets"] = tokens.path()
    num_enemy_bullets = tokens.count(MAX_ENEMY_BULLET_TYPES, "enemy bullet types")
    enemy_bullets = [
        EnemyBulletType(*tokens.integers(4), tokens.number())
        for _ in range(num_enemy_bullets)
    ]

    paths["ammo"] = tokens.path()
    ammo_drops = [AmmoDrop(*tokens.integers(5)) for _ in range(num_bullets)]

    paths["others"] = tokens.path()
    num_bonus = tokens.count(MAX_BONUS_TYPES, "collectible types")
    bonus_drops = [BonusDrop(*tokens.integers(6)) for _ in range(num_bonus)]

    paths["enemies"] = tokens.path()
    num_enemies = tokens.count(MAX_ENEMY_TYPES, "enemy types")
    enemies = [
        EnemyType(*tokens.integers(6), tokens.number(), tokens.number())
        for _ in range(num_enemies)
    ]
    enemy_map = [tokens.integers(num_enemies) for _ in range(num_levels)]

    num_stars = tokens.count(MAX_STARS, "stars")
    paths["explosions"] = tokens.path()
    num_explode = tokens.count(MAX_EXPLODE, "explosion frames")
    paths["icons"] = tokens.path()

    for name in _SOUND_PATHS:
        paths[name] = tokens.path()
    play_sounds, play_music, digi_volume, midi_volume = tokens.integers(4)

    paths["highscores"] = tokens.path()
    show_stats = tokens.integer()

    num_videos = tokens.count(MAX_VIDEOS, "videos")
    videos = [
        Video(tokens.path(), tokens.text(), tokens.integer(), tokens.integer())
        for _ in range(num_videos)
    ]

    menu = [tokens.text() for _ in range(NUM_MENU_ITEMS)]
    options = [tokens.text() for _ in range(NUM_OPTION_ITEMS)]
    states = [tokens.text() for _ in range(STATES)]
    texts = Texts(
        menu=menu,
        options=options,
        states=states,
        **{name: tokens.text() for name in _TEXT_FIELDS},
    )

    base_color = tokens.numbers(3)
    star_color = tokens.numbers(3)
    game_over_color = tokens.numbers(3)
    # Whatever follows (the title line) carries no settings.

    return Settings(
        paths=dataclasses.replace(FilePaths(), **paths),
        active_color=active_color,
        passive_color=passive_color,
        ship_frames=ship_frames,
        blink_param=blink_param,
        max_life=max_life,
        max_lives=max_lives,
        max_pos_lives=max_pos_lives,
        blink_frames=blink_frames,
        max_blank=max_blank,
        level_kills=level_kills,
        bullets=bullets,
        enemy_bullets=enemy_bullets,
        ammo_drops=ammo_drops,
        bonus_drops=bonus_drops,
        enemies=enemies,
        enemy_map=enemy_map,
        num_stars=num_stars,
        num_explode=num_explode,
        play_sounds=bool(play_sounds),
        play_music=bool(play_music),
        digi_volume=digi_volume,
        midi_volume=midi_volume,
        show_stats=bool(show_stats),
        videos=videos,
        texts=texts,
        base_color=base_color,
        star_color=star_color,
        game_over_color=game_over_color,
    )


def _token(value):
    if not value or any(ch.isspace() for ch in value):
        raise IniError(f"cannot store {value!r} as a single token")
    return value


def _text(value):
    return _token(value.replace(SPACE, SPACE_MARK))


def _path(value):
    return _token(to_portable(value))


def _ints(*values):
    return " ".join(str(int(v)) for v in values)


def _floats(*values):
    return " ".join(f"{float(v):.6f}" for v in values)


def _color_line(values):
    return _floats(*(v if v >= 0 else -1 for v in values))


def _map_value(settings, level, enemy_type):
    try:
        return settings.enemy_map[level][enemy_type]
    except IndexError:
        return 0


def format_ini(settings, title):
    """Return the INI text for *settings*, ending with a line naming *title*."""
    if len(settings.ammo_drops) < len(settings.bullets):
        raise IniError("every bullet type needs an ammunition collectible")

    paths = settings.paths
    lines = [
        _path(paths.logo),
        _path(paths.font),
        _ints(*settings.active_color),
        _ints(*settings.passive_color),
        _path(paths.ship),
        _ints(
            settings.ship_frames,
            settings.blink_param,
            settings.max_life,
            settings.max_lives,
            settings.max_pos_lives,
        ),
        _path(paths.ship_blink),
        _ints(settings.blink_frames),
        _path(paths.blank),
        _ints(settings.max_blank),
        _ints(len(settings.level_kills)),
    ]
    lines.extend(_ints(kills) for kills in settings.level_kills)

    lines.append(_path(paths.bullets))
    lines.append(_ints(len(settings.bullets)))
    for bullet in settings.bullets:
        lines.append(_text(bullet.name))
        lines.append(
            _ints(
                bullet.frames,
                bullet.frame_mul,
                bullet.count,
                bullet.x_speed,
                bullet.y_speed,
                bullet.limit,
                bullet.direction,
                bullet.default_ammo,
                bullet.max_ammo,
            )
            + " "
            + _floats(bullet.damage, bullet.max_damage)
        )

    lines.append(_path(paths.enemy_bullets))
    lines.append(_ints(len(settings.enemy_bullets)))
    for ebullet in settings.enemy_bullets:
        lines.append(
            _ints(ebullet.frames, ebullet.frame_mul, ebullet.speed, ebullet.limit)
            + " "
            + _floats(ebullet.damage)
        )

    lines.append(_path(paths.ammo))
    for drop in settings.ammo_drops[: len(settings.bullets)]:
        lines.append(_ints(drop.frames, drop.frame_mul, drop.life, drop.ammo, drop.score))

    lines.append(_path(paths.others))
    lines.append(_ints(len(settings.bonus_drops)))
    for bonus in settings.bonus_drops:
        lines.append(
            _ints(
                bonus.frames,
                bonus.frame_mul,
                bonus.life_bonus,
                bonus.lives_bonus,
                bonus.score,
                bonus.life,
            )
        )

    lines.append(_path(paths.enemies))
    lines.append(_ints(len(settings.enemies)))
    for enemy in settings.enemies:
        lines.append(
            _ints(
                enemy.frames,
                enemy.frame_mul,
                enemy.lives,
                enemy.damage,
                enemy.moves,
                enemy.bullet_type,
            )
            + " "
            + _floats(enemy.x_speed, enemy.y_speed)
        )
    for level in range(len(settings.level_kills)):
        lines.append(
            _ints(
                *(
                    _map_value(settings, level, kind)
                    for kind in range(len(settings.enemies))
                )
            )
        )

    lines.append(_ints(settings.num_stars))
    lines.append(_path(paths.explosions))
    lines.append(_ints(settings.num_explode))
    lines.append(_path(paths.icons))
    lines.extend(_path(getattr(paths, name)) for name in _SOUND_PATHS)
    lines.append(
        _ints(
            settings.play_sounds,
            settings.play_music,
            settings.digi_volume,
            settings.midi_volume,
        )
    )
    lines.append(_path(paths.highscores))
    lines.append(_ints(settings.show_stats))

    lines.append(_ints(len(settings.videos)))
    for video in settings.videos:
        lines.append(
            f"{_path(video.filename)} {_text(video.password)} "
            f"{_ints(video.audio_index, video.video_index)}"
        )

    texts = settings.texts
    lines.extend(_text(item) for item in texts.menu)
    lines.extend(_text(item) for item in texts.options)
    lines.extend(_text(item) for item in texts.states)
    lines.extend(_text(getattr(texts, name)) for name in _TEXT_FIELDS)

    lines.append(_color_line(settings.base_color))
    lines.append(_color_line(settings.star_color))
    lines.append(_color_line(settings.game_over_color))
    lines.append(f"{title} INI")
    return "\n".join(lines) + "\n"


def read_ini(path):
    """Read settings from the INI file at *path*; OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        settings = parse_ini(handle.read())
    settings.paths.ini = str(path)
    return settings


def write_ini(settings, path, title):
    """Write *settings* to the INI file at *path*."""
    text = format_ini(settings, title)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)