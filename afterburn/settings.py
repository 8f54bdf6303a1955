"""Game tables and tunables, with the defaults used when no INI file is read."""

from dataclasses import dataclass, field

from afterburn.paths import FilePaths

# Screen and general.
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
NUM_COLORS = 256
VOLUME = 255
FONT_SIZE = 20
VERT_SPACING = 10
HORIZ_SPACING = 10
FRAME_DELAY_MS = 5
PAUSE_MS = 1000
SCREENSHOT_DELAY_MS = 3000
VIDEO_DELAY_MS = 1000
STRING_LIMIT = 80

# Effects.
COLOR_DIVISOR = 200
MAX_STARS = 300
STAR_SPEED = 1
LAYERS = 8
BLINK_FREQUENCY = 500
MAX_EXPLODE = 10

# Enemies.
EXPLOSION_MUL = 2
TABLE_SIZE = 360
NUM_ENEMIES = 20
MAX_ENEMY_TYPES = 120
MAX_ENEMY_FRAMES = 6
MOTION_HORIZONTAL = 0
MOTION_SINE = 1
MOTION_LOOP = 2
MOTION_TYPES = 3

# Bullets.
MAX_BULLET_TYPES = 10
MAX_BULLETS = 80
MAX_BULLET_FRAMES = 4
MAX_ENEMY_BULLET_TYPES = 10
MAX_ENEMY_BULLETS = 80
MAX_ENEMY_BULLET_FRAMES = 4
HORIZONTAL = 0
V_SHAPED = 1
VERTICAL = 2
JAGGED = 3
UP = 0
DOWN = 1
SPREAD = 2

# Hero.
MAX_SHIP_FRAMES = 10
MAX_SHIP_BLINK_FRAMES = 10
SHIP_SPEED = 8
DEAD_LIFE = -1

# Score.
GEN_MULT = 15
LIFE_GIVING_SCORE = 20000
MAX_SCORE = 99999999
SCORE_FORMAT = "%08u"

# Collectibles.
MAX_COLLECTIBLES = 30
MAX_COLLECTIBLE_FRAMES = 8
DROP_PARAM1 = 10
DROP_PARAM2 = 11
DROP_PARAM3 = 17
COLLECTIBLE_KINDS = 2
KIND_AMMO = 0
KIND_OTHER = 1
BULLET_POWER_INCREMENT = 0.5
MAX_BONUS_TYPES = 20

# Statistics icons.
NUM_ICONS = 4

# High scores.
MAX_HIGH_SCORES = 10
NAME_LENGTH = 30

# Menus.
NUM_MENU_ITEMS = 5
NUM_OPTION_ITEMS = 4
STATES = 2

# Levels and videos.
MAX_LEVELS = 20
MAX_VIDEOS = 20


@dataclass
class BulletType:
    """One kind of hero bullet."""

    name: str
    frames: int
    frame_mul: int
    count: int
    x_speed: int
    y_speed: int
    limit: int
    direction: int
    default_ammo: int
    max_ammo: int
    damage: float
    max_damage: float


@dataclass
class EnemyBulletType:
    """One kind of enemy bullet."""

    frames: int
    frame_mul: int
    speed: int
    limit: int
    damage: float


@dataclass
class AmmoDrop:
    """The ammunition collectible belonging to one bullet type."""

    frames: int
    frame_mul: int
    life: int
    ammo: int
    score: int


@dataclass
class BonusDrop:
    """A non-ammunition collectible: health, lives or score."""

    frames: int
    frame_mul: int
    life_bonus: int
    lives_bonus: int
    score: int
    life: int


@dataclass
class EnemyType:
    """One kind of enemy ship."""

    frames: int
    frame_mul: int
    lives: int
    damage: int
    moves: int
    bullet_type: int
    x_speed: float
    y_speed: float


@dataclass
class Video:
    """An intro video stored in a protected data file."""

    filename: str
    password: str
    audio_index: int
    video_index: int


@dataclass
class Texts:
    """Every string shown on screen."""

    menu: list = field(
        default_factory=lambda: ["Play", "Options", "High Scores", "Credits", "Exit"]
    )
    options: list = field(
        default_factory=lambda: [
            "SFX : %s",
            "Music : %s",
            "Statistics : %s",
            "Master Volume : %3u",
        ]
    )
    states: list = field(default_factory=lambda: ["Off", "On"])
    game_over: str = "Game Over"
    paused: str = "Game Paused"
    quit: str = "Quit (Y/N) ?"
    press_key: str = "Press any Key to Continue"
    infinite: str = "Infinite"
    none: str = "???"
    hs_name: str = "Name"
    hs_level: str = "Level"
    hs_score: str = "Score"
    hs_prompt: str = "You have achieved a High Score !! Enter your name... "
    anonymous: str = "Anonymous"
    unimplemented: str = "Method Not Implemented Yet"
    level_clear: str = "Level Clear"
    won: str = "You've Won"


def _default_bullets():
    rows = [
        ("Fire Fury", 2, 2, 35, 16, 0, 1, HORIZONTAL, -1, -1, 1.0, 50.0),
        ("Poison Pint", 2, 4, 25, 20, 10, 2, JAGGED, 50, 3000, 2.0, 40.0),
        ("Lightning Lash", 2, 3, 20, 18, 0, 3, HORIZONTAL, 50, 3000, 3.0, 40.0),
        ("Icy Impulse", 4, 4, 20, 15, 5, 3, V_SHAPED, 100, 2500, 4.0, 40.0),
        ("Vertical Ventura", 4, 6, 20, 0, 20, 1, VERTICAL, 100, 2000, 7.0, 45.0),
        ("Mega Mine", 1, 1, 8, 0, 0, 2, HORIZONTAL, 40, 400, 9.0, 60.0),
    ]
    return [BulletType(*row) for row in rows]


def _default_enemy_bullets():
    rows = [
        (1, 1, 10, 10, 8.0),
        (1, 1, 15, 15, 5.0),
        (1, 1, 30, 20, 9.0),
        (1, 1, 15, 5, 7.0),
        (1, 1, 25, 15, 10.0),
    ]
    return [EnemyBulletType(*row) for row in rows]


def _default_ammo_drops():
    rows = [
        (4, 40, 600, 0, 100),
        (4, 40, 800, 300, 25),
        (4, 40, 800, 250, 20),
        (4, 40, 800, 150, 20),
        (4, 40, 400, 200, 30),
        (4, 40, 300, 100, 35),
    ]
    return [AmmoDrop(*row) for row in rows]


def _default_bonus_drops():
    rows = [
        (4, 40, 30, 0, 450, 200),
        (4, 40, 0, 1, 1050, 400),
        (2, 20, 0, 0, 3500, 350),
        (2, 10, 0, 0, 8000, 350),
        (1, 1, 0, 0, 12000, 250),
    ]
    return [BonusDrop(*row) for row in rows]


def _default_enemies():
    rows = [
        (4, 25, 1, 2, 0, -1, 2.5, 0.0),
        (4, 30, 4, 10, 1, 0, 2.25, 55.0),
        (4, 60, 3, 7, 1, 1, 2.5, 45.0),
        (2, 40, 2, 5, 1, -1, 3.0, 35.0),
        (1, 1, 2, 2, 1, 2, 2.0, 25.0),
        (2, 40, 1, 3, 0, -1, 4.0, 0.0),
        (2, 40, 3, 10, 0, 3, 3.0, 0.0),
        (3, 40, 2, 4, 0, -1, 2.25, 0.0),
        (1, 1, 1, 5, 0, -1, 3.0, 0.0),
        (1, 1, 2, 5, 0, -1, 3.5, 0.0),
        (1, 1, 4, 10, 0, 4, 2.25, 0.0),
    ]
    return [EnemyType(*row) for row in rows]


def _default_enemy_map():
    return [
        [1, 0, 0, 1, 0, 1, 0, 1, 0, 0, 0],
        [1, 1, 0, 0, 0, 0, 1, 0, 0, 1, 0],
        [1, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0],
        [1, 1, 1, 0, 1, 1, 1, 0, 1, 1, 0],
        [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    ]


def _default_videos():
    password = "password"
    return [
        Video(
            filename="data/videos/allegro.vid",
            password=password,
            audio_index=0,
            video_index=1,
        )
    ]


@dataclass
class Settings:
    """Everything the INI file configures."""

    paths: FilePaths = field(default_factory=FilePaths)
    active_color: tuple = (255, 255, 210)
    passive_color: tuple = (128, 64, 0)
    ship_frames: int = 5
    blink_param: int = 10
    max_life: int = 100
    max_lives: int = 3
    max_pos_lives: int = 10
    blink_frames: int = 3
    max_blank: int = 10
    level_kills: list = field(default_factory=lambda: [50, 75, 100, 125, 150])
    bullets: list = field(default_factory=_default_bullets)
    enemy_bullets: list = field(default_factory=_default_enemy_bullets)
    ammo_drops: list = field(default_factory=_default_ammo_drops)
    bonus_drops: list = field(default_factory=_default_bonus_drops)
    enemies: list = field(default_factory=_default_enemies)
    enemy_map: list = field(default_factory=_default_enemy_map)
    num_stars: int = 288
    num_explode: int = 10
    play_sounds: bool = True
    play_music: bool = True
    digi_volume: int = VOLUME
    midi_volume: int = VOLUME
    show_stats: bool = True
    videos: list = field(default_factory=_default_videos)
    texts: Texts = field(default_factory=Texts)
    base_color: tuple = (0.4, 0.6, 0.55)
    star_color: tuple = (-1.0, -1.0, -1.0)
    game_over_color: tuple = (1.0, 0.0, 0.0)

    def enemy_allowed(self, level, enemy_type):
        """Return True if enemies of *enemy_type* may appear on *level*."""
        if not 0 <= level < len(self.enemy_map):
            return False
        row = self.enemy_map[level]
        if not 0 <= enemy_type < len(row):
            return False
        return bool(row[enemy_type])


def default_settings():
    """Return a fresh set of built-in defaults."""
    return Settings()