"""Loading every image, font and sound the game needs."""

from dataclasses import dataclass, field

import pygame

from afterburn.paths import file_exists
from afterburn.settings import FONT_SIZE, NUM_ICONS


class AssetError(RuntimeError):
    """A required data file could not be loaded."""


class _MusicTrack:
    """A piece of background music streamed from a file."""

    def __init__(self, path):
        self.path = path

    def play(self):
        pygame.mixer.music.load(self.path)
        pygame.mixer.music.play(-1)

    def stop(self):
        pygame.mixer.music.stop()


@dataclass
class Assets:
    """Everything loaded from the data directory."""

    logo: object = None
    font: object = None
    ship: list = field(default_factory=list)
    blink: list = field(default_factory=list)
    blank: object = None
    bullets: list = field(default_factory=list)
    enemy_bullets: list = field(default_factory=list)
    ammo: list = field(default_factory=list)
    others: list = field(default_factory=list)
    enemies: list = field(default_factory=list)
    explosions: list = field(default_factory=list)
    icons: list = field(default_factory=list)
    music: list = field(default_factory=list)
    menu_music: object = None
    samples: dict = field(default_factory=dict)


def _status(log, value, what):
    if value is None:
        log.write(f"Error in processing : {what}")
        raise AssetError(f"Error in processing : {what}")
    log.write(f"{what} : OK")
    return value


def _try(loader, path):
    try:
        return loader(path)
    except (pygame.error, OSError):
        return None


def load_assets(settings, log, sound_enabled=True):
    """Load all data files named by *settings*; AssetError on the first failure."""
    paths = settings.paths
    log.write("Loading : ")

    def image(path):
        return _status(log, _try(pygame.image.load, path), path)

    def frames(pattern, count, *prefix):
        return [image(pattern % (*prefix, n + 1)) for n in range(count)]

    assets = Assets()
    assets.logo = image(paths.logo)
    pygame.font.init()
    assets.font = _status(
        log, _try(lambda p: pygame.font.Font(p, FONT_SIZE), paths.font), paths.font
    )
    assets.ship = frames(paths.ship, settings.ship_frames)
    assets.blink = frames(paths.ship_blink, settings.blink_frames)
    assets.blank = image(paths.blank)
    assets.bullets = [
        frames(paths.bullets, kind.frames, i + 1) for i, kind in enumerate(settings.bullets)
    ]
    assets.enemy_bullets = [
        frames(paths.enemy_bullets, kind.frames, i + 1)
        for i, kind in enumerate(settings.enemy_bullets)
    ]
    assets.ammo = [
        frames(paths.ammo, drop.frames, i + 1)
        for i, drop in enumerate(settings.ammo_drops[: len(settings.bullets)])
    ]
    assets.others = [
        frames(paths.others, drop.frames, i + 1) for i, drop in enumerate(settings.bonus_drops)
    ]
    assets.enemies = [
        frames(paths.enemies, kind.frames, i + 1) for i, kind in enumerate(settings.enemies)
    ]
    assets.explosions = frames(paths.explosions, settings.num_explode)
    assets.icons = frames(paths.icons, NUM_ICONS)

    if sound_enabled:
        def track(path):
            return _status(log, _MusicTrack(path) if file_exists(path) else None, path)

        def sample(path):
            return _status(log, _try(pygame.mixer.Sound, path), path)

        assets.music = [
            track(paths.music % (n + 1)) for n in range(len(settings.level_kills))
        ]
        assets.menu_music = track(paths.menu_music)
        for i in range(len(settings.bullets)):
            assets.samples[f"shoot{i}"] = sample(paths.shoot % (i + 1))
        for i in range(len(settings.enemy_bullets)):
            assets.samples[f"eshoot{i}"] = sample(paths.enemy_shoot % (i + 1))
        assets.samples["explode"] = sample(paths.explode_sound)
        assets.samples["died"] = sample(paths.died_sound)
        assets.samples["collect"] = sample(paths.collect_sound)
        assets.samples["won"] = sample(paths.won_sound)
        volume = settings.digi_volume / 255
        for value in assets.samples.values():
            value.set_volume(volume)

    log.write("Loading Done !")
    return assets