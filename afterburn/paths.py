"""Data file names and the conversion between portable and local spellings.

File names are stored with the alternate separator and with ``|`` standing in
for spaces, so that each one reads as a single whitespace-free token.
"""

import dataclasses
import os
from dataclasses import dataclass

SEP = os.sep
ALT_SEP = "/" if SEP == "\\" else "\\"
SPACE = " "
SPACE_MARK = "|"


def swap_chars(text, old, new):
    """Return *text* with every occurrence of the character *old* replaced."""
    return text.replace(old, new)


def to_local(path):
    """Turn a stored path into one usable on this system."""
    return swap_chars(swap_chars(path, ALT_SEP, SEP), SPACE_MARK, SPACE)


def to_portable(path):
    """Turn a local path into its stored, whitespace-free form."""
    return swap_chars(swap_chars(path, SEP, ALT_SEP), SPACE, SPACE_MARK)


def file_exists(path):
    """Return True if *path* can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


@dataclass
class FilePaths:
    """Every file name and file-name pattern the game uses."""

    config: str = "data/global/allegro.cfg"
    ini: str = "data/default.ini"
    log: str = "gamelog.txt"
    highscores: str = "data/global/hscores.txt"
    logo: str = "data/global/logo.bmp"
    font: str = "data/global/font.ttf"
    ship: str = "data/hero/ship%02d.bmp"
    ship_blink: str = "data/hero/shipb%02d.bmp"
    blank: str = "data/hero/shblank.bmp"
    bullets: str = "data/bullets/bull%02d%02d.bmp"
    enemy_bullets: str = "data/ebullets/ebul%02d%02d.bmp"
    ammo: str = "data/collec/ammo/am%02d%02d.bmp"
    others: str = "data/collec/others/col%02d%02d.bmp"
    enemies: str = "data/enemies/enem%02d%02d.bmp"
    explosions: str = "data/explode/explo%02d.bmp"
    icons: str = "data/stat/icon%02d.bmp"
    music: str = "data/music/music%02d.mus"
    menu_music: str = "data/music/mmusic.mus"
    collect_sound: str = "data/sfx/scollec.wav"
    won_sound: str = "data/sfx/won.wav"
    shoot: str = "data/sfx/shoot%02d.wav"
    enemy_shoot: str = "data/sfx/eshoot%02d.wav"
    explode_sound: str = "data/sfx/explode.wav"
    died_sound: str = "data/sfx/gexplode.wav"
    shot: str = "scr%05d.pcx"

    def _mapped(self, convert):
        return dataclasses.replace(
            self,
            **{f.name: convert(getattr(self, f.name)) for f in dataclasses.fields(self)},
        )

    def localized(self):
        """Return a copy with every name in local form."""
        return self._mapped(to_local)

    def portable(self):
        """Return a copy with every name in stored form."""
        return self._mapped(to_portable)