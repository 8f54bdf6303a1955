# afterburn

A side-scrolling space shooter built on pygame. Fly your ship through
waves of enemies, pick up the ammunition and bonuses they leave behind,
reach the kill target of each level and try to get your name onto the
high score table.

## Installing

```
pip install .
```

The game needs a display; pygame provides graphics, sound and input.

## Playing

Start the game from the directory that holds its `data` folder:

```
afterburn
```

The configuration is read from `data/default.ini`. Another configuration
file can be given as the single argument:

```
afterburn path/to/other.ini
```

More than one argument is an error: the reason is written to the log and
the game exits with status 1. It also exits with status 1 when the window
cannot be opened or any image, font or sound named in the configuration
cannot be loaded. If sound cannot be started, the game runs silently.

### Keys

| Key           | Action                                                   |
|---------------|----------------------------------------------------------|
| Arrow keys    | Move the ship (at an edge, the stars shift instead)      |
| Space         | Fire                                                     |
| 1 – 9, 0      | Choose weapon 1 – 10 (unknown weapons select the first)  |
| Q / W         | Previous / next weapon                                   |
| P             | Pause; P again to continue                               |
| Esc           | Ask whether to quit the game (Y quits, N or Esc resumes) |
| O             | Options screen                                           |
| T             | Show or hide the statistics                              |
| M             | Music on or off                                          |
| S             | Sound effects on or off                                  |
| F12           | Save a numbered screenshot (`scr00001.bmp`, ...)         |
| Print Screen  | Pause for three seconds                                  |

The title menu offers Play, Options, High Scores, Credits and Exit; use
Up, Down and Enter, and Esc to go back. The options screen switches sound
effects, music and statistics with Enter and sets the master volume
(0 – 255) with Left and Right.

### Weapons and pickups

The first weapon never runs out. Every other weapon uses ammunition, shown
at the bottom of the screen; when it is spent the ship falls back to the
first weapon. Destroyed enemies may drop ammunition, extra power for the
first weapon, health, extra lives or score bonuses, and pickups also
appear at random places, some out of reach. Pickups fade after a while.

A score above 20000 is traded for an extra life, as long as the ship has
fewer than the configured maximum number of lives.

## Files

- `data/default.ini` — the configuration: file names, weapon, enemy and
  pickup tables, level kill targets, colours and every on-screen text. It
  is written back on exit when a setting was changed in the game, or when
  it could not be read (the built-in defaults are then saved).
- `data/global/hscores.txt` — the high score table, ten places. Ranking is
  by win, then level, then lives, then score, then remaining health, then
  name. If the file cannot be read, the table starts with random entries
  and is saved on exit.
- `gamelog.txt` — a log, in the current directory, of what was loaded,
  written and what went wrong.

No data files come with the package; the images, font and sounds the
configuration names must be supplied.

## What it does not do

The configuration lists intro videos (file, password and indexes). They
are read and written back with the rest of the settings, but the game
does not play them.

## Icon tool

`afterburn-icon` packs up to sixteen images into a Windows `.ico` file:

```
afterburn-icon game.ico icon16.bmp icon32.bmp
```

`-r` also writes a resource script `game.rc` next to the icon. `-ro`
additionally runs `windres` on it and then deletes the icon and the
script, leaving `game.res`.

## Using the package

The parts of the game can be used on their own, for example the
rectangle test in `afterburn.collision`:

```python
from afterburn.collision import collide

collide(0, 0, 10, 10, 5, 5, 10, 10)   # True
```

the settings in `afterburn.inifile`:

```python
from afterburn.inifile import read_ini, write_ini

settings = read_ini("data/default.ini")
settings.show_stats = False
write_ini(settings, "other.ini", "AfterBurn")
```

or the high score table in `afterburn.highscores`. `save_highscores`
writes only a table that was changed and is not empty:

```python
from afterburn.highscores import Player, load_highscores, save_highscores

table = load_highscores("data/global/hscores.txt")
table.add(Player("Ace", win=1, level=4, lives=2, score=12345, life=80))
save_highscores(table, "scores.txt")   # True
```

## Running the tests

```
pip install .[test]
pytest
```