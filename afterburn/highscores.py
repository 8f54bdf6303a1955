"""The high-score table, its ranking rules and its text file."""

from dataclasses import dataclass, field

from afterburn.paths import SPACE, SPACE_MARK
from afterburn.settings import (
    GEN_MULT,
    LIFE_GIVING_SCORE,
    MAX_HIGH_SCORES,
    NAME_LENGTH,
)

_DEFAULT_NAMES = (
    "Pachu",
    "B ra",
    "Kaushik",
    "Alladi",
    "Vinu",
    "Niks",
    "Mezhi",
    "Koushiik",
    "Mottai",
    "Guilt",
)


@dataclass
class Player:
    """One entry of the table."""

    name: str
    win: int = 0
    level: int = 0
    lives: int = 0
    score: int = 0
    life: int = 0

    @property
    def rank(self):
        """The values that order entries, most significant first."""
        return (self.win, self.level, self.lives, self.score, self.life)


def _sort_key(player):
    return (
        -player.win,
        -player.level,
        -player.lives,
        -player.score,
        -player.life,
        player.name,
    )


def _default_players():
    return [Player(name) for name in _DEFAULT_NAMES]


@dataclass
class HighScoreTable:
    """Best results, best first, at most *capacity* of them."""

    players: list = field(default_factory=_default_players)
    capacity: int = MAX_HIGH_SCORES
    modified: bool = False

    def sort(self):
        """Order by win, level, lives, score and life, all descending, then name."""
        self.players.sort(key=_sort_key)

    def randomize(self, num_levels, max_pos_lives, max_life, rng):
        """Fill every entry with plausible random results."""
        for player in self.players:
            player.win = rng.randrange(2)
            player.level = num_levels - 1
            if not player.win:
                player.level = rng.randrange(num_levels)
            player.lives = rng.randrange(max_pos_lives)
            player.score = rng.randrange(LIFE_GIVING_SCORE) // GEN_MULT * GEN_MULT
            player.life = rng.randrange(max_life) + 1

    def qualifies(self, win, level, lives, score, life, scored):
        """Return True if a result deserves a place in the table."""
        if not scored:
            return False
        if len(self.players) < self.capacity:
            return True
        result = (win, level, lives, score, life)
        return any(player.rank <= result for player in self.players)

    def add(self, player):
        """Insert *player*, keep the order and drop whatever falls off the end."""
        entry = Player(
            name=player.name[:NAME_LENGTH],
            win=player.win,
            level=player.level,
            lives=player.lives,
            score=player.score,
            life=max(player.life, 0),
        )
        self.players.append(entry)
        self.modified = True
        self.sort()
        del self.players[self.capacity :]

    def to_text(self):
        """Return the table in its file format."""
        lines = [str(len(self.players))]
        for player in self.players:
            name = player.name[:NAME_LENGTH].replace(SPACE, SPACE_MARK)
            lines.append(
                f"{name} {player.win} {player.level} {player.lives} "
                f"{player.score} {player.life}"
            )
        return "\n".join(lines) + "\n"


def parse_highscores(text):
    """Build a sorted table from file text; ValueError if it is malformed."""
    words = iter(text.split())

    def word():
        try:
            return next(words)
        except StopIteration:
            raise ValueError("high-score data ends too early") from None

    count = max(0, min(int(word()), MAX_HIGH_SCORES))
    players = []
    for _ in range(count):
        name = word().replace(SPACE_MARK, SPACE)[:NAME_LENGTH]
        values = [int(word()) for _ in range(5)]
        players.append(Player(name, *values))
    table = HighScoreTable(players=players)
    table.sort()
    return table


def load_highscores(path):
    """Read the table at *path*; OSError if the file cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return parse_highscores(handle.read())


def save_highscores(table, path):
    """Write *table* if it changed and is not empty; return whether it was written."""
    if not table.modified or not table.players:
        return False
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(table.to_text())
    return True