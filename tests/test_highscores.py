import random

import pytest

from afterburn.highscores import (
    HighScoreTable,
    Player,
    load_highscores,
    parse_highscores,
    save_highscores,
)


def _table(*players):
    return HighScoreTable(players=list(players))


def test_default_table_holds_source_names():
    table = HighScoreTable()
    names = [p.name for p in table.players]
    assert names[0] == "Pachu"
    assert names[-1] == "Guilt"
    assert len(names) == 10


def test_sort_orders_by_rank_then_name():
    table = _table(
        Player("c", 0, 3, 1, 100, 5),
        Player("b", 1, 0, 0, 0, 0),
        Player("a", 0, 3, 1, 100, 5),
        Player("d", 0, 3, 2, 0, 0),
    )
    table.sort()
    assert [p.name for p in table.players] == ["b", "d", "a", "c"]


def test_sort_produces_descending_ranks():
    table = HighScoreTable()
    table.randomize(5, 10, 100, random.Random(7))
    table.sort()
    ranks = [p.rank for p in table.players]
    assert ranks == sorted(ranks, reverse=True)


def test_randomize_invariants():
    table = HighScoreTable()
    table.randomize(5, 10, 100, random.Random(3))
    for player in table.players:
        assert player.win in (0, 1)
        if player.win:
            assert player.level == 4
        assert 0 <= player.level < 5
        assert 0 <= player.lives < 10
        assert player.score % 15 == 0 and 0 <= player.score < 20000
        assert 1 <= player.life <= 100


def test_qualifies_requires_scoring():
    table = _table()
    assert table.qualifies(1, 4, 3, 1000, 50, scored=True) is True
    assert table.qualifies(1, 4, 3, 1000, 50, scored=False) is False


def test_qualifies_against_full_table():
    table = HighScoreTable(players=[Player(str(i), 0, 2, 1, 500, 10) for i in range(10)])
    assert table.qualifies(0, 2, 1, 500, 10, True) is True
    assert table.qualifies(0, 2, 1, 500, 9, True) is False
    assert table.qualifies(0, 1, 9, 99999, 99, True) is False
    assert table.qualifies(1, 0, 0, 0, 0, True) is True


def test_add_keeps_capacity_and_order():
    table = HighScoreTable(players=[Player(str(i), 0, 1, 1, i, 1) for i in range(10)])
    table.add(Player("top", 0, 1, 1, 100, 1))
    assert len(table.players) == 10
    assert table.players[0].name == "top"
    assert all(p.name != "0" for p in table.players)
    assert table.modified is True


def test_add_truncates_name_and_clamps_life():
    table = _table()
    table.add(Player("x" * 50, 0, 0, 0, 0, -1))
    entry = table.players[0]
    assert entry.name == "x" * 30
    assert entry.life == 0


def test_to_text_format():
    table = _table(Player("B ra"))
    assert table.to_text().splitlines() == ["1", "B|ra 0 0 0 0 0"]


def test_text_round_trip():
    table = HighScoreTable()
    table.randomize(5, 10, 100, random.Random(11))
    table.sort()
    parsed = parse_highscores(table.to_text())
    assert parsed.players == table.players
    assert parsed.modified is False


def test_parse_clamps_count():
    table = HighScoreTable()
    lines = table.to_text().splitlines()
    lines[0] = "12"
    lines.extend(["extra 0 0 0 0 0", "more 0 0 0 0 0"])
    parsed = parse_highscores("\n".join(lines))
    assert len(parsed.players) == 10


def test_parse_negative_count_gives_empty_table():
    assert parse_highscores("-3").players == []


def test_parse_truncated_raises():
    with pytest.raises(ValueError):
        parse_highscores("2\nalpha 0 0 0 0 0\nbeta 1 2")


def test_save_only_when_modified(tmp_path):
    path = tmp_path / "hs.txt"
    table = HighScoreTable()
    assert save_highscores(table, path) is False
    assert not path.exists()
    table.modified = True
    assert save_highscores(table, path) is True
    loaded = load_highscores(path)
    assert [p.name for p in loaded.players] == sorted(p.name for p in table.players)


def test_save_empty_table_is_skipped(tmp_path):
    table = HighScoreTable(players=[], modified=True)
    assert save_highscores(table, tmp_path / "hs.txt") is False


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_highscores(tmp_path / "none.txt")