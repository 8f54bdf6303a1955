import random

import pytest

from afterburn.screens import (
    BACKSPACE,
    END,
    EXIT_ERROR,
    LOG_FILE,
    MAX_VOLUME,
    credit_gray,
    edit_name,
    main,
    step_volume,
    wrap_selection,
)


@pytest.mark.parametrize(
    "selection, step, count, expected",
    [(0, -1, 5, 4), (4, 1, 5, 0), (2, 1, 5, 3), (1, -1, 4, 0)],
)
def test_wrap_selection(selection, step, count, expected):
    assert wrap_selection(selection, step, count) == expected


def test_wrap_selection_stays_in_range():
    for selection in range(5):
        for step in (-1, 1):
            assert 0 <= wrap_selection(selection, step, 5) < 5


def test_step_volume_up_and_down():
    assert step_volume(10, 1) == 11
    assert step_volume(10, -1) == 9


def test_step_volume_clamped():
    assert step_volume(MAX_VOLUME, 1) == MAX_VOLUME
    assert step_volume(0, -1) == 0


def test_edit_name_appends_character():
    assert edit_name("ab", "c", 30) == ("abc", False)


def test_edit_name_respects_limit():
    assert edit_name("ab", "c", 2) == ("ab", False)


def test_edit_name_backspace():
    assert edit_name("Anon", BACKSPACE, 30) == ("Ano", False)
    assert edit_name("", BACKSPACE, 30) == ("", False)


def test_edit_name_enter_finishes():
    assert edit_name("ab", END, 30) == ("ab", True)


def test_edit_name_typing_sequence():
    name, finished = "", False
    for key in ["x", "y", BACKSPACE, "z", END]:
        name, finished = edit_name(name, key, 30)
    assert (name, finished) == ("xz", True)


def test_credit_gray_is_light_gray():
    rng = random.Random(7)
    values = [credit_gray(rng) for _ in range(500)]
    assert min(values) >= 128
    assert max(values) <= 255


def test_main_rejects_extra_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["one.ini", "two.ini"]) == EXIT_ERROR
    assert "Argument Error" in (tmp_path / LOG_FILE).read_text()