import dataclasses

from afterburn.paths import (
    ALT_SEP,
    SEP,
    SPACE_MARK,
    FilePaths,
    file_exists,
    swap_chars,
    to_local,
    to_portable,
)


def test_swap_chars_replaces_every_occurrence():
    assert swap_chars("a|b|c", "|", " ") == "a b c"


def test_swap_chars_without_match_is_identity():
    assert swap_chars("abc", "|", " ") == "abc"


def test_to_local_converts_separators_and_spaces():
    stored = "data" + ALT_SEP + "my|file.txt"
    assert to_local(stored) == "data" + SEP + "my file.txt"


def test_portable_round_trip():
    local = SEP.join(["data", "some dir", "a b.bmp"])
    portable = to_portable(local)
    assert " " not in portable
    assert SEP not in portable
    assert to_local(portable) == local


def test_localized_paths_have_no_markers():
    paths = FilePaths().localized()
    for field in dataclasses.fields(paths):
        value = getattr(paths, field.name)
        assert ALT_SEP not in value
        assert SPACE_MARK not in value


def test_portable_then_localized_matches_localized():
    paths = FilePaths()
    assert paths.portable().localized() == paths.localized()


def test_patterns_format_like_source():
    paths = FilePaths().localized()
    assert (paths.ship % 1).endswith("ship01.bmp")
    assert paths.shot % 1 == "scr00001.pcx"
    assert (paths.bullets % (1, 2)).endswith("bull0102.bmp")


def test_file_exists(tmp_path):
    target = tmp_path / "present.txt"
    target.write_text("x")
    assert file_exists(target) is True
    assert file_exists(tmp_path / "missing.txt") is False