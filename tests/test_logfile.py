from afterburn.logfile import GameLog


def test_writes_one_line_per_message(tmp_path):
    path = tmp_path / "log.txt"
    log = GameLog(path)
    log.write("first")
    log.write("second")
    log.close()
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_writes_after_close_are_ignored(tmp_path):
    path = tmp_path / "log.txt"
    log = GameLog(path)
    log.write("kept")
    log.close()
    log.write("dropped")
    assert path.read_text(encoding="utf-8") == "kept\n"
    assert log.active is False


def test_context_manager_closes(tmp_path):
    path = tmp_path / "log.txt"
    with GameLog(path) as log:
        log.write("inside")
        assert log.active is True
    assert log.active is False
    assert path.read_text(encoding="utf-8") == "inside\n"


def test_unopenable_path_is_inactive(tmp_path):
    log = GameLog(tmp_path)
    log.write("nothing")
    log.close()
    assert log.active is False
    assert tmp_path.is_dir()


def test_log_truncates_existing_file(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("old\n", encoding="utf-8")
    with GameLog(path) as log:
        log.write("new")
    assert path.read_text(encoding="utf-8") == "new\n"