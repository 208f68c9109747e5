import logging
from unittest.mock import MagicMock

import pytest

from grid_snake.engine import GameEngine
from grid_snake.highscore import FileScoreStore, MemoryScoreStore

from conftest import FakeScheduler


def test_missing_file_loads_as_zero(tmp_path, caplog):
    store = FileScoreStore(tmp_path / "nope" / "highscore.txt")
    with caplog.at_level(logging.INFO, logger="grid_snake.highscore"):
        assert store.load_score() == 0
    assert "No previous high score" in caplog.text


@pytest.mark.parametrize(
    "content", ["", "\n", "abc\n", "12.5\n", "-3\n", "+5\n", "1_000\n", "0x1f\n"]
)
def test_corrupt_file_loads_as_zero(tmp_path, content):
    path = tmp_path / "highscore.txt"
    path.write_text(content, encoding="utf-8")
    assert FileScoreStore(path).load_score() == 0


def test_reads_first_line(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("  42 \nleftover\n", encoding="utf-8")
    assert FileScoreStore(path).load_score() == 42


def test_save_then_load(tmp_path):
    path = tmp_path / "data" / "highscore.txt"
    store = FileScoreStore(path)

    store.save_score(17)

    assert path.read_text(encoding="utf-8") == "17\n"
    assert store.load_score() == 17


def test_save_overwrites_previous_value(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("99\n", encoding="utf-8")
    FileScoreStore(path).save_score(3)
    assert path.read_text(encoding="utf-8") == "3\n"


def test_negative_score_rejected_before_writing(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_text("5\n", encoding="utf-8")
    with pytest.raises(ValueError):
        FileScoreStore(path).save_score(-1)
    assert path.read_text(encoding="utf-8") == "5\n"


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = FileScoreStore(blocker / "highscore.txt")

    with caplog.at_level(logging.WARNING, logger="grid_snake.highscore"):
        store.save_score(8)

    assert "Could not save high score" in caplog.text
    assert store.load_score() == 0


def test_memory_store_round_trip():
    store = MemoryScoreStore()
    assert store.load_score() == 0
    store.save_score(4)
    assert store.load_score() == 4
    with pytest.raises(ValueError):
        store.save_score(-2)
    with pytest.raises(ValueError):
        MemoryScoreStore(-1)


@pytest.mark.parametrize("raw", [b"\xff\xfe", b"\xff\xfe\x00garbage", b"\x80\x81\x82\n"])
def test_undecodable_file_loads_as_zero(tmp_path, raw, caplog):
    path = tmp_path / "highscore.txt"
    path.write_bytes(raw)
    with caplog.at_level(logging.INFO, logger="grid_snake.highscore"):
        assert FileScoreStore(path).load_score() == 0
    assert "using 0" in caplog.text


def test_engine_starts_with_undecodable_high_score_file(tmp_path):
    path = tmp_path / "highscore.txt"
    path.write_bytes(b"\xff\xfe")

    engine = GameEngine(FileScoreStore(path), MagicMock(), FakeScheduler())

    assert engine.high_score == 0
