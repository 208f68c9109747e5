from pathlib import Path

from grid_snake import cli
from grid_snake import game as game_module
from grid_snake.audio import SilentPlayer
from grid_snake.config import HIGHSCORE_FILE, LOG_LEVEL
from grid_snake.highscore import FileScoreStore, MemoryScoreStore


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.highscore_file == HIGHSCORE_FILE
    assert args.log_level == LOG_LEVEL
    assert not args.no_save
    assert not args.mute


def test_log_level_is_case_insensitive():
    args = cli.build_parser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_score_store_selection(tmp_path):
    path = tmp_path / "best.txt"
    parser = cli.build_parser()

    store = cli.build_score_store(parser.parse_args(["--highscore-file", str(path)]))
    assert isinstance(store, FileScoreStore)
    assert store.path == Path(path)

    store = cli.build_score_store(parser.parse_args(["--no-save"]))
    assert isinstance(store, MemoryScoreStore)


def test_mute_uses_silent_player():
    args = cli.build_parser().parse_args(["--mute"])
    assert isinstance(cli.build_sound_player(args), SilentPlayer)


def test_main_builds_and_starts_game(monkeypatch, tmp_path):
    started = []

    class FakeGame:
        def __init__(self, score_store, sound_player):
            started.append((score_store, sound_player))

        def start(self):
            started.append("started")

    monkeypatch.setattr(game_module, "SnakeGame", FakeGame)
    path = tmp_path / "best.txt"

    assert cli.main(["--mute", "--highscore-file", str(path)]) == 0

    (store, player), marker = started
    assert isinstance(store, FileScoreStore)
    assert store.path == path
    assert isinstance(player, SilentPlayer)
    assert marker == "started"
