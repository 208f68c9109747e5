"""Command-line entry point for Grid Snake.

Usage:
    grid-snake
    grid-snake --highscore-file ./best.txt --log-level INFO
    grid-snake --mute --no-save
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .audio import AudioEngine, SilentPlayer, SoundPlayer
from .config import HIGHSCORE_FILE, LOG_LEVEL
from .highscore import FileScoreStore, MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Classic single-player Snake on a 24x24 grid.",
    )
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=HIGHSCORE_FILE,
        help=f"Where the best score is kept (default: {HIGHSCORE_FILE})",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Keep the high score in memory only",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable sound effects",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_score_store(args: argparse.Namespace) -> ScoreStore:
    if args.no_save:
        return MemoryScoreStore()
    return FileScoreStore(args.highscore_file)


def build_sound_player(args: argparse.Namespace) -> SoundPlayer:
    if args.mute:
        return SilentPlayer()
    return AudioEngine()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    # imported late so --help works without opening a window
    from .game import SnakeGame

    score_store = build_score_store(args)
    sound_player = build_sound_player(args)
    logger.info("Starting Grid Snake (high score file: %s)", args.highscore_file)
    SnakeGame(score_store, sound_player).start()
    return 0
