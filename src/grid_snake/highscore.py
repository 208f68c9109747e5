"""High score persistence: a single non-negative integer in a text file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load_score(self) -> int: ...

    def save_score(self, score: int) -> None: ...


def _check_score(score: int) -> None:
    if score < 0:
        raise ValueError(f"high score cannot be negative: {score}")


class FileScoreStore:
    """Keeps the best score as one line of text at ``path``.

    Loading never raises: a missing or corrupt file reads as 0. Saving
    rejects negative scores up front but only logs I/O failures.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load_score(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, ValueError) as exc:
            logger.info("No previous high score at %s (using 0): %s", self.path, exc)
            return 0

        line = text.strip().splitlines()[0].strip() if text.strip() else ""
        # plain non-negative decimal: no sign, no underscores
        if not (line.isascii() and line.isdigit()):
            logger.info("Unreadable high score %r in %s (using 0)", line, self.path)
            return 0
        return int(line)

    def save_score(self, score: int) -> None:
        _check_score(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{score}\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return
        logger.debug("Saved high score %d to %s", score, self.path)


class MemoryScoreStore:
    """Process-local store for runs that should not touch the disk."""

    def __init__(self, score: int = 0) -> None:
        _check_score(score)
        self.score = score

    def load_score(self) -> int:
        return self.score

    def save_score(self, score: int) -> None:
        _check_score(score)
        self.score = score
