import os
import random
from unittest.mock import MagicMock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from grid_snake.engine import Board, GameEngine
from grid_snake.highscore import MemoryScoreStore


class FakeScheduler:
    def __init__(self):
        self.active = False
        self.started = []
        self.stop_calls = 0

    def start(self, interval_ms):
        self.started.append(interval_ms)
        self.active = True

    def stop(self):
        self.stop_calls += 1
        self.active = False


class ScriptedRng:
    """Yields the given (column, row) cells in order, then seeded randoms."""

    def __init__(self, cells=(), seed=0):
        self._values = [v for cell in cells for v in cell]
        self._fallback = random.Random(seed)

    def randrange(self, stop):
        if self._values:
            return self._values.pop(0)
        return self._fallback.randrange(stop)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def sound():
    return MagicMock()


@pytest.fixture
def make_engine(scheduler, sound):
    def _make(apples=((0, 0),), store=None, board=None, rng=None, **kwargs):
        return GameEngine(
            score_store=store if store is not None else MemoryScoreStore(),
            sound_player=sound,
            scheduler=scheduler,
            board=board or Board(),
            rng=rng or ScriptedRng(apples),
            **kwargs,
        )

    return _make
