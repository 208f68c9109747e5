"""Discrete-time Snake simulation, independent of any UI."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from .audio import SoundPlayer
from .config import (
    APPLE_CLIP,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DIRECTIONS,
    GAME_OVER_CLIP,
    GRID_SIZE,
    INITIAL_BODY_PARTS,
    OPPOSITE,
    TICK_INTERVAL_MS,
)
from .highscore import ScoreStore
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Board:
    """Pixel size of the playing field and the side of one grid cell."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    grid_size: int = GRID_SIZE

    @property
    def columns(self) -> int:
        return self.width // self.grid_size

    @property
    def rows(self) -> int:
        return self.height // self.grid_size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of the engine handed to the renderer once per frame."""

    board: Board
    body: tuple[Cell, ...]
    apple: Cell
    apples_eaten: int
    high_score: int
    direction: str
    running: bool


class GameEngine:
    """Owns snake, apple, direction, score and run state for one player.

    The engine never touches files, audio devices or timers directly; it
    calls the injected ``score_store``, ``sound_player`` and ``scheduler``.
    """

    def __init__(
        self,
        score_store: ScoreStore,
        sound_player: SoundPlayer,
        scheduler: Scheduler,
        board: Board | None = None,
        rng: random.Random | None = None,
        initial_body_parts: int = INITIAL_BODY_PARTS,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self.board = board or Board()
        self.score_store = score_store
        self.sound_player = sound_player
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.initial_body_parts = initial_body_parts
        self.tick_interval_ms = tick_interval_ms

        self._body: deque[Cell] = deque()
        self._apple: Cell = (0, 0)
        self._direction = "RIGHT"
        self._pending_direction = "RIGHT"
        self._apples_eaten = 0
        self._running = False
        self._high_score = score_store.load_score()

    # --- Read-only state -----------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def body(self) -> tuple[Cell, ...]:
        return tuple(self._body)

    @property
    def head(self) -> Cell:
        return self._body[0]

    @property
    def body_parts(self) -> int:
        return len(self._body)

    @property
    def apple(self) -> Cell:
        return self._apple

    @property
    def apples_eaten(self) -> int:
        return self._apples_eaten

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def direction(self) -> str:
        return self._direction

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board,
            body=self.body,
            apple=self._apple,
            apples_eaten=self._apples_eaten,
            high_score=self._high_score,
            direction=self._direction,
            running=self._running,
        )

    # --- Session lifecycle ---------------------------------------------

    def start(self) -> None:
        """Begin a fresh session, discarding any session in progress."""
        size = self.board.grid_size
        head_col = self.board.columns // 2
        row_y = (self.board.rows // 2) * size
        self._body = deque(
            ((head_col - i) * size, row_y) for i in range(self.initial_body_parts)
        )
        self._direction = "RIGHT"
        self._pending_direction = "RIGHT"
        self._apples_eaten = 0
        self._running = True
        self.spawn_apple()

        self.scheduler.stop()
        self.scheduler.start(self.tick_interval_ms)
        logger.info("Session started (high score %d)", self._high_score)

    def restart(self) -> None:
        """Start again after game over; ignored while a session is running."""
        if self._running:
            return
        self.start()

    def set_direction(self, direction: str) -> None:
        """Queue a turn for the next tick unless it would reverse the snake."""
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        if not self._running or direction == OPPOSITE[self._direction]:
            return
        self._pending_direction = direction

    # --- Logic step ----------------------------------------------------

    def tick(self) -> bool:
        """Advance the snake by exactly one grid cell.

        Returns whether the session is still running afterwards.
        """
        if not self._running:
            return False

        self._direction = self._pending_direction
        dx, dy = DIRECTIONS[self._direction]
        head_x, head_y = self._body[0]
        size = self.board.grid_size
        new_head = (head_x + dx * size, head_y + dy * size)
        self._body.appendleft(new_head)

        if new_head == self._apple:
            self._apples_eaten += 1
            self.spawn_apple()
            self.sound_player.play(APPLE_CLIP)
        else:
            self._body.pop()

        if not self.board.contains(new_head) or self._hits_body(new_head):
            self._end_game()
        return self._running

    def _hits_body(self, head: Cell) -> bool:
        it = iter(self._body)
        next(it)
        return any(cell == head for cell in it)

    def spawn_apple(self) -> Cell:
        """Place the apple on a random cell not covered by the snake.

        Resamples without limit, so a board with no free cell never returns.
        """
        size = self.board.grid_size
        occupied = set(self._body)
        while True:
            pos = (
                self.rng.randrange(self.board.columns) * size,
                self.rng.randrange(self.board.rows) * size,
            )
            if pos not in occupied:
                self._apple = pos
                return pos

    # --- Game over -----------------------------------------------------

    def _end_game(self) -> None:
        """Freeze play and register a new high score if one was set."""
        self._running = False
        self.scheduler.stop()
        self.sound_player.play(GAME_OVER_CLIP)
        logger.info("Game over with %d apples", self._apples_eaten)

        if self._apples_eaten > self._high_score:
            self._high_score = self._apples_eaten
            logger.info("New high score: %d", self._high_score)
            self.score_store.save_score(self._high_score)
