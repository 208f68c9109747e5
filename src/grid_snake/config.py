"""Centralized configuration and palette definitions for Grid Snake."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame

BASE_DIR = Path(__file__).resolve().parent


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "grid-snake"


DATA_DIR = Path(os.getenv("GRID_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("GRID_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
SOUNDS_DIR = Path(os.getenv("GRID_SNAKE_SOUNDS_DIR") or BASE_DIR / "sounds")
LOG_LEVEL: str = os.getenv("GRID_SNAKE_LOG_LEVEL", "WARNING").upper()

BOARD_WIDTH: int = 600
BOARD_HEIGHT: int = 600
GRID_SIZE: int = 25  # 600 / 25 => 24 cells per side
COLUMNS: int = BOARD_WIDTH // GRID_SIZE
ROWS: int = BOARD_HEIGHT // GRID_SIZE
INITIAL_BODY_PARTS: int = 6
TICK_INTERVAL_MS: int = 120

FPS: int = 60
FONT_NAME: str = "segoeui"
SCORE_FONT_SIZE: int = 20
TITLE_FONT_SIZE: int = 56
SUBTITLE_FONT_SIZE: int = 32
HINT_FONT_SIZE: int = 22

RESTART_BUTTON_SIZE: tuple[int, int] = (50, 40)
RESTART_BUTTON_MARGIN: int = 12

# pygame user events; the timer and mixer channels post these
TICK_EVENT: int = pygame.USEREVENT + 1
SOUND_FINISHED_EVENT: int = pygame.USEREVENT + 2

APPLE_CLIP: str = "apple"
GAME_OVER_CLIP: str = "game_over"

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
OPPOSITE: dict[str, str] = {
    "UP": "DOWN",
    "DOWN": "UP",
    "LEFT": "RIGHT",
    "RIGHT": "LEFT",
}
KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}

PALETTE = {
    "bg": pygame.Color(13, 13, 13),
    "grid": pygame.Color(30, 30, 30),
    "border": pygame.Color(80, 20, 20),
    "apple": pygame.Color(255, 0, 0),
    "apple_shine": pygame.Color(255, 255, 255),
    "head": pygame.Color(50, 205, 50),
    "body": pygame.Color(34, 139, 34),
    "outline": pygame.Color(64, 64, 64),
    "text": pygame.Color(255, 255, 255),
    "game_over": pygame.Color(255, 0, 0),
    "overlay": pygame.Color(0, 0, 0, 180),
    "button": pygame.Color(40, 40, 40, 220),
    "button_hover": pygame.Color(60, 60, 60, 240),
    "button_border": pygame.Color(70, 70, 70),
}
