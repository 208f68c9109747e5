"""Entry point for the Grid Snake game."""

from __future__ import annotations

import sys

from grid_snake.cli import main

if __name__ == "__main__":
    sys.exit(main())
