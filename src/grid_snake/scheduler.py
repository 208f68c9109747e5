"""Fixed-rate tick scheduling on top of pygame timer events."""

from __future__ import annotations

import logging
from typing import Protocol

import pygame

from .config import TICK_EVENT

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    active: bool

    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class PygameTickTimer:
    """Posts ``event_type`` to the pygame queue every ``interval_ms``.

    The main loop turns each posted event into one ``GameEngine.tick()``.
    Starting an active timer replaces the previous interval.
    """

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        self.event_type = event_type
        self.interval_ms = 0
        self.active = False

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive: {interval_ms}")
        pygame.time.set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms
        self.active = True
        logger.debug("Tick timer started at %d ms", interval_ms)

    def stop(self) -> None:
        if not self.active:
            return
        # an interval of 0 disables the pygame timer
        pygame.time.set_timer(self.event_type, 0)
        self.active = False
        logger.debug("Tick timer stopped")
