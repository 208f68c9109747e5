"""pygame window, rendering and input wiring around the game engine."""

from __future__ import annotations

import logging

import pygame

from .audio import AudioEngine, SoundPlayer
from .config import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    FONT_NAME,
    FPS,
    HINT_FONT_SIZE,
    KEY_TO_DIRECTION,
    PALETTE,
    RESTART_BUTTON_MARGIN,
    RESTART_BUTTON_SIZE,
    SCORE_FONT_SIZE,
    SOUND_FINISHED_EVENT,
    SUBTITLE_FONT_SIZE,
    TICK_EVENT,
    TITLE_FONT_SIZE,
)
from .engine import Board, GameEngine, GameSnapshot
from .highscore import ScoreStore
from .scheduler import PygameTickTimer

logger = logging.getLogger(__name__)


def restart_button_rect(board_width: int) -> pygame.Rect:
    """Top-right placement of the restart control."""
    width, height = RESTART_BUTTON_SIZE
    return pygame.Rect(
        board_width - width - RESTART_BUTTON_MARGIN,
        RESTART_BUTTON_MARGIN,
        width,
        height,
    )


class SnakeGame:
    """Draws engine snapshots and forwards keys, clicks and ticks to it."""

    def __init__(self, score_store: ScoreStore, sound_player: SoundPlayer) -> None:
        pygame.init()
        self.board = Board(BOARD_WIDTH, BOARD_HEIGHT)
        self.window = pygame.display.set_mode((self.board.width, self.board.height))
        pygame.display.set_caption("Snake")

        self.score_font = pygame.font.SysFont(FONT_NAME, SCORE_FONT_SIZE, bold=True)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)
        self.subtitle_font = pygame.font.SysFont(FONT_NAME, SUBTITLE_FONT_SIZE)
        self.hint_font = pygame.font.SysFont(FONT_NAME, HINT_FONT_SIZE)

        self.sound_player = sound_player
        self.timer = PygameTickTimer(TICK_EVENT)
        self.engine = GameEngine(
            score_store=score_store,
            sound_player=sound_player,
            scheduler=self.timer,
            board=self.board,
        )
        self.restart_rect = restart_button_rect(self.board.width)
        self.grid_surface = self._build_grid()

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Dispatch queued events; returns False once the player quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == TICK_EVENT:
                self.engine.tick()
            elif event.type == SOUND_FINISHED_EVENT:
                if isinstance(self.sound_player, AudioEngine):
                    self.sound_player.release_finished()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.restart_rect.collidepoint(event.pos):
                    self.engine.restart()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_r:
                    self.engine.restart()
                    continue
                new_dir = KEY_TO_DIRECTION.get(event.key)
                if new_dir:
                    self.engine.set_direction(new_dir)
        return True

    # --- Draw ----------------------------------------------------------

    def _build_grid(self) -> pygame.Surface:
        """Render the grid and border once so draw() only blits it."""
        width, height, size = self.board.width, self.board.height, self.board.grid_size
        surface = pygame.Surface((width, height))
        surface.fill(PALETTE["bg"])
        for col in range(self.board.columns + 1):
            pygame.draw.line(surface, PALETTE["grid"], (col * size, 0), (col * size, height))
        for row in range(self.board.rows + 1):
            pygame.draw.line(surface, PALETTE["grid"], (0, row * size), (width, row * size))
        # 2 px border
        pygame.draw.rect(surface, PALETTE["border"], surface.get_rect(), width=2)
        return surface

    def _draw_apple(self, snap: GameSnapshot) -> None:
        size = self.board.grid_size
        x, y = snap.apple
        pygame.draw.ellipse(self.window, PALETTE["apple"], pygame.Rect(x, y, size, size))
        shine = pygame.Rect(x + size // 3, y + size // 4, size // 4, size // 4)
        pygame.draw.ellipse(self.window, PALETTE["apple_shine"], shine)

    def _draw_snake(self, snap: GameSnapshot) -> None:
        size = self.board.grid_size
        for idx, (x, y) in enumerate(snap.body):
            rect = pygame.Rect(x, y, size, size)
            color = PALETTE["head"] if idx == 0 else PALETTE["body"]
            pygame.draw.rect(self.window, color, rect)
            pygame.draw.rect(self.window, PALETTE["outline"], rect, width=1)

    def show_score(self, snap: GameSnapshot) -> None:
        text = f"Apples: {snap.apples_eaten}  Best: {snap.high_score}"
        surf = self.score_font.render(text, True, PALETTE["text"])
        self.window.blit(surf, (12, 8))

    def _draw_game_over(self, snap: GameSnapshot) -> None:
        overlay = pygame.Surface((self.board.width, self.board.height), pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        self.window.blit(overlay, (0, 0))

        center_x = self.board.width // 2
        center_y = self.board.height // 2
        lines = [
            (self.title_font, "Game Over!", PALETTE["game_over"], -30),
            (self.subtitle_font, f"Score: {snap.apples_eaten}", PALETTE["text"], 20),
            (self.hint_font, "Press R to restart", PALETTE["text"], 60),
        ]
        for font, text, color, offset in lines:
            surf = font.render(text, True, color)
            self.window.blit(surf, surf.get_rect(center=(center_x, center_y + offset)))

    def _draw_restart_button(self) -> None:
        hovered = self.restart_rect.collidepoint(pygame.mouse.get_pos())
        button = pygame.Surface(self.restart_rect.size, pygame.SRCALPHA)
        button.fill(PALETTE["button_hover"] if hovered else PALETTE["button"])
        pygame.draw.rect(button, PALETTE["button_border"], button.get_rect(), width=1)
        label = self.score_font.render("R", True, PALETTE["text"])
        button.blit(label, label.get_rect(center=button.get_rect().center))
        self.window.blit(button, self.restart_rect.topleft)

    def draw(self) -> None:
        """Render the current frame (grid, apple, snake, score, overlays)."""
        snap = self.engine.snapshot()
        self.window.blit(self.grid_surface, (0, 0))
        if snap.running:
            self._draw_apple(snap)
            self._draw_snake(snap)
            self.show_score(snap)
        else:
            self._draw_game_over(snap)
        self._draw_restart_button()

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        """Run the main loop: start a session, handle events, then render."""
        clock = pygame.time.Clock()
        self.engine.start()
        running = True
        try:
            while running:
                clock.tick(FPS)
                running = self.handle_events()
                self.draw()
                pygame.display.flip()
        finally:
            self.timer.stop()
            if isinstance(self.sound_player, AudioEngine):
                self.sound_player.shutdown()
            pygame.quit()
            logger.info("Window closed")
