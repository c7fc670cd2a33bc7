"""The playable window: input handling, timing and drawing with pygame."""

from __future__ import annotations

import argparse
import random
import time
from typing import Optional, Sequence

import pygame

from blockfall.game import HIDDEN_ROWS, Game
from blockfall.tetromino import CELL_SIZE, HEIGHT, WIDTH

SIDE_PANEL = 200
WINDOW_SIZE = (WIDTH * CELL_SIZE + SIDE_PANEL, HEIGHT * CELL_SIZE)
TITLE = "Tetris Game"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GHOST_OUTLINE = (255, 255, 255, 128)

PREVIEW_COUNT = 4
PREVIEW_SCALE = 0.6
PREVIEW_GAP = 10
GAME_OVER_PAUSE_MS = 3000

_COLORS: dict[int, tuple[int, int, int]] = {
    1: (255, 87, 34),
    2: (63, 81, 181),
    3: (255, 235, 59),
    4: (156, 39, 176),
    5: (76, 175, 80),
    6: (183, 28, 28),
    7: (0, 188, 212),
}


def color_for(value: int) -> tuple[int, int, int]:
    """The RGB colour of a cell value; raises ``ValueError`` for an unknown one."""
    try:
        return _COLORS[value]
    except KeyError:
        raise ValueError(f"no colour for cell value {value!r}") from None


class TetrisApp:
    """Drives a :class:`Game` from keyboard input and a clock, and draws it."""

    def __init__(
        self,
        game: Optional[Game] = None,
        surface: Optional[pygame.Surface] = None,
        font_path: Optional[str] = None,
        start: Optional[float] = None,
    ) -> None:
        self.game = Game() if game is None else game
        self.surface = pygame.Surface(WINDOW_SIZE) if surface is None else surface
        self.font_path = font_path
        self._fonts: dict[int, pygame.font.Font] = {}
        self._start = time.monotonic() if start is None else start
        self._actions = {
            pygame.K_LEFT: self.game.try_move_left,
            pygame.K_RIGHT: self.game.try_move_right,
            pygame.K_DOWN: self.game.try_move_down,
            pygame.K_x: self.game.try_rotate,
            pygame.K_SPACE: self.game.hard_drop,
        }

    def handle_key(self, key: int) -> bool:
        """Apply the action bound to ``key``; False if the key is not bound."""
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True

    def tick(self, now: float) -> bool:
        """Advance the clock to ``now``; True if the piece was stepped down."""
        game = self.game
        game.update_speed()
        stepped = False
        if now - self._start >= game.interval:
            game.progress()
            self._start = now
            stepped = True
        game.update_current_board()
        return stepped

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(self.font_path, size)
        return self._fonts[size]

    def _draw_cell(self, x: float, y: float, size: float, value: int) -> None:
        rect = pygame.Rect(round(x), round(y), round(size), round(size))
        pygame.draw.rect(self.surface, color_for(value), rect)
        pygame.draw.rect(self.surface, BLACK, rect, 1)

    def draw(self) -> pygame.Surface:
        """Render the board, ghost piece, score, speed and preview; return the surface."""
        surface = self.surface
        game = self.game
        surface.fill(WHITE)

        frame = pygame.Rect(
            0, HIDDEN_ROWS * CELL_SIZE, WIDTH * CELL_SIZE, (HEIGHT - HIDDEN_ROWS) * CELL_SIZE
        )
        pygame.draw.rect(surface, BLACK, frame, 4)

        for i in range(HIDDEN_ROWS, HEIGHT):
            for j in range(WIDTH):
                cell = pygame.Rect(j * CELL_SIZE, i * CELL_SIZE, CELL_SIZE, CELL_SIZE)
                pygame.draw.rect(surface, BLACK, cell, 1)

        for i, line in enumerate(game.current_board):
            for j, value in enumerate(line):
                if value > 0:
                    self._draw_cell(j * CELL_SIZE, i * CELL_SIZE, CELL_SIZE, value)

        offset = game.ghost_offset()
        for r, c, _ in game.current.cells():
            ghost = pygame.Rect(c * CELL_SIZE, (r + offset) * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(surface, GHOST_OUTLINE, ghost, 2)

        font = self._font(24)
        panel_x = WIDTH * CELL_SIZE + 20
        surface.blit(font.render(f"Score: {game.point}", True, BLACK), (panel_x, 50))
        surface.blit(
            font.render(f"Speed: Lv.{game.speed_level()}", True, BLACK), (panel_x, 90)
        )

        preview_size = CELL_SIZE * PREVIEW_SCALE
        preview_y = 150.0
        for piece in game.next_queue[:PREVIEW_COUNT]:
            grid = piece.grid(0)
            for i, line in enumerate(grid):
                for j, value in enumerate(line):
                    if value > 0:
                        self._draw_cell(
                            panel_x + j * preview_size,
                            preview_y + i * preview_size,
                            preview_size,
                            value,
                        )
            preview_y += len(grid) * preview_size + PREVIEW_GAP

        return surface

    def _show_game_over(self) -> None:
        surface = self.surface
        width, height = surface.get_size()
        font = self._font(30)
        text = font.render(f"Game Over! Your Score: {self.game.point}", True, RED)
        surface.fill(BLACK)
        pygame.draw.rect(surface, WHITE, pygame.Rect(0, height // 2 - 50, width, 100))
        surface.blit(
            text,
            ((width - text.get_width()) / 2, height / 2 - text.get_height() / 2),
        )
        pygame.display.flip()

    def _ask_play_again(self) -> bool:
        width, height = self.surface.get_size()
        text = self._font(30).render("Play Again? (Y/N)", True, RED)
        clock = pygame.time.Clock()
        while True:
            self.surface.fill(BLACK)
            self.surface.blit(text, (width // 2 - 100, height // 2 - 20))
            pygame.display.flip()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_y:
                        return True
                    if event.key == pygame.K_n:
                        return False
            clock.tick(60)

    def run(self) -> None:
        """Open the window and play until it is closed or the player declines."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(TITLE)
            self._fonts.clear()
            self._start = time.monotonic()
            clock = pygame.time.Clock()
            running = True
            while running:
                self.tick(time.monotonic())
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                if not running:
                    break
                self.draw()
                pygame.display.flip()
                if self.game.is_game_over():
                    self._show_game_over()
                    pygame.time.wait(GAME_OVER_PAUSE_MS)
                    if self._ask_play_again():
                        self.game.reset()
                        self._start = time.monotonic()
                    else:
                        running = False
                clock.tick(120)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the piece sequence")
    parser.add_argument("--font", default=None, help="path of a TrueType font to use")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    TetrisApp(game=Game(rng=rng), font_path=args.font).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())