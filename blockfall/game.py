"""Game state: the boards, the falling piece, scoring and speed."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from blockfall.tetromino import HEIGHT, WIDTH, ShapeKind, Tetromino, create_tetromino

HIDDEN_ROWS = 4
QUEUE_SIZE = 5
SPEED_LEVELS = 13
INITIAL_INTERVAL = 0.8
INTERVAL_STEP = 0.1

SPAWN_POSITIONS: dict[ShapeKind, tuple[int, int]] = {
    ShapeKind.L: (1, 4),
    ShapeKind.J: (1, 4),
    ShapeKind.O: (2, 4),
    ShapeKind.T: (2, 4),
    ShapeKind.S: (2, 4),
    ShapeKind.Z: (2, 4),
    ShapeKind.I: (0, 4),
}


def calculate_score(rows_count: int) -> int:
    """Points for clearing ``rows_count`` rows at once."""
    return rows_count * (rows_count + 1) // 2


def _empty_board() -> list[list[int]]:
    return [[0] * WIDTH for _ in range(HEIGHT)]


class Game:
    """A running game: landed cells, the falling piece and the upcoming pieces."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = random.Random() if rng is None else rng
        self.current: Tetromino = self.random_tetromino()
        self.point = 0
        self.current_board = _empty_board()
        self.landed_board = _empty_board()
        self.speed_levels = [True] * SPEED_LEVELS
        self.interval = INITIAL_INTERVAL
        self.next_queue: list[Tetromino] = []
        self.refill_next_queue()

    def random_tetromino(self) -> Tetromino:
        """A new piece of a random kind at its spawn position."""
        kind = ShapeKind(self._rng.randint(1, 7))
        row, col = SPAWN_POSITIONS[kind]
        return create_tetromino(kind, row, col)

    def refill_next_queue(self) -> None:
        while len(self.next_queue) < QUEUE_SIZE:
            self.next_queue.append(self.random_tetromino())

    def update_current_board(self) -> None:
        """Redraw the visible board: landed cells with the falling piece on top."""
        self.current_board = [list(line) for line in self.landed_board]
        for r, c, value in self.current.cells():
            self.current_board[r][c] = value

    def fits(self, row: int, col: int, angle: int) -> bool:
        """Whether the falling piece's shape at ``angle`` fits at ``(row, col)``."""
        grid = self.current.grid(angle)
        if col < 0 or row < 0:
            return False
        if col + len(grid[0]) > WIDTH or row + len(grid) > HEIGHT:
            return False
        return all(
            self.landed_board[r][c] == 0
            for r, c, _ in self.current.cells(row, col, angle)
        )

    def _merge_current(self) -> None:
        for r, c, value in self.current.cells():
            self.landed_board[r][c] = value

    def find_full_rows(self) -> list[int]:
        """Indices of full playfield rows, from the bottom up."""
        return [
            i
            for i in range(HEIGHT - 1, HIDDEN_ROWS - 1, -1)
            if all(cell != 0 for cell in self.landed_board[i])
        ]

    def clear_rows(self, rows: Iterable[int]) -> None:
        """Remove the given rows, shifting the playfield above them down."""
        for row in reversed(list(rows)):
            if row < HIDDEN_ROWS:
                continue
            del self.landed_board[row]
            self.landed_board.insert(HIDDEN_ROWS, list(self.landed_board[HIDDEN_ROWS - 1]))

    def _lock_current(self) -> int:
        self._merge_current()
        rows = self.find_full_rows()
        self.clear_rows(rows)
        self.point += calculate_score(len(rows))
        self.current = self.next_queue.pop(0)
        self.refill_next_queue()
        return len(rows)

    def progress(self) -> bool:
        """Drop the piece one row, or lock it in place. True if it fell."""
        piece = self.current
        if self.fits(piece.row + 1, piece.col, piece.angle):
            piece.fall()
            return True
        self._lock_current()
        return False

    def try_move_down(self) -> bool:
        fell = self.progress()
        self.update_current_board()
        return fell

    def _try_shift(self, direction: int) -> bool:
        piece = self.current
        if not self.fits(piece.row, piece.col + direction, piece.angle):
            return False
        piece.move(direction)
        self.update_current_board()
        return True

    def try_move_left(self) -> bool:
        return self._try_shift(-1)

    def try_move_right(self) -> bool:
        return self._try_shift(1)

    def try_rotate(self) -> bool:
        piece = self.current
        if not self.fits(piece.row, piece.col, (piece.angle + 1) % 4):
            return False
        piece.rotate()
        self.update_current_board()
        return True

    def hard_drop(self) -> int:
        """Drop the piece to the bottom and lock it; returns rows cleared."""
        piece = self.current
        while self.fits(piece.row + 1, piece.col, piece.angle):
            piece.fall()
        cleared = self._lock_current()
        self.update_current_board()
        return cleared

    def ghost_offset(self) -> int:
        """How many rows the falling piece can still drop."""
        piece = self.current
        k = 1
        while self.fits(piece.row + k, piece.col, piece.angle):
            k += 1
        return k - 1

    def is_game_over(self) -> bool:
        return any(cell > 0 for cell in self.landed_board[HIDDEN_ROWS - 1])

    def update_speed(self) -> None:
        """Speed up once for every ten points reached."""
        index = self.point // 10
        if index < len(self.speed_levels) and self.speed_levels[index]:
            self.speed_levels[index] = False
            self.interval -= INTERVAL_STEP

    def speed_level(self) -> int:
        return len(self.speed_levels) - sum(self.speed_levels)

    def reset(self) -> None:
        """Start over with empty boards and no points; speed is kept."""
        self.point = 0
        self.current = self.random_tetromino()
        self.current_board = _empty_board()
        self.landed_board = _empty_board()
        self.refill_next_queue()