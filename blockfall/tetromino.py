"""Tetromino shapes, their rotations and their movement on the grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

WIDTH = 10
HEIGHT = 24
CELL_SIZE = 50

Grid = tuple[tuple[int, ...], ...]


class ShapeKind(IntEnum):
    """The seven tetromino kinds; the value is also the cell colour code."""

    L = 1
    J = 2
    O = 3
    T = 4
    S = 5
    Z = 6
    I = 7


SHAPES: dict[ShapeKind, tuple[Grid, Grid, Grid, Grid]] = {
    ShapeKind.L: (
        ((1, 0), (1, 0), (1, 1)),
        ((1, 1, 1), (1, 0, 0)),
        ((1, 1), (0, 1), (0, 1)),
        ((0, 0, 1), (1, 1, 1)),
    ),
    ShapeKind.J: (
        ((0, 2), (0, 2), (2, 2)),
        ((2, 0, 0), (2, 2, 2)),
        ((2, 2), (2, 0), (2, 0)),
        ((2, 2, 2), (0, 0, 2)),
    ),
    ShapeKind.O: (
        ((3, 3), (3, 3)),
        ((3, 3), (3, 3)),
        ((3, 3), (3, 3)),
        ((3, 3), (3, 3)),
    ),
    ShapeKind.T: (
        ((0, 4, 0), (4, 4, 4)),
        ((4, 0), (4, 4), (4, 0)),
        ((4, 4, 4), (0, 4, 0)),
        ((0, 4), (4, 4), (0, 4)),
    ),
    ShapeKind.S: (
        ((0, 5, 5), (5, 5, 0)),
        ((5, 0), (5, 5), (0, 5)),
        ((0, 5, 5), (5, 5, 0)),
        ((5, 0), (5, 5), (0, 5)),
    ),
    ShapeKind.Z: (
        ((6, 6, 0), (0, 6, 6)),
        ((0, 6), (6, 6), (6, 0)),
        ((6, 6, 0), (0, 6, 6)),
        ((0, 6), (6, 6), (6, 0)),
    ),
    ShapeKind.I: (
        ((7,), (7,), (7,), (7,)),
        ((7, 7, 7, 7),),
        ((7,), (7,), (7,), (7,)),
        ((7, 7, 7, 7),),
    ),
}


@dataclass
class Tetromino:
    """A piece of a given kind placed at a row, column and rotation."""

    kind: ShapeKind
    row: int
    col: int
    angle: int = 0

    @property
    def shape(self) -> tuple[Grid, Grid, Grid, Grid]:
        return SHAPES[self.kind]

    def grid(self, angle: Optional[int] = None) -> Grid:
        """Return the cell grid for ``angle`` (the current angle by default)."""
        return SHAPES[self.kind][(self.angle if angle is None else angle) % 4]

    def cells(
        self,
        row: Optional[int] = None,
        col: Optional[int] = None,
        angle: Optional[int] = None,
    ) -> Iterator[tuple[int, int, int]]:
        """Yield ``(row, col, value)`` for every filled cell on the board.

        Position and angle default to the piece's own.
        """
        base_row = self.row if row is None else row
        base_col = self.col if col is None else col
        for i, line in enumerate(self.grid(angle)):
            for j, value in enumerate(line):
                if value > 0:
                    yield base_row + i, base_col + j, value

    def fall(self) -> None:
        self.row += 1

    def rotate(self) -> None:
        self.angle = (self.angle + 1) % 4

    def move(self, direction: int) -> None:
        """Shift one column: left for ``-1``, right for anything else."""
        self.col += -1 if direction == -1 else 1


def create_tetromino(kind: int, row: int, col: int, angle: int = 0) -> Tetromino:
    """Build a piece of ``kind``; raises ``ValueError`` for an unknown kind."""
    return Tetromino(ShapeKind(kind), row, col, angle % 4)