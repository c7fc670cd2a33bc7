import pytest

from blockfall.tetromino import (
    ShapeKind,
    Tetromino,
    create_tetromino,
)


def test_l_shape_grids_match_definition():
    piece = create_tetromino(ShapeKind.L, 1, 4)
    assert piece.grid(0) == ((1, 0), (1, 0), (1, 1))
    assert piece.grid(3) == ((0, 0, 1), (1, 1, 1))


def test_grid_defaults_to_current_angle():
    piece = create_tetromino(ShapeKind.T, 2, 4, 2)
    assert piece.grid() == ((4, 4, 4), (0, 4, 0))


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_every_rotation_has_four_cells_of_its_kind(kind):
    piece = create_tetromino(kind, 0, 0)
    for angle in range(4):
        cells = list(piece.cells(angle=angle))
        assert len(cells) == 4
        assert {value for _, _, value in cells} == {int(kind)}


@pytest.mark.parametrize("kind", list(ShapeKind))
def test_grids_are_rectangular(kind):
    piece = create_tetromino(kind, 0, 0)
    for angle in range(4):
        grid = piece.grid(angle)
        assert len({len(line) for line in grid}) == 1


def test_i_shape_dimensions():
    piece = create_tetromino(ShapeKind.I, 0, 4)
    assert len(piece.grid(0)) == 4
    assert len(piece.grid(0)[0]) == 1
    assert piece.grid(1) == ((7, 7, 7, 7),)


def test_s_shape_repeats_after_half_turn():
    piece = create_tetromino(ShapeKind.S, 2, 4)
    assert piece.grid(0) == piece.grid(2)
    assert piece.grid(1) == piece.grid(3)


def test_rotate_cycles_through_four_angles():
    piece = create_tetromino(ShapeKind.J, 1, 4)
    piece.rotate()
    assert piece.angle == 1
    for _ in range(3):
        piece.rotate()
    assert piece.angle == 0


def test_move_left_and_right():
    piece = create_tetromino(ShapeKind.O, 2, 4)
    piece.move(-1)
    assert piece.col == 3
    piece.move(1)
    piece.move(1)
    assert piece.col == 5


def test_move_with_other_direction_goes_right():
    piece = create_tetromino(ShapeKind.O, 2, 4)
    piece.move(5)
    assert piece.col == 5


def test_fall_increases_row():
    piece = create_tetromino(ShapeKind.Z, 2, 4)
    piece.fall()
    assert piece.row == 3
    assert piece.col == 4


def test_cells_at_own_position():
    piece = create_tetromino(ShapeKind.O, 2, 4)
    assert {(r, c) for r, c, _ in piece.cells()} == {(2, 4), (2, 5), (3, 4), (3, 5)}


def test_cells_with_override_leaves_piece_unchanged():
    piece = create_tetromino(ShapeKind.I, 0, 4)
    cells = {(r, c) for r, c, _ in piece.cells(10, 2, 1)}
    assert cells == {(10, 2), (10, 3), (10, 4), (10, 5)}
    assert (piece.row, piece.col, piece.angle) == (0, 4, 0)


def test_create_tetromino_accepts_int_kind():
    piece = create_tetromino(7, 0, 4)
    assert piece.kind is ShapeKind.I
    assert piece == Tetromino(ShapeKind.I, 0, 4, 0)


@pytest.mark.parametrize("kind", [0, 8, -1])
def test_create_tetromino_rejects_unknown_kind(kind):
    with pytest.raises(ValueError):
        create_tetromino(kind, 0, 0)