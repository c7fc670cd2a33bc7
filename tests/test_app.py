import random

import pygame
import pytest

from blockfall.app import WINDOW_SIZE, TetrisApp, color_for
from blockfall.game import Game
from blockfall.tetromino import CELL_SIZE, HEIGHT


@pytest.fixture
def app():
    return TetrisApp(game=Game(rng=random.Random(7)), start=0.0)


def test_color_for_known_values():
    assert color_for(1) == (255, 87, 34)
    assert color_for(7) == (0, 188, 212)
    assert len({color_for(v) for v in range(1, 8)}) == 7


@pytest.mark.parametrize("value", [0, 8, -1])
def test_color_for_unknown_value_raises(value):
    with pytest.raises(ValueError):
        color_for(value)


def test_handle_key_left_and_right(app):
    piece = app.game.current
    col = piece.col
    assert app.handle_key(pygame.K_LEFT) is True
    assert piece.col == col - 1
    assert app.handle_key(pygame.K_RIGHT) is True
    assert piece.col == col


def test_handle_key_rotate(app):
    piece = app.game.current
    angle = piece.angle
    assert app.handle_key(pygame.K_x) is True
    assert piece.angle == (angle + 1) % 4


def test_handle_key_down_moves_piece(app):
    piece = app.game.current
    row = piece.row
    app.handle_key(pygame.K_DOWN)
    assert piece.row == row + 1


def test_handle_key_space_locks_and_takes_next(app):
    upcoming = app.game.next_queue[0]
    assert app.handle_key(pygame.K_SPACE) is True
    assert app.game.current is upcoming
    assert any(cell > 0 for cell in app.game.landed_board[HEIGHT - 1])


def test_unbound_key_changes_nothing(app):
    piece = app.game.current
    before = (piece.row, piece.col, piece.angle)
    assert app.handle_key(pygame.K_q) is False
    assert (piece.row, piece.col, piece.angle) == before


def test_tick_waits_for_interval(app):
    piece = app.game.current
    row = piece.row
    assert app.tick(0.0) is False
    assert piece.row == row
    assert app.tick(app.game.interval + 1.0) is True
    assert piece.row == row + 1


def test_tick_raises_speed_level(app):
    level = app.game.speed_level()
    interval = app.game.interval
    app.tick(0.0)
    assert app.game.speed_level() == level + 1
    assert app.game.interval < interval


def test_tick_refreshes_current_board(app):
    app.tick(0.0)
    for r, c, value in app.game.current.cells():
        assert app.game.current_board[r][c] == value


def test_draw_paints_landed_cell(app):
    app.game.landed_board[HEIGHT - 1][0] = 1
    app.game.update_current_board()
    surface = app.draw()
    assert surface.get_size() == WINDOW_SIZE
    centre = (CELL_SIZE // 2, (HEIGHT - 1) * CELL_SIZE + CELL_SIZE // 2)
    assert tuple(surface.get_at(centre))[:3] == color_for(1)


def test_draw_background_is_white(app):
    surface = app.draw()
    assert tuple(surface.get_at((5, 5)))[:3] == (255, 255, 255)
    assert surface is app.surface


def test_draw_paints_falling_piece(app):
    app.game.update_current_board()
    surface = app.draw()
    r, c, value = next(app.game.current.cells())
    centre = (c * CELL_SIZE + CELL_SIZE // 2, r * CELL_SIZE + CELL_SIZE // 2)
    assert tuple(surface.get_at(centre))[:3] == color_for(value)