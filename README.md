# blockfall

A falling-block puzzle game that runs in a pygame window. Pieces drop
onto a board 10 cells wide and 24 rows high. The top four rows are the
spawn area. The game draws the pieces there but no grid. A row is
cleared when every cell in it is filled. The game ends when a landed
block sits in the lowest row of the spawn area.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
blockfall
```

Options:

| Option        | Meaning                                                   |
|---------------|-----------------------------------------------------------|
| `--seed N`    | seed the random piece sequence, so a game can be replayed |
| `--font PATH` | TrueType font for the text (pygame's default otherwise)   |

Keys:

| Key        | Action                                |
|------------|---------------------------------------|
| Left/Right | move the piece sideways               |
| Down       | step the piece down one row           |
| X          | rotate the piece                      |
| Space      | drop the piece straight to the floor  |

An outline below the falling piece marks where it would land. The side
panel shows your score, the current speed level and the next four
pieces.

### Scoring and speed

If one piece clears *n* rows at once, you score `n * (n + 1) / 2`
points. One row is worth 1, two rows 3, three rows 6 and four rows 10.

The drop interval starts at 0.8 s. The score bands are 0–9, 10–19 and so
on, up to 13 bands. The first time play enters a new band, the interval
gets 0.1 s shorter and the speed level goes up by one. The first band
applies on the first frame, so play starts at level 1 with a 0.7 s
interval. Starting a new game resets the score and the board. The speed
reached in the last game stays.

When a game ends, the window shows your final score for three seconds.
It then asks **Play Again? (Y/N)**. Pressing N, or closing the window,
quits.

## Using the game logic directly

The rules are in `blockfall.game.Game`, which does not depend on any
window. You can use it for scripted play or testing. Pass a
`random.Random` to get a repeatable piece sequence:

```python
import random
from blockfall.game import Game, calculate_score

game = Game(rng=random.Random(1))
game.try_move_left()
game.try_rotate()
game.hard_drop()          # returns the number of rows cleared
print(game.point, game.speed_level(), game.is_game_over())
print(calculate_score(4))  # 10
```

`Game` holds these attributes:

- `current`: the falling piece
- `next_queue`: the next five pieces
- `landed_board`: the cells that have landed
- `current_board`: the landed cells with the falling piece drawn over them

`progress()` moves the piece down one row, or locks it in place when it
cannot move. `ghost_offset()` gives how far the piece can still drop.
Changing the speed is left to the caller, through `update_speed()` and
`interval`.

The pieces are in `blockfall.tetromino`:

- `ShapeKind` lists the seven kinds.
- `create_tetromino(kind, row, col)` builds a piece.
- `Tetromino.cells()` yields the board cells a piece covers.

`blockfall.app.TetrisApp` connects a `Game` to keyboard input and a
clock and draws it. `blockfall.app.color_for` maps a cell value to its
colour.

## What it does not do

The game has no pause and no hold piece. It does not save high scores,
and it keeps no data between runs.

## Running the tests

```
pip install .[test]
pytest
```