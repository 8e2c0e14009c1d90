# tetrirs

A falling-block puzzle game on a 10 × 20 board, played in a 900 × 900 window.
Pieces fall one row per second. A grey ghost piece shows where the current
piece will land. Clear full rows to score points.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and reads the keyboard.

## Playing

```
tetrirs
```

To get the same sequence of pieces each time, give a seed:

```
tetrirs --seed 42
```

| Key                 | Action                         |
|---------------------|--------------------------------|
| `W`                 | Rotate the piece               |
| `A` / Left arrow    | Move left                      |
| `D` / Right arrow   | Move right                     |
| `S` / Down arrow    | Move down one row              |
| `Space`             | Drop the piece to the bottom   |
| `R`                 | Restart after the game is over |

Only the first key pressed in each frame is acted on. A rotation that would
overlap the floor or a filled cell is ignored; a move or rotation that would
push the piece past the left, right or bottom edge is pushed back inside.

### Scoring

When a piece lands, each full row is removed and the rows above it move down.
The score goes up by `100 × 2^(rows − 1)`: 100 for one row, 200 for two, 400
for three and 800 for four at once. The score is shown above the board.

The game ends when a piece comes to rest with any block in the top three rows.
A "Game Over!" message covers the board; press `R` to begin again.

## Using the game logic

The rules live in `tetrirs.game` and do not need a window:

```python
from tetrirs.game import Game, Movement

game = Game()
game.move(Movement.LEFT)
game.rotate()
game.move(Movement.SPACE)  # hard drop, places the piece
print(game.scoreboard.score, game.state)
```

`Game.tick(seconds)` moves time forward, and the piece drops a row each time a
full second has passed; it returns `True` when that happened.
`Game.shadow_position()` gives where the current piece would land, and
`Game.restart()` starts over with an empty board and a zero score. Pass a
`random.Random` to `Game` to fix the order of pieces.

The board itself is `tetrirs.grid.GridMatrix`, the piece shapes and their
rotations are in `tetrirs.shapes`, and the collision and edge checks are in
`tetrirs.collision`.

## What it does not do

The score is not saved between games, and there is no preview of the next
piece. The score and messages are drawn with pygame's built-in font.

## Running the tests

```
pip install .[test]
pytest
```