"""Game rules: the falling tetrimino, its shadow, scoring, gravity and placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from tetrirs.collision import (
    check_lowest_collision,
    check_tetrimino_collision,
    corrected_translation,
    corrected_translation_rotation,
)
from tetrirs.config import CELL_SIZE, Vec3
from tetrirs.grid import GridMatrix
from tetrirs.shapes import VARIANTS, Square, Variant, cell_data

SPAWN_POSITION = Vec3(3.0 * CELL_SIZE, 0.0, 1.0)
SHADOW_DEPTH = 0.1
GRAVITY_INTERVAL = 1.0


class Movement(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    SPACE = "space"


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Tetrimino:
    """The active piece: a variant, its position and its four squares."""

    variant: Variant
    translation: Vec3 = SPAWN_POSITION
    squares: list[Square] = field(init=False)

    def __post_init__(self) -> None:
        cells = cell_data(self.variant)
        self.squares = [Square(child_id, cells) for child_id in range(4)]

    @property
    def color(self) -> Variant:
        return self.variant

    def child_positions(self) -> list[Vec3]:
        """Offsets of the four squares relative to the tetrimino."""
        return [square.position() for square in self.squares]


def points_for(rows: int) -> int:
    """Points awarded for clearing the given number of rows at once."""
    if rows < 0:
        raise ValueError("row count cannot be negative")
    if rows == 0:
        return 0
    return 100 * 2 ** (rows - 1)


@dataclass
class Scoreboard:
    score: int = 0

    def add(self, rows: int) -> None:
        """Add the points for a clear of ``rows`` rows."""
        self.score += points_for(rows)

    @property
    def text(self) -> str:
        return str(self.score)


class Game:
    """A complete game: the matrix, the active tetrimino and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._elapsed = 0.0
        self.restart()

    def restart(self) -> None:
        """Start over with an empty field and a zero score."""
        self.matrix = GridMatrix()
        self.scoreboard = Scoreboard()
        self.state = GameState.PLAYING
        self.spawn_tetrimino()

    def spawn_tetrimino(self) -> Tetrimino:
        """Replace the active tetrimino with a random new one at the spawn point."""
        self.tetrimino = Tetrimino(self.rng.choice(VARIANTS))
        return self.tetrimino

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def move(self, movement: Movement) -> None:
        """Move the active tetrimino; a blocked drop places it."""
        if self.game_over:
            return
        piece = self.tetrimino
        positions = piece.child_positions()
        here = piece.translation

        if movement is Movement.RIGHT:
            if check_tetrimino_collision(self.matrix, here, positions, 1.0, 0.0):
                return
            step = Vec3(CELL_SIZE, 0.0, 0.0)
        elif movement is Movement.LEFT:
            if check_tetrimino_collision(self.matrix, here, positions, -1.0, 0.0):
                return
            step = Vec3(-CELL_SIZE, 0.0, 0.0)
        elif movement is Movement.DOWN:
            if check_tetrimino_collision(self.matrix, here, positions, 0.0, 1.0):
                self.place()
                return
            step = Vec3(0.0, -CELL_SIZE, 0.0)
        else:
            drop = check_lowest_collision(self.matrix, here, positions)
            piece.translation = here - Vec3(0.0, drop, 0.0)
            self.place()
            return

        piece.translation = corrected_translation(here, positions, step)

    def rotate(self) -> None:
        """Rotate the active tetrimino unless the rotated shape would collide."""
        if self.game_over:
            return
        piece = self.tetrimino
        positions = piece.child_positions()
        targets = [square.next_position() for square in piece.squares]
        if check_tetrimino_collision(self.matrix, piece.translation, targets, 0.0, 0.0):
            return
        movements = []
        for square in piece.squares:
            movements.append(square.next_position() - square.position())
            square.rotate()
        piece.translation = corrected_translation_rotation(
            piece.translation, positions, movements
        )

    def place(self) -> int:
        """Lock the tetrimino into the matrix, clear rows and return how many."""
        piece = self.tetrimino
        self.matrix.place_tetrimino(
            piece.translation,
            [(position, piece.color) for position in piece.child_positions()],
        )
        cleared = self.matrix.empty_rows(self.matrix.full_rows())
        if self.matrix.is_full():
            self.state = GameState.GAME_OVER
            return cleared
        self.spawn_tetrimino()
        self.scoreboard.add(cleared)
        return cleared

    def shadow_position(self) -> Vec3:
        """Where the active tetrimino would come to rest if dropped now."""
        piece = self.tetrimino
        drop = check_lowest_collision(
            self.matrix, piece.translation, piece.child_positions()
        )
        return Vec3(piece.translation.x, piece.translation.y - drop, SHADOW_DEPTH)

    def tick(self, seconds: float) -> bool:
        """Advance the gravity timer; return True when the piece was pulled down."""
        if seconds < 0:
            raise ValueError("time cannot run backwards")
        if self.game_over:
            return False
        self._elapsed += seconds
        if self._elapsed < GRAVITY_INTERVAL:
            return False
        self._elapsed %= GRAVITY_INTERVAL
        self.move(Movement.DOWN)
        return True