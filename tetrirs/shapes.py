"""Tetrimino variants, their rotation tables and the squares they are made of."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tetrirs.config import CELL_SIZE, Vec3

Rotations = tuple[tuple[Vec3, Vec3, Vec3, Vec3], ...]


class Variant(Enum):
    """The seven tetrimino shapes, in their fixed order."""

    I = 0  # noqa: E741
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


def _rotations(*tables: tuple[tuple[float, float], ...]) -> Rotations:
    return tuple(tuple(Vec3(x, y, 0.0) for x, y in table) for table in tables)


_CELLS: dict[Variant, Rotations] = {
    Variant.I: _rotations(
        ((0, -1), (1, -1), (2, -1), (3, -1)),
        ((2, 0), (2, -1), (2, -2), (2, -3)),
        ((0, -2), (1, -2), (2, -2), (3, -2)),
        ((1, 0), (1, -1), (1, -2), (1, -3)),
    ),
    Variant.O: _rotations(
        ((1, -1), (2, -1), (1, -2), (2, -2)),
        ((1, -1), (2, -1), (1, -2), (2, -2)),
        ((1, -1), (2, -1), (1, -2), (2, -2)),
        ((1, -1), (2, -1), (1, -2), (2, -2)),
    ),
    Variant.T: _rotations(
        ((1, -1), (0, -2), (1, -2), (2, -2)),
        ((1, -1), (0, 0), (0, -1), (0, -2)),
        ((1, -1), (0, 0), (1, 0), (2, 0)),
        ((1, -1), (2, 0), (2, -1), (2, -2)),
    ),
    Variant.S: _rotations(
        ((1, -1), (2, -1), (0, -2), (1, -2)),
        ((0, 0), (0, -1), (1, -1), (1, -2)),
        ((1, 0), (2, 0), (1, -1), (0, -1)),
        ((1, 0), (1, -1), (2, -1), (2, -2)),
    ),
    Variant.Z: _rotations(
        ((0, -1), (1, -1), (1, -2), (2, -2)),
        ((1, 0), (1, -1), (0, -1), (0, -2)),
        ((0, 0), (1, 0), (1, -1), (2, -1)),
        ((2, 0), (2, -1), (1, -1), (1, -2)),
    ),
    Variant.J: _rotations(
        ((0, -1), (0, -2), (1, -2), (2, -2)),
        ((1, -1), (2, -1), (1, -2), (1, -3)),
        ((0, -2), (1, -2), (2, -2), (2, -3)),
        ((1, -1), (1, -2), (1, -3), (0, -3)),
    ),
    Variant.L: _rotations(
        ((0, -2), (1, -2), (2, -2), (2, -1)),
        ((1, -1), (1, -2), (1, -3), (2, -3)),
        ((0, -2), (1, -2), (2, -2), (0, -3)),
        ((1, -1), (1, -2), (1, -3), (0, -1)),
    ),
}

VARIANTS: tuple[Variant, ...] = tuple(Variant)


def cell_data(variant: Variant) -> Rotations:
    """Return the four rotations of a variant, each as four cell offsets."""
    return _CELLS[variant]


@dataclass
class Square:
    """One of the four squares of a tetrimino, tracking its rotation."""

    child_id: int
    cells: Rotations
    rotation: int = 0
    next_rotation: int = 1

    def rotate(self) -> None:
        """Advance to the next of the four rotations."""
        self.rotation = (self.rotation + 1) % 4
        self.next_rotation = (self.next_rotation + 1) % 4

    def position(self) -> Vec3:
        """Offset of this square within its tetrimino at the current rotation."""
        return self.cells[self.rotation][self.child_id] * CELL_SIZE

    def next_position(self) -> Vec3:
        """Offset of this square after one more rotation."""
        return self.cells[self.next_rotation][self.child_id] * CELL_SIZE