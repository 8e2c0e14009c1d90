"""Collision tests against the matrix and corrections at the field borders."""

from __future__ import annotations

from collections.abc import Sequence

from tetrirs.config import CELL_SIZE, COLUMN_AMOUNT, ROW_AMOUNT, Vec3
from tetrirs.grid import CellState, GridMatrix


def _to_index(value: float) -> int:
    return max(0, int(value))


def check_tetrimino_collision(
    matrix: GridMatrix,
    parent_position: Vec3,
    child_positions: Sequence[Vec3],
    x_offset: float,
    y_offset: float,
) -> bool:
    """True if any square, shifted by the offsets in cells, hits the floor or a full cell."""
    for block in child_positions:
        x = _to_index(abs(parent_position.x + block.x) / CELL_SIZE + x_offset)
        y = _to_index(abs(parent_position.y + block.y) / CELL_SIZE + y_offset)
        if y == matrix.height:
            return True
        if matrix.cell_state(x, y) is CellState.FULL:
            return True
    return False


def check_lowest_collision(
    matrix: GridMatrix, parent_position: Vec3, child_positions: Sequence[Vec3]
) -> float:
    """Return how far the tetrimino can drop before it collides."""
    for y_offset in range(matrix.height + 1):
        if check_tetrimino_collision(
            matrix, parent_position, child_positions, 0.0, y_offset + 1.0
        ):
            return y_offset * CELL_SIZE
    raise ValueError("tetrimino lies outside the field")


def _left_border_correction(x: float) -> float:
    if x < -CELL_SIZE:
        return 2.0 * CELL_SIZE
    if x < 0.0:
        return CELL_SIZE
    return 0.0


def _right_border_correction(x: float) -> float:
    if x > CELL_SIZE * COLUMN_AMOUNT:
        return -2.0 * CELL_SIZE
    if x > CELL_SIZE * (COLUMN_AMOUNT - 1.0):
        return -CELL_SIZE
    return 0.0


def _down_border_correction(y: float) -> float:
    if y < -CELL_SIZE * ROW_AMOUNT:
        return 2.0 * CELL_SIZE
    if y < -CELL_SIZE * (ROW_AMOUNT - 1.0):
        return CELL_SIZE
    return 0.0


def _corrected(position: Vec3, adjusted: Vec3) -> Vec3:
    dx = _left_border_correction(adjusted.x) + _right_border_correction(adjusted.x)
    dy = _down_border_correction(adjusted.y)
    return position + Vec3(dx, dy, 0.0)


def corrected_translation(
    tetrimino_position: Vec3,
    children_positions: Sequence[Vec3],
    movement_vector: Vec3,
) -> Vec3:
    """Apply a move, then push the tetrimino back inside the field."""
    new_position = tetrimino_position + movement_vector
    for child in children_positions:
        new_position = _corrected(new_position, child + new_position)
    return new_position


def corrected_translation_rotation(
    tetrimino_position: Vec3,
    children_positions: Sequence[Vec3],
    movement_vectors: Sequence[Vec3],
) -> Vec3:
    """Push a freshly rotated tetrimino back inside the field."""
    if len(children_positions) < len(movement_vectors):
        raise ValueError("fewer child positions than movement vectors")
    new_position = tetrimino_position
    for movement, child in zip(movement_vectors, children_positions):
        new_position = _corrected(new_position, new_position + child + movement)
    return new_position