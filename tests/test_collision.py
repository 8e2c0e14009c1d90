import pytest

from tetrirs.collision import (
    check_lowest_collision,
    check_tetrimino_collision,
    corrected_translation,
    corrected_translation_rotation,
)
from tetrirs.config import CELL_SIZE, COLUMN_AMOUNT, ROW_AMOUNT, Vec3
from tetrirs.grid import GridMatrix
from tetrirs.shapes import Square, Variant, cell_data

ORIGIN = Vec3()
SINGLE = [Vec3()]


def piece(variant):
    cells = cell_data(variant)
    return [Square(i, cells).position() for i in range(4)]


def test_no_collision_in_empty_field():
    matrix = GridMatrix()
    assert check_tetrimino_collision(matrix, ORIGIN, SINGLE, 0.0, 0.0) is False


def test_collision_with_floor():
    matrix = GridMatrix()
    bottom = Vec3(0.0, -(ROW_AMOUNT - 1) * CELL_SIZE, 0.0)
    assert check_tetrimino_collision(matrix, bottom, SINGLE, 0.0, 0.0) is False
    assert check_tetrimino_collision(matrix, bottom, SINGLE, 0.0, 1.0) is True


def test_collision_with_full_cell_to_the_right():
    matrix = GridMatrix()
    matrix.fill_cell(1, 0, "x")
    assert check_tetrimino_collision(matrix, ORIGIN, SINGLE, 1.0, 0.0) is True
    assert check_tetrimino_collision(matrix, ORIGIN, SINGLE, 0.0, 0.0) is False


@pytest.mark.parametrize("variant", list(Variant))
def test_lowest_collision_lands_on_floor(variant):
    matrix = GridMatrix()
    start = Vec3(3 * CELL_SIZE, 0.0, 0.0)
    children = piece(variant)
    drop = check_lowest_collision(matrix, start, children)
    landed = start - Vec3(0.0, drop, 0.0)
    assert check_tetrimino_collision(matrix, landed, children, 0.0, 0.0) is False
    assert check_tetrimino_collision(matrix, landed, children, 0.0, 1.0) is True


def test_lowest_collision_single_square_to_bottom_row():
    matrix = GridMatrix()
    assert check_lowest_collision(matrix, ORIGIN, SINGLE) == (ROW_AMOUNT - 1) * CELL_SIZE


def test_lowest_collision_stops_above_full_cell():
    matrix = GridMatrix()
    matrix.fill_cell(0, 5, "x")
    drop = check_lowest_collision(matrix, ORIGIN, SINGLE)
    landed = Vec3(0.0, -drop, 0.0)
    assert check_tetrimino_collision(matrix, landed, SINGLE, 0.0, 1.0) is True
    assert drop < (ROW_AMOUNT - 1) * CELL_SIZE


def test_lowest_collision_below_field_raises():
    matrix = GridMatrix()
    below = Vec3(0.0, -(ROW_AMOUNT + 1) * CELL_SIZE, 0.0)
    with pytest.raises(ValueError):
        check_lowest_collision(matrix, below, SINGLE)


def test_corrected_translation_inside_is_plain_move():
    start = Vec3(3 * CELL_SIZE, -3 * CELL_SIZE, 0.0)
    move = Vec3(CELL_SIZE, 0.0, 0.0)
    assert corrected_translation(start, SINGLE, move) == start + move


def test_corrected_translation_blocks_left_edge():
    result = corrected_translation(ORIGIN, SINGLE, Vec3(-CELL_SIZE, 0.0, 0.0))
    assert result == ORIGIN


def test_corrected_translation_blocks_right_edge():
    start = Vec3((COLUMN_AMOUNT - 1) * CELL_SIZE, 0.0, 0.0)
    result = corrected_translation(start, SINGLE, Vec3(CELL_SIZE, 0.0, 0.0))
    assert result == start


def test_corrected_translation_blocks_floor():
    start = Vec3(0.0, -(ROW_AMOUNT - 1) * CELL_SIZE, 0.0)
    result = corrected_translation(start, SINGLE, Vec3(0.0, -CELL_SIZE, 0.0))
    assert result == start


def test_rotation_correction_inside_keeps_position():
    start = Vec3(3 * CELL_SIZE, -5 * CELL_SIZE, 0.0)
    children = piece(Variant.T)
    moves = [Vec3() for _ in children]
    assert corrected_translation_rotation(start, children, moves) == start


def test_rotation_correction_pushes_off_left_wall():
    moves = [Vec3(-CELL_SIZE, 0.0, 0.0)]
    result = corrected_translation_rotation(ORIGIN, SINGLE, moves)
    assert result == Vec3(CELL_SIZE, 0.0, 0.0)


def test_rotation_correction_needs_enough_children():
    with pytest.raises(ValueError):
        corrected_translation_rotation(ORIGIN, [], [Vec3()])