import pytest

from tetrirs.config import CELL_SIZE, Vec3
from tetrirs.shapes import VARIANTS, Square, Variant, cell_data


@pytest.mark.parametrize("variant", list(Variant))
def test_variants_table_indexed_by_value(variant):
    assert cell_data(VARIANTS[variant.value]) == cell_data(variant)


def test_variants_order_pins_first_cells():
    assert Square(0, cell_data(VARIANTS[0])).position() == Vec3(0.0, -30.0, 0.0)
    assert Square(0, cell_data(VARIANTS[1])).position() == Vec3(30.0, -30.0, 0.0)
    assert Square(0, cell_data(VARIANTS[-1])).position() == Vec3(0.0, -60.0, 0.0)


def test_i_first_cell_pinned():
    assert cell_data(Variant.I)[0][0] == Vec3(0.0, -1.0, 0.0)


@pytest.mark.parametrize("variant", list(Variant))
def test_each_variant_has_four_rotations_of_four_distinct_cells(variant):
    rotations = cell_data(variant)
    assert len(rotations) == 4
    for rotation in rotations:
        assert len(set(rotation)) == 4


def test_o_is_rotation_invariant():
    rotations = cell_data(Variant.O)
    assert all(r == rotations[0] for r in rotations)


def test_square_position_uses_cell_size():
    cells = cell_data(Variant.T)
    square = Square(2, cells)
    assert square.position() == cells[0][2] * CELL_SIZE
    assert square.next_position() == cells[1][2] * CELL_SIZE


def test_rotate_moves_next_to_current():
    square = Square(1, cell_data(Variant.S))
    upcoming = square.next_position()
    square.rotate()
    assert square.position() == upcoming


def test_four_rotations_return_to_start():
    square = Square(3, cell_data(Variant.J))
    start = (square.position(), square.next_position())
    for _ in range(4):
        square.rotate()
    assert (square.position(), square.next_position()) == start
    assert (square.rotation, square.next_rotation) == (0, 1)


def test_rotation_wraps_after_three():
    square = Square(0, cell_data(Variant.L))
    for _ in range(3):
        square.rotate()
    assert (square.rotation, square.next_rotation) == (3, 0)