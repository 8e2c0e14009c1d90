"""The playfield matrix of cells."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from enum import Enum

from tetrirs.config import CELL_SIZE, COLUMN_AMOUNT, ROW_AMOUNT, Vec3


class CellState(Enum):
    FULL = "full"
    EMPTY = "empty"


@dataclass(frozen=True)
class Cell:
    """A cell of the playfield and the colour it is drawn with."""

    state: CellState
    color: Hashable


def _to_index(value: float) -> int:
    """Truncate toward zero, saturating negative values at zero."""
    return max(0, int(value))


class GridMatrix:
    """A width by height field of cells, row 0 at the top."""

    def __init__(
        self,
        width: int = int(COLUMN_AMOUNT),
        height: int = int(ROW_AMOUNT),
        color: Hashable = None,
    ) -> None:
        self.width = width
        self.height = height
        self.color = color
        self.cells = [Cell(CellState.EMPTY, color) for _ in range(width * height)]

    def index(self, x: int, y: int) -> int | None:
        """Return the flat index of (x, y), or None when outside the field."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def cell_state(self, x: int, y: int) -> CellState | None:
        index = self.index(x, y)
        return None if index is None else self.cells[index].state

    def fill_cell(self, x: int, y: int, color: Hashable) -> None:
        index = self.index(x, y)
        if index is not None:
            self.cells[index] = Cell(CellState.FULL, color)

    def empty_cell(self, x: int, y: int) -> None:
        index = self.index(x, y)
        if index is not None:
            self.cells[index] = Cell(CellState.EMPTY, self.color)

    def move_down_cell(self, x: int, y: int) -> None:
        """Swap the cell at (x, y) with the one directly below it."""
        upper, lower = self.index(x, y), self.index(x, y + 1)
        if upper is not None and lower is not None:
            self.cells[upper], self.cells[lower] = self.cells[lower], self.cells[upper]

    def place_tetrimino(
        self, parent_translation: Vec3, squares: Iterable[tuple[Vec3, Hashable]]
    ) -> None:
        """Fill the cells under each (translation, colour) square of a tetrimino."""
        for translation, color in squares:
            x = _to_index((parent_translation.x + translation.x) / CELL_SIZE)
            y = _to_index(abs(parent_translation.y + translation.y) / CELL_SIZE)
            self.fill_cell(x, y, color)

    def is_full(self) -> bool:
        """True when any cell in the top three rows is occupied."""
        last = self.index(self.width - 1, 2)
        if last is None:
            return False
        return any(cell.state is CellState.FULL for cell in self.cells[: last + 1])

    def empty_rows(self, rows: Iterable[int] | None) -> int:
        """Clear the given rows, drop everything above them, return how many."""
        cleared = 0
        for row in sorted(rows or ()):
            cleared += 1
            for x in range(self.width):
                self.empty_cell(x, row)
            for y in reversed(range(row)):
                for x in range(self.width):
                    self.move_down_cell(x, y)
        return cleared

    def full_rows(self) -> list[int]:
        """Return the indices of rows whose every cell is occupied."""
        return [
            y
            for y in range(self.height)
            if all(
                cell.state is CellState.FULL
                for cell in self.cells[y * self.width : (y + 1) * self.width]
            )
        ]