"""Board dimensions and the small vector type used for positions."""

from __future__ import annotations

from dataclasses import dataclass

CELL_SIZE: float = 30.0
CELL_BORDER_THICKNESS: float = 2.0
ROW_AMOUNT: float = 20.0
COLUMN_AMOUNT: float = 10.0


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__