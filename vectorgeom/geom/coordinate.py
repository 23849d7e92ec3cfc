"""Planar coordinate value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(slots=True)
class Coordinate:
    """A 2D point with an optional ``z`` ordinate.

    Coordinates are mutable so that geometries can share or copy them
    explicitly; geometries never modify the coordinates they hold.
    """

    x: float
    y: float
    z: float | None = None

    def equals_2d(self, other: "Coordinate", tolerance: float = 0.0) -> bool:
        """Compare ``x`` and ``y`` only, each within ``tolerance``."""

        if tolerance == 0:
            return self.x == other.x and self.y == other.y
        if abs(self.x - other.x) > tolerance:
            return False
        return abs(self.y - other.y) <= tolerance

    def equals_3d(self, other: "Coordinate") -> bool:
        return self.equals_2d(other) and self.z == other.z

    def distance(self, other: "Coordinate") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def clone(self) -> "Coordinate":
        return Coordinate(self.x, self.y, self.z)

    @property
    def is_3d(self) -> bool:
        return self.z is not None


def as_coordinate(values: Sequence[float]) -> Coordinate:
    if len(values) == 2:
        x, y = values
        return Coordinate(float(x), float(y))
    if len(values) == 3:
        x, y, z = values
        return Coordinate(float(x), float(y), float(z))
    raise ValueError(f"Coordinates need 2 or 3 ordinates, got {len(values)}")


def coordinates_from_xy(values: Iterable[Sequence[float]]) -> list[Coordinate]:
    """Build coordinates from ``(x, y)`` or ``(x, y, z)`` tuples."""

    return [as_coordinate(value) for value in values]


__all__ = ["Coordinate", "as_coordinate", "coordinates_from_xy"]
