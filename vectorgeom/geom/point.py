"""Zero-dimensional geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import InvalidGeometryError
from .coordinate import Coordinate
from .dimension import Dimension
from .geometry import Geometry

if TYPE_CHECKING:  # pragma: no cover
    from .factory import GeometryFactory


class Point(Geometry):
    """A single coordinate, or the empty point when ``coordinate`` is ``None``."""

    def __init__(self, coordinate: Coordinate | None = None, factory: "GeometryFactory | None" = None):
        super().__init__(factory)
        self._coordinates: list[Coordinate] = [] if coordinate is None else [coordinate]

    @property
    def geometry_type(self) -> str:
        return "Point"

    @property
    def dimension(self) -> Dimension:
        return Dimension.P

    @property
    def boundary_dimension(self) -> Dimension:
        return Dimension.FALSE

    @property
    def coordinates(self) -> list[Coordinate]:
        return self._coordinates

    @property
    def coordinate(self) -> Coordinate | None:
        return self._coordinates[0] if self._coordinates else None

    def _require_coordinate(self) -> Coordinate:
        if not self._coordinates:
            raise InvalidGeometryError("Empty Point has no ordinates")
        return self._coordinates[0]

    @property
    def x(self) -> float:
        return self._require_coordinate().x

    @property
    def y(self) -> float:
        return self._require_coordinate().y

    @property
    def z(self) -> float | None:
        return self._require_coordinate().z

    def equals_exact(self, other: Geometry, tolerance: float = 0.0) -> bool:
        if not self.is_equivalent_class(other):
            return False
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        return self.coordinates_equal(self.coordinate, other.coordinate, tolerance)

    def clone(self) -> "Point":
        coordinate = self.coordinate
        return Point(None if coordinate is None else coordinate.clone(), self._factory)


__all__ = ["Point"]
