"""Polyline geometry backed by an ordered coordinate sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..errors import IndexOutOfRangeError
from .coordinate import Coordinate
from .dimension import Dimension
from .geometry import Geometry
from .point import Point

if TYPE_CHECKING:  # pragma: no cover
    from .factory import GeometryFactory


class LineString(Geometry):
    """An ordered sequence of coordinates forming a polyline.

    Parameters
    ----------
    points:
        The coordinates of the line in traversal order, or ``None`` for the
        empty line. The sequence is stored as given, not copied: callers hand
        it over and must not modify it afterwards. Consecutive points should
        not be equal; this is only checked when the factory rejects repeated
        points.
    factory:
        Factory holding the construction policy and the simplicity oracle.
        The shared default factory is used when omitted.

    Raises
    ------
    InvalidGeometryError
        If exactly one point is supplied.
    """

    def __init__(
        self,
        points: Sequence[Coordinate] | None = None,
        factory: "GeometryFactory | None" = None,
    ):
        super().__init__(factory)
        if points is None:
            points = []
        self._factory.validate_line_points(points)
        self._points = points

    @property
    def geometry_type(self) -> str:
        return "LineString"

    @property
    def coordinates(self) -> Sequence[Coordinate]:
        return self._points

    def coordinate_at(self, n: int) -> Coordinate:
        if not 0 <= n < len(self._points):
            raise IndexOutOfRangeError(n, len(self._points))
        return self._points[n]

    @property
    def coordinate(self) -> Coordinate | None:
        if self.is_empty:
            return None
        return self.coordinate_at(0)

    @property
    def dimension(self) -> Dimension:
        return Dimension.L

    @property
    def boundary_dimension(self) -> Dimension:
        if self.is_closed:
            return Dimension.FALSE
        return Dimension.P

    @property
    def is_empty(self) -> bool:
        return len(self._points) == 0

    @property
    def is_closed(self) -> bool:
        if self.is_empty:
            return False
        return self.coordinate_at(0).equals_2d(self.coordinate_at(len(self._points) - 1))

    @property
    def is_ring(self) -> bool:
        return self.is_closed and self.is_simple

    @property
    def start_point(self) -> Point | None:
        if self.is_empty:
            return None
        return self._factory.create_point(self.coordinate_at(0).clone())

    @property
    def end_point(self) -> Point | None:
        if self.is_empty:
            return None
        return self._factory.create_point(self.coordinate_at(len(self._points) - 1).clone())

    @property
    def length(self) -> float:
        return sum(a.distance(b) for a, b in zip(self._points, self._points[1:]))

    def equals_exact(self, other: Geometry, tolerance: float = 0.0) -> bool:
        if not self.is_equivalent_class(other):
            return False
        if len(self._points) != len(other.coordinates):
            return False
        for mine, theirs in zip(self._points, other.coordinates):
            if not self.coordinates_equal(mine, theirs, tolerance):
                return False
        return True

    def clone(self) -> "LineString":
        """Return a copy of this line that shares no coordinate with it."""

        return LineString([point.clone() for point in self._points], self._factory)


__all__ = ["LineString"]
