"""Construction policy shared by the geometries it creates."""

from __future__ import annotations

import logging
from typing import Sequence

from ..algorithm.simplicity import (
    BruteForceSimplicityOracle,
    ShapelySimplicityOracle,
    SimplicityOracle,
)
from ..config import GeometrySettings
from ..errors import InvalidGeometryError
from .coordinate import Coordinate
from .linestring import LineString
from .point import Point

logger = logging.getLogger(__name__)

_ORACLES = {
    "shapely": ShapelySimplicityOracle,
    "bruteforce": BruteForceSimplicityOracle,
}


class GeometryFactory:
    """Create geometries that share a simplicity oracle and validation rules."""

    def __init__(
        self,
        simplicity_oracle: SimplicityOracle | None = None,
        *,
        reject_repeated_points: bool = False,
    ):
        self.simplicity_oracle = simplicity_oracle or ShapelySimplicityOracle()
        self.reject_repeated_points = reject_repeated_points

    @classmethod
    def from_settings(cls, settings: GeometrySettings) -> "GeometryFactory":
        logger.debug("Using %s simplicity oracle", settings.simplicity_backend)
        oracle = _ORACLES[settings.simplicity_backend]()
        return cls(oracle, reject_repeated_points=settings.reject_repeated_points)

    def validate_line_points(self, points: Sequence[Coordinate]) -> None:
        """Reject coordinate sequences that cannot form a line.

        Raises:
            InvalidGeometryError: If exactly one point is given, or if two
                consecutive points are equal while ``reject_repeated_points``
                is enabled.
        """

        if len(points) == 1:
            logger.debug("Rejected LineString with a single point")
            raise InvalidGeometryError(
                f"Invalid number of points in LineString (found {len(points)} - must be 0 or >= 2)"
            )

        if not self.reject_repeated_points:
            return

        for index in range(1, len(points)):
            if points[index - 1].equals_2d(points[index]):
                logger.debug("Rejected LineString with repeated point at index %d", index)
                raise InvalidGeometryError(
                    f"Repeated consecutive point in LineString at index {index}"
                )

    def create_line_string(self, points: Sequence[Coordinate] | None = None) -> LineString:
        return LineString(points, self)

    def create_point(self, coordinate: Coordinate | None = None) -> Point:
        return Point(coordinate, self)

    def __repr__(self) -> str:
        return (
            f"GeometryFactory(simplicity_oracle={type(self.simplicity_oracle).__name__}, "
            f"reject_repeated_points={self.reject_repeated_points})"
        )


_DEFAULT_FACTORY: GeometryFactory | None = None


def default_factory() -> GeometryFactory:
    """Return the shared factory used by geometries built without one.

    Its policy is read from the environment on first use.
    """

    global _DEFAULT_FACTORY
    if _DEFAULT_FACTORY is None:
        _DEFAULT_FACTORY = GeometryFactory.from_settings(GeometrySettings.from_env())
    return _DEFAULT_FACTORY


__all__ = ["GeometryFactory", "default_factory"]
