"""Planar vector geometry: coordinates, points and line strings."""

from .errors import GeometryError, IndexOutOfRangeError, InvalidGeometryError
from .geom import (
    NO_BOUNDARY,
    Coordinate,
    Dimension,
    Envelope,
    Geometry,
    GeometryFactory,
    LineString,
    Point,
    coordinates_from_xy,
    default_factory,
)

__all__ = [
    "Coordinate",
    "Dimension",
    "Envelope",
    "Geometry",
    "GeometryError",
    "GeometryFactory",
    "IndexOutOfRangeError",
    "InvalidGeometryError",
    "LineString",
    "NO_BOUNDARY",
    "Point",
    "coordinates_from_xy",
    "default_factory",
]

__version__ = "0.1.0"
