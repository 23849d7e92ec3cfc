"""Geometry types of the planar vector model."""

from .coordinate import Coordinate, coordinates_from_xy
from .dimension import NO_BOUNDARY, Dimension
from .envelope import Envelope
from .geometry import Geometry
from .point import Point
from .linestring import LineString
from .factory import GeometryFactory, default_factory

__all__ = [
    "Coordinate",
    "Dimension",
    "Envelope",
    "Geometry",
    "GeometryFactory",
    "LineString",
    "NO_BOUNDARY",
    "Point",
    "coordinates_from_xy",
    "default_factory",
]
