"""Exceptions raised by the geometry model."""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for errors raised by :mod:`vectorgeom`."""


class InvalidGeometryError(GeometryError, ValueError):
    """Raised when a geometry cannot be built from the supplied coordinates."""


class IndexOutOfRangeError(GeometryError, IndexError):
    """Raised when a coordinate index falls outside the coordinate sequence."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Coordinate index {index} out of range (size {size})")
        self.index = index
        self.size = size


__all__ = ["GeometryError", "IndexOutOfRangeError", "InvalidGeometryError"]
