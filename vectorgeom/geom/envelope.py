"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .coordinate import Coordinate


@dataclass(frozen=True)
class Envelope:
    """Immutable bounding box; the null envelope bounds nothing."""

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @classmethod
    def null(cls) -> "Envelope":
        return cls()

    @classmethod
    def of(cls, coordinates: Iterable[Coordinate]) -> "Envelope":
        envelope = cls.null()
        for coordinate in coordinates:
            envelope = envelope.expand_to_include(coordinate)
        return envelope

    @property
    def is_null(self) -> bool:
        return self.min_x > self.max_x

    @property
    def width(self) -> float:
        return 0.0 if self.is_null else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_null else self.max_y - self.min_y

    def expand_to_include(self, coordinate: Coordinate) -> "Envelope":
        return Envelope(
            min(self.min_x, coordinate.x),
            min(self.min_y, coordinate.y),
            max(self.max_x, coordinate.x),
            max(self.max_y, coordinate.y),
        )

    def contains_coordinate(self, coordinate: Coordinate) -> bool:
        return (
            self.min_x <= coordinate.x <= self.max_x
            and self.min_y <= coordinate.y <= self.max_y
        )


__all__ = ["Envelope"]
