"""Self-intersection tests for coordinate sequences.

A sequence is *simple* when the polyline it describes does not cross or
touch itself, except that consecutive segments share their common vertex
and, for a closed sequence, the last segment ends where the first begins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from shapely.geometry import LineString as ShapelyLineString

if TYPE_CHECKING:  # pragma: no cover
    from ..geom.coordinate import Coordinate

logger = logging.getLogger(__name__)


class SimplicityOracle(Protocol):
    def is_simple(self, coordinates: Sequence["Coordinate"]) -> bool:
        ...


class ShapelySimplicityOracle:
    """Delegate to GEOS through shapely (sweep-line noding, about O(n log n))."""

    def is_simple(self, coordinates: Sequence["Coordinate"]) -> bool:
        if len(coordinates) < 2:
            return True
        line = ShapelyLineString([(c.x, c.y) for c in coordinates])
        return bool(line.is_simple)


def _orientation(p: "Coordinate", q: "Coordinate", r: "Coordinate") -> int:
    value = (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _on_segment(p: "Coordinate", a: "Coordinate", b: "Coordinate") -> bool:
    """``p`` is collinear with ``a``-``b`` and inside its bounding box."""

    if _orientation(a, b, p) != 0:
        return False
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)


def _segments_intersect(a0: "Coordinate", a1: "Coordinate", b0: "Coordinate", b1: "Coordinate") -> bool:
    o1 = _orientation(a0, a1, b0)
    o2 = _orientation(a0, a1, b1)
    o3 = _orientation(b0, b1, a0)
    o4 = _orientation(b0, b1, a1)

    if o1 != o2 and o3 != o4 and 0 not in (o1, o2, o3, o4):
        return True

    return (
        _on_segment(b0, a0, a1)
        or _on_segment(b1, a0, a1)
        or _on_segment(a0, b0, b1)
        or _on_segment(a1, b0, b1)
    )


def _overlap_beyond_joint(
    a0: "Coordinate", a1: "Coordinate", b0: "Coordinate", b1: "Coordinate"
) -> bool:
    """Segments joined at ``a1 == b0`` meet anywhere besides that vertex."""

    return _on_segment(b1, a0, a1) or _on_segment(a0, b0, b1)


class BruteForceSimplicityOracle:
    """Test every pair of segments, O(n²) in the number of points."""

    def is_simple(self, coordinates: Sequence["Coordinate"]) -> bool:
        points = [
            point
            for index, point in enumerate(coordinates)
            if index == 0 or not point.equals_2d(coordinates[index - 1])
        ]
        if len(points) < 3:
            return True

        closed = points[0].equals_2d(points[-1])
        segments = list(zip(points, points[1:]))
        last = len(segments) - 1

        for i in range(len(segments)):
            a0, a1 = segments[i]
            for j in range(i + 1, len(segments)):
                b0, b1 = segments[j]
                if j == i + 1:
                    if _overlap_beyond_joint(a0, a1, b0, b1):
                        return False
                    if closed and i == 0 and j == last and _overlap_beyond_joint(b0, b1, a0, a1):
                        return False
                    continue
                if closed and i == 0 and j == last:
                    if _overlap_beyond_joint(b0, b1, a0, a1):
                        return False
                    continue
                if _segments_intersect(a0, a1, b0, b1):
                    logger.debug("Segments %d and %d intersect", i, j)
                    return False
        return True


__all__ = [
    "BruteForceSimplicityOracle",
    "ShapelySimplicityOracle",
    "SimplicityOracle",
]
