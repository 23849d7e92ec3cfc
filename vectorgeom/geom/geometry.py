"""Base class of the planar geometry model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .coordinate import Coordinate
from .dimension import Dimension
from .envelope import Envelope

if TYPE_CHECKING:  # pragma: no cover
    from .factory import GeometryFactory


class Geometry:
    """Behaviour shared by every geometry kind.

    Subclasses describe their coordinates, dimension and exact equality;
    this class supplies the class-equivalence test, the tolerance-aware
    coordinate comparison, the cached envelope and simplicity delegation.
    """

    def __init__(self, factory: "GeometryFactory | None" = None):
        if factory is None:
            from .factory import default_factory

            factory = default_factory()
        self._factory = factory
        self._envelope: Envelope | None = None

    @property
    def factory(self) -> "GeometryFactory":
        return self._factory

    @property
    def geometry_type(self) -> str:
        raise NotImplementedError

    @property
    def dimension(self) -> Dimension:
        raise NotImplementedError

    @property
    def boundary_dimension(self) -> Dimension:
        raise NotImplementedError

    @property
    def coordinates(self) -> Sequence[Coordinate]:
        raise NotImplementedError

    @property
    def coordinate(self) -> Coordinate | None:
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        return len(self.coordinates) == 0

    @property
    def num_points(self) -> int:
        return len(self.coordinates)

    @property
    def is_simple(self) -> bool:
        return self._factory.simplicity_oracle.is_simple(self.coordinates)

    @property
    def envelope(self) -> Envelope:
        if self._envelope is None:
            self._envelope = Envelope.of(self.coordinates)
        return self._envelope

    def equals_exact(self, other: "Geometry", tolerance: float = 0.0) -> bool:
        raise NotImplementedError

    def clone(self) -> "Geometry":
        raise NotImplementedError

    def is_equivalent_class(self, other: object) -> bool:
        return type(self) is type(other)

    @staticmethod
    def coordinates_equal(a: Coordinate, b: Coordinate, tolerance: float) -> bool:
        """Exact 2D equality for a zero tolerance, else distance within it."""

        if tolerance == 0:
            return a.equals_2d(b)
        return a.distance(b) <= tolerance

    def __repr__(self) -> str:
        coords = ", ".join(f"{c.x:g} {c.y:g}" for c in self.coordinates)
        return f"<{self.geometry_type} ({coords})>" if coords else f"<{self.geometry_type} EMPTY>"


__all__ = ["Geometry"]
