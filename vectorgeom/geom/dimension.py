"""Topological dimension codes shared by all geometries."""

from __future__ import annotations

from enum import IntEnum


class Dimension(IntEnum):
    P = 0
    L = 1
    A = 2
    # Empty set, also used as the "no boundary" value.
    FALSE = -1
    TRUE = -2
    DONTCARE = -3


NO_BOUNDARY = Dimension.FALSE

__all__ = ["Dimension", "NO_BOUNDARY"]
