"""Algorithms consumed by the geometry model."""

from .simplicity import BruteForceSimplicityOracle, ShapelySimplicityOracle, SimplicityOracle

__all__ = ["BruteForceSimplicityOracle", "ShapelySimplicityOracle", "SimplicityOracle"]
