from __future__ import annotations

import pytest

from vectorgeom import Coordinate, coordinates_from_xy


def test_equals_2d_ignores_z():
    assert Coordinate(1, 2, 3).equals_2d(Coordinate(1, 2, 7))
    assert not Coordinate(1, 2).equals_2d(Coordinate(1, 2.5))


def test_equals_2d_with_tolerance():
    assert Coordinate(0, 0).equals_2d(Coordinate(0.05, -0.05), tolerance=0.1)
    assert not Coordinate(0, 0).equals_2d(Coordinate(0.05, 0.2), tolerance=0.1)


def test_equals_3d():
    assert Coordinate(1, 2, 3).equals_3d(Coordinate(1, 2, 3))
    assert Coordinate(1, 2).equals_3d(Coordinate(1, 2))
    assert not Coordinate(1, 2, 3).equals_3d(Coordinate(1, 2))


def test_distance():
    assert Coordinate(0, 0).distance(Coordinate(3, 4)) == pytest.approx(5.0)


def test_clone_is_independent():
    original = Coordinate(1, 2, 3)
    copy = original.clone()
    copy.x = 10

    assert copy is not original
    assert original == Coordinate(1, 2, 3)
    assert copy.z == 3


def test_coordinates_from_xy():
    coords = coordinates_from_xy([(0, 1), (2, 3, 4)])

    assert coords == [Coordinate(0.0, 1.0), Coordinate(2.0, 3.0, 4.0)]
    assert not coords[0].is_3d
    assert coords[1].is_3d


def test_coordinates_from_xy_rejects_bad_arity():
    with pytest.raises(ValueError):
        coordinates_from_xy([(1,)])
