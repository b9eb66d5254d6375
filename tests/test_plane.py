import math

import pytest

from islandgl.plane import Plane
from islandgl.vectors import Vector3


def test_plain_construction_keeps_values():
    plane = Plane(Vector3(0.0, 2.0, 0.0), 4.0)
    assert plane.normal == Vector3(0.0, 2.0, 0.0)
    assert plane.distance == 4.0


def test_normalise_gives_unit_normal():
    plane = Plane(Vector3(3.0, 4.0, 0.0), 10.0, True)
    assert math.isclose(plane.normal.length(), 1.0)


def test_normalise_scales_distance_with_normal():
    normal = Vector3(3.0, 4.0, 0.0)
    plane = Plane(normal, 10.0, True)
    length = normal.length()
    assert math.isclose(plane.distance * length, 10.0)
    assert math.isclose(plane.normal.x * length, normal.x)


def test_normalise_zero_normal_raises():
    with pytest.raises(ValueError):
        Plane(Vector3(), 1.0, True)


def test_sphere_in_front_is_inside():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 0.0)
    assert plane.sphere_in_plane(Vector3(0.0, 5.0, 0.0), 1.0) is True


def test_sphere_far_behind_is_outside():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 0.0)
    assert plane.sphere_in_plane(Vector3(0.0, -5.0, 0.0), 1.0) is False


def test_sphere_crossing_plane_is_inside():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 0.0)
    assert plane.sphere_in_plane(Vector3(0.0, -0.5, 0.0), 1.0) is True


def test_sphere_touching_from_behind_is_outside():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 0.0)
    assert plane.sphere_in_plane(Vector3(0.0, -1.0, 0.0), 1.0) is False


def test_distance_shifts_plane():
    plane = Plane(Vector3(0.0, 1.0, 0.0), 10.0)
    assert plane.sphere_in_plane(Vector3(0.0, -5.0, 0.0), 1.0) is True