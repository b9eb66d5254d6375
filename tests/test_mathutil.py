import math

import pytest

from islandgl.mathutil import PI, PI_OVER_360, deg_to_rad, rad_to_deg


def test_half_turn_is_pi():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)


def test_pi_is_half_turn():
    assert rad_to_deg(math.pi) == pytest.approx(180.0)


def test_zero_maps_to_zero():
    assert deg_to_rad(0.0) == 0.0
    assert rad_to_deg(0.0) == 0.0


@pytest.mark.parametrize("angle", [-720.0, -45.5, 0.25, 30.0, 90.0, 359.0])
def test_round_trip_degrees(angle):
    assert rad_to_deg(deg_to_rad(angle)) == pytest.approx(angle)


@pytest.mark.parametrize("angle", [-3.0, 0.1, 1.0, 2.5, 6.0])
def test_round_trip_radians(angle):
    assert deg_to_rad(rad_to_deg(angle)) == pytest.approx(angle)


def test_conversion_is_linear():
    assert deg_to_rad(60.0) == pytest.approx(2 * deg_to_rad(30.0))


def test_pi_over_360_matches_half_degree():
    assert deg_to_rad(0.5) == pytest.approx(PI_OVER_360)
    assert rad_to_deg(PI) == pytest.approx(180.0)