"""Angle conversion helpers shared by the maths types."""

import math

PI = math.pi
PI_OVER_360 = PI / 360.0


def deg_to_rad(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def rad_to_deg(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI