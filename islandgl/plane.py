"""An infinite plane used for frustum culling."""

from __future__ import annotations

from math import sqrt

from .vectors import Vector3


class Plane:
    """A plane given by a normal and a distance from the origin."""

    __slots__ = ("normal", "distance")

    def __init__(
        self,
        normal: Vector3 | None = None,
        distance: float = 0.0,
        normalise: bool = False,
    ):
        if normal is None:
            normal = Vector3()
        if normalise:
            length = sqrt(Vector3.dot(normal, normal))
            if length == 0.0:
                raise ValueError("cannot normalise a plane with a zero normal")
            normal = normal / length
            distance = distance / length
        self.normal = normal
        self.distance = float(distance)

    def sphere_in_plane(self, position: Vector3, radius: float) -> bool:
        """True unless the sphere lies entirely behind the plane."""
        return Vector3.dot(position, self.normal) + self.distance > -radius

    def __repr__(self):
        return f"Plane(normal={self.normal!r}, distance={self.distance!r})"