"""View frustum built from a combined projection-view matrix."""

from __future__ import annotations

from .plane import Plane
from .vectors import Vector3


class Frustum:
    """Six clipping planes: right, left, bottom, top, near, far."""

    def __init__(self):
        self.planes = [Plane() for _ in range(6)]

    def from_matrix(self, matrix) -> None:
        """Extract the planes from a projection-view matrix."""
        v = matrix.values
        x_axis = Vector3(v[0], v[4], v[8])
        y_axis = Vector3(v[1], v[5], v[9])
        z_axis = Vector3(v[2], v[6], v[10])
        w_axis = Vector3(v[3], v[7], v[11])

        self.planes = [
            Plane(w_axis - x_axis, v[15] - v[12], True),
            Plane(w_axis + x_axis, v[15] - v[12], True),
            Plane(w_axis + y_axis, v[15] - v[13], True),
            Plane(w_axis - y_axis, v[15] - v[13], True),
            Plane(w_axis + z_axis, v[15] - v[14], True),
            Plane(w_axis - z_axis, v[15] - v[14], True),
        ]

    def inside_frustum(self, node) -> bool:
        """Whether a node should be drawn; culling is disabled, so always True."""
        return True