"""Marker cubes showing camera waypoints and reference points on the island."""

from __future__ import annotations

from .matrix4 import Matrix4
from .scene import SceneNode
from .vectors import Vector3, Vector4

_RED = Vector4(1.0, 0.0, 0.0, 1.0)

# (attribute, colour, position as a fraction of the height map size)
_LAYOUT = (
    ("cam_start", _RED, Vector3(0.3, 0.2, 0.65)),
    ("way_point1", _RED, Vector3(0.4, 0.2, 0.65)),
    ("way_point2", _RED, Vector3(0.5, 0.2, 0.65)),
    ("way_point3", _RED, Vector3(0.5, 0.2, 0.5)),
    ("way_point4", _RED, Vector3(0.6, 1.0, 0.4)),
    ("cam_end", _RED, Vector3(0.6, 1.5, 0.35)),
    ("marker1", _RED, Vector3(0.0, 0.5, 0.0)),
    ("marker2", Vector4(0.0, 1.0, 0.0, 1.0), Vector3(0.0, 0.5, 1.0)),
    ("marker3", Vector4(0.0, 0.0, 1.0, 1.0), Vector3(1.0, 0.5, 1.0)),
    ("marker4", Vector4(1.0, 1.0, 1.0, 1.0), Vector3(1.0, 0.5, 0.0)),
    ("light_marker", Vector4(0.0, 0.0, 0.0, 1.0), Vector3(0.0, 5.0, 0.55)),
)


class Markers(SceneNode):
    """Group of small cubes placed relative to the height map size."""

    def __init__(self, cube=None, heightmap_size: Vector3 | None = None):
        super().__init__()
        self.cube = cube
        self.markers: list[Vector3] = []
        if heightmap_size is None:
            return
        for name, colour, fraction in _LAYOUT:
            node = SceneNode(cube, colour)
            node.model_scale = Vector3(10.0, 10.0, 10.0)
            node.transform = Matrix4.translation(heightmap_size * fraction)
            node.texture = 0
            node.bounding_radius = 1.0
            setattr(self, name, node)
            self.add_child(node)

    def update(self, dt: float) -> None:
        super().update(dt)