"""Scene graph nodes and point lights."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrix4 import Matrix4
from .vectors import Vector3, Vector4


@dataclass
class Light:
    """A point light with a colour and a falloff radius."""

    position: Vector3 = field(default_factory=Vector3)
    colour: Vector4 = field(default_factory=Vector4)
    radius: float = 0.0


class SceneNode:
    """A node in a transform hierarchy, optionally carrying a mesh."""

    def __init__(self, mesh=None, colour: Vector4 | None = None):
        self.mesh = mesh
        self.colour = colour if colour is not None else Vector4(1.0, 1.0, 1.0, 1.0)
        self.parent: SceneNode | None = None
        self.children: list[SceneNode] = []
        self.transform = Matrix4()
        self.world_transform = Matrix4()
        self.model_scale = Vector3(1.0, 1.0, 1.0)
        self.bounding_radius = 1.0
        self.distance_from_camera = 0.0
        self.texture = 0
        self.sub_textures: list[int] = []

    def add_child(self, child: SceneNode) -> None:
        self.children.append(child)
        child.parent = self

    def update(self, dt: float) -> None:
        """Recompute world transforms for this node and everything below it."""
        if self.parent is not None:
            self.world_transform = self.parent.world_transform * self.transform
        else:
            self.world_transform = Matrix4(self.transform.values)
        for child in self.children:
            child.update(dt)

    @staticmethod
    def by_camera_distance(node: SceneNode) -> float:
        """Sort key ordering nodes from nearest to farthest from the camera."""
        return node.distance_from_camera

    def __iter__(self):
        return iter(self.children)