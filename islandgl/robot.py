"""A hierarchical robot built from cubes."""

from __future__ import annotations

from .matrix4 import Matrix4
from .scene import SceneNode
from .vectors import Vector3, Vector4

_Y_AXIS = Vector3(0.0, 1.0, 0.0)
_X_AXIS = Vector3(1.0, 0.0, 0.0)


def _part(cube, colour, scale, offset, radius) -> SceneNode:
    node = SceneNode(cube, colour)
    node.model_scale = scale
    node.transform = Matrix4.translation(offset)
    node.bounding_radius = radius
    node.texture = 0
    return node


class CubeRobot(SceneNode):
    """A spinning robot whose head turns and arms swing."""

    def __init__(self, cube):
        super().__init__()
        blue = Vector4(0.0, 0.0, 1.0, 1.0)

        self.body = _part(cube, Vector4(1.0, 0.0, 0.0, 1.0), Vector3(10, 15, 5),
                          Vector3(0, 35, 0), 15.0)
        self.add_child(self.body)

        self.head = _part(cube, Vector4(0.0, 1.0, 0.0, 1.0), Vector3(5, 5, 5),
                          Vector3(0, 30, 0), 5.0)
        self.left_arm = _part(cube, blue, Vector3(3, -18, 3), Vector3(-12, 30, -1), 18.0)
        self.right_arm = _part(cube, blue, Vector3(3, -18, 3), Vector3(12, 30, -1), 18.0)
        left_leg = _part(cube, blue, Vector3(3, -17.5, 3), Vector3(-8, 0, 0), 18.0)
        right_leg = _part(cube, blue, Vector3(3, -17.5, 3), Vector3(8, 0, 0), 18.0)

        for limb in (self.head, self.left_arm, self.right_arm, left_leg, right_leg):
            self.body.add_child(limb)

    def update(self, dt: float) -> None:
        self.transform = self.transform * Matrix4.rotation(30.0 * dt, _Y_AXIS)
        self.head.transform = self.head.transform * Matrix4.rotation(-30.0 * dt, _Y_AXIS)
        self.left_arm.transform = self.left_arm.transform * Matrix4.rotation(-30.0 * dt, _X_AXIS)
        self.right_arm.transform = self.right_arm.transform * Matrix4.rotation(30.0 * dt, _X_AXIS)
        super().update(dt)