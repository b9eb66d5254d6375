"""First-person camera with manual controls and an automatic fly-through."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix4 import Matrix4
from .particles import approx_equal
from .vectors import Vector3

_X_AXIS = Vector3(1.0, 0.0, 0.0)
_Y_AXIS = Vector3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class CameraControls:
    """Input for one frame of manual camera movement."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    ascend: bool = False
    descend: bool = False
    mouse_dx: float = 0.0
    mouse_dy: float = 0.0


class Camera:
    """Camera described by pitch, yaw (degrees) and a position."""

    def __init__(self, pitch: float = 0.0, yaw: float = 0.0,
                 position: Vector3 | None = None):
        self.pitch = pitch
        self.yaw = yaw
        self.position = position if position is not None else Vector3()
        self.start = Vector3(7984.0 * 0.3, 255.0 * 0.2, 7984.0 * 0.65)
        self.end = Vector3(7984.0 * 0.6, 255.0 * 1.5, 7984.0 * 0.35)
        self.waypoints: list[Vector3] = []
        self.waypoint_number = 0

    def update(self, auto_cam: bool, dt: float = 1.0,
               controls: CameraControls | None = None) -> bool:
        """Advance the camera by `dt` seconds.

        Returns whether automatic movement should continue.
        """
        self.pitch = max(min(self.pitch, 90.0), -90.0)
        if self.yaw < 0:
            self.yaw += 360.0
        if self.yaw > 360.0:
            self.yaw -= 360.0

        speed = 120.0 * dt
        rotation = Matrix4.rotation(self.yaw, _Y_AXIS)
        forward = rotation * Vector3(0.0, 0.0, -1.0)
        right = rotation * Vector3(1.0, 0.0, 0.0)

        if auto_cam:
            if approx_equal(self.end.x, self.position.x, 1.0):
                self.waypoint_number += 1
                return self.waypoint_number <= len(self.waypoints)
            travel = (self.end - self.start).normalised()
            self.position = self.position + travel * speed
            self.yaw += 10.0 * dt
            return True

        if controls is None:
            controls = CameraControls()
        self.pitch -= controls.mouse_dy
        self.yaw -= controls.mouse_dx

        if controls.forward:
            self.position = self.position + forward * speed
        if controls.backward:
            self.position = self.position - forward * speed
        if controls.left:
            self.position = self.position - right * speed
        if controls.right:
            self.position = self.position + right * speed
        if controls.ascend:
            self.position = Vector3(self.position.x, self.position.y + speed, self.position.z)
        if controls.descend:
            self.position = Vector3(self.position.x, self.position.y - speed, self.position.z)
        return False

    def build_view_matrix(self) -> Matrix4:
        return (
            Matrix4.rotation(-self.pitch, _X_AXIS)
            * Matrix4.rotation(-self.yaw, _Y_AXIS)
            * Matrix4.translation(-self.position)
        )