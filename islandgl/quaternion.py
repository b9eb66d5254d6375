"""A rotation quaternion."""

from __future__ import annotations

from dataclasses import dataclass
from math import asin, atan2, copysign, cos, sin, sqrt

from .mathutil import PI, deg_to_rad, rad_to_deg
from .vectors import Vector3

_Number = (int, float)


@dataclass
class Quaternion:
    """Quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def from_matrix4(matrix) -> Quaternion:
        """Extract the rotation held in a 4x4 matrix."""
        v = matrix.values
        w = sqrt(max(0.0, 1.0 + v[0] + v[5] + v[10])) * 0.5
        if abs(w) < 0.0001:
            x = sqrt(max(0.0, 1.0 + v[0] - v[5] - v[10])) / 2.0
            y = sqrt(max(0.0, 1.0 - v[0] + v[5] - v[10])) / 2.0
            z = sqrt(max(0.0, 1.0 - v[0] - v[5] + v[10])) / 2.0
            return Quaternion(
                copysign(x, v[9] - v[6]),
                copysign(y, v[2] - v[8]),
                copysign(z, v[4] - v[1]),
                w,
            )
        recip = 1.0 / (4.0 * w)
        return Quaternion(
            (v[6] - v[9]) * recip,
            (v[8] - v[2]) * recip,
            (v[1] - v[4]) * recip,
            w,
        )

    @staticmethod
    def from_matrix3(matrix) -> Quaternion:
        """Extract the rotation held in a 3x3 matrix."""
        v = matrix.values
        w = sqrt(max(0.0, 1.0 + v[0] + v[4] + v[8])) * 0.5
        recip = 1.0 / (4.0 * w)
        return Quaternion(
            (v[5] - v[7]) * recip,
            (v[6] - v[2]) * recip,
            (v[1] - v[3]) * recip,
            w,
        )

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w

    def normalise(self) -> None:
        magnitude = sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)
        if magnitude > 0.0:
            t = 1.0 / magnitude
            self.x *= t
            self.y *= t
            self.z *= t
            self.w *= t

    def calculate_w(self) -> None:
        """Rebuild w from x, y and z for a unit quaternion stored in 3 parts."""
        w = 1.0 - self.x * self.x - self.y * self.y - self.z * self.z
        self.w = 0.0 if w < 0.0 else -sqrt(w)

    def conjugate(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    @staticmethod
    def lerp(start: Quaternion, end: Quaternion, by: float) -> Quaternion:
        target = -end if Quaternion.dot(start, end) < 0.0 else end
        return start * (1.0 - by) + target * by

    @staticmethod
    def slerp(start: Quaternion, end: Quaternion, by: float) -> Quaternion:
        return start * cos(by) + end * (1.0 - cos(by))

    def to_euler(self) -> Vector3:
        """Euler angles in degrees as (roll, yaw, pitch)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        t = x * y + z * w

        if t > 0.4999:
            return Vector3(0.0, rad_to_deg(2.0 * atan2(x, w)), rad_to_deg(PI / 2.0))
        if t < -0.4999:
            return Vector3(0.0, -rad_to_deg(2.0 * atan2(x, w)), -rad_to_deg(PI / 2.0))

        sqx, sqy, sqz = x * x, y * y, z * z
        return Vector3(
            rad_to_deg(atan2(2 * x * w - 2 * y * z, 1.0 - 2 * sqx - 2 * sqz)),
            rad_to_deg(atan2(2 * y * w - 2 * x * z, 1.0 - 2 * sqy - 2 * sqz)),
            rad_to_deg(asin(2 * t)),
        )

    @staticmethod
    def from_euler_angles(roll: float, yaw: float, pitch: float) -> Quaternion:
        cos1 = cos(deg_to_rad(yaw * 0.5))
        cos2 = cos(deg_to_rad(pitch * 0.5))
        cos3 = cos(deg_to_rad(roll * 0.5))
        sin1 = sin(deg_to_rad(yaw * 0.5))
        sin2 = sin(deg_to_rad(pitch * 0.5))
        sin3 = sin(deg_to_rad(roll * 0.5))
        return Quaternion(
            sin1 * sin2 * cos3 + cos1 * cos2 * sin3,
            sin1 * cos2 * cos3 + cos1 * sin2 * sin3,
            cos1 * sin2 * cos3 - sin1 * cos2 * sin3,
            cos1 * cos2 * cos3 - sin1 * sin2 * sin3,
        )

    @staticmethod
    def from_axis_angle(axis: Vector3, degrees: float) -> Quaternion:
        """Rotation of `degrees` about `axis`; the axis is used as given."""
        theta = deg_to_rad(degrees)
        s = sin(theta / 2.0)
        return Quaternion(axis.x * s, axis.y * s, axis.z * s, cos(theta / 2.0))

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            x, y, z, w = self.x, self.y, self.z, self.w
            return Quaternion(
                x * other.w + w * other.x + y * other.z - z * other.y,
                y * other.w + w * other.y + z * other.x - x * other.z,
                z * other.w + w * other.z + x * other.y - y * other.x,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, Vector3):
            rotated = self * Quaternion(other.x, other.y, other.z, 0.0) * self.conjugate()
            return Vector3(rotated.x, rotated.y, rotated.z)
        if isinstance(other, _Number):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self):
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]