"""Small immutable 2, 3 and 4 component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

_Number = (int, float)


@dataclass(frozen=True)
class Vector2:
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, _Number):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented


@dataclass(frozen=True)
class Vector3:
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalised(self) -> Vector3:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        inv = 1.0 / length
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def inverse(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return self.inverse()

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, _Number):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, _Number):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented


@dataclass(frozen=True)
class Vector4:
    """A four component vector; every component defaults to one."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0
    w: float = 1.0

    def length(self) -> float:
        return math.sqrt(
            self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        )

    def normalised(self) -> Vector4:
        """Return a unit-length copy; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        inv = 1.0 / length
        return Vector4(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def to_vector3(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __add__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, scalar):
        if not isinstance(scalar, _Number):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)