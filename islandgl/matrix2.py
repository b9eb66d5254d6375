"""A column-major 2x2 matrix."""

from __future__ import annotations

from math import cos, sin

from .mathutil import deg_to_rad
from .vectors import Vector2


class Matrix2:
    """2x2 matrix stored as four floats in column-major order."""

    __slots__ = ("values",)

    def __init__(self, values=None):
        if values is None:
            self.values = [1.0, 0.0, 0.0, 1.0]
            return
        values = [float(v) for v in values]
        if len(values) != 4:
            raise ValueError("a Matrix2 needs exactly 4 values")
        self.values = values

    @staticmethod
    def from_columns(a: Vector2, b: Vector2) -> Matrix2:
        """Build a matrix whose values are (a.x, b.x, a.y, b.y)."""
        return Matrix2([a.x, b.x, a.y, b.y])

    @staticmethod
    def rotation(degrees: float) -> Matrix2:
        radians = deg_to_rad(degrees)
        s = sin(radians)
        c = cos(radians)
        return Matrix2([c, s, -s, c])

    def to_zero(self) -> None:
        self.values = [0.0] * 4

    def invert(self) -> None:
        """Invert in place; raises ValueError for a singular matrix."""
        a, b, c, d = self.values
        det = a * d - b * c
        if det == 0.0:
            raise ValueError("matrix is singular")
        inv = 1.0 / det
        self.values = [d * inv, -b * inv, -c * inv, a * inv]

    def inverse(self) -> Matrix2:
        result = Matrix2(self.values)
        result.invert()
        return result

    def diagonal(self) -> Vector2:
        return Vector2(self.values[0], self.values[3])

    def set_diagonal(self, value: Vector2) -> None:
        self.values[0] = value.x
        self.values[3] = value.y

    def __mul__(self, vector):
        if not isinstance(vector, Vector2):
            return NotImplemented
        v = self.values
        return Vector2(
            vector.x * v[0] + vector.y * v[2],
            vector.x * v[1] + vector.y * v[3],
        )

    def __eq__(self, other):
        if not isinstance(other, Matrix2):
            return NotImplemented
        return self.values == other.values

    def __repr__(self):
        return f"Matrix2({self.values!r})"