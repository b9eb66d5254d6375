"""A column-major 4x4 matrix for OpenGL-style transforms."""

from __future__ import annotations

from math import cos, sin, tan

from .mathutil import PI_OVER_360, deg_to_rad
from .vectors import Vector3, Vector4


def _identity() -> list[float]:
    return [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]


class Matrix4:
    """4x4 matrix stored as sixteen floats in column-major order."""

    __slots__ = ("values",)

    def __init__(self, values=None):
        if values is None:
            self.values = _identity()
            return
        values = [float(v) for v in values]
        if len(values) != 16:
            raise ValueError("a Matrix4 needs exactly 16 values")
        self.values = values

    def to_zero(self) -> None:
        self.values = [0.0] * 16

    def to_identity(self) -> None:
        self.values = _identity()

    def position_vector(self) -> Vector3:
        v = self.values
        return Vector3(v[12], v[13], v[14])

    def set_position_vector(self, value: Vector3) -> None:
        self.values[12:15] = [value.x, value.y, value.z]

    def scaling_vector(self) -> Vector3:
        v = self.values
        return Vector3(v[0], v[5], v[10])

    def set_scaling_vector(self, value: Vector3) -> None:
        self.values[0] = value.x
        self.values[5] = value.y
        self.values[10] = value.z

    @staticmethod
    def rotation(degrees: float, axis: Vector3) -> Matrix4:
        """Rotation of `degrees` about `axis` (which need not be unit length)."""
        a = axis.normalised()
        c = cos(deg_to_rad(degrees))
        s = sin(deg_to_rad(degrees))
        t = 1.0 - c
        m = Matrix4()
        v = m.values
        v[0] = a.x * a.x * t + c
        v[1] = a.y * a.x * t + a.z * s
        v[2] = a.z * a.x * t - a.y * s

        v[4] = a.x * a.y * t - a.z * s
        v[5] = a.y * a.y * t + c
        v[6] = a.z * a.y * t + a.x * s

        v[8] = a.x * a.z * t + a.y * s
        v[9] = a.y * a.z * t - a.x * s
        v[10] = a.z * a.z * t + c
        return m

    @staticmethod
    def scale(scale: Vector3) -> Matrix4:
        m = Matrix4()
        m.set_scaling_vector(scale)
        return m

    @staticmethod
    def translation(translation: Vector3) -> Matrix4:
        m = Matrix4()
        m.set_position_vector(translation)
        return m

    @staticmethod
    def perspective(znear: float, zfar: float, aspect: float, fov: float) -> Matrix4:
        """Perspective projection with a vertical field of view in degrees."""
        m = Matrix4()
        h = 1.0 / tan(fov * PI_OVER_360)
        neg_depth = znear - zfar
        v = m.values
        v[0] = h / aspect
        v[5] = h
        v[10] = (zfar + znear) / neg_depth
        v[11] = -1.0
        v[14] = 2.0 * (znear * zfar) / neg_depth
        v[15] = 0.0
        return m

    @staticmethod
    def orthographic(
        znear: float, zfar: float, right: float, left: float, top: float, bottom: float
    ) -> Matrix4:
        m = Matrix4()
        v = m.values
        v[0] = 2.0 / (right - left)
        v[5] = 2.0 / (top - bottom)
        v[10] = -2.0 / (zfar - znear)
        v[12] = -(right + left) / (right - left)
        v[13] = -(top + bottom) / (top - bottom)
        v[14] = -(zfar + znear) / (zfar - znear)
        v[15] = 1.0
        return m

    @staticmethod
    def build_view_matrix(eye: Vector3, target: Vector3, up: Vector3 | None = None) -> Matrix4:
        """View matrix placing the camera at `eye`, looking at `target`."""
        if up is None:
            up = Vector3(0.0, 1.0, 0.0)
        r = Matrix4.translation(-eye)

        f = (target - eye).normalised()
        s = Vector3.cross(f, up)
        u = Vector3.cross(s, f).normalised()
        s = s.normalised()

        m = Matrix4()
        v = m.values
        v[0], v[4], v[8] = s.x, s.y, s.z
        v[1], v[5], v[9] = u.x, u.y, u.z
        v[2], v[6], v[10] = -f.x, -f.y, -f.z
        return m * r

    def transposed_rotation(self) -> Matrix4:
        """Identity matrix holding the transpose of this matrix's 3x3 block."""
        v = self.values
        m = Matrix4()
        t = m.values
        t[0], t[5], t[10] = v[0], v[5], v[10]
        t[1], t[4] = v[4], v[1]
        t[2], t[8] = v[8], v[2]
        t[6], t[9] = v[9], v[6]
        return m

    def invert(self) -> None:
        """Invert in place; raises ValueError for a singular matrix."""
        v = self.values

        d01_01 = v[0] * v[5] - v[1] * v[4]
        d01_02 = v[0] * v[6] - v[2] * v[4]
        d01_03 = v[0] * v[7] - v[3] * v[4]
        d01_12 = v[1] * v[6] - v[2] * v[5]
        d01_13 = v[1] * v[7] - v[3] * v[5]
        d01_23 = v[2] * v[7] - v[3] * v[6]

        d201_012 = v[8] * d01_12 - v[9] * d01_02 + v[10] * d01_01
        d201_013 = v[8] * d01_13 - v[9] * d01_03 + v[11] * d01_01
        d201_023 = v[8] * d01_23 - v[10] * d01_03 + v[11] * d01_02
        d201_123 = v[9] * d01_23 - v[10] * d01_13 + v[11] * d01_12

        det = (
            -d201_123 * v[12] + d201_023 * v[13] - d201_013 * v[14] + d201_012 * v[15]
        )
        if det == 0.0:
            raise ValueError("matrix is singular")
        inv = 1.0 / det

        d03_01 = v[0] * v[13] - v[1] * v[12]
        d03_02 = v[0] * v[14] - v[2] * v[12]
        d03_03 = v[0] * v[15] - v[3] * v[12]
        d03_12 = v[1] * v[14] - v[2] * v[13]
        d03_13 = v[1] * v[15] - v[3] * v[13]
        d03_23 = v[2] * v[15] - v[3] * v[14]

        d13_01 = v[4] * v[13] - v[5] * v[12]
        d13_02 = v[4] * v[14] - v[6] * v[12]
        d13_03 = v[4] * v[15] - v[7] * v[12]
        d13_12 = v[5] * v[14] - v[6] * v[13]
        d13_13 = v[5] * v[15] - v[7] * v[13]
        d13_23 = v[6] * v[15] - v[7] * v[14]

        d203_012 = v[8] * d03_12 - v[9] * d03_02 + v[10] * d03_01
        d203_013 = v[8] * d03_13 - v[9] * d03_03 + v[11] * d03_01
        d203_023 = v[8] * d03_23 - v[10] * d03_03 + v[11] * d03_02
        d203_123 = v[9] * d03_23 - v[10] * d03_13 + v[11] * d03_12

        d213_012 = v[8] * d13_12 - v[9] * d13_02 + v[10] * d13_01
        d213_013 = v[8] * d13_13 - v[9] * d13_03 + v[11] * d13_01
        d213_023 = v[8] * d13_23 - v[10] * d13_03 + v[11] * d13_02
        d213_123 = v[9] * d13_23 - v[10] * d13_13 + v[11] * d13_12

        d301_012 = v[12] * d01_12 - v[13] * d01_02 + v[14] * d01_01
        d301_013 = v[12] * d01_13 - v[13] * d01_03 + v[15] * d01_01
        d301_023 = v[12] * d01_23 - v[14] * d01_03 + v[15] * d01_02
        d301_123 = v[13] * d01_23 - v[14] * d01_13 + v[15] * d01_12

        self.values = [
            -d213_123 * inv, d203_123 * inv, d301_123 * inv, -d201_123 * inv,
            d213_023 * inv, -d203_023 * inv, -d301_023 * inv, d201_023 * inv,
            -d213_013 * inv, d203_013 * inv, d301_013 * inv, -d201_013 * inv,
            d213_012 * inv, -d203_012 * inv, -d301_012 * inv, d201_012 * inv,
        ]

    def inverse(self) -> Matrix4:
        result = Matrix4(self.values)
        result.invert()
        return result

    def __mul__(self, other):
        v = self.values
        if isinstance(other, Matrix4):
            a = other.values
            return Matrix4([
                sum(v[c + i * 4] * a[r * 4 + i] for i in range(4))
                for r in range(4)
                for c in range(4)
            ])
        if isinstance(other, Vector3):
            x, y, z = other.x, other.y, other.z
            w = x * v[3] + y * v[7] + z * v[11] + v[15]
            return Vector3(
                (x * v[0] + y * v[4] + z * v[8] + v[12]) / w,
                (x * v[1] + y * v[5] + z * v[9] + v[13]) / w,
                (x * v[2] + y * v[6] + z * v[10] + v[14]) / w,
            )
        if isinstance(other, Vector4):
            x, y, z, w = other.x, other.y, other.z, other.w
            return Vector4(
                x * v[0] + y * v[4] + z * v[8] + w * v[12],
                x * v[1] + y * v[5] + z * v[9] + w * v[13],
                x * v[2] + y * v[6] + z * v[10] + w * v[14],
                x * v[3] + y * v[7] + z * v[11] + w * v[15],
            )
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.values == other.values

    def __repr__(self):
        return f"Matrix4({self.values!r})"