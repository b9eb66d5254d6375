"""A column-major 3x3 matrix."""

from __future__ import annotations

from math import asin, atan2, cos, sin

from .mathutil import PI, deg_to_rad, rad_to_deg
from .vectors import Vector3


def _check_index(index: int) -> None:
    if not 0 <= index < 3:
        raise IndexError("Matrix3 row/column index out of range")


class Matrix3:
    """3x3 matrix stored as nine floats in column-major order."""

    __slots__ = ("values",)

    def __init__(self, values=None):
        if values is None:
            self.values = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
            return
        values = [float(v) for v in values]
        if len(values) != 9:
            raise ValueError("a Matrix3 needs exactly 9 values")
        self.values = values

    @staticmethod
    def from_matrix2(matrix) -> Matrix3:
        v = matrix.values
        return Matrix3([v[0], v[1], 0.0, v[2], v[3], 0.0, 0.0, 0.0, 1.0])

    @staticmethod
    def from_matrix4(matrix) -> Matrix3:
        """Take the upper-left 3x3 block of a 4x4 matrix."""
        v = matrix.values
        return Matrix3([v[0], v[1], v[2], v[4], v[5], v[6], v[8], v[9], v[10]])

    @staticmethod
    def from_quaternion(quat) -> Matrix3:
        x, y, z, w = quat.x, quat.y, quat.z, quat.w
        yy, zz, xx = y * y, z * z, x * x
        xy, zw, xz = x * y, z * w, x * z
        yw, yz, xw = y * w, y * z, x * w
        return Matrix3([
            1 - 2 * yy - 2 * zz,
            2 * xy + 2 * zw,
            2 * xz - 2 * yw,
            2 * xy - 2 * zw,
            1 - 2 * xx - 2 * zz,
            2 * yz + 2 * xw,
            2 * xz + 2 * yw,
            2 * yz - 2 * xw,
            1 - 2 * xx - 2 * yy,
        ])

    @staticmethod
    def rotation(degrees: float, axis: Vector3) -> Matrix3:
        """Rotation of `degrees` about `axis` (which need not be unit length)."""
        a = axis.normalised()
        c = cos(deg_to_rad(degrees))
        s = sin(deg_to_rad(degrees))
        t = 1.0 - c
        return Matrix3([
            a.x * a.x * t + c,
            a.y * a.x * t + a.z * s,
            a.z * a.x * t - a.y * s,
            a.x * a.y * t - a.z * s,
            a.y * a.y * t + c,
            a.z * a.y * t + a.x * s,
            a.x * a.z * t + a.y * s,
            a.y * a.z * t - a.x * s,
            a.z * a.z * t + c,
        ])

    @staticmethod
    def scale(scale: Vector3) -> Matrix3:
        m = Matrix3()
        m.set_diagonal(scale)
        return m

    @staticmethod
    def from_euler(euler: Vector3) -> Matrix3:
        heading = deg_to_rad(euler.y)
        attitude = deg_to_rad(euler.x)
        bank = deg_to_rad(euler.z)

        ch, sh = cos(heading), sin(heading)
        ca, sa = cos(attitude), sin(attitude)
        cb, sb = cos(bank), sin(bank)

        m = Matrix3()
        v = m.values
        v[0] = ch * ca
        v[3] = sh * sb - ch * sa * cb
        v[6] = ch * sa * sb + sh * cb
        v[1] = sa
        v[4] = ca * cb
        v[7] = -ca * sb
        v[2] = -sh * ca
        v[5] = sh * sa * cb + ch * sb
        v[8] = -sh * sa * sb + ch * cb
        return m

    def to_euler(self) -> Vector3:
        """Decompose into Euler angles in degrees."""
        v = self.values
        if abs(v[2]) + 0.00001 < 1.0:
            theta = -asin(v[2])
            cos_theta = cos(theta)
            psi = rad_to_deg(atan2(v[5] / cos_theta, v[8] / cos_theta))
            phi = rad_to_deg(atan2(v[1] / cos_theta, v[0] / cos_theta))
            return Vector3(psi, rad_to_deg(theta), phi)

        phi = 0.0
        delta = atan2(v[3], v[6])
        theta = PI / 2.0 if v[2] < 0.0 else -PI / 2.0
        psi = phi + delta
        return Vector3(rad_to_deg(psi), rad_to_deg(theta), rad_to_deg(phi))

    def to_zero(self) -> None:
        self.values = [0.0] * 9

    def row(self, index: int) -> Vector3:
        _check_index(index)
        v = self.values
        return Vector3(v[index], v[index + 3], v[index + 6])

    def set_row(self, index: int, value: Vector3) -> None:
        _check_index(index)
        self.values[index] = value.x
        self.values[index + 3] = value.y
        self.values[index + 6] = value.z

    def column(self, index: int) -> Vector3:
        _check_index(index)
        start = 3 * index
        return Vector3(*self.values[start:start + 3])

    def set_column(self, index: int, value: Vector3) -> None:
        _check_index(index)
        start = 3 * index
        self.values[start:start + 3] = [value.x, value.y, value.z]

    def diagonal(self) -> Vector3:
        v = self.values
        return Vector3(v[0], v[4], v[8])

    def set_diagonal(self, value: Vector3) -> None:
        self.values[0] = value.x
        self.values[4] = value.y
        self.values[8] = value.z

    def absolute(self) -> Matrix3:
        return Matrix3([abs(v) for v in self.values])

    def transpose(self) -> None:
        v = self.values
        v[1], v[3] = v[3], v[1]
        v[2], v[6] = v[6], v[2]
        v[5], v[7] = v[7], v[5]

    def transposed(self) -> Matrix3:
        result = Matrix3(self.values)
        result.transpose()
        return result

    def __mul__(self, other):
        v = self.values
        if isinstance(other, Vector3):
            return Vector3(
                other.x * v[0] + other.y * v[3] + other.z * v[6],
                other.x * v[1] + other.y * v[4] + other.z * v[7],
                other.x * v[2] + other.y * v[5] + other.z * v[8],
            )
        if isinstance(other, Matrix3):
            a = other.values
            return Matrix3([
                sum(v[c + i * 3] * a[r * 3 + i] for i in range(3))
                for r in range(3)
                for c in range(3)
            ])
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self.values == other.values

    def __repr__(self):
        return f"Matrix3({self.values!r})"