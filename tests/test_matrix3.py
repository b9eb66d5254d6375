import math
from types import SimpleNamespace

import pytest

from islandgl.matrix2 import Matrix2
from islandgl.matrix3 import Matrix3
from islandgl.vectors import Vector3

X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)


def _mvalues(m):
    return pytest.approx(m.values, abs=1e-9)


def test_default_is_identity():
    assert Matrix3() == Matrix3([1, 0, 0, 0, 1, 0, 0, 0, 1])


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Matrix3([1.0] * 8)


def test_from_matrix2_layout():
    m2 = Matrix2([1.0, 2.0, 3.0, 4.0])
    assert Matrix3.from_matrix2(m2).values == [1, 2, 0, 3, 4, 0, 0, 0, 1]


def test_from_matrix4_takes_upper_block():
    m4 = SimpleNamespace(values=[float(i) for i in range(16)])
    assert Matrix3.from_matrix4(m4).values == [0, 1, 2, 4, 5, 6, 8, 9, 10]


def test_identity_quaternion_gives_identity():
    q = SimpleNamespace(x=0.0, y=0.0, z=0.0, w=1.0)
    assert Matrix3.from_quaternion(q) == Matrix3()


def test_quaternion_matches_axis_rotation():
    half = math.radians(40.0) / 2
    q = SimpleNamespace(x=0.0, y=0.0, z=math.sin(half), w=math.cos(half))
    assert Matrix3.from_quaternion(q).values == _mvalues(Matrix3.rotation(40.0, Z_AXIS))


def test_rotation_axis_is_normalised():
    a = Matrix3.rotation(25.0, Vector3(0.0, 0.0, 5.0))
    assert a.values == _mvalues(Matrix3.rotation(25.0, Z_AXIS))


@pytest.mark.parametrize("axis", [X_AXIS, Y_AXIS, Vector3(1.0, 2.0, -1.0)])
def test_rotation_is_orthonormal(axis):
    r = Matrix3.rotation(37.0, axis)
    assert (r.transposed() * r).values == _mvalues(Matrix3())


def test_rotation_leaves_axis_fixed():
    axis = Vector3(1.0, 2.0, -1.0)
    r = Matrix3.rotation(70.0, axis) * axis
    assert (r.x, r.y, r.z) == pytest.approx((1.0, 2.0, -1.0), abs=1e-9)


def test_opposite_rotations_cancel():
    axis = Vector3(0.3, -0.4, 0.8)
    product = Matrix3.rotation(50.0, axis) * Matrix3.rotation(-50.0, axis)
    assert product.values == _mvalues(Matrix3())


def test_quarter_turn_about_z():
    r = Matrix3.rotation(90.0, Z_AXIS) * X_AXIS
    assert (r.x, r.y, r.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_scale_puts_vector_on_diagonal():
    s = Vector3(2.0, 3.0, 4.0)
    m = Matrix3.scale(s)
    assert m.diagonal() == s
    assert m * Vector3(1.0, 1.0, 1.0) == s


def test_from_euler_zero_is_identity():
    assert Matrix3.from_euler(Vector3()).values == _mvalues(Matrix3())


def test_from_euler_x_matches_z_rotation():
    m = Matrix3.from_euler(Vector3(30.0, 0.0, 0.0))
    assert m.values == _mvalues(Matrix3.rotation(30.0, Z_AXIS))


def test_to_euler_of_identity_is_zero():
    e = Matrix3().to_euler()
    assert (e.x, e.y, e.z) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_to_euler_of_x_rotation():
    e = Matrix3.rotation(30.0, X_AXIS).to_euler()
    assert (e.x, e.y, e.z) == pytest.approx((30.0, 0.0, 0.0), abs=1e-6)


def test_to_zero_clears_every_value():
    m = Matrix3([float(i + 1) for i in range(9)])
    m.to_zero()
    assert m.values == [0.0] * 9


def test_row_and_column_round_trip():
    m = Matrix3()
    row = Vector3(1.0, 2.0, 3.0)
    m.set_row(2, row)
    assert m.row(2) == row
    col = Vector3(7.0, 8.0, 9.0)
    m.set_column(0, col)
    assert m.column(0) == col


def test_transposed_rows_are_columns():
    m = Matrix3([float(i) for i in range(9)])
    t = m.transposed()
    for i in range(3):
        assert t.row(i) == m.column(i)


def test_transpose_twice_is_original():
    m = Matrix3([float(i) for i in range(9)])
    m.transpose()
    m.transpose()
    assert m == Matrix3([float(i) for i in range(9)])


@pytest.mark.parametrize("index", [-1, 3])
def test_bad_index_raises(index):
    with pytest.raises(IndexError):
        Matrix3().row(index)
    with pytest.raises(IndexError):
        Matrix3().set_column(index, Vector3())


def test_diagonal_round_trip():
    m = Matrix3([float(i) for i in range(9)])
    d = Vector3(-1.0, -2.0, -3.0)
    m.set_diagonal(d)
    assert m.diagonal() == d


def test_absolute_is_non_negative():
    m = Matrix3([-1.0, 2.0, -3.0, 4.0, -5.0, 6.0, -7.0, 8.0, -9.0])
    assert m.absolute().values == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]


def test_identity_is_neutral_for_product():
    m = Matrix3([float(i) for i in range(9)])
    assert Matrix3() * m == m
    assert m * Matrix3() == m


def test_product_is_composition():
    a = Matrix3.rotation(20.0, X_AXIS)
    b = Matrix3([1.0, 2.0, 0.5, -1.0, 3.0, 2.0, 0.0, 1.0, 4.0])
    v = Vector3(0.5, -2.0, 1.5)
    left = (a * b) * v
    right = a * (b * v)
    assert (left.x, left.y, left.z) == pytest.approx((right.x, right.y, right.z), abs=1e-9)