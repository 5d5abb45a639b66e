import math

import pytest

from duckengine.mathutil import to_radians
from duckengine.matrix import (
    Matrix4,
    inverse,
    orthographic,
    perspective,
    rotate,
    rotate_quaternion,
    scale,
    translate,
)
from duckengine.quaternion import Quaternion
from duckengine.vector import magnitude
from duckengine.vector3 import Vector3
from duckengine.vector4 import Vector4


def _flat(m):
    return [value for column in m for value in column]


def _sample():
    return Matrix4(
        2, 0, 1, 0,
        1, 3, 0, 0,
        0, 1, 4, 0,
        5, -2, 7, 1,
    )


def test_default_is_identity():
    m = Matrix4()
    assert m == Matrix4(1)
    assert [m[i][i] for i in range(4)] == [1, 1, 1, 1]
    assert m[0][1] == 0


def test_scalar_constructor_sets_diagonal():
    m = Matrix4(2)
    assert [m[i][i] for i in range(4)] == [2, 2, 2, 2]
    assert m[3][0] == 0


def test_copy_is_independent():
    m = _sample()
    c = m.copy()
    c[0][0] = 99
    assert m[0][0] == 2
    assert c != m


def test_column_constructor_matches_scalars():
    m = Matrix4(Vector4(1, 2, 3, 4), Vector4(5, 6, 7, 8),
                Vector4(9, 10, 11, 12), Vector4(13, 14, 15, 16))
    assert m == Matrix4(*range(1, 17))
    assert list(m[1]) == [5, 6, 7, 8]


def test_bad_constructor_arguments():
    with pytest.raises(TypeError):
        Matrix4(1, 2, 3)
    with pytest.raises(TypeError):
        Matrix4("a")


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix4()[4]


def test_setitem_replaces_column():
    m = Matrix4()
    m[3] = Vector4(1, 2, 3, 1)
    assert list(m[3]) == [1, 2, 3, 1]


def test_scalar_arithmetic_round_trips():
    m = _sample()
    assert (m + 1) - 1 == m
    assert (1 + m) - 1 == m
    assert (m * 2) / 2 == m
    assert 2 * m == m * 2
    assert 3 - m == -(m - 3)
    assert +m == m


def test_matrix_add_sub():
    a = _sample()
    b = Matrix4(3)
    assert (a + b) - b == a


def test_identity_is_neutral_for_products():
    m = _sample()
    assert m * Matrix4() == m
    assert Matrix4() * m == m
    v = Vector4(1, 2, 3, 4)
    assert Matrix4() * v == v
    assert v * Matrix4() == v


def test_inverse_round_trip():
    m = _sample()
    product = m * inverse(m)
    assert _flat(product) == pytest.approx(_flat(Matrix4()), abs=1e-9)


def test_inverse_of_singular_raises():
    with pytest.raises(ValueError):
        inverse(Matrix4(0))


def test_matrix_division():
    a = _sample()
    b = translate(Matrix4(), Vector3(1.0, 2.0, 3.0))
    assert _flat((a / b) * b) == pytest.approx(_flat(a), abs=1e-9)


def test_vector_division():
    m = _sample()
    v = Vector4(1.0, -2.0, 0.5, 1.0)
    assert list(m * (m / v)) == pytest.approx(list(v), abs=1e-9)
    assert list((v / m) * m) == pytest.approx(list(v), abs=1e-9)


def test_translate_moves_point():
    m = translate(Matrix4(), Vector3(1.0, 2.0, 3.0))
    assert list(m * Vector4(0.0, 0.0, 0.0, 1.0)) == [1.0, 2.0, 3.0, 1.0]
    assert list(m * Vector4(1.0, 0.0, 0.0, 0.0)) == [1.0, 0.0, 0.0, 0.0]


def test_scale_scales_point():
    m = scale(Matrix4(), Vector3(2.0, 3.0, 4.0))
    assert list(m * Vector4(1.0, 1.0, 1.0, 1.0)) == [2.0, 3.0, 4.0, 1.0]


def test_rotate_preserves_length_and_undoes():
    axis = Vector3(0.0, 0.0, 1.0)
    m = rotate(Matrix4(), 0.7, axis)
    v = Vector4(3.0, 4.0, 0.0, 0.0)
    rotated = m * v
    assert magnitude(rotated) == pytest.approx(magnitude(v))
    back = rotate(m, -0.7, axis)
    assert _flat(back) == pytest.approx(_flat(Matrix4()), abs=1e-12)


def test_rotate_matches_quaternion_rotation():
    axis = Vector3(0.0, 1.0, 0.0)
    by_angle = rotate(Matrix4(), to_radians(30.0), axis)
    by_quat = rotate_quaternion(Matrix4(), Quaternion.angle_axis(30.0, axis))
    assert _flat(by_angle) == pytest.approx(_flat(by_quat), abs=1e-12)


def test_identity_quaternion_keeps_matrix():
    m = translate(Matrix4(), Vector3(1.0, 2.0, 3.0))
    assert rotate_quaternion(m, Quaternion()) == m


def test_orthographic_maps_box_to_unit_cube():
    m = orthographic(-2.0, 2.0, -1.0, 1.0, 0.5, 10.0)
    far_corner = m * Vector4(2.0, 1.0, 10.0, 1.0)
    near_corner = m * Vector4(-2.0, -1.0, 0.5, 1.0)
    assert list(far_corner) == pytest.approx([1.0, 1.0, 1.0, 1.0])
    assert list(near_corner) == pytest.approx([-1.0, -1.0, -1.0, 1.0])


def test_perspective_maps_near_and_far_planes():
    near, far = 0.25, 500.0
    m = perspective(to_radians(70.0), 1.6, near, far)
    at_near = m * Vector4(0.0, 0.0, near, 1.0)
    at_far = m * Vector4(0.0, 0.0, far, 1.0)
    assert at_near.z / at_near.w == pytest.approx(-1.0)
    assert at_far.z / at_far.w == pytest.approx(1.0)
    assert m[2][3] == 1.0
    assert m[1][1] == pytest.approx(1.0 / math.tan(to_radians(35.0)))


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0, 0.1, 10.0)