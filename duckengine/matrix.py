"""Column-major 4x4 matrices and the transforms built from them."""

from __future__ import annotations

import math
import numbers
import operator
from typing import Iterator

from duckengine.quaternion import Quaternion
from duckengine.vector import VectorBase, dot, normalize
from duckengine.vector3 import Vector3
from duckengine.vector4 import Vector4


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real)


class Matrix4:
    """4x4 matrix stored as four column vectors.

    Accepts no arguments (identity), one scalar (diagonal), another
    Matrix4 (copy), four four-component columns, or sixteen scalars given
    column by column. Indexing returns the column itself, so
    ``m[3][0] = 5`` edits the matrix in place.
    """

    __slots__ = ("_columns",)

    def __init__(self, *args) -> None:
        if not args:
            args = (1,)
        if len(args) == 1:
            (arg,) = args
            if isinstance(arg, Matrix4):
                self._columns = [column.copy() for column in arg]
            elif _is_scalar(arg):
                self._columns = [
                    Vector4(*(arg if row == col else 0 for row in range(4)))
                    for col in range(4)
                ]
            else:
                raise TypeError(f"Matrix4 cannot be built from {type(arg).__name__}")
        elif len(args) == 4:
            columns = []
            for arg in args:
                if not isinstance(arg, VectorBase) or len(arg) != 4:
                    raise TypeError("Matrix4 columns must be four-component vectors")
                columns.append(Vector4(*arg))
            self._columns = columns
        elif len(args) == 16:
            if not all(_is_scalar(a) for a in args):
                raise TypeError("Matrix4 components must be real numbers")
            self._columns = [Vector4(*args[i:i + 4]) for i in range(0, 16, 4)]
        else:
            raise TypeError(f"Matrix4 takes 0, 1, 4 or 16 arguments, got {len(args)}")

    def copy(self) -> "Matrix4":
        """Return an independent matrix with the same components."""
        return Matrix4(self)

    def _index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < 4:
            raise IndexError(f"Matrix4 column index out of range: {index}")
        return index

    def __getitem__(self, index) -> Vector4:
        return self._columns[self._index(index)]

    def __setitem__(self, index, value) -> None:
        if not isinstance(value, VectorBase) or len(value) != 4:
            raise TypeError("Matrix4 columns must be four-component vectors")
        self._columns[self._index(index)] = Vector4(*value)

    def __iter__(self) -> Iterator[Vector4]:
        return iter(self._columns)

    def __repr__(self) -> str:
        columns = ", ".join(repr(tuple(column)) for column in self._columns)
        return f"Matrix4({columns})"

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return all(a == b for a, b in zip(self, other))

    __hash__ = None

    def _map(self, func) -> "Matrix4":
        return Matrix4(*(func(column) for column in self._columns))

    def __neg__(self) -> "Matrix4":
        return self._map(operator.neg)

    def __pos__(self) -> "Matrix4":
        return self.copy()

    def __add__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(*(a + b for a, b in zip(self, other)))
        if _is_scalar(other):
            return self._map(lambda column: column + other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return self._map(lambda column: column + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(*(a - b for a, b in zip(self, other)))
        if _is_scalar(other):
            return self._map(lambda column: column - other)
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return self._map(lambda column: other - column)
        return NotImplemented

    def _apply(self, v) -> Vector4:
        c0, c1, c2, c3 = self._columns
        return (c0 * v[0] + c1 * v[1]) + (c2 * v[2] + c3 * v[3])

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(*(self._apply(column) for column in other))
        if isinstance(other, Vector4):
            return self._apply(other)
        if _is_scalar(other):
            return self._map(lambda column: column * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vector4):
            return Vector4(*(dot(column, other) for column in self._columns))
        if _is_scalar(other):
            return self._map(lambda column: column * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Matrix4):
            return self * inverse(other)
        if isinstance(other, Vector4):
            return inverse(self) * other
        if _is_scalar(other):
            return self._map(lambda column: column / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Vector4):
            return other * inverse(self)
        if _is_scalar(other):
            return self._map(lambda column: other / column)
        return NotImplemented


def inverse(m: Matrix4) -> Matrix4:
    """Inverse of a 4x4 matrix; raises ValueError when it is singular."""
    coef00 = m[2][2] * m[3][3] - m[3][2] * m[2][3]
    coef02 = m[1][2] * m[3][3] - m[3][2] * m[1][3]
    coef03 = m[1][2] * m[2][3] - m[2][2] * m[1][3]

    coef04 = m[2][1] * m[3][3] - m[3][1] * m[2][3]
    coef06 = m[1][1] * m[3][3] - m[3][1] * m[1][3]
    coef07 = m[1][1] * m[2][3] - m[2][1] * m[1][3]

    coef08 = m[2][1] * m[3][2] - m[3][1] * m[2][2]
    coef10 = m[1][1] * m[3][2] - m[3][1] * m[1][2]
    coef11 = m[1][1] * m[2][2] - m[2][1] * m[1][2]

    coef12 = m[2][0] * m[3][3] - m[3][0] * m[2][3]
    coef14 = m[1][0] * m[3][3] - m[3][0] * m[1][3]
    coef15 = m[1][0] * m[2][3] - m[2][0] * m[1][3]

    coef16 = m[2][0] * m[3][2] - m[3][0] * m[2][2]
    coef18 = m[1][0] * m[3][2] - m[3][0] * m[1][2]
    coef19 = m[1][0] * m[2][2] - m[2][0] * m[1][2]

    coef20 = m[2][0] * m[3][1] - m[3][0] * m[2][1]
    coef22 = m[1][0] * m[3][1] - m[3][0] * m[1][1]
    coef23 = m[1][0] * m[2][1] - m[2][0] * m[1][1]

    fac0 = Vector4(coef00, coef00, coef02, coef03)
    fac1 = Vector4(coef04, coef04, coef06, coef07)
    fac2 = Vector4(coef08, coef08, coef10, coef11)
    fac3 = Vector4(coef12, coef12, coef14, coef15)
    fac4 = Vector4(coef16, coef16, coef18, coef19)
    fac5 = Vector4(coef20, coef20, coef22, coef23)

    vec0 = Vector4(m[1][0], m[0][0], m[0][0], m[0][0])
    vec1 = Vector4(m[1][1], m[0][1], m[0][1], m[0][1])
    vec2 = Vector4(m[1][2], m[0][2], m[0][2], m[0][2])
    vec3 = Vector4(m[1][3], m[0][3], m[0][3], m[0][3])

    inv0 = vec1 * fac0 - vec2 * fac1 + vec3 * fac2
    inv1 = vec0 * fac0 - vec2 * fac3 + vec3 * fac4
    inv2 = vec0 * fac1 - vec1 * fac3 + vec3 * fac5
    inv3 = vec0 * fac2 - vec1 * fac4 + vec2 * fac5

    sign_a = Vector4(1, -1, 1, -1)
    sign_b = Vector4(-1, 1, -1, 1)
    result = Matrix4(inv0 * sign_a, inv1 * sign_b, inv2 * sign_a, inv3 * sign_b)

    row0 = Vector4(result[0][0], result[1][0], result[2][0], result[3][0])
    dot0 = m[0] * row0
    determinant = (dot0.x + dot0.y) + (dot0.z + dot0.w)
    if determinant == 0:
        raise ValueError("matrix is singular")
    return result * (1.0 / determinant)


def translate(m: Matrix4, v) -> Matrix4:
    """Return m followed by a translation by the three-component vector v."""
    result = Matrix4(m)
    result[3] = m[0] * v[0] + m[1] * v[1] + m[2] * v[2] + m[3]
    return result


def _apply_rotation(m: Matrix4, r: list[list[float]]) -> Matrix4:
    result = Matrix4()
    for i in range(3):
        result[i] = m[0] * r[i][0] + m[1] * r[i][1] + m[2] * r[i][2]
    result[3] = m[3]
    return result


def rotate(m: Matrix4, angle: float, axis) -> Matrix4:
    """Return m followed by a rotation of `angle` radians about `axis`."""
    c = math.cos(angle)
    s = math.sin(angle)
    a = normalize(Vector3(axis))
    t = a * (1.0 - c)
    r = [
        [c + t[0] * a[0], t[0] * a[1] + s * a[2], t[0] * a[2] - s * a[1]],
        [t[1] * a[0] - s * a[2], c + t[1] * a[1], t[1] * a[2] + s * a[0]],
        [t[2] * a[0] + s * a[1], t[2] * a[1] - s * a[0], c + t[2] * a[2]],
    ]
    return _apply_rotation(m, r)


def rotate_quaternion(m: Matrix4, q: Quaternion) -> Matrix4:
    """Return m followed by the rotation described by quaternion q."""
    qxx, qyy, qzz = q.x * q.x, q.y * q.y, q.z * q.z
    qxz, qxy, qyz = q.x * q.z, q.x * q.y, q.y * q.z
    qwx, qwy, qwz = q.w * q.x, q.w * q.y, q.w * q.z
    r = [
        [1.0 - 2.0 * (qyy + qzz), 2.0 * (qxy + qwz), 2.0 * (qxz - qwy)],
        [2.0 * (qxy - qwz), 1.0 - 2.0 * (qxx + qzz), 2.0 * (qyz + qwx)],
        [2.0 * (qxz + qwy), 2.0 * (qyz - qwx), 1.0 - 2.0 * (qxx + qyy)],
    ]
    return _apply_rotation(m, r)


def scale(m: Matrix4, v) -> Matrix4:
    """Return m followed by a scale by the three-component vector v."""
    result = Matrix4()
    result[0] = m[0] * v[0]
    result[1] = m[1] * v[1]
    result[2] = m[2] * v[2]
    result[3] = m[3]
    return result


def orthographic(left, right, bottom, top, z_near, z_far) -> Matrix4:
    """Left-handed orthographic projection."""
    result = Matrix4(1)
    result[0][0] = 2.0 / (right - left)
    result[1][1] = 2.0 / (top - bottom)
    result[2][2] = 2.0 / (z_far - z_near)
    result[3][0] = -(right + left) / (right - left)
    result[3][1] = -(top + bottom) / (top - bottom)
    result[3][2] = -(z_far + z_near) / (z_far - z_near)
    return result


def perspective(fovy, aspect, z_near, z_far) -> Matrix4:
    """Left-handed perspective projection; fovy is in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    tan_half_fovy = math.tan(fovy / 2.0)
    result = Matrix4(0)
    result[0][0] = 1.0 / (aspect * tan_half_fovy)
    result[1][1] = 1.0 / tan_half_fovy
    result[2][2] = (z_far + z_near) / (z_far - z_near)
    result[2][3] = 1.0
    result[3][2] = -(2.0 * z_far * z_near) / (z_far - z_near)
    return result