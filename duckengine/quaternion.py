"""Rotation quaternions."""

from __future__ import annotations

import math
import numbers
import operator
import sys
from typing import Iterator

from duckengine.mathutil import COS_ONE_OVER_TWO, clamp, to_degrees, to_radians
from duckengine.vector import cross as vector_cross
from duckengine.vector import dot as vector_dot
from duckengine.vector3 import Vector3
from duckengine.vector4 import Vector4

_EPSILON = sys.float_info.epsilon


def _lerp_scalar(a: float, b: float, t: float) -> float:
    if t == 1:
        return b
    return a + t * (b - a)


class Quaternion:
    """Quaternion with components x, y, z (vector part) and w (scalar part).

    The default value is the identity rotation (0, 0, 0, 1). Angles taken
    and returned by the Euler helpers are in degrees.
    """

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.w = w

    # Alternative constructors

    @classmethod
    def from_vector(cls, v, s) -> "Quaternion":
        """Build from a three-component vector part and a scalar part."""
        return cls(v.x, v.y, v.z, s)

    @classmethod
    def from_euler(cls, euler) -> "Quaternion":
        """Build from Euler angles in degrees (pitch, yaw, roll), ZYX order."""
        ex = to_radians(euler.x) * 0.5
        ey = to_radians(euler.y) * 0.5
        ez = to_radians(euler.z) * 0.5
        cx, cy, cz = math.cos(ex), math.cos(ey), math.cos(ez)
        sx, sy, sz = math.sin(ex), math.sin(ey), math.sin(ez)
        return cls(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    @classmethod
    def from_to(cls, u, v) -> "Quaternion":
        """Shortest rotation taking direction u onto direction v."""
        norm_u_norm_v = math.sqrt(vector_dot(u, u) * vector_dot(v, v))
        real_part = norm_u_norm_v + vector_dot(u, v)
        if real_part < 1.0e-6 * norm_u_norm_v:
            # Opposite directions: rotate half a turn about any orthogonal axis.
            real_part = 0.0
            if abs(u.x) > abs(u.z):
                t = Vector3(-u.y, u.x, 0.0)
            else:
                t = Vector3(0.0, -u.z, u.y)
        else:
            t = vector_cross(u, v)
        return cls(t.x, t.y, t.z, real_part).normalized()

    @classmethod
    def angle_axis(cls, angle, axis) -> "Quaternion":
        """Rotation of `angle` degrees about `axis`."""
        a = to_radians(angle)
        s = math.sin(a * 0.5)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(a * 0.5))

    # Queries and operations

    def copy(self) -> "Quaternion":
        """Return an independent quaternion with the same components."""
        return Quaternion(self.x, self.y, self.z, self.w)

    def angle(self) -> float:
        """Rotation angle in radians."""
        if abs(self.w) > COS_ONE_OVER_TWO:
            return math.asin(math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)) * 2.0
        return math.acos(self.w) * 2.0

    def dot(self, other: "Quaternion") -> float:
        """Four-component dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def magnitude(self) -> float:
        """Length of the quaternion."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> "Quaternion":
        """Unit-length copy; a zero quaternion gives (1, 0, 0, 0)."""
        length = self.magnitude()
        if length <= 0:
            return Quaternion(1.0, 0.0, 0.0, 0.0)
        inv = 1.0 / length
        return Quaternion(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def cross(self, other: "Quaternion") -> "Quaternion":
        """Hamilton product self * other."""
        p, q = self, other
        return Quaternion(
            p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
            p.w * q.y + p.y * q.w + p.z * q.x - p.x * q.z,
            p.w * q.z + p.z * q.w + p.x * q.y - p.y * q.x,
            p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
        )

    def conjugate(self) -> "Quaternion":
        """Quaternion with the vector part negated."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        """Multiplicative inverse."""
        return self.conjugate() / self.dot(self)

    def _component_lerp(self, other: "Quaternion", t: float) -> "Quaternion":
        return Quaternion(*(_lerp_scalar(a, b, t) for a, b in zip(self, other)))

    def _spherical(self, other: "Quaternion", t: float, cos_theta: float) -> "Quaternion":
        theta = math.acos(clamp(cos_theta, -1.0, 1.0))
        return (math.sin((1.0 - t) * theta) * self + math.sin(t * theta) * other) / math.sin(theta)

    def lerp(self, other: "Quaternion", t: float) -> "Quaternion":
        """Spherical interpolation without taking the shortest path; t is clamped to [0, 1]."""
        t = clamp(t, 0.0, 1.0)
        cos_theta = self.dot(other)
        if cos_theta > 1.0 - _EPSILON:
            return self._component_lerp(other, t)
        return self._spherical(other, t, cos_theta)

    def slerp(self, other: "Quaternion", t: float) -> "Quaternion":
        """Spherical interpolation along the shortest path; t is clamped to [0, 1]."""
        t = clamp(t, 0.0, 1.0)
        target = other
        cos_theta = self.dot(other)
        if cos_theta < 0:
            target = -other
            cos_theta = -cos_theta
        if cos_theta > 1.0 - _EPSILON:
            return self._component_lerp(target, t)
        return self._spherical(target, t, cos_theta)

    def euler(self) -> Vector3:
        """Euler angles in degrees as (pitch, yaw, roll)."""
        return Vector3(self.pitch(), self.yaw(), self.roll())

    def roll(self) -> float:
        """Rotation about the z axis in degrees."""
        x, y, z, w = self
        return to_degrees(math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z))

    def pitch(self) -> float:
        """Rotation about the x axis in degrees."""
        x, y, z, w = self
        return to_degrees(math.atan2(2.0 * (y * z + w * x), w * w - x * x - y * y + z * z))

    def yaw(self) -> float:
        """Rotation about the y axis in degrees."""
        x, y, z, w = self
        return to_degrees(math.asin(clamp(-2.0 * (x * z - w * y), -1.0, 1.0)))

    # Container protocol

    def __getitem__(self, index):
        index = operator.index(index)
        if not 0 <= index < 4:
            raise IndexError(f"Quaternion index out of range: {index}")
        return getattr(self, self._fields[index])

    def __iter__(self) -> Iterator:
        return (getattr(self, name) for name in self._fields)

    def __repr__(self) -> str:
        return f"Quaternion(x={self.x!r}, y={self.y!r}, z={self.z!r}, w={self.w!r})"

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None

    # Arithmetic

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __pos__(self) -> "Quaternion":
        return self.copy()

    def __add__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self, other)))

    def _rotate(self, v: Vector3) -> Vector3:
        axis = Vector3(self.x, self.y, self.z)
        uv = vector_cross(axis, v)
        uuv = vector_cross(axis, uv)
        return v + ((uv * self.w) + uuv) * 2.0

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.cross(other)
        if isinstance(other, Vector4):
            return Vector4(self._rotate(Vector3(other)), other.w)
        if isinstance(other, Vector3):
            return self._rotate(other)
        if isinstance(other, numbers.Real):
            return Quaternion(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        if isinstance(other, (Vector3, Vector4)):
            return self.inverse() * other
        return NotImplemented

    def __truediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Quaternion(self.x / other, self.y / other, self.z / other, self.w / other)