"""Small fixed-size vectors and the free functions that operate on them."""

from __future__ import annotations

import math
import numbers
import operator
from typing import Callable, Iterable, Iterator

from duckengine.mathutil import clamp


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real)


def _expand(args: tuple, size: int, name: str) -> tuple:
    """Turn constructor arguments into exactly `size` components."""
    if not args:
        return (0,) * size
    if len(args) == 1:
        (arg,) = args
        if _is_scalar(arg):
            return (arg,) * size
        if isinstance(arg, VectorBase):
            if len(arg) < size:
                raise TypeError(f"{name} cannot be built from a {len(arg)}-component vector")
            return tuple(arg)[:size]
        raise TypeError(f"{name} cannot be built from {type(arg).__name__}")
    values: list = []
    for arg in args:
        if isinstance(arg, VectorBase):
            values.extend(arg)
        elif _is_scalar(arg):
            values.append(arg)
        else:
            raise TypeError(f"{name} cannot be built from {type(arg).__name__}")
    if len(values) != size:
        raise TypeError(f"{name} needs {size} components, got {len(values)}")
    return tuple(values)


class VectorBase:
    """Common behaviour of the fixed-size vector types."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()

    def _assign(self, args: tuple) -> None:
        values = _expand(args, len(self._fields), type(self).__name__)
        for name, value in zip(self._fields, values):
            setattr(self, name, value)

    @classmethod
    def _make(cls, values: Iterable):
        return cls(*values)

    def copy(self):
        """Return an independent vector with the same components."""
        return self._make(self)

    def _field(self, index) -> str:
        index = operator.index(index)
        if not 0 <= index < len(self._fields):
            raise IndexError(f"{type(self).__name__} index out of range: {index}")
        return self._fields[index]

    def __getitem__(self, index):
        return getattr(self, self._field(index))

    def __setitem__(self, index, value) -> None:
        setattr(self, self._field(index), value)

    def __iter__(self) -> Iterator:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({parts})"

    def __eq__(self, other):
        if not isinstance(other, VectorBase):
            return NotImplemented
        return type(self) is type(other) and tuple(self) == tuple(other)

    __hash__ = None

    def _elementwise(self, other, op: Callable):
        if isinstance(other, VectorBase):
            if len(other) != len(self):
                return NotImplemented
            return self._make(op(a, b) for a, b in zip(self, other))
        if _is_scalar(other):
            return self._make(op(a, other) for a in self)
        return NotImplemented

    def _reflected(self, other, op: Callable):
        if _is_scalar(other):
            return self._make(op(other, a) for a in self)
        return NotImplemented

    def __neg__(self):
        return self._make(-a for a in self)

    def __pos__(self):
        return self.copy()

    def __invert__(self):
        return self._make(~a for a in self)

    def __add__(self, other):
        return self._elementwise(other, operator.add)

    def __radd__(self, other):
        return self._reflected(other, operator.add)

    def __sub__(self, other):
        return self._elementwise(other, operator.sub)

    def __rsub__(self, other):
        return self._reflected(other, operator.sub)

    def __mul__(self, other):
        return self._elementwise(other, operator.mul)

    def __rmul__(self, other):
        return self._reflected(other, operator.mul)

    def __truediv__(self, other):
        return self._elementwise(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._reflected(other, operator.truediv)

    def __mod__(self, other):
        return self._elementwise(other, operator.mod)

    def __rmod__(self, other):
        return self._reflected(other, operator.mod)

    def __and__(self, other):
        return self._elementwise(other, operator.and_)

    def __rand__(self, other):
        return self._reflected(other, operator.and_)

    def __or__(self, other):
        return self._elementwise(other, operator.or_)

    def __ror__(self, other):
        return self._reflected(other, operator.or_)

    def __xor__(self, other):
        return self._elementwise(other, operator.xor)

    def __rxor__(self, other):
        return self._reflected(other, operator.xor)

    def __lshift__(self, other):
        return self._elementwise(other, operator.lshift)

    def __rlshift__(self, other):
        return self._reflected(other, operator.lshift)

    def __rshift__(self, other):
        return self._elementwise(other, operator.rshift)

    def __rrshift__(self, other):
        return self._reflected(other, operator.rshift)


class Vector2(VectorBase):
    """Two-component vector.

    Accepts no arguments (zero), one scalar (broadcast), two components,
    or a vector with at least two components (truncated).
    """

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    def __init__(self, *args) -> None:
        self._assign(args)


def _same_size(a: VectorBase, b: VectorBase) -> None:
    if len(a) != len(b):
        raise ValueError(f"vector sizes differ: {len(a)} and {len(b)}")


def dot(a: VectorBase, b: VectorBase):
    """Dot product of two vectors of the same size."""
    _same_size(a, b)
    return sum(a * b)


def cross(a: VectorBase, b: VectorBase):
    """Cross product of two three-component vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("cross product needs three-component vectors")
    return type(a)(
        a.y * b.z - b.y * a.z,
        a.z * b.x - b.z * a.x,
        a.x * b.y - b.x * a.y,
    )


def sqr_magnitude(v: VectorBase):
    """Squared length of a vector."""
    return dot(v, v)


def magnitude(v: VectorBase) -> float:
    """Length of a vector."""
    return math.sqrt(dot(v, v))


def distance(a: VectorBase, b: VectorBase) -> float:
    """Distance between two points."""
    _same_size(a, b)
    return magnitude(a - b)


def normalize(v: VectorBase):
    """Scale v by the reciprocal of its squared length.

    Unit vectors come back unchanged.
    """
    return v * (1.0 / dot(v, v))


def lerp(a: VectorBase, b: VectorBase, t: float):
    """Linear interpolation from a to b, with t clamped to [0, 1]."""
    _same_size(a, b)
    t = clamp(t, 0.0, 1.0)
    return a * (1.0 - t) + b * t


def angle(a: VectorBase, b: VectorBase) -> float:
    """Angle in radians between two unit vectors."""
    return math.acos(clamp(dot(a, b), -1.0, 1.0))