"""Four-component vector."""

from __future__ import annotations

from duckengine.vector import VectorBase


class Vector4(VectorBase):
    """Four-component vector.

    Accepts no arguments (zero), one scalar (broadcast), four components,
    or any mix of scalars, Vector2 and Vector3 values whose components add
    up to four (for example a Vector3 followed by a scalar, or two
    Vector2 values). A single vector argument must be a Vector4.
    """

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def __init__(self, *args) -> None:
        self._assign(args)