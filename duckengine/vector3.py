"""Three-component vector."""

from __future__ import annotations

from duckengine.vector import VectorBase


class Vector3(VectorBase):
    """Three-component vector.

    Accepts no arguments (zero), one scalar (broadcast), three components,
    a Vector2 followed by a scalar, a scalar followed by a Vector2, or a
    single vector with at least three components (truncated).
    """

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    def __init__(self, *args) -> None:
        self._assign(args)