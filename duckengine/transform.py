"""Position, rotation and scale in 3D space, with an optional parent."""

from __future__ import annotations

from duckengine.matrix import Matrix4, rotate_quaternion, translate
from duckengine.matrix import scale as scale_matrix
from duckengine.quaternion import Quaternion
from duckengine.vector3 import Vector3


def _as_rotation(rotation) -> Quaternion:
    if rotation is None:
        return Quaternion()
    if isinstance(rotation, Quaternion):
        return rotation.copy()
    if isinstance(rotation, Vector3):
        return Quaternion.from_euler(rotation)
    raise TypeError(f"rotation must be a Quaternion or Euler angles, not {type(rotation).__name__}")


class Transform:
    """Local position, rotation and scale, optionally relative to a parent.

    The rotation may be given as a Quaternion or as Euler angles in
    degrees (a Vector3). The local matrix is cached and rebuilt only when
    position, rotation or scale change.
    """

    def __init__(self, position=None, rotation=None, scale=None, parent=None) -> None:
        self.position = Vector3(0.0) if position is None else Vector3(position)
        self.rotation = _as_rotation(rotation)
        self.scale = Vector3(1.0) if scale is None else Vector3(scale)
        self.parent: Transform | None = parent
        self._cached_key: tuple | None = None
        self._cached_matrix = Matrix4()

    def copy(self) -> "Transform":
        """Independent transform with the same position, rotation and scale, and no parent."""
        return Transform(self.position, self.rotation, self.scale)

    def _local_matrix(self) -> Matrix4:
        key = (tuple(self.position), tuple(self.rotation), tuple(self.scale))
        if key != self._cached_key:
            t = translate(Matrix4(), self.position)
            r = rotate_quaternion(Matrix4(), self.rotation)
            s = scale_matrix(Matrix4(), self.scale)
            self._cached_matrix = t * r * s
            self._cached_key = key
        return self._cached_matrix

    def local_to_world(self) -> Matrix4:
        """Matrix taking local coordinates to world coordinates."""
        local = self._local_matrix()
        if self.parent is not None:
            return self.parent.local_to_world() * local
        return local.copy()

    def right(self) -> Vector3:
        """World-space direction of the local x axis."""
        return Vector3(self.local_to_world()[0])

    def up(self) -> Vector3:
        """World-space direction of the local y axis."""
        return Vector3(self.local_to_world()[1])

    def forward(self) -> Vector3:
        """World-space direction of the local z axis."""
        return Vector3(self.local_to_world()[2])