"""Cameras with perspective and orthographic projections."""

from __future__ import annotations

import abc

from duckengine.mathutil import to_radians
from duckengine.matrix import Matrix4, inverse, orthographic, perspective
from duckengine.transform import Transform

DEFAULT_ASPECT_RATIO = 800 / 600

_main: "Camera | None" = None


def get_main() -> "Camera | None":
    """The main camera, or None."""
    return _main


def set_main(camera: "Camera") -> None:
    """Make camera the main camera, refreshing its projection first."""
    global _main
    camera.recalculate_projection_matrix()
    _main = camera


class Camera(abc.ABC):
    """A view into the scene; the first camera created becomes the main one."""

    def __init__(self, near=0.25, far=500.0, aspect_ratio=DEFAULT_ASPECT_RATIO) -> None:
        global _main
        if _main is None:
            _main = self
        self.transform = Transform()
        self.near = near
        self.far = far
        self.aspect_ratio = aspect_ratio
        self._projection = Matrix4(1)

    def projection(self) -> Matrix4:
        """Current projection matrix."""
        return self._projection.copy()

    def view(self) -> Matrix4:
        """World-to-camera matrix."""
        return inverse(self.transform.local_to_world())

    def set_aspect_ratio(self, aspect_ratio) -> None:
        """Change the aspect ratio and rebuild the projection."""
        if not aspect_ratio > 0:
            raise ValueError(f"aspect ratio must be positive, got {aspect_ratio}")
        self.aspect_ratio = aspect_ratio
        self.recalculate_projection_matrix()

    @abc.abstractmethod
    def recalculate_projection_matrix(self) -> None:
        """Rebuild the projection matrix from the camera settings."""

    def release(self) -> None:
        """Stop being the main camera, if it is."""
        global _main
        if _main is self:
            _main = None


class CameraPerspective(Camera):
    """Perspective camera; fov is the vertical field of view in degrees."""

    def __init__(self, fov=70.0, near=0.25, far=500.0, aspect_ratio=DEFAULT_ASPECT_RATIO) -> None:
        super().__init__(near, far, aspect_ratio)
        self.fov = fov
        self.recalculate_projection_matrix()

    def recalculate_projection_matrix(self) -> None:
        self._projection = perspective(to_radians(self.fov), self.aspect_ratio, self.near, self.far)


class CameraOrthographic(Camera):
    """Orthographic camera spanning [-aspect, aspect] by [-1, 1]."""

    def __init__(self, near=-250.0, far=250.0, aspect_ratio=DEFAULT_ASPECT_RATIO) -> None:
        super().__init__(near, far, aspect_ratio)
        self.recalculate_projection_matrix()

    def recalculate_projection_matrix(self) -> None:
        a = self.aspect_ratio
        self._projection = orthographic(-a, a, -1.0, 1.0, self.near, self.far)