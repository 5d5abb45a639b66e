"""Light descriptions and the registry that feeds them to the renderer."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from duckengine.vector3 import Vector3
from duckengine.vector4 import Vector4

VECTOR4_SIZE = 16
LIGHT_BLOCK_SIZE = 96
MAX_POINT_LIGHTS = 256
MAX_SPOT_LIGHTS = 256


def _vec(x, y, z):
    return field(default_factory=lambda: Vector3(x, y, z))


@dataclass(kw_only=True)
class Light:
    """Diffuse and specular colour of a light."""

    diffuse: Vector3 = _vec(0.35, 0.35, 0.35)
    specular: Vector3 = _vec(1.0, 1.0, 1.0)


@dataclass(kw_only=True)
class LightDirectional(Light):
    """Light arriving from one direction everywhere."""

    direction: Vector3 = _vec(1.0, -0.5, 0.5)


@dataclass(kw_only=True)
class LightPoint(Light):
    """Light radiating from a point with distance attenuation."""

    position: Vector3 = _vec(1.0, 0.0, 1.0)
    constant: float = 1.0
    linear: float = 0.09
    quadratic: float = 0.032


@dataclass(kw_only=True)
class LightSpot(Light):
    """Cone of light from a point; cutoff is the cosine of the cone angle."""

    position: Vector3 = _vec(1.0, 0.0, 1.0)
    direction: Vector3 = _vec(1.0, 0.0, 0.0)
    cutoff: float = 0.976


def _remove_same(lights: list, light) -> None:
    for i, candidate in enumerate(lights):
        if candidate is light:
            del lights[i]
            return


class LightRegistry:
    """Scene-wide lighting: ambient, directional, point and spot lights."""

    def __init__(self) -> None:
        self.ambient_light = Light()
        self.directional_light = LightDirectional()
        self.background_color = Vector4(0.6, 0.7, 0.9, 1.0)
        self.point_lights: list[LightPoint] = []
        self.spot_lights: list[LightSpot] = []

    def add_point_light(self, light: LightPoint) -> LightPoint:
        """Register a point light and return it."""
        self.point_lights.append(light)
        return light

    def remove_point_light(self, light: LightPoint) -> None:
        """Unregister this very point light; unknown lights are ignored."""
        _remove_same(self.point_lights, light)

    def add_spot_light(self, light: LightSpot) -> LightSpot:
        """Register a spot light and return it."""
        self.spot_lights.append(light)
        return light

    def remove_spot_light(self, light: LightSpot) -> None:
        """Unregister this very spot light; unknown lights are ignored."""
        _remove_same(self.spot_lights, light)

    def pack_uniform_block(self) -> bytes:
        """Lighting uniform block: ambient and directional colours, then direction.

        Each vector occupies a 16-byte slot holding three little-endian floats.
        """
        block = bytearray(LIGHT_BLOCK_SIZE)
        entries = (
            self.ambient_light.diffuse,
            self.ambient_light.specular,
            self.directional_light.diffuse,
            self.directional_light.specular,
            self.directional_light.direction,
        )
        for slot, vector in enumerate(entries):
            struct.pack_into("<3f", block, slot * VECTOR4_SIZE, *vector)
        return bytes(block)