"""Core of a small 3D game engine: math types, transforms, cameras, lights, scenes, input state and a clock."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "clock",
    "inputs",
    "lights",
    "mathutil",
    "matrix",
    "quaternion",
    "scene",
    "transform",
    "vector",
    "vector3",
    "vector4",
]