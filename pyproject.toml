[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckengine"
version = "0.1.0"
description = "Core of a small 3D game engine: vector, quaternion and matrix math, transforms, cameras, lights, scenes, input state and a clock."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "vector", "quaternion", "matrix", "transform", "camera", "scene", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["duckengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
