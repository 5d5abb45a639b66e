# duckengine

The window-independent core of a small 3D game engine, written in plain Python with no
third-party dependencies.

## Modules

- `duckengine.mathutil`: `clamp`, `to_radians`, `to_degrees`, `sin`, `cos`, `tan`, plus a
  seedable random generator (`set_seed` and `random_range`). With integer bounds,
  `random_range` returns a value in `[minimum, maximum]`. With float bounds the span is
  scaled by `maximum - minimum + 1`.
- `duckengine.vector`: `VectorBase` and `Vector2`. They support component-wise arithmetic
  and bit operators, with scalars or with vectors of the same size. The free functions
  `dot`, `cross`, `sqr_magnitude`, `magnitude`, `distance`, `normalize`, `lerp` and `angle`
  work on any of the vector types. `normalize` scales by the reciprocal of the squared
  length, so unit vectors come back unchanged.
- `duckengine.vector3` and `duckengine.vector4`: `Vector3` and `Vector4`. Their
  constructors take scalars and smaller vectors in any mix, for example
  `Vector4(Vector3(1, 2, 3), 1)`.
- `duckengine.quaternion`: `Quaternion`. It defaults to the identity `(0, 0, 0, 1)` and
  offers these constructors:
  - `from_vector`
  - `from_euler`, which takes degrees and uses ZYX order
  - `from_to`
  - `angle_axis`, which takes degrees

  Further methods are `normalized`, `conjugate`, `inverse`, `lerp`, `slerp`, `euler`,
  `pitch`, `yaw` and `roll`. Multiplying a quaternion by a `Vector3` or `Vector4` rotates
  the vector.
- `duckengine.matrix`: the column-major `Matrix4` type. With no arguments it is the
  identity. It also accepts a scalar diagonal, four columns, or sixteen scalars. The module
  also provides `inverse`, `translate`, `rotate` (angle in radians), `rotate_quaternion`,
  `scale`, `orthographic` and `perspective`, all in left-handed coordinates. `inverse`
  raises `ValueError` for a singular matrix.
- `duckengine.transform`: `Transform`, a position, rotation (a `Quaternion` or Euler
  degrees as a `Vector3`) and scale, with an optional parent. It provides
  `local_to_world`, `right`, `up` and `forward`, and caches the local matrix.
- `duckengine.camera`: `CameraPerspective` and `CameraOrthographic`, with `projection`,
  `view`, `set_aspect_ratio` and `release`. Use `get_main` and `set_main` to read or change
  the main camera. The first camera created becomes the main one.
- `duckengine.lights`: the dataclasses `Light`, `LightDirectional`, `LightPoint` and
  `LightSpot`. `LightRegistry` holds the ambient light, the directional light, the
  background colour and the point and spot lights. Its `pack_uniform_block` writes a
  96-byte little-endian lighting block.
- `duckengine.scene`: `Scene`, `Entity` and `Component`.
  - An entity holds at most one component per type, and up to 32 component types exist in
    total.
  - `Scene.draw` drops entities that were marked with `Entity.destroy`.
  - `Scene.destroy` destroys and drops every entity.
- `duckengine.inputs`: the `KeyCode` and `KeyAction` enums and `InputState`. `InputState`
  tracks which keys are held, which went down and which went up in the current frame, as
  well as the mouse position, delta and scroll.
- `duckengine.clock`: `Clock`, a monotonic stopwatch with `seconds`, `milliseconds` and
  `restart`.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Example

```python
from duckengine.vector3 import Vector3
from duckengine.quaternion import Quaternion
from duckengine.camera import CameraPerspective
from duckengine.scene import Scene, Component
from duckengine.inputs import InputState, KeyCode, KeyAction


class Spin(Component):
    def update(self, delta_time):
        turn = Quaternion.angle_axis(90.0 * delta_time, Vector3(0.0, 1.0, 0.0))
        self.entity.transform.rotation = turn * self.entity.transform.rotation


scene = Scene("Demo")
entity = scene.add_entity()
entity.add_component(Spin)
scene.update(0.5)

camera = CameraPerspective(fov=70.0, aspect_ratio=16 / 9)
camera.transform.position = Vector3(0.0, 0.0, -5.0)
view = camera.view()

keys = InputState()
keys.poll_events()
keys.on_key(KeyCode.SPACE, KeyAction.PRESS)
assert keys.get_key_down(KeyCode.SPACE)
keys.clear_events()
```

## What it does not do

This package opens no window, creates no graphics context and draws nothing. Cameras
compute matrices, and `LightRegistry` packs bytes, but nothing is sent to a GPU.
`InputState` does not read devices itself. Your windowing layer must feed it by calling
`on_key`, `on_mouse_button`, `on_mouse_position` and `on_mouse_scroll`. The package has
no logger and does not load shaders, textures or models from disk. It also has no
command-line program.

## Tests

```
pytest
```