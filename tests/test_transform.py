import pytest

from duckengine.matrix import Matrix4, rotate_quaternion, scale, translate
from duckengine.quaternion import Quaternion
from duckengine.transform import Transform
from duckengine.vector3 import Vector3


def test_default_is_identity():
    assert Transform().local_to_world() == Matrix4()


def test_default_directions_are_axes():
    t = Transform()
    assert t.right() == Vector3(1.0, 0.0, 0.0)
    assert t.up() == Vector3(0.0, 1.0, 0.0)
    assert t.forward() == Vector3(0.0, 0.0, 1.0)


def test_translation_matches_translate():
    position = Vector3(1.0, 2.0, 3.0)
    t = Transform(position=position)
    assert t.local_to_world() == translate(Matrix4(), position)


def test_scale_matches_scale_matrix():
    s = Vector3(2.0, 3.0, 4.0)
    t = Transform(scale=s)
    assert t.local_to_world() == scale(Matrix4(), s)


def test_rotation_matches_quaternion_matrix():
    q = Quaternion.angle_axis(90.0, Vector3(0.0, 1.0, 0.0))
    t = Transform(rotation=q)
    assert t.local_to_world() == rotate_quaternion(Matrix4(), q)


def test_euler_rotation_is_converted():
    euler = Vector3(10.0, 20.0, 30.0)
    t = Transform(rotation=euler)
    assert t.rotation == Quaternion.from_euler(euler)


def test_invalid_rotation_type_raises():
    with pytest.raises(TypeError):
        Transform(rotation="sideways")


def test_cache_follows_mutation():
    t = Transform()
    first = t.local_to_world()
    t.position.x = 5.0
    second = t.local_to_world()
    assert second[3].x == 5.0
    assert first != second


def test_returned_matrix_does_not_alter_cache():
    t = Transform(position=Vector3(1.0, 1.0, 1.0))
    m = t.local_to_world()
    m[3][0] = 99.0
    assert t.local_to_world() == translate(Matrix4(), Vector3(1.0, 1.0, 1.0))


def test_parent_composition():
    parent = Transform(position=Vector3(1.0, 0.0, 0.0), scale=Vector3(2.0, 2.0, 2.0))
    child = Transform(position=Vector3(0.0, 3.0, 0.0))
    alone = child.local_to_world()
    child.parent = parent
    assert child.local_to_world() == parent.local_to_world() * alone


def test_copy_is_independent_and_drops_parent():
    parent = Transform()
    t = Transform(position=Vector3(1.0, 2.0, 3.0), parent=parent)
    c = t.copy()
    c.position.x = 7.0
    assert t.position.x == 1.0
    assert c.parent is None
    assert c.rotation == t.rotation