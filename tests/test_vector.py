import math

import pytest

from duckengine.vector import (
    Vector2,
    VectorBase,
    angle,
    cross,
    distance,
    dot,
    lerp,
    magnitude,
    normalize,
    sqr_magnitude,
)


class _Triple(VectorBase):
    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    def __init__(self, *args):
        self._assign(args)


def test_default_is_zero():
    assert list(Vector2()) == [0, 0]


def test_scalar_broadcasts():
    v = Vector2(7)
    assert (v.x, v.y) == (7, 7)


def test_components_and_length():
    v = Vector2(1, 2)
    assert list(v) == [1, 2]
    assert len(v) == 2


def test_truncates_larger_vector():
    assert Vector2(_Triple(4, 5, 6)) == Vector2(4, 5)


def test_wrong_component_count_raises():
    with pytest.raises(TypeError):
        Vector2(1, 2, 3)


def test_non_numeric_argument_raises():
    with pytest.raises(TypeError):
        Vector2("a")


def test_indexing_reads_and_writes():
    v = Vector2(1, 2)
    v[1] = 9
    assert v[0] == 1
    assert v[1] == 9
    assert v.y == 9


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vector2(1, 2)[index]


def test_copy_is_independent():
    v = Vector2(1, 2)
    c = v.copy()
    c.x = 10
    assert v == Vector2(1, 2)
    assert c == Vector2(10, 2)


def test_equality_depends_on_type():
    assert Vector2(1, 2) == Vector2(1, 2)
    assert not (Vector2(1, 2) == Vector2(2, 1))
    assert not (Vector2(1, 2) == (1, 2))


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1, 2))


def test_add_then_subtract_round_trip():
    a, b = Vector2(1, 2), Vector2(3, 4)
    assert (a + b) - b == a


def test_scalar_operations_commute():
    a = Vector2(3, 5)
    assert 2 * a == a * 2 == a + a
    assert 1 + a == a + 1


def test_negation_and_positive():
    a = Vector2(3, -5)
    assert -a + a == Vector2()
    p = +a
    assert p == a
    assert p is not a


def test_reflected_subtraction():
    a = Vector2(3, 5)
    assert 10 - a == -(a - 10)


def test_division_round_trip():
    a = Vector2(2.0, 4.0)
    b = Vector2(8.0, 0.5)
    assert (b / a) * a == b
    assert (8.0 / a) * a == Vector2(8.0)


def test_mixed_sizes_raise():
    with pytest.raises(TypeError):
        Vector2(1, 2) + _Triple(1, 2, 3)


def test_bitwise_identities():
    a, b = Vector2(12, 10), Vector2(6, 3)
    assert (a & b) | (a ^ b) == a | b
    assert (a << 2) >> 2 == a
    assert ~~a == a
    assert a % a == Vector2()


def test_dot_and_magnitude():
    v = Vector2(3.0, 4.0)
    assert dot(v, v) == 25.0
    assert magnitude(v) == 5.0
    assert sqr_magnitude(v) == pytest.approx(magnitude(v) ** 2)


def test_dot_size_mismatch_raises():
    with pytest.raises(ValueError):
        dot(Vector2(1.0, 2.0), _Triple(1.0, 2.0, 3.0))


def test_distance_is_symmetric_and_zero_to_self():
    a, b = Vector2(1.0, 7.0), Vector2(-2.0, 3.0)
    assert distance(a, a) == 0.0
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) == pytest.approx(magnitude(a - b))


def test_cross_of_axes():
    x_axis, y_axis = _Triple(1.0, 0.0, 0.0), _Triple(0.0, 1.0, 0.0)
    assert cross(x_axis, y_axis) == _Triple(0.0, 0.0, 1.0)


def test_cross_is_anticommutative_and_perpendicular():
    a, b = _Triple(1.0, 2.0, 3.0), _Triple(-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert c == -cross(b, a)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)


def test_cross_needs_three_components():
    with pytest.raises(ValueError):
        cross(Vector2(1.0, 0.0), Vector2(0.0, 1.0))


def test_normalize_keeps_unit_vector():
    unit = Vector2(0.6, 0.8)
    n = normalize(unit)
    assert n.x == pytest.approx(unit.x)
    assert n.y == pytest.approx(unit.y)


def test_normalize_divides_by_squared_length():
    v = Vector2(3.0, 4.0)
    assert dot(normalize(v), v) == pytest.approx(1.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector2(0.0, 0.0))


def test_lerp_end_points_and_clamping():
    a, b = Vector2(1.0, 2.0), Vector2(5.0, -6.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 3.0) == b
    assert lerp(a, b, -2.0) == a
    assert lerp(a, b, 0.5) == (a + b) / 2


def test_angle_between_axes():
    x_axis, y_axis = Vector2(1.0, 0.0), Vector2(0.0, 1.0)
    assert angle(x_axis, y_axis) == pytest.approx(math.pi / 2)
    assert angle(x_axis, x_axis) == pytest.approx(0.0)


def test_angle_clamps_large_dot():
    assert angle(Vector2(2.0, 0.0), Vector2(3.0, 0.0)) == 0.0