import math

import pytest

from kuruk.vector import Vector


def test_add_then_subtract_round_trip():
    a = Vector(1.25, -3.5)
    b = Vector(0.75, 2.0)
    assert (a + b) - b == a


def test_scalar_multiply_then_divide_round_trip():
    a = Vector(3.0, -7.0)
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2


def test_vector_product_is_dot():
    a = Vector(1.5, 2.5)
    b = Vector(-4.0, 3.0)
    assert a * b == a.dot(b)
    assert a.dot(b) == b.dot(a)


def test_length_squared_is_self_dot():
    a = Vector(3.0, -4.0)
    assert a.length_squared() == a.dot(a)
    assert a.length() == pytest.approx(math.sqrt(a.dot(a)))


def test_pin_length_of_three_four():
    assert Vector(3.0, 4.0).length() == 5.0


def test_perpendicular_is_orthogonal_and_same_length():
    a = Vector(2.0, 5.0)
    p = a.perpendicular()
    assert a.dot(p) == 0.0
    assert p.length() == pytest.approx(a.length())
    assert p == Vector(a.y, -a.x)


def test_normalized_has_unit_length():
    a = Vector(-6.0, 2.5)
    assert a.normalized().length() == pytest.approx(1.0)


def test_normalized_zero_stays_zero():
    assert Vector(0.0, 0.0).normalized() == Vector(0.0, 0.0)


def test_distance_symmetric_and_consistent():
    a = Vector(1.0, 2.0)
    b = Vector(-3.0, 7.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance_sq(b) == pytest.approx(a.distance(b) ** 2)
    assert a.distance(a) == 0.0


def test_det_collinear_is_zero_and_swap_changes_sign():
    a, b, c = Vector(0.0, 0.0), Vector(1.0, 1.0), Vector(2.0, 2.0)
    assert Vector.det(a, b, c) == 0.0
    d = Vector(3.0, -1.0)
    assert Vector.det(a, b, d) == -Vector.det(b, a, d)


def test_angle_range():
    for v in (Vector(1.0, 0.0), Vector(0.0, -1.0), Vector(-2.0, 3.0)):
        assert math.pi <= v.angle() <= 3 * math.pi


def test_angle_along_y_axis_is_full_turn():
    assert Vector(0.0, 1.0).angle() == pytest.approx(2 * math.pi)


def test_abs_componentwise():
    assert abs(Vector(-1.5, 2.0)) == Vector(1.5, 2.0)


def test_indexing_and_assignment():
    v = Vector(1.0, 2.0)
    assert v[0] == v.x and v[1] == v.y
    v[0] = 9.0
    v[1] = -4.0
    assert (v.x, v.y) == (9.0, -4.0)


def test_index_out_of_range():
    v = Vector(1.0, 2.0)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(IndexError):
        v[2] = 1.0
    assert (v[0], v[1]) == (1.0, 2.0)


def test_in_place_operators_mutate():
    v = Vector(1.0, 2.0)
    original = v
    v += Vector(1.0, 1.0)
    v *= 3
    assert v is original
    assert v == (Vector(1.0, 2.0) + Vector(1.0, 1.0)) * 3


def test_str_format():
    assert str(Vector(1.5, -2.0)) == "Vector(1.5, -2)"