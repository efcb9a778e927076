import math

from raytracer.tuples import Point, Vec, cross, dot, reflect, unit_vector


def test_vec_add():
    assert Vec(1, 1, 1) + Vec(1, 1, 1) == Vec(2, 2, 2)


def test_vec_subtract():
    actual = Vec(1, 1, 1)
    assert actual - actual == Vec(0, 0, 0)


def test_vec_multiply():
    actual = Vec(2, 2, 2)
    assert actual * 2 == Vec(4, 4, 4)
    assert 2 * actual == Vec(4, 4, 4)
    assert actual * Vec(2, 2, 2) == Vec(4, 4, 4)


def test_vec_divide():
    assert Vec(4, 4, 4) / 2 == Vec(2, 2, 2)


def test_vec_negative():
    assert -Vec(1, 1, 1) == Vec(-1, -1, -1)
    assert -Vec(-1, -1, -1) == Vec(1, 1, 1)


def test_vec_plus_equal():
    actual = Vec(1, 1, 1)
    actual += Vec(2, 2, 2)
    assert actual == Vec(3, 3, 3)


def test_vec_multiply_equal():
    actual1 = Vec(2, 2, 2)
    actual1 *= Vec(4, 4, 4)
    actual2 = Vec(2, 2, 2)
    actual2 *= 4
    assert actual1 == Vec(8, 8, 8)
    assert actual2 == Vec(8, 8, 8)


def test_vec_divide_equal():
    actual = Vec(4, 4, 4)
    actual /= 2
    assert actual == Vec(2, 2, 2)


def test_vec_length_squared():
    assert Vec(4, 4, 4).length_squared() == 16 + 16 + 16


def test_vec_length():
    assert Vec(4, 4, 4).length() == math.sqrt(16 + 16 + 16)


def test_vec_cross():
    assert cross(Vec(1, 2, 3), Vec(3, 2, 1)) == Vec(-4, 8, -4)


def test_vec_dot():
    assert dot(Vec(1, 2, 3), Vec(3, 2, 1)) == 10


def test_vec_unit_vector():
    assert unit_vector(Vec(2, 2, 2)) == Vec(2, 2, 2) / Vec(2, 2, 2).length()
    assert math.isclose(unit_vector(Vec(3, -7, 2)).length(), 1.0)


def test_unit_vector_of_zero_is_zero():
    assert unit_vector(Vec(0, 0, 0)) == Vec(0, 0, 0)


def test_vec_reflect():
    assert reflect(Vec(1, -1, 0), Vec(0, 1, 0)) == Vec(1, 1, 0)
    assert reflect(Vec(0, -1, 0), Vec(math.sqrt(2) / 2, math.sqrt(2) / 2, 0)) == Vec(1, 0, 0)


def test_vec_near_zero():
    assert Vec(1e-9, -1e-9, 0).near_zero() is True
    assert Vec(1e-9, 1e-3, 0).near_zero() is False


def test_vec_inequality():
    assert (Vec(1, 2, 3) == Vec(1, 2, 3.1)) is False


def test_point_plus_equals():
    actual = Point(1, 1, 1)
    actual += Vec(2, 2, 2)
    assert actual == Point(3, 3, 3)


def test_point_add():
    actual = Vec(1, 1, 1) + Point(1, 1, 1)
    assert isinstance(actual, Point)
    assert actual == Point(2, 2, 2)


def test_point_subtract():
    actual = Point(3, 3, 3) - Point(2, 2, 2)
    assert isinstance(actual, Vec)
    assert actual == Vec(1, 1, 1)


def test_point_and_vec_are_not_equal():
    assert (Point(1, 1, 1) == Vec(1, 1, 1)) is False