from raytracer.color import RGB, black, blue, green, red, white
from raytracer.tuples import Point


def test_plus_equals():
    actual = RGB(0.5, 0.5, 0.5)
    actual += RGB(0.5, 0.5, 0.5)
    assert actual == RGB(1, 1, 1)
    actual += Point(1, 1, 1)
    assert actual == RGB(2, 2, 2)


def test_add():
    actual = RGB(1, 1, 1) + RGB(1, 1, 1)
    assert actual == RGB(2, 2, 2)
    actual = RGB(1, 1, 1) + Point(1, 1, 1)
    assert actual == RGB(2, 2, 2)


def test_point_plus_color():
    assert Point(1, 2, 3) + RGB(1, 1, 1) == RGB(2, 3, 4)


def test_clamp():
    actual = RGB(50, 24, 21)
    actual.clamp()
    assert actual == RGB(1, 1, 1)
    actual = RGB(-1, -1, -1)
    actual.clamp()
    assert actual == RGB(0, 0, 0)


def test_convert_to_256():
    actual = RGB(1, 1, 1)
    actual.convert_to_256()
    assert actual == RGB(255, 255, 255)


def test_convert_to_256_clamps_and_rounds_half_up():
    actual = RGB(0.5, -3, 7)
    actual.convert_to_256()
    assert (actual.r, actual.g, actual.b) == (128.0, 0.0, 255.0)


def test_multiply_componentwise_and_scalar():
    assert RGB(1, 0.2, 0.4) * RGB(0.9, 1, 0.1) == RGB(0.9, 0.2, 0.04)
    assert RGB(0.2, 0.3, 0.4) * 2 == RGB(0.4, 0.6, 0.8)
    assert 2 * RGB(0.2, 0.3, 0.4) == RGB(0.4, 0.6, 0.8)


def test_divide():
    assert RGB(2, 4, 6) / 2 == RGB(1, 2, 3)


def test_equality_tolerance():
    assert RGB(0.1, 0.2, 0.3) == RGB(0.100001, 0.2, 0.3)
    assert not RGB(0.1, 0.2, 0.3) == RGB(0.2, 0.2, 0.3)


def test_named_colors():
    assert black() == RGB(0, 0, 0)
    assert white() == RGB(1, 1, 1)
    assert red() == RGB(1, 0, 0)
    assert green() == RGB(0, 1, 0)
    assert blue() == RGB(0, 0, 1)


def test_named_colors_are_fresh_objects():
    first = white()
    first.r = 0
    assert white() == RGB(1, 1, 1)


def test_str():
    assert str(RGB(1, 0.5, 0)) == "(1, 0.5, 0)"