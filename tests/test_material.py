from raytracer.color import RGB, black
from raytracer.material import Material, glass
from raytracer.patterns import Stripes


def test_defaults():
    mat = Material()
    assert mat.color == black()
    assert mat.pattern is None
    assert (mat.ambient, mat.diffuse, mat.specular, mat.reflective) == (0, 0, 0, 0)
    assert (mat.refractive_index, mat.transparency) == (0, 0)
    assert mat.shininess == 1


def test_glass():
    mat = glass()
    assert mat.refractive_index == 1.52
    assert mat.transparency == 1
    assert mat.color == Material().color


def test_glass_returns_independent_materials():
    first = glass()
    first.transparency = 0.25
    assert glass().transparency == 1


def test_default_colors_are_not_shared():
    first = Material()
    second = Material()
    first.color.r = 0.7
    assert second.color == black()


def test_keyword_construction_round_trip():
    stripes = Stripes()
    mat = Material(color=RGB(0.2, 0.4, 0.6), pattern=stripes, ambient=0.3, diffuse=0.7)
    assert mat.color == RGB(0.2, 0.4, 0.6)
    assert mat.pattern is stripes
    assert mat.ambient == 0.3
    assert mat.diffuse == 0.7


def test_equality_by_fields():
    assert Material(ambient=0.3) == Material(ambient=0.3)
    assert not Material(ambient=0.3) == Material(ambient=0.4)