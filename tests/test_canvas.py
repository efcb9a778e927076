import io

import pytest

from raytracer.canvas import Canvas
from raytracer.color import RGB


def test_pixels_start_white():
    canvas = Canvas(10, 10)
    assert all(canvas.pixel_at(i, j) == RGB(1, 1, 1) for i in range(10) for j in range(10))


def test_write_color():
    canvas = Canvas(10, 10)
    canvas.insert_color(RGB(1, 0, 0), 3, 3)
    assert canvas.pixel_at(3, 3) == RGB(1, 0, 0)


def test_insert_uses_column_then_line():
    canvas = Canvas(4, 2)
    canvas.insert_color(RGB(0, 0, 1), 3, 1)
    assert canvas.pixel_at(1, 3) == RGB(0, 0, 1)
    assert canvas.pixel_at(0, 3) == RGB(1, 1, 1)


def test_out_of_range_pixel_raises():
    canvas = Canvas(2, 2)
    with pytest.raises(IndexError):
        canvas.pixel_at(2, 0)
    with pytest.raises(IndexError):
        canvas.insert_color(RGB(), -1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 3)


def test_write_to_ppm_default_white():
    out = io.StringIO()
    Canvas(2, 1).write_to_ppm(out)
    assert out.getvalue() == "P3\n2 1\n255\n255 255 255\n255 255 255\n"


def test_write_to_ppm_clamps_and_rounds():
    canvas = Canvas(3, 1)
    canvas.insert_color(RGB(0.5, 0.5, 0.5), 0, 0)
    canvas.insert_color(RGB(-1, 2, 0.2), 1, 0)
    canvas.insert_color(RGB(0, 0, 0), 2, 0)
    out = io.StringIO()
    canvas.write_to_ppm(out)
    assert out.getvalue().splitlines() == ["P3", "3 1", "255", "128 128 128", "0 255 51", "0 0 0"]


def test_write_to_ppm_leaves_pixels_unchanged():
    canvas = Canvas(1, 1)
    canvas.insert_color(RGB(0.5, 0.25, 2), 0, 0)
    canvas.write_to_ppm(io.StringIO())
    assert canvas.pixel_at(0, 0) == RGB(0.5, 0.25, 2)