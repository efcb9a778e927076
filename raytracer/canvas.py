"""A grid of colours that becomes the rendered image."""

from __future__ import annotations

from dataclasses import replace
from typing import TextIO

from raytracer.color import RGB, white


class Canvas:
    """Row-major grid of colours, white until painted."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [white() for _ in range(width * height)]

    def _index(self, line: int, column: int) -> int:
        index = line * self.width + column
        if not 0 <= index < len(self._pixels):
            raise IndexError(f"pixel ({column}, {line}) is outside a {self.width}x{self.height} canvas")
        return index

    def pixel_at(self, line: int, color_idx: int) -> RGB:
        """Colour of the pixel in the given line and column."""
        return self._pixels[self._index(line, color_idx)]

    def insert_color(self, color: RGB, color_idx: int, line: int) -> None:
        """Paint the pixel in the given column and line."""
        self._pixels[self._index(line, color_idx)] = color

    def write_to_ppm(self, out: TextIO) -> None:
        """Write the canvas to a text stream as a plain PPM image."""
        out.write(f"P3\n{self.width} {self.height}\n255\n")
        for pixel in self._pixels:
            color = replace(pixel)
            color.convert_to_256()
            out.write(f"{color.r:g} {color.g:g} {color.b:g}\n")