"""RGB colours with components nominally between 0 and 1."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.tuples import Point
from raytracer.utils import compare_doubles


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(eq=False)
class RGB:
    """A red, green, blue colour; converted to 0-255 only when written out."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __add__(self, other):
        if isinstance(other, RGB):
            return RGB(self.r + other.r, self.g + other.g, self.b + other.b)
        if isinstance(other, Point):
            return RGB(self.r + other.x, self.g + other.y, self.b + other.z)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Point):
            return self + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, RGB):
            return RGB(self.r * other.r, self.g * other.g, self.b * other.b)
        if _is_number(other):
            return RGB(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_number(other):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        if _is_number(scalar):
            return RGB(self.r / scalar, self.g / scalar, self.b / scalar)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, RGB):
            return NotImplemented
        return (
            compare_doubles(self.r, other.r)
            and compare_doubles(self.g, other.g)
            and compare_doubles(self.b, other.b)
        )

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"

    def clamp(self) -> None:
        """Limit every component to the range 0 to 1, in place."""
        self.r = min(max(self.r, 0.0), 1.0)
        self.g = min(max(self.g, 0.0), 1.0)
        self.b = min(max(self.b, 0.0), 1.0)

    def convert_to_256(self) -> None:
        """Clamp, then scale every component to a whole number from 0 to 255, in place."""
        self.clamp()
        # Components are non-negative here, so this rounds halves away from zero.
        self.r = float(math.floor(255 * self.r + 0.5))
        self.g = float(math.floor(255 * self.g + 0.5))
        self.b = float(math.floor(255 * self.b + 0.5))


def black() -> RGB:
    return RGB(0, 0, 0)


def white() -> RGB:
    return RGB(1, 1, 1)


def red() -> RGB:
    return RGB(1, 0, 0)


def green() -> RGB:
    return RGB(0, 1, 0)


def blue() -> RGB:
    return RGB(0, 0, 1)