"""Patterns that give a surface a colour depending on position."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

from raytracer.color import RGB, black, white
from raytracer.matrices import Matrix, identity, inverse
from raytracer.tuples import Point


def _round_half_away(value: float) -> float:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


class Pattern(ABC):
    """Two-colour pattern that can be transformed independently of its object."""

    def __init__(self, first_color: Optional[RGB] = None, second_color: Optional[RGB] = None):
        self.first_color = first_color if first_color is not None else black()
        self.second_color = second_color if second_color is not None else white()
        self._transformation = identity()
        self._inverse_transformation = identity()

    @property
    def transformation(self) -> Matrix:
        return self._transformation

    @property
    def inverse_transformation(self) -> Matrix:
        return self._inverse_transformation

    @abstractmethod
    def color_at(self, point: Point) -> RGB:
        """Colour at a point given in pattern space."""

    def color_at_object(self, obj, world_point: Point) -> RGB:
        """Colour at a world point on an object, honouring both transformations."""
        object_point = obj.inverse_transformation * world_point
        pattern_point = self._inverse_transformation * object_point
        return self.color_at(pattern_point)

    def transform(self, transformation: Matrix) -> Pattern:
        """Append a transformation to the pattern and return the pattern."""
        self._transformation = self._transformation * transformation
        self._inverse_transformation = inverse(self._transformation)
        return self


class Stripes(Pattern):
    def color_at(self, point: Point) -> RGB:
        if math.floor(point.x) % 2 == 0:
            return self.second_color
        return self.first_color


class Gradient(Pattern):
    def color_at(self, point: Point) -> RGB:
        first, second = self.first_color, self.second_color
        distance = RGB(second.r - first.r, second.g - first.g, second.b - first.b)
        fraction = math.fmod(abs(point.x), 2.0)
        if fraction > 1.0:
            # Mirror the gradient on the way back.
            fraction = 2.0 - fraction
        return first + distance * fraction


class Rings(Pattern):
    def color_at(self, point: Point) -> RGB:
        if math.floor(math.sqrt(point.x * point.x + point.z * point.z)) % 2 == 0:
            return self.first_color
        return self.second_color


class Checkers(Pattern):
    def color_at(self, point: Point) -> RGB:
        total = _round_half_away(point.x) + _round_half_away(point.y) + _round_half_away(point.z)
        if int(total) % 2 == 0:
            return self.first_color
        return self.second_color