"""Vectors and points in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.utils import compare_doubles

_NEAR_ZERO = 1e-8


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(eq=False)
class Vec:
    """A direction with length in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def __add__(self, other):
        if isinstance(other, Vec):
            return Vec(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec):
            return Vec(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec):
            return Vec(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_number(other):
            return Vec(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_number(other):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        if _is_number(scalar):
            return (1 / scalar) * self
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        return (
            compare_doubles(self.x, other.x)
            and compare_doubles(self.y, other.y)
            and compare_doubles(self.z, other.z)
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def near_zero(self) -> bool:
        """True if the vector is close to zero in every dimension."""
        return abs(self.x) < _NEAR_ZERO and abs(self.y) < _NEAR_ZERO and abs(self.z) < _NEAR_ZERO

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())


@dataclass(eq=False)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if isinstance(other, Vec):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Vec):
            return self + other
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vec(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (
            compare_doubles(self.x, other.x)
            and compare_doubles(self.y, other.y)
            and compare_doubles(self.z, other.z)
        )

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


def cross(v1: Vec, v2: Vec) -> Vec:
    """Vector perpendicular to both arguments."""
    return Vec(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def unit_vector(v: Vec) -> Vec:
    """Vector of length one in the direction of v; a zero vector is returned unchanged."""
    length = v.length()
    if length == 0:
        return v
    return v / length


def dot(v1: Vec, v2: Vec) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def reflect(incoming: Vec, normal: Vec) -> Vec:
    """Reflect a vector about a surface normal."""
    return incoming - normal * 2 * dot(incoming, normal)