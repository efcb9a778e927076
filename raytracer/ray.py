"""Rays: an origin and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.matrices import Matrix
from raytracer.tuples import Point, Vec


@dataclass
class Ray:
    origin: Point
    direction: Vec

    def at(self, t: float) -> Point:
        """Point along the ray at parameter t."""
        return self.origin + self.direction * t


def transform_ray(ray: Ray, transformation: Matrix) -> Ray:
    """Apply a transformation matrix to a ray."""
    return Ray(ray.origin * transformation, ray.direction * transformation)