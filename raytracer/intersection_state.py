"""Data about a ray hitting an object, precomputed for shading."""

from __future__ import annotations

from typing import Any, List, Sequence

from raytracer.intersection import Intersection
from raytracer.ray import Ray
from raytracer.tuples import dot, reflect
from raytracer.utils import EPSILON


class IntersectionState:
    """Point, normal, eye and refractive indices at the chosen intersection."""

    def __init__(self, hit_index: int, intersections: Sequence[Intersection], ray: Ray):
        if not 0 <= hit_index < len(intersections):
            raise IndexError(f"hit index {hit_index} is out of range")

        # Track which objects the ray is inside to find the indices on each side of the hit.
        containers: List[Any] = []
        self.n1 = self.n2 = 1.0
        for index, intersection in enumerate(intersections):
            is_hit = index == hit_index
            if is_hit:
                self.n1 = containers[-1].material.refractive_index if containers else 1.0
            if containers and containers[-1] is intersection.obj:
                containers.pop()
            else:
                containers.append(intersection.obj)
            if is_hit:
                self.n2 = containers[-1].material.refractive_index if containers else 1.0
                break

        hit = intersections[hit_index]
        self.t = hit.t
        self.obj = hit.obj
        self.point = ray.at(self.t)
        self.eye = -ray.direction
        self.normal = self.obj.normal_at(self.point)
        self.reflect = reflect(ray.direction, self.normal)

        # Normal and eye pointing apart means the hit is on the inside.
        self.inside = dot(self.normal, self.eye) < 0
        if self.inside:
            self.normal = -self.normal

        self.over_point = self.point + self.normal * EPSILON
        self.under_point = -(self.normal * EPSILON) + self.point