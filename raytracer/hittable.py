"""Objects that rays can hit: spheres, planes and cubes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional

from raytracer.intersection import Intersection
from raytracer.material import Material
from raytracer.matrices import Matrix, identity, inverse, transpose
from raytracer.ray import Ray, transform_ray
from raytracer.tuples import Point, Vec, dot, unit_vector
from raytracer.utils import EPSILON, compare_doubles

_FACE_TOLERANCE = 1e-6


class Hittable(ABC):
    """An object with a material and a transformation that rays can intersect."""

    def __init__(self, material: Optional[Material] = None):
        if material is None:
            self.material = Material()
        else:
            self.material = replace(material, color=replace(material.color))
        self._transformation = identity()
        self._inverse_transformation = identity()

    @property
    def transformation(self) -> Matrix:
        return self._transformation

    @property
    def inverse_transformation(self) -> Matrix:
        return self._inverse_transformation

    def transform(self, transformation: Matrix) -> Hittable:
        """Append a transformation to the object and return the object."""
        self._transformation = self._transformation * transformation
        self._inverse_transformation = inverse(self._transformation)
        return self

    @abstractmethod
    def intersect(self, ray: Ray) -> List[Intersection]:
        """All intersections of the ray with this object."""

    @abstractmethod
    def normal_at(self, world_point: Point) -> Vec:
        """Surface normal at a point given in world space."""


class Sphere(Hittable):
    """Unit sphere centred on the origin of object space."""

    _ORIGIN = Point(0, 0, 0)

    def intersect(self, ray: Ray) -> List[Intersection]:
        local = transform_ray(ray, self._inverse_transformation)
        sphere_to_ray = local.origin - self._ORIGIN

        a = dot(local.direction, local.direction)
        b = 2 * dot(local.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        root = math.sqrt(discriminant)
        t1 = (-b - root) / (2 * a)
        t2 = (-b + root) / (2 * a)
        if compare_doubles(t1, t2):
            return [Intersection(t1, self)]
        return [Intersection(t1, self), Intersection(t2, self)]

    def normal_at(self, world_point: Point) -> Vec:
        object_point = self._inverse_transformation * world_point
        object_normal = object_point - self._ORIGIN
        world_normal = transpose(self._inverse_transformation) * object_normal
        return unit_vector(world_normal)


class Plane(Hittable):
    """The xz plane of object space."""

    def intersect(self, ray: Ray) -> List[Intersection]:
        local = transform_ray(ray, self._inverse_transformation)
        if abs(local.direction.y) < EPSILON:
            return []
        return [Intersection(-local.origin.y / local.direction.y, self)]

    def normal_at(self, world_point: Point) -> Vec:
        return Vec(0, 1, 0)


class Cube(Hittable):
    """Axis-aligned cube with side length 2 centred on the origin of object space."""

    _ORIGIN = Point(0, 0, 0)
    _SIDE = 2.0

    def intersect(self, ray: Ray) -> List[Intersection]:
        local = transform_ray(ray, self._inverse_transformation)
        half = self._SIDE / 2.0
        t_min = -math.inf
        t_max = math.inf

        axes = (
            (local.origin.x, local.direction.x, self._ORIGIN.x),
            (local.origin.y, local.direction.y, self._ORIGIN.y),
            (local.origin.z, local.direction.z, self._ORIGIN.z),
        )
        for origin, direction, centre in axes:
            low, high = centre - half, centre + half
            if direction != 0:
                t1 = (low - origin) / direction
                t2 = (high - origin) / direction
                if t1 > t2:
                    t1, t2 = t2, t1
                t_min = max(t_min, t1)
                t_max = min(t_max, t2)
                if t_min > t_max:
                    return []
            elif origin < low or origin > high:
                return []

        return [Intersection(t_min, self), Intersection(t_max, self)]

    def normal_at(self, world_point: Point) -> Vec:
        p = self._inverse_transformation * world_point
        half = self._SIDE / 2.0
        o = self._ORIGIN
        faces = (
            (p.x - o.x - half, Vec(1, 0, 0)),
            (p.x - o.x + half, Vec(-1, 0, 0)),
            (p.y - o.y - half, Vec(0, 1, 0)),
            (p.y - o.y + half, Vec(0, -1, 0)),
            (p.z - o.z - half, Vec(0, 0, 1)),
            (p.z - o.z + half, Vec(0, 0, -1)),
        )
        object_normal = next(
            (normal for offset, normal in faces if abs(offset) < _FACE_TOLERANCE),
            Vec(),
        )
        world_normal = transpose(self._inverse_transformation) * object_normal
        return unit_vector(world_normal)