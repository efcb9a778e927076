"""The collection of objects and lights that a camera renders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from operator import attrgetter
from typing import List, Optional

from raytracer.color import RGB, black
from raytracer.hittable import Hittable
from raytracer.intersection import Intersection, hit_index
from raytracer.intersection_state import IntersectionState
from raytracer.light import Light, calculate_lighting
from raytracer.ray import Ray
from raytracer.tuples import Point, dot, unit_vector


def _default_lights() -> List[Light]:
    return [Light(RGB(1, 1, 1), Point(-10, 10, -10))]


@dataclass
class World:
    """Objects, lights and the recursion limit for reflection and refraction."""

    objects: List[Hittable] = field(default_factory=list)
    lights: List[Light] = field(default_factory=_default_lights)
    reflection_limit: int = 50

    def add_object(self, obj: Hittable) -> World:
        self.objects.append(obj)
        return self

    def add_light(self, light: Light) -> World:
        self.lights.append(light)
        return self

    def intersects(self, ray: Ray) -> List[Intersection]:
        """All intersections of the ray with every object, sorted by t."""
        return sorted((hit for obj in self.objects for hit in obj.intersect(ray)), key=attrgetter("t"))

    def color_at(self, ray: Ray, reflection_limit: Optional[int] = None) -> RGB:
        """Colour seen along a ray; black when nothing is hit."""
        if reflection_limit is None:
            reflection_limit = self.reflection_limit
        hits = self.intersects(ray)
        index = hit_index(hits)
        if index is None:
            return black()
        return self.shade_hit(IntersectionState(index, hits, ray), reflection_limit)

    def shade_hit(self, state: IntersectionState, reflection_limit: int) -> RGB:
        """Surface, reflected and refracted colour at an intersection."""
        shadowed = self.is_shadowed(state.over_point)
        surface = RGB(0, 0, 0)
        for light in self.lights:
            surface = surface + calculate_lighting(
                state.obj, light, state.point, state.eye, state.normal, shadowed
            )
        reflected = self.reflect_color(state, reflection_limit)
        refracted = self.refract_color(state, reflection_limit)
        return surface + reflected + refracted

    def reflect_color(self, state: IntersectionState, reflection_limit: int) -> RGB:
        reflective = state.obj.material.reflective
        if reflection_limit < 1 or reflective == 0:
            return black()
        color = self.color_at(Ray(state.over_point, state.reflect), reflection_limit - 1)
        return color * reflective

    def refract_color(self, state: IntersectionState, reflection_limit: int) -> RGB:
        transparency = state.obj.material.transparency
        if reflection_limit < 1 or transparency == 0:
            return black()
        if state.n2 == 0:
            return black()

        n_ratio = state.n1 / state.n2
        cos_i = dot(state.eye, state.normal)
        sin2_t = n_ratio * n_ratio * (1 - cos_i * cos_i)
        if sin2_t > 1:
            # Total internal reflection.
            return black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = state.normal * (n_ratio * cos_i - cos_t) - state.eye * n_ratio
        color = self.color_at(Ray(state.under_point, direction), reflection_limit - 1)
        return color * transparency

    def is_shadowed(self, point: Point) -> bool:
        """True when every light is blocked from the point by some object."""
        for light in self.lights:
            to_light = light.position - point
            distance = to_light.length()
            hits = self.intersects(Ray(point, unit_vector(to_light)))
            index = hit_index(hits)
            if index is None or hits[index].t >= distance:
                return False
        return True