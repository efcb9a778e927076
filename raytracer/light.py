"""Point lights and Phong shading."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytracer.color import RGB
from raytracer.tuples import Point, Vec, dot, reflect, unit_vector


@dataclass
class Light:
    """A point light source."""

    intensity: RGB = field(default_factory=RGB)
    position: Point = field(default_factory=Point)


def calculate_lighting(obj, light: Light, position: Point, eye: Vec, normal: Vec, in_shadow: bool) -> RGB:
    """Colour of a point on an object lit by one light, using the Phong model."""
    material = obj.material
    if material.pattern is not None:
        color = material.pattern.color_at_object(obj, position)
    else:
        color = material.color

    effective_color = color * light.intensity
    light_direction = unit_vector(light.position - position)
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    light_dot_normal = dot(light_direction, normal)
    if light_dot_normal < 0:
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal
    reflect_dot_eye = dot(reflect(-light_direction, normal), eye)
    if reflect_dot_eye <= 0:
        specular = RGB(0, 0, 0)
    else:
        specular = light.intensity * material.specular * math.pow(reflect_dot_eye, material.shininess)
    return ambient + diffuse + specular