"""Surface properties of hittable objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from raytracer.color import RGB, black
from raytracer.patterns import Pattern


@dataclass
class Material:
    """Colour, optional pattern and Phong and optical coefficients of a surface."""

    color: RGB = field(default_factory=black)
    pattern: Optional[Pattern] = None
    ambient: float = 0.0
    diffuse: float = 0.0
    specular: float = 0.0
    shininess: float = 1.0
    reflective: float = 0.0
    refractive_index: float = 0.0
    transparency: float = 0.0


def glass() -> Material:
    """A fully transparent material with the refractive index of glass."""
    return Material(refractive_index=1.52, transparency=1.0)