"""The camera that casts rays through pixels and renders a world."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

from raytracer.canvas import Canvas
from raytracer.color import RGB
from raytracer.matrices import Matrix, identity, inverse
from raytracer.ray import Ray
from raytracer.tuples import Point, unit_vector
from raytracer.world import World

logger = logging.getLogger(__name__)

# Offsets of the extra samples taken around each pixel for anti-aliasing.
_JITTER = ((-0.25, 0.25), (0.25, -0.25), (-0.75, -0.75), (0.75, 0.75))


@dataclass(frozen=True)
class _Projection:
    half_width: float
    half_height: float
    pixel_size: float
    inverse_transformation: Matrix
    origin: Point

    def ray(self, pixel_x: float, pixel_y: float) -> Ray:
        world_x = self.half_width - (pixel_x + 0.5) * self.pixel_size
        world_y = self.half_height - (pixel_y + 0.5) * self.pixel_size
        pixel = self.inverse_transformation * Point(world_x, world_y, -1)
        return Ray(self.origin, unit_vector(pixel - self.origin))


class Camera:
    """Image size, field of view and placement of the eye of the scene."""

    def __init__(
        self,
        horizontal_pixels: int = 800,
        vertical_pixels: int = 600,
        field_of_view: float = math.pi / 3,
    ):
        self.horizontal_pixels = horizontal_pixels
        self.vertical_pixels = vertical_pixels
        self.field_of_view = field_of_view
        self._transformation = identity()
        self._inverse_transformation = identity()

    @property
    def transformation(self) -> Matrix:
        return self._transformation

    @property
    def inverse_transformation(self) -> Matrix:
        return self._inverse_transformation

    def transform(self, transformation: Matrix) -> Camera:
        """Append a transformation to the camera and return the camera."""
        self._transformation = self._transformation * transformation
        self._inverse_transformation = inverse(self._transformation)
        return self

    def _projection(self) -> _Projection:
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.horizontal_pixels / self.vertical_pixels
        if aspect >= 1:
            half_width, half_height = half_view, half_view / aspect
        else:
            half_width, half_height = half_view * aspect, half_view
        return _Projection(
            half_width=half_width,
            half_height=half_height,
            pixel_size=(half_width * 2) / self.horizontal_pixels,
            inverse_transformation=self._inverse_transformation,
            origin=self._inverse_transformation * Point(0, 0, 0),
        )

    @property
    def half_width(self) -> float:
        return self._projection().half_width

    @property
    def half_height(self) -> float:
        return self._projection().half_height

    @property
    def pixel_size(self) -> float:
        return self._projection().pixel_size

    def ray_to_pixel(self, pixel_x: float, pixel_y: float) -> Ray:
        """Ray from the camera through the centre of a pixel."""
        return self._projection().ray(pixel_x, pixel_y)

    @staticmethod
    def _sample(projection: _Projection, pixel_x: float, pixel_y: float, world: World) -> RGB:
        color = world.color_at(projection.ray(pixel_x, pixel_y), world.reflection_limit)
        for dx, dy in _JITTER:
            color = color + world.color_at(projection.ray(pixel_x + dx, pixel_y + dy), world.reflection_limit)
        return color / (len(_JITTER) + 1)

    def anti_alias(self, pixel_x: float, pixel_y: float, world: World) -> RGB:
        """Average colour of the pixel centre and four jittered samples around it."""
        return self._sample(self._projection(), pixel_x, pixel_y, world)

    def render(self, world: World) -> Canvas:
        """Render the world into a canvas."""
        projection = self._projection()
        image = Canvas(self.horizontal_pixels, self.vertical_pixels)
        start = time.perf_counter()
        logger.info("Rendering...")
        for y in range(self.vertical_pixels):
            for x in range(self.horizontal_pixels):
                image.insert_color(self._sample(projection, x, y, world), x, y)
        logger.info("Image complete, time to render: %.3f s", time.perf_counter() - start)
        return image