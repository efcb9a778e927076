"""Build and render a scene described by a JSON file."""

from __future__ import annotations

import json
import math
import sys
from dataclasses import replace
from os import PathLike
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, Union

from raytracer.camera import Camera
from raytracer.canvas import Canvas
from raytracer.color import RGB
from raytracer.hittable import Cube, Hittable, Plane, Sphere
from raytracer.light import Light
from raytracer.material import Material
from raytracer.matrices import (
    Matrix,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from raytracer.patterns import Checkers, Gradient, Pattern, Rings, Stripes
from raytracer.tuples import Point, Vec
from raytracer.world import World

OUTPUT_FILE = "image.ppm"

_PATTERNS: Dict[str, Type[Pattern]] = {
    "Checkers": Checkers,
    "Stripes": Stripes,
    "Rings": Rings,
    "Gradient": Gradient,
}

_OBJECTS: Dict[str, Type[Hittable]] = {
    "Sphere": Sphere,
    "Cube": Cube,
    "Plane": Plane,
}

_MATERIAL_NUMBERS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "transparency",
    "refractive_index",
)


def _triple(values: Sequence[Any]) -> Tuple[float, float, float]:
    return float(values[0]), float(values[1]), float(values[2])


def _rgb(values: Sequence[Any]) -> RGB:
    return RGB(*_triple(values))


def _point(values: Sequence[Any]) -> Point:
    return Point(*_triple(values))


def _vec(values: Sequence[Any]) -> Vec:
    return Vec(*_triple(values))


def build_camera(camera_data: Mapping[str, Any]) -> Camera:
    """Camera from its description; size and field of view have defaults."""
    camera = Camera(
        horizontal_pixels=int(camera_data.get("horizontal_pixels", 800)),
        vertical_pixels=int(camera_data.get("vertical_pixels", 600)),
        field_of_view=float(camera_data.get("field_of_view", math.pi / 3)),
    )
    if "view_transform" in camera_data:
        vt = camera_data["view_transform"]
        camera.transform(view_transform(_point(vt["from"]), _point(vt["to"]), _vec(vt["up"])))
    return camera


def _single_transformation(data: Mapping[str, Any]) -> Optional[Matrix]:
    kind = data["type"]
    if kind == "translation":
        return translation(data["x"], data["y"], data["z"])
    if kind == "scaling":
        return scaling(data["x"], data["y"], data["z"])
    if kind == "rotation_x":
        return rotation_x(data["radians"])
    if kind == "rotation_y":
        return rotation_y(data["radians"])
    if kind == "rotation_z":
        return rotation_z(data["radians"])
    if kind == "shearing":
        return shearing(data["x_y"], data["x_z"], data["y_x"], data["y_z"], data["z_x"], data["z_y"])
    return None


def build_transformation(transformations_data: Iterable[Mapping[str, Any]]) -> Matrix:
    """Product of the listed transformations, in order; unknown types are ignored."""
    result = identity()
    for data in transformations_data:
        step = _single_transformation(data)
        if step is not None:
            result = result * step
    return result


def build_pattern(pattern_data: Mapping[str, Any]) -> Pattern:
    """Pattern from its description; raises ValueError for an unknown type."""
    kind = pattern_data["type"]
    first = _rgb(pattern_data["first_color"])
    second = _rgb(pattern_data["second_color"])
    try:
        pattern_class = _PATTERNS[kind]
    except KeyError:
        raise ValueError(f"unknown pattern type: {kind!r}") from None
    pattern = pattern_class(first, second)
    if "transformations" in pattern_data:
        pattern.transform(build_transformation(pattern_data["transformations"]))
    return pattern


def build_material(material_data: Mapping[str, Any]) -> Material:
    """Material from its description; absent keys keep the material defaults."""
    values = {key: float(material_data[key]) for key in _MATERIAL_NUMBERS if key in material_data}
    material = replace(Material(), **values)
    if "color" in material_data:
        material.color = _rgb(material_data["color"])
    if "pattern" in material_data:
        material.pattern = build_pattern(material_data["pattern"])
    return material


def _build_object(object_data: Mapping[str, Any]) -> Hittable:
    kind = object_data["type"]
    try:
        object_class = _OBJECTS[kind]
    except KeyError:
        raise ValueError(f"unknown object type: {kind!r}") from None
    obj = object_class()
    if "material" in object_data:
        obj.material = build_material(object_data["material"])
    if "transformations" in object_data:
        obj.transform(build_transformation(object_data["transformations"]))
    return obj


def build_world(world_data: Mapping[str, Any]) -> World:
    """World holding the described objects and lights, added to the default light."""
    world = World()
    for object_data in world_data["objects"]:
        world.add_object(_build_object(object_data))
    for light_data in world_data["lights"]:
        world.add_light(Light(_rgb(light_data["intensity"]), _point(light_data["position"])))
    world.reflection_limit = int(world_data["reflection_limit"])
    return world


def build_scene(scene_json_file: Union[str, PathLike]) -> Canvas:
    """Read a scene description from a JSON file and render it."""
    with open(scene_json_file, encoding="utf-8") as handle:
        data = json.load(handle)
    scene = data["scene"]
    camera = build_camera(scene["camera"])
    world = build_world(scene["world"])
    return camera.render(world)


def main(argv: Optional[List[str]] = None) -> int:
    """Render the scene named on the command line into image.ppm."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: ray scene.json", file=sys.stderr)
        return 2
    canvas = build_scene(args[0])
    try:
        with open(OUTPUT_FILE, "w", encoding="ascii") as out:
            canvas.write_to_ppm(out)
    except OSError:
        print("Error writing to ppm", file=sys.stderr)
    return 0