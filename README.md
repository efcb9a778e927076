# raytracer

A small ray tracer in pure Python. It reads a scene described in JSON and
writes the rendered picture as a plain-text PPM image named `image.ppm` in
the current directory.

It supports spheres, planes and cubes; stripe, ring, gradient and checker
patterns; Phong lighting with shadows; reflection and refraction; and
light anti-aliasing, where each pixel is the average of five samples (the
pixel centre and four offsets around it).

## Installation

```
pip install .
```

It has no dependencies beyond the standard library. To run the test suite:

```
pip install .[test]
pytest
```

## Rendering a scene

```
raytracer scene.json
```

The command takes exactly one argument, the path of the scene file. With
any other number of arguments it prints a usage line to standard error and
exits with status 2. If `image.ppm` cannot be written it prints
`Error writing to ppm` to standard error. Progress and the time taken to
render are reported through the `raytracer.camera` logger at INFO level.

## Scene format

```json
{
  "scene": {
    "camera": {
      "horizontal_pixels": 400,
      "vertical_pixels": 300,
      "field_of_view": 1.047,
      "view_transform": {
        "from": [0, 1.5, -5],
        "to": [0, 1, 0],
        "up": [0, 1, 0]
      }
    },
    "world": {
      "reflection_limit": 5,
      "objects": [
        {
          "type": "Plane",
          "material": {
            "ambient": 0.1,
            "diffuse": 0.9,
            "pattern": {
              "type": "Checkers",
              "first_color": [1, 1, 1],
              "second_color": [0, 0, 0]
            }
          }
        },
        {
          "type": "Sphere",
          "material": {
            "color": [0.1, 1, 0.5],
            "ambient": 0.1,
            "diffuse": 0.7,
            "specular": 0.3,
            "shininess": 200
          },
          "transformations": [
            {"type": "translation", "x": -0.5, "y": 1, "z": 0.5}
          ]
        }
      ],
      "lights": [
        {"intensity": [1, 1, 1], "position": [-10, 10, -10]}
      ]
    }
  }
}
```

- Camera: `horizontal_pixels` and `vertical_pixels` default to 800 and
  600, `field_of_view` (radians) to π/3. `view_transform` is optional.
- World: `objects`, `lights` and `reflection_limit` are all required.
  The world always starts with a white light at (-10, 10, -10); the lights
  listed are added to it.
- Object types: `Sphere` (unit sphere), `Cube` (side 2), `Plane` (the xz
  plane). An unknown type raises `ValueError`.
- Pattern types: `Stripes`, `Rings`, `Gradient`, `Checkers`, each with
  `first_color` and `second_color` and optional `transformations`. An
  unknown type raises `ValueError`.
- Transformation types: `translation` and `scaling` (`x`, `y`, `z`),
  `rotation_x`, `rotation_y` and `rotation_z` (`radians`), and `shearing`
  (`x_y`, `x_z`, `y_x`, `y_z`, `z_x`, `z_y`). They are multiplied together
  in the order listed; entries of any other type are ignored.
- Material keys: `ambient`, `diffuse`, `specular`, `shininess`,
  `transparency`, `refractive_index`, `color`, `pattern`. Absent keys keep
  the defaults of `raytracer.material.Material` (all zero, black, and
  shininess 1).

## Using it as a library

Render a scene file:

```python
from raytracer.scene_builder import build_scene

canvas = build_scene("scene.json")
with open("image.ppm", "w") as out:
    canvas.write_to_ppm(out)
```

Or build a scene in code:

```python
from raytracer.camera import Camera
from raytracer.color import RGB
from raytracer.hittable import Sphere
from raytracer.light import Light
from raytracer.material import Material
from raytracer.matrices import view_transform
from raytracer.tuples import Point, Vec
from raytracer.world import World

sphere = Sphere(Material(color=RGB(1, 0.2, 1), ambient=0.1, diffuse=0.9, specular=0.9, shininess=200))
world = World(objects=[sphere], lights=[Light(RGB(1, 1, 1), Point(-10, 10, -10))])
camera = Camera(100, 50).transform(view_transform(Point(0, 0, -5), Point(0, 0, 0), Vec(0, 1, 0)))
canvas = camera.render(world)
```

The building blocks live in their own modules: `raytracer.tuples`
(`Vec`, `Point`, `dot`, `cross`, `reflect`, `unit_vector`),
`raytracer.matrices` (`Matrix`, `inverse`, `transpose` and the
transformation constructors), `raytracer.ray`, `raytracer.color` (`RGB`),
`raytracer.patterns`, `raytracer.material`, `raytracer.hittable`
(`Sphere`, `Plane`, `Cube`), `raytracer.intersection`,
`raytracer.intersection_state`, `raytracer.light`, `raytracer.world`,
`raytracer.camera` and `raytracer.canvas`.

## What it does not do

Rendering runs in a single thread in pure Python and is slow for large
images. The only output format is plain-text PPM, always written to
`image.ppm` by the command; there is no preview window.