# raytracer

A small ray tracer written in pure Python. It traces rays through a scene of
spheres, planes, cubes, cylinders, cones, triangles and nested groups, shades
them with the Phong model and point lights, casts shadows, and follows
reflected and refracted rays (using the Schlick approximation when a surface
is both reflective and transparent). Surfaces may carry stripe, gradient, ring
or checkers patterns.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Rendering the built-in scene

```
raytracer
```

This renders a hexagon of small spheres joined by cylinders, lit by a white
light above and to the left, and writes `scene.bmp` to the current directory.
A progress bar is written to standard output while rendering, followed by the
path of the saved file.

Options:

- `--width N` – image width in pixels (default 200)
- `--height N` – image height in pixels (default 100)
- `--output PATH` – where to save the image (default `./scene.bmp`); the
  extension picks the format as described below

## Using the library

```python
import math

from raytracer.camera import Camera
from raytracer.cli import write_canvas_to_image
from raytracer.light import PointLight
from raytracer.matrix import translation, view_transform
from raytracer.patterns import CheckersPattern
from raytracer.plane import Plane
from raytracer.sphere import Sphere
from raytracer.tuples import Color, Point, Vector
from raytracer.world import World

floor = Plane()
floor.material.pattern = CheckersPattern(Color(1, 1, 1), Color(0.1, 0.1, 0.1))

ball = Sphere()
ball.set_transform(translation(0, 1, 0))
ball.material.color = Color(0.8, 0.2, 0.2)
ball.material.reflective = 0.3

world = World(
    light_sources=[PointLight(Point(-10, 10, -10), Color(1, 1, 1))],
    objects=[floor, ball],
)

camera = Camera(320, 160, math.pi / 3)
camera.transform = view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0))

canvas = camera.render(world)
write_canvas_to_image("scene.png", canvas)
```

`write_canvas_to_image` picks the format from the file extension: `.ppm`
(plain-text P3, produced by `Canvas.to_ppm`), `.bmp`, `.jpg` (quality 100) or
`.png`. Any other extension raises `ValueError`.

## Building blocks

- `raytracer.tuples` – `Point`, `Vector` and `Color`, with arithmetic, dot and
  cross products, reflection, and tolerant equality (`almost_equals`).
- `raytracer.matrix` – `Matrix` plus `identity`, `translation`, `scaling`,
  `rotation_x`/`rotation_y`/`rotation_z`, `shearing` and `view_transform`.
  Transforms chain with `translate`, `scale`, `rotate_x`, `rotate_y`,
  `rotate_z` and `shear`; `inverse` raises `ValueError` for a singular matrix.
- `raytracer.ray` – `Ray` with `position`, and `transform` (also `matrix @ ray`).
- Shapes, all built on `raytracer.shape.Shape`:
  `raytracer.sphere.Sphere` (and `glass_sphere()`), `raytracer.plane.Plane`,
  `raytracer.cube.Cube`, `raytracer.cylinder.Cylinder` and
  `raytracer.cone.Cone` (both with `minimum`, `maximum` and `closed`),
  `raytracer.triangle.Triangle` and `raytracer.group.Group` (`add_child`).
- `raytracer.bounds` – `Bounds`, the axis-aligned boxes groups use to skip
  rays that miss them.
- `raytracer.material` – `Material` with colour, pattern and the ambient,
  diffuse, specular, shininess, reflective, transparency and refractive-index
  coefficients.
- `raytracer.patterns` – `StripePattern`, `GradientPattern`, `RingPattern`
  and `CheckersPattern`, each with its own `transform`.
- `raytracer.light` – `PointLight` and the `lighting` function.
- `raytracer.intersection` – `Intersection`, `intersections`, `hit`,
  `schlick` and the `Computations` prepared for each hit.
- `raytracer.world` – `World` and `default_world()`.
- `raytracer.camera` – `Camera` with `ray_for_pixel` and `render`.
- `raytracer.canvas` – `Canvas` with `write_pixel`, `pixel_at` and `to_ppm`.
- `raytracer.progress` – `ProgressBar`, the console bar shown while rendering.
- `raytracer.scenes` – the hexagon demonstration scene (`create_world`).

## Limitations

- `raytracer.obj_parser.ObjParser` recognises no OBJ statements yet: it only
  counts the lines it reads in `ignored_lines`. Models cannot be loaded from
  OBJ files.
- Shading uses only the first light source: a world with several lights adds
  one contribution per light, but each is computed from the first light, and
  shadows are tested against the first light only. A world with no lights
  raises `ValueError` when shaded.
- Rendering runs in a single thread, one pixel at a time.
- The command renders only the built-in hexagon scene; there is no scene file
  format.