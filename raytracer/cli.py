"""Command line entry point: render the demonstration scene to an image file."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from PIL import Image

from raytracer.camera import Camera
from raytracer.matrix import view_transform
from raytracer.scenes import create_world
from raytracer.tuples import Point, Vector

_PILLOW_FORMATS = {
    ".bmp": ("BMP", {}),
    ".jpg": ("JPEG", {"quality": 100}),
    ".png": ("PNG", {}),
}


def _to_byte(value):
    if math.isnan(value):
        return 0
    scaled = value * 256
    if scaled >= 255:
        return 255
    if scaled <= 0:
        return 0
    return int(scaled)


def _image_bytes(canvas):
    return bytes(
        _to_byte(component)
        for y in range(canvas.height)
        for x in range(canvas.width)
        for component in (
            canvas.pixel_at(x, y).red,
            canvas.pixel_at(x, y).green,
            canvas.pixel_at(x, y).blue,
        )
    )


def write_canvas_to_image(file_path, canvas):
    """Write ``canvas`` to ``file_path`` as PPM, BMP, JPEG or PNG by its suffix."""
    path = Path(file_path)
    suffix = path.suffix
    if suffix == ".ppm":
        path.write_text(canvas.to_ppm())
        return
    if suffix not in _PILLOW_FORMATS:
        raise ValueError("Invalid image file format provided.")
    image_format, options = _PILLOW_FORMATS[suffix]
    image = Image.frombytes("RGB", (canvas.width, canvas.height), _image_bytes(canvas))
    image.save(path, format=image_format, **options)


def _positive(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv=None):
    """Render the hexagon scene and save it, by default to ./scene.bmp."""
    parser = argparse.ArgumentParser(prog="raytracer", description="Render the demo scene.")
    parser.add_argument("--width", type=_positive, default=200)
    parser.add_argument("--height", type=_positive, default=100)
    parser.add_argument("--output", type=Path, default=None)
    args = parser.parse_args(argv)

    world = create_world()
    camera = Camera(args.width, args.height, math.pi / 3)
    camera.transform = view_transform(Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0))
    canvas = camera.render(world)

    output = args.output if args.output is not None else Path.cwd() / "scene.bmp"
    write_canvas_to_image(output, canvas)
    print(f"\nRender saved to {output}")
    return 0