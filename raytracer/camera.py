"""A pinhole camera that renders a world onto a canvas."""

from __future__ import annotations

import itertools
import math

from raytracer.canvas import Canvas
from raytracer.matrix import identity
from raytracer.progress import ProgressBar
from raytracer.ray import Ray
from raytracer.tuples import Point


class Camera:
    """Maps an ``hsize`` x ``vsize`` canvas one unit in front of the eye."""

    def __init__(self, hsize, vsize, field_of_view):
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = identity()

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def ray_for_pixel(self, px, py):
        """Return the world-space ray through the centre of pixel (``px``, ``py``)."""
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.transform.inverse()
        pixel = inverse * Point(world_x, world_y, -1)
        origin = inverse * Point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world):
        """Trace one ray per pixel and return the resulting canvas."""
        image = Canvas(self.hsize, self.vsize)
        progress = ProgressBar(self.hsize * self.vsize)
        pixels = itertools.product(range(self.vsize), range(self.hsize))
        for done, (y, x) in enumerate(pixels, start=1):
            image.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))
            progress.update(done)
            progress.display()
        return image