"""A rectangular grid of colours that can be serialised as plain PPM."""

from __future__ import annotations

import math

from raytracer.tuples import Color

MAX_LINE_LENGTH = 70


def _channel_byte(value):
    """Map a colour component to 0..255 the way the PPM writer does."""
    if math.isnan(value):
        return 0
    scaled = value * 256
    if scaled >= 255:
        return 255
    if scaled <= 0:
        return 0
    return int(scaled)


class Canvas:
    """A width x height image of colours, initially black."""

    def __init__(self, width, height):
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [[Color(0, 0, 0) for _ in range(height)] for _ in range(width)]

    def _check(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def pixel_at(self, x, y):
        """Return the colour at column ``x``, row ``y``."""
        self._check(x, y)
        return self._pixels[x][y]

    def write_pixel(self, x, y, color):
        """Set the colour at column ``x``, row ``y``."""
        self._check(x, y)
        self._pixels[x][y] = color

    def to_ppm(self):
        """Return the canvas as a P3 PPM document with lines kept under 70 characters."""
        parts = ["P3\n", f"{self.width} {self.height}\n", "255\n"]
        for y in range(self.height):
            values = [
                _channel_byte(component)
                for x in range(self.width)
                for component in (
                    self._pixels[x][y].red,
                    self._pixels[x][y].green,
                    self._pixels[x][y].blue,
                )
            ]
            last = len(values) - 1
            char_count = 0
            for index, value in enumerate(values):
                parts.append(str(value))
                char_count += 3
                if index == last:
                    continue
                if char_count < MAX_LINE_LENGTH - 4:
                    parts.append(" ")
                    char_count += 1
                else:
                    parts.append("\n")
                    char_count = 0
            parts.append("\n")
        return "".join(parts)