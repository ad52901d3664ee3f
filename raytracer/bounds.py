"""Axis-aligned bounding boxes."""

from __future__ import annotations

from raytracer.tuples import Point


def _component_min(a, b):
    return Point(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def _component_max(a, b):
    return Point(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


class Bounds:
    """An axis-aligned box between ``minimum`` and ``maximum``."""

    def __init__(self, minimum, maximum):
        self.minimum = minimum
        self.maximum = maximum

    def merge(self, other):
        """Grow this box in place to enclose ``other``."""
        self.minimum = _component_min(self.minimum, other.minimum)
        self.maximum = _component_max(self.maximum, other.maximum)

    def extend_to_fit(self, point):
        """Grow this box in place to enclose ``point``."""
        self.minimum = _component_min(self.minimum, point)
        self.maximum = _component_max(self.maximum, point)

    def transform(self, matrix):
        """Grow this box in place to enclose its transformed corners; return a copy."""
        lo, hi = self.minimum, self.maximum
        corners = (
            lo,
            Point(lo.x, lo.y, hi.z),
            Point(hi.x, lo.y, lo.z),
            Point(hi.x, lo.y, hi.z),
            Point(lo.x, hi.y, lo.z),
            hi,
        )
        for corner in corners:
            self.extend_to_fit(matrix * corner)
        return Bounds(self.minimum, self.maximum)

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    __hash__ = None

    def __repr__(self):
        return f"Bounds({self.minimum!r}, {self.maximum!r})"