"""Procedural colour patterns evaluated in pattern space."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from raytracer.matrix import identity
from raytracer.tuples import Color, almost_equals


class Pattern(ABC):
    """Base class for patterns; ``transform`` maps object space to pattern space."""

    def __init__(self):
        self.transform = identity()

    @abstractmethod
    def pattern_at(self, point):
        """Return the colour at ``point`` given in pattern space."""

    def pattern_at_shape(self, object_transform, world_point):
        """Return the colour for a world point on an object with ``object_transform``."""
        object_point = object_transform.inverse() * world_point
        pattern_point = self.transform.inverse() * object_point
        return self.pattern_at(pattern_point)


class TestPattern(Pattern):
    """A pattern whose colour is the pattern-space point itself."""

    __test__ = False

    def pattern_at(self, point):
        return Color(point.x, point.y, point.z)


def _is_even(value):
    return almost_equals(math.fmod(value, 2.0), 0)


class StripePattern(Pattern):
    """Alternating stripes of ``a`` and ``b`` along x."""

    def __init__(self, a, b):
        super().__init__()
        self.a = a
        self.b = b

    def pattern_at(self, point):
        return self.a if _is_even(math.floor(point.x)) else self.b


class GradientPattern(Pattern):
    """A linear blend from ``a`` to ``b`` repeating every unit of x."""

    def __init__(self, a, b):
        super().__init__()
        self.a = a
        self.b = b

    def pattern_at(self, point):
        distance = self.b - self.a
        fraction = point.x - math.floor(point.x)
        return self.a + distance * fraction


class RingPattern(Pattern):
    """Concentric rings in the xz plane."""

    def __init__(self, a, b):
        super().__init__()
        self.a = a
        self.b = b

    def pattern_at(self, point):
        distance = math.sqrt(point.x**2 + point.z**2)
        return self.a if _is_even(math.floor(distance)) else self.b


class CheckersPattern(Pattern):
    """A three-dimensional checkerboard of unit cubes."""

    def __init__(self, a, b):
        super().__init__()
        self.a = a
        self.b = b

    def pattern_at(self, point):
        total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
        return self.a if _is_even(total) else self.b