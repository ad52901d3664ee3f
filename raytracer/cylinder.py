"""Cylinders of radius 1 around the y axis, optionally truncated and capped."""

from __future__ import annotations

import math

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import EPSILON, Shape
from raytracer.tuples import Point, Vector, almost_equals


def _divide(numerator, denominator):
    """Divide with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Cylinder(Shape):
    """A unit-radius cylinder between ``minimum`` and ``maximum`` on y."""

    def __init__(self, minimum=-math.inf, maximum=math.inf, closed=False):
        super().__init__()
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray):
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z

        a = dx**2 + dz**2
        xs = []
        if almost_equals(a, 0):
            self._intersect_caps(ray, xs)
            return xs

        b = 2 * (ox * dx + oz * dz)
        c = ox**2 + oz**2 - 1
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        root = math.sqrt(discriminant)
        t0 = (-b - root) / (2 * a)
        t1 = (-b + root) / (2 * a)
        if t0 > t1:
            t0, t1 = t1, t0

        for t in (t0, t1):
            y = oy + t * dy
            if self.minimum < y < self.maximum:
                xs.append(Intersection(t, self))
        self._intersect_caps(ray, xs)
        return xs

    def local_normal_at(self, point):
        distance = point.x**2 + point.z**2
        if distance < 1 and point.y >= self.maximum - EPSILON:
            return Vector(0, 1, 0)
        if distance < 1 and point.y <= self.minimum + EPSILON:
            return Vector(0, -1, 0)
        return Vector(point.x, 0, point.z)

    def compute_bounds(self):
        return Bounds(Point(-1, self.minimum, -1), Point(1, self.maximum, 1))

    @staticmethod
    def _check_cap(ray, t):
        """Whether the hit at ``t`` lies within the unit radius of the y axis."""
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        return x * x + z * z <= 1

    def _intersect_caps(self, ray, xs):
        if not self.closed:
            return
        for level in (self.minimum, self.maximum):
            t = _divide(level - ray.origin.y, ray.direction.y)
            if self._check_cap(ray, t):
                xs.append(Intersection(t, self))