"""An infinite plane in xz."""

from __future__ import annotations

import math

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import EPSILON, Shape
from raytracer.tuples import Point, Vector


class Plane(Shape):
    """The plane y = 0 in object space."""

    def local_intersect(self, ray):
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t, self)]

    def local_normal_at(self, point):
        return Vector(0, 1, 0)

    def compute_bounds(self):
        return Bounds(Point(-math.inf, -0.1, -math.inf), Point(math.inf, 0.1, math.inf))