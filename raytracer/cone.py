"""Double-napped cones around the y axis, optionally truncated and capped."""

from __future__ import annotations

import math

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import EPSILON, Shape
from raytracer.tuples import Point, Vector, almost_equals


class Cone(Shape):
    """A cone x^2 + z^2 = y^2 between ``minimum`` and ``maximum`` on y."""

    def __init__(self, minimum=-math.inf, maximum=math.inf, closed=False):
        super().__init__()
        self.minimum = minimum
        self.maximum = maximum
        self.closed = closed

    def local_intersect(self, ray):
        dx, dy, dz = ray.direction.x, ray.direction.y, ray.direction.z
        ox, oy, oz = ray.origin.x, ray.origin.y, ray.origin.z

        a = dx**2 - dy**2 + dz**2
        b = 2 * (ox * dx - oy * dy + oz * dz)
        c = ox**2 - oy**2 + oz**2

        xs = []
        if almost_equals(a, 0):
            if almost_equals(b, 0):
                return xs
            xs.append(Intersection(-c / (2 * b), self))
            self._intersect_caps(ray, xs)
            return xs

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
        y = math.sqrt(point.x**2 + point.z**2)
        if point.y > 0:
            y = -y
        if y < 1 and point.y >= self.maximum - EPSILON:
            return Vector(0, 1, 0)
        if y < 1 and point.y <= self.minimum + EPSILON:
            return Vector(0, -1, 0)
        return Vector(point.x, y, point.z)

    def compute_bounds(self):
        return Bounds(
            Point(self.minimum, self.minimum, self.minimum),
            Point(self.maximum, self.maximum, self.maximum),
        )

    @staticmethod
    def _check_cap(ray, t, radius):
        x = ray.origin.x + t * ray.direction.x
        z = ray.origin.z + t * ray.direction.z
        return x * x + z * z <= radius + EPSILON

    def _intersect_caps(self, ray, xs):
        if not self.closed or almost_equals(ray.direction.y, 0):
            return
        for level in (self.minimum, self.maximum):
            t = (level - ray.origin.y) / ray.direction.y
            if self._check_cap(ray, t, abs(level)):
                xs.append(Intersection(t, self))