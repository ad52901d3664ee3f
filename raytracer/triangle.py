"""Flat triangles defined by three points."""

from __future__ import annotations

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import EPSILON, Shape
from raytracer.tuples import Point, Vector


def _cross(a, b):
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


class Triangle(Shape):
    """A triangle with corners ``p1``, ``p2`` and ``p3``."""

    def __init__(self, p1, p2, p3):
        super().__init__()
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3
        self.e1 = Vector(p2.x - p1.x, p2.y - p1.y, p2.z - p1.z)
        self.e2 = Vector(p3.x - p1.x, p3.y - p1.y, p3.z - p1.z)
        self.normal = _cross(self.e2, self.e1).normalize()

    def local_intersect(self, ray):
        """Intersect using the Möller-Trumbore algorithm."""
        dir_cross_e2 = _cross(ray.direction, self.e2)
        determinant = self.e1.dot(dir_cross_e2)
        if abs(determinant) < EPSILON:
            return []

        f = 1.0 / determinant
        p1_to_origin = ray.origin - self.p1
        u = f * p1_to_origin.dot(dir_cross_e2)
        if u < 0 or u > 1:
            return []

        origin_cross_e1 = _cross(p1_to_origin, self.e1)
        v = f * ray.direction.dot(origin_cross_e1)
        if v < 0 or u + v > 1:
            return []

        t = f * self.e2.dot(origin_cross_e1)
        return [Intersection(t, self)]

    def local_normal_at(self, point):
        return self.normal

    def compute_bounds(self):
        corners = (self.p1, self.p2, self.p3)
        return Bounds(
            Point(*(min(getattr(p, axis) for p in corners) for axis in "xyz")),
            Point(*(max(getattr(p, axis) for p in corners) for axis in "xyz")),
        )