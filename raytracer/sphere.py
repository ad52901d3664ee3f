"""The unit sphere centred at the origin."""

from __future__ import annotations

import math

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import Shape
from raytracer.tuples import Point


class Sphere(Shape):
    """A sphere of radius 1 around the object-space origin."""

    def __init__(self):
        super().__init__()
        self.origin = Point(0, 0, 0)
        self.radius = 1.0

    def _coefficients(self, ray):
        sphere_to_ray = ray.origin - self.origin
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        return a, b, c

    def discriminant(self, ray):
        """Return the discriminant of the ray-sphere quadratic."""
        a, b, c = self._coefficients(ray)
        return b * b - 4 * a * c

    def local_intersect(self, ray):
        a, b, c = self._coefficients(ray)
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []
        root = math.sqrt(discriminant)
        t1 = (-b - root) / (2 * a)
        t2 = (-b + root) / (2 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, point):
        return point - Point(0, 0, 0)

    def compute_bounds(self):
        return Bounds(Point(-1, -1, -1), Point(1, 1, 1))


def glass_sphere():
    """Return a sphere with a fully transparent, glass-like material."""
    sphere = Sphere()
    sphere.material.transparency = 1.0
    sphere.material.refractive_index = 1.5
    return sphere