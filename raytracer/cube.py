"""The axis-aligned cube spanning -1..1 on every axis."""

from __future__ import annotations

from raytracer.bounds import Bounds
from raytracer.intersection import Intersection
from raytracer.shape import Shape, check_axis
from raytracer.tuples import Point, Vector


class Cube(Shape):
    """A cube of side 2 centred at the object-space origin."""

    def local_intersect(self, ray):
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z)

        tmin = max(xtmin, ytmin, ztmin)
        tmax = min(xtmax, ytmax, ztmax)
        if tmin > tmax or tmax < 0:
            return []
        return [Intersection(tmin, self), Intersection(tmax, self)]

    def local_normal_at(self, point):
        ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(ax, ay, az)
        if maxc == ax:
            return Vector(point.x, 0, 0)
        if maxc == ay:
            return Vector(0, point.y, 0)
        return Vector(0, 0, point.z)

    def compute_bounds(self):
        return Bounds(Point(-1, -1, -1), Point(1, 1, 1))