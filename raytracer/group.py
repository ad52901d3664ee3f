"""Groups of shapes that share a transform."""

from __future__ import annotations

import math

from raytracer.bounds import Bounds
from raytracer.shape import Shape, check_axis
from raytracer.tuples import Point


class Group(Shape):
    """A shape composed of child shapes."""

    def __init__(self):
        super().__init__()
        self.children = []
        self.bounds = Bounds(
            Point(-math.inf, -math.inf, -math.inf),
            Point(math.inf, math.inf, math.inf),
        )

    def add_child(self, child):
        """Add ``child`` to the group and make the group its parent."""
        self.bounds.merge(child.compute_bounds().transform(child.transform))
        child.parent = self
        self.children.append(child)

    def local_intersect(self, ray):
        if not self._intersects_bounds(ray):
            return []
        hits = [x for child in self.children for x in child.intersect(ray)]
        hits.sort(key=lambda item: item.t)
        return hits

    def local_normal_at(self, point):
        raise ValueError("a group has no surface normal of its own")

    def compute_bounds(self):
        return Bounds(self.bounds.minimum, self.bounds.maximum)

    def _intersects_bounds(self, ray):
        lo, hi = self.bounds.minimum, self.bounds.maximum
        xtmin, xtmax = check_axis(ray.origin.x, ray.direction.x, lo.x, hi.x)
        ytmin, ytmax = check_axis(ray.origin.y, ray.direction.y, lo.y, hi.y)
        ztmin, ztmax = check_axis(ray.origin.z, ray.direction.z, lo.z, hi.z)
        return max(xtmin, ytmin, ztmin) < min(xtmax, ytmax, ztmax)