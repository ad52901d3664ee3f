"""The abstract shape with transforms, parents and materials."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod

from raytracer.bounds import Bounds
from raytracer.material import Material
from raytracer.matrix import identity
from raytracer.ray import Ray
from raytracer.ray import transform as transform_ray
from raytracer.tuples import Point, Vector

EPSILON = 0.00001

_ids = itertools.count()


class Shape(ABC):
    """A transformable object that rays can hit."""

    def __init__(self):
        self.id = next(_ids)
        self.transform = identity()
        self.material = Material()
        self.parent = None

    def set_transform(self, transform):
        self.transform = transform

    def intersect(self, ray):
        """Intersect a world-space ray with this shape."""
        local_ray = transform_ray(ray, self.transform.inverse())
        return self.local_intersect(local_ray)

    def normal_at(self, point):
        """Return the world-space surface normal at a world-space point."""
        local_point = self.world_to_object(point)
        local_normal = self.local_normal_at(local_point)
        return self.normal_to_world(local_normal)

    def world_to_object(self, point):
        """Convert a world point to object space through every parent."""
        if self.parent is not None:
            point = self.parent.world_to_object(point)
        return self.transform.inverse() * point

    def normal_to_world(self, normal):
        """Convert an object-space normal to world space through every parent."""
        normal = self.transform.inverse().transpose() * normal
        normal = Vector(normal.x, normal.y, normal.z).normalize()
        if self.parent is not None:
            normal = self.parent.normal_to_world(normal)
        return normal

    @abstractmethod
    def compute_bounds(self):
        """Return the object-space bounding box."""

    @abstractmethod
    def local_intersect(self, ray):
        """Return the intersections of an object-space ray."""

    @abstractmethod
    def local_normal_at(self, point):
        """Return the object-space normal at an object-space point."""

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


class TestShape(Shape):
    """A shape that records the last local ray it was asked to intersect."""

    __test__ = False

    def __init__(self):
        super().__init__()
        self.saved_ray = Ray(Point(), Vector())

    def local_intersect(self, ray):
        self.saved_ray = ray
        return []

    def local_normal_at(self, point):
        return Vector(point.x, point.y, point.z)

    def compute_bounds(self):
        return Bounds(Point(0, 0, 0), Point(0, 0, 0))


def check_axis(origin, direction, minimum=-1.0, maximum=1.0):
    """Return the sorted entry and exit ``t`` of a ray against a slab on one axis."""
    tmin_numerator = minimum - origin
    tmax_numerator = maximum - origin
    if abs(direction) >= EPSILON:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = tmin_numerator * math.inf
        tmax = tmax_numerator * math.inf
    if tmin > tmax:
        return tmax, tmin
    return tmin, tmax