"""Ray-shape intersections and the values precomputed for shading a hit."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytracer.shape import EPSILON, Shape
from raytracer.tuples import Point, Vector, almost_equals

__all__ = [
    "EPSILON",
    "Computations",
    "Intersection",
    "hit",
    "intersections",
    "schlick",
]


@dataclass
class Computations:
    """Everything the shading code needs to know about one hit."""

    t: float
    object: Shape
    point: Point
    over_point: Point
    under_point: Point
    eye_vector: Vector
    normal_vector: Vector
    reflect_vector: Vector
    inside: bool
    n1: float = 1.0
    n2: float = 1.0


def schlick(comps):
    """Return the Schlick approximation of the reflectance at a hit."""
    cos = comps.eye_vector.dot(comps.normal_vector)

    # Total internal reflection can only occur when leaving a denser medium.
    if comps.n1 > comps.n2:
        n = comps.n1 / comps.n2
        sin2_t = n**2 * (1.0 - cos**2)
        if sin2_t > 1.0:
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)

    r0 = ((comps.n1 - comps.n2) / (comps.n1 + comps.n2)) ** 2
    return r0 + (1 - r0) * (1 - cos) ** 5


class Intersection:
    """A distance ``t`` along a ray at which it meets ``object``."""

    __slots__ = ("t", "object")

    def __init__(self, t, shape):
        self.t = float(t)
        self.object = shape

    def prepare_computations(self, ray, intersections=()):
        """Precompute the hit geometry and the refractive indices on either side.

        ``intersections`` is the full, sorted list of hits the ray produced; it is
        used to work out which objects contain the hit.  Without it both indices
        are taken to be 1.0.
        """
        n1 = n2 = 1.0
        containers = []
        for candidate in intersections:
            is_self = candidate == self
            if is_self:
                n1 = containers[-1].material.refractive_index if containers else 1.0

            target = candidate.object.id
            index = next(
                (k for k, shape in enumerate(containers) if shape.id == target), None
            )
            if index is None:
                containers.append(candidate.object)
            else:
                del containers[index]

            if is_self:
                n2 = containers[-1].material.refractive_index if containers else 1.0

        point = ray.position(self.t)
        eye_vector = -ray.direction
        normal_vector = self.object.normal_at(point)
        inside = normal_vector.dot(eye_vector) < 0
        if inside:
            normal_vector = -normal_vector

        direction = ray.direction
        reflect_vector = direction - normal_vector * 2 * direction.dot(normal_vector)

        return Computations(
            t=self.t,
            object=self.object,
            point=point,
            over_point=point + normal_vector * EPSILON,
            under_point=point - normal_vector * EPSILON,
            eye_vector=eye_vector,
            normal_vector=normal_vector,
            reflect_vector=reflect_vector,
            inside=inside,
            n1=n1,
            n2=n2,
        )

    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return almost_equals(self.t, other.t) and self.object.id == other.object.id

    __hash__ = None

    def __repr__(self):
        return f"Intersection({self.t!r}, {type(self.object).__name__}#{self.object.id})"


def intersections(*args):
    """Return the given intersections sorted by ``t``."""
    return sorted(args, key=lambda item: item.t)


def hit(items):
    """Return the first intersection with positive ``t``, or None."""
    return next((item for item in items if item.t > 0), None)