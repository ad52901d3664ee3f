"""Rays and their transformation by matrices."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.matrix import Matrix
from raytracer.tuples import Point, Vector


@dataclass
class Ray:
    """A half-line from ``origin`` along ``direction``."""

    origin: Point
    direction: Vector

    def position(self, t):
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def __rmatmul__(self, matrix):
        if not isinstance(matrix, Matrix):
            return NotImplemented
        return Ray(matrix * self.origin, matrix * self.direction)


def transform(ray, matrix):
    """Return ``ray`` transformed by ``matrix``."""
    return matrix @ ray