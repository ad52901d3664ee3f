import math

import pytest

from raytracer.bounds import Bounds
from raytracer.plane import Plane
from raytracer.ray import Ray
from raytracer.tuples import Point, Vector


@pytest.mark.parametrize("point", [Point(0, 0, 0), Point(10, 0, -10), Point(-5, 0, 150)])
def test_normal_of_a_plane_is_constant(point):
    assert Plane().local_normal_at(point) == Vector(0, 1, 0)


def test_intersect_with_parallel_ray():
    assert Plane().local_intersect(Ray(Point(0, 10, 0), Vector(0, 0, 1))) == []


def test_intersect_with_coplanar_ray():
    assert Plane().local_intersect(Ray(Point(0, 0, 0), Vector(0, 0, 1))) == []


@pytest.mark.parametrize(
    "origin, direction",
    [(Point(0, 1, 0), Vector(0, -1, 0)), (Point(0, -1, 0), Vector(0, 1, 0))],
)
def test_ray_intersecting_plane(origin, direction):
    p = Plane()
    xs = p.local_intersect(Ray(origin, direction))
    assert len(xs) == 1
    assert xs[0].t == pytest.approx(1.0)
    assert xs[0].object == p


def test_plane_bounds():
    expected = Bounds(Point(-math.inf, -0.1, -math.inf), Point(math.inf, 0.1, math.inf))
    assert Plane().compute_bounds() == expected