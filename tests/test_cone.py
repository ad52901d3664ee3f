import math

import pytest

from raytracer.bounds import Bounds
from raytracer.cone import Cone
from raytracer.ray import Ray
from raytracer.tuples import Point, Vector


@pytest.mark.parametrize(
    "origin, direction, t0, t1",
    [
        (Point(0, 0, -5), Vector(0, 0, 1), 5, 5),
        (Point(0, 0, -5), Vector(1, 1, 1), 8.6602540378443855, 8.6602540378443855),
        (Point(1, 1, -5), Vector(-0.5, -1, 1), 4.5500556793563494, 49.449944320643645),
    ],
)
def test_intersecting_cone_with_ray(origin, direction, t0, t1):
    xs = Cone().local_intersect(Ray(origin, direction.normalize()))
    assert len(xs) == 2
    assert xs[0].t == pytest.approx(t0, rel=1e-9)
    assert xs[1].t == pytest.approx(t1, rel=1e-9)


def test_ray_parallel_to_one_half():
    ray = Ray(Point(0, 0, -1), Vector(0, 1, 1).normalize())
    xs = Cone().local_intersect(ray)
    assert len(xs) == 1
    assert xs[0].t == pytest.approx(0.35355339059327379, rel=1e-9)


@pytest.mark.parametrize(
    "origin, direction, count",
    [
        (Point(0, 0, -5), Vector(0, 1, 0), 0),
        (Point(0, 0, -0.25), Vector(0, 1, 1), 2),
        (Point(0, 0, -0.25), Vector(0, 1, 0), 4),
    ],
)
def test_intersecting_cone_end_caps(origin, direction, count):
    cone = Cone(minimum=-0.5, maximum=0.5, closed=True)
    assert len(cone.local_intersect(Ray(origin, direction.normalize()))) == count


@pytest.mark.parametrize(
    "point, normal",
    [
        (Point(0, 0, 0), Vector(0, 0, 0)),
        (Point(1, 1, 1), Vector(1, -math.sqrt(2), 1)),
        (Point(-1, -1, 0), Vector(-1, 1, 0)),
    ],
)
def test_normal_on_cone(point, normal):
    assert Cone().local_normal_at(point) == normal


def test_cone_defaults():
    cone = Cone()
    assert cone.minimum == -math.inf
    assert cone.maximum == math.inf
    assert cone.closed is False


def test_cone_bounds():
    cone = Cone(minimum=-2, maximum=3)
    assert cone.compute_bounds() == Bounds(Point(-2, -2, -2), Point(3, 3, 3))