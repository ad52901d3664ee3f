import math

import pytest

from raytracer.bounds import Bounds
from raytracer.material import Material
from raytracer.matrix import identity, rotation_z, scaling, translation
from raytracer.ray import Ray
from raytracer.shape import Shape, TestShape, check_axis
from raytracer.tuples import Point, Vector


def test_the_default_transformation():
    assert TestShape().transform == identity()


def test_assigning_a_transformation():
    s = TestShape()
    s.set_transform(translation(2, 3, 4))
    assert s.transform == translation(2, 3, 4)


def test_the_default_material():
    assert TestShape().material == Material()


def test_assigning_a_material():
    s = TestShape()
    m = Material(ambient=1)
    s.material = m
    assert s.material is m
    assert s.material.ambient == 1


def test_intersecting_a_scaled_shape_with_a_ray():
    s = TestShape()
    s.set_transform(scaling(2, 2, 2))
    xs = s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    assert xs == []
    assert s.saved_ray.origin == Point(0, 0, -2.5)
    assert s.saved_ray.direction == Vector(0, 0, 0.5)


def test_intersecting_a_translated_shape_with_a_ray():
    s = TestShape()
    s.set_transform(translation(5, 0, 0))
    s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    assert s.saved_ray.origin == Point(-5, 0, -5)
    assert s.saved_ray.direction == Vector(0, 0, 1)


def test_normal_on_a_translated_shape():
    s = TestShape()
    s.set_transform(translation(0, 1, 0))
    n = s.normal_at(Point(0, 1.70711, -0.70711))
    assert n == Vector(0, 0.70710678118654746, -0.70710678118654757)


def test_normal_on_a_transformed_shape():
    s = TestShape()
    s.set_transform(scaling(1, 0.5, 1) * rotation_z(math.pi / 5))
    n = s.normal_at(Point(0, math.sqrt(2) / 2, -math.sqrt(2) / 2))
    assert n == Vector(0, 0.97014250014533188, -0.24253562503633294)


def test_normal_is_a_unit_vector():
    s = TestShape()
    s.set_transform(scaling(3, 1, 2))
    n = s.normal_at(Point(1, 2, 3))
    assert n.magnitude() == pytest.approx(1.0)
    assert n.w == 0


def test_a_shape_has_a_parent_attribute():
    assert TestShape().parent is None


def test_shapes_get_unique_ids_and_compare_by_id():
    a = TestShape()
    b = TestShape()
    assert a.id != b.id
    assert a != b
    assert a == a
    assert len({a, b, a}) == 2


def test_test_shape_bounds_are_a_point_at_origin():
    assert TestShape().compute_bounds() == Bounds(Point(0, 0, 0), Point(0, 0, 0))


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


@pytest.mark.parametrize(
    "origin, direction, expected",
    [(-5, 1, (4, 6)), (5, -1, (4, 6)), (0, 1, (-1, 1))],
)
def test_check_axis_with_moving_ray(origin, direction, expected):
    assert check_axis(origin, direction) == expected


def test_check_axis_parallel_inside_slab_spans_everything():
    assert check_axis(0.5, 0) == (-math.inf, math.inf)


def test_check_axis_parallel_outside_slab_is_empty_side():
    assert check_axis(2, 0) == (-math.inf, -math.inf)


def test_check_axis_with_custom_slab():
    assert check_axis(0, 1, 2, 3) == (2, 3)