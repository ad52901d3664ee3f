"""The demonstration scene: a hexagon of spheres joined by cylinders."""

from __future__ import annotations

import math

from raytracer.cylinder import Cylinder
from raytracer.group import Group
from raytracer.light import PointLight
from raytracer.matrix import rotation_y, scaling
from raytracer.sphere import Sphere
from raytracer.tuples import Color, Point
from raytracer.world import World


def hexagon_corner():
    """Return a small sphere sitting one unit along -z."""
    corner = Sphere()
    corner.transform = scaling(0.25, 0.25, 0.25).translate(0, 0, -1)
    return corner


def hexagon_edge():
    """Return a thin unit-length cylinder leaving a corner at 30 degrees."""
    edge = Cylinder(minimum=0, maximum=1)
    edge.transform = (
        scaling(0.25, 1, 0.25)
        .rotate_z(-math.pi / 2)
        .rotate_y(-math.pi / 6)
        .translate(0, 0, -1)
    )
    return edge


def hexagon_side():
    """Return a group of one corner and one edge."""
    side = Group()
    side.add_child(hexagon_corner())
    side.add_child(hexagon_edge())
    return side


def hexagon():
    """Return six sides rotated about y to close a hexagon."""
    shape = Group()
    for n in range(6):
        side = hexagon_side()
        side.transform = rotation_y(n * math.pi / 3)
        shape.add_child(side)
    return shape


def create_world():
    """Return a world holding the hexagon lit by a white light above and to the left."""
    world = World()
    world.objects.append(hexagon())
    world.light_sources.append(PointLight(Point(-10, 10, -10), Color(1, 1, 1)))
    return world