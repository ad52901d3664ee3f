"""A collection of shapes and lights, and the shading of rays through it."""

from __future__ import annotations

import math

from raytracer.intersection import hit, schlick
from raytracer.light import PointLight, lighting
from raytracer.material import Material
from raytracer.matrix import scaling
from raytracer.ray import Ray
from raytracer.sphere import Sphere
from raytracer.tuples import Color, Point

DEFAULT_DEPTH = 5


def _black():
    return Color(0, 0, 0)


class World:
    """Shapes and light sources that rays are traced against."""

    def __init__(self, light_sources=None, objects=None):
        self.light_sources = list(light_sources) if light_sources is not None else []
        self.objects = list(objects) if objects is not None else []

    def contains(self, item):
        """Whether the world holds an equal light or the same shape."""
        if isinstance(item, PointLight):
            return any(light == item for light in self.light_sources)
        return any(shape == item for shape in self.objects)

    def _primary_light(self):
        if not self.light_sources:
            raise ValueError("the world has no light sources")
        return self.light_sources[0]

    def intersect(self, ray):
        """Return every intersection of ``ray`` with the world, sorted by ``t``."""
        xs = [x for shape in self.objects for x in shape.intersect(ray)]
        xs.sort(key=lambda item: item.t)
        return xs

    def shade_hit(self, comps, remaining=DEFAULT_DEPTH):
        """Return the colour at a prepared hit, including reflection and refraction."""
        shadowed = self.is_shadowed(comps.over_point)
        shape = comps.object
        material = shape.material

        # Every light adds a contribution, each computed against the first light.
        primary = self._primary_light()
        surface = _black()
        for _ in self.light_sources:
            surface = surface + lighting(
                material,
                shape.transform,
                primary,
                comps.point,
                comps.eye_vector,
                comps.normal_vector,
                shadowed,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)

        if material.reflective > 0 and material.transparency > 0:
            reflectance = schlick(comps)
            return surface + reflected * reflectance + refracted * (1 - reflectance)
        return surface + reflected + refracted

    def color_at(self, ray, remaining=DEFAULT_DEPTH):
        """Return the colour seen along ``ray``; black when nothing is hit."""
        found = hit(self.intersect(ray))
        if found is None:
            return _black()
        return self.shade_hit(found.prepare_computations(ray), remaining)

    def is_shadowed(self, point):
        """Whether something lies between ``point`` and the first light."""
        v = self._primary_light().position - point
        distance = v.magnitude()
        direction = v.normalize()
        found = hit(self.intersect(Ray(point, direction)))
        return found is not None and found.t < distance

    def reflected_color(self, comps, remaining=DEFAULT_DEPTH):
        """Return the colour contributed by reflection at a hit."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or reflective == 0:
            return _black()
        reflect_ray = Ray(comps.over_point, comps.reflect_vector)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps, remaining=DEFAULT_DEPTH):
        """Return the colour contributed by refraction at a hit."""
        transparency = comps.object.material.transparency
        if remaining <= 0 or transparency == 0:
            return _black()

        # Snell's law
        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye_vector.dot(comps.normal_vector)
        sin2_t = n_ratio**2 * (1 - cos_i**2)
        if sin2_t > 1:
            return _black()

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal_vector * (n_ratio * cos_i - cos_t) - comps.eye_vector * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency


def default_world():
    """Return a world with one white light and two concentric spheres."""
    light = PointLight(Point(-10, 10, -10), Color(1, 1, 1))

    outer = Sphere()
    outer.material = Material(Color(0.8, 1.0, 0.6), None, 0.1, 0.7, 0.2, 200)
    inner = Sphere()
    inner.transform = scaling(0.5, 0.5, 0.5)

    return World([light], [outer, inner])