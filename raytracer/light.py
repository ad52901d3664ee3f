"""Point lights and the Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.tuples import Color, Point


@dataclass
class PointLight:
    """A light with no size at ``position`` emitting ``intensity``."""

    position: Point
    intensity: Color


def lighting(material, object_transform, light, point, eye_vector, normal_vector, in_shadow):
    """Return the Phong-shaded colour of ``point`` on a surface with ``material``."""
    if material.pattern is not None:
        color = material.pattern.pattern_at_shape(object_transform, point)
    else:
        color = material.color

    effective_color = color * light.intensity
    light_vector = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    black = Color(0, 0, 0)
    # A negative cosine means the light is on the other side of the surface.
    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal < 0:
        diffuse = specular = black
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_vector = -light_vector.reflect(normal_vector)
        reflect_dot_eye = reflect_vector.dot(eye_vector)
        if reflect_dot_eye <= 0:
            specular = black
        else:
            factor = reflect_dot_eye**material.shininess
            specular = light.intensity * material.specular * factor

    if in_shadow:
        return ambient
    return ambient + diffuse + specular