"""Surface material properties for the Phong lighting model."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.tuples import Color


@dataclass(eq=False)
class Material:
    """Colour or pattern plus lighting, reflection and refraction coefficients."""

    color: Color = field(default_factory=lambda: Color(1, 1, 1))
    pattern: object = None
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    def __eq__(self, other):
        """Compare colour and the Phong coefficients only."""
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and self.ambient == other.ambient
            and self.diffuse == other.diffuse
            and self.specular == other.specular
            and self.shininess == other.shininess
        )

    __hash__ = None