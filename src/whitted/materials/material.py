"""Phong surface material.

A ``Material`` describes how a surface responds to light: its base color (or
procedural pattern), the weights of the ambient, diffuse and specular Phong
terms, and the reflective/transparent parameters that drive the recursive
reflection and refraction rays cast by the world.

Materials are immutable. Each field has a ``with_<field>`` builder that
returns a modified copy, so materials can be chained together fluently:

Example:
    >>> from src.whitted.materials.color import Color
    >>> from src.whitted.materials.material import Material
    >>> glass = Material().with_transparency(1.0).with_refractive_index(1.5)
    >>> red_plastic = Material().with_color(Color(1.0, 0.2, 0.2)).with_specular(0.3)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from src.whitted.core.matrix import Mat4
from src.whitted.core.tup import Tup
from src.whitted.materials.color import BLACK, Color
from src.whitted.materials.light import Light
from src.whitted.materials.pattern import Pattern

# Common refractive indices
VACUUM_INDEX = 1.0
GLASS_INDEX = 1.5


@dataclass(frozen=True)
class Material:
    """Optical parameters of a surface.

    Attributes:
        color: Base surface color, used when no pattern is set.
        ambient: Weight of the constant background light term.
        diffuse: Weight of the matte term, proportional to the cosine
            between the light direction and the normal.
        specular: Weight of the highlight term.
        shininess: Exponent controlling the size of the highlight. Larger
            values give smaller, tighter highlights.
        reflective: Fraction of the reflected ray's color added to the
            surface (0.0 is not reflective, 1.0 is a perfect mirror).
        transparency: Fraction of the refracted ray's color added to the
            surface (0.0 is opaque).
        refractive_index: Index of refraction of the material.
        pattern: Optional pattern that overrides ``color``.
    """

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM_INDEX
    pattern: Pattern | None = None

    def with_color(self, color: Color) -> Material:
        return replace(self, color=color)

    def with_ambient(self, ambient: float) -> Material:
        return replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return replace(self, shininess=shininess)

    def with_reflective(self, reflective: float) -> Material:
        return replace(self, reflective=reflective)

    def with_transparency(self, transparency: float) -> Material:
        return replace(self, transparency=transparency)

    def with_refractive_index(self, refractive_index: float) -> Material:
        return replace(self, refractive_index=refractive_index)

    def with_pattern(self, pattern: Pattern | None) -> Material:
        return replace(self, pattern=pattern)

    def lighting(
        self,
        object_transform: Mat4,
        light: Light,
        point: Tup,
        eyev: Tup,
        normalv: Tup,
        in_shadow: bool = False,
    ) -> Color:
        """Shade a point with the Phong reflection model.

        The diffuse and specular terms are dropped when the light is behind
        the surface or the point is in shadow; the ambient term always
        contributes. The result is not clamped.

        Args:
            object_transform: Transform of the shape being shaded, needed to
                sample the pattern in object space.
            light: The scene's point light.
            point: World-space point being shaded.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal at the point, facing the eye.
            in_shadow: Whether an occluder lies between point and light.

        Returns:
            The sum of the ambient, diffuse and specular contributions.
        """
        if self.pattern is not None:
            surface_color = self.pattern.color_at(object_transform, point)
        else:
            surface_color = self.color

        effective_color = surface_color * light.intensity
        ambient = effective_color * self.ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0.0 or in_shadow:
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal

        reflect_dot_eye = (-lightv).reflect(normalv).dot(eyev)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular
