"""World container and the recursive Whitted shading loop.

A ``World`` holds one point light and an ordered list of shapes. Rendering a
pixel is a call to ``color_at``, which recurses through reflection and
refraction:

    color_at(ray)
      -> intersect(ray) -> hit -> prepare_computations
      -> shade_hit(comps)
           surface   = Phong lighting (shadow test toward the light)
           reflected = color_at(reflection ray) * reflective
           refracted = color_at(refraction ray) * transparency
           return surface + reflected + refracted

Every recursive call spends one unit of the ``remaining`` bounce budget; a
ray that arrives with no budget left contributes black. This bounds the
recursion between facing mirrors and inside glass.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tup import EPSILON, Tup, point
from src.whitted.materials.color import BLACK, Color
from src.whitted.materials.light import Light
from src.whitted.scene.intersection import Computations, Intersections

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape

# Recursion budget for reflection and refraction rays
MAX_BOUNCES = 5


class World:
    """A light and the shapes it illuminates.

    Example:
        >>> from src.whitted.core.tup import point
        >>> from src.whitted.geometry.sphere import Sphere
        >>> from src.whitted.materials.color import WHITE
        >>> from src.whitted.materials.light import point_light
        >>> world = World(point_light(point(-10, 10, -10), WHITE)).with_object(Sphere())
        >>> len(world)
        1
    """

    def __init__(self, light: Light | None = None, objects: Iterable[Shape] = ()) -> None:
        """Create a world.

        Args:
            light: The scene's point light. Defaults to a black light at the
                origin, which leaves every surface unlit.
            objects: Shapes in the world, in insertion order. Each shape is
                copied, so later changes to the caller's shapes do not reach
                the world.
        """
        self._light = light if light is not None else Light(point(0.0, 0.0, 0.0), BLACK)
        self._objects: list[Shape] = [copy.copy(shape) for shape in objects]

    @property
    def light(self) -> Light:
        return self._light

    @property
    def objects(self) -> tuple[Shape, ...]:
        return tuple(self._objects)

    def with_light(self, light: Light) -> World:
        """Return a new world with the light replaced."""
        return World(light, self._objects)

    def with_object(self, shape: Shape) -> World:
        """Return a new world with ``shape`` appended."""
        return World(self._light, [*self._objects, shape])

    def with_objects(self, shapes: Iterable[Shape]) -> World:
        """Return a new world with every shape in ``shapes`` appended."""
        return World(self._light, [*self._objects, *shapes])

    def __getitem__(self, index: int) -> Shape:
        return self._objects[index]

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._objects)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every shape, merged and sorted by ``t``."""
        xs = Intersections()
        for shape in self._objects:
            xs.extend(shape.intersect(ray))
        return xs

    def is_shadowed(self, world_point: Tup) -> bool:
        """Test whether any shape sits between ``world_point`` and the light.

        Only hits strictly closer than the light count; shapes behind the
        light do not cast shadows toward it.
        """
        to_light = self._light.position - world_point
        distance = to_light.magnitude()
        ray = Ray(world_point, to_light.normalize())
        hit = self.intersect(ray).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        """Shade a prepared hit, including reflection and refraction.

        Args:
            comps: Shading state for the hit.
            remaining: Bounce budget for secondary rays.

        Returns:
            Surface color plus reflected and refracted contributions.
        """
        shape = comps.shape
        shadowed = self.is_shadowed(comps.over_point)
        surface = shape.material.lighting(
            shape.transform,
            self._light,
            comps.over_point,
            comps.eyev,
            comps.normalv,
            shadowed,
        )
        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        """Color arriving along the reflection ray, scaled by reflectivity."""
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective < EPSILON:
            return BLACK
        reflect_ray = Ray(comps.over_point, comps.reflectv)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = MAX_BOUNCES) -> Color:
        """Color arriving along the refraction ray, scaled by transparency.

        Snell's law bends the ray from the eye through the surface. When
        ``sin^2(theta_t)`` exceeds 1 there is no transmitted ray (total
        internal reflection) and the contribution is black.
        """
        transparency = comps.shape.material.transparency
        if remaining <= 0 or transparency < EPSILON:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eyev.dot(comps.normalv)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def color_at(self, ray: Ray, remaining: int = MAX_BOUNCES) -> Color:
        """Trace a ray into the world and return the color it sees.

        Args:
            ray: Ray to trace.
            remaining: Bounce budget handed to reflection and refraction.

        Returns:
            Shaded color of the first visible hit, or black on a miss.
        """
        xs = self.intersect(ray)
        hit = xs.hit()
        if hit is None:
            return BLACK
        comps = hit.prepare_computations(ray, xs)
        return self.shade_hit(comps, remaining)

    def __repr__(self) -> str:
        return f"World(light={self._light!r}, objects={len(self._objects)})"
