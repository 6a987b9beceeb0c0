"""Sphere primitive with ray-sphere intersection.

In object space the sphere is the unit sphere centred on the origin; its
size and position in the world come entirely from its transform.

The intersection solves the quadratic obtained by substituting the ray into
``|p|^2 = 1``:

    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = 2 * dot(direction, origin - center)
    c = dot(origin - center, origin - center) - 1

A negative discriminant is a miss. Otherwise both roots are returned, even
when they coincide (a tangent ray) or lie behind the ray origin; choosing
which one matters is the job of ``Intersections.hit``.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tup import point, vector
    >>> from src.whitted.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [i.t for i in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math

from src.whitted.core.ray import Ray
from src.whitted.core.tup import Tup, point
from src.whitted.geometry.shape import Shape
from src.whitted.materials.material import GLASS_INDEX, Material
from src.whitted.scene.intersection import Intersection, Intersections

_CENTER = point(0.0, 0.0, 0.0)


class Sphere(Shape):
    """Unit sphere at the origin of object space."""

    @classmethod
    def glass(cls) -> Sphere:
        """A fully transparent sphere with the refractive index of glass."""
        return cls(material=Material(transparency=1.0, refractive_index=GLASS_INDEX))

    def local_intersect(self, local_ray: Ray) -> Intersections:
        sphere_to_ray = local_ray.origin - _CENTER
        a = local_ray.direction.dot(local_ray.direction)
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return Intersections()

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return Intersections([Intersection(t1, self), Intersection(t2, self)])

    def local_normal_at(self, local_point: Tup) -> Tup:
        return local_point - _CENTER
