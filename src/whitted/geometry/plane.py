"""Infinite plane primitive.

In object space the plane is the x-z plane (y = 0) with its normal pointing
up +y everywhere. A ray whose direction has (almost) no y component is
parallel to the plane, or lies in it, and never intersects it.
"""

from src.whitted.core.ray import Ray
from src.whitted.core.tup import EPSILON, Tup, vector
from src.whitted.geometry.shape import Shape
from src.whitted.scene.intersection import Intersection, Intersections

_UP = vector(0.0, 1.0, 0.0)


class Plane(Shape):
    """The x-z plane of object space."""

    def local_intersect(self, local_ray: Ray) -> Intersections:
        if abs(local_ray.direction.y) < EPSILON:
            return Intersections()
        t = -local_ray.origin.y / local_ray.direction.y
        return Intersections([Intersection(t, self)])

    def local_normal_at(self, local_point: Tup) -> Tup:
        return _UP
