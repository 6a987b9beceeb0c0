"""Ray data structure.

A ray is a point of origin plus a direction. Rays are value objects: moving
a ray into a shape's object space returns a new ray.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tup import point, vector
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> ray.position(5.0)  # Point 5 units along the ray
    Tup(x=0.0, y=0.0, z=0.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.matrix import Mat4
from src.whitted.core.tup import Tup


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length; object-space rays are usually scaled.
    """

    origin: Tup
    direction: Tup

    def position(self, t: float) -> Tup:
        """Compute the point ``origin + t * direction``.

        Args:
            t: The parameter value. Negative values lie behind the origin.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Mat4) -> Ray:
        """Return this ray with origin and direction multiplied by ``matrix``."""
        return Ray(matrix @ self.origin, matrix @ self.direction)
