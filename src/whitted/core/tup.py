"""Homogeneous 4-component tuples for points and vectors.

A ``Tup`` with ``w == 1`` is a point and a ``Tup`` with ``w == 0`` is a
direction. The distinction is what lets a single 4x4 matrix translate points
while leaving directions untouched.

Example:
    >>> from src.whitted.core.tup import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v
    Tup(x=1.0, y=2.0, z=4.0, w=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance for approximate float comparison and the surface offset used to
# avoid self-intersection of secondary rays.
EPSILON = 1e-5


def nearly_eq(a: float, b: float) -> bool:
    """Return True if a and b differ by less than EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tup:
    """A homogeneous (x, y, z, w) tuple.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors. Not enforced by the constructor.
    """

    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        return nearly_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return nearly_eq(self.w, 0.0)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Tup:
        """Return a tuple of unit length in the same direction.

        Raises:
            ZeroDivisionError: If the tuple has zero length.
        """
        return self / self.magnitude()

    def dot(self, other: Tup) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tup) -> Tup:
        """Cross product of the xyz parts. The result is always a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Tup) -> Tup:
        """Reflect this vector about a unit normal: d - 2(d.n)n."""
        return self - normal * (2.0 * self.dot(normal))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tup):
            return NotImplemented
        return (
            nearly_eq(self.x, other.x)
            and nearly_eq(self.y, other.y)
            and nearly_eq(self.z, other.z)
            and nearly_eq(self.w, other.w)
        )

    def __add__(self, other: Tup) -> Tup:
        return Tup(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tup) -> Tup:
        return Tup(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tup:
        return Tup(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tup:
        return Tup(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tup:
        if nearly_eq(scalar, 0.0):
            raise ZeroDivisionError(f"Cannot divide tuple by {scalar}")
        return Tup(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def point(x: float, y: float, z: float) -> Tup:
    """Create a point (w = 1)."""
    return Tup(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tup:
    """Create a direction vector (w = 0)."""
    return Tup(float(x), float(y), float(z), 0.0)
