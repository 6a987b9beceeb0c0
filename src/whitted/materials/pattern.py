"""Procedural patterns that map a point in space to a color.

Each pattern lives in its own coordinate space nested inside the object
space of the shape it decorates. Sampling a pattern therefore undoes the
shape's transform and then the pattern's transform before evaluating the
pattern function:

    pattern_point = pattern.transform^-1 * object_transform^-1 * world_point

Patterns available:
    CoordinatePattern: Maps (x, y, z) straight to (r, g, b); useful for
        checking the transform chain
    StripePattern: Alternates two colors in bands along x
    GradientPattern: Linear blend from one color to another along x
    RingPattern: Concentric rings in the x-z plane
    CheckersPattern: 3D checkerboard of unit cubes

Example:
    >>> from src.whitted.core.transforms import scaling
    >>> from src.whitted.materials.color import BLACK, WHITE
    >>> from src.whitted.materials.pattern import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK).with_transform(scaling(0.25, 1, 1))
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from src.whitted.core.matrix import Mat4
from src.whitted.core.tup import Tup
from src.whitted.materials.color import Color


@dataclass(frozen=True)
class Pattern(ABC):
    """Base class for all patterns.

    Attributes:
        transform: Pattern-space transform relative to the object it is
            applied to. Defaults to the identity.
    """

    transform: Mat4 = field(default_factory=Mat4.identity, kw_only=True)

    @abstractmethod
    def pattern_at(self, local_point: Tup) -> Color:
        """Evaluate the pattern at a point already in pattern space."""

    def with_transform(self, transform: Mat4) -> Pattern:
        return replace(self, transform=transform)

    def color_at(self, object_transform: Mat4, world_point: Tup) -> Color:
        """Sample the pattern at a world-space point on a transformed object.

        Args:
            object_transform: Transform of the shape the pattern decorates.
            world_point: The point to sample, in world space.

        Returns:
            The pattern color at that point.
        """
        object_point = object_transform.inverse() @ world_point
        return self.pattern_at(self.transform.inverse() @ object_point)


@dataclass(frozen=True)
class CoordinatePattern(Pattern):
    """Return the pattern-space coordinates of the point as a color."""

    def pattern_at(self, local_point: Tup) -> Color:
        return Color(local_point.x, local_point.y, local_point.z)


@dataclass(frozen=True)
class StripePattern(Pattern):
    """Alternate between ``a`` and ``b`` on every unit step along x."""

    a: Color
    b: Color

    def pattern_at(self, local_point: Tup) -> Color:
        if abs(math.floor(local_point.x)) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True)
class GradientPattern(Pattern):
    """Blend linearly from ``a`` to ``b`` across each unit interval of x."""

    a: Color
    b: Color

    def pattern_at(self, local_point: Tup) -> Color:
        fraction = local_point.x - math.floor(local_point.x)
        return self.a + (self.b - self.a) * fraction


@dataclass(frozen=True)
class RingPattern(Pattern):
    """Concentric rings around the y axis, alternating every unit of radius."""

    a: Color
    b: Color

    def pattern_at(self, local_point: Tup) -> Color:
        distance = math.sqrt(local_point.x * local_point.x + local_point.z * local_point.z)
        if math.floor(distance) % 2 == 0:
            return self.a
        return self.b


@dataclass(frozen=True)
class CheckersPattern(Pattern):
    """Three-dimensional checkerboard of unit cubes."""

    a: Color
    b: Color

    def pattern_at(self, local_point: Tup) -> Color:
        lattice = (
            abs(math.floor(local_point.x))
            + abs(math.floor(local_point.y))
            + abs(math.floor(local_point.z))
        )
        if lattice % 2 == 0:
            return self.a
        return self.b
