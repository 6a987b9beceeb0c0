"""Materials module for surface appearance.

This module provides everything that decides what color a surface point has:

Components:
    color: RGB color arithmetic and named color constants
    pattern: Procedural patterns (stripe, gradient, ring, checkers)
    light: Point light source
    material: Phong material with reflection and refraction parameters

Materials and patterns are immutable values; ``with_*`` builders return
modified copies.
"""

from .color import BLACK, BLUE, CYAN, GREEN, MAGENTA, OLIVE, RED, WHITE, YELLOW, Color
from .light import Light, point_light
from .material import GLASS_INDEX, VACUUM_INDEX, Material
from .pattern import (
    CheckersPattern,
    CoordinatePattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "CYAN",
    "MAGENTA",
    "YELLOW",
    "OLIVE",
    "Light",
    "point_light",
    "Material",
    "VACUUM_INDEX",
    "GLASS_INDEX",
    "Pattern",
    "CoordinatePattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
]
