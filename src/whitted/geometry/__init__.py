"""Geometry module for shape primitives.

Components:
    shape: Abstract base class with transform/material handling and the
        world-space to object-space intersect/normal round trip
    sphere: Unit sphere primitive with quadratic ray-sphere intersection
    plane: Infinite x-z plane primitive

Objects are tested linearly by the world; there is no acceleration
structure.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
]
