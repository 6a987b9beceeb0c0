"""Core geometry module.

This module contains the algebra every other part of the renderer builds on:

Components:
    tup: Homogeneous (x, y, z, w) tuples for points and vectors
    matrix: Immutable 4x4 matrices with cofactor-based inversion
    transforms: Translation, scaling, rotation, shearing and view transforms
    ray: Ray data structure with position and transform

Everything here is plain Python values; nothing holds global state.
"""

from .matrix import Mat4
from .ray import Ray
from .transforms import (
    reflect_x,
    reflect_y,
    reflect_z,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tup import EPSILON, Tup, nearly_eq, point, vector

__all__ = [
    "EPSILON",
    "Tup",
    "point",
    "vector",
    "nearly_eq",
    "Mat4",
    "Ray",
    "translation",
    "scaling",
    "reflect_x",
    "reflect_y",
    "reflect_z",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
]
