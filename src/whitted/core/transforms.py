"""Builders for the affine transforms used to place shapes, patterns and cameras.

Every builder starts from the identity and sets the cells its transform
needs. Rotations follow the right-hand rule and take angles in radians.
Transforms compose right to left: ``translation(...) @ scaling(...)`` scales
first and then translates.
"""

import math

import numpy as np

from src.whitted.core.matrix import Mat4
from src.whitted.core.tup import Tup


def translation(x: float, y: float, z: float) -> Mat4:
    cells = np.identity(4)
    cells[0, 3] = x
    cells[1, 3] = y
    cells[2, 3] = z
    return Mat4(cells)


def scaling(x: float, y: float, z: float) -> Mat4:
    cells = np.identity(4)
    cells[0, 0] = x
    cells[1, 1] = y
    cells[2, 2] = z
    return Mat4(cells)


def reflect_x() -> Mat4:
    """Mirror across the y-z plane (negates x)."""
    return scaling(-1.0, 1.0, 1.0)


def reflect_y() -> Mat4:
    """Mirror across the x-z plane (negates y)."""
    return scaling(1.0, -1.0, 1.0)


def reflect_z() -> Mat4:
    """Mirror across the x-y plane (negates z)."""
    return scaling(1.0, 1.0, -1.0)


def rotation_x(radians: float) -> Mat4:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    cells = np.identity(4)
    cells[1, 1] = cos_r
    cells[1, 2] = -sin_r
    cells[2, 1] = sin_r
    cells[2, 2] = cos_r
    return Mat4(cells)


def rotation_y(radians: float) -> Mat4:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    cells = np.identity(4)
    cells[0, 0] = cos_r
    cells[0, 2] = sin_r
    cells[2, 0] = -sin_r
    cells[2, 2] = cos_r
    return Mat4(cells)


def rotation_z(radians: float) -> Mat4:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    cells = np.identity(4)
    cells[0, 0] = cos_r
    cells[0, 1] = -sin_r
    cells[1, 0] = sin_r
    cells[1, 1] = cos_r
    return Mat4(cells)


def shearing(
    x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float
) -> Mat4:
    """Shear each component in proportion to the other two.

    Args:
        x_y: Amount x moves in proportion to y.
        x_z: Amount x moves in proportion to z.
        y_x: Amount y moves in proportion to x.
        y_z: Amount y moves in proportion to z.
        z_x: Amount z moves in proportion to x.
        z_y: Amount z moves in proportion to y.

    Returns:
        The shearing matrix.
    """
    cells = np.identity(4)
    cells[0, 1] = x_y
    cells[0, 2] = x_z
    cells[1, 0] = y_x
    cells[1, 2] = y_z
    cells[2, 0] = z_x
    cells[2, 1] = z_y
    return Mat4(cells)


def view_transform(from_point: Tup, to_point: Tup, up: Tup) -> Mat4:
    """Build the world-to-camera transform for an eye looking at a target.

    The camera sits at ``from_point`` looking toward ``to_point``; ``up`` only
    needs to be roughly perpendicular to the line of sight. The orientation
    is built from an orthonormal basis and then composed with a translation
    that moves the eye to the origin.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction.

    Returns:
        The view transform, suitable for ``Camera.with_transform``.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Mat4(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
