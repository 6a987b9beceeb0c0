"""Abstract base class shared by every renderable primitive.

A shape owns a transform (object space to world space) and a material.
World-space queries are answered by moving the query into object space,
running the shape's local algorithm there, and moving the answer back:

    intersect(ray)   -> local_intersect(transform^-1 * ray)
    normal_at(point) -> (transform^-1)^T * local_normal_at(transform^-1 * point)

Subclasses only implement ``local_intersect`` and ``local_normal_at`` against
their canonical geometry (unit sphere at the origin, the y=0 plane, ...).

Shapes compare by identity: two unit spheres built separately are different
objects even when all their fields match. The containment stack used for
refraction relies on this.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from src.whitted.core.matrix import Mat4
from src.whitted.core.ray import Ray
from src.whitted.core.tup import Tup, vector
from src.whitted.materials.material import Material
from src.whitted.scene.intersection import Intersections


class Shape(ABC):
    """Base class for primitives with a transform and a material."""

    def __init__(self, transform: Mat4 | None = None, material: Material | None = None) -> None:
        self._transform = transform if transform is not None else Mat4.identity()
        self._material = material if material is not None else Material()

    @property
    def transform(self) -> Mat4:
        """Object-to-world transform. Defaults to the identity."""
        return self._transform

    @transform.setter
    def transform(self, transform: Mat4) -> None:
        self._transform = transform

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, material: Material) -> None:
        self._material = material

    def with_transform(self, transform: Mat4) -> Shape:
        """Return a copy of this shape with a different transform."""
        shape = copy.copy(self)
        shape.transform = transform
        return shape

    def with_material(self, material: Material) -> Shape:
        """Return a copy of this shape with a different material."""
        shape = copy.copy(self)
        shape.material = material
        return shape

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space.

        Returns:
            All intersections, including those behind the ray origin,
            sorted by ``t``. ``t`` values are valid for the world-space ray
            because the object-space ray is not renormalised.
        """
        local_ray = ray.transform(self._transform.inverse())
        return self.local_intersect(local_ray)

    def normal_at(self, world_point: Tup) -> Tup:
        """Compute the unit surface normal at a world-space point.

        The object-space normal is carried back with the inverse transpose
        of the transform so it stays perpendicular to the surface under
        non-uniform scaling. The translation part of the inverse transpose
        pollutes w, so w is reset to 0 before normalising.
        """
        inverse = self._transform.inverse()
        local_normal = self.local_normal_at(inverse @ world_point)
        world_normal = inverse.transpose() @ local_normal
        return vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> Intersections:
        """Intersect a ray that is already in object space."""

    @abstractmethod
    def local_normal_at(self, local_point: Tup) -> Tup:
        """Return the (not necessarily unit) normal at an object-space point."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(transform={self._transform!r}, material={self._material!r})"
