"""Intersection records and precomputed shading state.

This module provides:
- ``Intersection``: a ``t`` value along a ray plus the shape that was hit
- ``Intersections``: a collection kept sorted by ``t`` with the ``hit`` rule
- ``Computations``: everything the world needs to shade one hit, derived
  once from the ray and the full list of intersections along it

The refractive indices on either side of a hit (``n1`` entering from,
``n2`` entering into) cannot be read off the hit shape alone when
transparent solids are nested or overlap. They are found by walking every
intersection along the ray in order while maintaining a containment stack
of the shapes the ray is currently inside:

    for each intersection i (ascending t):
        if i is the hit: n1 = index of the top of the stack (1.0 if empty)
        if i.shape is on the stack: remove it (leaving)
        else: push it (entering)
        if i is the hit: n2 = index of the top of the stack (1.0 if empty); stop

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tup import point, vector
    >>> from src.whitted.geometry.sphere import Sphere
    >>> ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    >>> xs = Sphere.glass().intersect(ray)
    >>> comps = xs.hit().prepare_computations(ray, xs)
    >>> comps.n1, comps.n2
    (1.0, 1.5)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.ray import Ray
from src.whitted.core.tup import EPSILON, Tup
from src.whitted.materials.material import VACUUM_INDEX

if TYPE_CHECKING:
    from src.whitted.geometry.shape import Shape


def _sort_key(intersection: Intersection) -> tuple[bool, float]:
    # NaN compares false against everything, which would leave sorted() with
    # an arbitrary order. Push NaN entries to the end instead.
    t = intersection.t
    return (math.isnan(t), 0.0 if math.isnan(t) else t)


@dataclass(frozen=True, eq=False)
class Intersection:
    """A ray-shape intersection.

    Attributes:
        t: Signed distance along the ray, in units of the ray's direction.
        shape: The shape that was intersected.
    """

    t: float
    shape: Shape

    def prepare_computations(
        self, ray: Ray, xs: Intersections | None = None
    ) -> Computations:
        """Precompute the shading state for this intersection.

        Args:
            ray: The ray that produced this intersection.
            xs: Every intersection along the ray, sorted by ``t``. Required
                to resolve refractive indices through nested transparent
                shapes; defaults to just this intersection.

        Returns:
            The Computations snapshot for this hit.
        """
        if xs is None:
            xs = Intersections([self])

        point = ray.position(self.t)
        eyev = -ray.direction
        normalv = self.shape.normal_at(point)
        inside = normalv.dot(eyev) < 0.0
        if inside:
            normalv = -normalv

        n1, n2 = self._refractive_indices(xs)

        return Computations(
            t=self.t,
            shape=self.shape,
            point=point,
            eyev=eyev,
            normalv=normalv,
            inside=inside,
            over_point=point + normalv * EPSILON,
            under_point=point - normalv * EPSILON,
            reflectv=ray.direction.reflect(normalv),
            n1=n1,
            n2=n2,
        )

    def _refractive_indices(self, xs: Intersections) -> tuple[float, float]:
        containers: list[Shape] = []
        n1 = n2 = VACUUM_INDEX
        for intersection in xs:
            is_hit = intersection is self
            if is_hit and containers:
                n1 = containers[-1].material.refractive_index

            for position, shape in enumerate(containers):
                if shape is intersection.shape:
                    del containers[position]
                    break
            else:
                containers.append(intersection.shape)

            if is_hit:
                if containers:
                    n2 = containers[-1].material.refractive_index
                break
        return n1, n2


class Intersections:
    """An ordered collection of intersections, always sorted by ``t``."""

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items = sorted(intersections, key=_sort_key)

    def append(self, intersection: Intersection) -> None:
        self._items.append(intersection)
        self._items.sort(key=_sort_key)

    def extend(self, intersections: Iterable[Intersection]) -> None:
        self._items.extend(intersections)
        self._items.sort(key=_sort_key)

    def hit(self) -> Intersection | None:
        """Return the visible intersection: the smallest positive ``t``.

        Intersections at or behind the ray origin, and NaN values, never
        qualify. Because the collection is sorted the first qualifying entry
        wins ties.

        Returns:
            The hit, or None if no intersection qualifies.
        """
        for intersection in self._items:
            if intersection.t > 0.0:
                return intersection
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Intersections({[i.t for i in self._items]})"


@dataclass(frozen=True, eq=False)
class Computations:
    """Read-only shading state for a single hit.

    Attributes:
        t: Distance along the ray of the hit.
        shape: The shape that was hit.
        point: World-space hit point.
        eyev: Unit vector from the point back toward the ray origin.
        normalv: Unit surface normal, flipped to face the eye when inside.
        inside: True when the ray hit the surface from inside the shape.
        over_point: ``point`` nudged along the normal, origin for shadow
            and reflection rays.
        under_point: ``point`` nudged against the normal, origin for
            refraction rays.
        reflectv: Direction of the reflected ray.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    shape: Shape
    point: Tup
    eyev: Tup
    normalv: Tup
    inside: bool
    over_point: Tup
    under_point: Tup
    reflectv: Tup
    n1: float
    n2: float

    def schlick(self) -> float:
        """Approximate the Fresnel reflectance at the hit.

        Uses Schlick's approximation. When leaving a denser medium at a
        steep enough angle all light is reflected (total internal
        reflection) and the reflectance is exactly 1.0.

        Returns:
            Fraction of light reflected, in [0, 1].
        """
        cos = self.eyev.dot(self.normalv)
        if self.n1 > self.n2:
            ratio = self.n1 / self.n2
            sin2_t = ratio * ratio * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = math.sqrt(1.0 - sin2_t)

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5
