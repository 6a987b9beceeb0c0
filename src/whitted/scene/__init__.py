"""Scene module for intersections and the world.

Components:
    intersection: Intersection records, the sorted ``Intersections``
        collection with its hit rule, and per-hit ``Computations``
    world: Light plus shapes, and the recursive shading loop
        (shadows, reflection, refraction)
    showcase: Ready-made demo scenes (import directly from
        ``src.whitted.scene.showcase``)

World queries walk every shape linearly; a ray's full intersection list is
kept so refraction can resolve which media it passes between.
"""

from .intersection import Computations, Intersection, Intersections
from .world import MAX_BOUNCES, World

# Note: showcase is NOT imported here to avoid circular imports
# (it builds shapes, and geometry depends on this package).

__all__ = [
    # Intersection module
    "Intersection",
    "Intersections",
    "Computations",
    # World module
    "World",
    "MAX_BOUNCES",
]
