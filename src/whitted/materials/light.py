"""Point light source."""

from dataclasses import dataclass

from src.whitted.core.tup import Tup
from src.whitted.materials.color import Color


@dataclass(frozen=True)
class Light:
    """A point light with no size.

    Attributes:
        position: Location of the light (a point).
        intensity: Color and brightness of the emitted light.
    """

    position: Tup
    intensity: Color


def point_light(position: Tup, intensity: Color) -> Light:
    return Light(position=position, intensity=intensity)
