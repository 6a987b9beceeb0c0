"""Demo scenes showing off the renderer.

Two scenes are provided, each as a factory returning a ``(World, Camera)``
pair ready for ``camera.render(world)``:

- ``create_floating_spheres_scene``: five matte, slightly reflective
  spheres arranged in a cross, lit from the upper left
- ``create_reflect_refract_scene``: a checkered floor and a back wall with a
  glass sphere holding a red sphere, a solid magenta sphere and a mirror
  sphere, exercising shadows, reflection and nested refraction together

Both cameras use a 108 degree field of view and log their progress.

Example:
    >>> from src.whitted.scene.showcase import create_reflect_refract_scene
    >>> world, camera = create_reflect_refract_scene(300, 180)
    >>> canvas = camera.render(world)
"""

import math

from src.whitted.camera.camera import Camera
from src.whitted.core.transforms import rotation_x, scaling, translation, view_transform
from src.whitted.core.tup import point, vector
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.color import BLUE, CYAN, GREEN, MAGENTA, OLIVE, RED, WHITE, Color
from src.whitted.materials.light import Light, point_light
from src.whitted.materials.material import GLASS_INDEX, Material
from src.whitted.materials.pattern import CheckersPattern
from src.whitted.scene.world import World

# =============================================================================
# Shared Parameters
# =============================================================================

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 180
FIELD_OF_VIEW = math.pi / 2.0 * 1.2

EGGSHELL_WHITE = Color.from_hex(0xF0EAD6)
MIRROR_BLACK = Color.from_hex(0x101010)


def _light_source() -> Light:
    return point_light(point(-10.0, 10.0, -10.0), WHITE)


def _camera(width: int, height: int, from_point, to_point) -> Camera:
    transform = view_transform(from_point, to_point, vector(0.0, 1.0, 0.0))
    return Camera(width, height, FIELD_OF_VIEW, transform).with_progress_logging()


# =============================================================================
# Floating Spheres
# =============================================================================


def _floating_sphere(x: float, y: float, z: float, color: Color) -> Sphere:
    radius = 0.55
    material = Material(
        color=color,
        ambient=0.2,
        diffuse=0.7,
        specular=0.3,
        reflective=0.2,
    )
    return Sphere(translation(x, y, z) @ scaling(radius, radius, radius), material)


def create_floating_spheres_scene(
    width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
) -> tuple[World, Camera]:
    """Create five colored spheres floating in a cross.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    world = World(_light_source()).with_objects(
        [
            _floating_sphere(0.0, 0.0, 0.0, RED),
            _floating_sphere(-2.5, 0.0, 2.5, BLUE),
            _floating_sphere(2.5, 0.0, 2.0, GREEN),
            _floating_sphere(0.0, -2.5, 0.0, MAGENTA),
            _floating_sphere(0.0, 2.5, 0.0, CYAN),
        ]
    )
    camera = _camera(width, height, point(0.0, -0.8, -5.0), point(0.0, 0.0, 0.0))
    return world, camera


# =============================================================================
# Reflection and Refraction
# =============================================================================


def _floor() -> Plane:
    return Plane(material=Material(pattern=CheckersPattern(OLIVE, EGGSHELL_WHITE)))


def _back_wall() -> Plane:
    return Plane(translation(0.0, 0.0, 2.5) @ rotation_x(math.pi / 2.0))


def _mirror_sphere(x: float, y: float, z: float) -> Sphere:
    material = Material(
        color=MIRROR_BLACK,
        ambient=0.1,
        diffuse=0.01,
        specular=0.8,
        reflective=1.0,
        refractive_index=1.9,
    )
    return Sphere(translation(x, y, z), material)


def _sphere_in_a_sphere(x: float, y: float, z: float, color: Color) -> tuple[Sphere, Sphere]:
    """A clear glass shell around a small opaque core."""
    outer_radius = 1.0
    outer = Sphere(
        translation(x, y, z) @ scaling(outer_radius, outer_radius, outer_radius),
        Material(
            ambient=0.1,
            diffuse=0.1,
            specular=0.3,
            reflective=0.5,
            transparency=1.0,
            refractive_index=GLASS_INDEX,
        ),
    )

    inner_radius = 0.33
    inner = Sphere(
        translation(x, y, z) @ scaling(inner_radius, inner_radius, inner_radius),
        Material(
            color=color,
            ambient=0.3,
            diffuse=0.7,
            specular=0.3,
            reflective=0.1,
        ),
    )
    return outer, inner


def _solid_sphere(x: float, y: float, z: float, color: Color) -> Sphere:
    material = Material(
        color=color,
        ambient=0.3,
        diffuse=0.7,
        specular=0.8,
        reflective=0.1,
    )
    return Sphere(translation(x, y, z), material)


def create_reflect_refract_scene(
    width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT
) -> tuple[World, Camera]:
    """Create a scene mixing mirrors, glass and a checkered floor.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Tuple of (world, camera).
    """
    outer, inner = _sphere_in_a_sphere(0.0, 1.0, 1.0, RED)
    world = World(_light_source()).with_objects(
        [
            _floor(),
            outer,
            inner,
            _solid_sphere(1.5, 1.0, -2.5, MAGENTA),
            _back_wall(),
            _mirror_sphere(-2.0, 1.0, -1.8),
        ]
    )
    camera = _camera(width, height, point(0.0, 3.0, -5.0), point(0.0, 0.0, -1.0))
    return world, camera
