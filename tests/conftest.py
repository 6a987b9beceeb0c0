"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session, and the default
two-sphere test world most shading tests are written against.
"""

import pytest
import taichi as ti

from src.whitted.core.transforms import scaling
from src.whitted.core.tup import point
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.color import Color
from src.whitted.materials.light import point_light
from src.whitted.materials.material import Material
from src.whitted.scene.world import World

# Tolerance for comparing shaded colors against reference values rounded
# to five decimal places
COLOR_TOLERANCE = 1e-4


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield
    # Note: We don't call ti.reset() here as it can cause issues
    # with subsequent tests if any cleanup happens after


def make_default_world() -> World:
    """Build the standard test world.

    A white light at (-10, 10, -10), an outer unit sphere with a greenish
    matte material and an inner sphere of radius 0.5 with the default
    material, both centred on the origin.
    """
    light = point_light(point(-10, 10, -10), Color(1.0, 1.0, 1.0))
    outer = Sphere(
        material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    )
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    return World(light, [outer, inner])


@pytest.fixture
def default_world() -> World:
    """A fresh copy of the standard two-sphere test world."""
    return make_default_world()


@pytest.fixture
def assert_color_close():
    """Return an assertion helper comparing a Color to expected channels."""

    def _assert(actual: Color, red: float, green: float, blue: float) -> None:
        assert (actual.red, actual.green, actual.blue) == pytest.approx(
            (red, green, blue), abs=COLOR_TOLERANCE
        )

    return _assert
