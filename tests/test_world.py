"""Unit tests for the world and recursive shading.

Tests cover:
- World construction and fluent builders
- Ray-world intersection
- Shading hits from outside and inside, color_at
- Shadows
- Reflection, including the bounce budget and facing mirrors
- Refraction, including total internal reflection
"""

import math

import pytest

from src.whitted.core.ray import Ray
from src.whitted.core.transforms import scaling, translation
from src.whitted.core.tup import point, vector
from src.whitted.geometry.plane import Plane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.color import BLACK, RED, WHITE, Color
from src.whitted.materials.light import Light, point_light
from src.whitted.materials.material import Material
from src.whitted.materials.pattern import CoordinatePattern
from src.whitted.scene.intersection import Intersection, Intersections
from src.whitted.scene.world import MAX_BOUNCES, World

HALF_ROOT2 = math.sqrt(2) / 2


def _reflective_floor() -> Plane:
    return Plane(translation(0, -1, 0), Material(reflective=0.5))


class TestWorldConstruction:
    """Tests for building worlds."""

    def test_empty_world(self):
        """Test a new world has no objects and a black light at the origin."""
        w = World()
        assert len(w) == 0
        assert w.light == Light(point(0, 0, 0), BLACK)

    def test_default_world(self, default_world):
        """Test the shared fixture world."""
        assert default_world.light == point_light(point(-10, 10, -10), WHITE)
        assert len(default_world) == 2
        assert default_world[0].material.color == Color(0.8, 1.0, 0.6)
        assert default_world[1].transform == scaling(0.5, 0.5, 0.5)

    def test_builders_return_new_worlds(self):
        """Test with_light/with_object leave the original world unchanged."""
        w = World()
        s = Sphere()
        light = point_light(point(1, 2, 3), WHITE)
        w2 = w.with_light(light).with_object(s)
        assert len(w) == 0
        assert len(w2) == 1
        assert w2[0].transform == s.transform
        assert w2.light == light
        assert w2.objects == (w2[0],)

    def test_world_holds_copies_of_its_shapes(self):
        """Test changing a shape after adding it leaves the world unchanged."""
        s = Sphere()
        w = World(point_light(point(-10, 10, -10), WHITE)).with_object(s)
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        before = len(w.intersect(r))
        s.transform = translation(0, 100, 0)
        assert w[0] is not s
        assert (before, len(w.intersect(r))) == (2, 2)

    def test_constructor_copies_shapes(self):
        """Test shapes passed to the constructor are copied too."""
        shapes = [Sphere(), Plane()]
        w = World(objects=shapes)
        shapes[0].material = Material(ambient=1.0)
        assert w[0].material == Material()
        assert all(a is not b for a, b in zip(w, shapes))


class TestWorldIntersect:
    """Tests for World.intersect."""

    def test_intersect_world(self, default_world):
        """Test hits from all shapes are merged in order."""
        xs = default_world.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4.0, 4.5, 5.5, 6.0])


class TestShading:
    """Tests for shade_hit and color_at."""

    def test_shade_from_outside(self, default_world, assert_color_close):
        """Test shading an intersection from outside."""
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        i = Intersection(4, default_world[0])
        comps = i.prepare_computations(r)
        assert_color_close(default_world.shade_hit(comps), 0.38066, 0.47583, 0.2855)

    def test_shade_from_inside(self, default_world, assert_color_close):
        """Test shading an intersection from inside."""
        w = default_world.with_light(point_light(point(0, 0.25, 0), WHITE))
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        i = Intersection(0.5, w[1])
        comps = i.prepare_computations(r)
        assert_color_close(w.shade_hit(comps), 0.90498, 0.90498, 0.90498)

    def test_color_when_ray_misses(self, default_world):
        """Test a miss is black."""
        assert default_world.color_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == BLACK

    def test_color_when_ray_hits(self, default_world, assert_color_close):
        """Test the color of the nearest hit."""
        color = default_world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert_color_close(color, 0.38066, 0.47583, 0.2855)

    def test_color_with_intersection_behind_ray(self, default_world):
        """Test the inner sphere is seen from between the two spheres."""
        bright = Material(ambient=1.0)
        outer = default_world[0].with_material(bright)
        inner = default_world[1].with_material(bright)
        w = World(default_world.light, [outer, inner])
        color = w.color_at(Ray(point(0, 0, 0.75), vector(0, 0, -1)))
        assert color == inner.material.color


class TestShadows:
    """Tests for World.is_shadowed and shadowed shading."""

    @pytest.mark.parametrize(
        "p, expected",
        [
            (point(0, 10, 0), False),
            (point(10, -10, 10), True),
            (point(-20, 20, -20), False),
            (point(-2, 2, -2), False),
        ],
    )
    def test_is_shadowed(self, default_world, p, expected):
        """Test shadowing for points around the default world."""
        assert default_world.is_shadowed(p) is expected

    def test_shade_hit_in_shadow(self, assert_color_close):
        """Test a shadowed hit only receives ambient light."""
        s1 = Sphere()
        s2 = Sphere(translation(0, 0, 10))
        w = World(point_light(point(0, 0, -10), WHITE), [s1, s2])
        r = Ray(point(0, 0, 5), vector(0, 0, 1))
        i = Intersection(4, s2)
        comps = i.prepare_computations(r, Intersections([i]))
        assert_color_close(w.shade_hit(comps), 0.1, 0.1, 0.1)


class TestReflection:
    """Tests for reflected_color."""

    def test_nonreflective_material(self, default_world):
        """Test a non-reflective surface reflects nothing."""
        shape = default_world[1].with_material(Material(ambient=1.0))
        r = Ray(point(0, 0, 0), vector(0, 0, 1))
        comps = Intersection(1, shape).prepare_computations(r)
        assert default_world.reflected_color(comps) == BLACK

    def test_reflective_material(self, default_world, assert_color_close):
        """Test a half-mirror floor reflects the default world."""
        floor = _reflective_floor()
        w = default_world.with_object(floor)
        r = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        comps = Intersection(math.sqrt(2), floor).prepare_computations(r)
        assert_color_close(w.reflected_color(comps), 0.19033, 0.23791, 0.14274)

    def test_shade_hit_includes_reflection(self, default_world, assert_color_close):
        """Test shade_hit adds the reflected color to the surface color."""
        floor = _reflective_floor()
        w = default_world.with_object(floor)
        r = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        comps = Intersection(math.sqrt(2), floor).prepare_computations(r)
        assert_color_close(w.shade_hit(comps), 0.87676, 0.92435, 0.82918)

    def test_mutually_reflective_surfaces_terminate(self):
        """Test two facing mirrors do not recurse forever."""
        lower = Plane(translation(0, -1, 0), Material(reflective=1.0))
        upper = Plane(translation(0, 1, 0), Material(reflective=1.0))
        w = World(point_light(point(0, 0, 0), WHITE), [lower, upper])
        color = w.color_at(Ray(point(0, 0, 0), vector(0, 1, 0)))
        assert color.red > 1.0
        assert color.green > 1.0
        assert color.blue > 1.0

    def test_reflection_at_zero_budget(self, default_world):
        """Test no reflection is traced once the budget is spent."""
        floor = _reflective_floor()
        w = default_world.with_object(floor)
        r = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        comps = Intersection(math.sqrt(2), floor).prepare_computations(r)
        assert w.reflected_color(comps, 0) == BLACK


class TestRefraction:
    """Tests for refracted_color."""

    def test_opaque_surface(self, default_world):
        """Test an opaque surface refracts nothing."""
        shape = default_world[0]
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = xs[0].prepare_computations(r, xs)
        assert default_world.refracted_color(comps, MAX_BOUNCES) == BLACK

    def test_refraction_at_zero_budget(self, default_world):
        """Test no refraction is traced once the budget is spent."""
        shape = default_world[0].with_material(Material(transparency=1.0, refractive_index=1.5))
        r = Ray(point(0, 0, -5), vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = xs[0].prepare_computations(r, xs)
        assert default_world.refracted_color(comps, 0) == BLACK

    def test_total_internal_reflection(self, default_world):
        """Test total internal reflection transmits nothing."""
        shape = default_world[0].with_material(Material(transparency=1.0, refractive_index=1.5))
        r = Ray(point(0, 0, HALF_ROOT2), vector(0, 1, 0))
        xs = Intersections([Intersection(-HALF_ROOT2, shape), Intersection(HALF_ROOT2, shape)])
        comps = xs[1].prepare_computations(r, xs)
        assert default_world.refracted_color(comps, 5) == BLACK

    def test_refracted_ray_color(self, default_world, assert_color_close):
        """Test the color seen along a refracted ray."""
        outer = default_world[0].with_material(
            default_world[0].material.with_ambient(1.0).with_pattern(CoordinatePattern())
        )
        inner = default_world[1].with_material(Material(transparency=1.0, refractive_index=1.5))
        w = World(default_world.light, [outer, inner])
        r = Ray(point(0, 0, 0.1), vector(0, 1, 0))
        xs = Intersections(
            [
                Intersection(-0.9899, outer),
                Intersection(-0.4899, inner),
                Intersection(0.4899, inner),
                Intersection(0.9899, outer),
            ]
        )
        comps = xs[2].prepare_computations(r, xs)
        assert_color_close(w.refracted_color(comps, 5), 0.0, 0.99888, 0.04722)

    def test_shade_hit_with_transparent_floor(self, default_world, assert_color_close):
        """Test shade_hit adds the color seen through a transparent floor."""
        floor = Plane(translation(0, -1, 0), Material(transparency=0.5, refractive_index=1.5))
        ball = Sphere(translation(0, -3.5, -0.5), Material(color=RED, ambient=0.5))
        w = default_world.with_objects([floor, ball])
        r = Ray(point(0, 0, -3), vector(0, -HALF_ROOT2, HALF_ROOT2))
        xs = Intersections([Intersection(math.sqrt(2), floor)])
        comps = xs[0].prepare_computations(r, xs)
        assert_color_close(w.shade_hit(comps, 5), 0.93642, 0.68642, 0.68642)
