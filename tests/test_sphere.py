"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting the unit sphere from outside
- Ray missing the sphere
- Ray tangent to the sphere
- Ray starting inside the sphere
- Sphere behind the ray (negative t)
- Intersecting a transformed sphere via ray transformation
- Shape dispatch
"""

import pytest

from src.python.core.intersection import Intersection
from src.python.core.matrix import Matrix
from src.python.core.ray import Ray
from src.python.core.tuples import point, vector
from src.python.geometry.kind import ShapeKind
from src.python.geometry.shapes import intersect
from src.python.geometry.sphere import Sphere, intersect_sphere


class TestSphereBasics:
    """Tests for the Sphere value."""

    def test_sphere_kind(self):
        """Test a sphere is tagged as a sphere."""
        assert Sphere().kind is ShapeKind.SPHERE

    def test_spheres_compare_by_identity(self):
        """Test distinct spheres are distinct objects."""
        a = Sphere()
        b = Sphere()
        assert a == a
        assert a != b


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_two_points(self, sphere):
        """Test a ray through the center hits twice."""
        xs = Ray(point(0, 0, -5), vector(0, 0, 1)).intersects(sphere)
        assert len(xs) == 2
        assert xs[0].t == 4.0
        assert xs[1].t == 6.0

    def test_tangent(self, sphere):
        """Test a tangent ray gives two equal t-values."""
        xs = Ray(point(0, 1, -5), vector(0, 0, 1)).intersects(sphere)
        assert len(xs) == 2
        assert xs[0].t == 5.0
        assert xs[1].t == 5.0

    def test_miss(self, sphere):
        """Test a ray passing above the sphere misses."""
        xs = Ray(point(0, 2, -5), vector(0, 0, 1)).intersects(sphere)
        assert xs == []

    def test_ray_inside_sphere(self, sphere):
        """Test a ray starting at the center hits behind and ahead."""
        xs = Ray(point(0, 0, 0), vector(0, 0, 1)).intersects(sphere)
        assert [i.t for i in xs] == [-1.0, 1.0]

    def test_sphere_behind_ray(self, sphere):
        """Test negative t-values are reported, not filtered."""
        xs = Ray(point(0, 0, 5), vector(0, 0, 1)).intersects(sphere)
        assert [i.t for i in xs] == [-6.0, -4.0]

    def test_intersect_sets_object(self, sphere):
        """Test each intersection records the sphere that was hit."""
        xs = Ray(point(0, 0, -5), vector(0, 0, 1)).intersects(sphere)
        assert all(i.object is sphere for i in xs)

    def test_ascending_for_reversed_direction(self, sphere):
        """Test t-values stay ascending whatever the direction."""
        xs = Ray(point(0.3, -0.2, 4), vector(-0.1, 0.05, -1)).intersects(sphere)
        assert len(xs) == 2
        assert xs[0].t <= xs[1].t

    def test_unnormalized_direction(self, sphere):
        """Test t-values scale with the direction length."""
        xs = Ray(point(0, 0, -5), vector(0, 0, 2)).intersects(sphere)
        assert [i.t for i in xs] == [2.0, 3.0]

    def test_hit_points_on_surface(self, sphere):
        """Test hit positions lie on the unit sphere."""
        ray = Ray(point(0.2, 0.4, -3), vector(0.1, -0.05, 1))
        for i in ray.intersects(sphere):
            p = ray.position(i.t)
            assert (p - point(0, 0, 0)).magnitude() == pytest.approx(1.0)

    def test_scaled_sphere(self, sphere):
        """Test intersecting a sphere scaled by 2 through the inverse transform."""
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        local = ray.transform(Matrix.scaling(2, 2, 2).inverse())
        xs = local.intersects(sphere)
        assert len(xs) == 2
        assert xs[0].t == pytest.approx(3.0)
        assert xs[1].t == pytest.approx(7.0)

    def test_zero_direction_misses(self, sphere):
        """Test a ray that never moves meets nothing, even from inside."""
        assert Ray(point(0, 0, 0), vector(0, 0, 0)).intersects(sphere) == []
        assert Ray(point(0, 0, -5), vector(0, 0, 0)).intersects(sphere) == []

    def test_collapsed_ray_misses(self, sphere):
        """Test a ray flattened by a zero scaling meets nothing."""
        ray = Ray(point(0, 0, -5), vector(0, 0, 1)).transform(Matrix.scaling(0, 0, 0))
        assert ray.direction == vector(0, 0, 0)
        assert ray.intersects(sphere) == []

    def test_translated_sphere(self, sphere):
        """Test a ray misses a sphere moved out of its path."""
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        local = ray.transform(Matrix.translation(5, 0, 0).inverse())
        assert local.intersects(sphere) == []


class TestShapeDispatch:
    """Tests for intersect() over shape kinds."""

    def test_dispatch_matches_direct_call(self, sphere):
        """Test dispatch and the sphere routine agree."""
        ray = Ray(point(0, 0, -5), vector(0, 0, 1))
        assert intersect(sphere, ray) == intersect_sphere(sphere, ray)
        assert sphere.intersect(ray) == intersect_sphere(sphere, ray)

    def test_returns_intersection_records(self, sphere):
        """Test the dispatch returns Intersection records."""
        xs = intersect(sphere, Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert all(isinstance(i, Intersection) for i in xs)

    def test_unknown_shape_rejected(self):
        """Test objects without a known kind are rejected."""
        with pytest.raises(TypeError):
            intersect(object(), Ray(point(0, 0, -5), vector(0, 0, 1)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
