"""Unit tests for intersection records and hit selection."""

import pytest

from src.python.core.intersection import Intersection, hit, intersections
from src.python.core.ray import Ray
from src.python.core.tuples import point, vector


class TestIntersectionRecord:
    """Tests for the Intersection value."""

    def test_encapsulation(self, sphere):
        """Test an intersection stores t and the object."""
        i = Intersection(3.5, sphere)
        assert i.t == 3.5
        assert i.object is sphere

    def test_aggregate_sorted(self, sphere):
        """Test intersections() orders records by t."""
        i1 = Intersection(2.0, sphere)
        i2 = Intersection(-1.0, sphere)
        i3 = Intersection(1.0, sphere)
        xs = intersections(i1, i2, i3)
        assert [i.t for i in xs] == [-1.0, 1.0, 2.0]


class TestHit:
    """Tests for nearest visible hit selection."""

    def test_all_positive(self, sphere):
        """Test the lowest t wins when all are positive."""
        i1 = Intersection(1.0, sphere)
        i2 = Intersection(2.0, sphere)
        assert hit(intersections(i2, i1)) is i1

    def test_some_negative(self, sphere):
        """Test negative t-values are skipped."""
        i1 = Intersection(-1.0, sphere)
        i2 = Intersection(1.0, sphere)
        assert hit(intersections(i2, i1)) is i2

    def test_all_negative(self, sphere):
        """Test there is no hit when everything is behind the ray."""
        xs = intersections(Intersection(-2.0, sphere), Intersection(-1.0, sphere))
        assert hit(xs) is None

    def test_empty(self):
        """Test there is no hit without intersections."""
        assert hit([]) is None

    def test_lowest_non_negative(self, sphere):
        """Test the hit is the lowest non-negative t regardless of order."""
        i1 = Intersection(5.0, sphere)
        i2 = Intersection(7.0, sphere)
        i3 = Intersection(-3.0, sphere)
        i4 = Intersection(2.0, sphere)
        assert hit([i1, i2, i3, i4]) is i4

    def test_hit_from_inside_sphere(self, sphere):
        """Test a ray from inside the sphere hits the far side."""
        ray = Ray(point(0, 0, 0), vector(0, 0, 1))
        nearest = hit(ray.intersects(sphere))
        assert nearest.t == 1.0
        assert ray.position(nearest.t) == point(0, 0, 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
