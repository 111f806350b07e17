"""Ray data structure.

A ray is an origin Point plus a direction Vector. Points along it are found
with ``position(t)``; t may be any real number, negative values lying behind
the origin.

Example:
    >>> from src.python.core.tuples import point, vector
    >>> ray = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5) == point(4.5, 3.0, 4.0)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.python.core.tuples import Point, Vector

if TYPE_CHECKING:
    from src.python.core.intersection import Intersection
    from src.python.core.matrix import Matrix
    from src.python.geometry.shapes import Shape


@dataclass(frozen=True)
class Ray:
    """An immutable ray.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of travel. Not required to be normalized;
            t-values are measured in multiples of its length.
    """

    origin: Point
    direction: Vector

    def __post_init__(self) -> None:
        if not isinstance(self.origin, Point):
            raise TypeError(f"Ray origin must be a Point, got {type(self.origin).__name__}.")
        if not isinstance(self.direction, Vector):
            raise TypeError(
                f"Ray direction must be a Vector, got {type(self.direction).__name__}."
            )

    def position(self, t: float) -> Point:
        """Compute the point ``origin + direction * t``."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return the ray with origin and direction multiplied by ``matrix``."""
        return Ray(matrix * self.origin, matrix * self.direction)

    def intersects(self, shape: Shape) -> list[Intersection]:
        """Intersect this ray with a shape, ascending by t."""
        # Imported here to avoid circular imports (geometry depends on core)
        from src.python.geometry.shapes import intersect

        return intersect(shape, self)
