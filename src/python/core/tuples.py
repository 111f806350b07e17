"""Homogeneous 4-component tuples: points, vectors and raw tuples.

A homogeneous tuple carries (x, y, z, w). The w component tells points
(w=1, moved by translation) apart from vectors (w=0, unaffected by
translation). Point and Vector are separate types exposing only the
operations that make sense for them:

    Point  - Point  -> Vector
    Point  +/- Vector -> Point
    Vector +/- Vector -> Vector
    Vector * scalar, Vector / scalar, -Vector -> Vector

Anything else (adding two points, scaling a point) raises ``TypeError``.
``Tuple`` is the untyped representation with the full arithmetic set, used
when a value is neither a point nor a vector.

All types are immutable and compare component-wise with ``roughly_equal``.
They are deliberately unhashable because tolerance equality is not
transitive.

Example:
    >>> p = point(3.0, 2.0, 1.0)
    >>> v = vector(5.0, 6.0, 7.0)
    >>> p - v
    Point(x=-2.0, y=-4.0, z=-6.0)
    >>> point(3.0, 2.0, 1.0) - point(5.0, 6.0, 7.0)
    Vector(x=-2.0, y=-4.0, z=-6.0)
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.python.core.errors import DegenerateVectorError, ShapeMismatchError
from src.python.core.roughly import roughly_equal

if TYPE_CHECKING:
    from src.python.core.matrix import Matrix


# =============================================================================
# Shared representation
# =============================================================================


@dataclass(frozen=True, eq=False)
class _Homogeneous:
    """Storage and equality shared by Tuple, Point and Vector."""

    x: float
    y: float
    z: float
    w: float

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Homogeneous):
            return NotImplemented
        return all(roughly_equal(a, b) for a, b in zip(self, other))

    def as_tuple(self) -> Tuple:
        """Drop the point/vector typing and return the raw Tuple."""
        return Tuple(self.x, self.y, self.z, self.w)


def _add(a: _Homogeneous, b: _Homogeneous) -> tuple[float, float, float, float]:
    return (a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)


def _sub(a: _Homogeneous, b: _Homogeneous) -> tuple[float, float, float, float]:
    return (a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)


def _scale(a: _Homogeneous, s: float) -> tuple[float, float, float, float]:
    return (a.x * s, a.y * s, a.z * s, a.w * s)


def _dot(a: _Homogeneous, b: _Homogeneous) -> float:
    # All four components take part; for two vectors w*w is 0.
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def _cross(a: _Homogeneous, b: _Homogeneous) -> Vector:
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def _magnitude(a: _Homogeneous) -> float:
    return math.sqrt(_dot(a, a))


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


# =============================================================================
# Raw tuple
# =============================================================================


@dataclass(frozen=True, eq=False)
class Tuple(_Homogeneous):
    """Untyped homogeneous tuple supporting the full arithmetic set.

    The w component is carried through every operation unchanged by any
    point/vector rule, so ``Tuple`` is the escape hatch for values such as
    the raw output of a projective matrix.
    """

    def is_point(self) -> bool:
        return roughly_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        return roughly_equal(self.w, 0.0)

    def __add__(self, other: object) -> Tuple:
        if not isinstance(other, _Homogeneous):
            return NotImplemented
        return Tuple(*_add(self, other))

    __radd__ = __add__

    def __sub__(self, other: object) -> Tuple:
        if not isinstance(other, _Homogeneous):
            return NotImplemented
        return Tuple(*_sub(self, other))

    def __rsub__(self, other: object) -> Tuple:
        if not isinstance(other, _Homogeneous):
            return NotImplemented
        return Tuple(*_sub(other, self))

    def __mul__(self, scalar: object) -> Tuple:
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(*_scale(self, scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Tuple:
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(*_scale(self, 1.0 / scalar))

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def magnitude(self) -> float:
        return _magnitude(self)

    def normalize(self) -> Tuple:
        length = _magnitude(self)
        if length == 0.0:
            raise DegenerateVectorError(f"Cannot normalize zero-magnitude tuple {self!r}")
        return self / length

    def dot(self, other: _Homogeneous) -> float:
        return _dot(self, other)

    def cross(self, other: _Homogeneous) -> Vector:
        """3D cross product; only meaningful when both w components are 0."""
        return _cross(self, other)

    @classmethod
    def from_matrix(cls, m: Matrix) -> Tuple:
        """Read a 4x1 column matrix back into a Tuple.

        Raises:
            ShapeMismatchError: If ``m`` is not 4 rows by 1 column.
        """
        if (m.rows, m.cols) != (4, 1):
            raise ShapeMismatchError(
                f"Expected a 4x1 column matrix, got {m.rows}x{m.cols}."
            )
        return cls(*(m.value_at(row, 0) for row in range(4)))


# =============================================================================
# Typed tuples
# =============================================================================


@dataclass(frozen=True, eq=False)
class Point(_Homogeneous):
    """A position in space (w=1)."""

    w: float = field(default=1.0, init=False, repr=False)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(*_add(self, other)[:3])

    __radd__ = __add__

    def __sub__(self, other: object) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(*_sub(self, other)[:3])
        if isinstance(other, Vector):
            return Point(*_sub(self, other)[:3])
        return NotImplemented

    @classmethod
    def from_tuple(cls, t: _Homogeneous) -> Point:
        """Re-type a raw tuple as a Point.

        Raises:
            ValueError: If the w component is not (roughly) 1.
        """
        if not roughly_equal(t.w, 1.0):
            raise ValueError(f"Tuple with w={t.w} is not a point.")
        return cls(t.x, t.y, t.z)


@dataclass(frozen=True, eq=False)
class Vector(_Homogeneous):
    """A direction and length (w=0)."""

    w: float = field(default=0.0, init=False, repr=False)

    def __add__(self, other: object) -> Point | Vector:
        if isinstance(other, Vector):
            return Vector(*_add(self, other)[:3])
        if isinstance(other, Point):
            return Point(*_add(self, other)[:3])
        return NotImplemented

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*_sub(self, other)[:3])

    def __mul__(self, scalar: object) -> Vector:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector(*_scale(self, scalar)[:3])

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Euclidean length; never negative, 0 only for the zero vector."""
        return _magnitude(self)

    def normalize(self) -> Vector:
        """Return the unit vector pointing the same way.

        Raises:
            DegenerateVectorError: If the vector has zero magnitude.
        """
        length = _magnitude(self)
        if length == 0.0:
            raise DegenerateVectorError(f"Cannot normalize zero vector {self!r}")
        return self / length

    def dot(self, other: Vector) -> float:
        return _dot(self, other)

    def cross(self, other: Vector) -> Vector:
        """Right-handed cross product; ``a.cross(b) == -b.cross(a)``."""
        return _cross(self, other)

    @classmethod
    def from_tuple(cls, t: _Homogeneous) -> Vector:
        """Re-type a raw tuple as a Vector.

        Raises:
            ValueError: If the w component is not (roughly) 0.
        """
        if not roughly_equal(t.w, 0.0):
            raise ValueError(f"Tuple with w={t.w} is not a vector.")
        return cls(t.x, t.y, t.z)


def point(x: float, y: float, z: float) -> Point:
    """Create a Point (w=1)."""
    return Point(float(x), float(y), float(z))


def vector(x: float, y: float, z: float) -> Vector:
    """Create a Vector (w=0)."""
    return Vector(float(x), float(y), float(z))
