"""Core geometry module.

This module contains the affine-geometry building blocks of the renderer:

Components:
    roughly: Tolerance-based float comparison (EPSILON = 1e-5)
    errors: Exception taxonomy for shape, index and singularity failures
    tuples: Homogeneous Point / Vector / Tuple algebra
    matrix: Dense matrices, cofactor inversion and affine transformations
    intersection: Intersection records and nearest-hit selection
    ray: Ray data structure and parametric position

Everything here is a pure value type: no shared mutable state, no I/O.
"""

from .errors import (
    DegenerateVectorError,
    DimensionMismatchError,
    KernelError,
    OutOfRangeError,
    ShapeMismatchError,
    SingularMatrixError,
)
from .intersection import Intersection, hit, intersections
from .matrix import Matrix, chain
from .ray import Ray
from .roughly import EPSILON, all_roughly_equal, roughly_equal
from .tuples import Point, Tuple, Vector, point, vector

__all__ = [
    # Comparison
    "EPSILON",
    "roughly_equal",
    "all_roughly_equal",
    # Errors
    "KernelError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "OutOfRangeError",
    "SingularMatrixError",
    "DegenerateVectorError",
    # Tuples
    "Tuple",
    "Point",
    "Vector",
    "point",
    "vector",
    # Matrices
    "Matrix",
    "chain",
    # Rays
    "Ray",
    "Intersection",
    "intersections",
    "hit",
]
