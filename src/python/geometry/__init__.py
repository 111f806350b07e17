"""Geometry module for shape primitives and intersection algorithms.

This module provides the intersectable shapes of the kernel:

Components:
    kind: ShapeKind tag set used for dispatch
    sphere: Unit sphere with scalar and Taichi batch ray intersection
    shapes: Shape alias and the intersect() dispatch over shape kinds

Ray-object intersection follows the pattern:
    xs = intersect(shape, ray)  # list of Intersection, ascending by t
"""

from .kind import ShapeKind
from .shapes import Shape, intersect
from .sphere import (
    Sphere,
    hit_unit_sphere,
    intersect_sphere,
    intersect_unit_sphere_batch,
    ray_arrays,
)

__all__ = [
    "ShapeKind",
    "Shape",
    "intersect",
    "Sphere",
    "intersect_sphere",
    "hit_unit_sphere",
    "intersect_unit_sphere_batch",
    "ray_arrays",
]
