"""Affine-geometry kernel of the ray tracer.

This package provides the geometric quantities a ray-based renderer is built
on, with support for:
- Point / Vector algebra on homogeneous coordinates
- Dense matrices with cofactor-expansion determinant and inverse
- Translation, scaling, rotation and shearing transforms with fluent chaining
- Rays and analytic ray-sphere intersection (scalar and Taichi batch)

Subpackages:
    core: Float comparison, tuples, matrices, rays and intersection records
    geometry: Shape primitives and intersection algorithms
"""

__version__ = "0.1.0"
