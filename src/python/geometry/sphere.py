"""Unit sphere primitive with analytic ray-sphere intersection.

The sphere has radius 1 and sits at the origin of its own object space.
Callers place it in a scene by transforming rays into that space (see
``Ray.transform``) before intersecting.

A ray origin + t * direction meets the sphere where

    |origin + t * direction|^2 = 1

which expands to the quadratic a*t^2 + b*t + c = 0 with

    a = dot(direction, direction)
    b = 2 * dot(direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - 1

A negative discriminant means a miss. Otherwise both roots are returned in
ascending order; a tangent ray yields two equal roots. Roots behind the ray
origin (negative t) are kept.

Two entry points are provided:
    intersect_sphere: scalar test of one Ray, returning Intersection records.
    intersect_unit_sphere_batch: the same test over many rays at once,
        evaluated in parallel in a Taichi kernel.

Example:
    >>> from src.python.core.ray import Ray
    >>> from src.python.core.tuples import point, vector
    >>> s = Sphere()
    >>> [i.t for i in intersect_sphere(s, Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [4.0, 6.0]
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from src.python.core.errors import ShapeMismatchError
from src.python.core.intersection import Intersection
from src.python.core.tuples import point
from src.python.geometry.kind import ShapeKind

if TYPE_CHECKING:
    from src.python.core.ray import Ray

logger = logging.getLogger(__name__)

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@dataclass(frozen=True, eq=False)
class Sphere:
    """A unit sphere centered at the origin.

    The sphere carries no state; two spheres are equal only if they are the
    same object, so Intersection records identify which one was hit.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.SPHERE

    def intersect(self, ray: "Ray") -> list[Intersection]:
        return intersect_sphere(self, ray)


def intersect_sphere(sphere: Sphere, ray: "Ray") -> list[Intersection]:
    """Intersect a ray with the unit sphere.

    Args:
        sphere: The sphere being tested; recorded in each Intersection.
        ray: The ray, already in the sphere's object space.

    Returns:
        An empty list on a miss, otherwise two Intersections with t1 <= t2.
        A ray with a zero direction never moves, so it meets nothing.
    """
    sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)

    a = ray.direction.dot(ray.direction)
    if a == 0.0:
        return []
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return [Intersection(t1, sphere), Intersection(t2, sphere)]


# =============================================================================
# Batch intersection (Taichi)
# =============================================================================


@ti.func
def hit_unit_sphere(origin: vec3, direction: vec3):
    """Solve the unit-sphere quadratic for one ray inside a Taichi kernel.

    Returns:
        Tuple of (hit, t1, t2). hit is 1 when the direction is non-zero and the
        discriminant is non-negative; t1 <= t2 are only meaningful in that case.
    """
    a = tm.dot(direction, direction)
    b = 2.0 * tm.dot(direction, origin)
    c = tm.dot(origin, origin) - 1.0
    discriminant = b * b - 4.0 * a * c

    # Taichi requires outer-scope declaration
    did_hit = 0
    t1 = 0.0
    t2 = 0.0

    if a > 0.0 and discriminant >= 0.0:
        sqrt_d = ti.sqrt(discriminant)
        did_hit = 1
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)

    return did_hit, t1, t2


@ti.kernel
def _intersect_unit_sphere_kernel(
    origins: ti.types.ndarray(ndim=2),
    directions: ti.types.ndarray(ndim=2),
    ts: ti.types.ndarray(ndim=2),
    hits: ti.types.ndarray(ndim=1),
):
    for i in range(origins.shape[0]):
        origin = vec3(origins[i, 0], origins[i, 1], origins[i, 2])
        direction = vec3(directions[i, 0], directions[i, 1], directions[i, 2])
        did_hit, t1, t2 = hit_unit_sphere(origin, direction)
        hits[i] = did_hit
        ts[i, 0] = t1
        ts[i, 1] = t2


def ray_arrays(rays: Sequence["Ray"]) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Pack rays into (n, 3) origin and direction arrays."""
    origins = np.array([[r.origin.x, r.origin.y, r.origin.z] for r in rays], dtype=np.float64)
    directions = np.array(
        [[r.direction.x, r.direction.y, r.direction.z] for r in rays], dtype=np.float64
    )
    return origins.reshape(-1, 3), directions.reshape(-1, 3)


def intersect_unit_sphere_batch(
    origins: npt.ArrayLike, directions: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Intersect many rays with the unit sphere in parallel.

    Requires an initialized Taichi runtime (``ti.init``). Results are only
    as precise as the runtime's default float type, so initialize with
    ``default_fp=ti.f64`` to match ``intersect_sphere``.

    Args:
        origins: (n, 3) array of ray origins.
        directions: (n, 3) array of ray directions.

    Returns:
        (n, 2) array of ascending t-values per ray. Rows for rays that miss
        the sphere are NaN.

    Raises:
        ShapeMismatchError: If the arrays are not both (n, 3).
    """
    origins = np.ascontiguousarray(origins, dtype=np.float64)
    directions = np.ascontiguousarray(directions, dtype=np.float64)
    if origins.ndim != 2 or origins.shape[1] != 3:
        raise ShapeMismatchError(f"Expected origins of shape (n, 3), got {origins.shape}.")
    if directions.shape != origins.shape:
        raise ShapeMismatchError(
            f"Directions shape {directions.shape} does not match origins shape {origins.shape}."
        )

    n = origins.shape[0]
    ts = np.zeros((n, 2), dtype=np.float64)
    hits = np.zeros(n, dtype=np.int32)
    if n > 0:
        _intersect_unit_sphere_kernel(origins, directions, ts, hits)

    ts[hits == 0] = np.nan
    logger.debug("Batch-intersected %d rays with the unit sphere, %d hits", n, int(hits.sum()))
    return ts
