"""Closed set of intersectable shapes and the dispatch over them.

Each shape class carries a ``kind`` tag from ShapeKind. ``intersect`` looks the
tag up in a fixed table of intersection routines, so supporting a new shape
means adding a tag, a class and one table entry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Union

from src.python.core.intersection import Intersection
from src.python.geometry.kind import ShapeKind
from src.python.geometry.sphere import Sphere, intersect_sphere

if TYPE_CHECKING:
    from src.python.core.ray import Ray

Shape = Union[Sphere]

_INTERSECTORS: dict[ShapeKind, Callable[..., list[Intersection]]] = {
    ShapeKind.SPHERE: intersect_sphere,
}


def intersect(shape: Shape, ray: Ray) -> list[Intersection]:
    """Intersect ``ray`` with ``shape``, ascending by t.

    Raises:
        TypeError: If ``shape`` is not one of the known shape kinds.
    """
    kind = getattr(shape, "kind", None)
    if kind not in _INTERSECTORS:
        raise TypeError(f"Cannot intersect object of type {type(shape).__name__}.")
    return _INTERSECTORS[kind](shape, ray)
