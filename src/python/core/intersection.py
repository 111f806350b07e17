"""Intersection records produced by ray-shape tests.

An Intersection pairs a t-value along a ray with the shape that was hit.
Shapes return every root of their intersection equation, including negative
t-values behind the ray origin; picking the visible one is the caller's job,
for which ``hit`` is provided.

Example:
    >>> from src.python.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = intersections(Intersection(2.0, s), Intersection(-1.0, s))
    >>> hit(xs).t
    2.0
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.python.geometry.shapes import Shape


@dataclass(frozen=True)
class Intersection:
    """A single ray-shape hit.

    Attributes:
        t: Parameter along the ray where the hit occurs; may be negative.
        object: The shape that was intersected.
    """

    t: float
    object: Shape


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersection records in ascending t order."""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection: the lowest non-negative t, if any."""
    visible = [i for i in xs if i.t >= 0.0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)
