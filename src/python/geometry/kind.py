"""Tag set for intersectable shapes."""

from enum import IntEnum


class ShapeKind(IntEnum):
    """Enumeration of supported shape kinds.

    Used by ``geometry.shapes.intersect`` to pick the intersection routine
    for a shape. New shapes extend this tag set.
    """

    SPHERE = 0
