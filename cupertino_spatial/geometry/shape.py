"""
Shape Contract
==============

The closed set of shapes understood by the spatial index and the
capability set every one of them exposes.

Design:
- ShapeKind enumerates the variants (no open-ended subclassing)
- Pairwise tests live on each shape as intersects_<kind>()
- dispatch_intersects() routes intersects(other) through a fixed table
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cupertino_spatial.geometry.rectangle import Rectangle


class ShapeKind(str, Enum):
    """Supported shape variants."""

    RECTANGLE = "rectangle"
    POINT = "point"
    CIRCLE = "circle"
    LINE = "line"


class Shape(Protocol):
    """Capability set consumed by the spatial index."""

    kind: ShapeKind

    def mbr(self) -> "Rectangle":
        """Minimum bounding rectangle."""
        ...

    def distance(self, r: "Rectangle") -> float:
        """Euclidean distance to a rectangle, 0 when they intersect."""
        ...

    def intersects(self, other: "Shape") -> bool:
        """True if the shapes share at least one point."""
        ...

    def is_double_precision(self) -> bool:
        """True if coordinates are stored at double precision."""
        ...


_INTERSECTS_METHOD = {
    ShapeKind.RECTANGLE: "intersects_rectangle",
    ShapeKind.POINT: "intersects_point",
    ShapeKind.CIRCLE: "intersects_circle",
    ShapeKind.LINE: "intersects_line",
}


def dispatch_intersects(shape: Shape, other: Shape) -> bool:
    """
    Route shape.intersects(other) to the pairwise test for other's kind.

    Raises:
        TypeError: If other is not one of the supported shapes
    """
    method = _INTERSECTS_METHOD.get(getattr(other, "kind", None))
    if method is None:
        raise TypeError(
            f"Unsupported shape for intersection: {type(other).__name__}"
        )
    return getattr(shape, method)(other)
