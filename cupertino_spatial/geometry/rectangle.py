"""
Rectangle Module
================

Axis-aligned rectangle: the bounding shape of every stored object and
the shape of every query window.

Design:
- Immutable (frozen dataclass), structural equality over (x1, y1, x2, y2)
- Fail-fast validation of the x1 <= x2, y1 <= y2 invariant
- NaN coordinates pass validation unchanged
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from cupertino_spatial.geometry.precision import normalize
from cupertino_spatial.geometry.shape import Shape, ShapeKind, dispatch_intersects

if TYPE_CHECKING:
    from cupertino_spatial.geometry.circle import Circle
    from cupertino_spatial.geometry.line import Line
    from cupertino_spatial.geometry.point import Point


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable axis-aligned rectangle.

    Attributes:
        x1, y1: Lower-left corner
        x2, y2: Upper-right corner
        double_precision: Precision flag (not part of equality)

    Invariants:
        - x1 <= x2
        - y1 <= y2
    """

    kind: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    x1: float
    y1: float
    x2: float
    y2: float
    double_precision: bool = field(default=True, compare=False)

    def __post_init__(self):
        """Validate invariants."""
        if self.x1 > self.x2:
            raise ValueError(f"Rectangle x1 must be <= x2, got x1={self.x1}, x2={self.x2}")
        if self.y1 > self.y2:
            raise ValueError(f"Rectangle y1 must be <= y2, got y1={self.y1}, y2={self.y2}")

    @classmethod
    def create(
        cls, x1: float, y1: float, x2: float, y2: float, double_precision: bool = True
    ) -> "Rectangle":
        x1, y1, x2, y2 = normalize((x1, y1, x2, y2), double_precision)
        return cls(x1, y1, x2, y2, double_precision)

    def mbr(self) -> "Rectangle":
        return self

    def is_double_precision(self) -> bool:
        return self.double_precision

    def area(self) -> float:
        return (self.x2 - self.x1) * (self.y2 - self.y1)

    def perimeter(self) -> float:
        return 2 * (self.x2 - self.x1) + 2 * (self.y2 - self.y1)

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) is inside or on the boundary."""
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def add(self, r: "Rectangle") -> "Rectangle":
        """
        Smallest rectangle containing both rectangles.

        The result is double precision unless both inputs are single.
        """
        return Rectangle(
            min(self.x1, r.x1),
            min(self.y1, r.y1),
            max(self.x2, r.x2),
            max(self.y2, r.y2),
            self.double_precision or r.double_precision,
        )

    def intersection_area(self, r: "Rectangle") -> float:
        """Area of the overlap, 0 when the rectangles are disjoint."""
        if not self.intersects_rectangle(r):
            return 0.0
        width = min(self.x2, r.x2) - max(self.x1, r.x1)
        height = min(self.y2, r.y2) - max(self.y1, r.y1)
        return width * height

    def distance(self, r: "Rectangle") -> float:
        """Euclidean gap between the rectangles, 0 when they touch or overlap."""
        dx = max(0.0, r.x1 - self.x2, self.x1 - r.x2)
        dy = max(0.0, r.y1 - self.y2, self.y1 - r.y2)
        return math.sqrt(dx * dx + dy * dy)

    def intersects(self, other: Shape) -> bool:
        return dispatch_intersects(self, other)

    def intersects_rectangle(self, r: "Rectangle") -> bool:
        return self.x1 <= r.x2 and r.x1 <= self.x2 and self.y1 <= r.y2 and r.y1 <= self.y2

    def intersects_point(self, p: "Point") -> bool:
        return self.contains(p.x, p.y)

    def intersects_circle(self, c: "Circle") -> bool:
        return c.intersects_rectangle(self)

    def intersects_line(self, line: "Line") -> bool:
        return line.intersects_rectangle(self)
