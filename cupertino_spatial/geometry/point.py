"""
Point Module
============

A 2D point. Its MBR is the zero-area rectangle (x, y, x, y).
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from cupertino_spatial.geometry.precision import normalize
from cupertino_spatial.geometry.rectangle import Rectangle
from cupertino_spatial.geometry.shape import Shape, ShapeKind, dispatch_intersects

if TYPE_CHECKING:
    from cupertino_spatial.geometry.circle import Circle
    from cupertino_spatial.geometry.line import Line


@dataclass(frozen=True)
class Point:
    """Immutable point, structural equality over (x, y)."""

    kind: ClassVar[ShapeKind] = ShapeKind.POINT

    x: float
    y: float
    double_precision: bool = field(default=True, compare=False)

    @classmethod
    def create(cls, x: float, y: float, double_precision: bool = True) -> "Point":
        x, y = normalize((x, y), double_precision)
        return cls(x, y, double_precision)

    def mbr(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.x, self.y, self.double_precision)

    def is_double_precision(self) -> bool:
        return self.double_precision

    def distance(self, r: Rectangle) -> float:
        """Distance to the rectangle, 0 when inside or on the boundary."""
        dx = max(0.0, r.x1 - self.x, self.x - r.x2)
        dy = max(0.0, r.y1 - self.y, self.y - r.y2)
        return math.sqrt(dx * dx + dy * dy)

    def distance_squared(self, p: "Point") -> float:
        dx = self.x - p.x
        dy = self.y - p.y
        return dx * dx + dy * dy

    def distance_to_point(self, p: "Point") -> float:
        return math.sqrt(self.distance_squared(p))

    def intersects(self, other: Shape) -> bool:
        return dispatch_intersects(self, other)

    def intersects_rectangle(self, r: Rectangle) -> bool:
        return r.contains(self.x, self.y)

    def intersects_point(self, p: "Point") -> bool:
        return self.x == p.x and self.y == p.y

    def intersects_circle(self, c: "Circle") -> bool:
        return c.intersects_point(self)

    def intersects_line(self, line: "Line") -> bool:
        return line.intersects_point(self)
