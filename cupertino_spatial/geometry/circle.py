"""
Circle Module
=============

Circle given by centre and radius.

Design:
- Immutable (frozen dataclass), structural equality over (x, y, radius)
- MBR computed once in __post_init__ and stored (never recomputed)
- Radius is not validated: 0 is a valid degenerate circle and a negative
  radius is the caller's responsibility
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from cupertino_spatial.geometry.precision import normalize
from cupertino_spatial.geometry.point import Point
from cupertino_spatial.geometry.rectangle import Rectangle
from cupertino_spatial.geometry.shape import Shape, ShapeKind, dispatch_intersects

if TYPE_CHECKING:
    from cupertino_spatial.geometry.line import Line


@dataclass(frozen=True)
class Circle:
    """
    Immutable circle.

    Attributes:
        x, y: Centre
        radius: Radius (expected >= 0)
        double_precision: Precision flag (not part of equality)
    """

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    x: float
    y: float
    radius: float
    double_precision: bool = field(default=True, compare=False)
    _mbr: Rectangle = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Cache the bounding rectangle (using object.__setattr__ for frozen)."""
        # abs() keeps x1 <= x2 for a (tolerated) negative radius
        r = abs(self.radius)
        bounds = normalize(
            (self.x - r, self.y - r, self.x + r, self.y + r), self.double_precision
        )
        object.__setattr__(self, '_mbr', Rectangle(*bounds, self.double_precision))

    @classmethod
    def create(
        cls, x: float, y: float, radius: float, double_precision: bool = True
    ) -> "Circle":
        x, y, radius = normalize((x, y, radius), double_precision)
        return cls(x, y, radius, double_precision)

    def mbr(self) -> Rectangle:
        return self._mbr

    def is_double_precision(self) -> bool:
        return self.double_precision

    def center(self) -> Point:
        return Point(self.x, self.y, self.double_precision)

    def distance(self, r: Rectangle) -> float:
        """
        Distance from the circle to a rectangle.

        Returns:
            max(0, distance(centre, r) - radius); 0 iff the circle
            intersects r
        """
        return max(0.0, self.center().distance(r) - self.radius)

    def intersects(self, other: Shape) -> bool:
        return dispatch_intersects(self, other)

    def intersects_rectangle(self, r: Rectangle) -> bool:
        return self.distance(r) == 0

    def intersects_circle(self, c: "Circle") -> bool:
        # Squared comparison avoids the square root
        total = self.radius + c.radius
        return self.center().distance_squared(c.center()) <= total * total

    def intersects_point(self, p: Point) -> bool:
        return math.sqrt((self.x - p.x) ** 2 + (self.y - p.y) ** 2) <= self.radius

    def intersects_line(self, line: "Line") -> bool:
        return line.intersects_circle(self)
