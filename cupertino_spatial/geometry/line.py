"""
Line Module
===========

Line segment between two endpoints. A line whose endpoints coincide is
a valid degenerate value and behaves like a point.

Design:
- Immutable (frozen dataclass), structural equality over (x1, y1, x2, y2)
- MBR recomputed per call
- Segment math delegated to segment / clipping / vector helpers
"""

from dataclasses import dataclass, field
from typing import ClassVar

from cupertino_spatial.geometry.circle import Circle
from cupertino_spatial.geometry.clipping import rectangle_intersects_line
from cupertino_spatial.geometry.point import Point
from cupertino_spatial.geometry.precision import normalize
from cupertino_spatial.geometry.rectangle import Rectangle
from cupertino_spatial.geometry.segment import segment_distance, segments_intersect
from cupertino_spatial.geometry.shape import Shape, ShapeKind, dispatch_intersects
from cupertino_spatial.geometry.vector import Vector2D


@dataclass(frozen=True)
class Line:
    """
    Immutable line segment.

    Attributes:
        x1, y1: First endpoint
        x2, y2: Second endpoint
        double_precision: Precision flag (not part of equality)
    """

    kind: ClassVar[ShapeKind] = ShapeKind.LINE

    x1: float
    y1: float
    x2: float
    y2: float
    double_precision: bool = field(default=True, compare=False)

    @classmethod
    def create(
        cls, x1: float, y1: float, x2: float, y2: float, double_precision: bool = True
    ) -> "Line":
        x1, y1, x2, y2 = normalize((x1, y1, x2, y2), double_precision)
        return cls(x1, y1, x2, y2, double_precision)

    def mbr(self) -> Rectangle:
        return Rectangle(
            min(self.x1, self.x2),
            min(self.y1, self.y2),
            max(self.x1, self.x2),
            max(self.y1, self.y2),
            self.double_precision,
        )

    def is_double_precision(self) -> bool:
        return self.double_precision

    def is_degenerate(self) -> bool:
        """True if both endpoints coincide."""
        return self.x1 == self.x2 and self.y1 == self.y2

    def distance(self, r: Rectangle) -> float:
        """
        Distance from the segment to a rectangle.

        0 when an endpoint lies inside or on r. Otherwise the minimum
        segment-to-segment distance to the four edges of r, stopping at
        the first edge at distance 0.
        """
        if r.contains(self.x1, self.y1) or r.contains(self.x2, self.y2):
            return 0.0

        this = (self.x1, self.y1, self.x2, self.y2)
        best = None
        for edge in (
            (r.x1, r.y1, r.x1, r.y2),  # left
            (r.x1, r.y2, r.x2, r.y2),  # top
            (r.x2, r.y2, r.x2, r.y1),  # right
            (r.x2, r.y1, r.x1, r.y1),  # bottom
        ):
            d = segment_distance(this, edge)
            if d == 0:
                return 0.0
            if best is None or d < best:
                best = d
        return best

    def intersects(self, other: Shape) -> bool:
        return dispatch_intersects(self, other)

    def intersects_rectangle(self, r: Rectangle) -> bool:
        return rectangle_intersects_line(
            r.x1, r.y1, r.x2 - r.x1, r.y2 - r.y1,
            self.x1, self.y1, self.x2, self.y2,
        )

    def intersects_line(self, line: "Line") -> bool:
        return segments_intersect(
            line.x1, line.y1, line.x2, line.y2,
            self.x1, self.y1, self.x2, self.y2,
        )

    def intersects_point(self, p: Point) -> bool:
        # Approximate: goes through the clipping tolerance of the point's MBR
        return self.intersects_rectangle(p.mbr())

    def intersects_circle(self, circle: Circle) -> bool:
        """
        Vector projection test.

        The centre c is projected onto the segment a->b. When the
        projection falls on the segment the perpendicular distance decides,
        otherwise the nearer endpoint does.
        """
        c = Vector2D.create(circle.x, circle.y)
        a = Vector2D.create(self.x1, self.y1)
        c_minus_a = c.minus(a)
        radius_squared = circle.radius * circle.radius
        if self.is_degenerate():
            return c_minus_a.modulus_squared() <= radius_squared

        b = Vector2D.create(self.x2, self.y2)
        b_minus_a = b.minus(a)
        b_minus_a_modulus = b_minus_a.modulus()
        # Projection length of c - a along b - a
        lam = c_minus_a.dot(b_minus_a) / b_minus_a_modulus
        if 0 <= lam <= b_minus_a_modulus:
            d_minus_a = b_minus_a.times(lam / b_minus_a_modulus)
            # Pythagoras: squared distance from c to the line
            return c_minus_a.modulus_squared() - d_minus_a.modulus_squared() <= radius_squared
        return (
            c_minus_a.modulus_squared() <= radius_squared
            or c.minus(b).modulus_squared() <= radius_squared
        )
