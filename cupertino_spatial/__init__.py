"""
Cupertino Spatial v1.0
======================

Bounded Context: Geometry primitives for an R-tree style spatial index.

The index prunes search branches and chooses node splits through three
questions asked of every shape: what is its bounding rectangle, how far
is it from a rectangle, and does it intersect another shape. This
package answers them for rectangles, points, circles and line segments.

Architecture:

    cupertino_spatial/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shape.py       # ShapeKind, Shape protocol, intersection dispatch
    │   ├── rectangle.py   # Rectangle
    │   ├── point.py       # Point
    │   ├── circle.py      # Circle
    │   ├── line.py        # Line
    │   ├── vector.py      # Vector2D (projection math)
    │   ├── segment.py     # point/segment distance, segment intersection
    │   ├── clipping.py    # rectangle/segment clipping
    │   ├── precision.py   # single/double precision coordinates
    │   └── geometries.py  # factories, mbr(), GeometryFactory
    │
    ├── logging/           # Structured JSON logging
    └── config.py          # GeometryConfig (YAML)

Usage:

    from cupertino_spatial import geometries

    query = geometries.rectangle(0, 0, 10, 10)
    c = geometries.circle(0, 0, 5)
    seg = geometries.line(0, 0, 10, 0)

    c.distance(query)        # 0.0
    c.intersects(seg)        # True
    seg.intersects(c)        # True (same answer both ways)

    # Config-driven factory
    from cupertino_spatial import GeometryFactory, GeometryConfig

    factory = GeometryFactory(GeometryConfig(double_precision=False))
    p = factory.point(1.1, 2.2)
    p.is_double_precision()  # False
"""

from cupertino_spatial.geometry import (
    Shape,
    ShapeKind,
    Rectangle,
    Point,
    Circle,
    Line,
    Vector2D,
    GeometryFactory,
)
from cupertino_spatial.geometry import geometries
from cupertino_spatial.config import GeometryConfig

__all__ = [
    # Geometry
    "Shape",
    "ShapeKind",
    "Rectangle",
    "Point",
    "Circle",
    "Line",
    "Vector2D",
    "geometries",
    # Factory & config
    "GeometryFactory",
    "GeometryConfig",
]

__version__ = "1.0.0"
