"""
Geometry Layer
==============

Bounded Context: Shapes stored in and queried against the spatial index.

Responsibilities:
- Shape representation (immutable)
- Bounding rectangles (MBR)
- Shape-to-rectangle distance
- Pairwise intersection over the closed set of shapes
- NO tree structure, NO storage, NO traversal

Design Philosophy:
- Pure functions of receiver and argument
- Immutable data structures with structural equality
- Degenerate input is a value, not an error
"""

from cupertino_spatial.geometry.shape import Shape, ShapeKind
from cupertino_spatial.geometry.rectangle import Rectangle
from cupertino_spatial.geometry.point import Point
from cupertino_spatial.geometry.circle import Circle
from cupertino_spatial.geometry.line import Line
from cupertino_spatial.geometry.vector import Vector2D
from cupertino_spatial.geometry.geometries import GeometryFactory

__all__ = [
    "Shape",
    "ShapeKind",
    "Rectangle",
    "Point",
    "Circle",
    "Line",
    "Vector2D",
    "GeometryFactory",
]
