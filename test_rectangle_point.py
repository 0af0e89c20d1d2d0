"""
Test Rectangle and Point
========================

Usage:
    pytest test_rectangle_point.py
"""

import dataclasses
import math

import numpy as np
import pytest

from cupertino_spatial import geometries
from cupertino_spatial.geometry import Circle, Line, Point, Rectangle, ShapeKind


def test_rectangle_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Rectangle(10, 0, 0, 10)
    with pytest.raises(ValueError):
        Rectangle.create(0, 10, 10, 0)


def test_rectangle_accepts_zero_area():
    r = Rectangle(1, 1, 1, 1)
    assert r.area() == 0
    assert r.contains(1, 1)


def test_rectangle_measures():
    r = Rectangle(0, 0, 4, 3)
    assert r.area() == 12
    assert r.perimeter() == 14
    assert r.mbr() is r
    assert r.kind is ShapeKind.RECTANGLE


def test_rectangle_contains_is_boundary_inclusive():
    r = Rectangle(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(10, 5)
    assert not r.contains(10.5, 5)


def test_rectangle_add():
    assert Rectangle(0, 0, 1, 1).add(Rectangle(5, -2, 6, 0)) == Rectangle(0, -2, 6, 1)


def test_rectangle_intersection_area():
    a = Rectangle(0, 0, 10, 10)
    assert a.intersection_area(Rectangle(5, 5, 20, 20)) == 25
    assert a.intersection_area(Rectangle(10, 0, 20, 10)) == 0
    assert a.intersection_area(Rectangle(11, 0, 20, 10)) == 0


def test_rectangle_distance():
    a = Rectangle(0, 0, 1, 1)
    assert a.distance(Rectangle(4, 5, 6, 6)) == pytest.approx(5.0)
    assert a.distance(Rectangle(0.5, 0.5, 3, 3)) == 0
    assert a.distance(Rectangle(1, 0, 2, 1)) == 0


def test_rectangle_intersects_rectangle_touching():
    assert Rectangle(0, 0, 1, 1).intersects(Rectangle(1, 1, 2, 2))
    assert not Rectangle(0, 0, 1, 1).intersects(Rectangle(1.01, 1, 2, 2))


def test_point_mbr_is_zero_area():
    p = Point.create(3, 4)
    assert p.mbr() == Rectangle(3, 4, 3, 4)
    assert p.mbr().area() == 0


def test_point_distance_to_rectangle():
    assert Point(0, 0).distance(Rectangle(3, 4, 5, 5)) == pytest.approx(5.0)
    assert Point(4, 4).distance(Rectangle(3, 4, 5, 5)) == 0
    assert Point(3, 4.5).distance(Rectangle(3, 4, 5, 5)) == 0


def test_point_distance_to_point():
    assert Point(0, 0).distance_squared(Point(3, 4)) == 25
    assert Point(0, 0).distance_to_point(Point(3, 4)) == 5


def test_point_intersections():
    p = Point(1, 1)
    assert p.intersects(Point(1, 1))
    assert not p.intersects(Point(1, 2))
    assert p.intersects(Rectangle(0, 0, 1, 1))
    assert Rectangle(0, 0, 1, 1).intersects(p)
    assert not p.intersects(Rectangle(2, 2, 3, 3))


def test_structural_equality_and_hash():
    """Equal coordinates mean equal values, regardless of identity."""
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2
    assert Rectangle(0, 0, 1, 1) == Rectangle.create(0, 0, 1, 1)
    assert hash(Rectangle(0, 0, 1, 1)) == hash(Rectangle.create(0, 0, 1, 1))
    assert Point(0, 0) != Rectangle(0, 0, 0, 0)


def test_precision_flag_not_part_of_equality():
    assert Point(1.0, 2.0, double_precision=False) == Point(1.0, 2.0)


def test_shapes_are_immutable():
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5


def test_single_precision_rounds_coordinates():
    p = Point.create(0.1, 0.2, double_precision=False)
    assert not p.is_double_precision()
    assert p.x == float(np.float32(0.1))
    assert p.x != 0.1
    assert not p.mbr().is_double_precision()
    assert Point.create(0.1, 0.2).is_double_precision()


def test_intersects_rejects_unknown_objects():
    with pytest.raises(TypeError):
        Point(0, 0).intersects("not a shape")
    with pytest.raises(TypeError):
        Rectangle(0, 0, 1, 1).intersects((0, 0))


def test_mbr_of_collection():
    shapes = [
        Point(10, 10),
        Circle.create(0, 0, 1),
        Line.create(2, 5, 4, -3),
    ]
    assert geometries.mbr(shapes) == Rectangle(-1, -3, 10, 10)


def test_mbr_of_empty_collection():
    with pytest.raises(ValueError):
        geometries.mbr([])


def test_non_finite_coordinates_propagate():
    """NaN is out of contract: no exception, comparisons come out False."""
    p = Point(float("nan"), 0)
    assert not p.intersects(Rectangle(0, 0, 1, 1))
    assert not p.intersects(Point(float("nan"), 0))
    assert math.isnan(p.distance_squared(Point(0, 0)))
