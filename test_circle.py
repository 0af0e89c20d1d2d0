"""
Test Circle
===========

Usage:
    pytest test_circle.py
"""

import math

import numpy as np
import pytest

from cupertino_spatial.geometry import Circle, Point, Rectangle


def test_distance_to_far_rectangle():
    """Nearest rectangle corner (10, 10) is sqrt(200) from the centre."""
    c = Circle.create(0, 0, 5)
    r = Rectangle(10, 10, 20, 20)

    assert c.distance(r) == pytest.approx(math.sqrt(200) - 5)
    assert c.distance(r) == pytest.approx(9.142, abs=1e-3)
    assert not c.intersects(r)


def test_distance_to_overlapping_rectangle():
    """Corner (3, 3) is sqrt(18) < 5 from the centre."""
    c = Circle.create(0, 0, 5)
    r = Rectangle(3, 3, 10, 10)

    assert c.distance(r) == 0
    assert c.intersects(r)
    assert r.intersects(c)


def test_distance_when_centre_inside_rectangle():
    assert Circle.create(5, 5, 1).distance(Rectangle(0, 0, 10, 10)) == 0


def test_mbr_is_cached_and_exact():
    c = Circle.create(1, 2, 3)
    assert c.mbr() == Rectangle(-2, -1, 4, 5)
    assert c.mbr() is c.mbr()


def test_mbr_touches_extremes():
    """The four extreme points of the circle lie on its MBR boundary."""
    c = Circle.create(1, 2, 3)
    box = c.mbr()
    for x, y in ((4, 2), (-2, 2), (1, 5), (1, -1)):
        assert c.intersects(Point(x, y))
        assert box.contains(x, y)
    assert box.x1 == c.x - c.radius
    assert box.y2 == c.y + c.radius


def test_intersects_circle():
    a = Circle.create(0, 0, 1)
    assert a.intersects(Circle.create(2, 0, 1))       # tangent
    assert a.intersects(Circle.create(0.5, 0, 0.1))   # contained
    assert not a.intersects(Circle.create(3, 0, 1))


def test_intersects_point_boundary_inclusive():
    c = Circle.create(0, 0, 5)
    assert c.intersects(Point(3, 4))
    assert Point(3, 4).intersects(c)
    assert not c.intersects(Point(3, 4.01))


def test_zero_radius_circle():
    c = Circle.create(2, 2, 0)
    assert c.mbr().area() == 0
    assert c.intersects(Point(2, 2))
    assert not c.intersects(Point(2, 2.5))
    assert c.distance(Rectangle(0, 0, 2, 2)) == 0


def test_negative_radius_is_not_rejected():
    c = Circle.create(0, 0, -1)
    assert c.radius == -1
    assert c.mbr() == Rectangle(-1, -1, 1, 1)


@pytest.mark.parametrize(
    "rect",
    [
        Rectangle(10, 10, 20, 20),
        Rectangle(3, 3, 10, 10),
        Rectangle(-1, -1, 1, 1),
        Rectangle(5, -1, 6, 1),
        Rectangle(5.01, -1, 6, 1),
        Rectangle(-20, 4, 20, 4),
        Rectangle(-20, 6, 20, 7),
        Rectangle(0, 0, 0, 0),
    ],
)
def test_distance_zero_iff_intersects(rect):
    c = Circle.create(0, 0, 5)
    d = c.distance(rect)

    assert d >= 0
    assert (d == 0) == c.intersects(rect)


def test_equality_and_hash():
    assert Circle.create(1, 2, 3) == Circle(1.0, 2.0, 3.0)
    assert hash(Circle.create(1, 2, 3)) == hash(Circle(1.0, 2.0, 3.0))
    assert Circle.create(1, 2, 3) != Circle.create(1, 2, 4)
    assert len({Circle.create(0, 0, 1), Circle.create(0, 0, 1)}) == 1


def test_repeated_calls_are_identical():
    c = Circle.create(0.3, 0.7, 1.1)
    r = Rectangle(1, 1, 2, 2)
    assert c.distance(r) == c.distance(r)
    assert c.intersects(r) == c.intersects(r)
    assert c.mbr() == c.mbr()


def test_single_precision_circle():
    c = Circle.create(0.1, 0.2, 0.3, double_precision=False)
    assert not c.is_double_precision()
    assert not c.mbr().is_double_precision()
    assert c.radius == float(np.float32(0.3))
    assert Circle.create(0.1, 0.2, 0.3).is_double_precision()
