"""
Rectangle / Segment Clipping
============================

Liang-Barsky parametric clipping used to decide whether a segment
touches, crosses or lies inside an axis-aligned rectangle.

Design:
- Boundaries are inclusive (touching counts as intersecting)
- Zero-width and zero-height rectangles are valid (a point's MBR)
- Rectangle corners within PRECISION of the segment count as hits
"""

from cupertino_spatial.geometry.segment import point_segment_distance

PRECISION = 1e-8
"""Distance below which a rectangle corner is considered on the segment."""


def _corner_on_segment(
    rect_x: float, rect_y: float, rect_width: float, rect_height: float,
    x1: float, y1: float, x2: float, y2: float
) -> bool:
    for cx, cy in (
        (rect_x, rect_y),
        (rect_x + rect_width, rect_y),
        (rect_x, rect_y + rect_height),
        (rect_x + rect_width, rect_y + rect_height),
    ):
        if point_segment_distance(x1, y1, x2, y2, cx, cy) < PRECISION:
            return True
    return False


def rectangle_intersects_line(
    rect_x: float, rect_y: float, rect_width: float, rect_height: float,
    x1: float, y1: float, x2: float, y2: float
) -> bool:
    """
    Test whether segment (x1, y1)-(x2, y2) intersects the rectangle.

    Args:
        rect_x, rect_y: Lower-left corner of the rectangle
        rect_width, rect_height: Rectangle size (may be 0)
        x1, y1, x2, y2: Segment endpoints

    Returns:
        True if the segment crosses, touches or lies within the rectangle
    """
    if _corner_on_segment(rect_x, rect_y, rect_width, rect_height, x1, y1, x2, y2):
        return True

    dx = x2 - x1
    dy = y2 - y1
    t_enter = 0.0
    t_exit = 1.0

    # (p, q) per boundary: left, right, bottom, top
    for p, q in (
        (-dx, x1 - rect_x),
        (dx, rect_x + rect_width - x1),
        (-dy, y1 - rect_y),
        (dy, rect_y + rect_height - y1),
    ):
        if p == 0:
            # Parallel to this boundary and outside it
            if q < 0:
                return False
            continue
        t = q / p
        if p < 0:
            if t > t_exit:
                return False
            if t > t_enter:
                t_enter = t
        else:
            if t < t_enter:
                return False
            if t < t_exit:
                t_exit = t

    return True
