"""
Segment Utilities
=================

Distance and intersection tests on finite line segments given as raw
coordinates. Shared by Line and the clipping test.

Design:
- Pure functions, no allocation beyond floats
- Finite segments only (never the infinite line through the endpoints)
- Orientation predicates via cross products
"""

import math
from typing import Tuple

SegmentCoords = Tuple[float, float, float, float]


def point_segment_distance(
    x1: float, y1: float, x2: float, y2: float, px: float, py: float
) -> float:
    """
    Shortest distance from (px, py) to the segment (x1, y1)-(x2, y2).

    The projection parameter is clamped to [0, 1] so the nearest point
    always lies on the segment. A zero-length segment degrades to plain
    point distance.
    """
    dx = x2 - x1
    dy = y2 - y1
    length_squared = dx * dx + dy * dy
    if length_squared == 0:
        return math.hypot(px - x1, py - y1)

    t = ((px - x1) * dx + (py - y1) * dy) / length_squared
    t = max(0.0, min(1.0, t))
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))


def segment_distance(a: SegmentCoords, b: SegmentCoords) -> float:
    """
    Distance between two segments.

    The separation of two non-crossing segments is reached at an endpoint
    of one of them, so the minimum of the four endpoint-to-segment
    distances is exact. Returns as soon as a distance of 0 is found.
    """
    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b

    # Crossing segments have all four endpoint distances > 0
    if segments_intersect(ax1, ay1, ax2, ay2, bx1, by1, bx2, by2):
        return 0.0

    best = math.inf
    for segment, (px, py) in (
        (b, (ax1, ay1)),
        (b, (ax2, ay2)),
        (a, (bx1, by1)),
        (a, (bx2, by2)),
    ):
        d = point_segment_distance(*segment, px, py)
        if d == 0:
            return 0.0
        best = min(best, d)
    return best


def relative_ccw(
    x1: float, y1: float, x2: float, y2: float, px: float, py: float
) -> int:
    """
    Orientation of (px, py) relative to the directed segment (x1, y1)->(x2, y2).

    Returns:
        1: counter-clockwise side
        -1: clockwise side
        0: on the segment (collinear and between the endpoints)

    Collinear points beyond an endpoint are classified by projection so
    that they never report 0.
    """
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    ccw = px * y2 - py * x2
    if ccw == 0.0:
        # Collinear: negative if before the start point
        ccw = px * x2 + py * y2
        if ccw > 0.0:
            # Positive if past the end point
            px -= x2
            py -= y2
            ccw = px * x2 + py * y2
            if ccw < 0.0:
                ccw = 0.0
    if ccw < 0.0:
        return -1
    if ccw > 0.0:
        return 1
    return 0


def segments_intersect(
    x1: float, y1: float, x2: float, y2: float,
    x3: float, y3: float, x4: float, y4: float
) -> bool:
    """
    Test whether segment (x1, y1)-(x2, y2) touches or crosses (x3, y3)-(x4, y4).

    Each segment must straddle (or touch) the other. Collinear overlap is
    detected through the 0 orientation of relative_ccw.
    """
    return (
        relative_ccw(x1, y1, x2, y2, x3, y3) * relative_ccw(x1, y1, x2, y2, x4, y4) <= 0
        and relative_ccw(x3, y3, x4, y4, x1, y1) * relative_ccw(x3, y3, x4, y4, x2, y2) <= 0
    )
