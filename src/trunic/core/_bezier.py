"""Internal cubic Bezier helpers.

This is an internal module used to build arc-shaped glyphs and to flatten
curves before stroking. Not intended for public use.
"""

import math

from trunic.domain import Point, PointType


def _mid(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current recursion depth

    Returns:
        List of on-curve points approximating the curve, endpoints included
    """
    p0, p1, p2, p3 = points

    # Calculate curve midpoint (at t=0.5)
    curve_mid_x = 0.125 * (p0.x + 3 * p1.x + 3 * p2.x + p3.x)
    curve_mid_y = 0.125 * (p0.y + 3 * p1.y + 3 * p2.y + p3.y)

    # Approximate with chord midpoint
    line_mid_x = (p0.x + p3.x) / 2
    line_mid_y = (p0.y + p3.y) / 2

    distance = math.hypot(curve_mid_x - line_mid_x, curve_mid_y - line_mid_y)

    if distance <= tolerance or depth >= 16:
        return [p0, p3]

    # First level
    q1 = _mid(p0, p1)
    q2 = _mid(p1, p2)
    q3 = _mid(p2, p3)

    # Second level
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)

    # Third level (midpoint)
    mid = _mid(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def arc_to_cubics(
    cx: float,
    cy: float,
    rx: float,
    ry: float,
    start: float,
    sweep: float,
) -> list[tuple[Point, Point, Point, Point]]:
    """Approximate an elliptical arc with cubic Bezier segments.

    The arc is split into pieces of at most 90 degrees; each piece uses
    control handles of length ``4/3 * tan(theta / 4)`` of the radius.
    Angles are in degrees, measured in the cell's y-down coordinates, so a
    positive sweep runs clockwise on screen.

    Args:
        cx: Center x
        cy: Center y
        rx: Horizontal radius
        ry: Vertical radius
        start: Start angle in degrees
        sweep: Signed sweep in degrees

    Returns:
        List of (start, control1, control2, end) tuples
    """
    pieces = max(1, math.ceil(abs(sweep) / 90.0 - 1e-9))
    step = math.radians(sweep) / pieces
    k = 4.0 / 3.0 * math.tan(step / 4.0)

    def at(theta: float) -> tuple[float, float, float, float]:
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return cx + rx * cos_t, cy + ry * sin_t, -rx * sin_t, ry * cos_t

    curves = []
    theta = math.radians(start)
    for _ in range(pieces):
        x0, y0, dx0, dy0 = at(theta)
        x3, y3, dx3, dy3 = at(theta + step)
        curves.append(
            (
                Point(x0, y0),
                Point(x0 + k * dx0, y0 + k * dy0, PointType.OFF_CURVE_CUBIC),
                Point(x3 - k * dx3, y3 - k * dy3, PointType.OFF_CURVE_CUBIC),
                Point(x3, y3),
            )
        )
        theta += step
    return curves
