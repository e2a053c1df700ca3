"""Planar geometry helpers used by LED panel animations."""

from __future__ import annotations

import math

# Tolerance matching single-precision machine epsilon.
FLOAT_EPSILON = 1.1920928955078125e-07


def flip_horizontal(incident_angle: float) -> float:
    """Reflect an angle (degrees) as though a ray bounced off a horizontal surface."""
    return 360.0 - incident_angle


def flip_vertical(incident_angle: float) -> float:
    """Reflect an angle (degrees) as though a ray bounced off a vertical surface."""
    return 180.0 - incident_angle


def point_in_box(
    corner1_x: float,
    corner1_y: float,
    corner2_x: float,
    corner2_y: float,
    point_x: float,
    point_y: float,
) -> bool:
    """Return True if the point lies in the axis-aligned box spanned by two opposite corners."""
    min_x, max_x = sorted((corner1_x, corner2_x))
    min_y, max_y = sorted((corner1_y, corner2_y))
    return min_x <= point_x <= max_x and min_y <= point_y <= max_y


def _slope(dy: float, dx: float) -> float:
    """Slope dy/dx with IEEE semantics for a zero run."""
    if dx == 0:
        if dy == 0:
            return math.nan
        return math.copysign(math.inf, dy) * math.copysign(1.0, dx)
    return dy / dx


def segment_intersection(
    s1x1: float,
    s1y1: float,
    s1x2: float,
    s1y2: float,
    s2x1: float,
    s2y1: float,
    s2x2: float,
    s2y2: float,
) -> tuple[float, float] | None:
    """Intersection point of two segments, or None if they do not meet at a single point."""
    slope1 = _slope(s1y2 - s1y1, s1x2 - s1x1)
    intercept1 = s1y1 - slope1 * s1x1

    slope2 = _slope(s2y2 - s2y1, s2x2 - s2x1)
    intercept2 = s2y1 - slope2 * s2x1

    # Parallel or colinear lines have no single intersection point.
    if abs(slope1 - slope2) <= FLOAT_EPSILON:
        return None

    if abs(s1x1 - s1x2) <= FLOAT_EPSILON:
        intersect_x = s1x1
        intersect_y = slope2 * intersect_x + intercept2
    elif abs(s2x1 - s2x2) <= FLOAT_EPSILON:
        intersect_x = s2x1
        intersect_y = slope1 * intersect_x + intercept1
    else:
        intersect_x = (intercept2 - intercept1) / (slope1 - slope2)
        intersect_y = slope1 * intersect_x + intercept1

    if point_in_box(s1x1, s1y1, s1x2, s1y2, intersect_x, intersect_y) and point_in_box(
        s2x1, s2y1, s2x2, s2y2, intersect_x, intersect_y
    ):
        return (intersect_x, intersect_y)
    return None