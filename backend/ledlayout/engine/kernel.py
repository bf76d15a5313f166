"""Geometry kernel — normals, fill tests and edge distance against a ShapeQuery.

Leaf module: no imports from the other engine stages.
"""

from __future__ import annotations

import logging
import math

from ledlayout.engine.config import DEFAULT_TUNING
from ledlayout.engine.context import Point
from ledlayout.engine.shape import ShapeQuery

logger = logging.getLogger(__name__)

ZERO = Point(0.0, 0.0)


def normal_at(shape: ShapeQuery, arc_length: float, delta: float = DEFAULT_TUNING.normal_delta) -> Point:
    """Unit normal at an arc-length offset.

    Tangent (t.x, t.y) from a central difference, rotated to (t.y, -t.x).
    With y pointing down, a rightward tangent gives an upward normal.
    Returns the zero vector where the tangent degenerates; callers skip
    those samples.
    """
    total = shape.total_length()
    p1 = shape.point_at(max(0.0, arc_length - delta))
    p2 = shape.point_at(min(total, arc_length + delta))

    tx = p2.x - p1.x
    ty = p2.y - p1.y
    length = math.hypot(tx, ty)
    if length == 0:
        return ZERO

    tx /= length
    ty /= length
    return Point(ty, -tx)


def point_in_fill(shape: ShapeQuery, x: float, y: float) -> bool:
    """Fill test that fails closed: any backend error counts as outside."""
    try:
        return bool(shape.contains_point(x, y))
    except Exception as e:
        logger.debug("contains_point(%.2f, %.2f) failed: %s", x, y, e)
        return False


def capsule_inside(
    shape: ShapeQuery,
    center: Point,
    rotation_deg: float,
    half_length: float = DEFAULT_TUNING.half_length,
) -> bool:
    """Footprint check: centre and both capsule ends must be inside the fill."""
    rad = math.radians(rotation_deg)
    dx = half_length * math.cos(rad)
    dy = half_length * math.sin(rad)
    return (
        point_in_fill(shape, center.x, center.y)
        and point_in_fill(shape, center.x - dx, center.y - dy)
        and point_in_fill(shape, center.x + dx, center.y + dy)
    )


def edge_distance(
    shape: ShapeQuery,
    start: Point,
    direction: Point,
    max_dist: float = DEFAULT_TUNING.march_max_distance,
    step: float = DEFAULT_TUNING.march_step,
    iterations: int = DEFAULT_TUNING.refine_iterations,
) -> float:
    """Distance from *start* to the fill boundary along *direction*.

    Marches linearly to the first outside sample, then bisects inside
    that last step. A pure bisection over [0, max_dist] can land in a
    different lobe of a concave glyph and report "still inside".

    Returns 0 when *start* is outside, *max_dist* when no exit is found.
    The result is the outside end of the final bracket.
    """
    if not point_in_fill(shape, start.x, start.y):
        return 0.0

    first_outside = None
    n_steps = int(max_dist // step)
    for i in range(1, n_steps + 1):
        d = i * step
        if not point_in_fill(shape, start.x + direction.x * d, start.y + direction.y * d):
            first_outside = d
            break

    if first_outside is None:
        return max_dist

    low = first_outside - step
    high = first_outside
    for _ in range(iterations):
        mid = (low + high) / 2
        if point_in_fill(shape, start.x + direction.x * mid, start.y + direction.y * mid):
            low = mid
        else:
            high = mid

    return high
