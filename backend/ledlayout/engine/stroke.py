"""Stroke analyzer — local fill thickness and stroke-centred candidates."""

from __future__ import annotations

from dataclasses import dataclass

from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import Candidate, Point
from ledlayout.engine.kernel import edge_distance, point_in_fill
from ledlayout.engine.shape import ShapeQuery


@dataclass(frozen=True)
class StrokeMetric:
    """Fill thickness across a sample point.

    ``right_dist`` is the distance along +normal and ``left_dist`` along
    -normal. The names are bookkeeping only, not geometric sides.
    """

    width: float
    left_dist: float
    right_dist: float


def measure_stroke_width(
    shape: ShapeQuery,
    point: Point,
    normal: Point,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> StrokeMetric:
    forward = edge_distance(
        shape, point, normal,
        max_dist=tuning.march_max_distance,
        step=tuning.march_step,
        iterations=tuning.refine_iterations,
    )
    backward = edge_distance(
        shape, point, -normal,
        max_dist=tuning.march_max_distance,
        step=tuning.march_step,
        iterations=tuning.refine_iterations,
    )
    return StrokeMetric(width=forward + backward, left_dist=backward, right_dist=forward)


def find_stroke_center(
    shape: ShapeQuery,
    on_boundary: Point,
    normal: Point,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> Candidate | None:
    """Recentre a boundary sample onto the middle of its stroke.

    Steps in slightly along whichever normal direction lands inside,
    measures the stroke across that line and moves to its midpoint.
    Returns None if neither direction is inside, the width is outside
    the plausible range, or the midpoint falls outside the fill.
    """
    direction = normal
    probe = on_boundary.offset(direction, tuning.center_inset)
    if not point_in_fill(shape, probe.x, probe.y):
        direction = -normal
        probe = on_boundary.offset(direction, tuning.center_inset)
        if not point_in_fill(shape, probe.x, probe.y):
            return None

    metric = measure_stroke_width(shape, probe, direction, tuning)
    if metric.width < tuning.min_stroke_width or metric.width > tuning.max_stroke_width:
        return None

    center_offset = (metric.right_dist - metric.left_dist) / 2
    center = probe.offset(direction, center_offset)
    if not point_in_fill(shape, center.x, center.y):
        return None

    return Candidate(
        x=center.x,
        y=center.y,
        rotation=direction.angle_deg(),
        stroke_width=metric.width,
        normal=direction,
    )


def find_fallback_position(
    shape: ShapeQuery,
    on_boundary: Point,
    normal: Point,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> Candidate | None:
    """Fixed-offset probe used when centering fails.

    Stroke width is estimated as twice the offset that landed inside.
    """
    for offset in tuning.fallback_offsets:
        for direction in (normal, -normal):
            probe = on_boundary.offset(direction, offset)
            if point_in_fill(shape, probe.x, probe.y):
                return Candidate(
                    x=probe.x,
                    y=probe.y,
                    rotation=direction.angle_deg(),
                    stroke_width=offset * 2,
                    normal=direction,
                )
    return None
