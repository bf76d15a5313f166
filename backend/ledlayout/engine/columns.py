"""Orientation override and multi-column expansion."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import Candidate, LEDPosition, Orientation
from ledlayout.engine.kernel import capsule_inside
from ledlayout.engine.shape import ShapeQuery


def footprint_half_length(
    orientation: Orientation,
    stroke_width: float,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> float:
    """Capsule half-length; vertical modules on narrow strokes get a shorter check."""
    if orientation is Orientation.VERTICAL and stroke_width < tuning.narrow_stroke_width:
        return max(tuning.narrow_min_half_length, stroke_width / 4)
    return tuning.half_length


def orient_candidates(
    shape: ShapeQuery,
    candidates: Sequence[Candidate],
    orientation: Orientation,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> list[Candidate]:
    """Apply *orientation* to every candidate and keep those whose footprint fits."""
    fixed = orientation.fixed_rotation()
    oriented: list[Candidate] = []
    for c in candidates:
        rotated = c if fixed is None else c.with_rotation(fixed)
        half = footprint_half_length(orientation, c.stroke_width, tuning)
        if capsule_inside(shape, rotated.center, rotated.rotation, half):
            oriented.append(rotated)
    return oriented


def fit_footprints(
    shape: ShapeQuery,
    candidates: Sequence[Candidate],
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> list[Candidate]:
    """Last-chance footprint fit for stroke-following candidates.

    A module laid across a stroke narrower than itself, or a probe
    candidate sitting a few units off the edge, fails the capsule check
    as-is. Each candidate is nudged inward along its normal by
    ``fallback_offsets`` and tried both across and along the stroke at
    the full half-length. The first fit wins; candidates that never fit
    are dropped.
    """
    fitted: list[Candidate] = []
    for c in candidates:
        turned = (c.rotation + 90.0 + 180.0) % 360.0 - 180.0
        for shift in (0.0, *tuning.fallback_offsets):
            center = c.center.offset(c.normal, shift)
            hit = next(
                (r for r in (c.rotation, turned)
                 if capsule_inside(shape, center, r, tuning.half_length)),
                None,
            )
            if hit is not None:
                fitted.append(replace(c, x=center.x, y=center.y, rotation=hit))
                break
    return fitted


def expand_columns(
    shape: ShapeQuery,
    candidates: Sequence[Candidate],
    column_count: int,
    orientation: Orientation,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> list[LEDPosition]:
    """Turn single-row candidates into *column_count* parallel rows.

    Rows sit symmetrically about the candidate along its normal, spread
    over ``column_fill_ratio`` of the measured stroke width. Positions
    whose footprint does not fit are dropped, so thin strokes can come
    back with fewer rows than requested.
    """
    if column_count <= 1:
        return [c.to_position() for c in candidates]

    fixed = orientation.fixed_rotation()
    positions: list[LEDPosition] = []

    for c in candidates:
        usable = c.stroke_width * tuning.column_fill_ratio
        column_spacing = usable / (column_count - 1)
        rotation = c.rotation if fixed is None else fixed
        half = footprint_half_length(orientation, c.stroke_width, tuning)

        for col in range(column_count):
            # -1, 0, +1 for three columns; -0.5, +0.5 for two
            offset = (col - (column_count - 1) / 2) * column_spacing
            center = c.center.offset(c.normal, offset)
            if capsule_inside(shape, center, rotation, half):
                positions.append(LEDPosition(center.x, center.y, rotation))

    return positions
