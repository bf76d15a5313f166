"""Candidate generator — walks the boundary and collects stroke-centred samples."""

from __future__ import annotations

import logging
import math

from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import Candidate
from ledlayout.engine.kernel import normal_at, point_in_fill
from ledlayout.engine.shape import ShapeQuery
from ledlayout.engine.stroke import find_fallback_position, find_stroke_center

logger = logging.getLogger(__name__)


def generate_candidates(
    shape: ShapeQuery,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> tuple[list[Candidate], bool]:
    """Sample the boundary every ``sampling_step`` units.

    Returns (candidates, used_path_fallback). When the fine walk yields
    fewer than ``min_candidates`` it is discarded in favour of
    :func:`path_following_candidates`.
    """
    total = shape.total_length()
    if total <= 0:
        return [], False

    candidates: list[Candidate] = []
    skipped = 0
    n_steps = int(math.floor(total / tuning.sampling_step))

    for i in range(n_steps):
        dist = i * tuning.sampling_step
        on_boundary = shape.point_at(dist)
        normal = normal_at(shape, dist, tuning.normal_delta)
        if normal.is_zero:
            skipped += 1
            continue

        candidate = find_stroke_center(shape, on_boundary, normal, tuning)
        if candidate is None:
            candidate = find_fallback_position(shape, on_boundary, normal, tuning)
        if candidate is None:
            skipped += 1
            continue
        candidates.append(candidate)

    logger.debug(
        "Boundary walk: %d samples, %d candidates, %d skipped",
        n_steps, len(candidates), skipped,
    )

    if len(candidates) >= tuning.min_candidates:
        return candidates, False

    fallback = path_following_candidates(shape, tuning)
    logger.debug(
        "Only %d candidates from boundary walk; path-following fallback gave %d",
        len(candidates), len(fallback),
    )
    return fallback, True


def path_following_candidates(
    shape: ShapeQuery,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> list[Candidate]:
    """Coarse fallback for sparse or degenerate shapes.

    One sample per ``max(15, length / 50)`` units, nudged a fixed inset
    inward (+normal, then -normal, then the boundary point itself).
    """
    total = shape.total_length()
    if total <= 0:
        return []

    spacing = max(tuning.path_follow_min_spacing, total / tuning.path_follow_divisions)
    count = int(math.floor(total / spacing))
    inset = tuning.path_follow_inset

    candidates: list[Candidate] = []
    for i in range(count):
        dist = (i + 0.5) * spacing
        on_boundary = shape.point_at(dist)
        normal = normal_at(shape, dist, tuning.normal_delta)
        if normal.is_zero:
            continue

        direction = normal
        center = on_boundary.offset(direction, inset)
        if not point_in_fill(shape, center.x, center.y):
            direction = -normal
            center = on_boundary.offset(direction, inset)
        if not point_in_fill(shape, center.x, center.y):
            center = on_boundary

        candidates.append(Candidate(
            x=center.x,
            y=center.y,
            rotation=direction.angle_deg(),
            stroke_width=inset * 4,
            normal=direction,
        ))

    return candidates
