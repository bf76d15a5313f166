"""Count targeting — find the spacing that yields an exact module count."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import Candidate
from ledlayout.engine.spacing import evenly_subsample, select_well_spaced

logger = logging.getLogger(__name__)


def estimate_spacing_for_count(
    candidates: Sequence[Candidate],
    target_count: int,
    base_spacing: float,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> float:
    """Largest spacing in [0, range × base] whose selection still has >= target points.

    Bisection; an exact hit returns immediately. Spacing 0 keeps every
    candidate, so it is the answer when the pool is already small enough.
    """
    if len(candidates) <= target_count:
        return 0.0

    low = 0.0
    high = base_spacing * tuning.count_search_range
    best = 0.0

    for _ in range(tuning.count_search_iterations):
        mid = (low + high) / 2
        count = len(select_well_spaced(candidates, mid))
        if count == target_count:
            return mid
        if count > target_count:
            low = mid
            best = mid
        else:
            high = mid

    return best


def select_target_count(
    candidates: Sequence[Candidate],
    target_count: int,
    column_count: int,
    base_spacing: float,
    tuning: PlacementTuning = DEFAULT_TUNING,
) -> tuple[list[Candidate], float]:
    """Single-row selection sized so that *column_count* rows reach *target_count*.

    Returns (selected, spacing_used). Surplus from the bisection is
    trimmed by an even subsample.
    """
    row_target = math.ceil(target_count / column_count)
    spacing = estimate_spacing_for_count(candidates, row_target, base_spacing, tuning)
    selected = [candidates[i] for i in select_well_spaced(candidates, spacing)]

    if len(selected) > row_target:
        selected = evenly_subsample(selected, row_target)

    logger.debug(
        "Count target %d (%d per row): spacing %.3f → %d selected",
        target_count, row_target, spacing, len(selected),
    )
    return selected, spacing
