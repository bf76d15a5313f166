"""Placer — runs the placement stages for one glyph outline.

    candidates → orientation filter → spacing (maximin or count target) → columns
"""

from __future__ import annotations

import logging
import time

from ledlayout.engine.candidates import generate_candidates
from ledlayout.engine.columns import expand_columns, fit_footprints, orient_candidates
from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import LEDPosition, Orientation, PlacementConfig, PlacementContext
from ledlayout.engine.shape import ShapeQuery
from ledlayout.engine.spacing import select_well_spaced
from ledlayout.engine.targeting import select_target_count

logger = logging.getLogger(__name__)


class Placer:
    """Stateless between runs; one instance can serve any number of shapes."""

    def __init__(self, tuning: PlacementTuning | None = None) -> None:
        self.tuning = tuning or DEFAULT_TUNING

    def run(self, shape: ShapeQuery, config: PlacementConfig) -> PlacementContext:
        start = time.perf_counter()
        ctx = PlacementContext(config=config)
        ctx.total_length = shape.total_length()
        ctx.min_spacing = self.tuning.spacing_for_density(config.density_hint)

        if ctx.total_length > 0:
            self._collect(shape, ctx)
            self._orient(shape, ctx)
            self._select(ctx)
            ctx.positions = expand_columns(
                shape, ctx.selected, config.column_count,
                ctx.effective_orientation, self.tuning,
            )

        ctx.elapsed_ms = (time.perf_counter() - start) * 1000
        if ctx.is_empty:
            logger.warning(
                "Placement produced no modules (length %.1f, %d candidates)",
                ctx.total_length, len(ctx.candidates),
            )
        else:
            logger.info(
                "Placed %d modules (%d per row, spacing %.2f) in %.0fms",
                len(ctx.positions), len(ctx.selected), ctx.effective_spacing, ctx.elapsed_ms,
            )
        return ctx

    def _collect(self, shape: ShapeQuery, ctx: PlacementContext) -> None:
        ctx.candidates, ctx.used_path_fallback = generate_candidates(shape, self.tuning)

    def _orient(self, shape: ShapeQuery, ctx: PlacementContext) -> None:
        orientation = ctx.config.orientation
        valid = orient_candidates(shape, ctx.candidates, orientation, self.tuning)

        if not valid and orientation is not Orientation.FOLLOW_OUTLINE and ctx.candidates:
            # Forced orientation fits nowhere: keep the stroke-following layout
            ctx.orientation_fallback = True
            valid = orient_candidates(
                shape, ctx.candidates, Orientation.FOLLOW_OUTLINE, self.tuning,
            )
            logger.debug(
                "%s orientation fits nowhere; falling back to stroke-following (%d fit)",
                orientation.value, len(valid),
            )

        if not valid and ctx.candidates:
            # Nothing fits as sampled: thin stroke or edge-hugging probes
            ctx.orientation_fallback = orientation is not Orientation.FOLLOW_OUTLINE
            ctx.footprint_adjusted = True
            valid = fit_footprints(shape, ctx.candidates, self.tuning)
            logger.debug("No footprint fits as sampled; %d fit after nudging", len(valid))

        ctx.valid_candidates = valid
        logger.debug("%d/%d candidates fit their footprint", len(valid), len(ctx.candidates))

    def _select(self, ctx: PlacementContext) -> None:
        config = ctx.config
        pool = ctx.valid_candidates

        if config.has_target:
            ctx.selected, ctx.effective_spacing = select_target_count(
                pool, config.target_count, config.column_count,
                ctx.min_spacing, self.tuning,
            )
            return

        spacing = ctx.min_spacing
        if len(pool) < self.tuning.small_pool_size:
            spacing *= self.tuning.small_pool_relaxation
        ctx.effective_spacing = spacing
        ctx.selected = [pool[i] for i in select_well_spaced(pool, spacing)]


def place_modules(
    shape: ShapeQuery,
    config: PlacementConfig,
    tuning: PlacementTuning | None = None,
) -> list[LEDPosition]:
    """Module positions for one glyph outline."""
    return Placer(tuning).run(shape, config).positions
