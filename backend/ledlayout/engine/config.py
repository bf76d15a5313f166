"""Placement tuning — constants tuned for sign-letter scale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacementTuning:
    """Controls sampling, probing and spacing behaviour of the placer.

    Distances are in the shape's own units (canvas pixels for SVG glyphs).
    """

    # Boundary walk
    sampling_step: float = 2.0
    normal_delta: float = 0.1

    # Edge search: linear march, then bisection inside the last step
    march_step: float = 10.0
    march_max_distance: float = 1000.0
    refine_iterations: int = 10

    # Stroke centering
    center_inset: float = 2.0
    min_stroke_width: float = 6.0
    max_stroke_width: float = 200.0
    fallback_offsets: tuple[float, ...] = (3.0, 6.0, 10.0, 15.0, 20.0)

    # Sparse-shape fallback (path following)
    min_candidates: int = 10
    path_follow_min_spacing: float = 15.0
    path_follow_divisions: int = 50
    path_follow_inset: float = 5.0

    # Density → spacing
    base_spacing: float = 12.0
    density_reference: float = 3.0  # modules/foot that maps to base_spacing
    min_spacing_floor: float = 8.0

    # Maximin selection
    small_pool_size: int = 20
    small_pool_relaxation: float = 0.7

    # Count targeting
    count_search_iterations: int = 20
    count_search_range: float = 4.0  # upper bound as a multiple of min spacing

    # Module footprint
    half_length: float = 6.0
    narrow_stroke_width: float = 16.0
    narrow_min_half_length: float = 3.0

    # Columns
    column_fill_ratio: float = 0.65

    def spacing_for_density(self, density_hint: float) -> float:
        """Minimum module spacing for a modules-per-foot density hint."""
        density_factor = density_hint / self.density_reference
        return max(self.min_spacing_floor, self.base_spacing / density_factor)


DEFAULT_TUNING = PlacementTuning()
