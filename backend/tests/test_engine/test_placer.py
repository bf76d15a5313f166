"""End-to-end placement properties."""

from __future__ import annotations

import itertools
import math
import random

import pytest

import ledlayout.engine.candidates as candidates_module
from ledlayout.engine import (
    DEFAULT_TUNING,
    Orientation,
    PlacementConfig,
    PlacementTuning,
    Placer,
    place_modules,
)
from ledlayout.engine.context import MAX_COLUMNS
from ledlayout.engine.kernel import capsule_inside
from tests.conftest import EmptyShape, FilledShape, annulus, bar, star_polygon

# 36 / 2.4 → 15 units between modules
DENSITY_15 = 2.4


def _pairwise_min(points) -> float:
    return min(
        (math.hypot(a.x - b.x, a.y - b.y) for a, b in itertools.combinations(points, 2)),
        default=math.inf,
    )


def test_density_maps_to_spacing():
    assert DEFAULT_TUNING.spacing_for_density(DENSITY_15) == pytest.approx(15.0)
    assert DEFAULT_TUNING.spacing_for_density(3.0) == pytest.approx(12.0)
    # Dense modules hit the floor
    assert DEFAULT_TUNING.spacing_for_density(10.0) == 8.0


def test_config_validation():
    with pytest.raises(ValueError):
        PlacementConfig(density_hint=0)
    with pytest.raises(ValueError):
        PlacementConfig(density_hint=3, column_count=6)
    with pytest.raises(ValueError):
        PlacementConfig(density_hint=3, target_count=-1)
    assert PlacementConfig(density_hint=3, orientation="vertical").orientation is Orientation.VERTICAL
    assert PlacementConfig(density_hint=3, column_count=MAX_COLUMNS).column_count == 5


@pytest.mark.parametrize("seed", range(4))
def test_every_footprint_is_inside_the_fill(seed):
    rng = random.Random(seed)
    shape = star_polygon(rng)
    config = PlacementConfig(
        density_hint=rng.uniform(1.5, 4.0),
        column_count=rng.randint(1, 3),
        orientation=rng.choice([Orientation.FOLLOW_OUTLINE, Orientation.HORIZONTAL]),
        target_count=rng.choice([None, 15]),
    )
    positions = place_modules(shape, config)
    for p in positions:
        assert capsule_inside(shape, p.center, p.rotation, DEFAULT_TUNING.half_length)


def test_vertical_footprints_inside_wide_stroke():
    shape = annulus(outer=70, inner=40)
    positions = place_modules(shape, PlacementConfig(density_hint=3, orientation=Orientation.VERTICAL))
    assert positions
    for p in positions:
        assert p.rotation == 90.0
        assert capsule_inside(shape, p.center, 90.0, DEFAULT_TUNING.half_length)


def test_single_row_respects_effective_spacing(ring_shape):
    ctx = Placer().run(ring_shape, PlacementConfig(density_hint=DENSITY_15))
    assert ctx.effective_spacing == pytest.approx(15.0)
    assert _pairwise_min(ctx.selected) >= ctx.effective_spacing


def test_target_selection_respects_search_spacing(ring_shape):
    ctx = Placer().run(ring_shape, PlacementConfig(density_hint=DENSITY_15, target_count=12))
    assert _pairwise_min(ctx.selected) >= ctx.effective_spacing


@pytest.mark.parametrize("target", [5, 12, 30])
def test_target_count_is_exact(ring_shape, target):
    positions = place_modules(ring_shape, PlacementConfig(density_hint=DENSITY_15, target_count=target))
    assert len(positions) == target


def test_target_count_with_columns_sizes_rows(ring_shape):
    ctx = Placer().run(
        ring_shape,
        PlacementConfig(density_hint=DENSITY_15, target_count=20, column_count=2,
                        orientation=Orientation.HORIZONTAL),
    )
    assert len(ctx.selected) == 10
    assert len(ctx.positions) <= 20


def test_placement_is_deterministic(ring_shape):
    config = PlacementConfig(density_hint=DENSITY_15, column_count=2)
    assert place_modules(ring_shape, config) == place_modules(ring_shape, config)


def test_zero_length_shape_is_empty():
    ctx = Placer().run(EmptyShape(), PlacementConfig(density_hint=3))
    assert ctx.positions == []
    assert ctx.is_empty
    assert place_modules(EmptyShape(), PlacementConfig(density_hint=3)) == []


def test_fallback_probe_keeps_output_non_empty():
    # Stroke width can never be measured on an unbounded fill
    positions = place_modules(FilledShape(length=40), PlacementConfig(density_hint=3))
    assert positions


def test_failed_centering_still_places_modules(monkeypatch, ring_shape):
    monkeypatch.setattr(candidates_module, "find_stroke_center", lambda *a: None)
    ctx = Placer().run(ring_shape, PlacementConfig(density_hint=3))
    assert len(ctx.candidates) >= DEFAULT_TUNING.min_candidates
    assert all(ring_shape.contains_point(c.x, c.y) for c in ctx.candidates)
    # Probes sit 3 units in, so modules are turned to run along the edge
    assert ctx.footprint_adjusted
    assert ctx.positions
    for p in ctx.positions:
        assert capsule_inside(ring_shape, p.center, p.rotation, DEFAULT_TUNING.half_length)


@pytest.mark.parametrize("width", [8.0, 10.0])
def test_stroke_narrower_than_module_still_places(width):
    shape = annulus(outer=50 + width / 2, inner=50 - width / 2)
    ctx = Placer().run(shape, PlacementConfig(density_hint=3))
    assert ctx.footprint_adjusted
    assert not ctx.orientation_fallback
    assert len(ctx.positions) >= 10
    for p in ctx.positions:
        assert capsule_inside(shape, p.center, p.rotation, DEFAULT_TUNING.half_length)
        assert abs(math.hypot(p.x, p.y) - 50.0) <= 1.0


def test_blob_wider_than_measurable_stroke_still_places():
    # 600 wide: every stroke measurement is rejected, only edge probes remain
    shape = bar(600, 600)
    ctx = Placer().run(shape, PlacementConfig(density_hint=3))
    assert not ctx.used_path_fallback
    assert ctx.footprint_adjusted
    assert not ctx.is_empty
    for p in ctx.positions:
        assert capsule_inside(shape, p.center, p.rotation, DEFAULT_TUNING.half_length)


def test_nothing_fits_is_reported_empty():
    # 4x4: no 12-unit module fits anywhere
    ctx = Placer().run(bar(4, 4), PlacementConfig(density_hint=3))
    assert ctx.is_empty
    assert ctx.positions == []


def test_forced_orientation_falls_back_to_stroke_following():
    # 10 wide: a 12-unit horizontal module cannot fit anywhere
    shape = bar(10, 150)
    ctx = Placer().run(shape, PlacementConfig(density_hint=3, orientation=Orientation.HORIZONTAL))
    assert ctx.orientation_fallback
    assert ctx.effective_orientation is Orientation.FOLLOW_OUTLINE
    assert ctx.positions
    for p in ctx.positions:
        assert capsule_inside(shape, p.center, p.rotation, DEFAULT_TUNING.half_length)


def test_ring_of_radius_50():
    shape = annulus(outer=60, inner=40)
    ctx = Placer().run(shape, PlacementConfig(density_hint=DENSITY_15))
    assert ctx.min_spacing == pytest.approx(15.0)
    assert 16 <= len(ctx.positions) <= 23
    for p in ctx.positions:
        assert abs(math.hypot(p.x, p.y) - 50.0) <= 2.0


def test_custom_tuning_changes_footprint():
    shape = bar(10, 150)
    short = PlacementTuning(half_length=3.0)
    positions = place_modules(shape, PlacementConfig(density_hint=3, orientation=Orientation.HORIZONTAL), short)
    assert positions
    assert all(p.rotation == 0.0 for p in positions)
