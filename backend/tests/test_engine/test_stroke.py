"""Tests for stroke measurement and centering."""

from __future__ import annotations

import pytest

from ledlayout.engine import Point
from ledlayout.engine.stroke import find_fallback_position, find_stroke_center, measure_stroke_width
from tests.conftest import BandShape, FilledShape, LineShape


def test_measure_stroke_width_across_band():
    metric = measure_stroke_width(BandShape(height=20), Point(50, 2), Point(0, 1))
    assert metric.width == pytest.approx(20.0, abs=0.05)
    assert metric.right_dist == pytest.approx(18.0, abs=0.02)
    assert metric.left_dist == pytest.approx(2.0, abs=0.02)


def test_find_stroke_center_recenters():
    # Boundary normal points up (outside); the inward side is +y
    candidate = find_stroke_center(BandShape(height=20), Point(50, 0), Point(0, -1))
    assert candidate is not None
    assert candidate.x == pytest.approx(50.0)
    assert candidate.y == pytest.approx(10.0, abs=0.05)
    assert candidate.rotation == pytest.approx(90.0)
    assert candidate.normal.y == pytest.approx(1.0)
    assert candidate.stroke_width == pytest.approx(20.0, abs=0.05)


def test_find_stroke_center_rejects_thin_stroke():
    assert find_stroke_center(BandShape(height=4), Point(50, 0), Point(0, -1)) is None


def test_find_stroke_center_rejects_unbounded_fill():
    assert find_stroke_center(FilledShape(), Point(50, 0), Point(0, -1)) is None


def test_find_stroke_center_needs_an_inside_side():
    assert find_stroke_center(LineShape(), Point(50, 0), Point(0, -1)) is None


def test_fallback_probes_both_directions():
    candidate = find_fallback_position(BandShape(height=4), Point(50, 0), Point(0, -1))
    assert candidate is not None
    assert candidate.y == pytest.approx(3.0)
    assert candidate.stroke_width == 6.0
    assert candidate.rotation == pytest.approx(90.0)


def test_fallback_prefers_positive_normal():
    candidate = find_fallback_position(FilledShape(), Point(50, 0), Point(0, -1))
    assert candidate is not None
    assert candidate.y == pytest.approx(-3.0)
    assert candidate.rotation == pytest.approx(-90.0)


def test_fallback_none_when_nothing_inside():
    assert find_fallback_position(LineShape(), Point(50, 0), Point(0, -1)) is None
