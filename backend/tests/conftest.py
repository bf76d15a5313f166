"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest
from shapely.geometry import Point as ShapelyPoint, box

from ledlayout.engine import Point
from ledlayout.svg.outline import OutlineShape


class LineShape:
    """Horizontal boundary from (0, 0) to (length, 0); nothing is filled."""

    def __init__(self, length: float = 100.0) -> None:
        self.length = length

    def total_length(self) -> float:
        return self.length

    def point_at(self, arc_length: float) -> Point:
        return Point(min(max(arc_length, 0.0), self.length), 0.0)

    def contains_point(self, x: float, y: float) -> bool:
        return False


class BandShape:
    """Boundary along y=0; the fill is the band 0 < y < height (y down)."""

    def __init__(self, height: float = 20.0, length: float = 200.0) -> None:
        self.height = height
        self.length = length

    def total_length(self) -> float:
        return self.length

    def point_at(self, arc_length: float) -> Point:
        return Point(min(max(arc_length, 0.0), self.length), 0.0)

    def contains_point(self, x: float, y: float) -> bool:
        return 0.0 < y < self.height


class FilledShape(LineShape):
    """A boundary with everything around it filled."""

    def contains_point(self, x: float, y: float) -> bool:
        return True


class BrokenShape(LineShape):
    def contains_point(self, x: float, y: float) -> bool:
        raise RuntimeError("shape is not queryable")


class EmptyShape:
    def total_length(self) -> float:
        return 0.0

    def point_at(self, arc_length: float) -> Point:
        return Point(0.0, 0.0)

    def contains_point(self, x: float, y: float) -> bool:
        return False


def annulus(outer: float = 60.0, inner: float = 40.0, cx: float = 0.0, cy: float = 0.0) -> OutlineShape:
    """Ring between two circles, like the letter O."""
    ring = ShapelyPoint(cx, cy).buffer(outer, quad_segs=64).difference(
        ShapelyPoint(cx, cy).buffer(inner, quad_segs=64)
    )
    return OutlineShape.from_polygon(ring)


def bar(width: float, height: float) -> OutlineShape:
    return OutlineShape.from_polygon(box(0, 0, width, height))


def star_polygon(rng, n: int = 9, r_min: float = 40.0, r_max: float = 90.0) -> OutlineShape:
    """Random star-shaped simple polygon around the origin."""
    from shapely.geometry import Polygon

    angles = sorted(rng.uniform(0, 2 * math.pi) for _ in range(n))
    verts = [
        (r * math.cos(a), r * math.sin(a))
        for a, r in ((a, rng.uniform(r_min, r_max)) for a in angles)
    ]
    return OutlineShape.from_polygon(Polygon(verts))


# A sans "O": outer contour clockwise, counter anticlockwise (y down)
LETTER_O_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <path id="O" d="M100 20 A80 80 0 1 1 99.99 20 Z M100 45 A55 55 0 1 0 100.01 45 Z"/>
</svg>'''

# An "L" built from straight strokes, 24 units thick
LETTER_L_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 120 160">
  <path id="L" d="M10 10 L34 10 L34 126 L100 126 L100 150 L10 150 Z"/>
</svg>'''

TWO_GLYPH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 200">
  <rect id="I" x="20" y="20" width="30" height="160"/>
  <circle id="dot" cx="200" cy="100" r="60"/>
</svg>'''

EVENODD_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path fill-rule="evenodd" d="M0 0 L100 0 L100 100 L0 100 Z M25 25 L75 25 L75 75 L25 75 Z"/>
</svg>'''

NONZERO_SAME_WINDING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M0 0 L100 0 L100 100 L0 100 Z M25 25 L75 25 L75 75 L25 75 Z"/>
</svg>'''

NONZERO_COUNTER_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M0 0 L100 0 L100 100 L0 100 Z M25 25 L25 75 L75 75 L75 25 Z"/>
</svg>'''

OPEN_LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M2 2 L22 2"/>
  <path d="not a path"/>
</svg>'''


@pytest.fixture
def ring_shape() -> OutlineShape:
    return annulus()


@pytest.fixture
def band_shape() -> BandShape:
    return BandShape()


@pytest.fixture
def letter_o_svg() -> str:
    return LETTER_O_SVG


@pytest.fixture
def letter_l_svg() -> str:
    return LETTER_L_SVG
