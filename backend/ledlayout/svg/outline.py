"""OutlineShape — ShapeQuery over flattened glyph rings.

Arc length walks the rings in order as one continuous parameter, the
way a compound SVG path reports ``getTotalLength``. The fill region is
a shapely geometry; points on the boundary count as outside.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import reduce

import numpy as np
import shapely
from numpy.typing import NDArray
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from ledlayout.engine.context import Point
from ledlayout.utils.geometry import arc_lengths, bbox, close_ring, signed_area

logger = logging.getLogger(__name__)

FILL_RULES = ("nonzero", "evenodd")


class OutlineShape:
    """A glyph outline: closed rings plus the filled region they bound."""

    def __init__(self, rings: Sequence[NDArray[np.float64]], fill: BaseGeometry) -> None:
        self._rings: list[NDArray[np.float64]] = []
        self._cumulative: list[NDArray[np.float64]] = []
        for ring in rings:
            closed = close_ring(np.asarray(ring, dtype=np.float64))
            if len(closed) < 3:
                continue
            cum = arc_lengths(closed)
            if cum[-1] <= 0:
                continue
            self._rings.append(closed)
            self._cumulative.append(cum)

        lengths = np.array([c[-1] for c in self._cumulative], dtype=np.float64)
        self._offsets = np.concatenate([[0.0], np.cumsum(lengths)])
        self._total = float(self._offsets[-1])

        self._fill = fill
        shapely.prepare(self._fill)

    # ── Construction ───────────────────────────────────────────────

    @classmethod
    def from_rings(
        cls,
        rings: Sequence[NDArray[np.float64]],
        fill_rule: str = "nonzero",
    ) -> OutlineShape:
        """Build from raw rings, resolving the fill with an SVG fill rule."""
        if fill_rule not in FILL_RULES:
            raise ValueError(f"Unknown fill rule: {fill_rule!r}")
        return cls(rings, _fill_from_rings(rings, fill_rule))

    @classmethod
    def from_polygon(cls, geom: Polygon | MultiPolygon) -> OutlineShape:
        """Build from a shapely polygon; exteriors and holes become rings."""
        polys = list(geom.geoms) if isinstance(geom, MultiPolygon) else [geom]
        rings: list[NDArray[np.float64]] = []
        for poly in polys:
            if poly.is_empty:
                continue
            rings.append(np.asarray(poly.exterior.coords))
            rings.extend(np.asarray(interior.coords) for interior in poly.interiors)
        return cls(rings, geom)

    # ── ShapeQuery ─────────────────────────────────────────────────

    def total_length(self) -> float:
        return self._total

    def point_at(self, arc_length: float) -> Point:
        if not self._rings:
            return Point(0.0, 0.0)
        s = min(max(arc_length, 0.0), self._total)
        k = int(np.searchsorted(self._offsets, s, side="right")) - 1
        k = min(max(k, 0), len(self._rings) - 1)
        local = s - self._offsets[k]
        ring = self._rings[k]
        cum = self._cumulative[k]
        return Point(
            float(np.interp(local, cum, ring[:, 0])),
            float(np.interp(local, cum, ring[:, 1])),
        )

    def contains_point(self, x: float, y: float) -> bool:
        return bool(shapely.contains_xy(self._fill, x, y))

    # ── Introspection ──────────────────────────────────────────────

    @property
    def rings(self) -> list[NDArray[np.float64]]:
        return list(self._rings)

    @property
    def area(self) -> float:
        return float(self._fill.area)

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        if not self._rings:
            return (0.0, 0.0, 0.0, 0.0)
        return bbox(np.vstack(self._rings))


def _ring_polygon(ring: NDArray[np.float64]) -> BaseGeometry:
    poly = Polygon(ring)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly


def _fill_from_rings(rings: Sequence[NDArray[np.float64]], fill_rule: str) -> BaseGeometry:
    """Filled region for a set of rings.

    evenodd: symmetric difference of every ring.
    nonzero: rings wound like the largest ring, minus rings wound the
    other way. Exact for glyphs whose counters are wound opposite to
    the outer contour, which is how fonts are built.
    """
    usable = [np.asarray(r, dtype=np.float64) for r in rings if len(r) >= 3]
    if not usable:
        return Polygon()

    polys = [_ring_polygon(r) for r in usable]

    if fill_rule == "evenodd":
        return reduce(lambda a, b: a.symmetric_difference(b), polys)

    areas = [signed_area(r) for r in usable]
    dominant = areas[int(np.argmax(np.abs(areas)))]
    same = [p for p, a in zip(polys, areas) if (a >= 0) == (dominant >= 0)]
    opposite = [p for p, a in zip(polys, areas) if (a >= 0) != (dominant >= 0)]

    fill = unary_union(same)
    if opposite:
        fill = fill.difference(unary_union(opposite))
    return fill
