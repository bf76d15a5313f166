"""SVG parser — facade over svgpathtools.

Converts raw SVG text → GlyphDocument with one OutlineShape per filled
element. Each element is treated as one glyph; ``transform`` attributes
are not applied.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, Path, parse_path

from ledlayout.svg.outline import FILL_RULES, OutlineShape
from ledlayout.utils.geometry import ellipse_points

logger = logging.getLogger(__name__)

# Regex for extracting viewBox
_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_WIDTH_RE = re.compile(r'<svg[^>]*\swidth\s*=\s*"([^"]*?)"', re.IGNORECASE)
_HEIGHT_RE = re.compile(r'<svg[^>]*\sheight\s*=\s*"([^"]*?)"', re.IGNORECASE)
_ELEMENT_RE = re.compile(r'<(path|rect|circle|ellipse|polygon)\b[^>]*/?\s*>', re.IGNORECASE)
_ATTR_RE = re.compile(r'(\w[\w:-]*)\s*=\s*"([^"]*)"')
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')

# Longest chord allowed when flattening curves
_MAX_CHORD = 2.0


@dataclass
class GlyphOutline:
    """One filled SVG element, ready for placement."""

    id: str
    shape: OutlineShape


@dataclass
class GlyphDocument:
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    glyphs: list[GlyphOutline] = field(default_factory=list)
    # Elements that could not be turned into a filled outline
    skipped: int = 0


def parse_svg(svg_text: str, samples_per_segment: int = 16) -> GlyphDocument:
    """Parse raw SVG string into a GlyphDocument."""
    doc = GlyphDocument()
    _read_canvas(svg_text, doc)

    for index, match in enumerate(_ELEMENT_RE.finditer(svg_text)):
        tag = match.group(1).lower()
        attrs = _extract_attrs(match.group(0))
        glyph_id = attrs.get("id") or f"G{index + 1}"

        try:
            rings = _element_rings(tag, attrs, samples_per_segment)
        except (KeyError, ValueError, IndexError) as e:
            logger.warning("Skipping <%s id=%s>: %s", tag, glyph_id, e)
            doc.skipped += 1
            continue

        fill_rule = attrs.get("fill-rule", "nonzero").strip().lower()
        if fill_rule not in FILL_RULES:
            fill_rule = "nonzero"

        shape = OutlineShape.from_rings(rings, fill_rule)
        if shape.total_length() <= 0 or shape.area <= 0:
            logger.warning("Skipping <%s id=%s>: no filled area", tag, glyph_id)
            doc.skipped += 1
            continue

        doc.glyphs.append(GlyphOutline(id=glyph_id, shape=shape))

    logger.info(
        "Parsed SVG: %d glyphs (%d skipped), canvas %.0f×%.0f",
        len(doc.glyphs), doc.skipped, doc.canvas_width, doc.canvas_height,
    )
    return doc


def _read_canvas(svg_text: str, doc: GlyphDocument) -> None:
    vb_match = _VIEWBOX_RE.search(svg_text)
    if vb_match:
        parts = _NUMBER_RE.findall(vb_match.group(1))
        if len(parts) >= 4:
            doc.canvas_width = float(parts[2])
            doc.canvas_height = float(parts[3])
            return

    w_match = _WIDTH_RE.search(svg_text)
    h_match = _HEIGHT_RE.search(svg_text)
    if w_match:
        try:
            doc.canvas_width = _length(w_match.group(1))
        except ValueError:
            pass
    if h_match:
        try:
            doc.canvas_height = _length(h_match.group(1))
        except ValueError:
            pass


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string."""
    return {m.group(1): m.group(2) for m in _ATTR_RE.finditer(tag_text)}


def _length(value: str) -> float:
    """Parse an SVG length, ignoring px/pt units."""
    return float(value.strip().replace("px", "").replace("pt", ""))


def _element_rings(
    tag: str, attrs: dict[str, str], samples_per_segment: int,
) -> list[NDArray[np.float64]]:
    if tag == "path":
        return _path_rings(attrs["d"], samples_per_segment)

    if tag == "rect":
        x = _length(attrs.get("x", "0"))
        y = _length(attrs.get("y", "0"))
        w = _length(attrs["width"])
        h = _length(attrs["height"])
        return [np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=np.float64)]

    n = max(64, samples_per_segment * 8)
    if tag == "circle":
        r = _length(attrs["r"])
        return [ellipse_points(_length(attrs.get("cx", "0")), _length(attrs.get("cy", "0")), r, r, n)]

    if tag == "ellipse":
        return [ellipse_points(
            _length(attrs.get("cx", "0")), _length(attrs.get("cy", "0")),
            _length(attrs["rx"]), _length(attrs["ry"]), n,
        )]

    # polygon
    coords = [float(v) for v in _NUMBER_RE.findall(attrs["points"])]
    if len(coords) < 6:
        raise ValueError("polygon needs at least three points")
    return [np.array(coords[: len(coords) // 2 * 2], dtype=np.float64).reshape(-1, 2)]


def _path_rings(d: str, samples_per_segment: int) -> list[NDArray[np.float64]]:
    """Flatten each continuous sub-path of a path into a ring."""
    try:
        path = parse_path(d)
    except Exception as e:
        raise ValueError(f"bad path data: {e}") from e

    rings: list[NDArray[np.float64]] = []
    for subpath in path.continuous_subpaths():
        points = _flatten(subpath, samples_per_segment)
        if len(points) >= 3:
            rings.append(np.array(points, dtype=np.float64))
    return rings


def _flatten(subpath: Path, samples_per_segment: int) -> list[tuple[float, float]]:
    """Sample a sub-path; lines by their start point, curves parametrically.

    Curves get at least *samples_per_segment* points, and roughly one
    point per _MAX_CHORD units of arc on long curves.
    """
    points: list[tuple[float, float]] = []
    for seg in subpath:
        if isinstance(seg, Line):
            points.append((seg.start.real, seg.start.imag))
            continue
        n = max(samples_per_segment, math.ceil(seg.length() / _MAX_CHORD))
        for t in np.linspace(0, 1, n, endpoint=False):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))
    if len(subpath):
        end = subpath[-1].end
        points.append((end.real, end.imag))
    return points
