"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over a closed ring. Positive = CCW in y-up axes."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def close_ring(points: NDArray[np.float64], eps: float = 1e-9) -> NDArray[np.float64]:
    """Drop repeated vertices and make the last point equal the first."""
    if len(points) == 0:
        return points
    keep = np.ones(len(points), dtype=bool)
    keep[1:] = np.any(np.abs(np.diff(points, axis=0)) > eps, axis=1)
    pts = points[keep]
    if len(pts) > 1 and np.all(np.abs(pts[0] - pts[-1]) <= eps):
        pts = pts[:-1]
    return np.vstack([pts, pts[:1]])


def ellipse_points(
    cx: float, cy: float, rx: float, ry: float, n: int = 100,
) -> NDArray[np.float64]:
    """Points along an axis-aligned ellipse (circle when rx == ry)."""
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])
