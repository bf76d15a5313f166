"""Maximin spacing selector.

Greedy: keep the first candidate, then keep each later one only if it
is at least ``min_spacing`` from *every* point kept so far. Looping
outlines (counters of O, A, B) put candidates that are far apart in arc
length right next to each other, so checking only the previous pick
is not enough.

Kept points are bucketed in a uniform grid of cell size ``min_spacing``;
any point closer than that lives in the 3×3 neighbourhood, so the grid
gives the same decisions as an all-pairs scan.
"""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence
from typing import Protocol, TypeVar


class _HasXY(Protocol):
    x: float
    y: float


T = TypeVar("T")


def select_well_spaced(candidates: Sequence[_HasXY], min_spacing: float) -> list[int]:
    """Indices of a greedily selected, well-separated subset (in input order)."""
    if not candidates:
        return []
    if min_spacing <= 0:
        return list(range(len(candidates)))

    min_sq = min_spacing * min_spacing
    cell = min_spacing
    grid: dict[tuple[int, int], list[int]] = defaultdict(list)
    selected: list[int] = []

    for i, c in enumerate(candidates):
        gx = math.floor(c.x / cell)
        gy = math.floor(c.y / cell)
        too_close = False
        for nx in (gx - 1, gx, gx + 1):
            for ny in (gy - 1, gy, gy + 1):
                for j in grid.get((nx, ny), ()):
                    other = candidates[j]
                    dx = c.x - other.x
                    dy = c.y - other.y
                    if dx * dx + dy * dy < min_sq:
                        too_close = True
                        break
                if too_close:
                    break
            if too_close:
                break

        if not too_close:
            selected.append(i)
            grid[(gx, gy)].append(i)

    return selected


def evenly_subsample(items: Sequence[T], target_count: int) -> list[T]:
    """Pick exactly *target_count* items at a uniform index stride."""
    if len(items) <= target_count:
        return list(items)
    if target_count <= 0:
        return []
    if target_count == 1:
        return [items[0]]

    step = (len(items) - 1) / (target_count - 1)
    return [items[int(round(i * step))] for i in range(target_count)]
