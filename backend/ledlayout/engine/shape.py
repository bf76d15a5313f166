"""ShapeQuery — the capability interface a glyph outline must provide.

Any backend with arc-length parameterisation and a fill test can serve
(vector path, rasterised mask, signed-distance field). The placer never
mutates a shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ledlayout.engine.context import Point


@runtime_checkable
class ShapeQuery(Protocol):
    def total_length(self) -> float:
        """Total boundary arc length."""
        ...

    def point_at(self, arc_length: float) -> "Point":
        """Boundary point at an arc-length offset from the start."""
        ...

    def contains_point(self, x: float, y: float) -> bool:
        """True if (x, y) lies inside the filled region."""
        ...
