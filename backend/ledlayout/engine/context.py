"""PlacementContext — the state object flowing through one placement run.

Point / LEDPosition are the public value types. Candidate carries the
extra per-sample measurements needed by column expansion; candidates
never outlive a single run.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

# Parallel rows a sign module run supports
MAX_COLUMNS = 5


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def offset(self, direction: Point, distance: float) -> Point:
        """Move *distance* along *direction* (assumed unit length)."""
        return Point(self.x + direction.x * distance, self.y + direction.y * distance)

    def angle_deg(self) -> float:
        """Direction angle in degrees, atan2 convention (-180, 180]."""
        return math.degrees(math.atan2(self.y, self.x))


@dataclass(frozen=True)
class LEDPosition:
    """A placed module: centre plus rotation in degrees."""

    x: float
    y: float
    rotation: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class Candidate:
    """A validated single-row position with the stroke data behind it."""

    x: float
    y: float
    rotation: float
    stroke_width: float
    # Unit normal pointing across the stroke; columns are offset along it
    normal: Point

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    def with_rotation(self, rotation: float) -> Candidate:
        return Candidate(self.x, self.y, rotation, self.stroke_width, self.normal)

    def to_position(self) -> LEDPosition:
        return LEDPosition(self.x, self.y, self.rotation)


class Orientation(str, enum.Enum):
    FOLLOW_OUTLINE = "follow_outline"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def fixed_rotation(self) -> float | None:
        """Pinned rotation for forced orientations, None when following the stroke."""
        if self is Orientation.HORIZONTAL:
            return 0.0
        if self is Orientation.VERTICAL:
            return 90.0
        return None


@dataclass(frozen=True)
class PlacementConfig:
    """Per-call placement input. Immutable."""

    # Installation density of the active module, modules per foot
    density_hint: float
    target_count: int | None = None
    column_count: int = 1
    orientation: Orientation = Orientation.FOLLOW_OUTLINE

    def __post_init__(self) -> None:
        if not self.density_hint > 0:
            raise ValueError(f"density_hint must be positive, got {self.density_hint}")
        if not 1 <= self.column_count <= MAX_COLUMNS:
            raise ValueError(
                f"column_count must be in 1..{MAX_COLUMNS}, got {self.column_count}"
            )
        if self.target_count is not None and self.target_count < 0:
            raise ValueError(f"target_count must be >= 0, got {self.target_count}")
        # Accept plain strings from callers that skip the enum
        object.__setattr__(self, "orientation", Orientation(self.orientation))

    @property
    def has_target(self) -> bool:
        return self.target_count is not None and self.target_count > 0


@dataclass
class PlacementContext:
    """Shared state for a single placement run."""

    config: PlacementConfig
    total_length: float = 0.0

    # Spacing in effect
    min_spacing: float = 0.0
    effective_spacing: float = 0.0

    # Stage outputs
    candidates: list[Candidate] = field(default_factory=list)
    valid_candidates: list[Candidate] = field(default_factory=list)
    selected: list[Candidate] = field(default_factory=list)
    positions: list[LEDPosition] = field(default_factory=list)

    # Which fallbacks fired
    used_path_fallback: bool = False
    orientation_fallback: bool = False
    # Candidates were nudged or turned along the stroke to fit
    footprint_adjusted: bool = False

    elapsed_ms: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.positions

    @property
    def effective_orientation(self) -> Orientation:
        if self.orientation_fallback:
            return Orientation.FOLLOW_OUTLINE
        return self.config.orientation
