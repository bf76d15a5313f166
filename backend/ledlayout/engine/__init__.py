"""LED placement engine — lays out modules inside a glyph's filled outline."""

from ledlayout.engine.config import DEFAULT_TUNING, PlacementTuning
from ledlayout.engine.context import (
    Candidate,
    LEDPosition,
    Orientation,
    PlacementConfig,
    PlacementContext,
    Point,
)
from ledlayout.engine.placer import Placer, place_modules
from ledlayout.engine.shape import ShapeQuery

__all__ = [
    "place_modules",
    "Placer",
    "PlacementConfig",
    "PlacementContext",
    "PlacementTuning",
    "DEFAULT_TUNING",
    "Orientation",
    "LEDPosition",
    "Candidate",
    "Point",
    "ShapeQuery",
]
