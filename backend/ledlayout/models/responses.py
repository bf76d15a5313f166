"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PositionModel(BaseModel):
    x: float
    y: float
    rotation: float


class GlyphPlacementModel(BaseModel):
    id: str
    positions: list[PositionModel] = Field(default_factory=list)
    module_count: int = 0
    empty: bool = True
    used_path_fallback: bool = False
    orientation_fallback: bool = False
    footprint_adjusted: bool = False


class PowerModel(BaseModel):
    total_watts: float = 0.0
    total_amps: float = 0.0
    modules_per_circuit: int = 0
    circuits: int = 0
    power_supplies: int | None = None


class PlaceResponse(BaseModel):
    glyphs: list[GlyphPlacementModel] = Field(default_factory=list)
    total_modules: int = 0
    power: PowerModel = Field(default_factory=PowerModel)
    processing_time_ms: float = 0.0
