"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ledlayout.engine.context import MAX_COLUMNS, Orientation


class ModuleModel(BaseModel):
    watts_per_module: float = Field(..., ge=0, description="Power draw per module (W)")
    voltage: float = Field(..., gt=0, description="Module supply voltage (V)")
    modules_per_foot: float = Field(..., gt=0, description="Installation density")
    max_run_length: int | None = Field(default=None, gt=0, description="Modules per circuit")


class PlaceRequest(BaseModel):
    svg: str = Field(..., description="SVG with one filled element per glyph")
    module: ModuleModel
    target_count: int | None = Field(default=None, ge=0, description="Modules per glyph")
    target_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Per-glyph module targets keyed by glyph id (overrides target_count)",
    )
    column_count: int = Field(default=1, ge=1, le=MAX_COLUMNS)
    orientation: Orientation = Orientation.FOLLOW_OUTLINE
    power_supply_watts: float | None = Field(default=None, gt=0, description="Supply rating (W)")
