"""POST /api/place — lay out modules in every glyph of an SVG."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from ledlayout.config import Settings
from ledlayout.dependencies import get_outline_cache, get_settings
from ledlayout.engine import PlacementConfig, Placer
from ledlayout.engineering.power import ModuleSpec, calculate_power_load, power_supplies_needed
from ledlayout.models.requests import PlaceRequest
from ledlayout.models.responses import (
    GlyphPlacementModel,
    PlaceResponse,
    PositionModel,
    PowerModel,
)
from ledlayout.svg.cache import OutlineCache

router = APIRouter()


@router.post("/place", response_model=PlaceResponse)
def place(
    request: PlaceRequest,
    settings: Settings = Depends(get_settings),
    cache: OutlineCache = Depends(get_outline_cache),
) -> PlaceResponse:
    # Sync handler: placement is CPU-bound, FastAPI runs it in the threadpool
    start = time.perf_counter()

    module = ModuleSpec(
        watts_per_module=request.module.watts_per_module,
        voltage=request.module.voltage,
        modules_per_foot=request.module.modules_per_foot,
        max_run_length=request.module.max_run_length,
    )
    doc = cache.get_or_parse(request.svg, settings.outline_samples_per_segment)
    placer = Placer()

    glyphs: list[GlyphPlacementModel] = []
    for glyph in doc.glyphs:
        config = PlacementConfig(
            density_hint=module.modules_per_foot,
            target_count=request.target_counts.get(glyph.id, request.target_count),
            column_count=request.column_count,
            orientation=request.orientation,
        )
        ctx = placer.run(glyph.shape, config)
        glyphs.append(GlyphPlacementModel(
            id=glyph.id,
            positions=[PositionModel(x=p.x, y=p.y, rotation=p.rotation) for p in ctx.positions],
            module_count=len(ctx.positions),
            empty=ctx.is_empty,
            used_path_fallback=ctx.used_path_fallback,
            orientation_fallback=ctx.orientation_fallback,
            footprint_adjusted=ctx.footprint_adjusted,
        ))

    total = sum(g.module_count for g in glyphs)
    load = calculate_power_load(total, module)
    power = PowerModel(
        total_watts=round(load.total_watts, 3),
        total_amps=round(load.total_amps, 3),
        modules_per_circuit=load.modules_per_circuit,
        circuits=load.circuits,
    )
    if request.power_supply_watts is not None:
        power.power_supplies = power_supplies_needed(load.total_watts, request.power_supply_watts)

    return PlaceResponse(
        glyphs=glyphs,
        total_modules=total,
        power=power,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )
