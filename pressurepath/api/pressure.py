"""POST /api/pressure-path — variable-width outline for a base path."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pressurepath.config import Settings
from pressurepath.dependencies import get_engine, get_settings
from pressurepath.engine.path_math import PathMathEngine
from pressurepath.engine.pressure import get_pressure_path
from pressurepath.engine.samples import PressurePathResult
from pressurepath.models.requests import PressurePathRequest
from pressurepath.models.responses import PressurePathResponse, SampleModel
from pressurepath.svg.diagnostics import render_diagnostic_svg

router = APIRouter(prefix="/pressure-path")


def _compute(req: PressurePathRequest, settings: Settings, engine: PathMathEngine) -> PressurePathResult:
    config = settings.sampler_config(
        max_evaluations=req.max_evaluations,
        strict_profile=req.strict_profile,
        zero_tangent_undefined=req.zero_tangent_undefined,
    )
    return get_pressure_path(req.d, req.width_profile, req.base_stroke_width, engine=engine, config=config)


@router.post("", response_model=PressurePathResponse)
async def pressure_path(
    req: PressurePathRequest,
    settings: Settings = Depends(get_settings),
    engine: PathMathEngine = Depends(get_engine),
) -> PressurePathResponse:
    start = time.perf_counter()
    result = _compute(req, settings, engine)
    elapsed = (time.perf_counter() - start) * 1000

    samples = [SampleModel(**s.to_dict()) for s in result.samples] if req.include_samples else []
    return PressurePathResponse(
        d=result.outline_d,
        samples=samples,
        sample_count=len(result.samples),
        evaluations=result.evaluations,
        truncated=result.truncated,
        warnings=[str(w) for w in result.warnings],
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/svg")
async def pressure_path_svg(
    req: PressurePathRequest,
    settings: Settings = Depends(get_settings),
    engine: PathMathEngine = Depends(get_engine),
) -> Response:
    result = _compute(req, settings, engine)
    return Response(content=render_diagnostic_svg(result, req.d), media_type="image/svg+xml")
