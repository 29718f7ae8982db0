"""POST /api/epicycles — SVG → ranked Fourier coefficients, frames and previews."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from epicycles.config import Settings
from epicycles.dependencies import get_settings
from epicycles.engine.epicycles import evaluate, trace
from epicycles.engine.pipeline import PipelineResult, create_pipeline
from epicycles.models.epicycles import CoefficientModel
from epicycles.models.requests import EpicyclesRequest, FrameRequest, PreviewRequest
from epicycles.models.responses import EpicyclesResponse, FrameResponse, PreviewResponse
from epicycles.svg.renderer import render_frame_svg

logger = logging.getLogger(__name__)

router = APIRouter()


async def _run_pipeline(req: EpicyclesRequest, settings: Settings) -> PipelineResult:
    if req.num_samples is not None and req.num_samples > settings.max_num_samples:
        raise HTTPException(
            status_code=422,
            detail=f"num_samples must be at most {settings.max_num_samples}",
        )
    config = settings.pipeline_config(
        num_samples=req.num_samples,
        display_scale=req.display_scale,
    )
    pipeline = create_pipeline(config)
    # DFT is CPU-bound; keep the event loop free
    return await run_in_threadpool(pipeline.run, req.svg)


@router.post("/epicycles", response_model=EpicyclesResponse)
async def analyze_epicycles(
    req: EpicyclesRequest,
    settings: Settings = Depends(get_settings),
) -> EpicyclesResponse:
    result = await _run_pipeline(req, settings)
    return EpicyclesResponse(
        point_count=result.point_count,
        coefficient_count=len(result.coefficients),
        display_scale=result.display_scale,
        coefficients=[CoefficientModel.from_coefficient(c) for c in result.coefficients],
        scaled_coefficients=[CoefficientModel.from_coefficient(c) for c in result.scaled_coefficients],
        processing_time_ms=result.processing_time_ms,
        stage_times_ms=result.stage_times_ms,
    )


@router.post("/epicycles/frame", response_model=FrameResponse)
async def epicycle_frame(req: FrameRequest) -> FrameResponse:
    coefficients = [c.to_coefficient() for c in req.coefficients]
    frame = evaluate(req.t, coefficients, req.num_circles)
    response = FrameResponse.from_frame(frame)
    response.circles_in_use = frame.num_circles
    return response


@router.post("/epicycles/preview", response_model=PreviewResponse)
async def epicycle_preview(
    req: PreviewRequest,
    settings: Settings = Depends(get_settings),
) -> PreviewResponse:
    if req.trail_points > settings.max_trail_points:
        raise HTTPException(
            status_code=422,
            detail=f"trail_points must be at most {settings.max_trail_points}",
        )
    result = await _run_pipeline(req, settings)
    num_circles = req.num_circles if req.num_circles is not None else settings.default_num_circles

    frame = evaluate(req.t, result.scaled_coefficients, num_circles)
    outline = trace(result.scaled_coefficients, num_circles, req.trail_points)
    svg = render_frame_svg(
        frame,
        outline,
        width=req.width,
        height=req.height,
        show_circles=req.show_circles,
        show_vectors=req.show_vectors,
    )
    return PreviewResponse(svg=svg, circles_in_use=frame.num_circles, point_count=result.point_count)
