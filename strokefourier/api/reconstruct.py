"""POST /api/reconstruct — full pipeline reconstruction of one stroke."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from strokefourier.api.output import (
    build_config,
    coefficients_to_model,
    context_to_output,
    points_to_array,
)
from strokefourier.config import settings
from strokefourier.dependencies import get_pipeline
from strokefourier.engine.context import StrokeContext
from strokefourier.engine.pipeline import Pipeline
from strokefourier.models.requests import ReconstructRequest, SeriesRequest
from strokefourier.models.responses import ReconstructResponse, SeriesResponse
from strokefourier.utils.domain import normalize_domain
from strokefourier.utils.formatting import export_expression, format_domain, format_series
from strokefourier.utils.fourier import compute_coefficients, evaluate_uniform, taper

router = APIRouter()


_SENTINEL = object()  # marks end of queue


def _build_context(req: ReconstructRequest) -> StrokeContext:
    try:
        config = build_config(req.options, req.domain)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return StrokeContext(raw_input=points_to_array(req.points), config=config)


def _response(ctx: StrokeContext, elapsed_ms: float) -> ReconstructResponse:
    return ReconstructResponse(
        result=context_to_output(ctx),
        processing_time_ms=round(elapsed_ms, 1),
        stages_completed=len(ctx.completed_stages),
        stages_failed=len(ctx.errors),
        errors=ctx.errors,
        timings_ms=ctx.timings_ms,
    )


async def _stream_reconstruct(ctx: StrokeContext, pipeline: Pipeline) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        """Sync pipeline in thread — pushes progress dicts onto the async queue."""
        try:
            for progress in pipeline.run_streaming(ctx):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    # Start pipeline in a thread so the event loop stays free to flush SSE
    loop.run_in_executor(None, _run_pipeline)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"

    elapsed = (time.perf_counter() - start) * 1000
    response = _response(ctx, elapsed)
    yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/reconstruct/stream")
async def reconstruct_stream(
    req: ReconstructRequest,
    pipeline: Pipeline = Depends(get_pipeline),
) -> StreamingResponse:
    ctx = _build_context(req)
    return StreamingResponse(
        _stream_reconstruct(ctx, pipeline),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/reconstruct", response_model=ReconstructResponse)
async def reconstruct(
    req: ReconstructRequest,
    pipeline: Pipeline = Depends(get_pipeline),
) -> ReconstructResponse:
    start = time.perf_counter()
    ctx = pipeline.run(_build_context(req))
    return _response(ctx, (time.perf_counter() - start) * 1000)


@router.post("/series", response_model=SeriesResponse)
async def series(req: SeriesRequest) -> SeriesResponse:
    """Fit already-uniform samples directly, skipping the stroke geometry stages."""
    harmonics = settings.default_harmonics if req.harmonics is None else req.harmonics
    apply_taper = settings.default_taper if req.taper is None else req.taper
    domain = normalize_domain(req.domain.a, req.domain.b)

    coeffs = compute_coefficients(req.values, harmonics)
    if apply_taper:
        coeffs = taper(coeffs)

    reconstruction = evaluate_uniform(coeffs, len(req.values))

    return SeriesResponse(
        coefficients=coefficients_to_model(coeffs),
        reconstruction=reconstruction,
        series_text=format_series(coeffs),
        export=export_expression(coeffs, domain),
        domain=format_domain(domain),
    )
