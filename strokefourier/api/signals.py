"""GET/POST /api/signals — preset test signals run through the full pipeline."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from strokefourier.api.output import build_config, context_to_output
from strokefourier.dependencies import get_pipeline
from strokefourier.engine.context import StrokeContext
from strokefourier.engine.pipeline import Pipeline
from strokefourier.models.requests import SignalRequest
from strokefourier.models.responses import ReconstructResponse, SignalInfo
from strokefourier.utils.signals import TEST_SIGNALS, get_signal, values_to_points

router = APIRouter(prefix="/signals")


@router.get("", response_model=list[SignalInfo])
async def list_signals() -> list[SignalInfo]:
    return [SignalInfo(id=s.id, label=s.label, description=s.description) for s in TEST_SIGNALS.values()]


@router.post("/{signal_id}", response_model=ReconstructResponse)
async def run_signal(
    signal_id: str,
    req: SignalRequest | None = None,
    pipeline: Pipeline = Depends(get_pipeline),
) -> ReconstructResponse:
    signal = get_signal(signal_id)
    if signal is None:
        raise HTTPException(status_code=404, detail=f"Unknown signal: {signal_id}")

    req = req or SignalRequest()
    try:
        config = build_config(req.options, req.domain)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    start = time.perf_counter()
    values = signal.generate(config.samples)
    points = values_to_points(values, config.canvas_width, config.canvas_height)
    ctx = pipeline.run(StrokeContext(raw_input=points, config=config))
    elapsed = (time.perf_counter() - start) * 1000

    return ReconstructResponse(
        result=context_to_output(ctx),
        processing_time_ms=round(elapsed, 1),
        stages_completed=len(ctx.completed_stages),
        stages_failed=len(ctx.errors),
        errors=ctx.errors,
        timings_ms=ctx.timings_ms,
    )
