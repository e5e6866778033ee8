"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from strokefourier.engine.registry import get_registry
from strokefourier.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        stages_registered=get_registry().count,
    )


@router.get("/stages")
async def stages() -> list[dict[str, str | bool]]:
    return [
        {
            "id": s.id,
            "layer": s.layer.name,
            "description": s.description,
            "optional": s.optional,
        }
        for s in get_registry().all()
    ]
