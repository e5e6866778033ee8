"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from strokefourier.api import health, reconstruct, sessions, signals

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(reconstruct.router)
api_router.include_router(signals.router)
api_router.include_router(sessions.router)
