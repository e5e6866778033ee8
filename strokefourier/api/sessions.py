"""/api/sessions — incremental drawing sessions with staleness control.

Every update bumps the session revision; ``GET`` recomputes from scratch when
the published result is older than the latest update.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from strokefourier.api.output import build_config, context_to_output, points_to_array
from strokefourier.dependencies import get_pipeline, get_session_store
from strokefourier.engine.pipeline import Pipeline
from strokefourier.engine.session import SessionStore, StrokeSession
from strokefourier.models.requests import (
    DomainModel,
    SessionCreateRequest,
    SessionOptionsRequest,
    SessionPointsRequest,
)
from strokefourier.models.responses import SessionResponse
from strokefourier.utils.domain import normalize_domain

router = APIRouter(prefix="/sessions")


def _get_or_404(store: SessionStore, session_id: str) -> StrokeSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return session


def _summary(session: StrokeSession, include_result: bool = False) -> SessionResponse:
    result = None
    if include_result and session.published is not None:
        result = context_to_output(session.published)
    return SessionResponse(
        id=session.id,
        revision=session.revision,
        stale=session.is_stale,
        result=result,
    )


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    req: SessionCreateRequest | None = None,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    req = req or SessionCreateRequest()
    try:
        config = build_config(req.options, req.domain)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _summary(store.create(config))


@router.put("/{session_id}/points", response_model=SessionResponse)
async def replace_points(
    session_id: str,
    req: SessionPointsRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = _get_or_404(store, session_id)
    session.set_points(points_to_array(req.points))
    return _summary(session)


@router.patch("/{session_id}/options", response_model=SessionResponse)
async def update_options(
    session_id: str,
    req: SessionOptionsRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = _get_or_404(store, session_id)
    opts = req.options
    changes = {
        name: value
        for name, value in (
            ("harmonics", opts.harmonics),
            ("taper", opts.taper),
            ("smoothing_passes", opts.smoothing),
            ("tolerance", opts.tolerance),
            ("samples", opts.samples),
            ("canvas_width", opts.width),
            ("canvas_height", opts.height),
        )
        if value is not None
    }
    if req.domain is not None:
        domain: DomainModel = req.domain
        changes["domain"] = normalize_domain(domain.a, domain.b)
    try:
        session.update_config(**changes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _summary(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
    pipeline: Pipeline = Depends(get_pipeline),
) -> SessionResponse:
    session = _get_or_404(store, session_id)
    if session.is_stale:
        session.recompute(pipeline)
    return _summary(session, include_result=True)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> None:
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
