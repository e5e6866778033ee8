"""FastAPI dependency injection."""

from __future__ import annotations

from strokefourier.config import settings
from strokefourier.engine.pipeline import Pipeline, create_pipeline
from strokefourier.engine.session import SessionStore

_sessions = SessionStore()


def get_settings():
    return settings


def get_session_store() -> SessionStore:
    return _sessions


def get_pipeline() -> Pipeline:
    return create_pipeline()
