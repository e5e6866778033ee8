"""strokefourier signal-processing engine."""

from strokefourier.engine.registry import stage, Layer, get_registry
from strokefourier.engine.config import PipelineConfig
from strokefourier.engine.context import StrokeContext, StrokeMetrics
from strokefourier.engine.pipeline import Pipeline, create_pipeline, register_stages
from strokefourier.engine.session import SessionStore, StrokeSession

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "PipelineConfig",
    "StrokeContext",
    "StrokeMetrics",
    "Pipeline",
    "create_pipeline",
    "register_stages",
    "SessionStore",
    "StrokeSession",
]
