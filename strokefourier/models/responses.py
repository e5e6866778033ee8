"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from strokefourier.models.series import CoefficientsModel, ReconstructionOutput


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class ReconstructResponse(BaseModel):
    result: ReconstructionOutput
    processing_time_ms: float = 0.0
    stages_completed: int = 0
    stages_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
    timings_ms: dict[str, float] = Field(default_factory=dict)


class SignalInfo(BaseModel):
    id: str
    label: str
    description: str = ""


class SeriesResponse(BaseModel):
    coefficients: CoefficientsModel
    reconstruction: list[float] = Field(default_factory=list)
    series_text: str = "f(u) ≈ 0"
    export: str = "y = 0"
    domain: str = ""


class SessionResponse(BaseModel):
    id: str
    revision: int = 0
    stale: bool = True
    result: ReconstructionOutput | None = None
