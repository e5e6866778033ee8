"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StrokePoint(BaseModel):
    x: float = Field(..., description="Canvas x in pixels")
    y: float = Field(..., description="Canvas y in pixels (down is positive)")
    t: float = Field(default=0.0, description="Capture timestamp, non-decreasing")


class DomainModel(BaseModel):
    a: float = Field(default=0.0, description="Lower export bound")
    b: float = Field(default=4.0, description="Upper export bound; repaired when b <= a")


class PipelineOptions(BaseModel):
    """Per-request knobs. Omitted fields take the server defaults."""

    harmonics: int | None = Field(default=None, description="Harmonic count, clamped to 1-50")
    smoothing: int | None = Field(default=None, description="Corner-cutting passes, clamped to 1-6")
    samples: int | None = Field(default=None, ge=0, description="Resample count, at least 2")
    tolerance: float | None = Field(default=None, description="RDP tolerance in canvas px")
    taper: bool | None = Field(default=None, description="Apply the Lanczos sigma taper")
    width: float | None = Field(default=None, description="Canvas width in px")
    height: float | None = Field(default=None, description="Canvas height in px")


class ReconstructRequest(BaseModel):
    points: list[StrokePoint] = Field(default_factory=list, description="Stroke in drawing order")
    options: PipelineOptions = Field(default_factory=PipelineOptions)
    domain: DomainModel = Field(default_factory=DomainModel)


class SignalRequest(BaseModel):
    options: PipelineOptions = Field(default_factory=PipelineOptions)
    domain: DomainModel = Field(default_factory=DomainModel)


class SeriesRequest(BaseModel):
    values: list[float] = Field(..., description="Samples on the uniform grid u = i/(N-1)")
    harmonics: int | None = Field(default=None, description="Harmonic count, clamped to 1-50")
    taper: bool | None = Field(default=None, description="Apply the Lanczos sigma taper")
    domain: DomainModel = Field(default_factory=DomainModel)


class SessionCreateRequest(BaseModel):
    options: PipelineOptions = Field(default_factory=PipelineOptions)
    domain: DomainModel = Field(default_factory=DomainModel)


class SessionPointsRequest(BaseModel):
    points: list[StrokePoint] = Field(default_factory=list, description="Full current stroke")


class SessionOptionsRequest(BaseModel):
    options: PipelineOptions = Field(default_factory=PipelineOptions)
    domain: DomainModel | None = None
