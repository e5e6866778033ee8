"""Reconstruction output model — the structured result of one pipeline run."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoefficientsModel(BaseModel):
    a0: float = 0.0
    an: list[float] = Field(default_factory=list)
    bn: list[float] = Field(default_factory=list)


class ResampleModel(BaseModel):
    u: list[float] = Field(default_factory=list)
    values: list[float] = Field(default_factory=list)
    x: list[float] = Field(default_factory=list)


class MetricsModel(BaseModel):
    point_count: int = 0
    simplified_count: int = 0
    smoothed_count: int = 0
    arc_length: float = 0.0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    self_intersecting: bool = False


class ReconstructionOutput(BaseModel):
    """Complete reconstruction output from the pipeline."""

    # Coefficients as estimated, and as used (tapered when tapering ran)
    raw_coefficients: CoefficientsModel = Field(default_factory=CoefficientsModel)
    coefficients: CoefficientsModel = Field(default_factory=CoefficientsModel)
    tapered: bool = False

    resample: ResampleModel = Field(default_factory=ResampleModel)
    reconstruction: list[float] = Field(default_factory=list)

    series_text: str = "f(u) ≈ 0"
    export: str = "y = 0"
    domain: str = ""

    metrics: MetricsModel = Field(default_factory=MetricsModel)
