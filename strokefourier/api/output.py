"""StrokeContext → API output models, and request options → PipelineConfig."""

from __future__ import annotations

import numpy as np

from strokefourier.config import Settings, settings
from strokefourier.engine.config import PipelineConfig
from strokefourier.engine.context import StrokeContext
from strokefourier.models.requests import DomainModel, PipelineOptions, StrokePoint
from strokefourier.models.series import (
    CoefficientsModel,
    MetricsModel,
    ReconstructionOutput,
    ResampleModel,
)
from strokefourier.utils.domain import normalize_domain
from strokefourier.utils.fourier import FourierCoefficients


def build_config(
    options: PipelineOptions,
    domain: DomainModel,
    defaults: Settings = settings,
) -> PipelineConfig:
    """Fill omitted options from settings. Raises ``ValueError`` on unusable counts."""

    def pick(value, fallback):
        return fallback if value is None else value

    return PipelineConfig(
        harmonics=pick(options.harmonics, defaults.default_harmonics),
        taper=pick(options.taper, defaults.default_taper),
        smoothing_passes=pick(options.smoothing, defaults.default_smoothing),
        tolerance=pick(options.tolerance, defaults.default_tolerance),
        samples=pick(options.samples, defaults.default_samples),
        canvas_width=pick(options.width, defaults.canvas_width),
        canvas_height=pick(options.height, defaults.canvas_height),
        domain=normalize_domain(domain.a, domain.b),
    )


def points_to_array(points: list[StrokePoint]) -> np.ndarray:
    if not points:
        return np.empty((0, 3))
    return np.array([[p.x, p.y, p.t] for p in points], dtype=np.float64)


def coefficients_to_model(coeffs: FourierCoefficients | None) -> CoefficientsModel:
    if coeffs is None:
        return CoefficientsModel()
    return CoefficientsModel(a0=coeffs.a0, an=list(coeffs.an), bn=list(coeffs.bn))


def context_to_output(ctx: StrokeContext) -> ReconstructionOutput:
    """Collect whatever the stages produced; missing pieces keep their defaults."""
    output = ReconstructionOutput(
        raw_coefficients=coefficients_to_model(ctx.coefficients),
        coefficients=coefficients_to_model(ctx.spectrum),
        tapered=ctx.tapered is not None,
        reconstruction=list(ctx.reconstruction or []),
    )

    if ctx.resampled is not None:
        output.resample = ResampleModel(
            u=ctx.resampled.u.tolist(),
            values=ctx.resampled.values.tolist(),
            x=ctx.resampled.x.tolist(),
        )
    if ctx.series_text:
        output.series_text = ctx.series_text
    if ctx.export_text:
        output.export = ctx.export_text
    output.domain = ctx.domain_text

    metrics = MetricsModel(
        point_count=ctx.num_points,
        simplified_count=0 if ctx.simplified is None else len(ctx.simplified),
        smoothed_count=0 if ctx.smoothed is None else len(ctx.smoothed),
    )
    if ctx.metrics is not None:
        metrics.arc_length = ctx.metrics.arc_length
        metrics.bbox = ctx.metrics.bbox
        metrics.self_intersecting = ctx.metrics.self_intersecting
    output.metrics = metrics
    return output
