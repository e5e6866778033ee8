"""S3.01 — Fourier Coefficients.

Trapezoidal-quadrature estimate of a0, an, bn over the resampled u grid.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.fourier import compute_coefficients


@stage(
    id="S3.01",
    layer=Layer.SPECTRAL,
    dependencies=["S2.01"],
    description="Estimate real Fourier coefficients by trapezoidal quadrature",
)
def fourier_coefficients(ctx: StrokeContext) -> None:
    resampled = ctx.require("resampled")
    ctx.coefficients = compute_coefficients(resampled.values, ctx.config.harmonics)
