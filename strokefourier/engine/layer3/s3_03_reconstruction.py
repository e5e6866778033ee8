"""S3.03 — Series Reconstruction.

Evaluates the series on the resampler's own u grid so the overlay lines up
with the stroke's canvas x-coordinates.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.fourier import evaluate


@stage(
    id="S3.03",
    layer=Layer.SPECTRAL,
    dependencies=["S3.01", "S3.02"],
    description="Reconstruct the signal from its coefficients",
)
def reconstruction(ctx: StrokeContext) -> None:
    resampled = ctx.require("resampled")
    ctx.reconstruction = evaluate(ctx.require("spectrum"), resampled.u)
