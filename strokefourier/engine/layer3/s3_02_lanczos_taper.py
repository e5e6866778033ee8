"""S3.02 — Lanczos Sigma Taper.

Gated on ``config.taper``; when it is off the pipeline leaves this stage out
and downstream stages read the raw coefficients.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.fourier import taper


@stage(
    id="S3.02",
    layer=Layer.SPECTRAL,
    dependencies=["S3.01"],
    enabled=lambda config: config.taper,
    description="Taper harmonics with Lanczos sigma factors",
)
def lanczos_taper(ctx: StrokeContext) -> None:
    ctx.tapered = taper(ctx.require("coefficients"))
