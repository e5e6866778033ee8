"""S2.01 — Arc-Length Resampling.

Samples the smoothed stroke at ``samples`` uniform fractions of its arc
length and maps canvas y to amplitudes in [-1, 1].
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.resample import resample


@stage(
    id="S2.01",
    layer=Layer.SAMPLING,
    dependencies=["S1.02"],
    description="Resample the stroke uniformly by arc length",
)
def arc_length_resampling(ctx: StrokeContext) -> None:
    cfg = ctx.config
    ctx.resampled = resample(
        ctx.require("smoothed"),
        samples=cfg.samples,
        width=cfg.canvas_width,
        height=cfg.canvas_height,
    )
