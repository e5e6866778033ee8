"""S1.02 — Chaikin Corner Cutting.

Refines the simplified polyline into a denser curve without overshoot.
Purely geometric: no arc-length resampling, no amplitude filtering.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.geometry import smooth


@stage(
    id="S1.02",
    layer=Layer.GEOMETRY,
    dependencies=["S1.01"],
    description="Smooth the stroke by iterative corner cutting",
)
def smoothing(ctx: StrokeContext) -> None:
    ctx.smoothed = smooth(ctx.require("simplified"), ctx.config.smoothing_passes)
