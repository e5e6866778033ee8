"""S1.03 — Stroke Metrics. ★ DIAGNOSTIC

Arc length, bounding box and self-intersection of the smoothed stroke.
Reported alongside the series; never feeds the numeric pipeline.
"""

from __future__ import annotations

from shapely.geometry import LineString

from strokefourier.engine.context import StrokeContext, StrokeMetrics
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.geometry import arc_lengths, bbox


@stage(
    id="S1.03",
    layer=Layer.GEOMETRY,
    dependencies=["S1.02"],
    description="Measure arc length, extent and self-intersection",
)
def stroke_metrics(ctx: StrokeContext) -> None:
    pts = ctx.require("smoothed")
    if len(pts) == 0:
        ctx.metrics = StrokeMetrics()
        return

    length = float(arc_lengths(pts)[-1])
    crossing = False
    if len(pts) >= 3 and length > 0:
        crossing = not LineString(pts[:, :2]).is_simple

    ctx.metrics = StrokeMetrics(
        point_count=len(pts),
        arc_length=round(length, 4),
        bbox=bbox(pts),
        self_intersecting=crossing,
    )
