"""S4.01 — Series Text."""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.formatting import format_series


@stage(
    id="S4.01",
    layer=Layer.EXPORT,
    dependencies=["S3.01", "S3.02"],
    description="Render the series in u-space",
)
def series_text(ctx: StrokeContext) -> None:
    ctx.series_text = format_series(ctx.require("spectrum"))
