"""S4.02 — Expression Export.

Rescales the series from u-space onto the configured domain and renders a
single-line ``y = ...`` expression plus its ``{a<x<b}`` restriction.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.formatting import export_expression, format_domain


@stage(
    id="S4.02",
    layer=Layer.EXPORT,
    dependencies=["S3.01", "S3.02"],
    description="Export a graphing-tool expression over the domain",
)
def expression_export(ctx: StrokeContext) -> None:
    domain = ctx.config.domain
    ctx.export_text = export_expression(ctx.require("spectrum"), domain)
    ctx.domain_text = format_domain(domain)
