"""S1.01 — Ramer–Douglas–Peucker Simplification.

Removes sampling jitter while keeping the vertices that carry the shape.
"""

from __future__ import annotations

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.geometry import simplify


@stage(
    id="S1.01",
    layer=Layer.GEOMETRY,
    dependencies=["S0.01"],
    description="Simplify the stroke with Ramer-Douglas-Peucker",
)
def simplification(ctx: StrokeContext) -> None:
    ctx.simplified = simplify(ctx.require("points"), ctx.config.tolerance)
