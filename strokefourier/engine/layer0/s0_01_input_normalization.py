"""S0.01 — Input Normalization.

Coerces the raw stroke into an ``(N, 3)`` float array of ``x, y, t`` rows.
Rows without a timestamp get their index; rows with a non-finite x or y are
dropped so they cannot poison arc lengths downstream.
"""

from __future__ import annotations

import logging

import numpy as np

from strokefourier.engine.context import StrokeContext
from strokefourier.engine.registry import Layer, stage
from strokefourier.utils.geometry import as_polyline

logger = logging.getLogger(__name__)


@stage(
    id="S0.01",
    layer=Layer.INPUT,
    description="Normalize raw pointer samples into an x/y/t polyline",
)
def input_normalization(ctx: StrokeContext) -> None:
    if ctx.raw_input is None:
        ctx.points = np.empty((0, 3))
        return

    pts = as_polyline(ctx.raw_input)
    if len(pts) == 0:
        ctx.points = np.empty((0, 3))
        return

    if pts.shape[1] == 2:
        pts = np.column_stack([pts, np.arange(len(pts), dtype=np.float64)])
    else:
        pts = pts[:, :3].copy()

    finite = np.isfinite(pts[:, 0]) & np.isfinite(pts[:, 1])
    if not finite.all():
        logger.debug("Dropping %d non-finite samples", int((~finite).sum()))
        pts = pts[finite]

    ctx.points = pts
