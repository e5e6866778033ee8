"""Arc-length resampling of a stroke onto a uniform u grid. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from strokefourier.utils.geometry import arc_lengths, as_polyline

_MIN_SAMPLES = 2
_MIN_WIDTH = 2.0


@dataclass(frozen=True)
class ResampleResult:
    """Uniform-u samples of a stroke.

    ``u`` is the grid ``i/(N-1)``, ``values`` the signal amplitudes in
    ``[-1, 1]`` and ``x`` the canvas x-coordinate at the same arc-length
    fraction (display alignment only).
    """

    u: NDArray[np.float64]
    values: NDArray[np.float64]
    x: NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.u)


def resolve_sample_count(samples: float) -> int:
    """Floor ``samples`` and clamp to at least two.

    Negative and non-finite counts are caller bugs and raise ``ValueError``
    instead of being clamped.
    """
    if not math.isfinite(samples):
        raise ValueError(f"Sample count must be finite, got {samples!r}")
    count = int(math.floor(samples))
    if count < 0:
        raise ValueError(f"Sample count must be non-negative, got {samples!r}")
    return max(_MIN_SAMPLES, count)


def uniform_grid(samples: int) -> NDArray[np.float64]:
    """The grid ``i/(samples-1)`` for ``i = 0..samples-1``."""
    return np.arange(samples, dtype=np.float64) / (samples - 1)


def canvas_y_to_value(y: NDArray[np.float64] | float, height: float) -> NDArray[np.float64]:
    """Map canvas y (down is positive) to a signal amplitude in ``[-1, 1]``.

    ``height <= 1`` uses a denominator of 1.
    """
    denom = height - 1 if height > 1 else 1.0
    return np.clip(1.0 - (2.0 * np.asarray(y, dtype=np.float64)) / denom, -1.0, 1.0)


def value_to_canvas_y(value: NDArray[np.float64] | float, height: float) -> NDArray[np.float64]:
    """Inverse of :func:`canvas_y_to_value` for amplitudes in ``[-1, 1]``."""
    denom = height - 1 if height > 1 else 1.0
    clamped = np.clip(np.asarray(value, dtype=np.float64), -1.0, 1.0)
    return (1.0 - clamped) * denom / 2.0


def resample(
    points: NDArray[np.float64],
    samples: float = 1024,
    width: float = 960.0,
    height: float = 520.0,
) -> ResampleResult:
    """Resample ``points`` at ``samples`` uniform arc-length fractions.

    Parameterizing by normalized arc length makes the samples independent of
    drawing speed and keeps loops and backtracks in drawing order. When every
    point coincides the fraction falls back to ``i/(n-1)``.
    """
    count = resolve_sample_count(samples)
    width = max(float(width), _MIN_WIDTH)
    pts = as_polyline(points)
    u = uniform_grid(count)

    if len(pts) == 0:
        return ResampleResult(u=u, values=np.zeros(count), x=u * (width - 1))

    if len(pts) == 1:
        value = float(canvas_y_to_value(pts[0, 1], height))
        return ResampleResult(
            u=u,
            values=np.full(count, value),
            x=np.full(count, float(pts[0, 0])),
        )

    s = arc_lengths(pts)
    total = s[-1]
    if total > 0:
        frac = s / total
    else:
        frac = np.arange(len(pts), dtype=np.float64) / (len(pts) - 1)

    # First index whose fraction reaches u (binary search on a monotone table)
    hi = np.clip(np.searchsorted(frac, u, side="left"), 0, len(pts) - 1)
    lo = np.maximum(hi - 1, 0)
    span = frac[hi] - frac[lo]
    safe_span = np.where(span > 0, span, 1.0)
    local = np.where(span > 0, (u - frac[lo]) / safe_span, 0.0)

    xs = pts[lo, 0] + local * (pts[hi, 0] - pts[lo, 0])
    ys = pts[lo, 1] + local * (pts[hi, 1] - pts[lo, 1])

    return ResampleResult(u=u, values=canvas_y_to_value(ys, height), x=xs)
