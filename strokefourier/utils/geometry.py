"""Leaf-node polyline helpers. No engine imports.

A polyline is an ``(N, 3)`` array of ``x, y, t`` rows in canvas pixel space.
``(N, 2)`` arrays without timestamps are accepted everywhere; only the first
two columns take part in distance computations.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

# Corner-cutting pass bounds. Each pass doubles the vertex count.
_MIN_PASSES = 1
_MAX_PASSES = 6


def as_polyline(points: Iterable[Sequence[float]] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Coerce ``points`` into a float polyline array (always 2-D)."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 3))
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.shape[1] < 2:
        raise ValueError(f"Polyline rows need at least x and y, got shape {arr.shape}")
    return arr


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence. ``s[0] == 0``."""
    if len(points) == 0:
        return np.empty(0)
    diffs = np.diff(points[:, :2], axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def perpendicular_distances(
    points: NDArray[np.float64],
    a: NDArray[np.float64],
    b: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each point to the infinite line through ``a`` and ``b``.

    A zero-length chord degrades to the Euclidean distance to ``a``.
    """
    xy = points[:, :2]
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if dx == 0 and dy == 0:
        return np.hypot(xy[:, 0] - a[0], xy[:, 1] - a[1])
    t = ((xy[:, 0] - a[0]) * dx + (xy[:, 1] - a[1]) * dy) / (dx * dx + dy * dy)
    proj_x = a[0] + t * dx
    proj_y = a[1] + t * dy
    return np.hypot(xy[:, 0] - proj_x, xy[:, 1] - proj_y)


def simplify(points: NDArray[np.float64], tolerance: float = 1.0) -> NDArray[np.float64]:
    """Ramer–Douglas–Peucker simplification.

    Keeps the interior vertex farthest from the chord whenever its distance
    exceeds ``tolerance`` and recurses on both halves; otherwise the span
    collapses to its endpoints. Output rows are rows of the input, in order.
    The recursion runs on an explicit stack so long strokes cannot exhaust
    the interpreter's recursion limit.
    """
    pts = as_polyline(points)
    n = len(pts)
    if n <= 2:
        return pts.copy()

    if not math.isfinite(tolerance) or tolerance < 0:
        tolerance = 0.0

    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True
    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue
        dists = perpendicular_distances(pts[start + 1 : end], pts[start], pts[end])
        idx = int(np.argmax(dists))
        if dists[idx] > tolerance:
            split = start + 1 + idx
            keep[split] = True
            stack.append((start, split))
            stack.append((split, end))

    return pts[keep]


def smooth(points: NDArray[np.float64], passes: float) -> NDArray[np.float64]:
    """Chaikin corner cutting.

    Every edge ``(p0, p1)`` becomes the two points at 1/4 and 3/4 along it,
    the path endpoints stay fixed. All columns, timestamps included, are
    interpolated linearly.
    """
    pts = as_polyline(points)
    if len(pts) < 3 or not math.isfinite(passes) or passes <= 1:
        return pts.copy()

    iterations = min(_MAX_PASSES, max(_MIN_PASSES, int(math.floor(passes + 0.5))))
    smoothed = pts
    for _ in range(iterations):
        p0 = smoothed[:-1]
        p1 = smoothed[1:]
        cut = np.empty((2 * len(p0), smoothed.shape[1]))
        cut[0::2] = 0.75 * p0 + 0.25 * p1
        cut[1::2] = 0.25 * p0 + 0.75 * p1
        smoothed = np.vstack([smoothed[:1], cut, smoothed[-1:]])
    return smoothed


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )
