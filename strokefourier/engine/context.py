"""StrokeContext — the single state object flowing through all stages.

Each stage writes a newly allocated result into its own field; no stage
modifies an array another stage produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from strokefourier.engine.config import PipelineConfig
from strokefourier.utils.fourier import FourierCoefficients
from strokefourier.utils.resample import ResampleResult


@dataclass
class StrokeMetrics:
    """Diagnostics of the smoothed stroke."""

    point_count: int = 0
    arc_length: float = 0.0
    # (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    # Loops and backtracks make the stroke non-simple
    self_intersecting: bool = False


@dataclass
class StrokeContext:
    """Shared state flowing through the entire pipeline."""

    # Raw stroke exactly as received: list of (x, y, t) rows or an array
    raw_input: Any = None
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Geometry (layers 0-1) ---
    points: NDArray[np.float64] | None = None
    simplified: NDArray[np.float64] | None = None
    smoothed: NDArray[np.float64] | None = None
    metrics: StrokeMetrics | None = None

    # --- Sampling (layer 2) ---
    resampled: ResampleResult | None = None

    # --- Spectrum (layer 3) ---
    coefficients: FourierCoefficients | None = None
    tapered: FourierCoefficients | None = None
    reconstruction: list[float] | None = None

    # --- Export (layer 4) ---
    series_text: str = ""
    export_text: str = ""
    domain_text: str = ""

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def spectrum(self) -> FourierCoefficients | None:
        """Coefficients used downstream: tapered when tapering ran."""
        return self.tapered if self.tapered is not None else self.coefficients

    @property
    def num_points(self) -> int:
        return 0 if self.points is None else len(self.points)

    def require(self, name: str) -> Any:
        """Fetch an upstream result, failing the current stage if it never ran."""
        value = getattr(self, name)
        if value is None:
            raise ValueError(f"Missing upstream result: {name}")
        return value
