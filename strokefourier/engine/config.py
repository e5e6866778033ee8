"""Pipeline configuration — per-run knobs for one reconstruction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from strokefourier.utils.domain import DEFAULT_DOMAIN, DomainRange, normalize_domain
from strokefourier.utils.fourier import clamp_harmonics
from strokefourier.utils.resample import resolve_sample_count


@dataclass
class PipelineConfig:
    """Inputs that invalidate the whole pipeline when they change."""

    # Fourier fit
    harmonics: int = 12
    taper: bool = True

    # Stroke cleanup
    smoothing_passes: int = 4
    tolerance: float = 1.2  # RDP distance threshold in canvas px

    # Sampling
    samples: int = 1024
    canvas_width: float = 960.0
    canvas_height: float = 520.0

    # Export
    domain: DomainRange = field(default_factory=lambda: DEFAULT_DOMAIN)

    def __post_init__(self) -> None:
        # Fail fast on counts no default can repair; everything else is normalized.
        resolve_sample_count(self.samples)
        self.harmonics = clamp_harmonics(self.harmonics)
        if not math.isfinite(self.tolerance) or self.tolerance < 0:
            self.tolerance = 0.0
        self.domain = normalize_domain(self.domain.a, self.domain.b)
