"""Real Fourier series estimation, tapering and evaluation. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy.integrate import trapezoid

# ── Harmonic count bounds ──
MIN_HARMONICS = 1
MAX_HARMONICS = 50
DEFAULT_HARMONICS = 12

_TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class FourierCoefficients:
    """Truncated real Fourier series ``a0/2 + Σ an cos(2πku) + bn sin(2πku)``.

    ``an[k-1]`` and ``bn[k-1]`` hold harmonic ``k``.
    """

    a0: float
    an: tuple[float, ...] = ()
    bn: tuple[float, ...] = ()

    @property
    def order(self) -> int:
        return max(len(self.an), len(self.bn))

    @property
    def is_zero(self) -> bool:
        return self.a0 == 0 and not any(self.an) and not any(self.bn)

    @classmethod
    def zeros(cls, harmonics: int = 0) -> FourierCoefficients:
        return cls(a0=0.0, an=(0.0,) * harmonics, bn=(0.0,) * harmonics)


def clamp_harmonics(harmonics: float) -> int:
    """Clamp to ``[1, 50]``. Non-finite counts fall back to the default."""
    if not math.isfinite(harmonics):
        return DEFAULT_HARMONICS
    return int(min(MAX_HARMONICS, max(MIN_HARMONICS, math.floor(harmonics))))


def compute_coefficients(values: Sequence[float] | NDArray[np.float64], harmonics: float) -> FourierCoefficients:
    """Estimate coefficients of ``values`` sampled on the grid ``u = i/(N-1)``.

    Composite trapezoidal quadrature over u: the first and last samples get
    half weight, which removes the bias of counting the periodic boundary
    twice. All harmonics are evaluated against one ``K x N`` basis.
    """
    v = np.asarray(values, dtype=np.float64)
    n = v.size
    if n == 0:
        return FourierCoefficients(a0=0.0)

    k = clamp_harmonics(harmonics)
    if n == 1:
        # No spacing to integrate over; a single sample is a constant signal.
        return FourierCoefficients(a0=2.0 * float(v[0]), an=(0.0,) * k, bn=(0.0,) * k)

    du = 1.0 / (n - 1)
    u = np.arange(n, dtype=np.float64) * du
    phase = _TWO_PI * np.arange(1, k + 1, dtype=np.float64)[:, None] * u[None, :]

    a0 = 2.0 * float(trapezoid(v, dx=du))
    an = 2.0 * trapezoid(v * np.cos(phase), dx=du, axis=1)
    bn = 2.0 * trapezoid(v * np.sin(phase), dx=du, axis=1)
    return FourierCoefficients(a0=a0, an=tuple(an.tolist()), bn=tuple(bn.tolist()))


def legacy_coefficients(values: Sequence[float] | NDArray[np.float64], harmonics: float) -> FourierCoefficients:
    """Plain-sum DFT over ``x_n = 2πn/N`` with uniform weights.

    Legacy estimator: it treats the last sample as one step short of a full
    period and carries the boundary bias the quadrature estimator removes.
    Kept for comparison only; the pipeline never calls it.
    """
    v = np.asarray(values, dtype=np.float64)
    n = v.size
    if n == 0:
        return FourierCoefficients(a0=0.0)

    k = clamp_harmonics(harmonics)
    x = _TWO_PI * np.arange(n, dtype=np.float64) / n
    phase = np.arange(1, k + 1, dtype=np.float64)[:, None] * x[None, :]
    a0 = (2.0 / n) * float(np.sum(v))
    an = (2.0 / n) * np.sum(v * np.cos(phase), axis=1)
    bn = (2.0 / n) * np.sum(v * np.sin(phase), axis=1)
    return FourierCoefficients(a0=a0, an=tuple(an.tolist()), bn=tuple(bn.tolist()))


def lanczos_sigma(k: int, order: int) -> float:
    """``sin(x)/x`` with ``x = πk/(order+1)``; 1 at the limit or when non-finite."""
    x = math.pi * k / (order + 1)
    if x == 0:
        return 1.0
    value = math.sin(x) / x
    return value if math.isfinite(value) else 1.0


def taper(coeffs: FourierCoefficients) -> FourierCoefficients:
    """Lanczos sigma taper. Attenuates higher harmonics more, leaves ``a0`` alone."""
    order = coeffs.order
    if order == 0:
        return FourierCoefficients(a0=coeffs.a0)

    an = tuple(value * lanczos_sigma(i + 1, order) for i, value in enumerate(coeffs.an))
    bn = tuple(value * lanczos_sigma(i + 1, order) for i, value in enumerate(coeffs.bn))
    return FourierCoefficients(a0=coeffs.a0, an=an, bn=bn)


def _padded(values: tuple[float, ...], order: int) -> NDArray[np.float64]:
    out = np.zeros(order)
    out[: len(values)] = values
    return out


def evaluate(coeffs: FourierCoefficients, at: Sequence[float] | NDArray[np.float64]) -> list[float]:
    """Evaluate the series at each ``u`` in ``at``. Non-finite positions read as 0."""
    u = np.asarray(at, dtype=np.float64).ravel()
    if u.size == 0:
        return []
    u = np.where(np.isfinite(u), u, 0.0)

    order = coeffs.order
    result = np.full(u.size, coeffs.a0 / 2.0)
    if order:
        phase = _TWO_PI * u[:, None] * np.arange(1, order + 1, dtype=np.float64)[None, :]
        result += np.cos(phase) @ _padded(coeffs.an, order)
        result += np.sin(phase) @ _padded(coeffs.bn, order)
    return result.tolist()


def evaluate_uniform(coeffs: FourierCoefficients, count: int) -> list[float]:
    """Evaluate on the grid ``i/(count-1)``; a single sample sits at ``u = 0``."""
    if count <= 0:
        return []
    if count == 1:
        return evaluate(coeffs, [0.0])
    return evaluate(coeffs, np.arange(count, dtype=np.float64) / (count - 1))
