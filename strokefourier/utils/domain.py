"""Export domain ``{a < x < b}`` handling. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DomainRange:
    a: float
    b: float

    @property
    def span(self) -> float:
        return self.b - self.a


DEFAULT_DOMAIN = DomainRange(a=0.0, b=4.0)


def normalize_domain(a: float, b: float) -> DomainRange:
    """Repair a user-supplied domain instead of rejecting it.

    Non-finite bounds take the defaults; an empty or inverted range is
    widened to ``b = a + 1``.
    """
    if not math.isfinite(a):
        a = DEFAULT_DOMAIN.a
    if not math.isfinite(b):
        b = DEFAULT_DOMAIN.b
    if b <= a:
        b = a + 1
    return DomainRange(a=float(a), b=float(b))


def is_valid_domain(domain: DomainRange) -> bool:
    return math.isfinite(domain.a) and math.isfinite(domain.b) and domain.b > domain.a
