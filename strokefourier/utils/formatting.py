"""Human-readable and graphing-tool renderings of a Fourier series.

Both renderers omit zero terms and fold ``+ -`` into ``- ``.
``format_series`` drops only coefficients that are exactly zero;
``export_expression`` also drops coefficients that round to ``0``.
"""

from __future__ import annotations

import math

import numpy as np

from strokefourier.utils.domain import DomainRange
from strokefourier.utils.fourier import FourierCoefficients

# ── Numeric rendering ──
_FRACTION_DIGITS = 4
# Anything smaller than the last printed digit renders as "0".
_ZERO_EPSILON = 1e-4
# Scientific notation only past this magnitude.
_SCIENTIFIC_THRESHOLD = 1e15


def format_number(value: float) -> str:
    """Up to four fraction digits, no trailing zeros, no scientific notation.

    >>> format_number(0.50004)
    '0.5'
    >>> format_number(-0.00001)
    '0'
    """
    if not math.isfinite(value):
        return "0"
    rounded = round(value, _FRACTION_DIGITS)
    if abs(rounded) < _ZERO_EPSILON:
        return "0"
    if abs(rounded) >= _SCIENTIFIC_THRESHOLD:
        return f"{rounded:.6g}"
    text = f"{rounded:.{_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    return text


def _join_terms(terms: list[str]) -> str:
    return " + ".join(terms).replace("+ -", "- ")


def _format_bound(value: float) -> str:
    """Shortest positional text that reads back as exactly ``value``."""
    return np.format_float_positional(float(value) + 0.0, trim="-")


def _subtract(lhs: str, value: float) -> str:
    """Render ``lhs - value`` without a double minus."""
    text = _format_bound(value)
    if text.startswith("-"):
        return f"{lhs}+{text[1:]}"
    return f"{lhs}-{text}"


def format_series(coeffs: FourierCoefficients) -> str:
    """``f(u) ≈ a0/2 + Σ an·cos(k·2πu) + Σ bn·sin(k·2πu)``."""
    terms: list[str] = []
    if coeffs.a0 != 0:
        terms.append(format_number(coeffs.a0 / 2))
    for k in range(1, coeffs.order + 1):
        a = coeffs.an[k - 1] if k <= len(coeffs.an) else 0.0
        b = coeffs.bn[k - 1] if k <= len(coeffs.bn) else 0.0
        if a != 0:
            terms.append(f"{format_number(a)}·cos({k}·2πu)")
        if b != 0:
            terms.append(f"{format_number(b)}·sin({k}·2πu)")
    if not terms:
        return "f(u) ≈ 0"
    return f"f(u) ≈ {_join_terms(terms)}"


def export_expression(coeffs: FourierCoefficients, domain: DomainRange) -> str:
    """``y = ...`` with ``u`` substituted by ``(x-a)/(b-a)``.

    >>> from strokefourier.utils.domain import DEFAULT_DOMAIN
    >>> export_expression(FourierCoefficients(a0=0.0, an=(1.0,), bn=(0.0,)), DEFAULT_DOMAIN)
    'y = 1*cos(1*2π*(x-0)/(4-0))'
    """
    argument = f"({_subtract('x', domain.a)})/({_subtract(_format_bound(domain.b), domain.a)})"

    terms: list[str] = []
    constant = format_number(coeffs.a0 / 2)
    if constant != "0":
        terms.append(constant)
    for k in range(1, coeffs.order + 1):
        a = format_number(coeffs.an[k - 1]) if k <= len(coeffs.an) else "0"
        b = format_number(coeffs.bn[k - 1]) if k <= len(coeffs.bn) else "0"
        if a != "0":
            terms.append(f"{a}*cos({k}*2π*{argument})")
        if b != "0":
            terms.append(f"{b}*sin({k}*2π*{argument})")
    if not terms:
        return "y = 0"
    return f"y = {_join_terms(terms)}"


def format_domain(domain: DomainRange) -> str:
    """Domain restriction suffix, e.g. ``{0<x<4}``."""
    return f"{{{_format_bound(domain.a)}<x<{_format_bound(domain.b)}}}"
