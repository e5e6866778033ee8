"""Tests for coefficient estimation, Lanczos tapering and series evaluation."""

import math

import numpy as np
import pytest

from strokefourier.utils.fourier import (
    DEFAULT_HARMONICS,
    FourierCoefficients,
    clamp_harmonics,
    compute_coefficients,
    evaluate,
    evaluate_uniform,
    lanczos_sigma,
    legacy_coefficients,
    taper,
)
from tests.conftest import sine_values, square_values


def test_recovers_primary_sine_coefficient():
    coeffs = compute_coefficients(sine_values(512), 5)
    assert coeffs.bn[0] == pytest.approx(1, abs=0.1)
    assert coeffs.an[0] == pytest.approx(0, abs=0.1)
    assert len(coeffs.an) == len(coeffs.bn) == 5


def test_reconstruction_matches_samples():
    values = sine_values(512)
    coeffs = compute_coefficients(values, 5)
    u = np.arange(512) / 511
    recon = evaluate(coeffs, u)
    assert len(recon) == 512
    for i in range(1, 511):
        assert recon[i] == pytest.approx(values[i], abs=0.1)


def test_tapered_reconstruction_still_close():
    values = sine_values(256)
    recon = evaluate_uniform(taper(compute_coefficients(values, 5)), 256)
    assert recon[50] == pytest.approx(values[50], abs=0.1)


def test_taper_curbs_high_harmonics_on_square_wave():
    coeffs = compute_coefficients(square_values(256), 9)
    tapered = taper(coeffs)
    last = len(coeffs.bn) - 1
    assert abs(tapered.bn[last]) < abs(coeffs.bn[last])
    assert abs(tapered.bn[0]) > 0.7 * abs(coeffs.bn[0])


def test_taper_attenuation_is_monotone():
    coeffs = FourierCoefficients(a0=3.0, an=(1.0,) * 8, bn=(1.0,) * 8)
    tapered = taper(coeffs)
    assert tapered.a0 == 3.0
    assert all(a > b for a, b in zip(tapered.an, tapered.an[1:]))
    assert all(0 < v < 1 for v in tapered.bn)


def test_taper_empty_keeps_a0():
    tapered = taper(FourierCoefficients(a0=1.5))
    assert tapered == FourierCoefficients(a0=1.5, an=(), bn=())


def test_lanczos_sigma_values():
    assert lanczos_sigma(0, 5) == 1.0
    assert lanczos_sigma(1, 1) == pytest.approx(math.sin(math.pi / 2) / (math.pi / 2))


def test_empty_values_give_empty_coefficients():
    coeffs = compute_coefficients([], 7)
    assert coeffs == FourierCoefficients(a0=0.0, an=(), bn=())


def test_constant_signal_a0_is_twice_mean():
    coeffs = compute_coefficients(np.full(100, 0.25), 3)
    assert coeffs.a0 == pytest.approx(0.5)
    assert max(abs(v) for v in coeffs.an + coeffs.bn) < 1e-12


def test_single_sample_is_constant():
    coeffs = compute_coefficients([0.3], 4)
    assert coeffs.a0 == pytest.approx(0.6)
    assert coeffs.an == (0.0,) * 4


def test_endpoints_get_half_weight():
    # Only the last sample is non-zero: its weight is du/2
    values = np.zeros(11)
    values[-1] = 1.0
    coeffs = compute_coefficients(values, 1)
    assert coeffs.a0 == pytest.approx(2 * 0.1 * 0.5)


@pytest.mark.parametrize(
    ("requested", "expected"),
    [(0, 1), (-4, 1), (1, 1), (12, 12), (50, 50), (51, 50), (7.8, 7), (math.nan, DEFAULT_HARMONICS)],
)
def test_harmonics_clamped(requested, expected):
    assert clamp_harmonics(requested) == expected
    assert len(compute_coefficients(sine_values(32), requested).an) == expected


def test_quadrature_removes_boundary_bias_of_legacy_sum():
    values = sine_values(16)
    assert compute_coefficients(values, 3).bn[0] == pytest.approx(1.0, abs=1e-9)
    # The plain sum treats the repeated endpoint as a new sample one step short of a period
    assert abs(legacy_coefficients(values, 3).bn[0] - 1.0) > 1e-3


def test_evaluate_is_periodic_and_handles_non_finite():
    coeffs = FourierCoefficients(a0=0.4, an=(0.3, -0.2), bn=(0.7, 0.1))
    at = [0.13, 1.13, -0.87]
    first, second, third = evaluate(coeffs, at)
    assert first == pytest.approx(second)
    assert first == pytest.approx(third)
    assert evaluate(coeffs, [math.nan])[0] == pytest.approx(evaluate(coeffs, [0.0])[0])
    assert evaluate(coeffs, []) == []


def test_evaluate_formula():
    coeffs = FourierCoefficients(a0=2.0, an=(1.0,), bn=(0.5,))
    # u = 0.25: cos(π/2) = 0, sin(π/2) = 1
    assert evaluate(coeffs, [0.25])[0] == pytest.approx(1.5)
    assert evaluate_uniform(coeffs, 0) == []
