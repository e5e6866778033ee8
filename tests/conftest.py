"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest


# A stroke that doubles back on itself (diamond traced from the left vertex)
LOOP_POINTS = [
    (0.0, 100.0, 0.0),
    (50.0, 50.0, 1.0),
    (100.0, 100.0, 2.0),
    (50.0, 150.0, 3.0),
    (0.0, 100.0, 4.0),
]

ZIGZAG_POINTS = [
    (0.0, 0.0, 0.0),
    (50.0, 100.0, 1.0),
    (100.0, 0.0, 2.0),
]

BUMP_POINTS = [
    (0.0, 0.0, 0.0),
    (50.0, 30.0, 1.0),
    (100.0, 0.0, 2.0),
]


def sine_values(samples: int) -> np.ndarray:
    u = np.arange(samples) / (samples - 1)
    return np.sin(2 * np.pi * u)


def square_values(samples: int) -> np.ndarray:
    return np.where(np.arange(samples) < samples / 2, 1.0, -1.0)


def jittered_stroke(n: int = 400, seed: int = 7) -> np.ndarray:
    """Left-to-right wavy stroke with hand jitter, in canvas px."""
    rng = np.random.default_rng(seed)
    x = np.linspace(20.0, 900.0, n)
    y = 260.0 - 150.0 * np.sin(2 * np.pi * (x - 20.0) / 880.0) + rng.normal(0.0, 0.4, n)
    t = np.arange(n, dtype=np.float64) * 16.0
    return np.column_stack([x, y, t])


@pytest.fixture
def loop_points() -> np.ndarray:
    return np.array(LOOP_POINTS)


@pytest.fixture
def zigzag_points() -> np.ndarray:
    return np.array(ZIGZAG_POINTS)


@pytest.fixture
def bump_points() -> np.ndarray:
    return np.array(BUMP_POINTS)


@pytest.fixture
def wavy_stroke() -> np.ndarray:
    return jittered_stroke()
