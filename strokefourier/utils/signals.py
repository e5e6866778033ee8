"""Preset test signals and their canvas polylines. No engine imports."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from strokefourier.utils.resample import value_to_canvas_y

_TWO_PI = 2.0 * np.pi

# Fallback canvas when a caller passes a zero-sized one.
DEFAULT_CANVAS_WIDTH = 960.0
DEFAULT_CANVAS_HEIGHT = 520.0


def _grid(samples: int) -> NDArray[np.float64]:
    return np.arange(samples, dtype=np.float64) / max(samples - 1, 1)


def _sine(u: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.sin(_TWO_PI * u)


def _mix(u: NDArray[np.float64]) -> NDArray[np.float64]:
    x = _TWO_PI * u
    return np.cos(x) + 0.5 * np.sin(2 * x)


def _triangle(u: NDArray[np.float64]) -> NDArray[np.float64]:
    return 2 * np.abs(2 * (u - np.floor(u + 0.5))) - 1


def _square(u: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(u < 0.5, 1.0, -1.0)


def _saw(u: NDArray[np.float64]) -> NDArray[np.float64]:
    return 2 * u - 1


def _offset_sine(u: NDArray[np.float64]) -> NDArray[np.float64]:
    return 0.4 + 0.6 * np.sin(_TWO_PI * u)


@dataclass(frozen=True)
class TestSignal:
    id: str
    label: str
    description: str
    fn: Callable[[NDArray[np.float64]], NDArray[np.float64]]

    # Keep pytest from collecting this class by its name
    __test__ = False

    def generate(self, samples: int) -> NDArray[np.float64]:
        return self.fn(_grid(max(int(samples), 0)))


TEST_SIGNALS: dict[str, TestSignal] = {
    s.id: s
    for s in (
        TestSignal("sine", "Pure Sine", "A single 1 Hz sine wave to validate reconstruction.", _sine),
        TestSignal(
            "mix",
            "cos(x)+0.5sin(2x)",
            "Combination that stresses both cosine and sine coefficients.",
            _mix,
        ),
        TestSignal("triangle", "Triangle Wave", "Odd-harmonic rich waveform.", _triangle),
        TestSignal("square", "Square Wave", "Idealized square wave in [-1,1].", _square),
        TestSignal("saw", "Sawtooth", "Linearly increasing sawtooth.", _saw),
        TestSignal("offset-sine", "Offset Sine", "Tests constant + oscillatory content.", _offset_sine),
    )
}


def get_signal(signal_id: str) -> TestSignal | None:
    return TEST_SIGNALS.get(signal_id)


def values_to_points(
    values: NDArray[np.float64],
    width: float,
    height: float,
) -> NDArray[np.float64]:
    """Lay ``values`` out left to right as an ``(N, 3)`` canvas polyline.

    ``t`` is the sample index. A zero-sized canvas falls back to the default.
    """
    if not width or not height:
        width, height = DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT
    v = np.asarray(values, dtype=np.float64)
    if v.size == 0:
        return np.empty((0, 3))
    index = np.arange(v.size, dtype=np.float64)
    xs = index / max(v.size - 1, 1) * (width - 1)
    return np.column_stack([xs, value_to_canvas_y(v, height), index])
