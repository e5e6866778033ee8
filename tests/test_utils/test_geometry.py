"""Tests for polyline helpers: RDP simplification and Chaikin smoothing."""

import numpy as np
import pytest

from strokefourier.utils.geometry import (
    arc_lengths,
    as_polyline,
    perpendicular_distances,
    simplify,
    smooth,
)
from tests.conftest import jittered_stroke


def test_simplify_high_tolerance_keeps_endpoints_only(zigzag_points):
    result = simplify(zigzag_points, 200)
    assert len(result) == 2
    np.testing.assert_array_equal(result[0], zigzag_points[0])
    np.testing.assert_array_equal(result[1], zigzag_points[2])


def test_simplify_low_tolerance_keeps_corner(zigzag_points):
    result = simplify(zigzag_points, 1.0)
    np.testing.assert_array_equal(result, zigzag_points)


def test_simplify_short_input_unchanged():
    pts = np.array([[1.0, 2.0, 0.0], [3.0, 4.0, 1.0]])
    np.testing.assert_array_equal(simplify(pts, 0.5), pts)
    assert len(simplify(np.empty((0, 3)), 1.0)) == 0


def test_simplify_is_idempotent(wavy_stroke):
    for tol in (0.0, 0.5, 1.2, 5.0, 40.0):
        once = simplify(wavy_stroke, tol)
        twice = simplify(once, tol)
        np.testing.assert_array_equal(once, twice)


def test_simplify_preserves_endpoints(wavy_stroke):
    result = simplify(wavy_stroke, 3.0)
    np.testing.assert_array_equal(result[0], wavy_stroke[0])
    np.testing.assert_array_equal(result[-1], wavy_stroke[-1])


def test_simplify_only_removes_points(wavy_stroke):
    result = simplify(wavy_stroke, 2.0)
    assert 2 <= len(result) < len(wavy_stroke)
    # Every kept row is an input row, in drawing order (t strictly increasing)
    source = {tuple(row) for row in wavy_stroke}
    assert all(tuple(row) in source for row in result)
    assert np.all(np.diff(result[:, 2]) > 0)


def test_simplify_collinear_collapses():
    pts = np.array([[float(i), 2.0 * i, float(i)] for i in range(10)])
    result = simplify(pts, 0.01)
    assert len(result) == 2


def test_simplify_closed_chord_uses_endpoint_distance():
    # First and last points coincide: the chord has zero length
    pts = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 0.0]])
    result = simplify(pts, 5.0)
    assert len(result) == 3
    assert len(simplify(pts, 20.0)) == 2


def test_simplify_negative_tolerance_treated_as_zero(zigzag_points):
    np.testing.assert_array_equal(simplify(zigzag_points, -3.0), zigzag_points)


def test_simplify_long_stroke_does_not_recurse():
    pts = jittered_stroke(n=5000, seed=3)
    result = simplify(pts, 0.0)
    assert result[0][0] == pts[0][0]
    assert result[-1][0] == pts[-1][0]


def test_perpendicular_distance_degenerate_chord():
    a = np.array([1.0, 1.0])
    d = perpendicular_distances(np.array([[4.0, 5.0]]), a, a)
    assert d[0] == pytest.approx(5.0)


def test_smooth_grows_point_count(bump_points):
    result = smooth(bump_points, 3)
    assert len(result) > len(bump_points)
    # Each pass doubles the vertex count
    assert len(result) == len(bump_points) * 2**3


def test_smooth_keeps_endpoints(bump_points):
    result = smooth(bump_points, 4)
    np.testing.assert_array_equal(result[0], bump_points[0])
    np.testing.assert_array_equal(result[-1], bump_points[-1])


def test_smooth_noop_cases(bump_points):
    np.testing.assert_array_equal(smooth(bump_points, 1), bump_points)
    np.testing.assert_array_equal(smooth(bump_points, 0), bump_points)
    two = bump_points[:2]
    np.testing.assert_array_equal(smooth(two, 5), two)


def test_smooth_passes_clamped_to_six(bump_points):
    assert len(smooth(bump_points, 50)) == len(smooth(bump_points, 6))


def test_smooth_first_pass_cut_points(bump_points):
    result = smooth(bump_points, 1.4)  # rounds to one pass
    np.testing.assert_allclose(result[1], [12.5, 7.5, 0.25])
    np.testing.assert_allclose(result[2], [37.5, 22.5, 0.75])


def test_smooth_does_not_mutate_input(bump_points):
    before = bump_points.copy()
    smooth(bump_points, 3)
    np.testing.assert_array_equal(bump_points, before)


def test_arc_lengths_cumulative():
    pts = np.array([[0.0, 0.0], [3.0, 4.0], [3.0, 4.0], [6.0, 8.0]])
    np.testing.assert_allclose(arc_lengths(pts), [0.0, 5.0, 5.0, 10.0])


def test_as_polyline_rejects_single_column():
    with pytest.raises(ValueError):
        as_polyline([[1.0], [2.0]])
