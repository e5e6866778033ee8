"""Tests for stroke sessions and staleness control."""

import numpy as np
import pytest

from strokefourier.engine.config import PipelineConfig
from strokefourier.engine.pipeline import create_pipeline
from strokefourier.engine.session import SessionStore, StrokeSession, input_fingerprint
from tests.conftest import LOOP_POINTS, ZIGZAG_POINTS


@pytest.fixture
def session() -> StrokeSession:
    return SessionStore().create(PipelineConfig(samples=64, harmonics=4))


def test_new_session_is_stale(session):
    assert session.revision == 0
    assert session.is_stale
    assert session.published is None


def test_recompute_publishes_current_revision(session):
    session.set_points(LOOP_POINTS)
    ctx = session.recompute(create_pipeline())

    assert session.published is ctx
    assert session.published_revision == session.revision == 1
    assert not session.is_stale
    assert ctx.export_text.startswith("y = ")


def test_superseded_result_is_dropped(session):
    session.set_points(LOOP_POINTS)
    revision, ctx = session.begin()
    ctx = create_pipeline().run(ctx)

    # A newer stroke arrives before the old run finishes
    session.set_points(ZIGZAG_POINTS)
    assert session.publish(revision, ctx) is False
    assert session.published is None
    assert session.is_stale


def test_config_change_invalidates(session):
    session.set_points(LOOP_POINTS)
    first = session.recompute()
    session.update_config(harmonics=2)

    assert session.is_stale
    second = session.recompute()
    assert second is not first
    assert len(second.coefficients.an) == 2


def test_unchanged_inputs_reuse_published_result(session):
    session.set_points(LOOP_POINTS)
    first = session.recompute()
    session.update_config(harmonics=4)  # same value, new revision

    assert session.is_stale
    assert session.recompute() is first
    assert not session.is_stale


def test_begin_snapshots_inputs(session):
    session.set_points(LOOP_POINTS)
    _, ctx = session.begin()
    session.points[0, 0] = 999.0
    assert ctx.raw_input[0, 0] == 0.0


def test_update_config_fails_fast_on_negative_samples(session):
    with pytest.raises(ValueError):
        session.update_config(samples=-1)
    assert session.revision == 0


def test_fingerprint_tracks_points_and_config():
    pts = np.array(LOOP_POINTS)
    base = input_fingerprint(pts, PipelineConfig())
    assert base == input_fingerprint(pts.copy(), PipelineConfig())
    assert base != input_fingerprint(pts[:-1], PipelineConfig())
    assert base != input_fingerprint(pts, PipelineConfig(taper=False))


def test_store_create_get_delete():
    store = SessionStore()
    s = store.create()
    assert store.get(s.id) is s
    assert len(store) == 1
    assert store.delete(s.id)
    assert not store.delete(s.id)
    assert store.get(s.id) is None
