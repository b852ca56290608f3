import pytest
import plotly.graph_objects as go

from logistic_explorer.animation import PlaybackState
from logistic_explorer.graph_engine import Overlay
from logistic_explorer.session import ExplorerSession
from logistic_explorer.view_mode import ViewMode

DATA_TEXT = "x,y\n1,1\n2,0\n5,0.9\n7,1\n8,0.2"


def test_create_and_defaults():
    session = ExplorerSession.create()
    assert isinstance(session.figure, go.Figure)
    assert session.view_mode is ViewMode.SIGMOID
    assert session.engine.frame_delay_ms == 700
    assert session.context.dataset == ()


def test_plot_builds_binarized_dataset(session):
    assert session.plot(DATA_TEXT)
    assert [p.cls for p in session.context.dataset] == [1, 0, 1, 1, 0]
    assert session.context.x_range == pytest.approx((0.3, 8.7))
    surface = session.context.surface
    assert sorted(x for x, _ in surface.points(Overlay.CLASS_1)) == [1.0, 5.0, 7.0]
    assert sorted(x for x, _ in surface.points(Overlay.CLASS_0)) == [2.0, 8.0]
    assert session.dataset_text == DATA_TEXT


def test_plot_with_no_usable_rows_keeps_previous_dataset(session):
    session.plot(DATA_TEXT)
    assert not session.plot("nothing,here\nfoo,bar")
    assert len(session.context.dataset) == 5


def test_plot_clears_previous_frame(session):
    session.plot(DATA_TEXT)
    session.start("-6,2")
    session.plot("0,0\n10,1")
    assert session.context.x0 is None
    assert session.context.surface.points(Overlay.CURVE) == []


def test_start_reads_intercept_then_slope(session):
    session.plot(DATA_TEXT)
    assert session.start("intercept,slope\n-6,2")
    assert session.context.x0 == 3.0
    assert session.engine.state is PlaybackState.FINISHED


def test_start_without_pairs_is_a_no_op(session, scheduler):
    session.plot(DATA_TEXT)
    session.start("-6,2\n-5,1")
    assert not session.start("")
    assert session.engine.position == 1
    assert scheduler.pending


def test_pause_resume_reset_and_speed(session, scheduler):
    session.plot(DATA_TEXT)
    session.start("-2,1\n-6,2\n-5,1")

    session.pause_or_resume()
    assert session.engine.state is PlaybackState.PAUSED
    session.pause_or_resume()
    assert session.engine.state is PlaybackState.RUNNING
    assert session.engine.position == 2

    assert session.set_speed(1200) == 1200
    assert scheduler.delay_ms == 1200
    assert session.engine.position == 2

    session.reset()
    assert session.engine.state is PlaybackState.IDLE
    assert session.engine.position == 0
    assert not scheduler.pending


def test_counts_are_identical_in_both_view_modes(session):
    session.plot(DATA_TEXT)
    session.start("-5,1")
    sigmoid_counts = session.context.counts
    session.set_view_mode("threshold")
    assert session.view_mode is ViewMode.THRESHOLD
    assert session.context.counts == sigmoid_counts
    assert sigmoid_counts.total == 5


def test_load_sample_is_reproducible_per_seed(session):
    first = session.load_sample(seed=7)
    second = session.load_sample(seed=7)
    assert first == second
    assert first.startswith("x,y\n")
    assert len(session.context.dataset) == 70
    assert session.context.surface.points(Overlay.CURVE) == []


def test_load_sample_without_seed_plots_data(session):
    text = session.load_sample()
    assert text.count("\n") == 70
    assert len(session.context.dataset) == 70


def test_activity_log_keeps_latest_entries(session):
    session.plot(DATA_TEXT)
    for delay in (200, 300, 400, 500, 600, 800):
        session.set_speed(delay)
    assert len(session.activity) == 5
    assert session.activity[-1] == "speed: 800 ms/frame"
    assert session.activity[0] == "speed: 300 ms/frame"


def test_status_describes_current_frame(session):
    session.plot(DATA_TEXT)
    assert session.status().startswith("No parameter sequence loaded.")
    session.start("-5,1")
    status = session.status()
    assert "Frame 1 of 1 (finished)" in status
    assert "threshold at x = 5.00" in status


def test_teardown_cancels_and_forgets_sequence(session, scheduler):
    session.plot(DATA_TEXT)
    session.start("-2,1\n-6,2")
    session.teardown()
    assert not scheduler.pending
    assert session.engine.sequence == ()
    assert session.engine.state is PlaybackState.IDLE


def test_load_sample_takes_one_activity_slot(session):
    session.load_sample(seed=7)
    assert session.activity == ["load_sample: 70 points (seed 7)"]
