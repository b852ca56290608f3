"""
Common test fixtures for logistic_explorer tests.
"""
import pytest

from logistic_explorer.animation import AnimationEngine
from logistic_explorer.classifier import DataPoint, ParameterPair
from logistic_explorer.context import OverlayContext
from logistic_explorer.graph_engine import FigureSurface, axis_range
from logistic_explorer.scheduler import PolledScheduler
from logistic_explorer.session import ExplorerSession
from logistic_explorer.view_mode import ViewModeController


class FakeClockScheduler(PolledScheduler):
    """Polled scheduler driven by a simulated clock instead of wall time."""

    def __init__(self):
        super().__init__()
        self.installs = 0
        self._elapsed = 0

    def schedule(self, delay_ms, tick):
        super().schedule(delay_ms, tick)
        self.installs += 1
        self._elapsed = 0

    def cancel(self):
        super().cancel()
        self._elapsed = 0

    def advance(self, ms):
        """Move the clock forward and fire every tick that falls due."""
        fired = 0
        self._elapsed += ms
        while self.pending and self._elapsed >= self.delay_ms:
            self._elapsed -= self.delay_ms
            self.fire()
            fired += 1
        return fired


@pytest.fixture
def scheduler():
    return FakeClockScheduler()


@pytest.fixture
def surface():
    return FigureSurface(uirevision="test-0")


@pytest.fixture
def dataset():
    # x0 = 5 splits these into one point per quadrant plus a tie at the boundary.
    return (
        DataPoint(x=1.0, cls=1),
        DataPoint(x=2.0, cls=0),
        DataPoint(x=5.0, cls=1),
        DataPoint(x=7.0, cls=1),
        DataPoint(x=8.0, cls=0),
    )


@pytest.fixture
def context(surface, dataset):
    ctx = OverlayContext(surface=surface)
    ctx.replace_dataset(dataset, axis_range(dataset))
    ctx.redraw()
    return ctx


@pytest.fixture
def controller(context):
    return ViewModeController(context)


@pytest.fixture
def pairs():
    return (
        ParameterPair(slope=1.0, intercept=-2.0),
        ParameterPair(slope=2.0, intercept=-6.0),
        ParameterPair(slope=1.0, intercept=-5.0),
    )


@pytest.fixture
def engine(context, scheduler):
    return AnimationEngine(context, scheduler, frame_delay_ms=500)


@pytest.fixture
def session(scheduler):
    return ExplorerSession.create(scheduler=scheduler, frame_delay_ms=500)
