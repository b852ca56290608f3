from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from . import config
from .classifier import ParameterPair
from .context import OverlayContext
from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


def normalize_frame_delay(value: Any) -> int:
    bounds = config.SPEED_BOUNDS
    try:
        ms = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return config.DEFAULT_FRAME_DELAY_MS
    return max(bounds["min"], min(bounds["max"], ms))


class AnimationEngine:
    """Plays a sequence of parameter pairs one frame per tick.

    Each frame renders the sigmoid, decision boundary and quadrant counts for
    ``sequence[position]`` and then advances ``position``. The engine owns a
    single schedule on its scheduler; every transition cancels before it
    installs.
    """

    def __init__(
        self,
        context: OverlayContext,
        scheduler: Scheduler,
        *,
        frame_delay_ms: int = config.DEFAULT_FRAME_DELAY_MS,
    ) -> None:
        self.context = context
        self.scheduler = scheduler
        self.sequence: Tuple[ParameterPair, ...] = ()
        self.position = 0
        self.state = PlaybackState.IDLE
        self.frame_delay_ms = normalize_frame_delay(frame_delay_ms)

    @property
    def running(self) -> bool:
        return self.state is PlaybackState.RUNNING

    @property
    def current(self) -> Optional[ParameterPair]:
        if 0 < self.position <= len(self.sequence):
            return self.sequence[self.position - 1]
        return None

    def load(self, sequence: Sequence[ParameterPair]) -> None:
        self.scheduler.cancel()
        self.sequence = tuple(sequence)
        self.position = 0
        self.state = PlaybackState.IDLE
        self.context.clear_parameters()
        self.context.redraw()
        logger.info("Loaded %d parameter pair(s)", len(self.sequence))

    def start(self) -> None:
        if not self.sequence or self.state is PlaybackState.FINISHED:
            return
        self.scheduler.cancel()
        self.state = PlaybackState.RUNNING
        self._render_next()
        if self.state is PlaybackState.RUNNING:
            self.scheduler.schedule(self.frame_delay_ms, self.tick)

    def tick(self) -> None:
        if self.state is not PlaybackState.RUNNING:
            return
        self._render_next()

    def pause(self) -> None:
        if self.state is not PlaybackState.RUNNING:
            return
        self.scheduler.cancel()
        self.state = PlaybackState.PAUSED
        logger.debug("Paused at frame %d/%d", self.position, len(self.sequence))

    def toggle(self) -> None:
        if self.state is PlaybackState.RUNNING:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.scheduler.cancel()
        self.position = 0
        self.state = PlaybackState.IDLE
        self.context.clear_parameters()
        self.context.redraw()

    def set_frame_delay(self, value: Any) -> int:
        self.frame_delay_ms = normalize_frame_delay(value)
        if self.state is PlaybackState.RUNNING:
            self.scheduler.schedule(self.frame_delay_ms, self.tick)
        return self.frame_delay_ms

    def _render_next(self) -> None:
        if self.position >= len(self.sequence):
            self._finish()
            return
        pair = self.sequence[self.position]
        self.context.show_parameters(pair)
        self.context.redraw()
        self.position += 1
        if self.position >= len(self.sequence):
            self._finish()

    def _finish(self) -> None:
        self.scheduler.cancel()
        self.state = PlaybackState.FINISHED
        logger.info("Animation finished after %d frame(s)", self.position)
