from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from . import config
from .animation import AnimationEngine
from .classifier import build_dataset
from .context import OverlayContext, ViewMode
from .graph_engine import FigureSurface, axis_range
from .logger import append_preview_log, build_event_record, format_event_message
from .parsing import parse_parameters, parse_rows
from .sample_data import fresh_seed, sample_csv
from .scheduler import PolledScheduler, Scheduler
from .verbal_descriptions import describe_frame, describe_progress
from .view_mode import ViewModeController

logger = logging.getLogger(__name__)


class ExplorerSession:
    """Everything one learner's chart needs, behind the UI commands.

    Front ends call ``load_sample``, ``plot``, ``set_view_mode``, ``start``,
    ``pause_or_resume``, ``reset`` and ``set_speed`` and then read ``figure``.
    """

    def __init__(
        self,
        surface: FigureSurface,
        scheduler: Scheduler,
        *,
        frame_delay_ms: int = config.DEFAULT_FRAME_DELAY_MS,
        view_mode: Any = config.DEFAULT_VIEW_MODE,
    ) -> None:
        self.context = OverlayContext(surface=surface)
        self.view = ViewModeController(self.context)
        self.engine = AnimationEngine(self.context, scheduler, frame_delay_ms=frame_delay_ms)
        self.activity: List[str] = []
        self.dataset_text = ""
        self.view.set_mode(view_mode)

    @classmethod
    def create(
        cls,
        *,
        scheduler: Optional[Scheduler] = None,
        uirevision: str = config.UI_BASE_TOKEN + "0",
        **kwargs: Any,
    ) -> "ExplorerSession":
        return cls(FigureSurface(uirevision=uirevision), scheduler or PolledScheduler(), **kwargs)

    def teardown(self) -> None:
        self.engine.reset()
        self.engine.sequence = ()
        logger.debug("Session torn down")

    @property
    def figure(self):
        return self.context.surface.figure

    @property
    def scheduler(self) -> Scheduler:
        return self.engine.scheduler

    @property
    def view_mode(self) -> ViewMode:
        return self.view.mode

    def _record(self, event: str, **extras: Any) -> Dict[str, Any]:
        record = build_event_record(event, extras=extras)
        message = format_event_message(record)
        self.activity = append_preview_log(self.activity, message)
        logger.info(message)
        return record

    def plot(self, dataset_text: Optional[str]) -> bool:
        """Replace the dataset with the rows parsed from ``dataset_text``.

        Returns False (and changes nothing) when no row could be parsed.
        """
        if not self._replace_dataset(dataset_text):
            return False
        self._record("plot", points=len(self.context.dataset))
        return True

    def _replace_dataset(self, dataset_text: Optional[str]) -> bool:
        dataset = build_dataset(parse_rows(dataset_text))
        if not dataset:
            return False
        self.context.replace_dataset(dataset, axis_range(dataset))
        self.view.apply()
        # Curve and threshold belonged to the old data.
        self.context.clear_parameters()
        self.context.redraw()
        self.dataset_text = dataset_text
        return True

    def load_sample(self, seed: Optional[int] = None) -> str:
        seed = fresh_seed() if seed is None else seed
        text = sample_csv(seed)
        self._replace_dataset(text)
        self._record("load_sample", points=len(self.context.dataset), seed=seed)
        return text

    def set_view_mode(self, mode: Any) -> ViewMode:
        new_mode = self.view.set_mode(mode)
        self._record("view_mode", mode=new_mode.value)
        return new_mode

    def start(self, params_text: Optional[str]) -> bool:
        pairs = parse_parameters(params_text)
        if not pairs:
            return False
        self.engine.load(pairs)
        self.engine.start()
        self._record("start", frames=len(pairs))
        return True

    def pause_or_resume(self) -> None:
        self.engine.toggle()
        self._record("pause_or_resume", state=self.engine.state.value, position=self.engine.position)

    def reset(self) -> None:
        self.engine.reset()
        self._record("reset")

    def set_speed(self, ms: Any) -> int:
        delay = self.engine.set_frame_delay(ms)
        self._record("speed", delay_ms=delay)
        return delay

    def status(self) -> str:
        frame = describe_frame(self.context.parameters, self.context.x0, self.context.counts)
        progress = describe_progress(self.engine.position, len(self.engine.sequence), self.engine.state.value)
        return f"{progress} {frame}"
