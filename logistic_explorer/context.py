"""Chart state shared by the view-mode controller and the animation engine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from . import config
from .classifier import Dataset, ParameterPair, QuadrantCounts, classify
from .graph_engine import (
    FRAME_OVERLAYS,
    FigureSurface,
    Overlay,
    XRange,
    boundary_line,
    decision_boundary,
    quadrant_label_positions,
    reference_line,
    sample_curve,
)

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    SIGMOID = "sigmoid"
    THRESHOLD = "threshold"


@dataclass
class OverlayContext:
    surface: FigureSurface
    dataset: Dataset = ()
    x_range: XRange = config.DEFAULT_X_RANGE
    view_mode: ViewMode = ViewMode.SIGMOID
    parameters: Optional[ParameterPair] = None
    x0: Optional[float] = None
    counts: Optional[QuadrantCounts] = field(default=None)

    def replace_dataset(self, dataset: Dataset, x_range: XRange) -> None:
        self.dataset = dataset
        self.x_range = x_range
        self.surface.set_x_range(x_range)
        self.surface.set_points(Overlay.REFERENCE_LINE, reference_line(*x_range))
        self.project_points()
        self._refresh_counts()

    def project_points(self) -> None:
        pinned = self.view_mode is ViewMode.THRESHOLD
        for cls_value, overlay in ((0, Overlay.CLASS_0), (1, Overlay.CLASS_1)):
            self.surface.set_points(
                overlay,
                [(p.x, 0 if pinned else p.cls) for p in self.dataset if p.cls == cls_value],
            )

    def show_parameters(self, pair: ParameterPair) -> None:
        """Stage the curve, boundary and marker for ``pair``."""
        self.parameters = pair
        x_min, x_max = self.x_range
        if math.isfinite(pair.slope) and math.isfinite(pair.intercept):
            curve = sample_curve(pair.slope, pair.intercept, x_min, x_max)
        else:
            curve = []
        self.surface.set_points(Overlay.CURVE, curve)

        self.x0 = decision_boundary(pair.slope, pair.intercept)
        if self.x0 is None:
            logger.debug("No decision boundary for slope=%r intercept=%r", pair.slope, pair.intercept)
            self.surface.set_points(Overlay.BOUNDARY, [])
            self.surface.set_points(Overlay.MARKER, [])
        else:
            self.surface.set_points(Overlay.BOUNDARY, boundary_line(self.x0))
            self.surface.set_points(Overlay.MARKER, [(self.x0, 0.0)])
        self._refresh_counts()

    def clear_parameters(self, overlays=FRAME_OVERLAYS) -> None:
        for overlay in overlays:
            self.surface.set_points(overlay, [])
        if Overlay.BOUNDARY in overlays:
            self.parameters = None
            self.x0 = None
        self._refresh_counts()

    def _refresh_counts(self) -> None:
        self.counts = classify(self.dataset, self.x0)
        labels = []
        if self.view_mode is ViewMode.SIGMOID and self.counts is not None and self.dataset:
            labels = quadrant_label_positions(self.counts, self.x0, self.x_range)
        self.surface.set_annotations(labels)

    def redraw(self) -> None:
        self.surface.redraw()
