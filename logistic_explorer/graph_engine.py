from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import plotly.graph_objects as go

from . import config
from .classifier import DataPoint, QuadrantCounts

Point = Tuple[float, float]
XRange = Tuple[float, float]


class Overlay(Enum):
    """Named layers of the chart, in drawing order."""

    CLASS_0 = "class_0"
    CLASS_1 = "class_1"
    REFERENCE_LINE = "reference_line"
    CURVE = "curve"
    BOUNDARY = "boundary"
    MARKER = "marker"


# Layers that belong to the current parameter pair rather than the dataset.
FRAME_OVERLAYS = (Overlay.CURVE, Overlay.BOUNDARY, Overlay.MARKER)


@dataclass(frozen=True)
class QuadrantLabel:
    x: float
    y: float
    text: str


def sigmoid(z: float) -> float:
    if math.isnan(z):
        return z
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


def generate_x_samples(x_min: float, x_max: float, count: int) -> List[float]:
    if count < 2:
        raise ValueError(f"count must be at least 2, got {count}")
    step = (x_max - x_min) / (count - 1)
    if math.isfinite(step):
        xs = [x_min + i * step for i in range(count)]
    else:
        # Span wider than the largest float: interpolate between the ends instead.
        xs = [x_min * (1 - i / (count - 1)) + x_max * (i / (count - 1)) for i in range(count)]
    xs[-1] = x_max
    return xs


def axis_range(dataset: Sequence[DataPoint]) -> XRange:
    if not dataset:
        return config.DEFAULT_X_RANGE
    xs = [p.x for p in dataset]
    x_min, x_max = min(xs), max(xs)
    span = (x_max - x_min) or config.ZERO_SPAN_FALLBACK
    pad = config.RANGE_PADDING_FRACTION * span
    lo, hi = x_min - pad, x_max + pad
    # Near the float limits the padding is dropped rather than overflowing.
    return (lo if math.isfinite(lo) else x_min), (hi if math.isfinite(hi) else x_max)


def sample_curve(
    slope: float,
    intercept: float,
    x_min: float,
    x_max: float,
    count: int = config.CURVE_SAMPLES,
) -> List[Point]:
    return [(x, sigmoid(slope * x + intercept)) for x in generate_x_samples(x_min, x_max, count)]


def decision_boundary(slope: float, intercept: float, *, eps: float = config.SLOPE_EPS) -> Optional[float]:
    """x where the sigmoid crosses 0.5, or None when it is not defined."""
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        return None
    if abs(slope) < eps:
        return None
    x0 = -intercept / slope
    return x0 if math.isfinite(x0) else None


def reference_line(x_min: float, x_max: float) -> List[Point]:
    return [(x_min, config.REFERENCE_Y), (x_max, config.REFERENCE_Y)]


def boundary_line(x0: float) -> List[Point]:
    return [(x0, config.Y_MIN), (x0, config.Y_MAX)]


def quadrant_label_positions(counts: QuadrantCounts, x0: float, x_range: XRange) -> List[QuadrantLabel]:
    x_min, x_max = x_range
    left = (x_min + x0) / 2
    right = (x0 + x_max) / 2
    upper = config.QUADRANT_UPPER_Y
    lower = config.QUADRANT_LOWER_Y
    return [
        QuadrantLabel(left, upper, f"FN: {counts.false_negative}"),
        QuadrantLabel(left, lower, f"TN: {counts.true_negative}"),
        QuadrantLabel(right, upper, f"TP: {counts.true_positive}"),
        QuadrantLabel(right, lower, f"FP: {counts.false_positive}"),
    ]


def base_traces() -> Dict[Overlay, go.Scatter]:
    return {
        Overlay.CLASS_0: go.Scatter(
            x=[],
            y=[],
            mode="markers",
            name="Class 0 (y=0)",
            marker=dict(config.CLASS_0_MARKER_STYLE),
            hovertemplate="x=%{x:.2f}<br>class 0<extra></extra>",
        ),
        Overlay.CLASS_1: go.Scatter(
            x=[],
            y=[],
            mode="markers",
            name="Class 1 (y=1)",
            marker=dict(config.CLASS_1_MARKER_STYLE),
            hovertemplate="x=%{x:.2f}<br>class 1<extra></extra>",
        ),
        Overlay.REFERENCE_LINE: go.Scatter(
            x=[],
            y=[],
            mode="lines",
            name="y = 0.5",
            line=dict(config.REFERENCE_LINE_STYLE),
            hoverinfo="skip",
        ),
        Overlay.CURVE: go.Scatter(
            x=[],
            y=[],
            mode="lines",
            name="Sigmoid",
            line=dict(config.CURVE_LINE_STYLE),
            hovertemplate="x=%{x:.2f}<br>p=%{y:.3f}<extra></extra>",
        ),
        Overlay.BOUNDARY: go.Scatter(
            x=[],
            y=[],
            mode="lines",
            name="x at y = 0.5",
            line=dict(config.BOUNDARY_LINE_STYLE),
            hoverinfo="skip",
        ),
        Overlay.MARKER: go.Scatter(
            x=[],
            y=[],
            mode="markers",
            name="Threshold marker",
            marker=dict(config.THRESHOLD_MARKER_STYLE),
            hovertemplate="Threshold<br>x=%{x:.2f}<extra></extra>",
            visible=False,
        ),
    }


def build_figure(*, uirevision: str) -> go.Figure:
    fig = go.Figure(data=list(base_traces().values()))
    fig.update_layout(
        height=560,
        margin=dict(l=36, r=16, t=32, b=32),
        xaxis=dict(
            title="x",
            showgrid=True,
            zeroline=True,
            zerolinecolor=config.AXIS_LINE_STYLE["zerolinecolor"],
            range=list(config.DEFAULT_X_RANGE),
        ),
        yaxis=dict(
            title="y",
            showgrid=True,
            zeroline=False,
            range=[config.Y_MIN, config.Y_MAX],
        ),
        legend=dict(orientation="h", y=1.08),
        uirevision=uirevision,
        annotations=[],
    )
    return fig


class FigureSurface:
    """Plotly-backed drawing surface.

    Writes are staged per overlay and only reach the figure on ``redraw()``,
    so a reader never sees half of a frame.
    """

    def __init__(self, *, uirevision: str = config.UI_BASE_TOKEN + "0") -> None:
        self._figure = build_figure(uirevision=uirevision)
        self._index = {overlay: i for i, overlay in enumerate(Overlay)}
        self._pending_points: Dict[Overlay, List[Point]] = {}
        self._pending_visible: Dict[Overlay, bool] = {}
        self._pending_labels: Optional[List[QuadrantLabel]] = None
        self._pending_x_range: Optional[XRange] = None
        self.revision = 0

    @property
    def figure(self) -> go.Figure:
        return self._figure

    def _trace(self, overlay: Overlay) -> go.Scatter:
        return self._figure.data[self._index[overlay]]

    def set_points(self, overlay: Overlay, points: Iterable[Point]) -> None:
        self._pending_points[overlay] = list(points)

    def set_visible(self, overlay: Overlay, visible: bool) -> None:
        self._pending_visible[overlay] = bool(visible)

    def set_annotations(self, labels: Iterable[QuadrantLabel]) -> None:
        self._pending_labels = list(labels)

    def set_x_range(self, x_range: XRange) -> None:
        self._pending_x_range = x_range

    def points(self, overlay: Overlay) -> List[Point]:
        trace = self._trace(overlay)
        return list(zip(trace.x or (), trace.y or ()))

    def is_visible(self, overlay: Overlay) -> bool:
        return self._trace(overlay).visible is not False

    def annotations(self) -> List[QuadrantLabel]:
        return [QuadrantLabel(a.x, a.y, a.text) for a in self._figure.layout.annotations]

    def redraw(self) -> None:
        for overlay, pts in self._pending_points.items():
            trace = self._trace(overlay)
            trace.x = [p[0] for p in pts]
            trace.y = [p[1] for p in pts]
        for overlay, flag in self._pending_visible.items():
            self._trace(overlay).visible = flag
        if self._pending_labels is not None:
            # Assigning replaces the whole list; update_layout would merge element-wise.
            self._figure.layout.annotations = [
                dict(
                    x=label.x,
                    y=label.y,
                    text=label.text,
                    showarrow=False,
                    font=dict(config.QUADRANT_LABEL_FONT),
                )
                for label in self._pending_labels
            ]
        if self._pending_x_range is not None:
            self._figure.layout.xaxis.range = list(self._pending_x_range)
        self._pending_points.clear()
        self._pending_visible.clear()
        self._pending_labels = None
        self._pending_x_range = None
        self.revision += 1
