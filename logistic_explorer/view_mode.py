from __future__ import annotations

import logging
from typing import Any

from .context import OverlayContext, ViewMode
from .graph_engine import Overlay

logger = logging.getLogger(__name__)

__all__ = ["ViewMode", "ViewModeController", "coerce_view_mode"]


def coerce_view_mode(value: Any) -> ViewMode:
    if isinstance(value, ViewMode):
        return value
    try:
        return ViewMode(str(value).strip().lower())
    except ValueError:
        return ViewMode.SIGMOID


class ViewModeController:
    """Switches between the sigmoid view and the collapsed threshold view.

    Only the projection changes: points move between y=cls and y=0 and the
    visible layers swap. Classification is left untouched.
    """

    def __init__(self, context: OverlayContext) -> None:
        self.context = context

    @property
    def mode(self) -> ViewMode:
        return self.context.view_mode

    def apply(self) -> None:
        """Stage layer visibility and point positions for the current mode."""
        threshold = self.context.view_mode is ViewMode.THRESHOLD
        surface = self.context.surface
        surface.set_visible(Overlay.CURVE, not threshold)
        surface.set_visible(Overlay.REFERENCE_LINE, not threshold)
        surface.set_visible(Overlay.BOUNDARY, not threshold)
        surface.set_visible(Overlay.MARKER, threshold)
        self.context.project_points()

    def set_mode(self, mode: Any) -> ViewMode:
        new_mode = coerce_view_mode(mode)
        if new_mode is not self.context.view_mode:
            logger.info("View mode %s -> %s", self.context.view_mode.value, new_mode.value)
        self.context.view_mode = new_mode
        self.apply()
        # Stale curve and marker from the previous mode are dropped.
        self.context.clear_parameters((Overlay.CURVE, Overlay.MARKER))
        self.context.redraw()
        return new_mode
