"""Timer abstraction for the animation loop.

A scheduler holds at most one repeating tick. ``schedule`` replaces whatever
was installed before, so two tick streams can never coexist.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Tick = Callable[[], None]


class Scheduler:
    def __init__(self) -> None:
        self._tick: Optional[Tick] = None
        self._delay_ms: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._tick is not None

    @property
    def delay_ms(self) -> Optional[int]:
        return self._delay_ms

    def schedule(self, delay_ms: int, tick: Tick) -> None:
        self.cancel()
        self._tick = tick
        self._delay_ms = int(delay_ms)
        logger.debug("Tick scheduled every %d ms", self._delay_ms)

    def cancel(self) -> None:
        if self._tick is not None:
            logger.debug("Tick canceled")
        self._tick = None
        self._delay_ms = None


class PolledScheduler(Scheduler):
    """Scheduler whose ticks are fired by an outside clock.

    The Dash app calls ``fire()`` from a ``dcc.Interval`` callback; the
    Streamlit page calls it from its sleep loop.
    """

    def fire(self) -> bool:
        tick = self._tick
        if tick is None:
            return False
        tick()
        return True
