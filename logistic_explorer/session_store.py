"""Per-tab sessions for the Dash front end, capped at a fixed count."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

from . import config
from .session import ExplorerSession

logger = logging.getLogger(__name__)

SessionEntry = Tuple[ExplorerSession, threading.Lock]


class SessionStore:
    """Maps a browser session id to its ``ExplorerSession`` and lock.

    Entries are kept in least-recently-used order. Once ``capacity`` is
    exceeded the oldest entry is dropped and its session torn down.
    """

    def __init__(
        self,
        capacity: int = config.MAX_SESSIONS,
        factory: Optional[Callable[[str], ExplorerSession]] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._factory = factory or self._default_factory
        self._entries: Dict[str, SessionEntry] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _default_factory(session_id: str) -> ExplorerSession:
        return ExplorerSession.create(uirevision=f"{config.UI_BASE_TOKEN}{session_id}")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._entries

    def get(self, session_id: str) -> SessionEntry:
        evicted = []
        with self._lock:
            entry = self._entries.pop(session_id, None)
            if entry is None:
                entry = (self._factory(session_id), threading.Lock())
                logger.debug("Created session %s", session_id)
            # Re-insert so the dict order stays least-recently-used first.
            self._entries[session_id] = entry
            while len(self._entries) > self.capacity:
                oldest = next(iter(self._entries))
                evicted.append((oldest, self._entries.pop(oldest)))

        for old_id, (session, lock) in evicted:
            with lock:
                session.teardown()
            logger.info("Evicted idle session %s", old_id)
        return entry
