"""
In-process storage for per-browser sessions.

The signed session cookie only carries an opaque id; the state itself
(which may hold a large PitchResult) stays on the server. Browser sessions
never see each other's state. A session untouched for ``idle_seconds`` is
evicted; the browser that owned it gets a fresh one on its next request.
"""

import logging
import secrets
import threading
import time
from typing import Callable

from pitch_expert.core.i18n import Language
from pitch_expert.schemas.session import PitchSession

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, idle_seconds: float = 3600.0, clock: Callable[[], float] = time.monotonic):
        self.idle_seconds = idle_seconds
        self.clock = clock
        self._sessions: dict[str, PitchSession] = {}
        self._last_seen: dict[str, float] = {}
        self._lock = threading.Lock()

    def _prune(self, now: float) -> None:
        expired = [sid for sid, seen in self._last_seen.items() if now - seen >= self.idle_seconds]
        for sid in expired:
            del self._sessions[sid]
            del self._last_seen[sid]
        if expired:
            logger.debug("Evicted %d idle session(s)", len(expired))

    def get(self, session_id: str | None) -> PitchSession | None:
        """Return the live session for *session_id* and mark it as seen."""
        now = self.clock()
        with self._lock:
            self._prune(now)
            if session_id is None or session_id not in self._sessions:
                return None
            self._last_seen[session_id] = now
            return self._sessions[session_id]

    def create(self, language: Language) -> PitchSession:
        session = PitchSession(id=secrets.token_urlsafe(16), language=language)
        now = self.clock()
        with self._lock:
            self._prune(now)
            self._sessions[session.id] = session
            self._last_seen[session.id] = now
        logger.debug("Created session %s (language=%s)", session.id, language.value)
        return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
