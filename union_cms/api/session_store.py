# This file implements the server-side admin session store.
# It exists so login state lives in one injected object instead of a process-wide global.
# Session ids are random URL-safe tokens; the cookie carries only the id.
# Expired sessions are dropped when looked up and swept on every new login.

from __future__ import annotations

import secrets
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class AdminSession:
    session_id: str
    admin_id: int
    username: str
    expires_at: float


class SessionStore:
    """Thread-safe in-memory mapping of session ids to admin identities."""

    def __init__(self, *, max_age_seconds: int, clock: Callable[[], float] = time.time) -> None:
        self._max_age_seconds = max_age_seconds
        self._clock = clock
        self._sessions: dict[str, AdminSession] = {}
        self._lock = threading.Lock()

    @property
    def max_age_seconds(self) -> int:
        return self._max_age_seconds

    def create(self, *, admin_id: int, username: str) -> AdminSession:
        now = self._clock()
        session = AdminSession(
            session_id=secrets.token_urlsafe(32),
            admin_id=admin_id,
            username=username,
            expires_at=now + self._max_age_seconds,
        )
        with self._lock:
            self._purge_expired_locked(now)
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str | None) -> AdminSession | None:
        if not session_id:
            return None
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if session.expires_at <= self._clock():
                del self._sessions[session_id]
                return None
            return session

    def destroy(self, session_id: str | None) -> bool:
        if not session_id:
            return False
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            return self._purge_expired_locked(now)

    def _purge_expired_locked(self, now: float) -> int:
        expired = [key for key, value in self._sessions.items() if value.expires_at <= now]
        for key in expired:
            del self._sessions[key]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
