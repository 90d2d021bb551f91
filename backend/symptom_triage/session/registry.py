"""In-process registry of live screening sessions."""
from __future__ import annotations

import threading
import time
from typing import Callable

from ..core.errors import SessionNotFoundError
from ..core.logging_utils import log_event
from .controller import Session, SessionController

_COMPONENT = "session_registry"

DEFAULT_IDLE_TTL_SECONDS = 1800
DEFAULT_MAX_SESSIONS = 1000


class SessionRegistry:
    """Sessions keyed by id for a multi-user server.

    Sessions never share mutable state. ``lock_for`` hands out one lock per
    session so a transport can serialize calls against the same session.

    A session not touched for ``idle_ttl_seconds`` expires, and when
    ``max_sessions`` are live the least recently touched one is evicted to
    make room. Expired and evicted sessions are discarded through the
    controller, so their stored answers go with them.
    """

    def __init__(
        self,
        controller: SessionController,
        *,
        idle_ttl_seconds: float = DEFAULT_IDLE_TTL_SECONDS,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if idle_ttl_seconds <= 0:
            raise ValueError("idle_ttl_seconds must be positive")
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self.controller = controller
        self.idle_ttl_seconds = idle_ttl_seconds
        self.max_sessions = max_sessions
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = {}
        self._session_locks: dict[str, threading.Lock] = {}
        self._touched: dict[str, float] = {}

    def create(self, owner_id: str | None = None) -> Session:
        session = self.controller.start(owner_id=owner_id)
        with self._lock:
            now = self._clock()
            removed = self._pop_expired(now)
            while len(self._sessions) >= self.max_sessions:
                oldest_id = min(self._touched, key=self._touched.get)
                removed.append((self._pop(oldest_id), "capacity"))
            self._sessions[session.session_id] = session
            self._session_locks[session.session_id] = threading.Lock()
            self._touched[session.session_id] = now
        self._discard_removed(removed)
        return session

    def get(self, session_id: str) -> Session:
        with self._lock:
            removed = self._pop_expired(self._clock())
            session = self._sessions.get(session_id)
            if session is not None:
                self._touched[session_id] = self._clock()
        self._discard_removed(removed)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def lock_for(self, session_id: str) -> threading.Lock:
        with self._lock:
            removed = self._pop_expired(self._clock())
            lock = self._session_locks.get(session_id)
        self._discard_removed(removed)
        if lock is None:
            raise SessionNotFoundError(session_id)
        return lock

    def reset(self, session_id: str) -> Session:
        fresh = self.controller.reset(self.get(session_id))
        with self._lock:
            if session_id not in self._sessions:
                raise SessionNotFoundError(session_id)
            self._sessions[session_id] = fresh
            self._touched[session_id] = self._clock()
        return fresh

    def discard(self, session_id: str) -> None:
        with self._lock:
            removed = self._pop(session_id)
        if removed is None:
            raise SessionNotFoundError(session_id)
        self.controller.discard(removed)

    def prune(self) -> int:
        """Drop expired sessions now; returns how many were removed."""
        with self._lock:
            removed = self._pop_expired(self._clock())
        self._discard_removed(removed)
        return len(removed)

    def _pop(self, session_id: str) -> Session | None:
        self._session_locks.pop(session_id, None)
        self._touched.pop(session_id, None)
        return self._sessions.pop(session_id, None)

    def _pop_expired(self, now: float) -> list[tuple[Session, str]]:
        expired = [
            session_id
            for session_id, touched in self._touched.items()
            if now - touched >= self.idle_ttl_seconds
        ]
        return [(self._pop(session_id), "expired") for session_id in expired]

    def _discard_removed(self, removed: list[tuple[Session, str]]) -> None:
        for session, reason in removed:
            log_event(
                component=_COMPONENT,
                event="session_evicted",
                session_id=session.session_id,
                details={"reason": reason},
            )
            self.controller.discard(session, reason=reason)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions
