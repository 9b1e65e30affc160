"""In-memory store of calculator sessions.

Each session owns one ``Calculator``.  State lives only as long as the
process; nothing is persisted.
"""
from __future__ import annotations

import logging

from calculator import Calculator
from models import _new_id

log = logging.getLogger("calculator.store")


class SessionNotFoundError(Exception):
    """Raised when a session lookup fails."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class SessionStore:
    """In-memory CRUD store for calculator sessions."""

    def __init__(self) -> None:
        self._sessions: dict[str, Calculator] = {}

    def create(self) -> tuple[str, Calculator]:
        """Start a fresh calculator and return its id."""
        session_id = _new_id()
        calculator = Calculator()
        self._sessions[session_id] = calculator
        log.info("Session %s created", session_id)
        return session_id, calculator

    def get(self, session_id: str) -> Calculator:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def ids(self) -> list[str]:
        return list(self._sessions)

    def delete(self, session_id: str) -> Calculator:
        """Remove a session and return its calculator."""
        calculator = self.get(session_id)
        del self._sessions[session_id]
        log.info("Session %s deleted", session_id)
        return calculator

    def count(self) -> int:
        return len(self._sessions)

    def clear(self) -> None:
        """Remove all sessions (useful for testing)."""
        self._sessions.clear()
