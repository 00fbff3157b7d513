"""In-memory implementation of SessionRepository.

The kiosk keeps nothing across runs, so the current snapshot simply
lives in this object for the lifetime of the process.
"""

from __future__ import annotations

from kiosk.domain.model.session import SessionState
from kiosk.domain.repository.session_repository import SessionRepository


class InMemorySessionRepository(SessionRepository):

    def __init__(self, initial: SessionState) -> None:
        self._state = initial

    def get(self) -> SessionState:
        return self._state

    def save(self, state: SessionState) -> None:
        self._state = state
