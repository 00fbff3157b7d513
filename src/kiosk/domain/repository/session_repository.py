"""Abstract repository for the current SessionState snapshot."""

from __future__ import annotations

from abc import ABC, abstractmethod

from kiosk.domain.model.session import SessionState


class SessionRepository(ABC):

    @abstractmethod
    def get(self) -> SessionState:
        """Return the current snapshot."""

    @abstractmethod
    def save(self, state: SessionState) -> None:
        """Replace the current snapshot wholesale."""
