"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the file-backed
repositories but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from kiosk.domain.model.product import Catalog
from kiosk.domain.model.promotion import Promotion
from kiosk.domain.model.session import SessionState
from kiosk.domain.repository.promotion_repository import PromotionRepository
from kiosk.domain.repository.session_repository import SessionRepository


class FakePromotionRepository(PromotionRepository):

    def __init__(self, promotions: list[Promotion] | None = None) -> None:
        self._store: dict[str, Promotion] = {}
        for p in promotions or []:
            self._store[p.name] = p

    def get_by_name(self, name: str) -> Promotion | None:
        return self._store.get(name)


class FakeSessionRepository(SessionRepository):

    def __init__(self, catalog: Catalog) -> None:
        self._state = SessionState(catalog=catalog)
        self.save_count = 0

    def get(self) -> SessionState:
        return self._state

    def save(self, state: SessionState) -> None:
        self._state = state
        self.save_count += 1
