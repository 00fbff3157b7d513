"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from kiosk.application.dto import StockLineDTO
from kiosk.domain.repository.session_repository import SessionRepository


class ShowStockHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> list[StockLineDTO]:
        catalog = self._session_repo.get().catalog
        return [
            StockLineDTO(
                product_name=row.name,
                price=str(row.price),
                quantity=row.quantity,
                promotion=row.promotion,
            )
            for row in catalog.rows
        ]
