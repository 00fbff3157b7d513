"""Application service: Confirm Shortage use case.

When promotional stock cannot cover an order, the leftover units are
billed at the regular price.  The customer either accepts that or drops
those units from the order.
"""

from __future__ import annotations

import logging

from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.answer_parser import parse_answer

logger = logging.getLogger(__name__)


class ConfirmShortageHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, product_name: str, answer: str) -> bool:
        accepted = parse_answer(answer)
        state = self._session_repo.get()

        if accepted:
            receipt = state.receipt.accept_shortage(product_name)
        else:
            receipt = state.receipt.decline_shortage(product_name)

        self._session_repo.save(state.with_receipt(receipt))
        logger.debug("Shortage for %s %s", product_name, "accepted" if accepted else "dropped")
        return accepted
