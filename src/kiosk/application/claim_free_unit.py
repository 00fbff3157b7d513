"""Application service: Claim Free Unit use case.

The customer bought exactly ``buy`` units of an unfinished bundle and is
asked whether to take the free units too.
"""

from __future__ import annotations

import logging

from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.answer_parser import parse_answer

logger = logging.getLogger(__name__)


class ClaimFreeUnitHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, product_name: str, answer: str) -> bool:
        """Apply the customer's answer; return True if the units were taken."""
        accepted = parse_answer(answer)
        state = self._session_repo.get()

        if accepted:
            receipt = state.receipt.claim_free_unit(product_name)
        else:
            receipt = state.receipt.decline_free_unit(product_name)

        self._session_repo.save(state.with_receipt(receipt))
        logger.debug("Free unit offer for %s %s", product_name, "claimed" if accepted else "declined")
        return accepted
