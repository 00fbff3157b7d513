"""Application service: Start Purchase use case.

Asked after a receipt is printed.  A yes clears orders and receipt but
keeps the stock as the previous purchases left it.
"""

from __future__ import annotations

import logging

from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.answer_parser import parse_answer

logger = logging.getLogger(__name__)


class StartPurchaseHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, answer: str) -> bool:
        again = parse_answer(answer)
        if again:
            self._session_repo.save(self._session_repo.get().new_purchase())
            logger.debug("New purchase started")
        return again
