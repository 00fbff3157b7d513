"""Application service: Apply Membership use case."""

from __future__ import annotations

from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.answer_parser import parse_answer


class ApplyMembershipHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self, answer: str) -> bool:
        applied = parse_answer(answer)
        state = self._session_repo.get()
        self._session_repo.save(state.with_receipt(state.receipt.with_membership(applied)))
        return applied
