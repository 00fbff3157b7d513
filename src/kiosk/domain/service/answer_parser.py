"""Domain service: yes/no answers to kiosk prompts."""

from __future__ import annotations

from kiosk.domain.exceptions import InvalidAnswerError

YES = "Y"
NO = "N"


def parse_answer(text: str) -> bool:
    """Return True for Y, False for N.

    Case and any whitespace are ignored, so ``" y "`` is a yes.
    """
    normalized = "".join(text.split()).upper()
    if normalized == YES:
        return True
    if normalized == NO:
        return False
    raise InvalidAnswerError("잘못된 입력입니다. 다시 입력해 주세요.")
