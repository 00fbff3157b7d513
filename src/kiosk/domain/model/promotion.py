"""Promotions and the state a promotion can be in for a given order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from kiosk.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Promotion:
    """A "buy ``buy`` get ``get`` free" offer valid between two dates (inclusive)."""

    name: str
    buy: int
    get: int
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.buy < 1 or self.get < 1:
            raise ValidationError(
                f"Promotion '{self.name}' needs buy and get of at least 1"
            )
        if self.end_date < self.start_date:
            raise ValidationError(
                f"Promotion '{self.name}' ends before it starts"
            )

    def is_active(self, today: date) -> bool:
        return self.start_date <= today <= self.end_date


# ---------------------------------------------------------------------------
# PromotionState: NoPromotion | NotInProgress | InProgress
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoPromotion:
    """The product has no promotion linked to it."""


@dataclass(frozen=True)
class NotInProgress:
    """A promotion is linked but today is outside its date range."""


@dataclass(frozen=True)
class InProgress:
    buy: int
    get: int

    @property
    def bundle_size(self) -> int:
        return self.buy + self.get


PromotionState = NoPromotion | NotInProgress | InProgress
