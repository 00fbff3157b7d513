"""Domain service: Promotion Resolver.

Decides which PromotionState applies to a product today.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from kiosk.domain.exceptions import CatalogIntegrityError
from kiosk.domain.model.product import Catalog
from kiosk.domain.model.promotion import (
    InProgress,
    NoPromotion,
    NotInProgress,
    PromotionState,
)
from kiosk.domain.repository.promotion_repository import PromotionRepository


class PromotionResolver:

    def __init__(
        self,
        promotion_repo: PromotionRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._promotion_repo = promotion_repo
        self._clock = clock

    def resolve(self, name: str, catalog: Catalog) -> PromotionState:
        promotion_name = catalog.promotion_of(name)
        if promotion_name is None:
            return NoPromotion()

        promotion = self._promotion_repo.get_by_name(promotion_name)
        if promotion is None:
            raise CatalogIntegrityError(
                f"Product '{name}' links unknown promotion '{promotion_name}'"
            )

        if not promotion.is_active(self._clock()):
            return NotInProgress()
        return InProgress(buy=promotion.buy, get=promotion.get)
