"""Order and Allocation.

An Order is what the customer asked for; an Allocation is how the
allocation engine split it into paid units, free gifts and units that
fall back to regular stock.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kiosk.domain.model.promotion import NoPromotion, PromotionState
from kiosk.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class Order:
    """A validated request for one product.

    Only ``with_promotion()`` produces a changed copy; the name and
    quantity never change after validation.
    """

    name: str
    quantity: Quantity
    promotion: PromotionState = field(default_factory=NoPromotion)

    def with_promotion(self, promotion: PromotionState) -> Order:
        return replace(self, promotion=promotion)


@dataclass(frozen=True)
class Allocation:
    """Result of allocating one order against stock and promotion.

    ``paid_quantity`` includes the ``shortage_quantity`` units billed at the
    regular price; ``paid_quantity + gift_quantity`` always equals the
    ordered quantity.
    """

    paid_quantity: int
    gift_quantity: int = 0
    shortage_quantity: int = 0
    offers_free_unit: bool = False
    free_unit_quantity: int = 0
    promoted: bool = False

    @property
    def promotional_quantity(self) -> int:
        """Units taken from promotional stock (bundled paid units + gifts)."""
        if not self.promoted:
            return 0
        return self.paid_quantity - self.shortage_quantity + self.gift_quantity
