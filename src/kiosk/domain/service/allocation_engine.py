"""Domain service: Stock & Promotion Allocation.

Splits an order into paid units, free gift units and, when promotional
stock runs short, units that must be billed at the regular price from
regular stock.

Two paths for an active "buy B get G" promotion with promotional stock S
and ordered quantity Q:

  * S >= Q: whole bundles of B+G give G free each; the remainder is paid.
    A remainder of exactly B means the customer is one step away from
    another free G, which is offered back to them.
  * S <  Q: shortage = S % (B+G) + (Q - S) units cannot be bundled.
    They are billed at the regular price; the rest is bundled as usual.
"""

from __future__ import annotations

from kiosk.domain.model.order import Allocation
from kiosk.domain.model.promotion import (
    InProgress,
    NoPromotion,
    NotInProgress,
    PromotionState,
)


def allocate(quantity: int, promotion_stock: int, promotion: PromotionState) -> Allocation:
    """Allocate ``quantity`` units against ``promotion_stock`` under ``promotion``."""
    if quantity <= 0:
        raise ValueError("quantity must be positive")
    if promotion_stock < 0:
        raise ValueError("promotion_stock cannot be negative")

    match promotion:
        case InProgress() if is_promotion_stock_enough(quantity, promotion_stock):
            return _allocate_with_promotion(quantity, promotion_stock, promotion)
        case InProgress():
            return _allocate_with_shortage(quantity, promotion_stock, promotion)
        case NoPromotion() | NotInProgress():
            return Allocation(paid_quantity=quantity)
    raise TypeError(f"Unknown promotion state: {promotion!r}")


def is_promotion_stock_enough(quantity: int, promotion_stock: int) -> bool:
    return promotion_stock >= quantity


def shortage_quantity(quantity: int, promotion_stock: int, promotion: InProgress) -> int:
    """Units of the order that cannot take part in bundling."""
    return promotion_stock % promotion.bundle_size + (quantity - promotion_stock)


def _allocate_with_promotion(
    quantity: int, promotion_stock: int, promotion: InProgress
) -> Allocation:
    bundles, remainder = divmod(quantity, promotion.bundle_size)
    # The extra free units must also come out of promotional stock.
    offers_free_unit = (
        remainder == promotion.buy
        and promotion_stock >= quantity + promotion.get
    )
    return Allocation(
        paid_quantity=bundles * promotion.buy + remainder,
        gift_quantity=bundles * promotion.get,
        offers_free_unit=offers_free_unit,
        free_unit_quantity=promotion.get if offers_free_unit else 0,
        promoted=True,
    )


def _allocate_with_shortage(
    quantity: int, promotion_stock: int, promotion: InProgress
) -> Allocation:
    shortage = shortage_quantity(quantity, promotion_stock, promotion)
    max_bundles = (quantity - shortage) // promotion.bundle_size
    return Allocation(
        paid_quantity=max_bundles * promotion.buy + shortage,
        gift_quantity=max_bundles * promotion.get,
        shortage_quantity=shortage,
        promoted=True,
    )
