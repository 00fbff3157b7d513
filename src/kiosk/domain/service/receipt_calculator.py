"""Domain service: Receipt totals.

Gifts count towards the total quantity and price and are then taken
back out as the event discount.  The membership discount only applies
to what was bought without a running promotion, plus shortage units
billed at the regular price.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from kiosk.domain.model.receipt import ReceiptState
from kiosk.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MEMBERSHIP_RATE = Decimal("0.3")
MEMBERSHIP_DISCOUNT_CAP = Money(8000)


@dataclass(frozen=True)
class ReceiptTotals:
    total_quantity: int
    total_price: Money
    event_discount: Money
    membership_discount: Money
    final_price: Money


def summarize(receipt: ReceiptState) -> ReceiptTotals:
    total_quantity = 0
    total_price = Money.zero()
    for item in receipt.paid_items:
        sold = receipt.sold_quantity(item)
        total_quantity += sold
        total_price = total_price + item.unit_price * sold

    event_discount = event_discount_of(receipt)
    membership_discount = membership_discount_of(receipt)

    return ReceiptTotals(
        total_quantity=total_quantity,
        total_price=total_price,
        event_discount=event_discount,
        membership_discount=membership_discount,
        final_price=total_price - event_discount - membership_discount,
    )


def event_discount_of(receipt: ReceiptState) -> Money:
    """Value of everything handed out for free."""
    result = Money.zero()
    for name, quantity in receipt.gift_items.items():
        result = result + receipt.unit_price_of(name) * quantity
    return result


def regular_price_base(receipt: ReceiptState) -> Money:
    """Amount the membership discount is computed from."""
    result = Money.zero()
    for item in receipt.paid_items:
        if not item.promoted:
            result = result + item.line_total
    for name, quantity in receipt.shortage_items.items():
        result = result + receipt.unit_price_of(name) * quantity
    return result


def membership_discount_of(receipt: ReceiptState) -> Money:
    if not receipt.membership_applied:
        return Money.zero()
    discount = regular_price_base(receipt).percent(MEMBERSHIP_RATE)
    return min(discount, MEMBERSHIP_DISCOUNT_CAP)
