"""Running receipt of one checkout session.

ReceiptState is an immutable snapshot.  Every operation returns a new
instance; the previous one stays valid, so a failed step never leaves a
half-updated receipt behind.

Once settled, the receipt is closed: every transition raises ValidationError.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.order import Allocation, Order
from kiosk.domain.model.value_objects import Money

SETTLED_MESSAGE = "이미 결제가 완료되었습니다. 새 구매를 시작해 주세요."


@dataclass(frozen=True)
class PaidItem:
    name: str
    quantity: int
    unit_price: Money
    promoted: bool = False

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class FreeUnitOffer:
    """The customer may take ``quantity`` more units of ``name`` for free."""

    name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptState:
    paid_items: tuple[PaidItem, ...] = ()
    gift_items: dict[str, int] = field(default_factory=dict)
    shortage_items: dict[str, int] = field(default_factory=dict)
    free_unit_offers: tuple[FreeUnitOffer, ...] = ()
    membership_applied: bool = False
    settled: bool = False

    # --- Transitions ----------------------------------------------------------

    def record(self, order: Order, allocation: Allocation, unit_price: Money) -> ReceiptState:
        """Add one allocated order to the receipt."""
        self._assert_open()
        paid_items = list(self.paid_items)
        if allocation.paid_quantity > 0:
            existing = self._find_paid(order.name)
            if existing is None:
                paid_items.append(
                    PaidItem(
                        name=order.name,
                        quantity=allocation.paid_quantity,
                        unit_price=unit_price,
                        promoted=allocation.promoted,
                    )
                )
            else:
                paid_items[paid_items.index(existing)] = replace(
                    existing, quantity=existing.quantity + allocation.paid_quantity
                )

        gift_items = dict(self.gift_items)
        if allocation.gift_quantity > 0:
            gift_items[order.name] = gift_items.get(order.name, 0) + allocation.gift_quantity

        shortage_items = dict(self.shortage_items)
        if allocation.shortage_quantity > 0:
            shortage_items[order.name] = (
                shortage_items.get(order.name, 0) + allocation.shortage_quantity
            )

        offers = tuple(o for o in self.free_unit_offers if o.name != order.name)
        if allocation.offers_free_unit:
            offers += (FreeUnitOffer(order.name, allocation.free_unit_quantity),)

        return replace(
            self,
            paid_items=tuple(paid_items),
            gift_items=gift_items,
            shortage_items=shortage_items,
            free_unit_offers=offers,
        )

    def claim_free_unit(self, name: str) -> ReceiptState:
        self._assert_open()
        offer = self.offer_for(name)
        gift_items = dict(self.gift_items)
        gift_items[name] = gift_items.get(name, 0) + offer.quantity
        return replace(
            self,
            gift_items=gift_items,
            free_unit_offers=self._offers_without(name),
        )

    def decline_free_unit(self, name: str) -> ReceiptState:
        self._assert_open()
        self.offer_for(name)
        return replace(self, free_unit_offers=self._offers_without(name))

    def accept_shortage(self, name: str) -> ReceiptState:
        self._assert_open()
        self.shortage_for(name)
        return self

    def decline_shortage(self, name: str) -> ReceiptState:
        """Drop the regular-price units from the order altogether."""
        self._assert_open()
        shortage = self.shortage_for(name)
        paid_items = []
        for item in self.paid_items:
            if item.name == name:
                remaining = item.quantity - shortage
                if remaining <= 0:
                    continue
                item = replace(item, quantity=remaining)
            paid_items.append(item)
        shortage_items = {k: v for k, v in self.shortage_items.items() if k != name}
        return replace(self, paid_items=tuple(paid_items), shortage_items=shortage_items)

    def with_membership(self, applied: bool) -> ReceiptState:
        self._assert_open()
        return replace(self, membership_applied=applied)

    def settle(self) -> ReceiptState:
        self._assert_open()
        return replace(self, settled=True)

    # --- Queries --------------------------------------------------------------

    def offer_for(self, name: str) -> FreeUnitOffer:
        for offer in self.free_unit_offers:
            if offer.name == name:
                return offer
        raise ValidationError(f"{name}에 대한 추가 증정 안내가 없습니다.")

    def shortage_for(self, name: str) -> int:
        if name not in self.shortage_items:
            raise ValidationError(f"{name}은(는) 프로모션 재고 부족 상품이 아닙니다.")
        return self.shortage_items[name]

    def gift_quantity(self, name: str) -> int:
        return self.gift_items.get(name, 0)

    def sold_quantity(self, item: PaidItem) -> int:
        """Units leaving the shelf for a paid item: paid plus free."""
        return item.quantity + self.gift_quantity(item.name)

    def unit_price_of(self, name: str) -> Money:
        item = self._find_paid(name)
        return item.unit_price if item is not None else Money.zero()

    # --- Internal helpers -----------------------------------------------------

    def _assert_open(self) -> None:
        if self.settled:
            raise ValidationError(SETTLED_MESSAGE)

    def _find_paid(self, name: str) -> PaidItem | None:
        for item in self.paid_items:
            if item.name == name:
                return item
        return None

    def _offers_without(self, name: str) -> tuple[FreeUnitOffer, ...]:
        return tuple(o for o in self.free_unit_offers if o.name != name)
