"""Unit tests for the ReceiptState running receipt."""

import pytest

from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.order import Allocation, Order
from kiosk.domain.model.promotion import InProgress
from kiosk.domain.model.receipt import FreeUnitOffer, PaidItem, ReceiptState
from kiosk.domain.model.value_objects import Money, Quantity

PRICE = Money(1000)


def _order(name: str = "콜라", quantity: int = 3) -> Order:
    return Order(name, Quantity(quantity), InProgress(buy=2, get=1))


class TestRecord:

    def test_records_paid_gift_and_offer(self):
        allocation = Allocation(
            paid_quantity=4, gift_quantity=1, offers_free_unit=True,
            free_unit_quantity=1, promoted=True,
        )
        receipt = ReceiptState().record(_order(quantity=5), allocation, PRICE)

        assert receipt.paid_items == (PaidItem("콜라", 4, PRICE, promoted=True),)
        assert receipt.gift_items == {"콜라": 1}
        assert receipt.free_unit_offers == (FreeUnitOffer("콜라", 1),)
        assert receipt.shortage_items == {}

    def test_records_shortage(self):
        allocation = Allocation(paid_quantity=6, gift_quantity=1, shortage_quantity=4, promoted=True)
        receipt = ReceiptState().record(_order(quantity=7), allocation, PRICE)
        assert receipt.shortage_items == {"콜라": 4}

    def test_zero_gift_not_listed(self):
        receipt = ReceiptState().record(_order("물"), Allocation(paid_quantity=3), Money(500))
        assert receipt.gift_items == {}

    def test_merges_same_product(self):
        allocation = Allocation(paid_quantity=2, gift_quantity=1, promoted=True)
        receipt = (
            ReceiptState()
            .record(_order(), allocation, PRICE)
            .record(_order(), allocation, PRICE)
        )
        assert len(receipt.paid_items) == 1
        assert receipt.paid_items[0].quantity == 4
        assert receipt.gift_items == {"콜라": 2}

    def test_original_snapshot_untouched(self):
        before = ReceiptState()
        after = before.record(_order(), Allocation(paid_quantity=2, gift_quantity=1), PRICE)
        assert before.paid_items == ()
        assert before.gift_items == {}
        assert after is not before


class TestFreeUnitOffers:

    def _receipt(self) -> ReceiptState:
        allocation = Allocation(
            paid_quantity=2, gift_quantity=1, offers_free_unit=True,
            free_unit_quantity=1, promoted=True,
        )
        return ReceiptState().record(Order("오렌지주스", Quantity(3), InProgress(1, 1)), allocation, Money(1800))

    def test_claim_adds_gift_and_clears_offer(self):
        receipt = self._receipt().claim_free_unit("오렌지주스")
        assert receipt.gift_quantity("오렌지주스") == 2
        assert receipt.free_unit_offers == ()

    def test_decline_clears_offer_only(self):
        receipt = self._receipt().decline_free_unit("오렌지주스")
        assert receipt.gift_quantity("오렌지주스") == 1
        assert receipt.free_unit_offers == ()

    def test_claim_without_offer_rejected(self):
        with pytest.raises(ValidationError, match="추가 증정"):
            ReceiptState().claim_free_unit("오렌지주스")


class TestShortageDecisions:

    def _receipt(self, paid: int = 6, shortage: int = 4) -> ReceiptState:
        allocation = Allocation(paid_quantity=paid, gift_quantity=1, shortage_quantity=shortage, promoted=True)
        return ReceiptState().record(_order(quantity=paid + 1), allocation, PRICE)

    def test_accept_keeps_billing(self):
        receipt = self._receipt()
        assert receipt.accept_shortage("콜라") == receipt

    def test_decline_removes_shortage_units(self):
        receipt = self._receipt().decline_shortage("콜라")
        assert receipt.paid_items[0].quantity == 2
        assert receipt.shortage_items == {}
        assert receipt.gift_quantity("콜라") == 1

    def test_decline_drops_item_when_nothing_left(self):
        allocation = Allocation(paid_quantity=4, shortage_quantity=4, promoted=True)
        receipt = ReceiptState().record(_order(quantity=4), allocation, PRICE)
        assert receipt.decline_shortage("콜라").paid_items == ()

    def test_unknown_shortage_rejected(self):
        with pytest.raises(ValidationError, match="재고 부족 상품이 아닙니다"):
            ReceiptState().decline_shortage("콜라")


class TestFlags:

    def test_membership_and_settle(self):
        receipt = ReceiptState().with_membership(True).settle()
        assert receipt.membership_applied
        assert receipt.settled

    def test_sold_quantity_includes_gifts(self):
        allocation = Allocation(paid_quantity=2, gift_quantity=1, promoted=True)
        receipt = ReceiptState().record(_order(), allocation, PRICE)
        assert receipt.sold_quantity(receipt.paid_items[0]) == 3

    def test_unit_price_of_unknown_is_zero(self):
        assert ReceiptState().unit_price_of("콜라") == Money(0)


class TestSettledReceipt:

    def _settled(self) -> ReceiptState:
        allocation = Allocation(
            paid_quantity=2, gift_quantity=1, shortage_quantity=1,
            offers_free_unit=True, free_unit_quantity=1, promoted=True,
        )
        return ReceiptState().record(_order(quantity=3), allocation, PRICE).settle()

    @pytest.mark.parametrize(
        "transition",
        [
            lambda r: r.record(_order(), Allocation(paid_quantity=1), PRICE),
            lambda r: r.claim_free_unit("콜라"),
            lambda r: r.decline_free_unit("콜라"),
            lambda r: r.accept_shortage("콜라"),
            lambda r: r.decline_shortage("콜라"),
            lambda r: r.with_membership(True),
            lambda r: r.settle(),
        ],
    )
    def test_transitions_rejected(self, transition):
        with pytest.raises(ValidationError, match="이미 결제"):
            transition(self._settled())

    def test_queries_still_work(self):
        receipt = self._settled()
        assert receipt.gift_quantity("콜라") == 1
        assert receipt.offer_for("콜라") == FreeUnitOffer("콜라", 1)
