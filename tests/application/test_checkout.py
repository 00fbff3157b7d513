"""Integration tests for the Checkout, StartPurchase and ShowStock use cases."""

from datetime import date

import pytest

from kiosk.application.apply_membership import ApplyMembershipHandler
from kiosk.application.checkout import CheckoutHandler
from kiosk.application.dto import GiftLineDTO, ReceiptLineDTO
from kiosk.application.place_order import PlaceOrderHandler
from kiosk.application.show_stock import ShowStockHandler
from kiosk.application.start_purchase import StartPurchaseHandler
from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.product import Catalog, ProductRow
from kiosk.domain.model.promotion import Promotion
from kiosk.domain.model.value_objects import Money
from tests.fakes import FakePromotionRepository, FakeSessionRepository


def _setup() -> tuple[PlaceOrderHandler, FakeSessionRepository]:
    session_repo = FakeSessionRepository(Catalog((
        ProductRow("콜라", Money(1000), 10, "탄산2+1"),
        ProductRow("콜라", Money(1000), 10),
        ProductRow("에너지바", Money(2000), 5),
        ProductRow("정식도시락", Money(6400), 8),
    )))
    promotion_repo = FakePromotionRepository([
        Promotion("탄산2+1", 2, 1, date(2026, 1, 1), date(2026, 12, 31)),
    ])
    handler = PlaceOrderHandler(session_repo, promotion_repo, clock=lambda: date(2026, 10, 16))
    return handler, session_repo


class TestCheckout:

    def test_receipt_with_promotion_and_membership(self):
        place_order, repo = _setup()
        place_order.handle("[콜라-3],[에너지바-5]")
        ApplyMembershipHandler(repo).handle("Y")

        dto = CheckoutHandler(repo).handle()

        assert dto.items == [
            ReceiptLineDTO("콜라", 3, "3,000"),
            ReceiptLineDTO("에너지바", 5, "10,000"),
        ]
        assert dto.gifts == [GiftLineDTO("콜라", 1)]
        assert dto.total_quantity == 8
        assert dto.total_price == "13,000"
        assert dto.event_discount == "1,000"
        assert dto.membership_discount == "3,000"
        assert dto.final_price == "9,000"

    def test_stock_deducted(self):
        place_order, repo = _setup()
        place_order.handle("[콜라-3],[에너지바-5]")
        CheckoutHandler(repo).handle()

        catalog = repo.get().catalog
        assert catalog.promotion_stock("콜라") == 7
        assert catalog.regular_stock("콜라") == 10
        assert catalog.is_depleted("에너지바")

    def test_shortage_stock_deducted_from_regular_row(self):
        place_order, repo = _setup()
        place_order.handle("[콜라-12]")
        CheckoutHandler(repo).handle()

        catalog = repo.get().catalog
        assert catalog.promotion_stock("콜라") == 0
        assert catalog.regular_stock("콜라") == 8

    def test_membership_cap(self):
        place_order, repo = _setup()
        place_order.handle("[정식도시락-8]")
        ApplyMembershipHandler(repo).handle("Y")
        dto = CheckoutHandler(repo).handle()
        assert dto.membership_discount == "8,000"
        assert dto.final_price == "43,200"

    def test_empty_receipt_is_all_zero(self):
        _, repo = _setup()
        dto = CheckoutHandler(repo).handle()
        assert dto.items == []
        assert dto.gifts == []
        assert dto.total_quantity == 0
        assert (dto.total_price, dto.event_discount, dto.membership_discount, dto.final_price) == (
            "0", "0", "0", "0",
        )

    def test_cannot_check_out_twice(self):
        place_order, repo = _setup()
        place_order.handle("[에너지바-1]")
        CheckoutHandler(repo).handle()
        with pytest.raises(ValidationError, match="이미 결제"):
            CheckoutHandler(repo).handle()
        assert repo.get().catalog.regular_stock("에너지바") == 4


class TestStartPurchase:

    def test_yes_resets_receipt_and_keeps_stock(self):
        place_order, repo = _setup()
        place_order.handle("[에너지바-2]")
        CheckoutHandler(repo).handle()

        assert StartPurchaseHandler(repo).handle("Y") is True
        state = repo.get()
        assert state.orders == ()
        assert state.receipt.paid_items == ()
        assert not state.receipt.settled
        assert state.catalog.regular_stock("에너지바") == 3

        place_order.handle("[에너지바-3]")
        with pytest.raises(ValidationError, match="새 구매"):
            place_order.handle("[에너지바-1]")

    def test_no_leaves_session(self):
        place_order, repo = _setup()
        place_order.handle("[에너지바-2]")
        before = repo.get()
        assert StartPurchaseHandler(repo).handle("N") is False
        assert repo.get() is before


class TestShowStock:

    def test_lists_every_row(self):
        _, repo = _setup()
        lines = ShowStockHandler(repo).handle()
        assert [(line.product_name, line.price, line.quantity, line.promotion) for line in lines] == [
            ("콜라", "1,000", 10, "탄산2+1"),
            ("콜라", "1,000", 10, None),
            ("에너지바", "2,000", 5, None),
            ("정식도시락", "6,400", 8, None),
        ]
