"""Application service: Checkout use case.

Computes the receipt totals, deducts sold stock from the catalog and
marks the receipt as settled.  Offers the customer never answered are
treated as declined.
"""

from __future__ import annotations

import logging

from kiosk.application.dto import GiftLineDTO, ReceiptDTO, ReceiptLineDTO
from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.receipt import SETTLED_MESSAGE, ReceiptState
from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.receipt_calculator import ReceiptTotals, summarize
from kiosk.domain.service.stock_mutator import deduct_sold_stock

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> ReceiptDTO:
        state = self._session_repo.get()
        if state.receipt.settled:
            raise ValidationError(SETTLED_MESSAGE)

        receipt = state.receipt
        totals = summarize(receipt)
        catalog = deduct_sold_stock(state.catalog, receipt)

        self._session_repo.save(
            state.with_catalog(catalog).with_receipt(receipt.settle())
        )
        logger.info(
            "Checkout complete: %d item(s), payable %s",
            totals.total_quantity,
            totals.final_price,
        )
        return self._to_dto(receipt, totals)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: ReceiptState, totals: ReceiptTotals) -> ReceiptDTO:
        return ReceiptDTO(
            items=[
                ReceiptLineDTO(
                    product_name=item.name,
                    quantity=receipt.sold_quantity(item),
                    line_total=str(item.unit_price * receipt.sold_quantity(item)),
                )
                for item in receipt.paid_items
            ],
            gifts=[
                GiftLineDTO(product_name=name, quantity=quantity)
                for name, quantity in receipt.gift_items.items()
                if quantity > 0
            ],
            total_quantity=totals.total_quantity,
            total_price=str(totals.total_price),
            event_discount=str(totals.event_discount),
            membership_discount=str(totals.membership_discount),
            final_price=str(totals.final_price),
        )
