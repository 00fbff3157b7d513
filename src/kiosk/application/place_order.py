"""Application service: Place Order use case.

Orchestrates the whole order-to-receipt calculation for one order line:

1. Parse and validate the text against the current catalog.
2. Resolve the promotion state of every requested product.
3. Allocate each order against promotional stock.
4. Record the allocations on the running receipt.

The next session snapshot is built completely before it is saved, so a
validation failure at any step leaves the session as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from kiosk.application.dto import FreeUnitOfferDTO, PendingDecisionsDTO, ShortageDTO
from kiosk.domain.exceptions import ValidationError
from kiosk.domain.model.order import Order
from kiosk.domain.model.value_objects import Quantity
from kiosk.domain.repository.promotion_repository import PromotionRepository
from kiosk.domain.repository.session_repository import SessionRepository
from kiosk.domain.service.allocation_engine import allocate
from kiosk.domain.service.order_parser import parse_order
from kiosk.domain.service.promotion_resolver import PromotionResolver

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        session_repo: SessionRepository,
        promotion_repo: PromotionRepository,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._session_repo = session_repo
        self._resolver = PromotionResolver(promotion_repo, clock)

    def handle(self, text: str) -> PendingDecisionsDTO:
        state = self._session_repo.get()
        if state.receipt.settled or state.orders:
            raise ValidationError("이미 주문이 접수되었습니다. 새 구매를 시작해 주세요.")

        catalog = state.catalog
        requested = parse_order(text, catalog)

        orders: list[Order] = []
        receipt = state.receipt
        shortages: list[ShortageDTO] = []
        for name, quantity in requested.items():
            order = Order(name=name, quantity=Quantity(quantity))
            order = order.with_promotion(self._resolver.resolve(name, catalog))
            allocation = allocate(
                order.quantity.value, catalog.promotion_stock(name), order.promotion
            )
            logger.debug("Allocated %s x%d under %r: %r", name, quantity, order.promotion, allocation)

            receipt = receipt.record(order, allocation, catalog.price_of(name))
            orders.append(order)
            if allocation.shortage_quantity > 0:
                shortages.append(ShortageDTO(name, allocation.shortage_quantity))

        self._session_repo.save(
            replace(state, receipt=receipt, orders=tuple(orders))
        )
        logger.info("Order placed: %s", ", ".join(f"{n} x{q}" for n, q in requested.items()))

        return PendingDecisionsDTO(
            free_unit_offers=[
                FreeUnitOfferDTO(offer.name, offer.quantity)
                for offer in receipt.free_unit_offers
            ],
            shortages=shortages,
        )
