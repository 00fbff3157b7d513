"""SessionState — the whole kiosk state as one immutable snapshot.

Handlers read the current snapshot, build the next one and save it in a
single step (clone-and-swap).  Nothing else writes to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from kiosk.domain.model.order import Order
from kiosk.domain.model.product import Catalog
from kiosk.domain.model.receipt import ReceiptState


@dataclass(frozen=True)
class SessionState:
    catalog: Catalog
    receipt: ReceiptState = field(default_factory=ReceiptState)
    orders: tuple[Order, ...] = ()

    def with_catalog(self, catalog: Catalog) -> SessionState:
        return replace(self, catalog=catalog)

    def with_receipt(self, receipt: ReceiptState) -> SessionState:
        return replace(self, receipt=receipt)

    def new_purchase(self) -> SessionState:
        """Forget the previous purchase but keep the current stock."""
        return SessionState(catalog=self.catalog)
