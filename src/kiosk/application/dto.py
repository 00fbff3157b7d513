"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StockLineDTO:
    """Output: one catalog row as shown on the stock board."""

    product_name: str
    price: str  # formatted, e.g. "1,000"
    quantity: int  # 0 means out of stock
    promotion: str | None


@dataclass(frozen=True)
class FreeUnitOfferDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class ShortageDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class PendingDecisionsDTO:
    """Output: questions the customer must answer before checkout."""

    free_unit_offers: list[FreeUnitOfferDTO] = field(default_factory=list)
    shortages: list[ShortageDTO] = field(default_factory=list)


@dataclass(frozen=True)
class ReceiptLineDTO:
    product_name: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class GiftLineDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a settled receipt as displayed to the customer."""

    items: list[ReceiptLineDTO]
    gifts: list[GiftLineDTO]
    total_quantity: int
    total_price: str
    event_discount: str
    membership_discount: str
    final_price: str
