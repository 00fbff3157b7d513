"""Domain service: Stock Mutator.

Deducts what was sold from the catalog once the customer has paid.
Promotional stock goes first; whatever it cannot cover comes out of
regular stock.
"""

from __future__ import annotations

from kiosk.domain.exceptions import CatalogIntegrityError
from kiosk.domain.model.product import Catalog, ProductRow
from kiosk.domain.model.receipt import ReceiptState


def deduct_sold_stock(catalog: Catalog, receipt: ReceiptState) -> Catalog:
    """Return a new catalog with every paid item's sold units removed."""
    for item in receipt.paid_items:
        sold = receipt.sold_quantity(item)
        catalog = deduct(catalog, item.name, sold)
    return catalog


def deduct(catalog: Catalog, name: str, sold: int) -> Catalog:
    rows = catalog.rows_for(name)

    if len(rows) == 1:
        row = rows[0]
        return catalog.replace_row(row, row.with_quantity(row.quantity - sold))

    if len(rows) == 2:
        promotional, regular = _split_rows(name, rows)
        if promotional.quantity >= sold:
            return catalog.replace_row(
                promotional, promotional.with_quantity(promotional.quantity - sold)
            )
        # An empty promotional row simply contributes nothing here.
        remaining = regular.quantity + promotional.quantity - sold
        catalog = catalog.replace_row(promotional, promotional.with_quantity(0))
        return catalog.replace_row(regular, regular.with_quantity(remaining))

    raise CatalogIntegrityError(
        f"Cannot deduct stock for '{name}': expected 1 or 2 catalog rows, found {len(rows)}"
    )


def _split_rows(name: str, rows: list[ProductRow]) -> tuple[ProductRow, ProductRow]:
    promotional = [row for row in rows if row.is_promotional]
    regular = [row for row in rows if not row.is_promotional]
    if len(promotional) != 1 or len(regular) != 1:
        raise CatalogIntegrityError(
            f"Product '{name}' must have one promotional and one regular row"
        )
    return promotional[0], regular[0]
