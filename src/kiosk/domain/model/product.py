"""Product catalog.

A product name may appear in up to two rows: one holding stock reserved
for a promotion and one holding regular stock.  Both rows share the unit
price.  The Catalog is immutable; stock changes produce a new Catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from kiosk.domain.model.value_objects import Money

OUT_OF_STOCK = "재고 없음"


@dataclass(frozen=True)
class ProductRow:
    """One stock row of the catalog.

    A quantity of 0 is the out-of-stock sentinel.
    """

    name: str
    price: Money
    quantity: int
    promotion: str | None = None

    @property
    def is_promotional(self) -> bool:
        return bool(self.promotion)

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity <= 0

    def with_quantity(self, quantity: int) -> ProductRow:
        return replace(self, quantity=max(0, quantity))


@dataclass(frozen=True)
class Catalog:
    rows: tuple[ProductRow, ...] = ()

    def rows_for(self, name: str) -> list[ProductRow]:
        return [row for row in self.rows if row.name == name]

    def has_product(self, name: str) -> bool:
        return any(row.name == name for row in self.rows)

    def price_of(self, name: str) -> Money:
        for row in self.rows:
            if row.name == name:
                return row.price
        raise KeyError(name)

    def promotion_of(self, name: str) -> str | None:
        """Name of the promotion linked to the product, if any."""
        for row in self.rows:
            if row.name == name and row.is_promotional:
                return row.promotion
        return None

    def promotion_stock(self, name: str) -> int:
        for row in self.rows:
            if row.name == name and row.is_promotional:
                return row.quantity
        return 0

    def regular_stock(self, name: str) -> int:
        for row in self.rows:
            if row.name == name and not row.is_promotional:
                return row.quantity
        return 0

    def is_depleted(self, name: str) -> bool:
        return all(row.is_out_of_stock for row in self.rows_for(name))

    def available_stock(self, name: str) -> int:
        return sum(row.quantity for row in self.rows_for(name) if not row.is_out_of_stock)

    def replace_row(self, old: ProductRow, new: ProductRow) -> Catalog:
        """Return a catalog where the first row equal to ``old`` is ``new``."""
        rows = list(self.rows)
        rows[rows.index(old)] = new
        return Catalog(tuple(rows))
