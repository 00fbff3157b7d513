"""File-backed implementation of ProductRepository.

Reads the store's ``products.md``::

    name,price,quantity,promotion
    콜라,1000,10,탄산2+1
    콜라,1000,10,null

``quantity`` may be ``재고 없음``; ``promotion`` may be empty or ``null``.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from kiosk.domain.exceptions import CatalogIntegrityError, ValidationError
from kiosk.domain.model.product import OUT_OF_STOCK, Catalog, ProductRow
from kiosk.domain.model.value_objects import Money
from kiosk.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

_FIELDS = ("name", "price", "quantity", "promotion")
_NO_PROMOTION = ("", "null")


class FileProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def load_catalog(self) -> Catalog:
        rows = [self._to_domain(raw) for raw in self._load_raw()]
        self._check_rows(rows)
        rows = self._with_regular_rows(rows)
        logger.debug("Loaded %d catalog rows from %s", len(rows), self._file_path)
        return Catalog(tuple(rows))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> ProductRow:
        name = (raw.get("name") or "").strip()
        if not name:
            raise CatalogIntegrityError(f"Catalog row without a product name: {raw}")

        try:
            price = Money.of(raw.get("price") or "")
        except ValidationError as exc:
            raise CatalogIntegrityError(f"Invalid price for '{name}': {raw.get('price')!r}") from exc

        raw_quantity = (raw.get("quantity") or "").strip()
        if raw_quantity == OUT_OF_STOCK:
            quantity = 0
        else:
            try:
                quantity = int(raw_quantity.removesuffix("개"))
            except ValueError as exc:
                raise CatalogIntegrityError(
                    f"Invalid quantity for '{name}': {raw_quantity!r}"
                ) from exc
            if quantity < 0:
                raise CatalogIntegrityError(f"Negative quantity for '{name}'")

        promotion = (raw.get("promotion") or "").strip()
        return ProductRow(
            name=name,
            price=price,
            quantity=quantity,
            promotion=None if promotion in _NO_PROMOTION else promotion,
        )

    @staticmethod
    def _check_rows(rows: list[ProductRow]) -> None:
        seen: set[tuple[str, bool]] = set()
        for row in rows:
            key = (row.name, row.is_promotional)
            if key in seen:
                kind = "promotional" if row.is_promotional else "regular"
                raise CatalogIntegrityError(f"Duplicate {kind} row for '{row.name}'")
            seen.add(key)

    @staticmethod
    def _with_regular_rows(rows: list[ProductRow]) -> list[ProductRow]:
        """Give every promotion-only product an empty regular row."""
        regular_names = {row.name for row in rows if not row.is_promotional}
        result: list[ProductRow] = []
        for row in rows:
            result.append(row)
            if row.is_promotional and row.name not in regular_names:
                result.append(ProductRow(name=row.name, price=row.price, quantity=0))
        return result

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            raise CatalogIntegrityError(f"Product catalog not found: {self._file_path}")
        text = self._file_path.read_text(encoding="utf-8")
        reader = csv.DictReader(io.StringIO(text), skipinitialspace=True)
        if reader.fieldnames is None or tuple(reader.fieldnames) != _FIELDS:
            raise CatalogIntegrityError(
                f"Product catalog header must be {','.join(_FIELDS)}"
            )
        rows = []
        for raw in reader:
            if None in raw:
                raise CatalogIntegrityError(f"Too many columns in {self._file_path.name}: {raw}")
            if any((value or "").strip() for value in raw.values()):
                rows.append(raw)
        return rows
