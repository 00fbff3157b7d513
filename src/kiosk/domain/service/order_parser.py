"""Domain service: Order Parser.

Turns a line such as ``[콜라-10],[사이다-3]`` into ``{"콜라": 10, "사이다": 3}``
after checking it against the catalog.  Pure: the catalog is only read.
"""

from __future__ import annotations

import re

from kiosk.domain.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    MalformedInputError,
    OutOfStockError,
    UnknownProductError,
)
from kiosk.domain.model.product import Catalog

# Order lines hold letters of any script plus these ASCII characters.
_ALLOWED_SYMBOLS = frozenset("0123456789,-[]")
_POSITIVE_INT = re.compile(r"^[0-9]+$")

GROUP_SEPARATOR = ","
FIELD_SEPARATOR = "-"

MALFORMED_MESSAGE = "올바르지 않은 형식으로 입력했습니다. 다시 입력해 주세요."
INVALID_QUANTITY_MESSAGE = "잘못된 입력입니다. 다시 입력해 주세요."
UNKNOWN_PRODUCT_MESSAGE = "존재하지 않는 상품입니다. 다시 입력해 주세요."
NOT_ENOUGH_STOCK_MESSAGE = "재고 수량을 초과하여 구매할 수 없습니다. 다시 입력해 주세요."


def parse_order(text: str, catalog: Catalog) -> dict[str, int]:
    """Validate an order line and return the requested quantity per product.

    Repeated product names are summed.  Stock checks apply to the summed
    quantity.

    Raises:
        MalformedInputError: empty line, stray characters, missing brackets
            or a group that is not exactly ``name-quantity``.
        InvalidQuantityError: a quantity that is not a positive integer.
        UnknownProductError: a name the catalog does not know.
        OutOfStockError: every row for the product is depleted.
        InsufficientStockError: more than the remaining stock was requested.
    """
    groups = _split_groups(text)

    requested: dict[str, int] = {}
    for name, raw_quantity in groups:
        quantity = _parse_quantity(raw_quantity)
        requested[name] = requested.get(name, 0) + quantity

    for name, quantity in requested.items():
        if not catalog.has_product(name):
            raise UnknownProductError(UNKNOWN_PRODUCT_MESSAGE)
        if catalog.is_depleted(name):
            raise OutOfStockError(NOT_ENOUGH_STOCK_MESSAGE)
        if quantity > catalog.available_stock(name):
            raise InsufficientStockError(NOT_ENOUGH_STOCK_MESSAGE)

    return requested


def _split_groups(text: str) -> list[tuple[str, str]]:
    if not text or not all(_is_allowed(char) for char in text):
        raise MalformedInputError(MALFORMED_MESSAGE)

    groups: list[tuple[str, str]] = []
    for group in text.split(GROUP_SEPARATOR):
        if len(group) < 2 or not (group.startswith("[") and group.endswith("]")):
            raise MalformedInputError(MALFORMED_MESSAGE)
        fields = group[1:-1].split(FIELD_SEPARATOR)
        if len(fields) != 2:
            raise MalformedInputError(MALFORMED_MESSAGE)
        name, quantity = fields
        groups.append((name, quantity))
    return groups


def _parse_quantity(raw: str) -> int:
    if not _POSITIVE_INT.match(raw):
        raise InvalidQuantityError(INVALID_QUANTITY_MESSAGE)
    quantity = int(raw)
    if quantity <= 0:
        raise InvalidQuantityError(INVALID_QUANTITY_MESSAGE)
    return quantity


def _is_allowed(char: str) -> bool:
    return char.isalpha() or char in _ALLOWED_SYMBOLS
