"""Unit tests for the product Catalog."""

from kiosk.domain.model.product import Catalog, ProductRow
from kiosk.domain.model.value_objects import Money


def _catalog() -> Catalog:
    return Catalog((
        ProductRow("콜라", Money(1000), 10, "탄산2+1"),
        ProductRow("콜라", Money(1000), 7),
        ProductRow("물", Money(500), 10),
        ProductRow("컵라면", Money(1700), 0, "MD추천상품"),
        ProductRow("컵라면", Money(1700), 4),
        ProductRow("초코바", Money(1200), 0, "MD추천상품"),
        ProductRow("초코바", Money(1200), 0),
    ))


class TestCatalogLookups:

    def test_rows_for_returns_both_rows(self):
        rows = _catalog().rows_for("콜라")
        assert [row.quantity for row in rows] == [10, 7]

    def test_has_product(self):
        assert _catalog().has_product("물")
        assert not _catalog().has_product("사이다")

    def test_price_of(self):
        assert _catalog().price_of("컵라면") == Money(1700)

    def test_promotion_of(self):
        assert _catalog().promotion_of("콜라") == "탄산2+1"
        assert _catalog().promotion_of("물") is None

    def test_promotion_and_regular_stock(self):
        catalog = _catalog()
        assert catalog.promotion_stock("콜라") == 10
        assert catalog.regular_stock("콜라") == 7
        assert catalog.promotion_stock("물") == 0

    def test_available_stock_skips_depleted_rows(self):
        assert _catalog().available_stock("컵라면") == 4
        assert _catalog().available_stock("콜라") == 17

    def test_is_depleted(self):
        assert _catalog().is_depleted("초코바")
        assert not _catalog().is_depleted("컵라면")


class TestCatalogReplaceRow:

    def test_returns_new_catalog(self):
        catalog = _catalog()
        row = catalog.rows_for("물")[0]
        updated = catalog.replace_row(row, row.with_quantity(3))
        assert updated.regular_stock("물") == 3
        assert catalog.regular_stock("물") == 10

    def test_with_quantity_floors_at_zero(self):
        row = ProductRow("물", Money(500), 2)
        assert row.with_quantity(-5).quantity == 0
        assert row.with_quantity(-5).is_out_of_stock
