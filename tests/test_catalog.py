"""Tests for menu models and the Catalog."""

from decimal import Decimal

import pytest

from app.catalog import Catalog
from app.config import QUANTITY_MAX, QUANTITY_MIN
from app.models import MenuCategory, MenuItem, OrderLine


class TestMenuItem:
    """Test MenuItem construction rules."""

    def test_price_coerced_to_decimal(self) -> None:
        item = MenuItem(name="Salad", price="8.99", category="Side")

        assert item.price == Decimal("8.99")
        assert item.category is MenuCategory.SIDE

    def test_rejects_negative_price(self) -> None:
        with pytest.raises(ValueError):
            MenuItem(name="Refund", price=Decimal("-1"), category=MenuCategory.MAIN)

    def test_rejects_all_category(self) -> None:
        with pytest.raises(ValueError):
            MenuItem(name="Everything", price=Decimal("1"), category=MenuCategory.ALL)

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-Infinity", "cheap"])
    def test_rejects_non_finite_price(self, price: str) -> None:
        with pytest.raises(ValueError):
            MenuItem(name="Mystery", price=price, category=MenuCategory.MAIN)

    def test_whole_price_truncates(self) -> None:
        item = MenuItem(name="Fries", price=Decimal("9.99"), category=MenuCategory.SIDE)

        assert item.whole_price() == 9

    def test_ids_are_unique(self) -> None:
        a = MenuItem(name="Steak", price=Decimal("39"), category=MenuCategory.MAIN)
        b = MenuItem(name="Steak", price=Decimal("39"), category=MenuCategory.MAIN)

        assert a.item_id != b.item_id

    def test_order_line_total(self, fries: MenuItem) -> None:
        assert OrderLine(item=fries, quantity=3).line_total == Decimal("29.97")

    @pytest.mark.parametrize("quantity", [QUANTITY_MIN - 1, QUANTITY_MAX + 1, 500])
    def test_order_line_rejects_out_of_range_quantity(self, fries: MenuItem, quantity: int) -> None:
        with pytest.raises(ValueError):
            OrderLine(item=fries, quantity=quantity)

    def test_order_line_accepts_bounds(self, fries: MenuItem) -> None:
        assert OrderLine(item=fries, quantity=QUANTITY_MIN).quantity == QUANTITY_MIN
        assert OrderLine(item=fries, quantity=QUANTITY_MAX).quantity == QUANTITY_MAX


class TestCatalog:
    """Test Catalog queries."""

    def test_sample_catalog(self, catalog: Catalog) -> None:
        assert [item.name for item in catalog.items] == [
            "Steak",
            "French Fries",
            "Chocolate Cake",
            "Pizza(1pc.)",
            "Salad",
            "Ice Cream",
        ]

    def test_all_returns_full_catalog_in_order(self, catalog: Catalog) -> None:
        assert catalog.filter_by_category(MenuCategory.ALL) == list(catalog.items)

    def test_dessert_filter(self, catalog: Catalog) -> None:
        desserts = catalog.filter_by_category(MenuCategory.DESSERT)

        assert [item.name for item in desserts] == ["Chocolate Cake", "Ice Cream"]

    def test_accepts_category_value(self, catalog: Catalog) -> None:
        assert [item.name for item in catalog.filter_by_category("Main")] == ["Steak", "Pizza(1pc.)"]

    def test_unmatched_category_is_empty(self) -> None:
        catalog = Catalog([MenuItem(name="Steak", price=Decimal("39"), category=MenuCategory.MAIN)])

        assert catalog.filter_by_category(MenuCategory.DESSERT) == []

    def test_unknown_category_value_raises(self, catalog: Catalog) -> None:
        with pytest.raises(ValueError):
            catalog.filter_by_category("Drinks")

    def test_filter_categories_order(self) -> None:
        assert [c.value for c in MenuCategory.filters()] == ["All", "Main", "Side", "Dessert"]
