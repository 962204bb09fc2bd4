"""Tests for menu items, line items, receipts and the catalog."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from coffee_shop.errors import InvalidSelection
from coffee_shop.models import MAX_QUANTITY, LineItem, MenuCatalog, MenuItem, Receipt, format_price


class TestFormatPrice:
    def test_pads_to_cents(self):
        assert format_price(Decimal("3.5")) == "$3.50"

    def test_whole_dollars(self):
        assert format_price(Decimal("11")) == "$11.00"


class TestMenuItem:
    def test_price_rounded_to_cents(self):
        item = MenuItem(name="Mocha", unit_price="4.5")
        assert item.unit_price == Decimal("4.50")
        assert str(item.unit_price) == "4.50"

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            MenuItem(name="Refund", unit_price=Decimal("-1.00"))

    def test_free_item_allowed(self):
        assert MenuItem(name="Water", unit_price=0).unit_price == Decimal("0.00")

    def test_is_immutable(self):
        item = MenuItem(name="Latte", unit_price=Decimal("3.50"))
        with pytest.raises(ValidationError):
            item.name = "Mocha"


class TestLineItem:
    def test_line_total_is_price_times_quantity(self):
        line = LineItem(item=MenuItem(name="Latte", unit_price=Decimal("3.50")), quantity=3)
        assert line.line_total == Decimal("10.50")

    def test_quantity_above_limit_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(item=MenuItem(name="Latte", unit_price=Decimal("3.50")), quantity=MAX_QUANTITY + 1)

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(item=MenuItem(name="Latte", unit_price=Decimal("3.50")), quantity=0)


class TestMenuCatalog:
    """The catalog is fixed, ordered and addressed 1-based."""

    def test_default_items_in_order(self, catalog: MenuCatalog):
        assert [(i.name, i.unit_price) for i in catalog.list()] == [
            ("Latte", Decimal("3.50")),
            ("Espresso", Decimal("2.00")),
            ("Cappuccino", Decimal("4.00")),
        ]
        assert len(catalog) == 3

    def test_resolve_is_one_based(self, catalog: MenuCatalog):
        assert catalog.resolve(1).name == "Latte"
        assert catalog.resolve(3).name == "Cappuccino"

    @pytest.mark.parametrize("selection", [0, 4, 5, -1])
    def test_resolve_out_of_bounds(self, catalog: MenuCatalog, selection: int):
        with pytest.raises(InvalidSelection) as exc_info:
            catalog.resolve(selection)
        assert exc_info.value.selection == selection
        assert exc_info.value.catalog_size == 3
        assert str(exc_info.value) == "Invalid selection."

    def test_render(self, catalog: MenuCatalog):
        assert catalog.render() == (
            "Coffee Menu:\n"
            "1. Latte ($3.50)\n"
            "2. Espresso ($2.00)\n"
            "3. Cappuccino ($4.00)"
        )

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValidationError):
            MenuCatalog(items=())

    def test_from_dict(self):
        catalog = MenuCatalog.from_dict(
            {"items": [{"name": "Mocha", "unit_price": 4.5}, {"name": "Tea", "unit_price": "1.25"}]}
        )
        assert [i.name for i in catalog.list()] == ["Mocha", "Tea"]
        assert catalog.resolve(1).unit_price == Decimal("4.50")

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text(json.dumps({"items": [{"name": "Flat White", "unit_price": 3.75}]}))
        catalog = MenuCatalog.from_json_file(path)
        assert catalog.resolve(1) == MenuItem(name="Flat White", unit_price=Decimal("3.75"))

    @pytest.mark.parametrize(
        "data",
        [{}, {"items": ["Latte"]}, {"items": [{"name": "Latte"}]}, {"menu": []}],
    )
    def test_from_dict_malformed_raises_validation_error(self, data: dict):
        with pytest.raises(ValidationError):
            MenuCatalog.from_dict(data)

    def test_from_dict_rejects_bad_price(self):
        with pytest.raises(ValidationError):
            MenuCatalog.from_dict({"items": [{"name": "Mocha", "unit_price": "free"}]})


class TestReceipt:
    def test_render(self):
        latte = MenuItem(name="Latte", unit_price=Decimal("3.50"))
        receipt = Receipt(
            customer_name="Dana",
            lines=(LineItem(item=latte, quantity=2),),
            grand_total=Decimal("7.00"),
        )
        assert receipt.render().splitlines() == [
            "Checkout for Dana:",
            "Latte for Dana (2 x $3.50 = $7.00)",
            "Total: $7.00",
            "Thank you, Dana! Your order will be ready soon.",
        ]


class TestShippedMenu:
    def test_matches_built_in_default(self, shipped_catalog: MenuCatalog, catalog: MenuCatalog):
        assert shipped_catalog == catalog
