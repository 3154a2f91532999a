"""
Tests for billing_service.

Tests cover:
- Purchase line extraction from displayed rows
- Bill generation and the cancelled-name abort
- Currency formatting
"""

from decimal import Decimal

import pytest

from src.services import billing_service
from src.services.billing_service import (
    extract_purchase_lines,
    format_currency,
    generate_bill,
)
from src.services.exceptions import BillingAborted


@pytest.fixture
def displayed_rows():
    """Rows as shown in the tables: (name, price, available, purchase)."""
    return [
        ("Bread", Decimal("2.50"), 50, 0),
        ("Cake", Decimal("15.00"), 20, 3),
        ("Cookies", Decimal("5.00"), 30, 0),
        ("Croissant", Decimal("3.00"), 25, 2),
    ]


class TestExtractPurchaseLines:
    """Tests for extract_purchase_lines."""

    def test_keeps_only_positive_quantities(self, displayed_rows):
        lines = extract_purchase_lines(displayed_rows)

        assert [line.name for line in lines] == ["Cake", "Croissant"]
        assert [line.requested_quantity for line in lines] == [3, 2]

    def test_preserves_price(self, displayed_rows):
        lines = extract_purchase_lines(displayed_rows)
        assert lines[0].unit_price == Decimal("15.00")
        assert lines[1].unit_price == Decimal("3.00")

    def test_accepts_text_cells(self):
        lines = extract_purchase_lines([("Bagel", "2.5", "20", "4")])
        assert lines[0].unit_price == Decimal("2.5")
        assert lines[0].requested_quantity == 4

    def test_all_zero_gives_no_lines(self):
        rows = [("Bread", Decimal("2.50"), 50, 0), ("Cake", Decimal("15.00"), 20, 0)]
        assert extract_purchase_lines(rows) == []


class TestGenerateBill:
    """Tests for generate_bill."""

    def test_computes_total(self, controller, displayed_rows):
        lines = extract_purchase_lines(displayed_rows)

        bill = generate_bill("Alice", lines, controller)

        assert bill.customer_name == "Alice"
        assert bill.total == Decimal("51.00")
        assert bill.item_count == 5

    def test_strips_customer_name(self, controller):
        bill = generate_bill("  Bob  ", [], controller)
        assert bill.customer_name == "Bob"
        assert bill.total == 0

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name_aborts(self, controller, name):
        with pytest.raises(BillingAborted):
            generate_bill(name, [], controller)

    def test_does_not_change_stock(self, controller, displayed_rows):
        generate_bill("Alice", extract_purchase_lines(displayed_rows), controller)
        assert controller.find_item("Cake").available_quantity == 20

    def test_uses_supplied_strategy(self, controller, displayed_rows):
        class Doubled(billing_service.BillingStrategy):
            def calculate(self, price, qty):
                return price * qty * 2

        bill = generate_bill("Alice", extract_purchase_lines(displayed_rows), controller, Doubled())
        assert bill.total == Decimal("102.00")


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_two_decimals(self):
        assert format_currency(Decimal("25")) == "$25.00"

    def test_rounds_half_up(self):
        assert format_currency(Decimal("2.345")) == "$2.35"

    def test_zero(self):
        assert format_currency(Decimal("0")) == "$0.00"
