"""
Tests for MainWindow actions.

Dialogs are patched out; the window itself needs a Tk display and the
tests are skipped without one.
"""

import tkinter
from decimal import Decimal
from unittest.mock import patch

import pytest


@pytest.fixture
def main_window(controller):
    """Create a hidden main window bound to a fresh controller."""
    from src.ui.main_window import MainWindow

    try:
        window = MainWindow(controller)
    except tkinter.TclError as e:
        pytest.skip(f"No display available: {e}")
    window.withdraw()
    yield window
    try:
        window.destroy()
    except tkinter.TclError:
        pass


class TestLoadItems:
    def test_tables_show_both_catalogs(self, main_window):
        assert len(main_window.regular_table.get_rows()) == 10
        assert len(main_window.special_table.get_rows()) == 10

    def test_initial_total_label(self, main_window):
        assert main_window.total_label.cget("text") == "Grand Total: $0.00"


class TestGenerateBill:
    def test_bill_uses_selected_rows(self, main_window):
        main_window.regular_table.set_purchase_quantity(0, 4)  # Bread 2.50
        main_window.regular_table.set_purchase_quantity(1, 1)  # Cake 15.00

        with patch.object(main_window, "_prompt_customer_name", return_value="Alice"), \
                patch("src.ui.main_window.show_info") as mock_info:
            main_window._on_generate_bill()

        assert main_window.total_label.cget("text") == "Grand Total: $25.00"
        message = mock_info.call_args[0][1]
        assert "Bill for Alice" in message
        assert "$25.00" in message

    @pytest.mark.parametrize("name", [None, ""])
    def test_cancelled_name_does_nothing(self, main_window, name):
        main_window.regular_table.set_purchase_quantity(0, 4)

        with patch.object(main_window, "_prompt_customer_name", return_value=name), \
                patch("src.ui.main_window.show_info") as mock_info:
            main_window._on_generate_bill()

        mock_info.assert_not_called()
        assert main_window.total_label.cget("text") == "Grand Total: $0.00"


class TestUpdateStock:
    def test_valid_update_reloads_and_confirms(self, main_window, controller):
        with patch("src.ui.main_window.show_success") as mock_success:
            main_window._apply_stock_update("Bread", "99")

        assert controller.find_item("Bread").available_quantity == 99
        assert main_window.regular_table.get_rows()[0][2] == 99
        mock_success.assert_called_once_with(
            "Update Stock", "Updated successfully!", parent=main_window
        )

    def test_invalid_quantity_shows_invalid_value(self, main_window, controller):
        with patch("src.ui.utils.error_handler.messagebox") as mock_msgbox, \
                patch("src.ui.main_window.show_success") as mock_success:
            main_window._apply_stock_update("Bread", "lots")

        assert controller.find_item("Bread").available_quantity == 50
        assert mock_msgbox.showerror.call_args[0][1] == "Invalid Value!"
        mock_success.assert_not_called()

    def test_unknown_item_reports_not_found(self, main_window, controller):
        with patch("src.ui.utils.error_handler.messagebox") as mock_msgbox:
            main_window._apply_stock_update("Baguette", "5")

        assert mock_msgbox.showerror.call_args[0][0] == "Not Found"


class TestPlaceOrder:
    def test_submit_shows_acknowledgment(self, main_window):
        with patch("src.ui.main_window.show_success") as mock_success:
            main_window._submit_order("Dana", "1 Main St", "555-0100")

        mock_success.assert_called_once_with(
            "Place Order", "Order placed successfully for Dana", parent=main_window
        )


class TestPurchaseLines:
    def test_only_positive_rows_included(self, main_window):
        main_window.regular_table.set_purchase_quantity(1, 3)
        main_window.special_table.set_purchase_quantity(0, 2)

        lines = main_window.get_purchase_lines()

        assert [(l.name, l.unit_price, l.requested_quantity) for l in lines] == [
            ("Cake", Decimal("15.00"), 3),
            ("Red Velvet Cake", Decimal("25.00"), 2),
        ]
