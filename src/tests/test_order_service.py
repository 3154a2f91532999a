"""Tests for the mock order service."""

import logging

from src.services.order_service import place_order


class TestPlaceOrder:
    """Tests for place_order."""

    def test_message_names_customer(self):
        confirmation = place_order("Dana", "1 Main St", "555-0100")
        assert confirmation.message == "Order placed successfully for Dana"

    def test_request_carries_form_fields(self):
        confirmation = place_order("Dana", "1 Main St", "555-0100")
        assert confirmation.request.customer_name == "Dana"
        assert confirmation.request.address == "1 Main St"
        assert confirmation.request.phone == "555-0100"

    def test_empty_fields_accepted(self):
        confirmation = place_order("", "", "")
        assert confirmation.message == "Order placed successfully for "

    def test_logs_operation(self, caplog):
        with caplog.at_level(logging.INFO):
            place_order("Dana")
        assert "place_order: success" in caplog.text
