"""Unit tests for centralized error handler."""

import logging
from unittest.mock import MagicMock, patch

from src.services.exceptions import (
    BillingAborted,
    ItemNotFound,
    ServiceError,
    ValidationError,
)
from src.ui.utils.error_handler import get_user_message, handle_error


class TestGetUserMessage:
    """Tests for exception to user message mapping."""

    def test_item_not_found(self):
        title, msg = get_user_message(ItemNotFound("Baguette"), "Update stock")
        assert title == "Not Found"
        assert "Baguette" in msg
        assert "ItemNotFound" not in msg

    def test_validation_error_is_invalid_value(self):
        title, msg = get_user_message(ValidationError(["bad"]), "Update stock")
        assert msg == "Invalid Value!"

    def test_billing_aborted(self):
        title, msg = get_user_message(BillingAborted(), "Generate bill")
        assert title == "Cancelled"
        assert "Generate bill" in msg

    def test_generic_service_error(self):
        title, msg = get_user_message(ServiceError("boom"), "Place order")
        assert title == "Error"
        assert msg == "Place order failed: boom"

    def test_unexpected_exception(self):
        title, msg = get_user_message(RuntimeError("secret detail"))
        assert title == "Unexpected Error"
        assert "secret detail" not in msg


class TestHandleError:
    """Tests for handle_error."""

    @patch("src.ui.utils.error_handler.messagebox")
    def test_shows_dialog_by_default(self, mock_msgbox):
        handle_error(ItemNotFound("Baguette"), operation="Update stock")
        mock_msgbox.showerror.assert_called_once()

    @patch("src.ui.utils.error_handler.messagebox")
    def test_no_dialog_when_disabled(self, mock_msgbox):
        handle_error(ItemNotFound("Baguette"), show_dialog=False)
        mock_msgbox.showerror.assert_not_called()

    @patch("src.ui.utils.error_handler.messagebox")
    def test_dialog_with_parent(self, mock_msgbox):
        mock_parent = MagicMock()
        handle_error(ValidationError(["bad"]), parent=mock_parent, operation="Update stock")
        call_args = mock_msgbox.showerror.call_args
        assert call_args[0] == ("Error", "Invalid Value!")
        assert call_args[1]["parent"] == mock_parent

    @patch("src.ui.utils.error_handler.messagebox")
    def test_returns_title_and_message(self, mock_msgbox):
        result = handle_error(ItemNotFound("Baguette"), show_dialog=False)
        assert result == ("Not Found", "Item 'Baguette' not found.")

    @patch("src.ui.utils.error_handler.messagebox")
    def test_logs_service_error_as_warning(self, mock_msgbox, caplog):
        with caplog.at_level(logging.WARNING):
            handle_error(ItemNotFound("Baguette"), operation="Update stock", show_dialog=False)
        assert "Update stock failed: ItemNotFound" in caplog.text

    @patch("src.ui.utils.error_handler.messagebox")
    def test_logs_unexpected_with_traceback(self, mock_msgbox, caplog):
        with caplog.at_level(logging.ERROR):
            try:
                raise RuntimeError("boom")
            except RuntimeError as e:
                handle_error(e, operation="Generate bill", show_dialog=False)
        assert caplog.records[0].exc_info is not None
