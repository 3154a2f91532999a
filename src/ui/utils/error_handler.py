"""Centralized error handler for UI layer.

Provides consistent error display and logging across all UI components.
Maps service exceptions to user-friendly messages while preserving
technical details in logs for debugging.
"""

import logging
from tkinter import messagebox
from typing import Any, Optional, Tuple

from src.services.exceptions import (
    ServiceError,
    ItemNotFound,
    ValidationError,
    BillingAborted,
)
from src.utils.constants import MSG_INVALID_VALUE

logger = logging.getLogger(__name__)


def handle_error(
    exception: Exception,
    parent: Optional[Any] = None,
    operation: str = "Operation",
    show_dialog: bool = True,
) -> Tuple[str, str]:
    """Handle an exception and optionally display user-friendly error dialog.

    Args:
        exception: The caught exception to handle
        parent: Parent widget for dialog positioning (optional)
        operation: Description of what was being attempted (e.g., "Update stock")
        show_dialog: Whether to show error dialog (default True)

    Returns:
        Tuple of (title, user_message) for further handling if needed

    Example:
        try:
            quantity = parse_stock_quantity(text)
        except ValidationError as e:
            handle_error(e, parent=self, operation="Update stock")
    """
    title, message = get_user_message(exception, operation)

    _log_error(exception, operation)

    if show_dialog:
        if parent is not None:
            messagebox.showerror(title, message, parent=parent)
        else:
            messagebox.showerror(title, message)

    return title, message


def get_user_message(exception: Exception, operation: str = "Operation") -> Tuple[str, str]:
    """Convert exception to user-friendly title and message.

    Args:
        exception: The exception to convert
        operation: Description of what was being attempted

    Returns:
        Tuple of (title, message) suitable for user display
    """
    if isinstance(exception, ItemNotFound):
        return "Not Found", f"Item '{exception.item_name}' not found."

    # Bad quantity text keeps the short message users already know
    if isinstance(exception, ValidationError):
        return "Error", MSG_INVALID_VALUE

    if isinstance(exception, BillingAborted):
        return "Cancelled", f"{operation} cancelled."

    if isinstance(exception, ServiceError):
        return "Error", f"{operation} failed: {exception.message or 'an error occurred'}"

    return "Unexpected Error", "An unexpected error occurred. Please try again."


def _log_error(exception: Exception, operation: str) -> None:
    """Log technical error details for debugging.

    ServiceError subclasses are logged at WARNING with their context;
    anything else gets a full stack trace.
    """
    if isinstance(exception, ServiceError):
        log_data = {
            "operation": operation,
            "exception_type": exception.__class__.__name__,
            "context": exception.context,
        }
        logger.warning(
            f"{operation} failed: {exception.__class__.__name__}: {exception}",
            extra={"error_data": log_data},
        )
    else:
        logger.exception(
            f"{operation} failed with unexpected error: {exception.__class__.__name__}"
        )
