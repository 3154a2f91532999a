"""Service layer exception classes for the Bakery Manager.

This module defines the custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── ItemNotFound
    ├── ValidationError
    └── BillingAborted
"""

from typing import List, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.

    Args:
        message: Human-readable description of the error
        context: Optional structured data for logging
    """

    def __init__(self, message: str = "", context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class ItemNotFound(ServiceError):
    """Raised when no catalog item matches a name.

    Args:
        item_name: The item name that was not found

    Example:
        >>> raise ItemNotFound("Baguette")
        ItemNotFound: Item 'Baguette' not found
    """

    def __init__(self, item_name: str):
        self.item_name = item_name
        super().__init__(f"Item '{item_name}' not found", {"item_name": item_name})


class ValidationError(ServiceError):
    """Raised when user-supplied data fails validation.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: List[str]):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}", {"errors": errors})


class BillingAborted(ServiceError):
    """Raised when the user cancels billing (no customer name).

    This is an abort signal, not a failure: callers return quietly.
    """

    def __init__(self, reason: str = "No customer name given"):
        self.reason = reason
        super().__init__(reason)
