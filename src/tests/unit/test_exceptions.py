"""Unit tests for the exception hierarchy."""

import inspect

from src.services import exceptions as exc_module
from src.services.exceptions import (
    BillingAborted,
    ItemNotFound,
    ServiceError,
    ValidationError,
)


def get_all_exception_classes():
    """Discover every exception class defined in the exceptions module."""
    return [
        obj
        for _, obj in inspect.getmembers(exc_module, inspect.isclass)
        if issubclass(obj, Exception) and obj.__module__ == exc_module.__name__
    ]


class TestHierarchy:
    """All service exceptions derive from ServiceError."""

    def test_all_inherit_from_service_error(self):
        for exc_class in get_all_exception_classes():
            assert issubclass(exc_class, ServiceError), exc_class.__name__


class TestItemNotFound:
    def test_message_and_attributes(self):
        exc = ItemNotFound("Baguette")
        assert exc.item_name == "Baguette"
        assert str(exc) == "Item 'Baguette' not found"
        assert exc.context == {"item_name": "Baguette"}


class TestValidationError:
    def test_joins_errors(self):
        exc = ValidationError(["Quantity: Must be a whole number", "Other"])
        assert exc.errors == ["Quantity: Must be a whole number", "Other"]
        assert str(exc) == "Validation failed: Quantity: Must be a whole number; Other"


class TestBillingAborted:
    def test_default_reason(self):
        exc = BillingAborted()
        assert exc.reason == "No customer name given"
        assert exc.message == "No customer name given"
