"""
Input validation functions for the Bakery Manager application.

Free-text fields are validated here before their values reach the
inventory controller.
"""

from typing import Optional, Tuple

from src.services.exceptions import ValidationError

from .constants import (
    ERROR_INVALID_NON_NEGATIVE,
    ERROR_INVALID_NUMBER,
    ERROR_REQUIRED_FIELD,
)


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    return True, ""


def parse_stock_quantity(text: Optional[str], field_name: str = "Quantity") -> int:
    """
    Parse a stock quantity typed by the user.

    Surrounding whitespace is ignored. Only whole, non-negative numbers are
    accepted.

    Args:
        text: Raw text from the entry field
        field_name: Name of the field for error messages

    Returns:
        The quantity as an int

    Raises:
        ValidationError: If the text is empty, not a whole number, or negative
    """
    is_valid, error = validate_required_string(text, field_name)
    if not is_valid:
        raise ValidationError([error])

    try:
        quantity = int(text.strip())
    except ValueError:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NUMBER}"])

    if quantity < 0:
        raise ValidationError([f"{field_name}: {ERROR_INVALID_NON_NEGATIVE}"])
    return quantity
