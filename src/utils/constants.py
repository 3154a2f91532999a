"""
Constants for the Bakery Manager application.

This module defines system-wide constants including:
- Application metadata
- Purchase quantity limits
- UI constants (colors, fonts, sizes)
- User-facing messages
"""

from typing import List, Tuple

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Sweet Delights Bakery"
APP_TITLE = "Sweet Delights Bakery Management System"
APP_TAGLINE = "Freshness in Every Bite!"
APP_VERSION = "0.1.0"

# ============================================================================
# Purchase Quantities
# ============================================================================

MIN_PURCHASE_QUANTITY = 0
MAX_PURCHASE_QUANTITY = 10

# Values offered by the purchase quantity selector
PURCHASE_QUANTITY_CHOICES: List[str] = [
    str(qty) for qty in range(MIN_PURCHASE_QUANTITY, MAX_PURCHASE_QUANTITY + 1)
]

# ============================================================================
# UI Constants
# ============================================================================

# Window sizes
WELCOME_WINDOW_WIDTH = 600
WELCOME_WINDOW_HEIGHT = 400
MAIN_WINDOW_WIDTH = 1000
MAIN_WINDOW_HEIGHT = 700
MIN_WINDOW_WIDTH = 800
MIN_WINDOW_HEIGHT = 600

# Colors (CustomTkinter theme compatible)
COLOR_BRAND = "#780050"
COLOR_BRAND_DARK = "#640030"
COLOR_BUTTON = "#9646A0"
COLOR_BUTTON_HOVER = "#6E2878"
COLOR_WELCOME_BG = "#6E2878"
COLOR_WHITE = "#FFFFFF"

# Fonts
FONT_HEADING = ("Georgia", 36, "bold")
FONT_WELCOME_TITLE = ("Georgia", 38, "bold")
FONT_TAGLINE = ("Segoe UI", 22)
FONT_SECTION_TITLE = ("Segoe UI", 20, "bold")
FONT_TOTAL = ("Segoe UI", 20, "bold")
FONT_BUTTON = ("Segoe UI", 16, "bold")

# Item table columns: (header, width)
ITEM_TABLE_COLUMNS: List[Tuple[str, int]] = [
    ("Item Name", 260),
    ("Unit Price ($)", 140),
    ("Available Qty", 140),
    ("Purchase Qty", 140),
]

# Padding
PADDING_MEDIUM = 10
PADDING_LARGE = 20

# ============================================================================
# User Messages
# ============================================================================

MSG_STOCK_UPDATED = "Updated successfully!"
MSG_INVALID_VALUE = "Invalid Value!"
MSG_ENTER_CUSTOMER_NAME = "Enter Customer Name:"
GRAND_TOTAL_LABEL = "Grand Total: {total}"

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Must be a whole number"
ERROR_INVALID_NON_NEGATIVE = "Must be zero or greater"
