"""
Dialog components for the Bakery Manager UI.

Modal dialogs that collect input before returning to the main window.
"""

from src.ui.dialogs.order_dialog import PlaceOrderDialog
from src.ui.dialogs.stock_dialog import UpdateStockDialog

__all__ = ["PlaceOrderDialog", "UpdateStockDialog"]
