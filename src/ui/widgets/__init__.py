"""
Widget exports for the UI package.
"""

from src.ui.widgets.item_table import ItemTable
from src.ui.widgets.dialogs import (
    TextPromptDialog,
    show_info,
    show_success,
)

__all__ = [
    "ItemTable",
    "TextPromptDialog",
    "show_info",
    "show_success",
]
