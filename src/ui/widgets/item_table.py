"""
Item table widget for a bakery catalog.

Shows one row per item with its name, unit price, available quantity, and
a purchase quantity selector limited to 0-10.
"""

import customtkinter as ctk
from decimal import Decimal
from typing import List, Tuple

from src.models import BakeryItem
from src.utils.constants import (
    ITEM_TABLE_COLUMNS,
    MIN_PURCHASE_QUANTITY,
    PURCHASE_QUANTITY_CHOICES,
)

# (name, unit price, available quantity, purchase quantity)
ItemRow = Tuple[str, Decimal, int, int]


class ItemTable(ctk.CTkFrame):
    """
    Scrollable catalog table with an editable purchase quantity column.

    Only the purchase quantity can be changed by the user. Reloading the
    table resets every purchase quantity to zero.
    """

    def __init__(self, parent, columns: List[Tuple[str, int]] = None):
        """
        Initialize the item table.

        Args:
            parent: Parent widget
            columns: List of (column_name, width) tuples
        """
        super().__init__(parent)

        self.columns = columns or ITEM_TABLE_COLUMNS
        self.items: List[BakeryItem] = []
        self.quantity_vars: List[ctk.StringVar] = []
        self.row_frames: List[ctk.CTkFrame] = []

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._create_header()
        self._create_data_frame()

    def _create_header(self):
        """Create the table header row."""
        header_frame = ctk.CTkFrame(self, fg_color=("gray85", "gray25"))
        header_frame.grid(row=0, column=0, sticky="ew")

        for i, (col_name, col_width) in enumerate(self.columns):
            header_label = ctk.CTkLabel(
                header_frame,
                text=col_name,
                width=col_width,
                font=ctk.CTkFont(size=16, weight="bold"),
                anchor="w",
            )
            header_label.grid(row=0, column=i, padx=5, pady=8, sticky="w")

    def _create_data_frame(self):
        """Create the scrollable frame for data rows."""
        self.scrollable_frame = ctk.CTkScrollableFrame(self)
        self.scrollable_frame.grid(row=1, column=0, sticky="nsew")

        for i, (_, col_width) in enumerate(self.columns):
            self.scrollable_frame.grid_columnconfigure(i, minsize=col_width)

    def load_items(self, items: List[BakeryItem]):
        """
        Replace the displayed rows with the given items.

        Args:
            items: Catalog items to display, in order
        """
        for widget in self.scrollable_frame.winfo_children():
            widget.destroy()

        self.items = list(items)
        self.quantity_vars = []
        self.row_frames = []

        for row_index, item in enumerate(self.items):
            self._create_row(row_index, item)

    def _create_row(self, row_index: int, item: BakeryItem):
        row_frame = ctk.CTkFrame(self.scrollable_frame, fg_color="transparent")
        row_frame.grid(row=row_index, column=0, columnspan=len(self.columns), sticky="ew")

        values = [item.name, f"{item.unit_price:.2f}", str(item.available_quantity)]
        for col_index, (value, (_, col_width)) in enumerate(zip(values, self.columns)):
            cell_label = ctk.CTkLabel(
                row_frame,
                text=value,
                width=col_width,
                font=ctk.CTkFont(size=15),
                anchor="w",
            )
            cell_label.grid(row=0, column=col_index, padx=5, pady=4, sticky="w")

        quantity_var = ctk.StringVar(value=str(MIN_PURCHASE_QUANTITY))
        quantity_menu = ctk.CTkOptionMenu(
            row_frame,
            values=PURCHASE_QUANTITY_CHOICES,
            variable=quantity_var,
            width=self.columns[-1][1] - 20,
        )
        quantity_menu.grid(row=0, column=len(values), padx=5, pady=4, sticky="w")

        self.quantity_vars.append(quantity_var)
        self.row_frames.append(row_frame)

    def set_purchase_quantity(self, row_index: int, quantity: int):
        """Set the purchase quantity shown in a row."""
        self.quantity_vars[row_index].set(str(quantity))

    def get_rows(self) -> List[ItemRow]:
        """
        Get the displayed rows.

        Returns:
            List of (name, unit_price, available_quantity, purchase_quantity)
        """
        return [
            (item.name, item.unit_price, item.available_quantity, int(var.get()))
            for item, var in zip(self.items, self.quantity_vars)
        ]
