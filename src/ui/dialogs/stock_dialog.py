"""
Update Stock Dialog.

Modal dialog for setting the available quantity of one catalog item.
The item is picked from the combined regular and special name list; the
new quantity is free text and is validated by the caller.
"""

import customtkinter as ctk
from typing import Callable, Optional

from src.services.inventory_controller import InventoryController
from src.ui.dialogs.dialog_utils import center_on_parent
from src.utils.constants import COLOR_BUTTON, COLOR_BUTTON_HOVER


class UpdateStockDialog(ctk.CTkToplevel):
    """
    Modal dialog for manual stock updates.

    Args:
        parent: Parent window
        controller: Inventory controller supplying item names and levels
        on_apply: Called with (item_name, quantity_text) when the user
                  confirms. Cancelling or closing the window calls nothing.
    """

    def __init__(
        self,
        parent,
        controller: InventoryController,
        on_apply: Optional[Callable[[str, str], None]] = None,
    ):
        super().__init__(parent)
        self.controller = controller
        self.on_apply = on_apply

        self.title("Update Stock")
        self.geometry("380x300")
        self.resizable(False, False)

        # Make modal
        self.transient(parent)
        self.grab_set()

        self.item_names = controller.get_item_names()

        self._create_widgets()
        self._layout_widgets()

        self.update_idletasks()
        center_on_parent(self, parent)

        self.qty_entry.focus_set()

    def _create_widgets(self):
        """Create all dialog widgets."""
        self.input_frame = ctk.CTkFrame(self)

        self.item_label = ctk.CTkLabel(self.input_frame, text="Select Item:")
        self.item_var = ctk.StringVar(value=self.item_names[0] if self.item_names else "")
        self.item_dropdown = ctk.CTkComboBox(
            self.input_frame,
            values=self.item_names,
            variable=self.item_var,
            width=300,
            state="readonly",
            command=self._on_item_change,
        )
        self.current_qty_label = ctk.CTkLabel(self.input_frame, text="")
        self._on_item_change(self.item_var.get())

        self.qty_label = ctk.CTkLabel(self.input_frame, text="New Quantity:")
        self.qty_entry = ctk.CTkEntry(
            self.input_frame,
            placeholder_text="Enter quantity",
            width=150,
        )

        self.button_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.cancel_button = ctk.CTkButton(
            self.button_frame,
            text="Cancel",
            command=self._on_cancel,
            fg_color="gray",
        )
        self.apply_button = ctk.CTkButton(
            self.button_frame,
            text="Update",
            command=self._on_apply,
            fg_color=COLOR_BUTTON,
            hover_color=COLOR_BUTTON_HOVER,
        )

        self.qty_entry.bind("<Return>", lambda e: self._on_apply())
        self.bind("<Escape>", lambda e: self._on_cancel())

    def _layout_widgets(self):
        """Layout all widgets."""
        self.input_frame.pack(fill="x", padx=20, pady=(20, 10))
        self.item_label.pack(anchor="w")
        self.item_dropdown.pack(anchor="w", pady=5)
        self.current_qty_label.pack(anchor="w")

        self.qty_label.pack(anchor="w", pady=(10, 0))
        self.qty_entry.pack(anchor="w", pady=5)

        self.button_frame.pack(fill="x", padx=20, pady=20)
        self.cancel_button.pack(side="left", padx=5)
        self.apply_button.pack(side="right", padx=5)

    def _on_item_change(self, item_name: str):
        """Show the current stock level of the selected item."""
        item = self.controller.find_item(item_name) if item_name else None
        if item is None:
            self.current_qty_label.configure(text="Current Quantity: --")
        else:
            self.current_qty_label.configure(
                text=f"Current Quantity: {item.available_quantity}"
            )

    def _on_cancel(self):
        self.destroy()

    def _on_apply(self):
        item_name = self.item_var.get()
        quantity_text = self.qty_entry.get()
        self.destroy()
        if self.on_apply:
            self.on_apply(item_name, quantity_text)
