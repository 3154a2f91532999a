"""
Place Order Dialog.

Collects a customer's name, address, and phone for a mock order. Fields
are not validated; confirming simply hands them to the callback.
"""

import customtkinter as ctk
from typing import Callable, Optional

from src.ui.dialogs.dialog_utils import center_on_parent
from src.utils.constants import COLOR_BUTTON, COLOR_BUTTON_HOVER


class PlaceOrderDialog(ctk.CTkToplevel):
    """
    Modal form for placing an order.

    Args:
        parent: Parent window
        on_submit: Called with (customer_name, address, phone) on confirm
    """

    FIELDS = (
        ("name", "Customer Name:"),
        ("address", "Address:"),
        ("phone", "Phone:"),
    )

    def __init__(
        self,
        parent,
        on_submit: Optional[Callable[[str, str, str], None]] = None,
    ):
        super().__init__(parent)
        self.on_submit = on_submit

        self.title("Place Order")
        self.geometry("400x330")
        self.resizable(False, False)

        self.transient(parent)
        self.grab_set()

        self.entries = {}
        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=20, pady=(20, 10))
        for key, label_text in self.FIELDS:
            ctk.CTkLabel(form, text=label_text).pack(anchor="w", padx=10, pady=(8, 0))
            entry = ctk.CTkEntry(form, width=340)
            entry.pack(anchor="w", padx=10, pady=(2, 4))
            self.entries[key] = entry

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.pack(fill="x", padx=20, pady=20)
        self.cancel_button = ctk.CTkButton(
            button_frame, text="Cancel", command=self.destroy, fg_color="gray"
        )
        self.cancel_button.pack(side="left", padx=5)
        self.submit_button = ctk.CTkButton(
            button_frame,
            text="OK",
            command=self._on_submit,
            fg_color=COLOR_BUTTON,
            hover_color=COLOR_BUTTON_HOVER,
        )
        self.submit_button.pack(side="right", padx=5)

        self.bind("<Escape>", lambda e: self.destroy())

        self.update_idletasks()
        center_on_parent(self, parent)
        self.entries["name"].focus_set()

    def get_values(self):
        """Return the current (name, address, phone) field values."""
        return tuple(self.entries[key].get() for key, _ in self.FIELDS)

    def _on_submit(self):
        values = self.get_values()
        self.destroy()
        if self.on_submit:
            self.on_submit(*values)
