"""
Reusable dialog widgets for the Bakery Manager.

Provides message boxes (success, info) and a single-field text
prompt used for the customer name on billing.
"""

import customtkinter as ctk
from tkinter import messagebox
from typing import Optional

from src.utils.constants import COLOR_BUTTON, COLOR_BUTTON_HOVER, PADDING_LARGE, PADDING_MEDIUM


def show_success(title: str, message: str, parent=None):
    """Show a success dialog."""
    messagebox.showinfo(title, message, parent=parent)


def show_info(title: str, message: str, parent=None):
    """Show an information dialog."""
    messagebox.showinfo(title, message, parent=parent)


class TextPromptDialog(ctk.CTkToplevel):
    """
    Modal prompt with one entry field and OK/Cancel buttons.

    ``get_input`` blocks until the dialog closes and returns the entered
    text, or None when the user cancels or closes the window.
    """

    def __init__(
        self,
        parent,
        title: str,
        prompt: str,
        default_value: str = "",
    ):
        """
        Initialize the prompt dialog.

        Args:
            parent: Parent window
            title: Dialog title
            prompt: Prompt text shown above the entry
            default_value: Initial entry text
        """
        super().__init__(parent)

        self.title(title)
        self.geometry("400x160")
        self.resizable(False, False)

        # Make modal
        self.transient(parent)
        self.grab_set()

        self.result: Optional[str] = None

        self.grid_columnconfigure(0, weight=1)

        self.prompt_label = ctk.CTkLabel(self, text=prompt)
        self.prompt_label.grid(
            row=0, column=0, padx=PADDING_LARGE, pady=(PADDING_LARGE, PADDING_MEDIUM), sticky="w"
        )

        self.entry = ctk.CTkEntry(self, width=360)
        self.entry.grid(row=1, column=0, padx=PADDING_LARGE, pady=PADDING_MEDIUM)
        self.entry.insert(0, default_value)
        self.entry.focus()

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.grid(row=2, column=0, padx=PADDING_LARGE, pady=(PADDING_MEDIUM, PADDING_LARGE))

        self.ok_button = ctk.CTkButton(
            button_frame,
            text="OK",
            width=100,
            fg_color=COLOR_BUTTON,
            hover_color=COLOR_BUTTON_HOVER,
            command=self._ok_clicked,
        )
        self.ok_button.grid(row=0, column=0, padx=5)

        self.cancel_button = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            command=self._cancel_clicked,
        )
        self.cancel_button.grid(row=0, column=1, padx=5)

        self.entry.bind("<Return>", lambda e: self._ok_clicked())
        self.bind("<Escape>", lambda e: self._cancel_clicked())
        self.protocol("WM_DELETE_WINDOW", self._cancel_clicked)

    def _ok_clicked(self):
        self.result = self.entry.get()
        self.destroy()

    def _cancel_clicked(self):
        self.result = None
        self.destroy()

    def get_input(self) -> Optional[str]:
        """
        Wait for the dialog to close.

        Returns:
            Entered text, or None if cancelled
        """
        self.wait_window()
        return self.result
