"""
Welcome window shown at startup.

Displays the bakery name and tagline with a Continue button. Closing it
with Continue tells the launcher to open the main window; closing it any
other way ends the application.
"""

import customtkinter as ctk

from src.utils.constants import (
    APP_NAME,
    APP_TAGLINE,
    COLOR_BRAND,
    COLOR_WELCOME_BG,
    COLOR_WHITE,
    FONT_TAGLINE,
    FONT_WELCOME_TITLE,
    WELCOME_WINDOW_HEIGHT,
    WELCOME_WINDOW_WIDTH,
)


class WelcomeWindow(ctk.CTk):
    """Startup splash with a single Continue action."""

    def __init__(self):
        super().__init__()

        self.title(f"Welcome | {APP_NAME}")
        self.geometry(f"{WELCOME_WINDOW_WIDTH}x{WELCOME_WINDOW_HEIGHT}")
        self.resizable(False, False)
        self.configure(fg_color=COLOR_WELCOME_BG)

        self.continued = False

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure((0, 4), weight=1)

        self.title_label = ctk.CTkLabel(
            self,
            text=APP_NAME,
            font=ctk.CTkFont(*FONT_WELCOME_TITLE),
            text_color=COLOR_WHITE,
        )
        self.title_label.grid(row=1, column=0, pady=15)

        self.tagline_label = ctk.CTkLabel(
            self,
            text=APP_TAGLINE,
            font=ctk.CTkFont(*FONT_TAGLINE),
            text_color=COLOR_WHITE,
        )
        self.tagline_label.grid(row=2, column=0, pady=15)

        self.continue_button = ctk.CTkButton(
            self,
            text="Continue",
            font=ctk.CTkFont("Segoe UI", 20, "bold"),
            fg_color=COLOR_WHITE,
            hover_color=("gray90", "gray80"),
            text_color=COLOR_BRAND,
            command=self._on_continue,
        )
        self.continue_button.grid(row=3, column=0, pady=15, ipadx=10, ipady=5)

    def _on_continue(self):
        """Close the welcome screen and hand over to the main window."""
        self.continued = True
        self.destroy()
