"""
Main application window for the Bakery Manager.

Shows the regular and special catalogs with purchase quantity selectors,
the running grand total, and the Generate Bill, Place Order, Update Stock,
and Exit actions.
"""

import logging
import customtkinter as ctk
from decimal import Decimal
from typing import List, Optional

from src.models import PurchaseLine
from src.services import billing_service, order_service
from src.services.billing_strategy import BillingStrategy, RegularBillingStrategy
from src.services.exceptions import BillingAborted, ServiceError
from src.services.inventory_controller import InventoryController
from src.ui.dialogs import PlaceOrderDialog, UpdateStockDialog
from src.ui.utils.error_handler import handle_error
from src.ui.widgets.dialogs import TextPromptDialog, show_info, show_success
from src.ui.widgets.item_table import ItemTable
from src.utils.constants import (
    APP_NAME,
    APP_TITLE,
    COLOR_BRAND,
    COLOR_BRAND_DARK,
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    FONT_BUTTON,
    FONT_HEADING,
    FONT_SECTION_TITLE,
    FONT_TOTAL,
    GRAND_TOTAL_LABEL,
    MAIN_WINDOW_HEIGHT,
    MAIN_WINDOW_WIDTH,
    MIN_WINDOW_HEIGHT,
    MIN_WINDOW_WIDTH,
    MSG_ENTER_CUSTOMER_NAME,
    MSG_STOCK_UPDATED,
)
from src.utils.validators import parse_stock_quantity

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """
    Main application window.

    Args:
        controller: Inventory controller backing both tables
        strategy: Billing strategy used by Generate Bill
    """

    def __init__(
        self,
        controller: InventoryController,
        strategy: Optional[BillingStrategy] = None,
    ):
        super().__init__()

        self.controller = controller
        self.strategy = strategy or RegularBillingStrategy()

        # Window configuration
        self.title(APP_TITLE)
        self.geometry(f"{MAIN_WINDOW_WIDTH}x{MAIN_WINDOW_HEIGHT}")
        self.minsize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=0)  # Heading
        self.grid_rowconfigure(1, weight=1)  # Tables
        self.grid_rowconfigure(2, weight=0)  # Total and buttons

        self._create_heading()
        self._create_tables()
        self._create_action_bar()

        self.protocol("WM_DELETE_WINDOW", self._on_exit)

        self.load_items()

    def _create_heading(self):
        heading = ctk.CTkLabel(
            self,
            text=APP_NAME,
            font=ctk.CTkFont(*FONT_HEADING),
            text_color=COLOR_BRAND,
        )
        heading.grid(row=0, column=0, padx=10, pady=(10, 0))

    def _create_tables(self):
        """Create the regular and special item tables."""
        tables_frame = ctk.CTkFrame(self, fg_color="transparent")
        tables_frame.grid(row=1, column=0, padx=10, pady=10, sticky="nsew")
        tables_frame.grid_columnconfigure(0, weight=1)
        tables_frame.grid_rowconfigure((1, 3), weight=1)

        self.regular_table = self._add_section(tables_frame, "Regular Items", 0)
        self.special_table = self._add_section(tables_frame, "Special Items", 2)

    def _add_section(self, parent, title: str, row: int) -> ItemTable:
        title_label = ctk.CTkLabel(
            parent,
            text=title,
            font=ctk.CTkFont(*FONT_SECTION_TITLE),
            text_color=COLOR_BRAND_DARK,
        )
        title_label.grid(row=row, column=0, pady=(5, 5))

        table = ItemTable(parent)
        table.grid(row=row + 1, column=0, sticky="nsew")
        return table

    def _create_action_bar(self):
        """Create the grand total label and the action buttons."""
        action_frame = ctk.CTkFrame(self, fg_color="transparent")
        action_frame.grid(row=2, column=0, padx=10, pady=(0, 10), sticky="ew")
        action_frame.grid_columnconfigure(0, weight=1)

        self.total_label = ctk.CTkLabel(
            action_frame,
            text=GRAND_TOTAL_LABEL.format(total=billing_service.format_currency(Decimal("0"))),
            font=ctk.CTkFont(*FONT_TOTAL),
        )
        self.total_label.grid(row=0, column=0, pady=(0, 10))

        button_frame = ctk.CTkFrame(action_frame, fg_color="transparent")
        button_frame.grid(row=1, column=0)

        actions = [
            ("Generate Bill", self._on_generate_bill),
            ("Place Order", self._on_place_order),
            ("Update Stock", self._on_update_stock),
            ("Exit", self._on_exit),
        ]
        self.buttons = {}
        for column, (label, command) in enumerate(actions):
            button = ctk.CTkButton(
                button_frame,
                text=label,
                font=ctk.CTkFont(*FONT_BUTTON),
                fg_color=COLOR_BUTTON,
                hover_color=COLOR_BUTTON_HOVER,
                height=40,
                command=command,
            )
            button.grid(row=0, column=column, padx=10)
            self.buttons[label] = button

    def load_items(self):
        """Reload both tables from the controller, clearing purchase quantities."""
        self.regular_table.load_items(self.controller.get_regular_items())
        self.special_table.load_items(self.controller.get_special_items())

    def get_purchase_lines(self) -> List[PurchaseLine]:
        """Collect purchase lines for every row with a quantity above zero."""
        rows = self.regular_table.get_rows() + self.special_table.get_rows()
        return billing_service.extract_purchase_lines(rows)

    # ------------------------------------------------------------------
    # Generate Bill
    # ------------------------------------------------------------------

    def _prompt_customer_name(self) -> Optional[str]:
        dialog = TextPromptDialog(self, title="Generate Bill", prompt=MSG_ENTER_CUSTOMER_NAME)
        return dialog.get_input()

    def _on_generate_bill(self):
        """Prompt for a customer, total the selected quantities, and show the bill."""
        customer_name = self._prompt_customer_name()
        try:
            bill = billing_service.generate_bill(
                customer_name,
                self.get_purchase_lines(),
                self.controller,
                self.strategy,
            )
        except BillingAborted:
            logger.debug("Bill generation cancelled")
            return

        self.show_bill(bill.customer_name, bill.total)

    def show_bill(self, customer_name: str, total: Decimal):
        """Update the grand total label and show the bill summary."""
        formatted = billing_service.format_currency(total)
        self.total_label.configure(text=GRAND_TOTAL_LABEL.format(total=formatted))
        show_info("Bill", f"Bill for {customer_name}\nTotal: {formatted}", parent=self)

    # ------------------------------------------------------------------
    # Place Order
    # ------------------------------------------------------------------

    def _on_place_order(self):
        PlaceOrderDialog(self, on_submit=self._submit_order)

    def _submit_order(self, customer_name: str, address: str, phone: str):
        confirmation = order_service.place_order(customer_name, address, phone)
        show_success("Place Order", confirmation.message, parent=self)

    # ------------------------------------------------------------------
    # Update Stock
    # ------------------------------------------------------------------

    def _on_update_stock(self):
        UpdateStockDialog(self, self.controller, on_apply=self._apply_stock_update)

    def _apply_stock_update(self, item_name: str, quantity_text: str):
        """
        Validate the entered quantity and update the item's stock.

        Nothing changes when the quantity is invalid or the item is unknown.
        """
        try:
            quantity = parse_stock_quantity(quantity_text)
            self.controller.update_stock(item_name, quantity, strict=True)
        except ServiceError as e:
            handle_error(e, parent=self, operation="Update stock")
            return

        self.load_items()
        show_success("Update Stock", MSG_STOCK_UPDATED, parent=self)

    def _on_exit(self):
        """Close the application."""
        logger.info("Exit requested")
        self.destroy()
