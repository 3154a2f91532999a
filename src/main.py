"""
Main entry point for the Bakery Manager application.

This module configures logging and appearance, shows the welcome window,
and then launches the main window.
"""

import logging
import sys
import customtkinter as ctk

from src.services.catalog_store import get_catalog_store
from src.services.inventory_controller import InventoryController
from src.services.logging_utils import configure_logging
from src.ui.main_window import MainWindow
from src.ui.welcome_window import WelcomeWindow
from src.utils.config import get_config

logger = logging.getLogger("bakery_manager.main")


def show_welcome() -> bool:
    """
    Show the welcome window until it is closed.

    Returns:
        True if the user pressed Continue, False if the window was closed
    """
    welcome = WelcomeWindow()
    welcome.mainloop()
    return welcome.continued


def main():
    """
    Main application entry point.

    Shows the welcome window, then the main window, and exits with 0 when
    the main window closes.
    """
    config = get_config()
    configure_logging(config.log_level)

    ctk.set_appearance_mode(config.ui_appearance)
    ctk.set_default_color_theme(config.ui_theme)

    logger.info(f"Starting {config.app_name} v{config.app_version}")
    logger.info(f"Environment: {config.environment}")

    if not show_welcome():
        logger.info("Welcome window closed; exiting")
        sys.exit(0)

    controller = InventoryController(get_catalog_store())

    try:
        app = MainWindow(controller)
        app.mainloop()
    except Exception as e:
        logger.exception(f"Application crashed: {e}")
        sys.exit(1)

    logger.info("Application closed successfully")
    sys.exit(0)


if __name__ == "__main__":
    main()
