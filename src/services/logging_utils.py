"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across stock, billing, and order
operations.

Usage:
    from src.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    # Log successful operation
    log_operation(
        logger,
        operation="update_stock",
        outcome="success",
        item_name="Bread",
        new_quantity=99,
    )

    # Log an unmatched lookup
    log_operation(
        logger,
        operation="update_stock",
        outcome="item_not_found",
        level=logging.WARNING,
        item_name="Baguette",
    )
"""

import logging
from typing import Any, Optional

ROOT_LOGGER_NAME = "bakery_manager"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'bakery_manager.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'bakery_manager.services.inventory_controller'
    """
    # Extract just the module name if full path is provided
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.services.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter for structured logging.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "update_stock", "generate_bill")
        outcome: Outcome description (e.g., "success", "item_not_found")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (item names, totals, etc.)
            Common fields:
            - item_name: Catalog item being updated
            - new_quantity: Stock level written by update_stock
            - customer_name: Customer on a bill or order
            - total: Bill total
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the application logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level name such as "INFO" or "DEBUG". Defaults to INFO.

    Returns:
        The application root logger.
    """
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
    app_logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    return app_logger
