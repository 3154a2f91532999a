"""Services package - Business logic layer for the Bakery Manager.

Architecture:
- Store: CatalogStore owns every BakeryItem for the process lifetime
- Controller: InventoryController is the only stock mutation entry point
- Strategies: BillingStrategy prices a purchase line
- Services: Stateless billing and order functions
- Exceptions: Consistent error handling via the ServiceError hierarchy

All state is in memory and single-threaded; nothing is persisted.
"""

from .billing_strategy import BillingStrategy, RegularBillingStrategy
from .catalog_store import CatalogStore, get_catalog_store, reset_catalog_store
from .inventory_controller import InventoryController
from . import billing_service, order_service

__all__ = [
    "BillingStrategy",
    "RegularBillingStrategy",
    "CatalogStore",
    "get_catalog_store",
    "reset_catalog_store",
    "InventoryController",
    "billing_service",
    "order_service",
]
