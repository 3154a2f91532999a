"""Catalog store - the single owner of the bakery's item catalogs.

The store holds two fixed, ordered lists of items: the regular catalog and
the special catalog. Both are seeded on construction and never grow or
shrink; only each item's ``available_quantity`` changes.

Accessors return the live lists, not copies. Every holder of a returned list
sees stock changes immediately. This is only safe because the application
runs on a single thread (the Tk event loop); there is no locking.

Usage:
    from src.services.catalog_store import CatalogStore, get_catalog_store

    store = CatalogStore()          # fresh, explicitly owned store
    store = get_catalog_store()     # process-wide store, created on first use
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from src.models import BakeryItem
from src.services.logging_utils import get_service_logger

logger = get_service_logger(__name__)

# (name, unit price, available quantity)
REGULAR_ITEM_SEED: Tuple[Tuple[str, str, int], ...] = (
    ("Bread", "2.50", 50),
    ("Cake", "15.00", 20),
    ("Cookies", "5.00", 30),
    ("Croissant", "3.00", 25),
    ("Cupcake", "4.00", 40),
    ("Donut", "2.00", 35),
    ("Muffin", "3.50", 28),
    ("Bagel", "2.50", 20),
    ("Brownie", "4.50", 18),
    ("Puff Pastry", "3.00", 22),
)

SPECIAL_ITEM_SEED: Tuple[Tuple[str, str, int], ...] = (
    ("Red Velvet Cake", "25.00", 10),
    ("Cheese Pastry", "20.00", 8),
    ("Chocolate Lava Cake", "30.00", 6),
    ("Fruit Tart", "22.00", 12),
    ("Strawberry Cheesecake", "28.00", 9),
    ("Macarons Box", "35.00", 5),
    ("Tiramisu", "27.00", 7),
    ("Blueberry Danish", "18.00", 10),
    ("Caramel Eclair", "24.00", 6),
    ("Premium Chocolate Cake", "40.00", 4),
)


def _build_items(seed: Tuple[Tuple[str, str, int], ...]) -> List[BakeryItem]:
    return [BakeryItem(name, Decimal(price), quantity) for name, price, quantity in seed]


class CatalogStore:
    """
    Authoritative holder of the regular and special item catalogs.

    Not thread-safe. All access must happen on the UI thread.
    """

    def __init__(self):
        """Create a store seeded with the hardcoded catalogs."""
        self._regular_items: List[BakeryItem] = _build_items(REGULAR_ITEM_SEED)
        self._special_items: List[BakeryItem] = _build_items(SPECIAL_ITEM_SEED)
        logger.debug(
            f"Catalog store seeded with {len(self._regular_items)} regular and "
            f"{len(self._special_items)} special items"
        )

    def get_regular_items(self) -> List[BakeryItem]:
        """Return the live list of regular items."""
        return self._regular_items

    def get_special_items(self) -> List[BakeryItem]:
        """Return the live list of special items."""
        return self._special_items

    def __repr__(self) -> str:
        return (
            f"CatalogStore(regular={len(self._regular_items)}, "
            f"special={len(self._special_items)})"
        )


# Process-wide store instance
_store_instance: Optional[CatalogStore] = None


def get_catalog_store() -> CatalogStore:
    """
    Get the process-wide catalog store.

    The store is created and seeded on the first call and lives until the
    process exits (or ``reset_catalog_store`` is called). Single-threaded
    only: two threads racing on the first call could each build a store.

    Returns:
        CatalogStore instance
    """
    global _store_instance

    if _store_instance is None:
        _store_instance = CatalogStore()
    return _store_instance


def reset_catalog_store():
    """
    Drop the process-wide catalog store.

    The next ``get_catalog_store`` call builds a freshly seeded store.
    Useful for testing.
    """
    global _store_instance
    _store_instance = None
