"""Inventory controller - facade between the UI and the catalog store.

The controller holds no state of its own beyond a reference to the store.
It exposes read access to both catalogs, the only stock mutation entry
point, and total aggregation with a supplied billing strategy.

Usage:
    from src.services.inventory_controller import InventoryController
    from src.services.billing_strategy import RegularBillingStrategy

    controller = InventoryController(store)
    controller.update_stock("bread", 99)
    total = controller.calculate_total(lines, RegularBillingStrategy())
"""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from src.models import BakeryItem, PurchaseLine
from src.services.billing_strategy import BillingStrategy, RegularBillingStrategy
from src.services.catalog_store import CatalogStore, get_catalog_store
from src.services.exceptions import ItemNotFound
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class InventoryController:
    """
    Mediates between the presentation layer and the catalog store.

    Args:
        store: Catalog store to operate on. Defaults to the process-wide
            store from ``get_catalog_store``.
    """

    def __init__(self, store: Optional[CatalogStore] = None):
        self.store = store if store is not None else get_catalog_store()

    def get_regular_items(self) -> List[BakeryItem]:
        """Return the live regular catalog."""
        return self.store.get_regular_items()

    def get_special_items(self) -> List[BakeryItem]:
        """Return the live special catalog."""
        return self.store.get_special_items()

    def get_item_names(self) -> List[str]:
        """Return every item name, regular items first, in catalog order."""
        return [item.name for item in self._iter_items()]

    def find_item(self, item_name: str) -> Optional[BakeryItem]:
        """
        Look up an item by name across both catalogs.

        Args:
            item_name: Name to match, case-insensitively

        Returns:
            The first matching item (regular catalog searched first), or None
        """
        for item in self._iter_items():
            if item.matches(item_name):
                return item
        return None

    def update_stock(self, item_name: str, new_quantity: int, strict: bool = False) -> bool:
        """
        Set the available quantity of the named item.

        Searches the regular catalog, then the special catalog, and updates
        the first case-insensitive name match.

        An unknown name is a silent no-op by default: nothing changes and
        False is returned (a warning is logged). Pass ``strict=True`` to get
        an ItemNotFound error instead.

        Args:
            item_name: Name of the item to update
            new_quantity: New stock level (validated by the caller)
            strict: Raise instead of ignoring an unknown name

        Returns:
            True if an item was updated, False if no item matched

        Raises:
            ItemNotFound: If strict is True and no item matches
        """
        item = self.find_item(item_name)
        if item is None:
            log_operation(
                logger,
                operation="update_stock",
                outcome="item_not_found",
                level=logging.WARNING,
                item_name=item_name,
                strict=strict,
            )
            if strict:
                raise ItemNotFound(item_name)
            return False

        previous_quantity = item.available_quantity
        item.available_quantity = new_quantity
        log_operation(
            logger,
            operation="update_stock",
            outcome="success",
            item_name=item.name,
            previous_quantity=previous_quantity,
            new_quantity=new_quantity,
        )
        return True

    def calculate_total(
        self,
        lines: Iterable[PurchaseLine],
        strategy: Optional[BillingStrategy] = None,
    ) -> Decimal:
        """
        Sum the line totals produced by a billing strategy.

        Args:
            lines: Purchase lines (anything with ``unit_price`` and
                ``requested_quantity``), summed in order
            strategy: Pricing rule. Defaults to RegularBillingStrategy.

        Returns:
            Total as Decimal; Decimal("0") for no lines
        """
        if strategy is None:
            strategy = RegularBillingStrategy()

        total = Decimal("0")
        for line in lines:
            total += strategy.calculate(line.unit_price, line.requested_quantity)
        return total

    def _iter_items(self):
        yield from self.store.get_regular_items()
        yield from self.store.get_special_items()
