"""
BakeryItem model - a single sellable item in one of the catalogs.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(eq=False)
class BakeryItem:
    """
    A bakery item held by the catalog store.

    Items are created once when the store is seeded and live for the whole
    process. Only ``available_quantity`` changes afterwards, and only through
    ``InventoryController.update_stock``. Equality is identity: two items
    with the same values are still different catalog entries.

    Attributes:
        name: Display name, unique within its catalog (case-insensitive)
        unit_price: Price of one unit (non-negative)
        available_quantity: Units currently in stock (non-negative)
    """

    name: str
    unit_price: Decimal
    available_quantity: int

    def __post_init__(self) -> None:
        """Normalize the price to Decimal."""
        if not isinstance(self.unit_price, Decimal):
            self.unit_price = Decimal(str(self.unit_price))

    def matches(self, name: str) -> bool:
        """Check whether ``name`` refers to this item, ignoring case."""
        return self.name.casefold() == name.casefold()

    def __repr__(self) -> str:
        return (
            f"BakeryItem(name='{self.name}', unit_price={self.unit_price}, "
            f"available_quantity={self.available_quantity})"
        )
