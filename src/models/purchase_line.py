"""
Transient billing records built from the quantities a user selects.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class PurchaseLine:
    """
    One item the customer intends to buy.

    Attributes:
        name: Item name as displayed
        unit_price: Unit price as displayed
        requested_quantity: Quantity selected by the user (> 0)
    """

    name: str
    unit_price: Decimal
    requested_quantity: int


@dataclass(frozen=True)
class Bill:
    """A computed bill for a named customer."""

    customer_name: str
    lines: List[PurchaseLine] = field(default_factory=list)
    total: Decimal = Decimal("0")

    @property
    def item_count(self) -> int:
        """Total number of units on the bill."""
        return sum(line.requested_quantity for line in self.lines)
