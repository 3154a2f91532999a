"""Billing strategies - how a purchase line is priced.

A strategy turns a unit price and a quantity into a line total. The
inventory controller sums line totals without knowing which strategy it was
given, so discount or tax variants can be added here without touching it.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class BillingStrategy(ABC):
    """Pricing rule for a single purchase line."""

    @abstractmethod
    def calculate(self, price: Decimal, qty: int) -> Decimal:
        """
        Compute the total for one line.

        Inputs are validated by the caller; implementations must be pure
        and must not raise.

        Args:
            price: Unit price (non-negative)
            qty: Quantity purchased (non-negative)

        Returns:
            Line total (non-negative)
        """


class RegularBillingStrategy(BillingStrategy):
    """Flat pricing: unit price times quantity."""

    def calculate(self, price: Decimal, qty: int) -> Decimal:
        return Decimal(price) * qty
