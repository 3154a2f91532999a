"""
Domain models package.

Plain in-memory records for the bakery catalog and the transient values
built by the presentation layer. Nothing here is persisted.
"""

from .bakery_item import BakeryItem
from .purchase_line import PurchaseLine, Bill
from .order import OrderRequest, OrderConfirmation

__all__ = [
    "BakeryItem",
    "PurchaseLine",
    "Bill",
    "OrderRequest",
    "OrderConfirmation",
]
