"""
Mock order records. Orders are acknowledged but never stored.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderRequest:
    """Customer details collected by the Place Order form."""

    customer_name: str
    address: str = ""
    phone: str = ""


@dataclass(frozen=True)
class OrderConfirmation:
    """Acknowledgment returned after an order is placed."""

    request: OrderRequest
    message: str
