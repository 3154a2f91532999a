"""Order service - mock order placement.

Orders are acknowledged and logged; nothing is validated or stored.
"""

from src.models import OrderConfirmation, OrderRequest
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def place_order(customer_name: str, address: str = "", phone: str = "") -> OrderConfirmation:
    """
    Place a mock order.

    Args:
        customer_name: Name from the order form (may be empty)
        address: Delivery address from the order form
        phone: Contact phone from the order form

    Returns:
        OrderConfirmation carrying the acknowledgment message
    """
    request = OrderRequest(customer_name=customer_name, address=address, phone=phone)
    log_operation(
        logger,
        operation="place_order",
        outcome="success",
        customer_name=customer_name,
    )
    return OrderConfirmation(
        request=request,
        message=f"Order placed successfully for {customer_name}",
    )
