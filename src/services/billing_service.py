"""Billing service - turns displayed purchase quantities into a bill.

Stateless functions used by the Generate Bill action:
- extract_purchase_lines: keep only rows the user is buying
- generate_bill: total the lines for a named customer
- format_currency: display formatting for money
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Optional, Sequence

from src.models import Bill, PurchaseLine
from src.services.billing_strategy import BillingStrategy, RegularBillingStrategy
from src.services.exceptions import BillingAborted
from src.services.inventory_controller import InventoryController
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)

CENTS = Decimal("0.01")


def extract_purchase_lines(rows: Iterable[Sequence[Any]]) -> List[PurchaseLine]:
    """
    Build purchase lines from displayed table rows.

    Args:
        rows: Rows of (name, unit_price, available_quantity, purchase_quantity)
            as shown in the item tables

    Returns:
        PurchaseLine for every row with purchase quantity > 0, in row order
    """
    lines = []
    for name, unit_price, _available, purchase_quantity in rows:
        quantity = int(purchase_quantity)
        if quantity > 0:
            lines.append(PurchaseLine(str(name), Decimal(str(unit_price)), quantity))
    return lines


def generate_bill(
    customer_name: Optional[str],
    lines: List[PurchaseLine],
    controller: InventoryController,
    strategy: Optional[BillingStrategy] = None,
) -> Bill:
    """
    Compute the bill for a customer.

    Args:
        customer_name: Name entered by the user; None or blank means the
            user cancelled
        lines: Purchase lines to bill
        controller: Controller used to aggregate the total
        strategy: Pricing rule. Defaults to RegularBillingStrategy.

    Returns:
        Bill with the customer's name, the lines, and the total

    Raises:
        BillingAborted: If no customer name was given
    """
    if customer_name is None or not customer_name.strip():
        raise BillingAborted()

    if strategy is None:
        strategy = RegularBillingStrategy()

    total = controller.calculate_total(lines, strategy)
    bill = Bill(customer_name=customer_name.strip(), lines=list(lines), total=total)
    log_operation(
        logger,
        operation="generate_bill",
        outcome="success",
        customer_name=bill.customer_name,
        line_count=len(bill.lines),
        total=str(total),
    )
    return bill


def format_currency(amount: Decimal) -> str:
    """
    Format a money amount for display.

    Example:
        >>> format_currency(Decimal("25"))
        '$25.00'
    """
    return f"${Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)}"
