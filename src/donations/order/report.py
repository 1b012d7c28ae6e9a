"""Monthly order report for a listing owner."""

from collections import Counter
from dataclasses import dataclass, field

import structlog
from protean.utils.globals import current_domain

from donations.order.order import BulkOrder, OrderStatus

logger = structlog.get_logger(__name__)


@dataclass
class OrderReport:
    owner_email: str
    month: str
    total_orders: int = 0
    total_quantity: int = 0
    total_revenue: float = 0.0
    by_status: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "owner_email": self.owner_email,
            "month": self.month,
            "total_orders": self.total_orders,
            "total_quantity": self.total_quantity,
            "total_revenue": self.total_revenue,
            "by_status": self.by_status,
        }


def order_report(owner_email: str, month: str) -> OrderReport:
    """Summarise one owner's orders placed during ``month`` (``YYYY-MM``).

    Cancelled orders count towards ``total_orders`` and ``by_status`` but
    contribute nothing to quantity or revenue.
    """
    orders = current_domain.repository_for(BulkOrder).placed_in_month(owner_email, month)

    statuses = Counter(order.status for order in orders)
    live = [order for order in orders if order.status != OrderStatus.CANCELLED.value]

    report = OrderReport(
        owner_email=owner_email,
        month=month,
        total_orders=len(orders),
        total_quantity=sum(order.quantity for order in live),
        total_revenue=round(sum(order.total_price or 0.0 for order in live), 2),
        by_status={status.value: statuses.get(status.value, 0) for status in OrderStatus},
    )
    logger.debug("Order report built", owner_email=owner_email, month=month, total_orders=report.total_orders)
    return report
