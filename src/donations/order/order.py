"""BulkOrder aggregate: a bulk purchase of a listing's food with delivery details.

Status changes are administrative: any of the four statuses may follow any
other. Orders are never deleted.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from donations.domain import donations
from donations.order.events import BulkOrderPlaced, OrderStatusChanged
from donations.shared.dates import to_date


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


@donations.aggregate
class BulkOrder:
    listing_id = Identifier()
    owner_email = String(required=True, max_length=254)
    owner_name = String(max_length=255)
    food_name = String(required=True, max_length=255)

    customer_name = String(max_length=255)
    customer_email = String(required=True, max_length=254)

    quantity = Integer(required=True, min_value=1)
    total_price = Float(min_value=0.0, default=0.0)
    delivery_date = Date(required=True)
    delivery_address = String(required=True, max_length=500)
    notes = Text()

    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    order_date = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        owner_email,
        food_name,
        customer_email,
        quantity,
        delivery_date,
        delivery_address,
        listing_id=None,
        owner_name=None,
        customer_name=None,
        total_price=None,
        notes=None,
    ):
        now = datetime.now(UTC)
        order = cls(
            listing_id=listing_id,
            owner_email=owner_email,
            owner_name=owner_name,
            food_name=food_name,
            customer_name=customer_name,
            customer_email=customer_email,
            quantity=int(quantity),
            total_price=float(total_price) if total_price is not None else 0.0,
            delivery_date=to_date(delivery_date, "delivery_date"),
            delivery_address=delivery_address,
            notes=notes,
            status=OrderStatus.PENDING.value,
            order_date=now,
            updated_at=now,
        )
        order.raise_(
            BulkOrderPlaced(
                order_id=order.id,
                listing_id=listing_id,
                owner_email=owner_email,
                owner_name=owner_name,
                food_name=food_name,
                customer_name=customer_name,
                customer_email=customer_email,
                quantity=order.quantity,
                total_price=order.total_price,
                delivery_date=order.delivery_date,
                delivery_address=delivery_address,
                notes=notes,
                order_date=now,
            )
        )
        return order

    def change_status(self, new_status) -> bool:
        """Move to ``new_status`` from whatever the current status is.

        Writing the current status again refreshes ``updated_at`` but raises
        no event. Returns ``True`` in both cases since the write happens.
        """
        try:
            target = OrderStatus(new_status)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError({"status": [f"'{new_status}' is not one of {allowed}"]}) from None

        now = datetime.now(UTC)
        previous = self.status
        self.status = target.value
        self.updated_at = now

        if previous != target.value:
            self.raise_(
                OrderStatusChanged(
                    order_id=self.id,
                    previous_status=previous,
                    new_status=target.value,
                    changed_at=now,
                )
            )
        return True
