"""Domain events for the BulkOrder aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from donations.domain import donations


@donations.event(part_of="BulkOrder")
class BulkOrderPlaced:
    """A customer placed a bulk order. Carries everything the owner email needs."""

    __version__ = 1

    order_id = Identifier(required=True)
    listing_id = Identifier()
    owner_email = String(required=True)
    owner_name = String()
    food_name = String(required=True)
    customer_name = String()
    customer_email = String(required=True)
    quantity = Integer(required=True)
    total_price = Float()
    delivery_date = Date(required=True)
    delivery_address = String(required=True)
    notes = Text()
    order_date = DateTime(required=True)


@donations.event(part_of="BulkOrder")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
