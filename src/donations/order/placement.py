"""Bulk order placement: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.order.order import BulkOrder
from donations.shared.exceptions import SelfOrderError

_REQUIRED = ("quantity", "delivery_date", "delivery_address")


@donations.command(part_of="BulkOrder")
class PlaceOrder:
    listing_id = Identifier()
    owner_email = String(required=True, max_length=254)
    owner_name = String(max_length=255)
    food_name = String(required=True, max_length=255)
    user_email = String(required=True, max_length=254)  # The customer placing the order
    customer_name = String(max_length=255)
    customer_email = String(max_length=254)  # Defaults to user_email
    quantity = Integer(min_value=1)
    total_price = Float(min_value=0.0)
    delivery_date = String(max_length=40)
    delivery_address = String(max_length=500)
    notes = Text()


@donations.command_handler(part_of=BulkOrder)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        missing = [name for name in _REQUIRED if getattr(command, name) in (None, "")]
        if missing:
            raise ValidationError({name: ["is required"] for name in missing})

        if command.owner_email == command.user_email:
            raise SelfOrderError(str(command.listing_id) if command.listing_id else None)

        order = BulkOrder.place(
            listing_id=command.listing_id,
            owner_email=command.owner_email,
            owner_name=command.owner_name,
            food_name=command.food_name,
            customer_name=command.customer_name,
            customer_email=command.customer_email or command.user_email,
            quantity=command.quantity,
            total_price=command.total_price,
            delivery_date=command.delivery_date,
            delivery_address=command.delivery_address,
            notes=command.notes,
        )
        return current_domain.repository_for(BulkOrder).insert(order)
