"""Administrative order status changes: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.order.order import BulkOrder


@donations.command(part_of="BulkOrder")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@donations.command_handler(part_of=BulkOrder)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        result = current_domain.repository_for(BulkOrder).update(command.order_id, {"status": command.status})
        if result.matched == 0:
            raise ObjectNotFoundError({"_entity": f"Order {command.order_id} not found"})
        return result.modified
