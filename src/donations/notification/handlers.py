"""Event handlers that email the donor once a request or order is committed.

The handlers only queue the email; delivery happens off the command path.
"""

import structlog
from protean.utils.mixins import handle

from donations.domain import donations
from donations.listing.events import FoodRequested
from donations.listing.listing import Listing
from donations.notification.dispatcher import get_dispatcher, run_in_background
from donations.order.events import BulkOrderPlaced
from donations.order.order import BulkOrder

logger = structlog.get_logger(__name__)


@donations.event_handler(part_of=Listing)
class FoodRequestNotifier:
    @handle(FoodRequested)
    def on_food_requested(self, event: FoodRequested) -> None:
        run_in_background(get_dispatcher().notify_food_requested, event.to_dict())
        logger.debug("Food request notification queued", listing_id=str(event.listing_id))


@donations.event_handler(part_of=BulkOrder)
class BulkOrderNotifier:
    @handle(BulkOrderPlaced)
    def on_bulk_order_placed(self, event: BulkOrderPlaced) -> None:
        run_in_background(get_dispatcher().notify_bulk_order, event.to_dict())
        logger.debug("Bulk order notification queued", order_id=str(event.order_id))
