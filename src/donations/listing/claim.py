"""Food requests: a recipient claims a listing.

The request record and the listing's status flip are written in the same
unit of work. The donor is emailed afterwards by the FoodRequested handler,
so a mail failure never undoes the claim.
"""

from datetime import UTC, datetime

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.listing.listing import Listing
from donations.request.food_request import FoodRequest


@donations.command(part_of="Listing")
class RequestFood:
    listing_id = Identifier(required=True)
    requester_email = String(required=True, max_length=254)
    note = Text()


@donations.command_handler(part_of=Listing)
class RequestFoodHandler:
    @handle(RequestFood)
    def request_food(self, command):
        listings = current_domain.repository_for(Listing)
        listing = listings.find_one(command.listing_id)
        if listing is None:
            raise ObjectNotFoundError({"_entity": f"Listing {command.listing_id} not found"})

        now = datetime.now(UTC)
        listing.request(command.requester_email, note=command.note, requested_at=now)

        food_request = FoodRequest.record(
            listing_id=listing.id,
            requester_email=command.requester_email,
            food_name=listing.food_name,
            note=command.note,
            requested_at=now,
        )
        request_id = current_domain.repository_for(FoodRequest).insert(food_request)
        listings.add(listing)
        return request_id
