"""Listing details: update command and handler.

An update whose supplied fields all match the stored listing is rejected
with ``NoChangeError`` before anything is written.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.listing.listing import DETAIL_FIELDS, Listing
from donations.shared.exceptions import NoChangeError


@donations.command(part_of="Listing")
class UpdateListing:
    listing_id = Identifier(required=True)
    food_name = String(max_length=255)
    food_image = String(max_length=1000)
    description = Text()
    quantity = Integer(min_value=0)
    price = Float(min_value=0.0)
    location = String(max_length=500)
    expiry_date = String(max_length=40)


@donations.command_handler(part_of=Listing)
class UpdateListingHandler:
    @handle(UpdateListing)
    def update_listing(self, command):
        repo = current_domain.repository_for(Listing)
        listing = repo.find_one(command.listing_id)
        if listing is None:
            raise ObjectNotFoundError({"_entity": f"Listing {command.listing_id} not found"})

        fields = {name: getattr(command, name) for name in DETAIL_FIELDS if getattr(command, name) is not None}
        if listing.has_same_details(**fields):
            raise NoChangeError(str(listing.id))

        result = repo.update(command.listing_id, fields, upsert=True)
        return result.modified
