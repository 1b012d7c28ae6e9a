"""Listing creation: command and handler."""

from protean import handle
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from donations.domain import donations
from donations.listing.listing import Listing


@donations.command(part_of="Listing")
class CreateListing:
    owner_email = String(required=True, max_length=254)
    owner_name = String(max_length=255)
    food_name = String(required=True, max_length=255)
    food_image = String(max_length=1000)
    description = Text()
    quantity = Integer(required=True, min_value=0)
    price = Float(min_value=0.0)
    location = String(required=True, max_length=500)
    expiry_date = String(required=True, max_length=40)  # ISO date or datetime


@donations.command_handler(part_of=Listing)
class CreateListingHandler:
    @handle(CreateListing)
    def create_listing(self, command):
        listing = Listing.create(
            owner_email=command.owner_email,
            owner_name=command.owner_name,
            food_name=command.food_name,
            food_image=command.food_image,
            description=command.description,
            quantity=command.quantity,
            price=command.price,
            location=command.location,
            expiry_date=command.expiry_date,
        )
        return current_domain.repository_for(Listing).insert(listing)
