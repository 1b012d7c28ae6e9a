"""Domain events for the Listing aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String, Text

from donations.domain import donations


@donations.event(part_of="Listing")
class ListingCreated:
    """A donor published a new listing."""

    __version__ = 1

    listing_id = Identifier(required=True)
    owner_email = String(required=True)
    food_name = String(required=True)
    quantity = Integer(required=True)
    price = Float()
    location = String(required=True)
    expiry_date = Date(required=True)
    created_at = DateTime(required=True)


@donations.event(part_of="Listing")
class ListingDetailsUpdated:
    """The donor changed one or more details of a listing."""

    __version__ = 1

    listing_id = Identifier(required=True)
    food_name = String(required=True)
    quantity = Integer(required=True)
    price = Float()
    location = String(required=True)
    expiry_date = Date(required=True)
    updated_at = DateTime(required=True)


@donations.event(part_of="Listing")
class FoodRequested:
    """A recipient claimed a listing. Carries everything the donor email needs."""

    __version__ = 1

    listing_id = Identifier(required=True)
    food_name = String(required=True)
    donor_email = String(required=True)
    donor_name = String()
    requester_email = String(required=True)
    note = Text()
    quantity = Integer(required=True)
    location = String(required=True)
    requested_at = DateTime(required=True)
