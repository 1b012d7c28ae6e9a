"""FoodRequest aggregate: a recipient's claim against a single listing.

Requests are append-only: one is recorded per successful claim and never
changed afterwards.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String, Text

from donations.domain import donations


@donations.aggregate
class FoodRequest:
    listing_id = Identifier(required=True)
    requester_email = String(required=True, max_length=254)
    food_name = String(max_length=255)
    note = Text()
    requested_at = DateTime(required=True)

    @classmethod
    def record(cls, listing_id, requester_email, food_name=None, note=None, requested_at=None):
        return cls(
            listing_id=listing_id,
            requester_email=requester_email,
            food_name=food_name,
            note=note,
            requested_at=requested_at or datetime.now(UTC),
        )
