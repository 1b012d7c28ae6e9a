"""Listing store: browse, featured and owner queries over listings."""

from protean.exceptions import ValidationError

from donations.browse.query import LISTING_QUERY, QueryDescriptor, SortDirection, SortSpec
from donations.domain import donations
from donations.listing.listing import Listing
from donations.shared.store import DocumentStore, store_operation

FEATURED_COUNT = 4

_REQUIRED_ON_CREATE = ("owner_email", "food_name", "quantity", "location", "expiry_date")


@donations.repository(part_of=Listing)
class ListingRepository(DocumentStore):
    @store_operation
    def featured(self, count: int = FEATURED_COUNT) -> list[Listing]:
        """The listings with the largest quantities, biggest first."""
        descriptor = QueryDescriptor(
            filters={},
            sort=SortSpec("quantity", SortDirection.DESC),
            page=1,
            page_size=count,
        )
        return self.find(descriptor).items

    def owned_by(self, owner_email: str, raw_params=None):
        return self.find(LISTING_QUERY.build(raw_params, owner_email=owner_email))

    def _apply(self, listing: Listing, fields: dict) -> bool:
        return listing.update_details(**fields)

    def _new(self, identifier, fields: dict) -> Listing:
        missing = [name for name in _REQUIRED_ON_CREATE if fields.get(name) is None]
        if missing:
            raise ValidationError({name: ["is required"] for name in missing})
        return Listing.create(listing_id=identifier, **fields)
