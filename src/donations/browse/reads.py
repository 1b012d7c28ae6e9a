"""Read operations behind the browse endpoints.

Each call turns raw query parameters into a descriptor and hands it to
the matching repository. Nothing here writes.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from donations.browse.query import LISTING_QUERY, Page
from donations.listing.listing import Listing
from donations.order.order import BulkOrder
from donations.request.food_request import FoodRequest


def browse_listings(raw_params=None) -> Page:
    repo = current_domain.repository_for(Listing)
    return repo.find(LISTING_QUERY.build(raw_params))


def featured_listings() -> list[Listing]:
    return current_domain.repository_for(Listing).featured()


def get_listing(listing_id) -> Listing:
    listing = current_domain.repository_for(Listing).find_one(listing_id)
    if listing is None:
        raise ObjectNotFoundError({"_entity": f"Listing {listing_id} not found"})
    return listing


def list_owned_listings(owner_email: str, raw_params=None) -> Page:
    return current_domain.repository_for(Listing).owned_by(owner_email, raw_params)


def list_requests(requester_email: str, raw_params=None) -> Page:
    return current_domain.repository_for(FoodRequest).made_by(requester_email, raw_params)


def list_orders(owner_email: str, raw_params=None) -> Page:
    return current_domain.repository_for(BulkOrder).owned_by(owner_email, raw_params)
