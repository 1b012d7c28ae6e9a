"""Application tests for DeleteListing."""

from datetime import date, timedelta

from donations.listing.creation import CreateListing
from donations.listing.listing import Listing
from donations.listing.removal import DeleteListing
from protean import current_domain


def _create_listing():
    return current_domain.process(
        CreateListing(
            owner_email="donor@example.com",
            food_name="Bread",
            quantity=3,
            location="Bakery Lane",
            expiry_date=(date.today() + timedelta(days=1)).isoformat(),
        ),
        asynchronous=False,
    )


def _delete(listing_id):
    return current_domain.process(DeleteListing(listing_id=listing_id), asynchronous=False)


class TestDeleteListing:
    def test_delete_removes_listing(self):
        listing_id = _create_listing()
        assert _delete(listing_id) == 1
        assert current_domain.repository_for(Listing).find_one(listing_id) is None

    def test_delete_is_idempotent(self):
        listing_id = _create_listing()
        _delete(listing_id)
        assert _delete(listing_id) == 0

    def test_delete_unknown_is_not_an_error(self):
        assert _delete("never-existed") == 0
