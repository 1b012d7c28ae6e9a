"""Tests for the Listing aggregate: creation, expiry and claiming."""

from datetime import UTC, date, datetime, timedelta

from unittest.mock import patch

import pytest
from donations.listing.events import FoodRequested, ListingCreated, ListingDetailsUpdated
from donations.listing.listing import Listing, ListingStatus
from donations.shared.exceptions import ListingExpiredError, SelfRequestError
from protean.exceptions import ValidationError

TODAY = date(2026, 10, 17)


def _listing(**overrides):
    defaults = {
        "owner_email": "donor@example.com",
        "owner_name": "Dana Donor",
        "food_name": "Vegetable Soup",
        "quantity": 12,
        "location": "Riverside Hall",
        "expiry_date": "2026-10-20",
    }
    defaults.update(overrides)
    return Listing.create(**defaults)


class TestListingCreation:
    def test_create_sets_available_status(self):
        listing = _listing()
        assert listing.status == ListingStatus.AVAILABLE.value

    def test_create_coerces_quantity_and_price(self):
        listing = _listing(quantity="7", price="3.5")
        assert listing.quantity == 7
        assert listing.price == 3.5

    def test_price_defaults_to_zero(self):
        assert _listing().price == 0.0

    def test_expiry_accepts_iso_datetime(self):
        listing = _listing(expiry_date="2026-10-20T18:30:00.000Z")
        assert listing.expiry_date == date(2026, 10, 20)

    def test_invalid_expiry_raises_validation_error(self):
        with pytest.raises(ValidationError):
            _listing(expiry_date="next tuesday")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _listing(quantity=-1)

    def test_create_raises_listing_created(self):
        listing = _listing()
        assert len(listing._events) == 1
        event = listing._events[0]
        assert isinstance(event, ListingCreated)
        assert event.food_name == "Vegetable Soup"

    def test_explicit_identifier_is_kept(self):
        listing = _listing(listing_id="listing-fixed-id")
        assert str(listing.id) == "listing-fixed-id"


class TestListingExpiry:
    def test_not_expired_before_expiry_date(self):
        assert _listing(expiry_date="2026-10-20").is_expired(TODAY) is False

    def test_not_expired_on_expiry_date(self):
        assert _listing(expiry_date="2026-10-17").is_expired(TODAY) is False

    def test_expired_after_expiry_date(self):
        assert _listing(expiry_date="2026-10-16").is_expired(TODAY) is True

    def test_default_today_is_the_utc_date(self):
        listing = _listing(expiry_date="2026-10-17")

        with patch("donations.listing.listing.utc_today", return_value=date(2026, 10, 18)):
            assert listing.is_expired() is True
        with patch("donations.listing.listing.utc_today", return_value=date(2026, 10, 17)):
            assert listing.is_expired() is False


class TestListingRequest:
    def test_request_moves_to_requested(self):
        listing = _listing()
        listing.request("hungry@example.com", today=TODAY)
        assert listing.status == ListingStatus.REQUESTED.value

    def test_request_raises_food_requested(self):
        listing = _listing()
        listing._events.clear()
        listing.request("hungry@example.com", note="After 5pm please", today=TODAY)

        event = listing._events[0]
        assert isinstance(event, FoodRequested)
        assert event.donor_email == "donor@example.com"
        assert event.requester_email == "hungry@example.com"
        assert event.note == "After 5pm please"

    def test_self_request_rejected(self):
        listing = _listing()
        with pytest.raises(SelfRequestError):
            listing.request("donor@example.com", today=TODAY)
        assert listing.status == ListingStatus.AVAILABLE.value

    def test_expired_listing_rejected(self):
        listing = _listing(expiry_date="2026-10-16")
        with pytest.raises(ListingExpiredError) as exc:
            listing.request("hungry@example.com", today=TODAY)
        assert exc.value.code == "LISTING_EXPIRED"

    def test_listing_expiring_today_can_be_requested(self):
        listing = _listing(expiry_date="2026-10-17")
        listing.request("hungry@example.com", today=TODAY)
        assert listing.status == ListingStatus.REQUESTED.value

    def test_self_request_checked_before_expiry(self):
        listing = _listing(expiry_date="2026-10-01")
        with pytest.raises(SelfRequestError):
            listing.request("donor@example.com", today=TODAY)

    def test_re_request_stays_requested(self):
        listing = _listing()
        listing.request("first@example.com", today=TODAY)
        listing.request("second@example.com", today=TODAY)
        assert listing.status == ListingStatus.REQUESTED.value
        assert len([e for e in listing._events if isinstance(e, FoodRequested)]) == 2

    def test_request_uses_supplied_timestamp(self):
        stamp = datetime(2026, 10, 17, 9, 0, tzinfo=UTC)
        listing = _listing()
        listing.request("hungry@example.com", requested_at=stamp, today=TODAY)
        assert listing.updated_at == stamp


class TestListingDetails:
    def test_same_details_at_day_granularity(self):
        listing = _listing(expiry_date="2026-10-20")
        assert listing.has_same_details(expiry_date="2026-10-20T23:59:00Z", food_name="Vegetable Soup")

    def test_omitted_fields_are_not_compared(self):
        listing = _listing()
        assert listing.has_same_details(quantity=12, description=None)

    def test_numeric_strings_compare_as_numbers(self):
        listing = _listing(price=2.5)
        assert listing.has_same_details(quantity="12", price="2.50")

    def test_differing_field_detected(self):
        listing = _listing()
        assert not listing.has_same_details(quantity=13)

    def test_empty_description_matches_missing(self):
        listing = _listing()
        assert listing.has_same_details(description="")

    def test_update_details_applies_changes(self):
        listing = _listing()
        listing._events.clear()

        changed = listing.update_details(quantity="20", expiry_date="2026-11-01")

        assert changed is True
        assert listing.quantity == 20
        assert listing.expiry_date == date(2026, 11, 1)
        assert isinstance(listing._events[0], ListingDetailsUpdated)

    def test_update_details_without_changes(self):
        listing = _listing()
        listing._events.clear()
        assert listing.update_details(food_name="Vegetable Soup") is False
        assert listing._events == []

    def test_update_refreshes_updated_at(self):
        listing = _listing()
        before = listing.updated_at
        listing.update_details(location="Town Square")
        assert listing.updated_at >= before
        assert listing.updated_at - before < timedelta(seconds=5)
