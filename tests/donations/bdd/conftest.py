"""Shared BDD fixtures and step definitions for the Donations domain."""

from datetime import timedelta

import pytest
from donations.browse.query import REQUEST_QUERY
from donations.listing.creation import CreateListing
from donations.listing.listing import Listing
from donations.notification.dispatcher import wait_for_dispatches
from donations.request.food_request import FoodRequest
from donations.shared.dates import utc_today
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured workflow errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a listing by "{owner_email}" expiring in {days:d} days'),
    target_fixture="listing_id",
)
def listing_by_owner(owner_email, days):
    return current_domain.process(
        CreateListing(
            owner_email=owner_email,
            food_name="Vegetable Soup",
            quantity=12,
            location="Riverside Hall",
            expiry_date=(utc_today() + timedelta(days=days)).isoformat(),
        ),
        asynchronous=False,
    )


@given("the mail relay is failing")
def mail_relay_failing(sender):
    sender.configure(should_succeed=False, failure_reason="Relay unreachable")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the listing status is "{status}"'))
def listing_status_is(listing_id, status):
    assert current_domain.repository_for(Listing).get(listing_id).status == status


@then(parsers.re(r"(?P<count>\d+) requests? (is|are) recorded for the listing"))
def requests_recorded(listing_id, count):
    page = current_domain.repository_for(FoodRequest).find(REQUEST_QUERY.build({"pageSize": 100}, listing_id=listing_id))
    assert page.total_items == int(count)


@then(parsers.re(r'"(?P<recipient>[^"]+)" receives (?P<count>\d+) emails?'))
def emails_received(sender, recipient, count):
    wait_for_dispatches()
    assert len([m for m in sender.sent_emails if m["to"] == recipient]) == int(count)


@then(parsers.cfparse('the request is refused with "{code}"'))
def request_refused(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code
