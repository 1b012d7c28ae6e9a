"""Business-rule failures raised by the donation workflow.

Missing entities surface as ``protean.exceptions.ObjectNotFoundError`` and
malformed input as ``protean.exceptions.ValidationError``; everything below
covers the rules Protean knows nothing about. Each error carries a stable
``code`` that the API layer turns into a response body.
"""

from typing import Any


class DonationsError(Exception):
    """Base class for donation workflow errors."""

    code = "DONATIONS_ERROR"

    def __init__(self, message: str, **details: Any):
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidOperation(DonationsError):
    """The caller asked for something the marketplace rules forbid."""

    code = "INVALID_OPERATION"


class SelfRequestError(InvalidOperation):
    code = "SELF_REQUEST"

    def __init__(self, listing_id: str):
        super().__init__("You cannot request your own food", listing_id=listing_id)


class SelfOrderError(InvalidOperation):
    code = "SELF_ORDER"

    def __init__(self, listing_id: str | None = None):
        super().__init__("You cannot place an order for your own food", listing_id=listing_id)


class ListingExpiredError(DonationsError):
    code = "LISTING_EXPIRED"

    def __init__(self, listing_id: str, expiry_date):
        super().__init__(
            "This food item has expired and cannot be requested",
            listing_id=listing_id,
            expiry_date=str(expiry_date),
        )


class NoChangeError(DonationsError):
    """The update matches what is already stored; nothing was written."""

    code = "NO_CHANGE"

    def __init__(self, listing_id: str):
        super().__init__("No changes to update", listing_id=listing_id)


class StoreFailure(DonationsError):
    """The persistence layer failed. The cause is kept as ``__cause__``."""

    code = "STORE_FAILURE"


class DispatchFailure(DonationsError):
    """A notification could not be handed to its transport.

    Raised by senders and always absorbed by the dispatcher.
    """

    code = "DISPATCH_FAILURE"
