"""Listing aggregate: a donor's surplus food offered to recipients.

State Machine:
    AVAILABLE → REQUESTED
    REQUESTED → REQUESTED (re-request, idempotent)

Nothing moves a listing back to AVAILABLE.
"""

from datetime import UTC, date, datetime
from enum import Enum

from protean.fields import Date, DateTime, Float, Integer, String, Text

from donations.domain import donations
from donations.listing.events import FoodRequested, ListingCreated, ListingDetailsUpdated
from donations.shared.dates import to_date, utc_today
from donations.shared.exceptions import ListingExpiredError, SelfRequestError


class ListingStatus(Enum):
    AVAILABLE = "Available"
    REQUESTED = "Requested"


# Fields a donor may change after publishing, in the order they are compared
DETAIL_FIELDS = (
    "food_name",
    "food_image",
    "location",
    "quantity",
    "expiry_date",
    "description",
    "price",
)


def _same(name, stored, incoming) -> bool:
    if name == "expiry_date":
        return to_date(stored, name) == to_date(incoming, name)
    if name == "quantity":
        return stored is not None and int(incoming) == int(stored)
    if name == "price":
        return float(incoming) == float(stored or 0.0)
    return (incoming or "") == (stored or "")


@donations.aggregate
class Listing:
    """A food listing owned exclusively by the donor who created it."""

    owner_email = String(required=True, max_length=254)
    owner_name = String(max_length=255)

    food_name = String(required=True, max_length=255)
    food_image = String(max_length=1000)
    description = Text()
    quantity = Integer(required=True, min_value=0)
    price = Float(min_value=0.0, default=0.0)
    location = String(required=True, max_length=500)
    expiry_date = Date(required=True)

    status = String(choices=ListingStatus, default=ListingStatus.AVAILABLE.value)

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(
        cls,
        owner_email,
        food_name,
        quantity,
        location,
        expiry_date,
        owner_name=None,
        food_image=None,
        description=None,
        price=None,
        listing_id=None,
    ):
        now = datetime.now(UTC)
        identity = {"id": listing_id} if listing_id else {}
        listing = cls(
            **identity,
            owner_email=owner_email,
            owner_name=owner_name,
            food_name=food_name,
            food_image=food_image,
            description=description,
            quantity=int(quantity),
            price=float(price) if price is not None else 0.0,
            location=location,
            expiry_date=to_date(expiry_date, "expiry_date"),
            status=ListingStatus.AVAILABLE.value,
            created_at=now,
            updated_at=now,
        )
        listing.raise_(
            ListingCreated(
                listing_id=listing.id,
                owner_email=owner_email,
                food_name=food_name,
                quantity=listing.quantity,
                price=listing.price,
                location=location,
                expiry_date=listing.expiry_date,
                created_at=now,
            )
        )
        return listing

    def is_expired(self, today: date | None = None) -> bool:
        """True once the expiry date lies strictly before ``today``."""
        today = today or utc_today()
        return to_date(self.expiry_date, "expiry_date") < today

    def has_same_details(self, **fields) -> bool:
        """Compare supplied detail fields with the stored ones.

        ``None`` means "not supplied" and is skipped. Expiry dates are
        compared at day granularity.
        """
        return all(_same(name, getattr(self, name), value) for name, value in fields.items() if value is not None)

    def update_details(self, **fields) -> bool:
        """Apply supplied detail fields. Returns whether anything changed."""
        changes = {
            name: value
            for name, value in fields.items()
            if value is not None and name in DETAIL_FIELDS and not _same(name, getattr(self, name), value)
        }
        if not changes:
            return False

        if "expiry_date" in changes:
            changes["expiry_date"] = to_date(changes["expiry_date"], "expiry_date")
        if "quantity" in changes:
            changes["quantity"] = int(changes["quantity"])
        if "price" in changes:
            changes["price"] = float(changes["price"])

        for name, value in changes.items():
            setattr(self, name, value)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ListingDetailsUpdated(
                listing_id=self.id,
                food_name=self.food_name,
                quantity=self.quantity,
                price=self.price,
                location=self.location,
                expiry_date=self.expiry_date,
                updated_at=now,
            )
        )
        return True

    def request(self, requester_email, note=None, requested_at=None, today: date | None = None):
        """Claim the listing on behalf of ``requester_email``.

        Re-requesting an already requested listing is allowed; the status
        simply stays REQUESTED and the donor is notified again.
        """
        if requester_email == self.owner_email:
            raise SelfRequestError(str(self.id))

        if self.is_expired(today):
            raise ListingExpiredError(str(self.id), self.expiry_date)

        now = requested_at or datetime.now(UTC)
        self.status = ListingStatus.REQUESTED.value
        self.updated_at = now

        self.raise_(
            FoodRequested(
                listing_id=self.id,
                food_name=self.food_name,
                donor_email=self.owner_email,
                donor_name=self.owner_name,
                requester_email=requester_email,
                note=note,
                quantity=self.quantity,
                location=self.location,
                requested_at=now,
            )
        )
