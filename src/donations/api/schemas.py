"""Pydantic request/response schemas for the Donations API.

These are external contracts, kept separate from the internal Protean
commands. Dates travel as ISO-8601 strings.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Listing Request Schemas
# ---------------------------------------------------------------------------
class CreateListingRequest(BaseModel):
    owner_email: str
    owner_name: str | None = None
    food_name: str
    food_image: str | None = None
    description: str | None = None
    quantity: int = Field(ge=0)
    price: float | None = Field(default=None, ge=0)
    location: str
    expiry_date: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "owner_email": "donor@example.com",
                    "owner_name": "Dana Donor",
                    "food_name": "Vegetable Soup",
                    "quantity": 12,
                    "location": "Riverside Community Hall",
                    "expiry_date": "2026-11-01",
                }
            ]
        }
    }


class UpdateListingRequest(BaseModel):
    food_name: str | None = None
    food_image: str | None = None
    description: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    price: float | None = Field(default=None, ge=0)
    location: str | None = None
    expiry_date: str | None = None


class RequestFoodRequest(BaseModel):
    requester_email: str
    note: str | None = None


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    listing_id: str | None = None
    owner_email: str
    owner_name: str | None = None
    food_name: str
    user_email: str
    customer_name: str | None = None
    customer_email: str | None = None
    quantity: int | None = Field(default=None, ge=1)
    total_price: float | None = Field(default=None, ge=0)
    delivery_date: str | None = None
    delivery_address: str | None = None
    notes: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ListingIdResponse(BaseModel):
    listing_id: str


class RequestIdResponse(BaseModel):
    request_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class DeletedResponse(BaseModel):
    deleted: int


class StatusResponse(BaseModel):
    status: str = "ok"


class PaginationSchema(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int
    hasNextPage: bool
    hasPrevPage: bool


class OrderReportResponse(BaseModel):
    owner_email: str
    month: str
    total_orders: int
    total_quantity: int
    total_revenue: float
    by_status: dict[str, int]


class ListingPageResponse(BaseModel):
    listings: list[dict]
    pagination: PaginationSchema


class RequestPageResponse(BaseModel):
    requests: list[dict]
    pagination: PaginationSchema


class OrderPageResponse(BaseModel):
    orders: list[dict]
    pagination: PaginationSchema
