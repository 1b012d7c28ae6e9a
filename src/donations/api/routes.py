"""FastAPI routes for the Donations domain: listings, requests and orders."""

from fastapi import APIRouter, HTTPException, Query, Request
from protean.utils.globals import current_domain

from donations.api.schemas import (
    CreateListingRequest,
    DeletedResponse,
    ListingIdResponse,
    ListingPageResponse,
    OrderIdResponse,
    OrderPageResponse,
    OrderReportResponse,
    PlaceOrderRequest,
    RequestFoodRequest,
    RequestIdResponse,
    RequestPageResponse,
    StatusResponse,
    UpdateListingRequest,
    UpdateOrderStatusRequest,
)
from donations.browse.reads import (
    browse_listings,
    featured_listings,
    get_listing,
    list_orders,
    list_owned_listings,
    list_requests,
)
from donations.listing.claim import RequestFood
from donations.listing.creation import CreateListing
from donations.listing.details import UpdateListing
from donations.listing.removal import DeleteListing
from donations.order.placement import PlaceOrder
from donations.order.report import order_report
from donations.order.status import UpdateOrderStatus


def _page_body(key: str, page) -> dict:
    return {key: [item.to_dict() for item in page.items], "pagination": page.pagination()}


# ---------------------------------------------------------------------------
# Listing Router
# ---------------------------------------------------------------------------
listing_router = APIRouter(prefix="/listings", tags=["listings"])


@listing_router.get("", response_model=ListingPageResponse)
async def browse(request: Request) -> dict:
    return _page_body("listings", browse_listings(dict(request.query_params)))


@listing_router.get("/featured")
async def featured() -> list[dict]:
    return [listing.to_dict() for listing in featured_listings()]


@listing_router.get("/owned", response_model=ListingPageResponse)
async def owned(request: Request, owner_email: str = Query(...)) -> dict:
    return _page_body("listings", list_owned_listings(owner_email, dict(request.query_params)))


@listing_router.post("", status_code=201, response_model=ListingIdResponse)
async def create_listing(body: CreateListingRequest) -> ListingIdResponse:
    command = CreateListing(**body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return ListingIdResponse(listing_id=result)


@listing_router.get("/{listing_id}")
async def listing_details(listing_id: str) -> dict:
    return get_listing(listing_id).to_dict()


@listing_router.put("/{listing_id}", response_model=StatusResponse)
async def update_listing(listing_id: str, body: UpdateListingRequest) -> StatusResponse:
    command = UpdateListing(listing_id=listing_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@listing_router.delete("/{listing_id}", response_model=DeletedResponse)
async def delete_listing(listing_id: str) -> DeletedResponse:
    deleted = current_domain.process(DeleteListing(listing_id=listing_id), asynchronous=False)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Listing {listing_id} not found")
    return DeletedResponse(deleted=deleted)


@listing_router.post("/{listing_id}/requests", status_code=201, response_model=RequestIdResponse)
async def request_food(listing_id: str, body: RequestFoodRequest) -> RequestIdResponse:
    command = RequestFood(
        listing_id=listing_id,
        requester_email=body.requester_email,
        note=body.note,
    )
    result = current_domain.process(command, asynchronous=False)
    return RequestIdResponse(request_id=result)


# ---------------------------------------------------------------------------
# Request Router
# ---------------------------------------------------------------------------
request_router = APIRouter(prefix="/requests", tags=["requests"])


@request_router.get("", response_model=RequestPageResponse)
async def requests_made(request: Request, requester_email: str = Query(...)) -> dict:
    return _page_body("requests", list_requests(requester_email, dict(request.query_params)))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(**body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=OrderPageResponse)
async def orders_received(request: Request, owner_email: str = Query(...)) -> dict:
    return _page_body("orders", list_orders(owner_email, dict(request.query_params)))


@order_router.get("/report", response_model=OrderReportResponse)
async def monthly_report(owner_email: str = Query(...), month: str = Query(...)) -> dict:
    return order_report(owner_email, month).to_dict()


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
