"""Donations domain API package."""

from donations.api.errors import register_error_handlers
from donations.api.routes import listing_router, order_router, request_router

__all__ = ["listing_router", "request_router", "order_router", "register_error_handlers"]
