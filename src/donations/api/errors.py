"""Exception handlers that turn workflow errors into HTTP responses.

Protean's own exceptions (``ObjectNotFoundError``, ``ValidationError``)
are mapped by ``protean.integrations.fastapi``. Donation workflow errors
answer with ``{"error": code, "message": message}``.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from donations.shared.exceptions import (
    DonationsError,
    InvalidOperation,
    ListingExpiredError,
    NoChangeError,
    StoreFailure,
)

logger = structlog.get_logger(__name__)

# Most specific class first
_STATUS_CODES: list[tuple[type[DonationsError], int]] = [
    (InvalidOperation, 403),
    (ListingExpiredError, 400),
    (StoreFailure, 503),
]


def status_for(exc: DonationsError) -> int:
    for error_cls, status_code in _STATUS_CODES:
        if isinstance(exc, error_cls):
            return status_code
    return 500


async def donations_error_handler(request: Request, exc: DonationsError) -> JSONResponse:
    if isinstance(exc, NoChangeError):
        return JSONResponse(status_code=200, content={"status": "unchanged", "message": exc.message})

    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Request failed", path=request.url.path, error=exc.code, message=exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.code, "message": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(DonationsError, donations_error_handler)
