"""FoodShare FastAPI application.

Web server that processes donation commands synchronously via HTTP. Every
request runs inside the donations domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (notification handlers run after commit, emails queued on a thread pool)
#   - "production" → event_processing = "async" (notification handlers run in the Engine)
from contextlib import asynccontextmanager

from donations.domain import donations  # noqa: E402
from donations.notification.dispatcher import wait_for_dispatches
from donations.utils.logging import add_context, clear_context
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

donations.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Let queued donor emails go out before the worker exits
    wait_for_dispatches(timeout=30)


app = FastAPI(
    lifespan=lifespan,
    title="FoodShare API",
    description="Food donation marketplace: listings, requests and bulk orders",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the donations domain context for each request."""
    add_context(method=request.method, path=request.url.path)
    try:
        with donations.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from donations.api import (  # noqa: E402
    listing_router,
    order_router,
    register_error_handlers,
    request_router,
)

app.include_router(listing_router)
app.include_router(request_router)
app.include_router(order_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "donations": {"name": donations.name},
            },
        }
    )
