"""Storefront FastAPI application.

Web server for the order-management backend. Commands are processed
synchronously and every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - "test"       → in-memory stores, testing flags on
#   - "production" → sqlite database
from storefront.domain import logger, storefront  # noqa: E402
from storefront.utils.logging import add_context, clear_context  # noqa: E402

storefront.init()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load sample data at start-up when STOREFRONT_SEED is set."""
    if os.getenv("STOREFRONT_SEED", "").lower() in ("1", "true", "yes"):
        from storefront.seed import seed_sample_data
        from storefront.utils.db import setup_db

        setup_db(storefront)
        with storefront.domain_context():
            seed_sample_data()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Storefront API",
    description="Order management: customers, catalog, orders and stock",
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
    """Push the storefront domain context and bind the request to log lines."""
    add_context(method=request.method, path=request.url.path)
    try:
        with storefront.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    category_router,
    customer_router,
    order_router,
    register_error_handlers,
    shop_item_router,
)

app.include_router(customer_router)
app.include_router(category_router)
app.include_router(shop_item_router)
app.include_router(order_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/")
async def root():
    return JSONResponse(content={"message": "Storefront API is running"})


@app.get("/health")
async def health():
    logger.debug("Health check")
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
