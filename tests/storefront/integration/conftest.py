import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from storefront.api import (
    category_router,
    customer_router,
    order_router,
    register_error_handlers,
    shop_item_router,
)


@pytest.fixture()
def client():
    from storefront.domain import storefront

    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with storefront.domain_context():
            return await call_next(request)

    app.include_router(customer_router)
    app.include_router(category_router)
    app.include_router(shop_item_router)
    app.include_router(order_router)
    register_error_handlers(app)
    return TestClient(app)
