"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import category_router, customer_router, order_router, shop_item_router

__all__ = [
    "category_router",
    "customer_router",
    "order_router",
    "register_error_handlers",
    "shop_item_router",
]
