"""Helpers that build storefront records through the command pipeline."""

import json

from protean import current_domain
from storefront.category.management import CreateCategory
from storefront.customer.management import RegisterCustomer
from storefront.order import dispatch
from storefront.shop_item.management import CreateShopItem
from storefront.shop_item.shop_item import ShopItem

_counter = {"customer": 0, "item": 0}


def register_customer(**overrides):
    _counter["customer"] += 1
    defaults = {
        "name": "John",
        "surname": "Doe",
        "email": f"customer{_counter['customer']}@example.com",
        "address": "123 Main St",
        "city": "Boston",
        "state": "MA",
        "zip_code": "02108",
        "country": "USA",
        "phone": "555-123-4567",
    }
    defaults.update(overrides)
    return current_domain.process(RegisterCustomer(**defaults), asynchronous=False)


def create_category(**overrides):
    defaults = {"title": "Electronics", "description": "Electronic devices"}
    defaults.update(overrides)
    return current_domain.process(CreateCategory(**defaults), asynchronous=False)


def create_shop_item(stock=10, **overrides):
    _counter["item"] += 1
    defaults = {
        "title": f"Item {_counter['item']}",
        "description": "A test item",
        "price": 10.0,
        "stock_quantity": stock,
    }
    if "category_ids" in overrides:
        overrides["category_ids"] = json.dumps(overrides["category_ids"])
    defaults.update(overrides)
    return current_domain.process(CreateShopItem(**defaults), asynchronous=False)


def stock_of(shop_item_id):
    return current_domain.repository_for(ShopItem).get(shop_item_id).stock_quantity


def place_order(customer_id, *lines, **kwargs):
    """Place an order from ``(shop_item_id, quantity)`` pairs."""
    return dispatch.place_order(
        customer_id=customer_id,
        lines=[{"shop_item_id": item_id, "quantity": quantity} for item_id, quantity in lines],
        **kwargs,
    )
