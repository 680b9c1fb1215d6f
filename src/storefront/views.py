"""Plain-data renderings of storefront aggregates.

Every view is a JSON-ready dict; timestamps are ISO 8601 strings.
"""

from datetime import datetime


def _timestamp(value):
    return value.isoformat() if isinstance(value, datetime) else value


def customer_view(customer):
    return {
        "id": str(customer.id),
        "name": customer.name,
        "surname": customer.surname,
        "email": customer.email,
        "address": customer.address,
        "city": customer.city,
        "state": customer.state,
        "zip_code": customer.zip_code,
        "country": customer.country,
        "phone": customer.phone,
        "created_at": _timestamp(customer.created_at),
        "updated_at": _timestamp(customer.updated_at),
    }


def category_view(category):
    return {
        "id": str(category.id),
        "title": category.title,
        "description": category.description,
        "created_at": _timestamp(category.created_at),
        "updated_at": _timestamp(category.updated_at),
    }


def shop_item_view(item):
    return {
        "id": str(item.id),
        "title": item.title,
        "description": item.description,
        "price": item.price,
        "stock_quantity": item.stock_quantity,
        "image_url": item.image_url,
        "is_active": item.is_active,
        "sku": item.sku,
        "category_ids": list(item.category_ids or []),
        "created_at": _timestamp(item.created_at),
        "updated_at": _timestamp(item.updated_at),
    }


def order_view(order, customer=None, items=None):
    """Render an order with its customer and each line's shop item.

    ``items`` maps shop item ids to loaded items. A reference that no longer
    resolves renders as ``None``.
    """
    items = items or {}
    return {
        "id": str(order.id),
        "customer_id": str(order.customer_id),
        "customer": customer_view(customer) if customer is not None else None,
        "status": order.status,
        "order_date": _timestamp(order.order_date),
        "shipping_address": order.shipping_address,
        "notes": order.notes,
        "updated_at": _timestamp(order.updated_at),
        "items": [
            {
                "id": str(line.id),
                "shop_item_id": str(line.shop_item_id),
                "quantity": line.quantity,
                "position": line.position,
                "shop_item": (
                    shop_item_view(items[str(line.shop_item_id)]) if str(line.shop_item_id) in items else None
                ),
            }
            for line in order.ordered_lines
        ],
    }
