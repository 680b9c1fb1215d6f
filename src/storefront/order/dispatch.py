"""Entry points of the order engine.

Each mutation runs its command while holding the stock locks of every shop
item it may touch (and, for existing orders, the order's own lock first),
then returns the order expanded with its customer and line items.
"""

import json

from protean.utils.globals import current_domain

from storefront.errors import InvalidArgument
from storefront.inventory.locks import item_key, order_key, stock_locks
from storefront.order.modification import UpdateOrder
from storefront.order.placement import PlaceOrder, decode_lines
from storefront.order.queries import get_order
from storefront.order.removal import DeleteOrder
from storefront.order.support import load_order

UPDATABLE_FIELDS = ("customer_id", "lines", "status", "shipping_address", "notes")


def _encode_lines(lines):
    return json.dumps([{"shop_item_id": line.shop_item_id, "quantity": line.quantity} for line in lines])


def _item_keys(*line_sets):
    return [item_key(line.shop_item_id) for lines in line_sets for line in lines]


def place_order(customer_id, lines, shipping_address=None, notes=None, status=None) -> dict:
    lines = decode_lines(lines)
    with stock_locks.hold(*_item_keys(lines)):
        order_id = current_domain.process(
            PlaceOrder(
                customer_id=customer_id,
                lines=_encode_lines(lines),
                shipping_address=shipping_address,
                notes=notes,
                status=status,
            ),
            asynchronous=False,
        )
    return get_order(order_id)


def update_order(order_id, changes: dict) -> dict:
    """Apply the keys present in ``changes``; absent keys are left untouched."""
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise InvalidArgument({"_entity": [f"Unknown order fields: {', '.join(sorted(unknown))}"]})

    new_lines = decode_lines(changes["lines"]) if changes.get("lines") else []
    payload = {key: value for key, value in changes.items() if key != "lines"}

    with stock_locks.hold(order_key(order_id)):
        order = load_order(order_id)
        with stock_locks.hold(*_item_keys(order.stock_lines(), new_lines)):
            current_domain.process(
                UpdateOrder(
                    order_id=order_id,
                    lines=_encode_lines(new_lines) if new_lines else None,
                    fields_set=json.dumps(sorted(changes)),
                    **payload,
                ),
                asynchronous=False,
            )
    return get_order(order_id)


def delete_order(order_id) -> None:
    with stock_locks.hold(order_key(order_id)):
        order = load_order(order_id)
        with stock_locks.hold(*_item_keys(order.stock_lines())):
            current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
