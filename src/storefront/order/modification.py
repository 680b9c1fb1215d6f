"""Order modification: partial updates that keep stock consistent.

The order's status decides whether it holds stock (see ``on_status_change``).
When the line set is replaced, the stock held by the old lines and the stock
needed by the new ones are exchanged in one ledger batch, so the new lines
are fully validated before the old ones are released.
"""

import json

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import InvalidArgument
from storefront.inventory.ledger import InventoryLedger
from storefront.order.order import Order, OrderStatus, StockAction, on_status_change, parse_status
from storefront.order.placement import decode_lines
from storefront.order.support import load_order, resolve_customer
from storefront.shared.changes import supplied_changes
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

HEADER_FIELDS = ("customer_id", "shipping_address", "notes", "status")


@storefront.command(part_of="Order")
class UpdateOrder:
    order_id: Identifier(required=True)
    customer_id: Identifier()
    lines: Text()  # JSON: list of {shop_item_id, quantity}
    shipping_address: Text()
    notes: Text()
    status: String(max_length=20)
    fields_set: Text()  # JSON: list of supplied field names


@storefront.command_handler(part_of=Order)
class UpdateOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        order = load_order(command.order_id)
        changes = supplied_changes(command, HEADER_FIELDS)

        if "customer_id" in changes:
            if changes["customer_id"] is None:
                raise InvalidArgument({"customer_id": ["Customer id cannot be empty"]})
            changes["customer_id"] = str(resolve_customer(changes["customer_id"]).id)

        current = order.current_status
        target = current
        if "status" in changes:
            if changes["status"] is None:
                raise InvalidArgument({"status": ["Status cannot be empty"]})
            target = parse_status(changes["status"])
            changes["status"] = target.value

        # An empty line list leaves the current lines in place
        new_lines = None
        raw_lines = command.lines
        if raw_lines:
            data = json.loads(raw_lines) if isinstance(raw_lines, str) else raw_lines
            if data:
                new_lines = decode_lines(data)

        # Units held before any line replacement, reported when the order is canceled
        held_quantity = order.total_quantity

        ledger = InventoryLedger()
        if new_lines is not None:
            release = order.stock_lines() if current != OrderStatus.CANCELED else []
            reserve = new_lines if target != OrderStatus.CANCELED else []
            if not reserve:
                ledger.check(new_lines)
            ledger.exchange(release=release, reserve=reserve)
            order.replace_lines(new_lines)
        else:
            action = on_status_change(current, target)
            if action == StockAction.RELEASE:
                ledger.release_many(order.stock_lines())
            elif action == StockAction.RESERVE:
                ledger.reserve_many(order.stock_lines())

        order.revise(
            changes,
            current,
            lines_replaced=new_lines is not None,
            released_quantity=held_quantity,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order updated",
            order_id=str(order.id),
            previous_status=current.value,
            status=order.status,
            lines_replaced=new_lines is not None,
        )
        return str(order.id)
