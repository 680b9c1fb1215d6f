"""Order placement: command and handler."""

import json

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import InvalidArgument
from storefront.inventory.ledger import InventoryLedger, as_stock_lines
from storefront.order.order import Order, OrderStatus, parse_status
from storefront.order.support import resolve_customer
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id: Identifier(required=True)
    lines: Text(required=True)  # JSON: list of {shop_item_id, quantity}
    shipping_address: Text()
    notes: Text()
    status: String(max_length=20)


def decode_lines(raw, field="items"):
    data = json.loads(raw) if isinstance(raw, str) else raw
    if not data:
        raise InvalidArgument({field: ["At least one order line is required"]})
    try:
        return as_stock_lines(data)
    except (KeyError, IndexError, TypeError, AttributeError):
        raise InvalidArgument({field: ["Each order line needs a shop_item_id and a quantity"]}) from None


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        customer = resolve_customer(command.customer_id)
        status = parse_status(command.status) if command.status else OrderStatus.PENDING
        lines = decode_lines(command.lines)

        ledger = InventoryLedger()
        if status == OrderStatus.CANCELED:
            # A canceled order holds no stock
            ledger.check(lines)
        else:
            ledger.reserve_many(lines)

        order = Order.place(
            customer_id=str(customer.id),
            lines=lines,
            shipping_address=command.shipping_address or customer.address,
            notes=command.notes,
            status=status.value,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(customer.id),
            status=order.status,
            lines=len(lines),
        )
        return str(order.id)
