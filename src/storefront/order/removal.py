"""Order removal: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.inventory.ledger import InventoryLedger
from storefront.order.order import Order
from storefront.order.support import load_order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)


@storefront.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order = load_order(command.order_id)

        released = not order.is_canceled
        if released:
            InventoryLedger().release_many(order.stock_lines())

        order.mark_deleted()
        repo = current_domain.repository_for(Order)
        repo.add(order)
        repo._dao.delete(order)

        logger.info("Order deleted", order_id=str(order.id), released_stock=released)
        return str(order.id)
