"""Order aggregate with its OrderLine entity and the status state machine.

Stock follows the status: an order holds a reservation for its lines while
it is in any status other than ``canceled``. Moving into ``canceled``
releases the lines exactly once; moving back out reserves them again.

    pending ─┬─ processing ─ shipped ─ delivered
             └─ canceled (reachable from, and leavable to, any status)
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.errors import InvalidArgument


# ---------------------------------------------------------------------------
# Status and stock side effects
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"


class StockAction(Enum):
    RESERVE = "reserve"
    RELEASE = "release"
    NONE = "none"


def parse_status(value, field="status"):
    """Return the ``OrderStatus`` for ``value`` or raise ``InvalidArgument``."""
    try:
        return OrderStatus(value)
    except ValueError:
        valid = ", ".join(s.value for s in OrderStatus)
        raise InvalidArgument({field: [f"Invalid status '{value}'. Expected one of: {valid}"]}) from None


def on_status_change(old, new) -> StockAction:
    """Stock side effect of moving an order from ``old`` to ``new``."""
    old, new = OrderStatus(old), OrderStatus(new)
    if old == new:
        return StockAction.NONE
    if new == OrderStatus.CANCELED:
        return StockAction.RELEASE
    if old == OrderStatus.CANCELED:
        return StockAction.RESERVE
    return StockAction.NONE


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderLine:
    """A quantity of one shop item within an order."""

    shop_item_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    position: Integer(default=0)


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    customer_id: Identifier(required=True)
    status: String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    order_date: DateTime()
    shipping_address: Text()
    notes: Text()
    lines: HasMany(OrderLine)
    updated_at: DateTime()

    @classmethod
    def place(cls, customer_id, lines, shipping_address=None, notes=None, status=None):
        from storefront.order.events import OrderPlaced

        status = parse_status(status) if status else OrderStatus.PENDING
        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            status=status.value,
            order_date=now,
            shipping_address=shipping_address,
            notes=notes,
            updated_at=now,
        )
        order.replace_lines(lines, record=False)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                status=order.status,
                line_count=len(order.lines),
                total_quantity=order.total_quantity,
                placed_at=now,
            )
        )
        return order

    @property
    def current_status(self) -> OrderStatus:
        return OrderStatus(self.status)

    @property
    def is_canceled(self):
        return self.current_status == OrderStatus.CANCELED

    @property
    def ordered_lines(self):
        return sorted(self.lines or [], key=lambda line: line.position or 0)

    @property
    def total_quantity(self):
        return sum(line.quantity for line in self.lines or [])

    def stock_lines(self):
        from storefront.inventory.ledger import StockLine

        return [StockLine(str(line.shop_item_id), line.quantity) for line in self.ordered_lines]

    def replace_lines(self, lines, record=True):
        """Drop every current line and add ``lines`` in the given order."""
        for line in list(self.lines or []):
            self.remove_lines(line)
        for position, line in enumerate(lines):
            self.add_lines(
                OrderLine(
                    shop_item_id=str(line.shop_item_id),
                    quantity=line.quantity,
                    position=position,
                )
            )
        if record:
            self.updated_at = datetime.now(UTC)

    def revise(self, changes, previous_status, lines_replaced=False, released_quantity=None):
        """Apply header changes and record what happened.

        ``released_quantity`` is the number of units handed back to stock by
        this revision; it defaults to the lines the order holds now.
        """
        from storefront.order.events import OrderCanceled, OrderUpdated

        for field in ("customer_id", "shipping_address", "notes", "status"):
            if field in changes:
                setattr(self, field, changes[field])

        now = datetime.now(UTC)
        self.updated_at = now

        changed = sorted(set(changes) | ({"lines"} if lines_replaced else set()))
        self.raise_(
            OrderUpdated(
                order_id=self.id,
                changed_fields=",".join(changed),
                previous_status=previous_status.value,
                status=self.status,
                updated_at=now,
            )
        )
        if on_status_change(previous_status, self.status) == StockAction.RELEASE:
            self.raise_(
                OrderCanceled(
                    order_id=self.id,
                    previous_status=previous_status.value,
                    released_quantity=self.total_quantity if released_quantity is None else released_quantity,
                    canceled_at=now,
                )
            )

    def mark_deleted(self):
        from storefront.order.events import OrderDeleted

        self.raise_(
            OrderDeleted(
                order_id=self.id,
                status=self.status,
                released_stock=not self.is_canceled,
                deleted_at=datetime.now(UTC),
            )
        )
        for line in list(self.lines or []):
            self.remove_lines(line)
