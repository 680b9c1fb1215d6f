"""Domain events for the Order aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was created and stock reserved for its lines."""

    __version__ = "v1"

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    status: String(required=True)
    line_count: Integer(required=True)
    total_quantity: Integer(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderUpdated:
    __version__ = "v1"

    order_id: Identifier(required=True)
    changed_fields: String()
    previous_status: String(required=True)
    status: String(required=True)
    updated_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCanceled:
    """An order moved into ``canceled`` and its stock was returned."""

    __version__ = "v1"

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    released_quantity: Integer(required=True)
    canceled_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderDeleted:
    __version__ = "v1"

    order_id: Identifier(required=True)
    status: String(required=True)
    released_stock: Boolean(default=False)
    deleted_at: DateTime(required=True)
