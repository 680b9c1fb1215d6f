"""Lookups shared by the order command handlers."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import not_found


def resolve_customer(customer_id):
    from storefront.customer.customer import Customer

    try:
        return current_domain.repository_for(Customer).get(customer_id)
    except ObjectNotFoundError as exc:
        raise not_found("customer_id", "Customer", customer_id) from exc


def load_order(order_id):
    from storefront.order.order import Order

    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise not_found("order_id", "Order", order_id) from exc
