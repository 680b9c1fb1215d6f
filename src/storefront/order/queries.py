"""Read side of the order engine: fetch orders expanded with their references."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.order.order import Order, parse_status
from storefront.order.support import load_order
from storefront.shop_item.shop_item import ShopItem
from storefront.views import order_view


def _get_or_none(repo, identifier):
    try:
        return repo.get(identifier)
    except ObjectNotFoundError:
        return None


def expand_orders(orders):
    """Render ``orders``, loading each referenced customer and item once."""
    customer_repo = current_domain.repository_for(Customer)
    item_repo = current_domain.repository_for(ShopItem)

    customers, items = {}, {}
    for order in orders:
        customer_id = str(order.customer_id)
        if customer_id not in customers:
            customers[customer_id] = _get_or_none(customer_repo, customer_id)
        for line in order.lines or []:
            item_id = str(line.shop_item_id)
            if item_id not in items:
                items[item_id] = _get_or_none(item_repo, item_id)

    loaded = {key: value for key, value in items.items() if value is not None}
    return [order_view(order, customers[str(order.customer_id)], loaded) for order in orders]


def get_order(order_id) -> dict:
    return expand_orders([load_order(order_id)])[0]


def list_orders(status=None) -> list[dict]:
    repo = current_domain.repository_for(Order)
    if status is None:
        return expand_orders(repo.list_all())
    return expand_orders(repo.list_by_status(parse_status(status).value))
