"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.query import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def list_all(self) -> list[Order]:
        return list(fetch_all(self._dao.query.order_by("order_date")))

    def list_by_status(self, status: str) -> list[Order]:
        return list(fetch_all(self._dao.query.filter(status=status).order_by("order_date")))

    def count_for_customer(self, customer_id) -> int:
        return self._dao.query.filter(customer_id=str(customer_id)).all().total

    def references_item(self, shop_item_id: str) -> bool:
        return any(
            str(line.shop_item_id) == shop_item_id for order in self.list_all() for line in order.lines or []
        )
