"""Repository for the Customer aggregate."""

from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.utils.query import fetch_all


@storefront.repository(part_of=Customer)
class CustomerRepository:
    def find_by_email(self, email: str) -> Customer | None:
        matches = self._dao.query.filter(email=email).limit(1).all().items
        return matches[0] if matches else None

    def list_all(self) -> list[Customer]:
        return list(fetch_all(self._dao.query.order_by("created_at")))
