"""Customer management: registration, profile updates and removal."""

from datetime import UTC, datetime

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.customer.customer import PROFILE_FIELDS, Customer
from storefront.customer.events import CustomerRemoved
from storefront.domain import storefront
from storefront.errors import Conflict
from storefront.shared.changes import supplied_changes
from storefront.shared.email import EmailAddress


@storefront.command(part_of="Customer")
class RegisterCustomer:
    name: String(required=True, max_length=100)
    surname: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)
    country: String(max_length=100)
    phone: String(max_length=30)


@storefront.command(part_of="Customer")
class UpdateCustomer:
    customer_id: Identifier(required=True)
    name: String(max_length=100)
    surname: String(max_length=100)
    email: String(max_length=254)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)
    country: String(max_length=100)
    phone: String(max_length=30)
    fields_set: Text()  # JSON: list of supplied field names


@storefront.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


def _ensure_email_available(email, customer_id=None):
    existing = current_domain.repository_for(Customer).find_by_email(email)
    if existing is not None and existing.id != customer_id:
        raise Conflict({"email": [f"Email {email} is already registered"]})


@storefront.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        _ensure_email_available(EmailAddress.normalized(command.email))

        customer = Customer.register(
            name=command.name,
            surname=command.surname,
            email=command.email,
            address=command.address,
            city=command.city,
            state=command.state,
            zip_code=command.zip_code,
            country=command.country,
            phone=command.phone,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        changes = supplied_changes(command, PROFILE_FIELDS)
        if changes.get("email"):
            _ensure_email_available(EmailAddress.normalized(changes["email"]), customer.id)

        customer.update_profile(**changes)
        repo.add(customer)
        return str(customer.id)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        from storefront.order.order import Order

        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)

        if current_domain.repository_for(Order).count_for_customer(customer.id):
            raise Conflict({"customer_id": [f"Customer {customer.id} still has orders"]})

        customer.raise_(CustomerRemoved(customer_id=customer.id, removed_at=datetime.now(UTC)))
        repo.add(customer)
        repo._dao.delete(customer)
        return str(customer.id)
