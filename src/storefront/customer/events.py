"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A new customer was registered."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    name: String(required=True)
    surname: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class CustomerProfileUpdated:
    """One or more profile fields of a customer changed."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    changed_fields: String()
    updated_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class CustomerRemoved:
    """A customer without orders was deleted."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    removed_at: DateTime(required=True)
