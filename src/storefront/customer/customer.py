"""Customer aggregate root: the person an order is placed for."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.shared.email import EmailAddress

# Profile fields a customer may change after registration
PROFILE_FIELDS = ("name", "surname", "email", "address", "city", "state", "zip_code", "country", "phone")


@storefront.aggregate
class Customer:
    """A registered shopper with contact details and a default mailing address.

    Orders reference customers but do not own them; the mailing address is
    copied onto an order as its shipping address when none is given.
    """

    name: String(required=True, max_length=100)
    surname: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    zip_code: String(max_length=20)
    country: String(max_length=100)
    phone: String(max_length=30)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, name, surname, email, **contact):
        from storefront.customer.events import CustomerRegistered

        now = datetime.now(UTC)
        customer = cls(
            name=name,
            surname=surname,
            email=EmailAddress.normalized(email),
            created_at=now,
            updated_at=now,
            **contact,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=customer.name,
                surname=customer.surname,
                email=customer.email,
                registered_at=now,
            )
        )
        return customer

    def update_profile(self, **changes):
        """Apply only the profile fields that were supplied."""
        from storefront.customer.events import CustomerProfileUpdated

        unknown = set(changes) - set(PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown customer fields: {sorted(unknown)}")

        if "email" in changes and changes["email"] is not None:
            changes["email"] = EmailAddress.normalized(changes["email"])

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CustomerProfileUpdated(
                customer_id=self.id,
                changed_fields=",".join(sorted(changes)),
                updated_at=self.updated_at,
            )
        )

    @property
    def full_name(self):
        return f"{self.name} {self.surname}"
