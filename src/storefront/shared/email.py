"""EmailAddress value object for validated customer email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain without
    leading or trailing hyphens in its labels, no whitespace, no consecutive
    dots and none of the characters that need quoting. Addresses are
    normalized to lower case.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def address_must_be_well_formed(self):
        email = self.address

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if not domain_part or "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(label.startswith("-") or label.endswith("-") for label in domain_part.split(".")):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if ".." in email or any(ch in email for ch in _FORBIDDEN):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def normalized(cls, address):
        """Validate ``address`` and return it lower-cased."""
        return cls(address=address.strip().lower()).address
