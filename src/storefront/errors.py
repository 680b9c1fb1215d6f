"""Error taxonomy shared by every storefront operation.

Every error carries a ``messages`` dict of ``{field: [message, ...]}``, like
the Protean validation errors it extends. Repositories raise Protean's bare
``ObjectNotFoundError`` for a missing record; the core re-raises those as
``NotFound`` naming the field that referenced it.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

__all__ = [
    "Conflict",
    "InsufficientStock",
    "InvalidArgument",
    "InvalidQuantity",
    "NotFound",
    "ObjectNotFoundError",
    "error_messages",
    "not_found",
]


class InvalidArgument(ValidationError):
    """A required field is missing or malformed, or an enum value is unknown."""


class InvalidQuantity(InvalidArgument):
    """A line quantity is below one."""


class InsufficientStock(InvalidArgument):
    """A reservation asks for more units than the item has available."""


class Conflict(InvalidArgument):
    """A uniqueness rule or a reference from another record blocks the change."""


class NotFound(ObjectNotFoundError):
    """A referenced entity does not exist."""

    def __init__(self, messages: dict[str, list[str]], **kwargs) -> None:
        self.messages = messages
        super().__init__(messages, **kwargs)

    def __str__(self) -> str:
        return f"{dict(self.messages)}"


def not_found(field, entity, identifier):
    """Build the error raised when a referenced entity does not exist."""
    return NotFound({field: [f"{entity} with id {identifier} not found"]})


def error_messages(exc) -> dict:
    """The ``{field: [message]}`` payload of ``exc``, for errors raised without one too."""
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        return messages
    if messages:
        return {"_entity": messages if isinstance(messages, list) else [str(messages)]}
    return {"_entity": [str(exc)]}
