"""Domain events for the Category aggregate."""

from protean.fields import Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new category was added."""

    __version__ = "v1"

    category_id: Identifier(required=True)
    title: String(required=True)


@storefront.event(part_of="Category")
class CategoryDetailsUpdated:
    __version__ = "v1"

    category_id: Identifier(required=True)
    title: String(required=True)
    description: Text()


@storefront.event(part_of="Category")
class CategoryRemoved:
    """A category was deleted and unlinked from every shop item."""

    __version__ = "v1"

    category_id: Identifier(required=True)
    unlinked_items: String()
