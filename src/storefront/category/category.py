"""Category aggregate root for grouping shop items."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A named grouping of shop items.

    Items hold the ids of the categories they belong to, so a category never
    needs to be loaded to render an item.
    """

    title: String(required=True, max_length=255)
    description: Text()
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def title_must_not_be_blank(self):
        if self.title is not None and not self.title.strip():
            raise ValidationError({"title": ["Title cannot be blank"]})

    @classmethod
    def create(cls, title, description=None):
        from storefront.category.events import CategoryCreated

        now = datetime.now(UTC)
        category = cls(title=title, description=description, created_at=now, updated_at=now)
        category.raise_(CategoryCreated(category_id=category.id, title=category.title))
        return category

    def update_details(self, **changes):
        from storefront.category.events import CategoryDetailsUpdated

        if "title" in changes:
            self.title = changes["title"]
        if "description" in changes:
            self.description = changes["description"]
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryDetailsUpdated(
                category_id=self.id,
                title=self.title,
                description=self.description,
            )
        )
