"""Repository for the Category aggregate."""

from storefront.category.category import Category
from storefront.domain import storefront
from storefront.utils.query import fetch_all


@storefront.repository(part_of=Category)
class CategoryRepository:
    def list_all(self) -> list[Category]:
        return list(fetch_all(self._dao.query.order_by("created_at")))

    def missing_ids(self, category_ids) -> list[str]:
        """Return the ids among ``category_ids`` that do not resolve to a category."""
        wanted = set(category_ids)
        if not wanted:
            return []
        found = {str(c.id) for c in self._dao.query.filter(id__in=list(wanted)).all().items}
        return sorted(wanted - found)
