"""Repository for the ShopItem aggregate, including catalog search."""

from storefront.domain import storefront
from storefront.shop_item.shop_item import ShopItem
from storefront.utils.query import fetch_all

SORTABLE_FIELDS = ("title", "price", "stock_quantity", "created_at")


@storefront.repository(part_of=ShopItem)
class ShopItemRepository:
    def find_by_sku(self, sku: str) -> ShopItem | None:
        matches = self._dao.query.filter(sku=sku).limit(1).all().items
        return matches[0] if matches else None

    def in_category(self, category_id: str) -> list[ShopItem]:
        return [item for item in fetch_all(self._dao.query) if category_id in (item.category_ids or [])]

    def search(
        self,
        category: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        search: str | None = None,
        in_stock: bool | None = None,
        is_active: bool | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> list[ShopItem]:
        """Filter the catalog.

        Price, availability and activity filters run in the store; the text
        and category filters and sorting run over the fetched items. An
        unknown ``sort_by`` leaves the result unsorted and an unknown
        ``sort_order`` falls back to ascending.
        """
        query = self._dao.query
        if min_price is not None:
            query = query.filter(price__gte=min_price)
        if max_price is not None:
            query = query.filter(price__lte=max_price)
        if in_stock:
            query = query.filter(stock_quantity__gt=0)
        if is_active is not None:
            query = query.filter(is_active=is_active)

        items = list(fetch_all(query))

        if search:
            needle = search.lower()
            items = [
                item
                for item in items
                if needle in (item.title or "").lower() or needle in (item.description or "").lower()
            ]

        if category:
            items = [item for item in items if category in (item.category_ids or [])]

        if sort_by in SORTABLE_FIELDS:
            descending = (sort_order or "").upper() == "DESC"
            present = [item for item in items if getattr(item, sort_by) is not None]
            missing = [item for item in items if getattr(item, sort_by) is None]
            present.sort(key=lambda item: _sort_key(getattr(item, sort_by)), reverse=descending)
            items = present + missing

        return items


def _sort_key(value):
    return value.lower() if isinstance(value, str) else value
