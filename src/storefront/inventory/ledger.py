"""Inventory ledger: the only place that moves units in and out of stock.

A batch is checked in full before anything changes: every quantity must be
at least one, every item must exist, and each item must cover its total
demand once the batch's own releases are credited back. Mutations are then
applied (releases first, reserves after) on items loaded once per batch. If
an item still refuses a mutation, every step already applied is undone in
reverse before the error propagates, so a failed batch leaves stock as it
found it. The command's Unit of Work then persists nothing.
"""

from collections import Counter
from typing import NamedTuple

from protean.utils.globals import current_domain

from storefront.errors import InsufficientStock, InvalidQuantity, ObjectNotFoundError, not_found
from storefront.shop_item.shop_item import ShopItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StockLine(NamedTuple):
    shop_item_id: str
    quantity: int


def as_stock_lines(lines):
    """Accept ``StockLine``s, tuples, dicts or objects with the line attributes."""
    result = []
    for line in lines or ():
        if isinstance(line, StockLine):
            result.append(line)
        elif isinstance(line, dict):
            result.append(StockLine(str(line["shop_item_id"]), line["quantity"]))
        elif isinstance(line, tuple):
            result.append(StockLine(str(line[0]), line[1]))
        else:
            result.append(StockLine(str(line.shop_item_id), line.quantity))
    return result


class InventoryLedger:
    def __init__(self):
        self.repository = current_domain.repository_for(ShopItem)

    def reserve(self, shop_item_id, quantity) -> ShopItem:
        items = self.exchange(reserve=[StockLine(str(shop_item_id), quantity)])
        return items[str(shop_item_id)]

    def release(self, shop_item_id, quantity) -> ShopItem:
        items = self.exchange(release=[StockLine(str(shop_item_id), quantity)])
        return items[str(shop_item_id)]

    def reserve_many(self, lines) -> dict[str, ShopItem]:
        return self.exchange(reserve=lines)

    def release_many(self, lines) -> dict[str, ShopItem]:
        return self.exchange(release=lines)

    def check(self, lines) -> dict[str, ShopItem]:
        """Validate quantities and item existence without touching stock."""
        lines = as_stock_lines(lines)
        self._check_quantities(lines)
        return self._load([line.shop_item_id for line in lines])

    def exchange(self, release=(), reserve=()) -> dict[str, ShopItem]:
        """Release one set of lines and reserve another as a single batch.

        Returns the touched items keyed by id.
        """
        release = as_stock_lines(release)
        reserve = as_stock_lines(reserve)
        if not release and not reserve:
            return {}

        self._check_quantities(release + reserve)
        items = self._load([line.shop_item_id for line in release + reserve])
        self._check_sufficiency(items, release, reserve)

        applied = []
        try:
            for line in release:
                items[line.shop_item_id].release(line.quantity)
                applied.append(("release", line))
            for line in reserve:
                items[line.shop_item_id].reserve(line.quantity)
                applied.append(("reserve", line))
        except Exception:
            self._compensate(items, applied)
            raise

        for item in items.values():
            self.repository.add(item)

        if release:
            logger.info("Stock released", lines=[tuple(line) for line in release])
        if reserve:
            logger.info("Stock reserved", lines=[tuple(line) for line in reserve])
        return items

    def _check_quantities(self, lines):
        for line in lines:
            if not isinstance(line.quantity, int) or isinstance(line.quantity, bool) or line.quantity < 1:
                raise InvalidQuantity(
                    {"quantity": [f"Quantity for item {line.shop_item_id} must be at least 1, got {line.quantity}"]}
                )

    def _load(self, shop_item_ids):
        items = {}
        for shop_item_id in shop_item_ids:
            if shop_item_id in items:
                continue
            try:
                items[shop_item_id] = self.repository.get(shop_item_id)
            except ObjectNotFoundError as exc:
                raise not_found("shop_item_id", "Shop item", shop_item_id) from exc
        return items

    def _check_sufficiency(self, items, release, reserve):
        credit = Counter()
        for line in release:
            credit[line.shop_item_id] += line.quantity

        demand = Counter()
        for line in reserve:
            demand[line.shop_item_id] += line.quantity

        for shop_item_id, requested in demand.items():
            item = items[shop_item_id]
            available = item.stock_quantity + credit[shop_item_id]
            if requested > available:
                raise InsufficientStock(
                    {
                        "stock_quantity": [
                            f"Insufficient stock for {item.title}: {available} available, {requested} requested"
                        ]
                    }
                )

    def _compensate(self, items, applied):
        for action, line in reversed(applied):
            item = items[line.shop_item_id]
            if action == "reserve":
                item.release(line.quantity)
            else:
                item.stock_quantity -= line.quantity
        logger.warning("Stock batch compensated", steps=len(applied))
