"""Shop item management: catalog commands and the stock patch."""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import Conflict, not_found
from storefront.shared.changes import supplied_changes
from storefront.shop_item.events import ShopItemRemoved
from storefront.shop_item.shop_item import DETAIL_FIELDS, ShopItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="ShopItem")
class CreateShopItem:
    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(min_value=0)
    image_url: String(max_length=500)
    is_active: Boolean()
    sku: String(max_length=64)
    category_ids: Text()  # JSON: list of category ids


@storefront.command(part_of="ShopItem")
class UpdateShopItem:
    shop_item_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    image_url: String(max_length=500)
    is_active: Boolean()
    sku: String(max_length=64)
    category_ids: Text()  # JSON: list of category ids
    fields_set: Text()  # JSON: list of supplied field names


@storefront.command(part_of="ShopItem")
class DeleteShopItem:
    shop_item_id: Identifier(required=True)


@storefront.command(part_of="ShopItem")
class SetStockLevel:
    """Set available stock explicitly, e.g. after a delivery from a supplier."""

    shop_item_id: Identifier(required=True)
    stock_quantity: Integer(required=True)


def _decode_category_ids(raw):
    if raw is None:
        return None
    ids = json.loads(raw) if isinstance(raw, str) else raw
    return [str(cid) for cid in ids]


def _ensure_categories_exist(category_ids):
    from storefront.category.category import Category

    missing = current_domain.repository_for(Category).missing_ids(category_ids)
    if missing:
        raise not_found("category_ids", "Category", missing[0])


def _ensure_sku_available(sku, shop_item_id=None):
    existing = current_domain.repository_for(ShopItem).find_by_sku(sku)
    if existing is not None and existing.id != shop_item_id:
        raise Conflict({"sku": [f"SKU {sku} is already in use"]})


@storefront.command_handler(part_of=ShopItem)
class ManageShopItemHandler:
    @handle(CreateShopItem)
    def create_shop_item(self, command):
        category_ids = _decode_category_ids(command.category_ids) or []
        _ensure_categories_exist(category_ids)
        if command.sku:
            _ensure_sku_available(command.sku)

        item = ShopItem.create(
            title=command.title,
            price=command.price,
            stock_quantity=command.stock_quantity,
            description=command.description,
            image_url=command.image_url,
            is_active=True if command.is_active is None else command.is_active,
            sku=command.sku,
            category_ids=category_ids,
        )
        current_domain.repository_for(ShopItem).add(item)
        return str(item.id)

    @handle(UpdateShopItem)
    def update_shop_item(self, command):
        repo = current_domain.repository_for(ShopItem)
        item = repo.get(command.shop_item_id)

        changes = supplied_changes(command, DETAIL_FIELDS)
        if "category_ids" in changes:
            changes["category_ids"] = _decode_category_ids(changes["category_ids"]) or []
            _ensure_categories_exist(changes["category_ids"])
        if changes.get("sku"):
            _ensure_sku_available(changes["sku"], item.id)

        item.update_details(**changes)
        repo.add(item)
        return str(item.id)

    @handle(DeleteShopItem)
    def delete_shop_item(self, command):
        from storefront.order.order import Order

        repo = current_domain.repository_for(ShopItem)
        item = repo.get(command.shop_item_id)

        if current_domain.repository_for(Order).references_item(str(item.id)):
            raise Conflict({"shop_item_id": [f"Shop item {item.id} is referenced by order lines"]})

        item.raise_(ShopItemRemoved(shop_item_id=item.id))
        repo.add(item)
        repo._dao.delete(item)
        return str(item.id)

    @handle(SetStockLevel)
    def set_stock_level(self, command):
        repo = current_domain.repository_for(ShopItem)
        item = repo.get(command.shop_item_id)
        item.set_stock(command.stock_quantity)
        repo.add(item)

        logger.info("Stock level set", shop_item_id=str(item.id), stock_quantity=item.stock_quantity)
        return str(item.id)
