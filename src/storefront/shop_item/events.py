"""Domain events for the ShopItem aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="ShopItem")
class ShopItemCreated:
    """A new item was added to the catalog."""

    __version__ = "v1"

    shop_item_id: Identifier(required=True)
    title: String(required=True)
    price: Float(required=True)
    stock_quantity: Integer(required=True)
    sku: String()


@storefront.event(part_of="ShopItem")
class ShopItemDetailsUpdated:
    __version__ = "v1"

    shop_item_id: Identifier(required=True)
    changed_fields: String()


@storefront.event(part_of="ShopItem")
class ShopItemRemoved:
    __version__ = "v1"

    shop_item_id: Identifier(required=True)


@storefront.event(part_of="ShopItem")
class StockReserved:
    """Units were committed to an order."""

    __version__ = "v1"

    shop_item_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@storefront.event(part_of="ShopItem")
class StockReleased:
    """Units committed to an order were returned to stock."""

    __version__ = "v1"

    shop_item_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)


@storefront.event(part_of="ShopItem")
class StockLevelSet:
    """Available stock was set explicitly, e.g. after restocking."""

    __version__ = "v1"

    shop_item_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
