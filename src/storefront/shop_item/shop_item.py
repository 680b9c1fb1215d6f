"""ShopItem aggregate root: a sellable catalog item and its available stock."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, List, String, Text

from storefront.domain import storefront
from storefront.errors import InsufficientStock, InvalidArgument, InvalidQuantity

# Fields a shop item may change through a partial update
DETAIL_FIELDS = ("title", "description", "price", "image_url", "is_active", "sku", "category_ids")


@storefront.aggregate
class ShopItem:
    """A catalog item with price and available stock.

    ``stock_quantity`` counts units that are not committed to an active
    order. Reservations move units out of it and releases move them back;
    only ``set_stock`` changes the total the shop owns.
    """

    title: String(required=True, max_length=255)
    description: Text()
    price: Float(required=True, min_value=0.0)
    stock_quantity: Integer(default=0, min_value=0)
    image_url: String(max_length=500)
    is_active: Boolean(default=True)
    sku: String(max_length=64)
    category_ids: List(content_type=String, default=list)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def title_must_not_be_blank(self):
        if self.title is not None and not self.title.strip():
            raise ValidationError({"title": ["Title cannot be blank"]})

    @invariant.post
    def stock_must_not_be_negative(self):
        if self.stock_quantity is not None and self.stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Stock quantity cannot be negative"]})

    @classmethod
    def create(cls, title, price, stock_quantity=None, **details):
        from storefront.shop_item.events import ShopItemCreated

        now = datetime.now(UTC)
        item = cls(
            title=title,
            price=price,
            stock_quantity=stock_quantity or 0,
            created_at=now,
            updated_at=now,
            **details,
        )
        item.raise_(
            ShopItemCreated(
                shop_item_id=item.id,
                title=item.title,
                price=item.price,
                stock_quantity=item.stock_quantity,
                sku=item.sku,
            )
        )
        return item

    def update_details(self, **changes):
        from storefront.shop_item.events import ShopItemDetailsUpdated

        unknown = set(changes) - set(DETAIL_FIELDS)
        if unknown:
            raise ValueError(f"Unknown shop item fields: {sorted(unknown)}")

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ShopItemDetailsUpdated(
                shop_item_id=self.id,
                changed_fields=",".join(sorted(changes)),
            )
        )

    def reserve(self, quantity):
        """Take ``quantity`` units out of available stock."""
        from storefront.shop_item.events import StockReserved

        if quantity is None or quantity < 1:
            raise InvalidQuantity({"quantity": [f"Quantity must be at least 1, got {quantity}"]})
        if quantity > self.stock_quantity:
            raise InsufficientStock(
                {
                    "stock_quantity": [
                        f"Insufficient stock for {self.title}: {self.stock_quantity} available, {quantity} requested"
                    ]
                }
            )

        previous = self.stock_quantity
        self.stock_quantity = previous - quantity
        self.raise_(
            StockReserved(
                shop_item_id=self.id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock_quantity,
            )
        )

    def release(self, quantity):
        """Return ``quantity`` units to available stock."""
        from storefront.shop_item.events import StockReleased

        if quantity is None or quantity < 1:
            raise InvalidQuantity({"quantity": [f"Quantity must be at least 1, got {quantity}"]})

        previous = self.stock_quantity
        self.stock_quantity = previous + quantity
        self.raise_(
            StockReleased(
                shop_item_id=self.id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock_quantity,
            )
        )

    def set_stock(self, quantity):
        from storefront.shop_item.events import StockLevelSet

        if quantity is None or quantity < 0:
            raise InvalidArgument({"stock_quantity": ["Stock quantity must be zero or more"]})

        previous = self.stock_quantity
        self.stock_quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StockLevelSet(
                shop_item_id=self.id,
                previous_stock=previous,
                new_stock=quantity,
            )
        )

    def unlink_category(self, category_id):
        self.category_ids = [cid for cid in (self.category_ids or []) if cid != category_id]
        self.updated_at = datetime.now(UTC)

    @property
    def in_stock(self):
        return self.stock_quantity > 0
