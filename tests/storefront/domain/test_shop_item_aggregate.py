"""Tests for the ShopItem aggregate root and its stock mutators."""

import pytest
from protean.exceptions import ValidationError
from storefront.errors import InsufficientStock, InvalidArgument, InvalidQuantity
from storefront.shop_item.events import ShopItemCreated, StockLevelSet, StockReleased, StockReserved
from storefront.shop_item.shop_item import ShopItem


def _item(**overrides):
    defaults = {"title": "Laptop", "price": 1299.99, "stock_quantity": 30}
    defaults.update(overrides)
    return ShopItem.create(**defaults)


class TestShopItemConstruction:
    def test_defaults(self):
        item = ShopItem.create(title="Novel", price=19.99)
        assert item.stock_quantity == 0
        assert item.is_active is True
        assert item.category_ids == []
        assert item.in_stock is False

    def test_create_raises_event(self):
        item = _item(sku="LAPT-001")
        event = item._events[-1]
        assert isinstance(event, ShopItemCreated)
        assert event.sku == "LAPT-001"
        assert event.stock_quantity == 30

    def test_price_is_required(self):
        with pytest.raises(ValidationError) as exc:
            ShopItem.create(title="Novel", price=None)
        assert "price" in exc.value.messages

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _item(price=-1.0)
        assert "price" in exc.value.messages

    def test_negative_stock_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _item(stock_quantity=-5)
        assert "stock_quantity" in exc.value.messages

    def test_zero_price_is_allowed(self):
        assert _item(price=0.0).price == 0.0


class TestReserve:
    def test_reserve_decrements_stock(self):
        item = _item(stock_quantity=10)
        item.reserve(3)
        assert item.stock_quantity == 7

    def test_reserve_entire_stock(self):
        item = _item(stock_quantity=2)
        item.reserve(2)
        assert item.stock_quantity == 0
        assert item.in_stock is False

    def test_reserve_more_than_available(self):
        item = _item(stock_quantity=2)
        with pytest.raises(InsufficientStock):
            item.reserve(3)
        assert item.stock_quantity == 2

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_reserve_rejects_non_positive_quantity(self, quantity):
        item = _item(stock_quantity=5)
        with pytest.raises(InvalidQuantity):
            item.reserve(quantity)
        assert item.stock_quantity == 5

    def test_reserve_raises_event(self):
        item = _item(stock_quantity=10)
        item.reserve(4)
        event = item._events[-1]
        assert isinstance(event, StockReserved)
        assert (event.previous_stock, event.new_stock) == (10, 6)

    def test_insufficient_stock_is_an_invalid_argument(self):
        item = _item(stock_quantity=0)
        with pytest.raises(InvalidArgument):
            item.reserve(1)


class TestRelease:
    def test_release_increments_stock(self):
        item = _item(stock_quantity=1)
        item.release(4)
        assert item.stock_quantity == 5
        assert isinstance(item._events[-1], StockReleased)

    def test_release_has_no_upper_bound(self):
        item = _item(stock_quantity=0)
        item.release(10_000)
        assert item.stock_quantity == 10_000

    def test_release_rejects_zero(self):
        with pytest.raises(InvalidQuantity):
            _item().release(0)


class TestSetStock:
    def test_set_stock(self):
        item = _item(stock_quantity=3)
        item.set_stock(40)
        assert item.stock_quantity == 40
        event = item._events[-1]
        assert isinstance(event, StockLevelSet)
        assert (event.previous_stock, event.new_stock) == (3, 40)

    def test_set_stock_to_zero(self):
        item = _item()
        item.set_stock(0)
        assert item.stock_quantity == 0

    def test_negative_stock_level_is_rejected(self):
        item = _item(stock_quantity=3)
        with pytest.raises(InvalidArgument):
            item.set_stock(-1)
        assert item.stock_quantity == 3


class TestDetails:
    def test_update_details(self):
        item = _item()
        item.update_details(price=999.0, is_active=False)
        assert item.price == 999.0
        assert item.is_active is False

    def test_stock_cannot_change_through_details(self):
        item = _item()
        with pytest.raises(ValueError):
            item.update_details(stock_quantity=100)

    def test_unlink_category(self):
        item = _item(category_ids=["cat-1", "cat-2"])
        item.unlink_category("cat-1")
        assert item.category_ids == ["cat-2"]
