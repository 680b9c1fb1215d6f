"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Customer Schemas ---


class CreateCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "John",
                    "surname": "Doe",
                    "email": "john.doe@example.com",
                    "address": "123 Main St",
                    "city": "Boston",
                    "state": "MA",
                    "zip_code": "02108",
                    "country": "USA",
                    "phone": "555-123-4567",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    surname: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)


class UpdateCustomerRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    surname: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=254)
    address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)


class CustomerResponse(BaseModel):
    id: str
    name: str
    surname: str
    email: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"title": "Electronics", "description": "Electronic devices and gadgets"}]}
    }

    title: str = Field(..., max_length=255)
    description: str | None = None


class UpdateCategoryRequest(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = None


class CategoryResponse(BaseModel):
    id: str
    title: str
    description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# --- Shop Item Schemas ---


class CreateShopItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Smartphone X",
                    "description": "Latest smartphone with advanced features",
                    "price": 999.99,
                    "stock_quantity": 50,
                    "sku": "PHONE-X-001",
                    "category_ids": ["<category-id>"],
                }
            ]
        }
    }

    title: str = Field(..., max_length=255)
    description: str | None = None
    price: float
    stock_quantity: int | None = None
    image_url: str | None = Field(None, max_length=500)
    is_active: bool | None = None
    sku: str | None = Field(None, max_length=64)
    category_ids: list[str] = Field(default_factory=list)


class UpdateShopItemRequest(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = None
    image_url: str | None = Field(None, max_length=500)
    is_active: bool | None = None
    sku: str | None = Field(None, max_length=64)
    category_ids: list[str] | None = None


class UpdateStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"stock_quantity": 25}]}}

    stock_quantity: int


class ShopItemResponse(BaseModel):
    id: str
    title: str
    description: str | None = None
    price: float
    stock_quantity: int
    image_url: str | None = None
    is_active: bool | None = None
    sku: str | None = None
    category_ids: list[str] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


class StockLevelResponse(BaseModel):
    id: str
    title: str
    stock_quantity: int


# --- Order Schemas ---


class OrderLineRequest(BaseModel):
    shop_item_id: str
    quantity: int


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "<customer-id>",
                    "items": [{"shop_item_id": "<shop-item-id>", "quantity": 2}],
                    "shipping_address": "123 Main St, Boston, MA",
                    "notes": "Leave at the front door",
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderLineRequest]
    shipping_address: str | None = None
    notes: str | None = None
    status: str | None = None


class UpdateOrderRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "processing"}, {"status": "canceled"}]}}

    customer_id: str | None = None
    items: list[OrderLineRequest] | None = None
    status: str | None = None
    shipping_address: str | None = None
    notes: str | None = None


class OrderLineResponse(BaseModel):
    id: str
    shop_item_id: str
    quantity: int
    position: int | None = None
    shop_item: ShopItemResponse | None = None


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    customer: CustomerResponse | None = None
    status: str
    order_date: str | None = None
    shipping_address: str | None = None
    notes: str | None = None
    updated_at: str | None = None
    items: list[OrderLineResponse] = Field(default_factory=list)
