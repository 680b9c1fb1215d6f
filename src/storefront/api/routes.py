"""FastAPI endpoints for the storefront."""

import json

from fastapi import APIRouter, Query, Response
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateCustomerRequest,
    CreateOrderRequest,
    CreateShopItemRequest,
    CustomerResponse,
    OrderResponse,
    ShopItemResponse,
    StockLevelResponse,
    UpdateCategoryRequest,
    UpdateCustomerRequest,
    UpdateOrderRequest,
    UpdateShopItemRequest,
    UpdateStockRequest,
)
from storefront.category.category import Category
from storefront.category.management import CreateCategory, DeleteCategory, UpdateCategory
from storefront.customer.customer import Customer
from storefront.customer.management import DeleteCustomer, RegisterCustomer, UpdateCustomer
from storefront.order import dispatch
from storefront.order.queries import get_order, list_orders
from storefront.shop_item.management import CreateShopItem, DeleteShopItem, SetStockLevel, UpdateShopItem
from storefront.shop_item.shop_item import ShopItem
from storefront.views import category_view, customer_view, shop_item_view

customer_router = APIRouter(prefix="/customers", tags=["customers"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
shop_item_router = APIRouter(prefix="/shop-items", tags=["shop-items"])
order_router = APIRouter(prefix="/orders", tags=["orders"])


def _fields_set(body):
    return json.dumps(sorted(body.model_fields_set))


# --- Customer endpoints ---


@customer_router.get("", response_model=list[CustomerResponse])
async def list_customers():
    return [customer_view(c) for c in current_domain.repository_for(Customer).list_all()]


@customer_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str):
    return customer_view(current_domain.repository_for(Customer).get(customer_id))


@customer_router.post("", status_code=201, response_model=CustomerResponse)
async def register_customer(body: CreateCustomerRequest):
    command = RegisterCustomer(**body.model_dump())
    customer_id = current_domain.process(command, asynchronous=False)
    return customer_view(current_domain.repository_for(Customer).get(customer_id))


@customer_router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: str, body: UpdateCustomerRequest):
    command = UpdateCustomer(
        customer_id=customer_id,
        fields_set=_fields_set(body),
        **body.model_dump(exclude_unset=True),
    )
    current_domain.process(command, asynchronous=False)
    return customer_view(current_domain.repository_for(Customer).get(customer_id))


@customer_router.delete("/{customer_id}", status_code=204)
async def delete_customer(customer_id: str):
    current_domain.process(DeleteCustomer(customer_id=customer_id), asynchronous=False)
    return Response(status_code=204)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories():
    return [category_view(c) for c in current_domain.repository_for(Category).list_all()]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str):
    return category_view(current_domain.repository_for(Category).get(category_id))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest):
    command = CreateCategory(title=body.title, description=body.description)
    category_id = current_domain.process(command, asynchronous=False)
    return category_view(current_domain.repository_for(Category).get(category_id))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest):
    command = UpdateCategory(
        category_id=category_id,
        fields_set=_fields_set(body),
        **body.model_dump(exclude_unset=True),
    )
    current_domain.process(command, asynchronous=False)
    return category_view(current_domain.repository_for(Category).get(category_id))


@category_router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: str):
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return Response(status_code=204)


# --- Shop item endpoints ---


@shop_item_router.get("", response_model=list[ShopItemResponse])
async def search_shop_items(
    category: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    search: str | None = None,
    in_stock: bool | None = None,
    is_active: bool | None = None,
    sort_by: str | None = None,
    sort_order: str | None = Query(None, description="ASC or DESC"),
):
    items = current_domain.repository_for(ShopItem).search(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
        in_stock=in_stock,
        is_active=is_active,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return [shop_item_view(item) for item in items]


@shop_item_router.get("/{shop_item_id}", response_model=ShopItemResponse)
async def get_shop_item(shop_item_id: str):
    return shop_item_view(current_domain.repository_for(ShopItem).get(shop_item_id))


@shop_item_router.post("", status_code=201, response_model=ShopItemResponse)
async def create_shop_item(body: CreateShopItemRequest):
    command = CreateShopItem(
        title=body.title,
        description=body.description,
        price=body.price,
        stock_quantity=body.stock_quantity,
        image_url=body.image_url,
        is_active=body.is_active,
        sku=body.sku,
        category_ids=json.dumps(body.category_ids),
    )
    shop_item_id = current_domain.process(command, asynchronous=False)
    return shop_item_view(current_domain.repository_for(ShopItem).get(shop_item_id))


@shop_item_router.put("/{shop_item_id}", response_model=ShopItemResponse)
async def update_shop_item(shop_item_id: str, body: UpdateShopItemRequest):
    changes = body.model_dump(exclude_unset=True)
    if "category_ids" in changes:
        changes["category_ids"] = json.dumps(changes["category_ids"] or [])
    command = UpdateShopItem(shop_item_id=shop_item_id, fields_set=_fields_set(body), **changes)
    current_domain.process(command, asynchronous=False)
    return shop_item_view(current_domain.repository_for(ShopItem).get(shop_item_id))


@shop_item_router.patch("/{shop_item_id}/stock", response_model=StockLevelResponse)
async def update_stock(shop_item_id: str, body: UpdateStockRequest):
    command = SetStockLevel(shop_item_id=shop_item_id, stock_quantity=body.stock_quantity)
    current_domain.process(command, asynchronous=False)
    item = current_domain.repository_for(ShopItem).get(shop_item_id)
    return StockLevelResponse(id=str(item.id), title=item.title, stock_quantity=item.stock_quantity)


@shop_item_router.delete("/{shop_item_id}", status_code=204)
async def delete_shop_item(shop_item_id: str):
    current_domain.process(DeleteShopItem(shop_item_id=shop_item_id), asynchronous=False)
    return Response(status_code=204)


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderResponse])
async def list_all_orders():
    return list_orders()


@order_router.get("/status/{status}", response_model=list[OrderResponse])
async def list_orders_by_status(status: str):
    return list_orders(status)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_single_order(order_id: str):
    return get_order(order_id)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest):
    return dispatch.place_order(
        customer_id=body.customer_id,
        lines=[line.model_dump() for line in body.items],
        shipping_address=body.shipping_address,
        notes=body.notes,
        status=body.status,
    )


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: str, body: UpdateOrderRequest):
    changes = body.model_dump(exclude_unset=True)
    if "items" in changes:
        changes["lines"] = changes.pop("items")
    return dispatch.update_order(order_id, changes)


@order_router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str):
    dispatch.delete_order(order_id)
    return Response(status_code=204)
