"""Sample data for demos and local development.

Orders are placed through the order engine, so seeded stock already
reflects the seeded orders.
"""

import json

from protean.utils.globals import current_domain

from storefront.category.management import CreateCategory
from storefront.customer.customer import Customer
from storefront.customer.management import RegisterCustomer
from storefront.order import dispatch
from storefront.shop_item.management import CreateShopItem
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CUSTOMERS = [
    {
        "name": "John",
        "surname": "Doe",
        "email": "john.doe@example.com",
        "address": "123 Main St",
        "city": "New York",
        "state": "NY",
        "zip_code": "10001",
        "country": "USA",
        "phone": "555-123-4567",
    },
    {
        "name": "Jane",
        "surname": "Smith",
        "email": "jane.smith@example.com",
        "address": "456 Park Ave",
        "city": "Los Angeles",
        "state": "CA",
        "zip_code": "90001",
        "country": "USA",
        "phone": "555-987-6543",
    },
    {
        "name": "Robert",
        "surname": "Johnson",
        "email": "robert.johnson@example.com",
        "address": "789 Broadway",
        "city": "Chicago",
        "state": "IL",
        "zip_code": "60601",
        "country": "USA",
        "phone": "555-456-7890",
    },
]

CATEGORIES = [
    {"title": "Electronics", "description": "Electronic devices and accessories"},
    {"title": "Books", "description": "Printed and digital books"},
    {"title": "Clothing", "description": "Apparel and fashion items"},
]

# (category index, item)
SHOP_ITEMS = [
    (0, {"title": "Smartphone", "description": "Latest model smartphone", "price": 699.99, "stock_quantity": 50, "sku": "PHONE-001"}),
    (0, {"title": "Laptop", "description": "High-performance laptop", "price": 1299.99, "stock_quantity": 30, "sku": "LAPT-001"}),
    (0, {"title": "Headphones", "description": "Wireless noise-cancelling headphones", "price": 149.99, "stock_quantity": 100, "sku": "AUDIO-001"}),
    (1, {"title": "Novel", "description": "Bestselling fiction novel", "price": 19.99, "stock_quantity": 200, "sku": "BOOK-001"}),
    (2, {"title": "T-shirt", "description": "Cotton t-shirt", "price": 24.99, "stock_quantity": 150, "sku": "SHIRT-001"}),
    (2, {"title": "Jeans", "description": "Denim jeans", "price": 49.99, "stock_quantity": 75, "sku": "PANTS-001"}),
]

# (customer index, status, notes, [(item index, quantity), ...])
ORDERS = [
    (0, "delivered", "Please deliver before noon", [(0, 1), (2, 1)]),
    (1, "processing", "Gift wrap requested", [(1, 1), (3, 2)]),
    (2, "pending", None, [(4, 3), (5, 1)]),
]


def seed_sample_data():
    """Load the sample catalog, customers and orders unless already present.

    Returns ``True`` when data was written.
    """
    if current_domain.repository_for(Customer).find_by_email(CUSTOMERS[0]["email"]) is not None:
        logger.info("Sample data already present, skipping seed")
        return False

    customer_ids = [current_domain.process(RegisterCustomer(**data), asynchronous=False) for data in CUSTOMERS]
    category_ids = [current_domain.process(CreateCategory(**data), asynchronous=False) for data in CATEGORIES]

    item_ids = []
    for category_index, data in SHOP_ITEMS:
        command = CreateShopItem(
            image_url=f"https://example.com/images/{data['title'].lower().replace('-', '')}.jpg",
            category_ids=json.dumps([category_ids[category_index]]),
            **data,
        )
        item_ids.append(current_domain.process(command, asynchronous=False))

    for customer_index, status, notes, lines in ORDERS:
        dispatch.place_order(
            customer_id=customer_ids[customer_index],
            lines=[{"shop_item_id": item_ids[index], "quantity": quantity} for index, quantity in lines],
            notes=notes,
            status=status,
        )

    logger.info(
        "Sample data seeded",
        customers=len(customer_ids),
        categories=len(category_ids),
        shop_items=len(item_ids),
        orders=len(ORDERS),
    )
    return True
