"""Integration tests for the order endpoints."""

import pytest


def _customer(client, email="john.doe@example.com"):
    response = client.post(
        "/customers",
        json={"name": "John", "surname": "Doe", "email": email, "address": "123 Main St"},
    )
    assert response.status_code == 201
    return response.json()["id"]


def _item(client, stock=50, title="Smartphone"):
    response = client.post("/shop-items", json={"title": title, "price": 699.99, "stock_quantity": stock})
    assert response.status_code == 201
    return response.json()["id"]


def _stock(client, item_id):
    return client.get(f"/shop-items/{item_id}").json()["stock_quantity"]


@pytest.fixture()
def order_setup(client):
    customer_id = _customer(client)
    item_id = _item(client, stock=50)
    response = client.post(
        "/orders",
        json={"customer_id": customer_id, "items": [{"shop_item_id": item_id, "quantity": 2}]},
    )
    assert response.status_code == 201
    return {"customer_id": customer_id, "item_id": item_id, "order": response.json()}


class TestCreateOrderEndpoint:
    def test_create_reserves_stock(self, client, order_setup):
        order = order_setup["order"]
        assert order["status"] == "pending"
        assert order["shipping_address"] == "123 Main St"
        assert order["customer"]["email"] == "john.doe@example.com"
        assert order["items"][0]["shop_item"]["id"] == order_setup["item_id"]
        assert _stock(client, order_setup["item_id"]) == 48

    def test_insufficient_stock(self, client):
        customer_id = _customer(client)
        item_id = _item(client, stock=10)
        response = client.post(
            "/orders",
            json={"customer_id": customer_id, "items": [{"shop_item_id": item_id, "quantity": 20}]},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "InsufficientStock"
        assert _stock(client, item_id) == 10
        assert client.get("/orders").json() == []

    def test_zero_quantity(self, client):
        customer_id = _customer(client)
        item_id = _item(client)
        response = client.post(
            "/orders",
            json={"customer_id": customer_id, "items": [{"shop_item_id": item_id, "quantity": 0}]},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidQuantity"

    def test_unknown_customer(self, client):
        item_id = _item(client)
        response = client.post(
            "/orders",
            json={"customer_id": "missing", "items": [{"shop_item_id": item_id, "quantity": 1}]},
        )
        assert response.status_code == 404
        assert response.json()["error"] == "NotFound"

    def test_unknown_item(self, client):
        customer_id = _customer(client)
        response = client.post(
            "/orders",
            json={"customer_id": customer_id, "items": [{"shop_item_id": "missing", "quantity": 1}]},
        )
        assert response.status_code == 404

    def test_missing_items(self, client):
        customer_id = _customer(client)
        response = client.post("/orders", json={"customer_id": customer_id})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidArgument"

    def test_empty_items(self, client):
        customer_id = _customer(client)
        response = client.post("/orders", json={"customer_id": customer_id, "items": []})
        assert response.status_code == 400


class TestReadOrderEndpoints:
    def test_get_order(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.get(f"/orders/{order_id}")
        assert response.status_code == 200
        assert response.json()["id"] == order_id

    def test_get_missing_order(self, client):
        response = client.get("/orders/missing")
        assert response.status_code == 404
        assert response.json() == {
            "error": "NotFound",
            "messages": {"order_id": ["Order with id missing not found"]},
        }

    def test_list_orders(self, client, order_setup):
        ids = [order["id"] for order in client.get("/orders").json()]
        assert order_setup["order"]["id"] in ids

    def test_list_by_status(self, client, order_setup):
        response = client.get("/orders/status/pending")
        assert response.status_code == 200
        assert [order["id"] for order in response.json()] == [order_setup["order"]["id"]]
        assert client.get("/orders/status/shipped").json() == []

    def test_list_by_bogus_status(self, client):
        response = client.get("/orders/status/bogus")
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidArgument"
        assert "status" in response.json()["messages"]


class TestUpdateOrderEndpoint:
    def test_cancel_restores_stock(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.put(f"/orders/{order_id}", json={"status": "canceled"})
        assert response.status_code == 200
        assert response.json()["status"] == "canceled"
        assert _stock(client, order_setup["item_id"]) == 50

        client.put(f"/orders/{order_id}", json={"status": "canceled"})
        assert _stock(client, order_setup["item_id"]) == 50

    def test_replace_lines(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.put(
            f"/orders/{order_id}",
            json={"items": [{"shop_item_id": order_setup["item_id"], "quantity": 5}]},
        )
        assert response.status_code == 200
        assert response.json()["items"][0]["quantity"] == 5
        assert _stock(client, order_setup["item_id"]) == 45

    def test_partial_update_keeps_other_fields(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.put(f"/orders/{order_id}", json={"notes": "Gift wrap requested"})
        body = response.json()
        assert body["notes"] == "Gift wrap requested"
        assert body["status"] == "pending"
        assert len(body["items"]) == 1

    def test_invalid_status(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.put(f"/orders/{order_id}", json={"status": "lost"})
        assert response.status_code == 400

    def test_missing_order(self, client):
        response = client.put("/orders/missing", json={"status": "canceled"})
        assert response.status_code == 404


class TestDeleteOrderEndpoint:
    def test_delete_restores_stock(self, client, order_setup):
        order_id = order_setup["order"]["id"]
        response = client.delete(f"/orders/{order_id}")
        assert response.status_code == 204
        assert _stock(client, order_setup["item_id"]) == 50
        assert client.get(f"/orders/{order_id}").status_code == 404
        assert client.delete(f"/orders/{order_id}").status_code == 404
