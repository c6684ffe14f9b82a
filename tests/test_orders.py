"""Order placement and listing."""

import re
from datetime import date
from decimal import Decimal

import pytest

from storefront.domain.errors import NotFound, ValidationError
from storefront.services.cart_service import CartService
from storefront.services.order_service import OrderService

ADDRESS = {
    "addressLine": "1 Main Street",
    "city": "Springfield",
    "state": "Oregon",
    "postalCode": "97403",
    "country": "USA",
}


@pytest.fixture()
def orders(store):
    return OrderService(store, today=lambda: date(2024, 3, 5))


class TestPlaceOrder:
    def test_moves_cart_into_order(self, store, user, orders):
        svc = CartService(store)
        svc.add_item(user.id, product_id=1, quantity=2)
        svc.add_item(user.id, product_id=2, quantity=1)
        cart_before = user.cart

        order = orders.place_order(user.id)

        assert order.id == 1
        assert order.status == "Pending"
        assert order.date == "2024-03-05"
        assert order.items is cart_before
        assert len(order.items) == 2
        assert user.cart == []
        assert user.orders == [order]

    def test_total_matches_checkout_total(self, store, user, orders):
        CartService(store).add_item(user.id, product_id=2, quantity=3)
        order = orders.place_order(user.id)
        assert order.total == Decimal("71.97")

    def test_order_ids_are_sequential_per_user(self, store, user, orders):
        cart = CartService(store)
        cart.add_item(user.id, product_id=1, quantity=1)
        orders.place_order(user.id)
        cart.add_item(user.id, product_id=1, quantity=1)
        assert orders.place_order(user.id).id == 2

    def test_later_cart_changes_do_not_touch_order(self, store, user, orders):
        cart = CartService(store)
        cart.add_item(user.id, product_id=1, quantity=1)
        order = orders.place_order(user.id)
        cart.add_item(user.id, product_id=1, quantity=1)
        assert len(order.items) == 1
        assert order.items[0].quantity == 1

    def test_empty_cart_is_rejected(self, user, orders):
        with pytest.raises(ValidationError, match="Cart is empty"):
            orders.place_order(user.id)
        assert user.orders == []
        assert user.cart == []

    def test_unknown_user(self, orders):
        with pytest.raises(NotFound):
            orders.place_order(3)

    def test_date_is_zero_padded(self, store, user):
        CartService(store).add_item(user.id, product_id=1, quantity=1)
        order = OrderService(store, today=lambda: date(987, 1, 2)).place_order(user.id)
        assert order.date == "0987-01-02"


class TestListOrders:
    def test_projection(self, store, user, orders):
        CartService(store).add_item(user.id, product_id=2, quantity=2)
        orders.place_order(user.id)

        assert orders.list_orders(user.id) == [
            {
                "id": 1,
                "order_date": "2024-03-05",
                "status": "Pending",
                "total_amount": Decimal("47.98"),
                "user_id": user.id,
                "items": [
                    {
                        "id": 1,
                        "order_id": 1,
                        "price": Decimal("19.99"),
                        "product_id": 2,
                        "product_name": "Mouse",
                        "quantity": 2,
                        "user_id": user.id,
                    }
                ],
            }
        ]

    def test_no_orders(self, user, orders):
        assert orders.list_orders(user.id) == []


class TestOrderEndpoints:
    def test_place_and_list(self, client, user):
        client.post(f"/v1/cart/{user.id}", json={"productId": 1, "quantity": 2})
        summary = client.get(f"/v1/checkout/{user.id}/summary").json()["data"]

        response = client.post(f"/v1/orders/{user.id}", json=ADDRESS)
        assert response.status_code == 200
        assert response.json() == {"msg": "Success", "data": {"id": 1}}

        assert client.get(f"/v1/cart/{user.id}").json()["data"] == []

        listed = client.get(f"/v1/orders/{user.id}").json()["data"]
        assert len(listed) == 1
        assert listed[0]["totalAmount"] == summary["total"]
        assert listed[0]["status"] == "Pending"
        assert listed[0]["userId"] == user.id
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", listed[0]["orderDate"])
        assert listed[0]["items"][0] == {
            "id": 1,
            "orderId": 1,
            "price": 100,
            "productId": 1,
            "productName": "Keyboard",
            "quantity": 2,
            "userId": user.id,
        }

    def test_empty_cart(self, client, user):
        response = client.post(f"/v1/orders/{user.id}", json=ADDRESS)
        assert response.status_code == 400
        assert response.json() == {"status": 400, "msg": "Cart is empty"}

    @pytest.mark.parametrize("field", ["addressLine", "city", "state", "postalCode", "country"])
    def test_short_address_field(self, client, user, field):
        client.post(f"/v1/cart/{user.id}", json={"productId": 1, "quantity": 1})
        response = client.post(f"/v1/orders/{user.id}", json={**ADDRESS, field: "ab"})
        assert response.status_code == 400
        assert response.json() == {"status": 400, "msg": "Invalid arguments"}
        assert client.get(f"/v1/cart/{user.id}").json()["data"] != []

    def test_unknown_user(self, client):
        response = client.post("/v1/orders/9", json=ADDRESS)
        assert response.status_code == 404
        assert client.get("/v1/orders/9").status_code == 404

    def test_snake_case_address_is_rejected(self, client, user):
        client.post(f"/v1/cart/{user.id}", json={"productId": 1, "quantity": 1})
        payload = {**ADDRESS, "postal_code": ADDRESS["postalCode"]}
        del payload["postalCode"]

        response = client.post(f"/v1/orders/{user.id}", json=payload)
        assert response.status_code == 400
        assert response.json() == {"status": 400, "msg": "Invalid arguments"}
        assert user.orders == []
