# storefront/services/order_service.py
from datetime import date
from typing import Any, Callable, Dict, List

from storefront.data.database import InMemoryStore
from storefront.data.models import OrderModel, UserModel
from storefront.data.models.order import PENDING
from storefront.domain.errors import USER_NOT_FOUND, NotFound, ValidationError
from storefront.repos.user_repo import UserRepo
from storefront.services.cart_service import compute_totals
from storefront.utils.ids import parse_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def order_to_dict(order: OrderModel, user_id: int) -> Dict[str, Any]:
    return {
        "id": order.id,
        "order_date": order.date,
        "status": order.status,
        "total_amount": order.total,
        "user_id": user_id,
        "items": [
            {
                "id": i.id,
                "order_id": order.id,
                "price": i.product.price,
                "product_id": i.product.id,
                "product_name": i.product.title,
                "quantity": i.quantity,
                "user_id": user_id,
            }
            for i in order.items
        ],
    }


class OrderService:
    """
    Orders are created from the user's live cart and never change afterwards.
    """

    def __init__(self, store: InMemoryStore, today: Callable[[], date] = date.today):
        self.users = UserRepo(store)
        self.locks = store.locks
        self.today = today

    def _get_user(self, raw_user_id) -> UserModel:
        user = self.users.get_user(parse_id(raw_user_id))
        if not user:
            raise NotFound(USER_NOT_FOUND)
        return user

    def place_order(self, user_id) -> OrderModel:
        """
        Use Case: checkout.

        1. Rejects an empty cart
        2. Computes the total
        3. Moves the cart items into the new order
        4. Leaves the user with an empty cart
        """
        user = self._get_user(user_id)

        with self.locks.user_lock(user.id):
            if not user.cart:
                raise ValidationError("Cart is empty")

            order = OrderModel(
                id=len(user.orders) + 1,
                total=compute_totals(user)["total"],
                date=self.today().isoformat(),
                status=PENDING,
                items=user.cart,
            )
            user.orders.append(order)
            user.cart = []

        logger.info(f"Order {order.id} placed by user {user.id}, {len(order.items)} items, total {order.total}")
        return order

    def list_orders(self, user_id) -> List[Dict[str, Any]]:
        user = self._get_user(user_id)
        with self.locks.user_lock(user.id):
            return [order_to_dict(o, user.id) for o in user.orders]
