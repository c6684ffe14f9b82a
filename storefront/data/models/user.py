from dataclasses import dataclass, field
from typing import List

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel


@dataclass
class UserModel:
    id: int
    email: str
    name: str
    password: str  # plain text, see services/passwords.py
    cart: List[CartItemModel] = field(default_factory=list)
    cart_item_counter: int = 0
    orders: List[OrderModel] = field(default_factory=list)

    def next_cart_item_id(self) -> int:
        self.cart_item_counter += 1
        return self.cart_item_counter

    def find_cart_item(self, item_id: int) -> CartItemModel | None:
        return next((i for i in self.cart if i.id == item_id), None)
