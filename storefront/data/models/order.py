from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from storefront.data.models.cart_item import CartItemModel

PENDING = "Pending"


@dataclass
class OrderModel:
    id: int
    total: Decimal
    date: str  # YYYY-MM-DD
    status: str = PENDING
    items: List[CartItemModel] = field(default_factory=list)
