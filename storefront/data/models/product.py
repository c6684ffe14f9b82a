from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductModel:
    id: int
    title: str
    price: Decimal
    image: str
    category_id: int
