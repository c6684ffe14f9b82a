from dataclasses import dataclass

from storefront.data.models.product import ProductModel


@dataclass
class CartItemModel:
    id: int
    product: ProductModel
    quantity: int
