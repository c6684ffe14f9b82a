from storefront.data.models.product import ProductModel
from storefront.data.models.category import CategoryModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel
from storefront.data.models.user import UserModel

__all__ = ["ProductModel", "CategoryModel", "CartItemModel", "OrderModel", "UserModel"]
