# storefront/services/cart_service.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from storefront.data.database import InMemoryStore
from storefront.data.models import CartItemModel, ProductModel, UserModel
from storefront.domain.errors import (
    ITEM_NOT_FOUND,
    PRODUCT_NOT_FOUND,
    USER_NOT_FOUND,
    NotFound,
)
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.ids import parse_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SHIPPING_RATE = Decimal("0.1")
TAX_RATE = Decimal("0.1")
CENTS = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_totals(user: UserModel) -> Dict[str, Decimal]:
    """
    subtotal is left unrounded; shipping, tax and total are each rounded
    half-up to cents. Pure function of the cart.
    """
    subtotal = sum((i.product.price * i.quantity for i in user.cart), Decimal("0"))
    shipping = round_money(subtotal * SHIPPING_RATE)
    tax = round_money(subtotal * TAX_RATE)
    total = round_money(subtotal + shipping + tax)

    return {
        "subtotal": subtotal,
        "shipping": shipping,
        "tax": tax,
        "total": total,
        "discount": Decimal("0"),
    }


def line_items(user: UserModel) -> List[Dict[str, Any]]:
    return [
        {
            "id": i.id,
            "product_id": i.product.id,
            "product_name": i.product.title,
            "price": i.product.price,
            "image_url": i.product.image,
            "quantity": i.quantity,
        }
        for i in user.cart
    ]


class CartService:
    """
    commands (add, update, remove) change the live cart
    queries (get_cart, checkout_summary) only read it
    every call returns the cart as line items
    """

    def __init__(self, store: InMemoryStore):
        self.users = UserRepo(store)
        self.catalog = CatalogRepo(store.catalog)
        self.locks = store.locks

    def _get_user(self, raw_user_id) -> UserModel:
        user = self.users.get_user(parse_id(raw_user_id))
        if not user:
            raise NotFound(USER_NOT_FOUND)
        return user

    def _get_product(self, product_id: int) -> ProductModel:
        product = self.catalog.get_product(product_id)
        if not product:
            raise NotFound(PRODUCT_NOT_FOUND)
        return product

    #query
    def get_cart(self, user_id) -> List[Dict[str, Any]]:
        user = self._get_user(user_id)
        with self.locks.user_lock(user.id):
            return line_items(user)

    def checkout_summary(self, user_id) -> Dict[str, Any]:
        user = self._get_user(user_id)
        with self.locks.user_lock(user.id):
            return {"items": line_items(user), **compute_totals(user)}

    #commands
    def add_item(self, user_id, product_id: int, quantity: int) -> List[Dict[str, Any]]:
        user = self._get_user(user_id)
        product = self._get_product(product_id)

        with self.locks.user_lock(user.id):
            existing = next((i for i in user.cart if i.product.id == product.id), None)

            if existing:
                # the requested quantity is ignored for a product already in the cart
                logger.warning(
                    f"Product {product.id} already in cart of user {user.id}, "
                    f"quantity {existing.quantity} -> {existing.quantity + 1} (requested {quantity})"
                )
                existing.quantity += 1
            else:
                item = CartItemModel(
                    id=user.next_cart_item_id(),
                    product=product,
                    quantity=quantity,
                )
                user.cart.append(item)
                logger.info(f"Added item {item.id} (product {product.id} x{quantity}) to cart of user {user.id}")

            return line_items(user)

    def update_item(self, user_id, item_id, product_id: int, quantity: int) -> List[Dict[str, Any]]:
        user = self._get_user(user_id)
        product = self._get_product(product_id)

        with self.locks.user_lock(user.id):
            item = user.find_cart_item(parse_id(item_id))
            if not item:
                raise NotFound(ITEM_NOT_FOUND)

            item.product = product
            item.quantity = quantity
            logger.info(f"Updated item {item.id} in cart of user {user.id}: product {product.id} x{quantity}")

            return line_items(user)

    def remove_item(self, user_id, item_id) -> List[Dict[str, Any]]:
        user = self._get_user(user_id)

        with self.locks.user_lock(user.id):
            item = user.find_cart_item(parse_id(item_id))
            if not item:
                raise NotFound(ITEM_NOT_FOUND)

            user.cart.remove(item)
            logger.info(f"Removed item {item.id} from cart of user {user.id}")

            return line_items(user)
