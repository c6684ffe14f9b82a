"""Thread-safety of registry and per-user state."""

from concurrent.futures import ThreadPoolExecutor

from storefront.domain.errors import Conflict
from storefront.services.cart_service import CartService
from storefront.data.locks import LockService
from storefront.services.user_service import UserService


def test_user_lock_is_reentrant():
    locks = LockService()
    with locks.user_lock(1):
        with locks.user_lock(1):
            pass


def test_concurrent_signups_register_email_once(store):
    svc = UserService(store)

    def attempt(_):
        try:
            svc.signup("a@x.com", "Alice", "pw1")
            return True
        except Conflict:
            return False

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(32)))

    assert results.count(True) == 1
    assert store.count() == 1


def test_concurrent_adds_keep_one_line_per_product(store, user):
    svc = CartService(store)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: svc.add_item(user.id, product_id=1, quantity=1), range(50)))

    assert len(user.cart) == 1
    assert user.cart[0].quantity == 50
    assert user.cart_item_counter == 1
