# storefront/data/locks.py
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class LockService:
    """
    -registry lock (signup: check email, then insert)
    -one lock per user for cart/order state
    sync endpoints run on a thread pool, so these keep the invariants
    on users, carts and orders
    """

    def __init__(self):
        self._registry_lock = threading.RLock()
        self._guard = threading.Lock()
        self._user_locks: Dict[int, threading.RLock] = {}

    @contextmanager
    def registry_lock(self) -> Iterator[None]:
        with self._registry_lock:
            yield

    @contextmanager
    def user_lock(self, user_id: int) -> Iterator[None]:
        with self._guard:
            lock = self._user_locks.get(user_id)
            if lock is None:
                logger.debug(f"Creating lock for user {user_id}")
                lock = self._user_locks[user_id] = threading.RLock()
        with lock:
            yield
