# storefront/data/database.py
from typing import List

from fastapi import Request

from storefront.data.catalog import Catalog
from storefront.data.models import UserModel
from storefront.data.locks import LockService


class InMemoryStore:
    """
    Process-local state: the static catalog and the user registry.
    Users own their carts and orders, so get/put/list over users is
    the whole storage surface. Swap this class to add a real backend.
    """

    def __init__(self, catalog: Catalog | None = None, lock_service: LockService | None = None):
        self.catalog = catalog or Catalog()
        self.locks = lock_service or LockService()
        self._users: List[UserModel] = []

    def get(self, user_id: int) -> UserModel | None:
        return next((u for u in self._users if u.id == user_id), None)

    def put(self, user: UserModel) -> UserModel:
        self._users.append(user)
        return user

    def list(self) -> List[UserModel]:
        return list(self._users)

    def count(self) -> int:
        return len(self._users)


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store
