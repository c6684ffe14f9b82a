# storefront/services/user_service.py
from typing import Any, Dict

from storefront.data.database import InMemoryStore
from storefront.data.models import UserModel
from storefront.domain.errors import Conflict, NotFound, Unauthorized
from storefront.repos.user_repo import UserRepo
from storefront.services.passwords import verify_password
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def user_to_dict(user: UserModel) -> Dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "username": user.email,
    }


class UserService:
    def __init__(self, store: InMemoryStore):
        self.repo = UserRepo(store)
        self.locks = store.locks

    def signup(self, email: str, name: str, password: str) -> Dict[str, Any]:
        with self.locks.registry_lock():
            if self.repo.get_user_by_email(email):
                logger.info(f"Signup rejected, {email} already registered")
                raise Conflict("Email already registered")

            user = self.repo.create_user(email=email, name=name, password=password)

        logger.info(f"Created user {user.id} ({email})")
        return user_to_dict(user)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        user = self.repo.get_user_by_email(email)
        if not user:
            raise NotFound("No user with this email exists")

        if not verify_password(user.password, password):
            logger.info(f"Password mismatch for user {user.id}")
            raise Unauthorized("Password mismatch")

        return user_to_dict(user)
