# storefront/repos/user_repo.py
from storefront.data.database import InMemoryStore
from storefront.data.models import UserModel


class UserRepo:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_user(self, user_id: int | None) -> UserModel | None:
        if user_id is None:
            return None
        return self.store.get(user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return next((u for u in self.store.list() if u.email == email), None)

    def create_user(self, email: str, name: str, password: str) -> UserModel:
        # no uniqueness check here, UserService checks the email first
        user = UserModel(
            id=self.store.count() + 1,
            email=email,
            name=name,
            password=password,
        )
        return self.store.put(user)
