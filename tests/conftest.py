from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.data.catalog import Catalog
from storefront.data.database import InMemoryStore
from storefront.data.models import CategoryModel, ProductModel
from storefront.main import create_app
from storefront.repos.user_repo import UserRepo


@pytest.fixture()
def catalog():
    return Catalog(
        products=[
            ProductModel(id=1, title="Keyboard", price=Decimal("100"), image="kb.png", category_id=1),
            ProductModel(id=2, title="Mouse", price=Decimal("19.99"), image="mouse.png", category_id=1),
            ProductModel(id=3, title="Sticker", price=Decimal("0.05"), image="sticker.png", category_id=2),
        ],
        categories=[
            CategoryModel(id=1, name="Electronics"),
            CategoryModel(id=2, name="Accessories"),
        ],
    )


@pytest.fixture()
def store(catalog):
    return InMemoryStore(catalog=catalog)


@pytest.fixture()
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture()
def user(store):
    return UserRepo(store).create_user("ann@example.com", "Ann", "secret")
