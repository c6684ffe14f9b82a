# storefront/services/catalog_service.py
from typing import Any, Dict, List

from storefront.data.database import InMemoryStore
from storefront.data.models import CategoryModel, ProductModel
from storefront.domain.errors import ValidationError
from storefront.repos.catalog_repo import CatalogRepo
from storefront.utils.ids import parse_id


def product_to_dict(p: ProductModel) -> Dict[str, Any]:
    return {
        "id": p.id,
        "title": p.title,
        "price": p.price,
        "image": p.image,
        "category_id": p.category_id,
    }


def category_to_dict(c: CategoryModel) -> Dict[str, Any]:
    return {"id": c.id, "name": c.name}


class CatalogService:
    def __init__(self, store: InMemoryStore):
        self.repo = CatalogRepo(store.catalog)

    def list_products(self) -> List[Dict[str, Any]]:
        return [product_to_dict(p) for p in self.repo.list_products()]

    def products_by_category(self, raw_category_id: str) -> List[Dict[str, Any]]:
        category_id = parse_id(raw_category_id)
        if category_id is None:
            raise ValidationError("Invalid category ID")
        return [product_to_dict(p) for p in self.repo.products_by_category(category_id)]

    def list_categories(self) -> List[Dict[str, Any]]:
        return [category_to_dict(c) for c in self.repo.list_categories()]
