# storefront/repos/catalog_repo.py
from typing import List

from storefront.data.catalog import Catalog
from storefront.data.models import CategoryModel, ProductModel


class CatalogRepo:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def list_products(self) -> List[ProductModel]:
        return list(self.catalog.products)

    def products_by_category(self, category_id: int) -> List[ProductModel]:
        return [p for p in self.catalog.products if p.category_id == category_id]

    def get_product(self, product_id: int) -> ProductModel | None:
        return next((p for p in self.catalog.products if p.id == product_id), None)

    def list_categories(self) -> List[CategoryModel]:
        return list(self.catalog.categories)
