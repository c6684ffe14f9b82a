# storefront/data/catalog.py
import json
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import List

from storefront.data.models import CategoryModel, ProductModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Catalog:
    products: List[ProductModel] = field(default_factory=list)
    categories: List[CategoryModel] = field(default_factory=list)


def _read(path: Path) -> list:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array")
    return data


def load_catalog(directory: Path | str) -> Catalog:
    """
    Read products.json and categories.json from `directory`.
    Prices go through str() so 22.3 stays Decimal("22.3").
    """
    directory = Path(directory)

    products = [
        ProductModel(
            id=int(p["id"]),
            title=p["title"],
            price=Decimal(str(p["price"])),
            image=p["image"],
            category_id=int(p["categoryId"]),
        )
        for p in _read(directory / "products.json")
    ]
    categories = [
        CategoryModel(id=int(c["id"]), name=c["name"])
        for c in _read(directory / "categories.json")
    ]

    logger.info(f"Loaded {len(products)} products and {len(categories)} categories from {directory}")
    return Catalog(products=products, categories=categories)
