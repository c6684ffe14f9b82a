# storefront/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, Depends

from storefront.data.database import InMemoryStore, get_store
from storefront.domain.schemas import CategoryOut, Envelope, ProductOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return CatalogService(store)


@router.get("/products", response_model=Envelope[List[ProductOut]])
def list_products(svc: CatalogService = Depends(get_service)):
    return {"msg": "Success", "data": svc.list_products()}


@router.get("/products/category/{category_id}", response_model=Envelope[List[ProductOut]])
def list_products_by_category(category_id: str, svc: CatalogService = Depends(get_service)):
    return {"msg": "Success", "data": svc.products_by_category(category_id)}


@router.get("/categories", response_model=Envelope[List[CategoryOut]])
def list_categories(svc: CatalogService = Depends(get_service)):
    return {"msg": "Success", "data": svc.list_categories()}
