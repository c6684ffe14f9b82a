# storefront/api/__init__.py
from fastapi import APIRouter

from storefront.api.routers import carts, catalog, orders, users


def build_router(prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(catalog.router)
    router.include_router(users.router)
    router.include_router(carts.checkout_router)
    router.include_router(carts.router)
    router.include_router(orders.router)
    return router
