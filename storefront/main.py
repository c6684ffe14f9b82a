# storefront/main.py
from fastapi import FastAPI
import uvicorn

from storefront.api import build_router
from storefront.api.errors import register_exception_handlers
from storefront.api.routers import health
from storefront.data.catalog import load_catalog
from storefront.data.database import InMemoryStore
from storefront.utils.logging import configure_logging, get_logger
from storefront.utils.settings import API_PREFIX, CATALOG_DIR, HOST, PORT

logger = get_logger(__name__)


def create_app(store: InMemoryStore | None = None) -> FastAPI:
    configure_logging()

    if store is None:
        store = InMemoryStore(catalog=load_catalog(CATALOG_DIR))

    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
    )
    app.state.store = store

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(build_router(API_PREFIX))

    logger.info(f"Storefront API ready under {API_PREFIX}")
    return app


def run() -> None:
    logger.info(f"Starting server on port {PORT}...")
    uvicorn.run("storefront.main:create_app", factory=True, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
