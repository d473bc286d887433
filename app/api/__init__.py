# app/api/__init__.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routers import cosmos, health, products
from app.services.backend_selection import build_backends, select_backend
from app.services.product_backend import ProductBackend
from app.utils.settings import CORS_ORIGINS, PRODUCTS_BACKEND
from app.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    backends: dict[str, ProductBackend] | None = None,
    backend_name: str | None = None,
) -> FastAPI:
    backends = backends or build_backends()
    active = select_backend(backend_name or PRODUCTS_BACKEND, backends)

    app = FastAPI(title="Products API", version="1.0.0")

    # wybor backendu raz, na caly czas zycia procesu
    app.state.backends = backends
    app.state.product_backend = active

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(cosmos.router)
    app.include_router(cosmos.products_router)
    app.include_router(products.router)

    logger.info(f"Products API configured, backend={active.name}")
    return app
