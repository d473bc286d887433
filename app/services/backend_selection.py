# app/services/backend_selection.py
from app.services.cosmos_products import CosmosProductService
from app.services.postgres_products import PostgresProductService
from app.services.product_backend import ProductBackend


def build_backends() -> dict[str, ProductBackend]:
    return {
        "postgres": PostgresProductService(),
        "cosmos": CosmosProductService(),
    }


def select_backend(name: str, backends: dict[str, ProductBackend]) -> ProductBackend:
    key = (name or "").strip().lower()
    if key not in backends:
        raise ValueError(
            f"Unsupported PRODUCTS_BACKEND '{name}', use one of: {', '.join(sorted(backends))}"
        )
    return backends[key]
