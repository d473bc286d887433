# app/api/deps.py
from fastapi import Request

from app.services.cosmos_products import CosmosProductService
from app.services.product_backend import ProductBackend


def get_product_backend(request: Request) -> ProductBackend:
    # backend wybrany przy starcie aplikacji
    return request.app.state.product_backend


def get_cosmos_backend(request: Request) -> CosmosProductService:
    # /cosmos/* zawsze idzie do Cosmos, niezaleznie od PRODUCTS_BACKEND
    return request.app.state.backends["cosmos"]


def get_postgres_backend(request: Request) -> ProductBackend:
    return request.app.state.backends["postgres"]
