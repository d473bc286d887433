#app/api/routers/products.py
from typing import Callable

from fastapi import APIRouter, Depends, Header, Query, Response

from app.api.deps import get_product_backend
from app.domain.schemas import ProductIn
from app.services.product_backend import ProductBackend


def build_products_router(
    prefix: str,
    backend_dependency: Callable[..., ProductBackend],
    tags: list[str],
) -> APIRouter:
    """Ten sam zestaw endpointow CRUD nad dowolnym backendem."""

    router = APIRouter(prefix=prefix, tags=tags)

    @router.get("")
    def list_products(
        user_id: str | None = Query(None, alias="userId"),
        x_user_id: str | None = Header(None),
        backend: ProductBackend = Depends(backend_dependency),
    ):
        return backend.list_products(user_id or x_user_id)

    @router.post("", status_code=201)
    def create_product(
        payload: ProductIn | None = None,
        backend: ProductBackend = Depends(backend_dependency),
    ):
        return backend.create_product(payload or ProductIn())

    @router.get("/{product_id}")
    def get_product(
        product_id: str,
        user_id: str | None = Query(None, alias="userId"),
        x_user_id: str | None = Header(None),
        backend: ProductBackend = Depends(backend_dependency),
    ):
        return backend.get_product(product_id, user_id or x_user_id)

    @router.put("/{product_id}")
    def update_product(
        product_id: str,
        payload: ProductIn | None = None,
        if_match: str | None = Header(None),
        backend: ProductBackend = Depends(backend_dependency),
    ):
        return backend.update_product(product_id, payload or ProductIn(), etag=if_match)

    @router.delete("/{product_id}")
    def delete_product(
        product_id: str,
        user_id: str | None = Query(None, alias="userId"),
        x_user_id: str | None = Header(None),
        backend: ProductBackend = Depends(backend_dependency),
    ):
        result = backend.delete_product(product_id, user_id or x_user_id)
        if result is None:
            return Response(status_code=204)
        return result

    @router.get("/{product_id}/with-user")
    def get_product_with_user(
        product_id: str,
        backend: ProductBackend = Depends(backend_dependency),
    ):
        return backend.get_product_with_user(product_id)

    return router


router = build_products_router("/products", get_product_backend, ["products"])
