#app/api/routers/health.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_cosmos_backend, get_postgres_backend
from app.domain.errors import ProductsApiError
from app.services.product_backend import ProductBackend

router = APIRouter(tags=["health"])


def _probe(backend: ProductBackend):
    try:
        return {"ok": backend.health()}
    except ProductsApiError as e:
        return JSONResponse(status_code=500, content={"ok": False, "error": e.detail or e.message})


@router.get("/health")
def health(request: Request):
    return {
        "status": "ok",
        "service": "products-api",
        "backend": request.app.state.product_backend.name,
    }


@router.get("/db/health")
def db_health(backend: ProductBackend = Depends(get_postgres_backend)):
    return _probe(backend)


@router.get("/cosmos/health")
def cosmos_health(backend: ProductBackend = Depends(get_cosmos_backend)):
    return _probe(backend)
