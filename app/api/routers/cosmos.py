#app/api/routers/cosmos.py
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_cosmos_backend
from app.api.routers.products import build_products_router
from app.services.cosmos_products import CosmosProductService
from app.utils.settings import SEED_DEFAULT_USER_ID

# CRUD na Cosmos dostepny zawsze, rowniez gdy /products idzie do postgresa
products_router = build_products_router("/cosmos/products", get_cosmos_backend, ["cosmos"])

router = APIRouter(prefix="/cosmos", tags=["cosmos"])


@router.post("/seed")
def seed_products(
    user_id: str | None = Query(None, alias="userId"),
    backend: CosmosProductService = Depends(get_cosmos_backend),
):
    result = backend.seed(user_id or SEED_DEFAULT_USER_ID)
    return result.model_dump(by_alias=True)
