# app/data/cosmos.py
from functools import lru_cache

from azure.cosmos import ContainerProxy, CosmosClient

from app.domain.errors import StorageError
from app.utils.settings import (
    COSMOSDB_ACCOUNT_ENDPOINT,
    COSMOSDB_CONTAINER,
    COSMOSDB_DATABASE,
    COSMOSDB_KEY,
)
from app.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_cosmos_container() -> ContainerProxy:
    """Wspoldzielony klient kontenera, tworzony przy pierwszym uzyciu.

    Kontener musi istniec i miec partition key ``/userId``.
    """
    if not COSMOSDB_ACCOUNT_ENDPOINT:
        raise StorageError("cosmos is not configured", detail="COSMOSDB_ACCOUNT_ENDPOINT is not set")
    if not COSMOSDB_KEY:
        raise StorageError("cosmos is not configured", detail="COSMOSDB_KEY is not set")

    logger.info(
        f"Connecting to Cosmos {COSMOSDB_ACCOUNT_ENDPOINT} "
        f"db={COSMOSDB_DATABASE} container={COSMOSDB_CONTAINER}"
    )
    client = CosmosClient(COSMOSDB_ACCOUNT_ENDPOINT, credential=COSMOSDB_KEY)
    database = client.get_database_client(COSMOSDB_DATABASE)
    return database.get_container_client(COSMOSDB_CONTAINER)
