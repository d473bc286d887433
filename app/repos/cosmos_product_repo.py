# app/repos/cosmos_product_repo.py
from typing import Any, Dict

from azure.core import MatchConditions
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosResourceNotFoundError

_BY_USER_QUERY = "SELECT * FROM c WHERE c.userId = @userId"


class CosmosProductRepo:
    """Dostep do kontenera produktow, partition key = userId."""

    def __init__(self, container: ContainerProxy):
        self.container = container

    def list_by_user(self, user_id: str) -> list[Dict[str, Any]]:
        return list(
            self.container.query_items(
                query=_BY_USER_QUERY,
                parameters=[{"name": "@userId", "value": user_id}],
                partition_key=user_id,
            )
        )

    def read(self, item_id: str, user_id: str) -> Dict[str, Any] | None:
        try:
            return self.container.read_item(item=item_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            return None

    def create(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return self.container.create_item(body=doc)

    def upsert(self, doc: Dict[str, Any], etag: str | None = None) -> Dict[str, Any]:
        if etag:
            # compare-and-swap na _etag
            return self.container.upsert_item(
                body=doc,
                etag=etag,
                match_condition=MatchConditions.IfNotModified,
            )
        return self.container.upsert_item(body=doc)

    def delete(self, item_id: str, user_id: str) -> bool:
        try:
            self.container.delete_item(item=item_id, partition_key=user_id)
        except CosmosResourceNotFoundError:
            return False
        return True

    def ping(self) -> bool:
        result = list(
            self.container.query_items(
                query="SELECT VALUE 1",
                enable_cross_partition_query=True,
            )
        )
        return bool(result) and result[0] == 1
