# app/services/cosmos_products.py
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy
from azure.cosmos.exceptions import CosmosAccessConditionFailedError, CosmosResourceExistsError

from app.data.cosmos import get_cosmos_container
from app.data.seed import seed_documents
from app.domain.errors import ConflictError, NotFoundError, StorageError, ValidationError
from app.domain.schemas import ProductIn, SeedResult
from app.repos.cosmos_product_repo import CosmosProductRepo
from app.services.product_backend import ProductBackend
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CosmosProductService(ProductBackend):
    """
    Produkty jako dokumenty w kontenerze partycjonowanym po userId.
    Brak walidacji usera w users-service, userId wymagany tylko do adresowania partycji.
    """

    name = "cosmos"

    def __init__(self, container_factory: Callable[[], ContainerProxy] | None = None):
        self.container_factory = container_factory or get_cosmos_container

    @contextmanager
    def _repo(self) -> Iterator[CosmosProductRepo]:
        try:
            yield CosmosProductRepo(self.container_factory())
        except CosmosResourceExistsError as e:
            raise ConflictError("product already exists", detail=str(e)) from e
        except CosmosAccessConditionFailedError as e:
            raise ConflictError(
                "product was modified by another request", detail=str(e), status_code=412
            ) from e
        except AzureError as e:
            logger.error(f"Cosmos operation failed: {e}")
            raise StorageError(str(e)) from e

    @staticmethod
    def _require_user(user_id: str | None) -> str:
        if not user_id:
            raise ValidationError("userId is required")
        return user_id

    #query
    def list_products(self, user_id: str | None) -> list[Dict[str, Any]]:
        user_id = self._require_user(user_id)
        with self._repo() as repo:
            return repo.list_by_user(user_id)

    def get_product(self, product_id: str, user_id: str | None) -> Dict[str, Any]:
        user_id = self._require_user(user_id)
        with self._repo() as repo:
            doc = repo.read(str(product_id), user_id)
        if doc is None:
            raise NotFoundError("product not found")
        return doc

    #commands
    def create_product(self, payload: ProductIn) -> Dict[str, Any]:
        if not payload.id or not payload.name or payload.price is None or not payload.user_id:
            raise ValidationError("id, name, price, userId are required")

        doc = {
            "id": str(payload.id),
            "name": payload.name,
            "price": payload.price,
            "userId": payload.user_id,
        }
        with self._repo() as repo:
            created = repo.create(doc)

        logger.info(f"Created document {doc['id']} in partition {doc['userId']}")
        return created

    def update_product(
        self,
        product_id: str,
        payload: ProductIn,
        etag: str | None = None,
    ) -> Dict[str, Any]:
        """
        Read - merge - upsert. Pominiete name/price zostaja z zapisanego dokumentu.

        Bez etag: last-write-wins, rownolegly zapis moze zostac nadpisany.
        Z etag: upsert warunkowy, konflikt -> 412.
        """
        user_id = self._require_user(payload.user_id)
        item_id = str(product_id)

        with self._repo() as repo:
            existing = repo.read(item_id, user_id)

            doc = dict(existing) if existing else {"id": item_id, "userId": user_id}
            if payload.name is not None:
                doc["name"] = payload.name
            if payload.price is not None:
                doc["price"] = payload.price

            return repo.upsert(doc, etag=etag)

    def delete_product(self, product_id: str, user_id: str | None) -> None:
        user_id = self._require_user(user_id)
        with self._repo() as repo:
            deleted = repo.delete(str(product_id), user_id)
        if not deleted:
            raise NotFoundError("product not found")
        logger.info(f"Deleted document {product_id} from partition {user_id}")

    def seed(self, user_id: str) -> SeedResult:
        docs = seed_documents(user_id)
        with self._repo() as repo:
            for doc in docs:
                repo.upsert(doc)

        logger.info(f"Seeded {len(docs)} products for user {user_id}")
        return SeedResult(inserted=len(docs), user_id=user_id)

    def health(self) -> bool:
        with self._repo() as repo:
            return repo.ping()
