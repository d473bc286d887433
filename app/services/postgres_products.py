# app/services/postgres_products.py
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.data.database import SessionLocal, ping
from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError, StorageError, UpstreamError, ValidationError
from app.domain.schemas import ProductIn, ProductOut
from app.repos.product_repo import ProductRepo
from app.services.product_backend import ProductBackend
from app.services.users_client import UsersClient
from app.utils.logging import get_logger

logger = get_logger(__name__)


class PostgresProductService(ProductBackend):
    """
    Produkty w tabeli products.
    Zapis (create/update) wymaga istnienia usera w users-service,
    sprawdzane w momencie zapisu, bez cache.
    """

    name = "postgres"

    def __init__(
        self,
        session_factory: sessionmaker | None = None,
        users_client: UsersClient | None = None,
    ):
        self.session_factory = session_factory or SessionLocal
        self.users_client = users_client or UsersClient()

    @contextmanager
    def _repo(self, failure: str) -> Iterator[ProductRepo]:
        db: Session = self.session_factory()
        try:
            yield ProductRepo(db)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{failure}: {e}")
            raise StorageError(failure, detail=str(e)) from e
        finally:
            db.close()

    @staticmethod
    def _parse_id(product_id: str) -> int:
        # tylko cyfry ASCII, "1_0", "+10", " 10" nie sa aliasami id 10
        if not isinstance(product_id, str) or not (product_id.isascii() and product_id.isdigit()):
            raise NotFoundError("product not found")
        return int(product_id)

    @staticmethod
    def _require_fields(payload: ProductIn) -> None:
        if not payload.name or payload.price is None or not payload.user_id:
            raise ValidationError("name, price, userId required")

    def _ensure_user_exists(self, user_id: str) -> None:
        if not self.users_client.user_exists(user_id):
            logger.info(f"Rejecting write, user {user_id} does not exist")
            raise ValidationError("user does not exist")

    #query
    def list_products(self, user_id: str | None) -> list[Dict[str, Any]]:
        # filtr userId ignorowany, lista wszystkich produktow
        with self._repo("query failed") as repo:
            return [ProductOut.model_validate(p).to_json() for p in repo.list_products()]

    def get_product(self, product_id: str, user_id: str | None = None) -> Dict[str, Any]:
        pid = self._parse_id(product_id)
        with self._repo("query failed") as repo:
            product = repo.get_product(pid)
            if not product:
                raise NotFoundError("product not found")
            return ProductOut.model_validate(product).to_json()

    def get_product_with_user(self, product_id: str) -> Dict[str, Any]:
        product = self.get_product(product_id)

        user = self.users_client.fetch_user(product["userId"])
        if user is None:
            raise UpstreamError("users-api error", detail=f"user {product['userId']} not found")

        return {"product": product, "user": user}

    #commands
    def create_product(self, payload: ProductIn) -> Dict[str, Any]:
        self._require_fields(payload)
        self._ensure_user_exists(payload.user_id)

        with self._repo("insert failed") as repo:
            created = repo.create_product(
                ProductModel(
                    name=payload.name,
                    price=payload.price,
                    user_id=payload.user_id,
                )
            )
            logger.info(f"Created product {created.id} for user {created.user_id}")
            return ProductOut.model_validate(created).to_json()

    def update_product(
        self,
        product_id: str,
        payload: ProductIn,
        etag: str | None = None,
    ) -> Dict[str, Any]:
        # pelna podmiana name/price/userId, brak partial update
        self._require_fields(payload)
        self._ensure_user_exists(payload.user_id)
        pid = self._parse_id(product_id)

        with self._repo("update failed") as repo:
            updated = repo.update_product(
                product_id=pid,
                name=payload.name,
                price=payload.price,
                user_id=payload.user_id,
            )
            if not updated:
                raise NotFoundError("product not found")
            logger.info(f"Updated product {pid}")
            return ProductOut.model_validate(updated).to_json()

    def delete_product(self, product_id: str, user_id: str | None = None) -> Dict[str, Any]:
        pid = self._parse_id(product_id)

        with self._repo("delete failed") as repo:
            if repo.delete_product(pid) == 0:
                raise NotFoundError("product not found")

        logger.info(f"Deleted product {pid}")
        return {"deleted": pid}

    def health(self) -> bool:
        try:
            return ping(self.session_factory)
        except SQLAlchemyError as e:
            raise StorageError("database unavailable", detail=str(e)) from e
