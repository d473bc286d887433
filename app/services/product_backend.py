# app/services/product_backend.py
from abc import ABC, abstractmethod
from typing import Any, Dict

from app.domain.errors import NotFoundError
from app.domain.schemas import ProductIn


class ProductBackend(ABC):
    """Jeden kontrakt CRUD dla produktow, niezaleznie od magazynu.

    Implementacja wybierana raz przy starcie (PRODUCTS_BACKEND) i
    wstrzykiwana do routerow, handlery nie sprawdzaja flagi backendu.
    """

    name: str = ""

    @abstractmethod
    def list_products(self, user_id: str | None) -> list[Dict[str, Any]]:
        ...

    @abstractmethod
    def get_product(self, product_id: str, user_id: str | None) -> Dict[str, Any]:
        ...

    @abstractmethod
    def create_product(self, payload: ProductIn) -> Dict[str, Any]:
        ...

    @abstractmethod
    def update_product(
        self,
        product_id: str,
        payload: ProductIn,
        etag: str | None = None,
    ) -> Dict[str, Any]:
        ...

    @abstractmethod
    def delete_product(self, product_id: str, user_id: str | None) -> Dict[str, Any] | None:
        """None -> 204 bez body."""

    @abstractmethod
    def health(self) -> bool:
        ...

    def get_product_with_user(self, product_id: str) -> Dict[str, Any]:
        raise NotFoundError(f"route not available on {self.name} backend")
