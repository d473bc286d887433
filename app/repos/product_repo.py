# app/repos/product_repo.py
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel).order_by(ProductModel.id.asc())
            ).scalars().all()
        )

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(
        self,
        product_id: int,
        name: str,
        price: float,
        user_id: str,
    ) -> ProductModel | None:
        product = self.get_product(product_id)
        if not product:
            return None

        product.name = name
        product.price = price
        product.user_id = user_id
        # zawsze, rowniez gdy wartosci sie nie zmienily
        product.updated_at = func.now()

        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> int:
        # zwraca liczbe usunietych wierszy (0 albo 1)
        result = self.db.execute(
            delete(ProductModel).where(ProductModel.id == product_id)
        )
        self.db.commit()
        return result.rowcount
