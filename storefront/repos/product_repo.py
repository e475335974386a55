# storefront/repos/product_repo.py
from typing import List

from sqlalchemy import func, select

from storefront.data.models.product import ProductModel
from storefront.repos.base import BaseRepo, store_errors


class ProductRepo(BaseRepo):
    @store_errors
    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(ProductModel)).scalar_one()

    @store_errors
    def list_all(self) -> List[ProductModel]:
        return list(self.db.execute(select(ProductModel)).scalars().all())

    @store_errors
    def get_product(self, product_id: str) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    @store_errors
    def add_all(self, products: List[ProductModel]) -> None:
        self.db.add_all(products)
        self.db.commit()
