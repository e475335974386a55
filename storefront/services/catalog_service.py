# storefront/services/catalog_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.data.seed import INITIAL_CATALOG
from storefront.domain.errors import NotFoundError
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Read-only access to products, plus the one-time seed."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def seed_if_empty(self) -> int:
        existing = self.repo.count()
        if existing:
            logger.info(f"{existing} products already exist, skipping seed")
            return 0

        products = [ProductModel(**data) for data in INITIAL_CATALOG]
        self.repo.add_all(products)

        logger.info(f"Seeded {len(products)} products")
        return len(products)

    def list_all(self) -> List[ProductModel]:
        return self.repo.list_all()

    def get_by_id(self, product_id: str) -> ProductModel:
        product = self.repo.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product
