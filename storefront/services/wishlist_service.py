# storefront/services/wishlist_service.py
from dataclasses import dataclass
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.repos.wishlist_repo import WishlistRepo
from storefront.services.catalog_service import CatalogService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class WishlistEntry:
    item: WishlistItemModel
    product: ProductModel

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def product_id(self) -> str:
        return self.item.product_id

    @property
    def added_at(self) -> datetime:
        return self.item.added_at


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)
        self.catalog = CatalogService(db)

    def list_with_products(self, session_id: str) -> List[WishlistEntry]:
        """Newest first; entries whose product no longer exists are skipped."""
        rows = self.repo.get_items_with_products(session_id)
        return [WishlistEntry(item=item, product=product) for item, product in rows]

    def add(self, session_id: str, product_id: str) -> WishlistItemModel:
        """Idempotent: adding a product twice returns the first row."""
        self.catalog.get_by_id(product_id)

        item, created = self.repo.add_item(session_id, product_id)
        if created:
            logger.info(f"Product {product_id} added to wishlist {session_id}")
        return item

    def remove(self, session_id: str, item_id: str) -> bool:
        deleted = self.repo.delete_item(session_id, item_id)
        if deleted:
            logger.info(f"Wishlist item {item_id} removed from wishlist {session_id}")
        return deleted

    def contains(self, session_id: str, product_id: str) -> bool:
        return self.repo.get_by_product(session_id, product_id) is not None
