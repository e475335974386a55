# storefront/repos/wishlist_repo.py
from typing import List, Tuple

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from storefront.data.models.product import ProductModel
from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.domain.errors import StoreError
from storefront.repos.base import BaseRepo, store_errors


class WishlistRepo(BaseRepo):
    @store_errors
    def get_items_with_products(
        self, session_id: str
    ) -> List[Tuple[WishlistItemModel, ProductModel]]:
        stmt = (
            select(WishlistItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == WishlistItemModel.product_id)
            .where(WishlistItemModel.session_id == session_id)
            .order_by(WishlistItemModel.added_at.desc())
        )
        return [(item, product) for item, product in self.db.execute(stmt).all()]

    @store_errors
    def get_by_product(self, session_id: str, product_id: str) -> WishlistItemModel | None:
        stmt = select(WishlistItemModel).where(
            WishlistItemModel.session_id == session_id,
            WishlistItemModel.product_id == product_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    @store_errors
    def add_item(self, session_id: str, product_id: str) -> Tuple[WishlistItemModel, bool]:
        """Insert a wishlist row, or return the one that already exists. Returns (item, created)."""
        existing = self.get_by_product(session_id, product_id)
        if existing:
            return existing, False

        item = WishlistItemModel(session_id=session_id, product_id=product_id)
        self.db.add(item)
        try:
            self.db.commit()
        except IntegrityError:
            # someone else inserted it between our read and write
            self.db.rollback()
            winner = self.get_by_product(session_id, product_id)
            if winner is None:
                raise StoreError("Could not add wishlist item")
            return winner, False

        self.db.refresh(item)
        return item, True

    @store_errors
    def delete_item(self, session_id: str, item_id: str) -> bool:
        result = self.db.execute(
            delete(WishlistItemModel).where(
                WishlistItemModel.id == item_id,
                WishlistItemModel.session_id == session_id,
            )
        )
        self.db.commit()
        return result.rowcount > 0
