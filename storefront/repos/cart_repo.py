# storefront/repos/cart_repo.py
from typing import List, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.domain.errors import StoreError
from storefront.repos.base import BaseRepo, store_errors
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# one lost insert race is expected at most; the retry then hits the UPDATE
_MERGE_ATTEMPTS = 2


class CartRepo(BaseRepo):
    @store_errors
    def get_cart_items(self, session_id: str) -> List[CartItemModel]:
        stmt = select(CartItemModel).where(CartItemModel.session_id == session_id)
        return list(self.db.execute(stmt).scalars().all())

    @store_errors
    def get_cart_items_with_products(
        self, session_id: str
    ) -> List[Tuple[CartItemModel, ProductModel]]:
        # inner join: lines whose product is gone are left out
        stmt = (
            select(CartItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.session_id == session_id)
        )
        return [(item, product) for item, product in self.db.execute(stmt).all()]

    @store_errors
    def get_cart_item(self, session_id: str, item_id: str) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.id == item_id,
            CartItemModel.session_id == session_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    @store_errors
    def get_cart_item_by_product(self, session_id: str, product_id: str) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.session_id == session_id,
            CartItemModel.product_id == product_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    @store_errors
    def merge_quantity(
        self, session_id: str, product_id: str, quantity: int, max_quantity: int
    ) -> Tuple[CartItemModel | None, bool]:
        """
        Add `quantity` to the session's line for `product_id`, creating it if needed.

        The increment is a single UPDATE so concurrent adds never lose each
        other's quantity; the unique (session_id, product_id) constraint
        turns a concurrent first insert into a retry of the UPDATE.
        A line already holding more than `max_quantity - quantity` is left
        alone and (None, False) is returned; otherwise returns (item, created).
        """
        for _ in range(_MERGE_ATTEMPTS):
            result = self.db.execute(
                update(CartItemModel)
                .where(
                    CartItemModel.session_id == session_id,
                    CartItemModel.product_id == product_id,
                    CartItemModel.quantity <= max_quantity - quantity,
                )
                .values(quantity=CartItemModel.quantity + quantity)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount:
                self.db.commit()
                return self.get_cart_item_by_product(session_id, product_id), False

            if self.get_cart_item_by_product(session_id, product_id) is not None:
                self.db.rollback()
                return None, False

            item = CartItemModel(session_id=session_id, product_id=product_id, quantity=quantity)
            self.db.add(item)
            try:
                self.db.commit()
            except IntegrityError:
                logger.warning(f"Concurrent insert of {product_id} in cart {session_id}, retrying as update")
                self.db.rollback()
                continue
            self.db.refresh(item)
            return item, True

        raise StoreError("Could not merge cart line")

    @store_errors
    def set_quantity(self, item: CartItemModel, quantity: int) -> CartItemModel:
        item.quantity = quantity
        self.db.commit()
        self.db.refresh(item)
        return item

    @store_errors
    def delete_cart_item(self, session_id: str, item_id: str) -> bool:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.session_id == session_id,
            )
        )
        self.db.commit()
        return result.rowcount > 0

    @store_errors
    def delete_all(self, session_id: str, commit: bool = True) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.session_id == session_id)
        )
        if commit:
            self.db.commit()
        return result.rowcount
