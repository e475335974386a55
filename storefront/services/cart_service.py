# storefront/services/cart_service.py
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.domain.errors import FieldError, NotFoundError, ValidationError
from storefront.domain.money import format_money, line_total
from storefront.domain.schemas import MAX_QUANTITY
from storefront.repos.cart_repo import CartRepo
from storefront.services.catalog_service import CatalogService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CartLine:
    """A cart row together with the product it points at."""

    item: CartItemModel
    product: ProductModel

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def product_id(self) -> str:
        return self.item.product_id

    @property
    def quantity(self) -> int:
        return self.item.quantity


def _check_quantity(quantity: int) -> None:
    if quantity < 1:
        raise ValidationError(
            "Invalid quantity",
            [FieldError("quantity", "Quantity must be at least 1")],
        )
    if quantity > MAX_QUANTITY:
        raise ValidationError(
            "Invalid quantity",
            [FieldError("quantity", f"Quantity must be at most {MAX_QUANTITY}")],
        )


class CartService:
    """
    Cart of one shopper session.

    Every call takes the session id explicitly; there is at most one line
    per product in a session's cart, repeated adds increase its quantity.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.catalog = CatalogService(db)

    # query
    def list_items(self, session_id: str) -> List[CartItemModel]:
        return self.repo.get_cart_items(session_id)

    def list_with_products(self, session_id: str) -> List[CartLine]:
        rows = self.repo.get_cart_items_with_products(session_id)
        return [CartLine(item=item, product=product) for item, product in rows]

    @staticmethod
    def compute_total(lines: List[CartLine]) -> str:
        total = sum((line_total(l.product.price, l.quantity) for l in lines), Decimal("0"))
        return format_money(total)

    # commands
    def add(self, session_id: str, product_id: str, quantity: int = 1) -> CartItemModel:
        _check_quantity(quantity)
        self.catalog.get_by_id(product_id)

        item, created = self.repo.merge_quantity(session_id, product_id, quantity, MAX_QUANTITY)
        if item is None:
            raise ValidationError(
                "Invalid quantity",
                [FieldError("quantity", f"Cart line would exceed {MAX_QUANTITY} items")],
            )

        if created:
            logger.info(f"Added {quantity} x {product_id} to cart {session_id}")
        else:
            logger.info(
                f"Product {product_id} already in cart {session_id}, "
                f"quantity now {item.quantity}"
            )
        return item

    def update_quantity(self, session_id: str, item_id: str, quantity: int) -> CartItemModel:
        _check_quantity(quantity)

        item = self.repo.get_cart_item(session_id, item_id)
        if item is None:
            raise NotFoundError("Cart item not found")

        updated = self.repo.set_quantity(item, quantity)
        logger.info(f"Cart item {item_id} in cart {session_id} set to quantity {quantity}")
        return updated

    def remove(self, session_id: str, item_id: str) -> bool:
        deleted = self.repo.delete_cart_item(session_id, item_id)
        if deleted:
            logger.info(f"Removed cart item {item_id} from cart {session_id}")
        return deleted

    def clear(self, session_id: str, commit: bool = True) -> int:
        """Delete every line of the cart. With commit=False the caller owns the transaction."""
        removed = self.repo.delete_all(session_id, commit=commit)
        logger.info(f"Cleared {removed} lines from cart {session_id}")
        return removed
