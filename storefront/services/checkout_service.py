# storefront/services/checkout_service.py
import uuid

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.types import utcnow
from storefront.domain.errors import FieldError, StateError, StoreError, ValidationError
from storefront.domain.money import format_money, line_total
from storefront.domain.schemas import CheckoutForm, OrderLine, Receipt, ReceiptLine
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import CartService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_FIELD_MESSAGES = {
    "customerName": "Name must be at least 2 characters",
    "customerEmail": "Please enter a valid email address",
}


def validate_checkout(customer_name: str, customer_email: str) -> CheckoutForm:
    """Return the normalized form, or raise ValidationError naming every bad field."""
    try:
        return CheckoutForm(customer_name=customer_name, customer_email=customer_email)
    except PydanticValidationError as e:
        details = []
        for err in e.errors():
            field = _field_name(err["loc"])
            if any(d.field == field for d in details):
                continue
            details.append(FieldError(field, _FIELD_MESSAGES.get(field, err["msg"])))
        raise ValidationError("Invalid customer data", details) from e


def _field_name(loc) -> str:
    name = str(loc[0]) if loc else ""
    return CheckoutForm.model_fields[name].alias if name in CheckoutForm.model_fields else name


def order_number(order_id: str) -> str:
    return order_id.split("-")[0].upper()


class CheckoutService:
    """
    Turns the session's cart into an order.

    1. validates customer data
    2. reads the cart (must not be empty) and computes the total
    3. writes the order with a by-value snapshot of the cart lines
    4. clears the cart

    Steps 3 and 4 commit together, so a failed write leaves the cart
    untouched and a failed clear leaves no order behind.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.cart = CartService(db)

    def checkout(self, session_id: str, customer_name: str, customer_email: str) -> Receipt:
        form = validate_checkout(customer_name, customer_email)

        lines = self.cart.list_with_products(session_id)
        if not lines:
            raise StateError("Cart is empty")

        total = self.cart.compute_total(lines)

        order_id = str(uuid.uuid4())
        created_at = utcnow()
        order = OrderModel(
            id=order_id,
            session_id=session_id,
            customer_name=form.customer_name,
            customer_email=form.customer_email,
            total=total,
            items=[
                OrderLine(
                    product_id=l.product.id,
                    product_name=l.product.name,
                    quantity=l.quantity,
                    price=l.product.price,
                )
                for l in lines
            ],
            created_at=created_at,
        )
        receipt_lines = [
            ReceiptLine(
                product_name=l.product.name,
                quantity=l.quantity,
                price=format_money(line_total(l.product.price, l.quantity)),
            )
            for l in lines
        ]

        try:
            self.repo.add_order(order)
            self.cart.clear(session_id, commit=False)
            self.repo.commit()
        except StoreError:
            self.repo.rollback()
            logger.error(f"Checkout of cart {session_id} failed, nothing was committed")
            raise

        logger.info(f"Order {order_id} placed from cart {session_id}, total {total}")

        return Receipt(
            id=order_id,
            order_number=order_number(order_id),
            customer_name=form.customer_name,
            customer_email=form.customer_email,
            total=total,
            items=receipt_lines,
            timestamp=created_at,
        )
