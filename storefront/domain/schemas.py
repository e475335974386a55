# storefront/domain/schemas.py
from datetime import datetime
from typing import List

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# largest quantity a single cart line may hold
MAX_QUANTITY = 999


class CamelModel(BaseModel):
    """Base for everything that crosses the HTTP boundary (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------- products

class ProductOut(CamelModel):
    id: str
    name: str
    description: str
    price: str
    image: str
    category: str


# ---------------------------------------------------------------- cart

class AddToCartIn(CamelModel):
    """Body of POST /api/cart."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, strict=True, le=MAX_QUANTITY)


class UpdateQuantityIn(CamelModel):
    """Body of PATCH /api/cart/{id}."""

    quantity: int = Field(..., strict=True, le=MAX_QUANTITY)


class CartItemOut(CamelModel):
    id: str
    product_id: str
    quantity: int


class CartItemWithProductOut(CartItemOut):
    product: ProductOut


class CartOut(CamelModel):
    items: List[CartItemWithProductOut]
    total: str


# ---------------------------------------------------------------- wishlist

class AddToWishlistIn(CamelModel):
    """Body of POST /api/wishlist."""

    product_id: str = Field(..., min_length=1)


class WishlistItemOut(CamelModel):
    id: str
    product_id: str
    added_at: datetime


class WishlistItemWithProductOut(WishlistItemOut):
    product: ProductOut


class WishlistStatusOut(CamelModel):
    product_id: str
    in_wishlist: bool


# ---------------------------------------------------------------- checkout / orders

class CheckoutIn(CamelModel):
    """
    Body of POST /api/checkout.

    Only the shape is checked here; the field rules live in CheckoutForm so
    the service enforces them for every caller, not just HTTP.
    """

    customer_name: str = ""
    customer_email: str = ""


class CheckoutForm(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    customer_name: str = Field(..., min_length=2, max_length=200)
    customer_email: str

    @field_validator("customer_email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        # shape check only; the address is kept exactly as submitted
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError as e:
            raise ValueError(str(e)) from e
        return value


class OrderLine(CamelModel):
    """
    One cart line frozen at checkout time.

    `price` is the unit price of the product as it was when the order was
    placed, not the line total.
    """

    model_config = ConfigDict(frozen=True)

    product_id: str
    product_name: str
    quantity: int
    price: str


ORDER_LINES = TypeAdapter(List[OrderLine])


class OrderOut(CamelModel):
    id: str
    customer_name: str
    customer_email: str
    total: str
    items: List[OrderLine]
    created_at: datetime

    # clients JSON.parse() this field, so it stays a string on the wire
    @field_serializer("items")
    def _items_as_json(self, items: List[OrderLine]) -> str:
        return ORDER_LINES.dump_json(items, by_alias=True).decode()


class ReceiptLine(CamelModel):
    product_name: str
    quantity: int
    price: str  # line total


class Receipt(CamelModel):
    id: str
    order_number: str
    customer_name: str
    customer_email: str
    total: str
    items: List[ReceiptLine]
    timestamp: datetime


# ---------------------------------------------------------------- misc

class HealthOut(BaseModel):
    status: str
    database: str
