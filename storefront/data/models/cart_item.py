import uuid

from sqlalchemy import CheckConstraint, Column, Integer, String, UniqueConstraint

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    session_id = Column(String(64), nullable=False, index=True)
    # no FK: lines pointing at a missing product are skipped on read
    product_id = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="u_cart_session_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_quantity_positive"),
    )
