import uuid

from sqlalchemy import Column, String, UniqueConstraint

from storefront.data.database import Base
from storefront.data.types import UTCDateTime, utcnow


class WishlistItemModel(Base):
    __tablename__ = "wishlist"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    session_id = Column(String(64), nullable=False, index=True)
    product_id = Column(String, nullable=False)
    added_at = Column(UTCDateTime, nullable=False, default=utcnow, index=True)

    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="u_wishlist_session_product"),
    )
