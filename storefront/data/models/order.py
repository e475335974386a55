import uuid

from sqlalchemy import Column, String

from storefront.data.database import Base
from storefront.data.types import OrderLinesJSON, UTCDateTime, utcnow


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    session_id = Column(String(64), nullable=False, index=True)

    customer_name = Column(String, nullable=False)
    customer_email = Column(String, nullable=False)
    total = Column(String, nullable=False)
    items = Column(OrderLinesJSON, nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)
