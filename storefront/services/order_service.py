# storefront/services/order_service.py
from typing import List

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.repos.order_repo import OrderRepo


class OrderService:
    """Order history (query side). Orders are written only by CheckoutService."""

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def list_orders(self, session_id: str) -> List[OrderModel]:
        return self.repo.list_orders(session_id)
