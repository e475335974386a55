# storefront/repos/order_repo.py
from typing import List

from sqlalchemy import select

from storefront.data.models.order import OrderModel
from storefront.repos.base import BaseRepo, store_errors


class OrderRepo(BaseRepo):
    @store_errors
    def add_order(self, order: OrderModel) -> OrderModel:
        """Stage the order in the current transaction; the caller commits."""
        self.db.add(order)
        self.db.flush()
        return order

    @store_errors
    def list_orders(self, session_id: str) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.session_id == session_id)
            .order_by(OrderModel.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())
