# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_session_id
from storefront.data.database import get_db
from storefront.domain.schemas import OrderOut
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("", response_model=List[OrderOut])
def list_orders(
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """Orders placed from this session, newest first."""
    return OrderService(db).list_orders(session_id)
