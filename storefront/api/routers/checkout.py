# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_session_id
from storefront.data.database import get_db
from storefront.domain.schemas import CheckoutIn, Receipt
from storefront.services.checkout_service import CheckoutService

router = APIRouter(prefix="/api/checkout", tags=["checkout"])


@router.post("", response_model=Receipt, status_code=201)
def checkout(
    payload: CheckoutIn,
    session_id: str = Depends(get_session_id),
    db: Session = Depends(get_db),
):
    """
    Places an order from the session's cart and empties the cart.
    """
    return CheckoutService(db).checkout(
        session_id,
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
    )
