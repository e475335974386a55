# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_session_id
from storefront.data.database import get_db
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import (
    AddToCartIn,
    CartItemOut,
    CartItemWithProductOut,
    CartOut,
    UpdateQuantityIn,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    lines = svc.list_with_products(session_id)
    return CartOut(
        items=[CartItemWithProductOut.model_validate(line) for line in lines],
        total=svc.compute_total(lines),
    )


@router.post("", response_model=CartItemOut, status_code=201)
def add_item(
    payload: AddToCartIn,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    return svc.add(session_id, payload.product_id, payload.quantity)


@router.patch("/{item_id}", response_model=CartItemOut)
def update_item(
    item_id: str,
    payload: UpdateQuantityIn,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    return svc.update_quantity(session_id, item_id, payload.quantity)


@router.delete("/{item_id}", status_code=204)
def remove_item(
    item_id: str,
    session_id: str = Depends(get_session_id),
    svc: CartService = Depends(get_service),
):
    if not svc.remove(session_id, item_id):
        raise NotFoundError("Cart item not found")
    return Response(status_code=204)
