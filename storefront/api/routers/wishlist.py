# storefront/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_session_id
from storefront.data.database import get_db
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import (
    AddToWishlistIn,
    WishlistItemOut,
    WishlistItemWithProductOut,
    WishlistStatusOut,
)
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


def get_service(db: Session = Depends(get_db)) -> WishlistService:
    return WishlistService(db)


@router.get("", response_model=List[WishlistItemWithProductOut])
def list_wishlist(
    session_id: str = Depends(get_session_id),
    svc: WishlistService = Depends(get_service),
):
    return [WishlistItemWithProductOut.model_validate(e) for e in svc.list_with_products(session_id)]


@router.post("", response_model=WishlistItemOut, status_code=201)
def add_to_wishlist(
    payload: AddToWishlistIn,
    session_id: str = Depends(get_session_id),
    svc: WishlistService = Depends(get_service),
):
    return svc.add(session_id, payload.product_id)


@router.get("/contains/{product_id}", response_model=WishlistStatusOut)
def wishlist_contains(
    product_id: str,
    session_id: str = Depends(get_session_id),
    svc: WishlistService = Depends(get_service),
):
    return WishlistStatusOut(product_id=product_id, in_wishlist=svc.contains(session_id, product_id))


@router.delete("/{item_id}", status_code=204)
def remove_from_wishlist(
    item_id: str,
    session_id: str = Depends(get_session_id),
    svc: WishlistService = Depends(get_service),
):
    if not svc.remove(session_id, item_id):
        raise NotFoundError("Wishlist item not found")
    return Response(status_code=204)
