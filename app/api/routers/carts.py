#app/api/routers/carts.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.api.deps import get_cart_service, http_error
from app.domain.errors import CartItemNotFound
from app.domain.schemas import AddToCartIn, CartOut, UpdateCartItemIn
from app.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
def get_cart(
    user_id: Optional[str] = Query(None, alias="userId"),
    svc: CartService = Depends(get_cart_service),
):
    if not user_id:
        return []
    return svc.get_cart(user_id)


@router.post("", response_model=CartOut)
def add_item(payload: AddToCartIn, svc: CartService = Depends(get_cart_service)):
    try:
        cart = svc.add_item(
            user_id=payload.user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
            selected_package=payload.selected_package,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CartOut(cart=cart)


@router.patch("/{item_id}", response_model=CartOut)
def update_item(
    item_id: str,
    payload: UpdateCartItemIn,
    user_id: str = Query(..., alias="userId"),
    svc: CartService = Depends(get_cart_service),
):
    try:
        cart = svc.update_item(user_id, item_id, payload.quantity)
    except CartItemNotFound as e:
        raise http_error(e)
    return CartOut(cart=cart)


@router.delete("/{item_id}", response_model=CartOut)
def remove_item(
    item_id: str,
    user_id: str = Query(..., alias="userId"),
    svc: CartService = Depends(get_cart_service),
):
    return CartOut(cart=svc.remove_item(user_id, item_id))


@router.delete("", status_code=204)
def clear_cart(
    user_id: str = Query(..., alias="userId"),
    svc: CartService = Depends(get_cart_service),
):
    svc.clear(user_id)
    return Response(status_code=204)
