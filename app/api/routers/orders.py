# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import (
    get_cart_service,
    get_lock_service,
    get_notification_service,
    http_error,
)
from app.data.database import get_db
from app.domain.errors import DomainError, OrderNotFound
from app.domain.schemas import OrderCreate, OrderOut
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_checkout_service(
    db: Session = Depends(get_db),
    cart_service: CartService = Depends(get_cart_service),
    lock_service: LockService = Depends(get_lock_service),
    notification_service: NotificationService = Depends(get_notification_service),
) -> CheckoutService:
    return CheckoutService(
        db=db,
        cart_service=cart_service,
        lock_service=lock_service,
        notification_service=notification_service,
    )


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    payload: OrderCreate,
    svc: CheckoutService = Depends(get_checkout_service),
):
    """
    Tworzy zamowienie ze snapshotu koszyka.
    Opcjonalnie placi czescia z portfela, potem czysci koszyk.
    """
    try:
        return svc.checkout(payload)
    except DomainError as e:
        raise http_error(e)


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: str = Query(..., alias="userId"),
    db: Session = Depends(get_db),
):
    return OrderService(db).list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, db: Session = Depends(get_db)):
    try:
        return OrderService(db).get_order(order_id)
    except OrderNotFound as e:
        raise http_error(e)
