# app/api/deps.py
from fastapi import Depends, HTTPException

from app.domain.errors import DomainError
from app.services.cart_service import CartService
from app.services.cart_store import CartStore, cart_store
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.services.product_client import ProductClient

# jeden klient redisa na proces, pool polaczen jest w srodku
_lock_service: LockService | None = None


def get_cart_store() -> CartStore:
    return cart_store


def get_product_client() -> ProductClient:
    return ProductClient()


def get_lock_service() -> LockService:
    global _lock_service
    if _lock_service is None:
        _lock_service = LockService()
    return _lock_service


def get_notification_service() -> NotificationService:
    return NotificationService()


def get_cart_service(
    store: CartStore = Depends(get_cart_store),
    product_client: ProductClient = Depends(get_product_client),
) -> CartService:
    return CartService(store=store, product_client=product_client)


def http_error(e: DomainError) -> HTTPException:
    return HTTPException(
        status_code=e.status_code,
        detail={"code": e.code, "message": e.message},
    )
