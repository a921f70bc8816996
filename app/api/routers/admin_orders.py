# app/api/routers/admin_orders.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import http_error
from app.data.database import get_db
from app.domain.errors import OrderNotFound
from app.domain.schemas import OrderOut, OrderStatusUpdate
from app.services.order_service import OrderService

# autoryzacja admina jest przed tym serwisem (gateway), tu jej nie ma
router = APIRouter(prefix="/admin/orders", tags=["admin"])


@router.patch("/{order_id}/status", response_model=OrderOut)
def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
):
    try:
        return OrderService(db).update_status(order_id, payload.status)
    except OrderNotFound as e:
        raise http_error(e)
