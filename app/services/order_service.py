# app/services/order_service.py
from typing import List

from sqlalchemy.orm import Session

from app.domain.errors import OrderNotFound
from app.domain.schemas import OrderOut, OrderStatus
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Odczyt zamowien i zmiana statusu po stronie admina.
    Tworzenie zamowien jest w CheckoutService.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def list_orders(self, user_id: str) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.list_orders(user_id)]

    def get_order(self, order_id: str) -> OrderOut:
        order = self.repo.get_order(order_id)

        if not order:
            raise OrderNotFound("Order not found")

        return OrderOut.model_validate(order)

    def update_status(self, order_id: str, status: OrderStatus) -> OrderOut:
        order = self.repo.update_order_status(order_id, OrderStatus(status).value)

        if not order:
            raise OrderNotFound("Order not found")

        logger.info(f"Order {order_id} status changed to {order.status}")
        return OrderOut.model_validate(order)
