# app/services/notification_service.py
from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zamowieniach.
    Celery robi to asynchronicznie, checkout nie czeka na wysylke.
    """

    @staticmethod
    def send_order_notification(user_id: str, order_id: str):
        send_order_notification_task.delay(user_id, order_id)


@celery_app.task(name="app.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: str):
    """
    W prawdziwym systemie email/SMS/WhatsApp do klienta apteki.
    Na razie tylko loguje.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: order {order_id} placed, awaiting confirmation")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
