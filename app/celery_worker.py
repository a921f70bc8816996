# app/celery_worker.py
from celery import Celery

from app.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND

celery_app = Celery(
    "pharmacy",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# taski trzeba zaimportowac explicite zeby worker je zarejestrowal
celery_app.conf.imports = (
    "app.services.notification_service",
)

celery_app.conf.timezone = "UTC"
