# app/services/product_client.py
import requests

from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_URL, PRODUCT_SERVICE_TIMEOUT
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout or PRODUCT_SERVICE_TIMEOUT

    @http_retry()
    def fetch_product(self, product_id: str) -> dict | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        # 404 to nie blad sieci, nie retryujemy
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()
