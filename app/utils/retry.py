# app/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests
import redis

from app.utils.settings import HTTP_RETRY_ATTEMPTS, REDIS_RETRY_ATTEMPTS


def _backoff_retry(exc_type, attempts: int, base: float, max_wait: float):
    # reraise=True: po ostatniej probie leci oryginalny wyjatek, nie RetryError
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=base, min=base, max=max_wait),
        retry=retry_if_exception_type(exc_type),
    )


def http_retry(attempts: int = HTTP_RETRY_ATTEMPTS):
    """Product-service: timeouty i bledy polaczenia, tez 5xx po raise_for_status."""
    return _backoff_retry(requests.RequestException, attempts, base=0.3, max_wait=3)


def redis_retry(attempts: int = REDIS_RETRY_ATTEMPTS):
    return _backoff_retry(redis.RedisError, attempts, base=0.2, max_wait=2)
