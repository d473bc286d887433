# app/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests


def http_retry(attempts: int = 3):
    # attempts=1 -> jedno wywolanie, bez ponawiania
    return retry(
        reraise=True,
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
    )
